"""Basic usage example for tailchain."""

from tailchain import DoublyLinkedList, SinglyLinkedList


def main() -> None:
    """Demonstrate both list variants."""
    print("=== Singly-linked list ===\n")

    numbers = SinglyLinkedList[int]()
    numbers.print()

    # Appends go straight to the cached tail
    numbers.append(2)
    numbers.append(3)
    numbers.prepend(1)
    numbers.print()

    numbers.insert(3, 4)
    print(f"Length: {len(numbers)}, last: {numbers.last()}")
    print(f"set(1, 20) replaced {numbers.set(1, 20)}")
    numbers.print()

    print(f"pop() -> {numbers.pop()}")
    print(f"pop_first() -> {numbers.pop_first()}")
    numbers.reverse()
    numbers.print()
    print()

    print("=== Doubly-linked list ===\n")

    words = DoublyLinkedList(["alpha", "beta", "gamma", "delta"])
    words.print()

    words.remove(1)
    words.print()

    # O(1) pop through the back link
    while words:
        print(f"  popped {words.pop()}")
    words.print()

    # Out-of-range requests are ignored
    print(f"get(5) on an empty list -> {words.get(5)}")


if __name__ == "__main__":
    main()
