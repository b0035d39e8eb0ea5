"""Book allocation: split pages among students to minimise the largest share."""

from __future__ import annotations

from collections.abc import Sequence


def can_allocate(pages: Sequence[int], students: int, max_pages: int) -> bool:
    """Tell whether the books, kept in order, fit among the students.

    Each student takes a contiguous run of books whose total stays within
    max_pages. A new student starts whenever the running total would exceed it.
    """
    needed = 1
    running = 0
    for count in pages:
        running += count
        if running > max_pages:
            needed += 1
            running = count
        if needed > students:
            return False
    return True


def min_max_pages(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible maximum number of pages one student reads.

    Every student gets at least one book, and books are handed out in order.
    Raises ValueError when there are no books, no students, or fewer books
    than students.
    """
    pages = list(pages)
    if not pages:
        raise ValueError("at least one book is required")
    if students < 1:
        raise ValueError(f"at least one student is required, got {students}")
    if len(pages) < students:
        raise ValueError(
            f"cannot give {students} students a book each from {len(pages)} books"
        )
    low, high = max(pages), sum(pages)
    best = high
    while low <= high:
        middle = (low + high) // 2
        if can_allocate(pages, students, middle):
            best = middle
            high = middle - 1
        else:
            low = middle + 1
    return best