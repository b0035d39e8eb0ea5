import pytest

from algodrills.pages import can_allocate, min_max_pages


def test_worked_example():
    assert min_max_pages([10, 20, 30, 40], 2) == 60


@pytest.mark.parametrize(
    "pages",
    [[10, 20, 30, 40], [12, 34, 67, 90], [5, 5, 5, 5, 5], [100], [1, 2, 3, 4, 5, 6]],
)
def test_single_student_reads_everything(pages):
    assert min_max_pages(pages, 1) == sum(pages)


@pytest.mark.parametrize(
    "pages",
    [[10, 20, 30, 40], [12, 34, 67, 90], [7, 1, 9], [3]],
)
def test_one_book_each_gives_largest_book(pages):
    assert min_max_pages(pages, len(pages)) == max(pages)


@pytest.mark.parametrize(
    "pages, students",
    [
        ([10, 20, 30, 40], 2),
        ([12, 34, 67, 90], 2),
        ([15, 17, 20], 2),
        ([1, 2, 3, 4, 5, 6, 7, 8, 9], 3),
        ([5, 5, 5, 5], 3),
    ],
)
def test_answer_is_tight(pages, students):
    answer = min_max_pages(pages, students)
    assert can_allocate(pages, students, answer)
    assert not can_allocate(pages, students, answer - 1)
    assert max(pages) <= answer <= sum(pages)


def test_can_allocate_threshold():
    pages = [12, 34, 67, 90]
    assert can_allocate(pages, 2, 113) is True
    assert can_allocate(pages, 2, 112) is False


@pytest.mark.parametrize("limit", range(90, 204))
def test_can_allocate_matches_threshold(limit):
    assert can_allocate([12, 34, 67, 90], 2, limit) == (limit >= 113)


def test_more_students_never_need_more_pages():
    pages = [3, 8, 2, 9, 4, 7, 1]
    answers = [min_max_pages(pages, k) for k in range(1, len(pages) + 1)]
    assert answers == sorted(answers, reverse=True)


def test_no_books_raises():
    with pytest.raises(ValueError):
        min_max_pages([], 1)


def test_too_many_students_raises():
    with pytest.raises(ValueError):
        min_max_pages([10, 20], 3)


def test_no_students_raises():
    with pytest.raises(ValueError):
        min_max_pages([10, 20], 0)