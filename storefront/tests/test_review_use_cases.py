from __future__ import annotations

from datetime import UTC, datetime, timedelta
from itertools import count

import pytest

from storefront.application.use_cases.reviews.list_reviews import ListReviewsUseCase
from storefront.application.use_cases.reviews.submit_review import SubmitReviewUseCase
from storefront.domain.reviews.exceptions import ReviewValidationError
from storefront.infrastructure.repositories.in_memory_review_repository import \
    InMemoryReviewRepository

START = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)


class SteppingClock:
    def __init__(self, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = START
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now += self.step
        return current


@pytest.fixture()
def repository() -> InMemoryReviewRepository:
    return InMemoryReviewRepository()


def _submit(use_case: SubmitReviewUseCase, product_id: str, comment: str) -> str:
    review = use_case.execute(
        {"productId": product_id, "userName": "Bob", "comment": comment, "rating": 4}
    )
    return review.comment


def test_submit_stores_review_with_generated_fields(repository: InMemoryReviewRepository) -> None:
    ids = count(1)
    use_case = SubmitReviewUseCase(
        reviews=repository,
        clock=lambda: START,
        id_factory=lambda: f"r{next(ids)}",
    )

    review = use_case.execute(
        {"productId": "1", "userName": " Alice ", "comment": " Lovely ", "rating": "5"}
    )

    assert review.id == "r1"
    assert review.created_at == START
    assert (review.product_id, review.user_name, review.comment, review.rating) == (
        "1",
        "Alice",
        "Lovely",
        5,
    )
    assert repository.list() == [review]


def test_default_ids_are_unique(repository: InMemoryReviewRepository) -> None:
    use_case = SubmitReviewUseCase(reviews=repository)
    for n in range(5):
        _submit(use_case, "1", f"comment {n}")

    ids = {review.id for review in repository.list()}
    assert len(ids) == 5


def test_rejected_submission_stores_nothing(repository: InMemoryReviewRepository) -> None:
    use_case = SubmitReviewUseCase(reviews=repository)

    with pytest.raises(ReviewValidationError):
        use_case.execute({"productId": "1", "userName": "Bob", "comment": "ok", "rating": 6})

    assert repository.count() == 0


def test_list_is_newest_first_and_filters_by_product(
    repository: InMemoryReviewRepository,
) -> None:
    use_case = SubmitReviewUseCase(reviews=repository, clock=SteppingClock())
    for product_id, comment in [("1", "a"), ("2", "b"), ("1", "c")]:
        _submit(use_case, product_id, comment)
    list_reviews = ListReviewsUseCase(reviews=repository)

    assert [r.comment for r in list_reviews.execute()] == ["c", "b", "a"]
    assert [r.comment for r in list_reviews.execute("1")] == ["c", "a"]
    assert list_reviews.execute("99") == []


def test_equal_timestamps_keep_newest_submission_first(
    repository: InMemoryReviewRepository,
) -> None:
    use_case = SubmitReviewUseCase(reviews=repository, clock=lambda: START)
    for comment in ("first", "second", "third"):
        _submit(use_case, "1", comment)

    assert [r.comment for r in repository.list()] == ["third", "second", "first"]


def test_empty_product_filter_lists_everything(repository: InMemoryReviewRepository) -> None:
    use_case = SubmitReviewUseCase(reviews=repository)
    _submit(use_case, "1", "a")
    _submit(use_case, "2", "b")

    assert len(ListReviewsUseCase(reviews=repository).execute("")) == 2


def test_listing_does_not_mutate_store(repository: InMemoryReviewRepository) -> None:
    use_case = SubmitReviewUseCase(reviews=repository, clock=SteppingClock())
    _submit(use_case, "1", "a")
    _submit(use_case, "1", "b")

    first = repository.list()
    first.clear()

    assert [r.comment for r in repository.list()] == ["b", "a"]
    assert repository.list() == repository.list()
    assert repository.count() == 2
