from datetime import date

import pytest

from hr_admin.core.exceptions import NotFoundError, ValidationError


def test_review_is_dated_today(container, alice, reviews_repo):
    rid = container.review_service.add_review(
        employee_id=alice.employee_id, score="4", comment=" Solid work ", today=date(2024, 6, 30)
    )

    review = reviews_repo.list_all()[0]
    assert review.review_id == rid
    assert review.review_date == date(2024, 6, 30)
    assert review.score == 4
    assert review.comment == "Solid work"


def test_score_range_is_not_enforced(container, alice):
    container.review_service.add_review(employee_id=alice.employee_id, score=7, comment="")

    assert container.review_service.list_for_employee(alice.employee_id)[0].score == 7


def test_score_must_be_an_integer(container, alice):
    with pytest.raises(ValidationError):
        container.review_service.add_review(employee_id=alice.employee_id, score="great", comment="")


def test_unknown_employee(container):
    with pytest.raises(NotFoundError):
        container.review_service.add_review(employee_id=3, score=3, comment="")
