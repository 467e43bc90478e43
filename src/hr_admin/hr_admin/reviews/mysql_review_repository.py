from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Review
from .repository import ReviewRepository


def _to_review(row: dict) -> Review:
    return Review(
        review_id=int(row["review_id"]),
        employee_id=int(row["employee_id"]),
        review_date=row["review_date"],
        score=int(row["score"]),
        comment=row.get("comment") or "",
    )


class MySQLReviewRepository(ReviewRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Review]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT review_id, employee_id, review_date, score, comment FROM reviews ORDER BY review_id")
            return [_to_review(r) for r in fetchall(cur)]

    def list_for_employee(self, employee_id: int) -> Sequence[Review]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT review_id, employee_id, review_date, score, comment
                FROM reviews
                WHERE employee_id=%s
                ORDER BY review_id
                """,
                (int(employee_id),),
            )
            return [_to_review(r) for r in fetchall(cur)]

    def create(self, *, employee_id: int, review_date: date, score: int, comment: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO reviews(employee_id, review_date, score, comment) VALUES(%s,%s,%s,%s)",
                (int(employee_id), review_date, int(score), comment),
            )
            return int(cur.lastrowid)
