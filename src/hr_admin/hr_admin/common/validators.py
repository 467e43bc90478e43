from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from ..core.constants import MAX_SALARY, MONEY_QUANTUM
from ..core.exceptions import ValidationError
from .datetime_utils import parse_optional_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_salary(value: Any, field_name: str = "salary") -> Optional[Decimal]:
    """Blank means "no salary on file"; anything else must be a non-negative decimal."""

    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"{field_name} must be a number")
    if not amount.is_finite() or amount < 0:
        raise ValidationError(f"{field_name} must be a non-negative number")
    if amount >= MAX_SALARY:
        raise ValidationError(f"{field_name} must be below {MAX_SALARY}")
    # stored and displayed in cents, rounded the same way as payroll amounts
    amount = amount.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)
    if amount >= MAX_SALARY:
        raise ValidationError(f"{field_name} must be below {MAX_SALARY}")
    return amount


def optional_date(value: Any, field_name: str) -> Optional[date]:
    if isinstance(value, date):
        return value
    try:
        return parse_optional_date(value)
    except (AttributeError, TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def require_date(value: Any, field_name: str) -> date:
    parsed = optional_date(value, field_name)
    if parsed is None:
        raise ValidationError(f"{field_name} is required")
    return parsed


def require_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
