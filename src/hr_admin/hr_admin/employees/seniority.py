from __future__ import annotations

from datetime import date
from typing import Optional, Union

from ..common.datetime_utils import today_local
from ..core.constants import NOT_APPLICABLE


def years_of_service(hire_date: Optional[date], today: Optional[date] = None) -> Union[int, str]:
    """Whole years elapsed since `hire_date`, anniversary-aware.

    Returns NOT_APPLICABLE ("N/A") when the hire date is unknown.
    """

    if not hire_date:
        return NOT_APPLICABLE

    today = today or today_local()
    years = today.year - hire_date.year
    if (today.month, today.day) < (hire_date.month, hire_date.day):
        years -= 1
    return years
