from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import MONEY_QUANTUM


def to_money(value: Decimal) -> Decimal:
    return value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class PayrollResult:
    """Monthly payroll estimate. Amounts are Decimals rounded to cents."""

    base_salary: Decimal
    unjustified_absence_days: int
    deduction: Decimal
    net_salary: Decimal

    @classmethod
    def zero(cls) -> "PayrollResult":
        nothing = to_money(Decimal(0))
        return cls(base_salary=nothing, unjustified_absence_days=0, deduction=nothing, net_salary=nothing)

    def to_dict(self) -> dict:
        return {
            "base_salary": f"{self.base_salary:.2f}",
            "unjustified_absence_days": self.unjustified_absence_days,
            "deduction": f"{self.deduction:.2f}",
            "net_salary": f"{self.net_salary:.2f}",
        }
