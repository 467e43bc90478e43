from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator, compute_payroll
from .model import PayrollResult

__all__ = ["PayrollCalculator", "PayrollResult", "StandardPayrollCalculator", "compute_payroll"]
