"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

# 5% of the base salary per day of unjustified absence.
DEDUCTION_RATE = Decimal("0.05")

MONEY_QUANTUM = Decimal("0.01")

# Upper bound (exclusive) of the DECIMAL(12, 2) salary column.
MAX_SALARY = Decimal("10000000000")

# Seniority marker when no hire date is known.
NOT_APPLICABLE = "N/A"

# Report marker for employees without any attendance record.
UNREGISTERED = "unregistered"

DEFAULT_LIST_LIMIT = 200
