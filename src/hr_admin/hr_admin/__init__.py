"""HR administration package.

Organized by feature modules (employees, attendance, reviews, leaves, payroll,
reports) with a thin Flask controller layer over service/repository layers.
"""
