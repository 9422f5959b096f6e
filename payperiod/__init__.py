"""
payperiod - Payroll period selection within a locked month.
"""

__version__ = "0.1.0"
