"""
Domain-specific exception hierarchy for the payroll period application.
"""


class PayPeriodError(Exception):
    """Base class for all application-level errors."""


class ScenarioError(PayPeriodError):
    """Raised when a recorded pointer-event scenario cannot be read or parsed."""
