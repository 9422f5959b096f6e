"""
Service layer helpers that turn selections into payroll reports.
"""

from .payroll_report import PayrollReportService

__all__ = ["PayrollReportService"]
