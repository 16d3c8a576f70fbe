"""16PF assessment scoring and insight engine."""

from pf16.models.assessment import Question, TestAttempt
from pf16.models.report import Report
from pf16.services.report_service import ReportService, generate_report

__version__ = "1.0.0"

__all__ = [
    "Question",
    "Report",
    "ReportService",
    "TestAttempt",
    "generate_report",
]
