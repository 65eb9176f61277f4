from report.renderer import ReportRenderer
from report.text import TextReportRenderer, format_check, format_duration, format_part

__all__ = [
    "ReportRenderer",
    "TextReportRenderer",
    "format_check",
    "format_duration",
    "format_part",
]
