# build_report_service/core/errors.py
"""
Exceptions raised by the stripping report persistence and restore paths.

Recording never raises: unknown identifiers are created on demand.
"""


class StrippingInfoError(Exception):
    """Base class for stripping report errors."""


class CorruptStrippingDataError(StrippingInfoError):
    """Persisted stripping data cannot be restored as-is."""


class ReportNotFoundError(StrippingInfoError):
    def __init__(self, report_id: str):
        super().__init__(f"Build report not found: {report_id}")
        self.report_id = report_id
