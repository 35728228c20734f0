# build_report_service/core/build_report.py
"""
BuildReport

A completed build's report object. Auxiliary data (appendices) hangs off it,
at most one per kind. The stripping attribution store is one such appendix.
"""

import logging
from typing import TypeVar
from uuid import uuid4

from build_report_service.core.stripping.stripping_info import StrippingInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BuildReport:
    """
    Owns the appendices attached to one build.
    """

    def __init__(self, report_id: str | None = None):
        self.report_id = report_id or str(uuid4())
        self._appendices: list[object] = []

    def add_appendix(self, appendix: object) -> None:
        if appendix is None:
            raise ValueError("appendix must not be None")
        self._appendices.append(appendix)

    def get_appendices(self, appendix_type: type[T]) -> list[T]:
        """
        Return attached appendices of the given type, in attachment order.
        """
        return [a for a in self._appendices if isinstance(a, appendix_type)]


def get_build_report_data(report: BuildReport) -> StrippingInfo:
    """
    Return the stripping appendix of `report`, creating and attaching it on
    first use.
    """
    if report is None:
        raise ValueError("report must not be None")

    existing = report.get_appendices(StrippingInfo)
    if existing:
        return existing[0]

    info = StrippingInfo()
    report.add_appendix(info)
    logger.debug(f"Attached StrippingInfo to build report {report.report_id}")
    return info
