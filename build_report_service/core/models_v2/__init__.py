# build_report_service/core/models_v2/__init__.py
from build_report_service.core.models_v2.base import Base
from build_report_service.core.models_v2.build_report_row import BuildReportRow
from build_report_service.core.models_v2.stripping_dependency import (
    StrippingDependency,
    StrippingDependencyReason,
)
from build_report_service.core.models_v2.stripping_module import StrippingModule

__all__ = [
    "Base",
    "BuildReportRow",
    "StrippingDependency",
    "StrippingDependencyReason",
    "StrippingModule",
]
