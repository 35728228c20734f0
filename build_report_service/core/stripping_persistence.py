"""
Persistence Layer: StrippingInfoPersistence

Saves and loads the stripping appendix of a build report to/from the
relational store. The store is written in its flattened form (ordered records
plus the legacy per-module size list) and restored through the same path the
JSON form uses, so both formats share the legacy-size precedence rules.

Each save replaces all rows of the report inside one transaction.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from build_report_service.core.database_session import get_sessionmaker
from build_report_service.core.errors import ReportNotFoundError
from build_report_service.core.models_v2 import (
    BuildReportRow,
    StrippingDependency,
    StrippingDependencyReason,
    StrippingModule,
)
from build_report_service.core.stripping.serialization import (
    SerializedDependency,
    SerializedStrippingInfo,
    flatten,
    restore,
)
from build_report_service.core.stripping.stripping_info import StrippingInfo

logger = logging.getLogger(__name__)


class StrippingInfoPersistence:
    """
    Service for persisting StrippingInfo appendices keyed by report id.
    """

    def __init__(self, session: Session | None = None):
        self._external_session = session
        self._session = session or get_sessionmaker()()

    # -----------------------------
    # Save
    # -----------------------------
    def save(self, report_id: str, info: StrippingInfo) -> None:
        """
        Flatten `info` and replace whatever was stored for `report_id`.
        """
        self.save_serialized(report_id, flatten(info))

    def save_serialized(self, report_id: str, serialized: SerializedStrippingInfo) -> None:
        try:
            existing = self._session.get(BuildReportRow, report_id)
            if existing:
                self._session.delete(existing)
                self._session.flush()
                logger.debug(f"Replacing stored stripping data for report {report_id}")

            row = BuildReportRow(report_id=report_id, total_size=serialized.total_size)
            for position, record in enumerate(serialized.serialized_dependencies):
                dependency = StrippingDependency(
                    position=position,
                    entity=record.key,
                    icon=record.icon,
                    size=record.size,
                )
                dependency.reasons = [
                    StrippingDependencyReason(position=i, reason=reason)
                    for i, reason in enumerate(record.value)
                ]
                row.dependencies.append(dependency)

            legacy_sizes = serialized.serialized_sizes
            for position, name in enumerate(serialized.modules):
                # NULL past the end of a short legacy list
                legacy_size = legacy_sizes[position] if position < len(legacy_sizes) else None
                row.modules.append(
                    StrippingModule(position=position, name=name, legacy_size=legacy_size)
                )

            self._session.add(row)
            self._session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error saving stripping data for report {report_id}: {e}")
            self._session.rollback()
            raise

        logger.info(
            f"Saved stripping data for report {report_id}: "
            f"{len(serialized.modules)} modules, {len(serialized.serialized_dependencies)} entities"
        )

    # -----------------------------
    # Load
    # -----------------------------
    def load_serialized(self, report_id: str) -> SerializedStrippingInfo:
        row = self._session.get(BuildReportRow, report_id)
        if row is None:
            raise ReportNotFoundError(report_id)

        serialized_sizes = []
        for module in row.modules:
            if module.legacy_size is None:
                break
            serialized_sizes.append(module.legacy_size)

        return SerializedStrippingInfo(
            serialized_dependencies=[
                SerializedDependency(
                    key=dep.entity,
                    value=[r.reason for r in dep.reasons],
                    icon=dep.icon,
                    size=dep.size,
                )
                for dep in row.dependencies
            ],
            modules=[m.name for m in row.modules],
            serialized_sizes=serialized_sizes,
            total_size=row.total_size,
        )

    def load(self, report_id: str) -> StrippingInfo:
        """
        Rebuild the stored StrippingInfo for `report_id`.
        """
        info = restore(self.load_serialized(report_id))
        logger.debug(f"Loaded stripping data for report {report_id}: {info!r}")
        return info

    def list_report_ids(self) -> list[str]:
        return list(
            self._session.scalars(select(BuildReportRow.report_id).order_by(BuildReportRow.created_at))
        )

    def close(self):
        """Close the session if created internally."""
        if not self._external_session:
            self._session.close()
