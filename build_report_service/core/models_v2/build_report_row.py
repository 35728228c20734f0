# build_report_service/core/models_v2/build_report_row.py
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from build_report_service.core.models_v2.base import Base


def _utcnow():
    return datetime.now(timezone.utc)


class BuildReportRow(Base):
    __tablename__ = "build_reports"

    report_id = Column(String(64), primary_key=True)
    total_size = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    dependencies = relationship(
        "StrippingDependency",
        back_populates="report",
        order_by="StrippingDependency.position",
        cascade="all, delete-orphan",
    )
    modules = relationship(
        "StrippingModule",
        back_populates="report",
        order_by="StrippingModule.position",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<BuildReportRow(report_id={self.report_id}, total_size={self.total_size})>"
