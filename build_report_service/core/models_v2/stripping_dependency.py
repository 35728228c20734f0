# build_report_service/core/models_v2/stripping_dependency.py
"""
One flattened attribution record per entity, and its ordered reason rows.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from build_report_service.core.models_v2.base import Base


class StrippingDependency(Base):
    __tablename__ = "stripping_dependencies"
    __table_args__ = (
        UniqueConstraint("report_id", "entity", name="uq_stripping_dependencies_report_entity"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    report_id = Column(
        String(64), ForeignKey("build_reports.report_id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(Integer, nullable=False)
    entity = Column(String, nullable=False)
    icon = Column(String, nullable=False)
    size = Column(Integer, nullable=False, default=0)

    report = relationship("BuildReportRow", back_populates="dependencies")
    reasons = relationship(
        "StrippingDependencyReason",
        back_populates="dependency",
        order_by="StrippingDependencyReason.position",
        cascade="all, delete-orphan",
    )


class StrippingDependencyReason(Base):
    __tablename__ = "stripping_dependency_reasons"

    id = Column(Integer, primary_key=True, autoincrement=True)
    dependency_id = Column(
        Integer, ForeignKey("stripping_dependencies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(Integer, nullable=False)
    reason = Column(String, nullable=False)

    dependency = relationship("StrippingDependency", back_populates="reasons")
