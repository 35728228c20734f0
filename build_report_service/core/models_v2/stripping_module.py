# build_report_service/core/models_v2/stripping_module.py
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from build_report_service.core.models_v2.base import Base


class StrippingModule(Base):
    __tablename__ = "stripping_modules"

    id = Column(Integer, primary_key=True, autoincrement=True)
    report_id = Column(
        String(64), ForeignKey("build_reports.report_id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(Integer, nullable=False)
    name = Column(String, nullable=False)
    # serialized_sizes[position]; NULL when the legacy list is shorter than the module list
    legacy_size = Column(Integer, nullable=True)

    report = relationship("BuildReportRow", back_populates="modules")
