# build_report_service/core/models_v2/base.py
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
