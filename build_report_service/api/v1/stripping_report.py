"""
API Endpoints for Build Report Stripping Data

Provides:
- PUT /v1/build-reports/{report_id}/stripping: store a flattened StrippingInfo
- GET /v1/build-reports/{report_id}/stripping: flattened StrippingInfo
- GET /v1/build-reports/{report_id}/stripping/modules: included modules
- GET /v1/build-reports/{report_id}/stripping/reasons?entity=: direct reasons
- GET /v1/build-reports/{report_id}/stripping/chain?entity=: reason walk

The build pipeline uploads what it recorded; reporting tools only read.
"""

import logging
from typing import Iterator

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from build_report_service.core.database_session import get_sessionmaker
from build_report_service.core.errors import CorruptStrippingDataError, ReportNotFoundError
from build_report_service.core.stripping.reason_walker import walk_reasons
from build_report_service.core.stripping.serialization import SerializedStrippingInfo, restore
from build_report_service.core.stripping.stripping_info import StrippingInfo
from build_report_service.core.stripping_persistence import StrippingInfoPersistence

router = APIRouter(prefix="/v1/build-reports", tags=["stripping_report"])
logger = logging.getLogger(__name__)


# -----------------------------
# Session dependency
# -----------------------------
def get_session() -> Iterator[Session]:
    session = get_sessionmaker()()
    try:
        yield session
    finally:
        session.close()


# -----------------------------
# Response Models
# -----------------------------
class ModuleEntry(BaseModel):
    name: str
    size: int
    icon: str | None = None


class ModulesResponse(BaseModel):
    report_id: str
    total_size: int
    modules: list[ModuleEntry]


class ReasonsResponse(BaseModel):
    report_id: str
    entity: str
    icon: str | None = None
    size: int
    reasons: list[str]


class ReasonStepEntry(BaseModel):
    entity: str
    reason: str
    depth: int


class ChainResponse(BaseModel):
    report_id: str
    entity: str
    steps: list[ReasonStepEntry]


def _load(session: Session, report_id: str) -> StrippingInfo:
    try:
        return StrippingInfoPersistence(session=session).load(report_id)
    except ReportNotFoundError:
        raise HTTPException(status_code=404, detail="Build report not found")
    except CorruptStrippingDataError as exc:
        logger.error(f"Stored stripping data for {report_id} is corrupt: {exc}")
        raise HTTPException(status_code=500, detail="Stored stripping data is corrupt")


# -----------------------------
# PUT /v1/build-reports/{report_id}/stripping
# -----------------------------
@router.put("/{report_id}/stripping", status_code=status.HTTP_204_NO_CONTENT)
def put_stripping_info(
    report_id: str,
    payload: SerializedStrippingInfo,
    session: Session = Depends(get_session),
) -> None:
    try:
        restore(payload)
    except CorruptStrippingDataError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    StrippingInfoPersistence(session=session).save_serialized(report_id, payload)


# -----------------------------
# GET /v1/build-reports/{report_id}/stripping
# -----------------------------
@router.get("/{report_id}/stripping", response_model=SerializedStrippingInfo)
def get_stripping_info(report_id: str, session: Session = Depends(get_session)) -> SerializedStrippingInfo:
    try:
        return StrippingInfoPersistence(session=session).load_serialized(report_id)
    except ReportNotFoundError:
        raise HTTPException(status_code=404, detail="Build report not found")


# -----------------------------
# GET /v1/build-reports/{report_id}/stripping/modules
# -----------------------------
@router.get("/{report_id}/stripping/modules", response_model=ModulesResponse)
def get_included_modules(report_id: str, session: Session = Depends(get_session)) -> ModulesResponse:
    info = _load(session, report_id)
    return ModulesResponse(
        report_id=report_id,
        total_size=info.total_size,
        modules=[
            ModuleEntry(name=name, size=info.get_size(name), icon=info.get_icon(name))
            for name in info.included_modules
        ],
    )


# -----------------------------
# GET /v1/build-reports/{report_id}/stripping/reasons
# -----------------------------
@router.get("/{report_id}/stripping/reasons", response_model=ReasonsResponse)
def get_reasons(
    report_id: str,
    entity: str = Query(...),
    session: Session = Depends(get_session),
) -> ReasonsResponse:
    info = _load(session, report_id)
    return ReasonsResponse(
        report_id=report_id,
        entity=entity,
        icon=info.get_icon(entity),
        size=info.get_size(entity),
        reasons=sorted(info.get_reasons_for_including(entity)),
    )


# -----------------------------
# GET /v1/build-reports/{report_id}/stripping/chain
# -----------------------------
@router.get("/{report_id}/stripping/chain", response_model=ChainResponse)
def get_reason_chain(
    report_id: str,
    entity: str = Query(...),
    max_depth: int | None = Query(default=None, ge=1),
    session: Session = Depends(get_session),
) -> ChainResponse:
    info = _load(session, report_id)
    steps = walk_reasons(info, entity, max_depth=max_depth)
    return ChainResponse(
        report_id=report_id,
        entity=entity,
        steps=[ReasonStepEntry(entity=s.entity, reason=s.reason, depth=s.depth) for s in steps],
    )
