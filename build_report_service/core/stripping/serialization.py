# build_report_service/core/stripping/serialization.py
"""
Flatten / restore for StrippingInfo.

The persisted form only holds scalars and ordered lists:
- one SerializedDependency record per graph entry (key, reasons, icon, size)
- the module list
- serialized_sizes: per-module sizes aligned with the module list (legacy)
- total_size

restore() applies serialized_sizes after the records, so for modules the
legacy sizes win over the record sizes.
"""

import logging

from pydantic import BaseModel, Field, ValidationError

from build_report_service.core.errors import CorruptStrippingDataError
from build_report_service.core.stripping.stripping_info import (
    DEFAULT_ASSET_ICON,
    StrippingInfo,
)

logger = logging.getLogger(__name__)


class SerializedDependency(BaseModel):
    key: str
    value: list[str] = Field(default_factory=list)
    icon: str = DEFAULT_ASSET_ICON
    size: int = 0


class SerializedStrippingInfo(BaseModel):
    serialized_dependencies: list[SerializedDependency] = Field(default_factory=list)
    modules: list[str] = Field(default_factory=list)
    # Kept for report consumers that still read the flat size list
    serialized_sizes: list[int] = Field(default_factory=list)
    total_size: int = 0


# ----------------------------
# Flatten
# ----------------------------
def flatten(info: StrippingInfo) -> SerializedStrippingInfo:
    """Snapshot the live store into ordered records."""
    records = []
    for key, reasons in info.dependencies.items():
        records.append(
            SerializedDependency(
                key=key,
                value=sorted(reasons),
                icon=info.icons.get(key, DEFAULT_ASSET_ICON),
                size=info.sizes.get(key, 0),
            )
        )

    serialized_sizes = [info.sizes.get(module, 0) for module in info.modules]

    return SerializedStrippingInfo(
        serialized_dependencies=records,
        modules=list(info.modules),
        serialized_sizes=serialized_sizes,
        total_size=info.total_size,
    )


# ----------------------------
# Restore
# ----------------------------
def restore(serialized: SerializedStrippingInfo) -> StrippingInfo:
    """
    Rebuild a StrippingInfo from its flattened form.

    Raises CorruptStrippingDataError when the legacy size list is longer than
    the module list, or a module name or record key repeats. Nothing is returned on failure,
    so callers never observe a partially restored store.
    """
    if len(serialized.serialized_sizes) > len(serialized.modules):
        raise CorruptStrippingDataError(
            f"serialized_sizes has {len(serialized.serialized_sizes)} entries "
            f"but only {len(serialized.modules)} modules are recorded"
        )
    if len(serialized.serialized_sizes) < len(serialized.modules):
        logger.warning(
            f"Legacy size list covers {len(serialized.serialized_sizes)} of "
            f"{len(serialized.modules)} modules; keeping record sizes for the rest"
        )
    seen_modules = set()
    for module in serialized.modules:
        if module in seen_modules:
            raise CorruptStrippingDataError(f"Duplicate module: {module}")
        seen_modules.add(module)

    info = StrippingInfo()
    # Records carry every icon, including the seeded scripts icon
    info.dependencies = {}
    info.icons = {}
    info.sizes = {}

    for record in serialized.serialized_dependencies:
        if record.key in info.dependencies:
            raise CorruptStrippingDataError(f"Duplicate dependency record: {record.key}")
        info.dependencies[record.key] = set(record.value)
        info.icons[record.key] = record.icon
        info.sizes[record.key] = record.size

    info.modules = list(serialized.modules)
    for module, size in zip(serialized.modules, serialized.serialized_sizes):
        info.sizes[module] = size

    info.total_size = serialized.total_size
    return info


# ----------------------------
# JSON
# ----------------------------
def dumps(info: StrippingInfo) -> str:
    return flatten(info).model_dump_json()


def loads(text: str) -> StrippingInfo:
    try:
        serialized = SerializedStrippingInfo.model_validate_json(text)
    except ValidationError as exc:
        raise CorruptStrippingDataError(f"Invalid stripping data: {exc}") from exc
    return restore(serialized)
