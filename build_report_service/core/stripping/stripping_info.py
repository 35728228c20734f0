# build_report_service/core/stripping/stripping_info.py
"""
StrippingInfo

In-memory record of which native engine modules are still present in a build
and the reasons why they are still present.

Holds:
- ordered module list (display names, no duplicates)
- attribution graph: entity -> set of direct reasons for its inclusion
- per-entity byte sizes and display icons
- a total size counter maintained by the caller

The store only records what the build pipeline tells it. Lookups are one hop:
pass each returned reason back into get_reasons_for_including() to walk further.
"""

from typing import Iterator

REQUIRED_BY_SCRIPTS = "Required by Scripts"
MODULE_SUFFIX = " Module"
PACKAGE_PREFIX = "com.unity.modules."

SCRIPT_ICON = "class/MonoScript"
DEFAULT_ASSET_ICON = "class/DefaultAsset"


class StrippingInfo:
    """
    Attribution store for a single build report.
    """

    def __init__(self):
        self.modules: list[str] = []
        self.dependencies: dict[str, set[str]] = {}  # entity -> direct reasons
        self.sizes: dict[str, int] = {}
        self.icons: dict[str, str] = {}
        self.total_size: int = 0

        self.set_icon(REQUIRED_BY_SCRIPTS, SCRIPT_ICON)

    # ----------------------------
    # Query API
    # ----------------------------
    @property
    def included_modules(self) -> tuple[str, ...]:
        """
        Native engine modules included in the build, in insertion order.
        """
        return tuple(self.modules)

    def get_reasons_for_including(self, entity_name: str) -> frozenset[str]:
        """
        Return the modules, classes or other entities that directly caused
        `entity_name` to be included. Unknown entities yield an empty set.
        """
        return frozenset(self.dependencies.get(entity_name, ()))

    def get_size(self, entity_name: str) -> int:
        return self.sizes.get(entity_name, 0)

    def get_icon(self, entity_name: str) -> str | None:
        return self.icons.get(entity_name)

    def entities(self) -> Iterator[str]:
        """Yield every entity known to the graph, in insertion order."""
        yield from self.dependencies

    # ----------------------------
    # Mutation API
    # ----------------------------
    def register_dependency(self, entity: str, reason: str) -> None:
        """
        Record that `reason` is one cause of `entity` being included.
        """
        self.dependencies.setdefault(entity, set()).add(reason)
        if reason not in self.icons:
            self.set_icon(reason, f"class/{reason}")

    def add_module(self, module: str, append_module_to_name: bool = True) -> None:
        """
        Register a module. The display name gets MODULE_SUFFIX unless
        `append_module_to_name` is False. Re-adding is a no-op for the list
        and never resets a recorded size or icon.
        """
        module_name = self.module_name(module) if append_module_to_name else module
        package_name = f"{PACKAGE_PREFIX}{module.lower()}"

        if module_name not in self.modules:
            self.modules.append(module_name)
        self.sizes.setdefault(module_name, 0)

        # Fall back to the package icon for unknown modules
        if module_name not in self.icons:
            self.set_icon(module_name, f"package/{package_name}")

    def set_icon(self, entity: str, icon: str) -> None:
        self.icons[entity] = icon
        self.dependencies.setdefault(entity, set())

    def add_module_size(self, module: str, size: int) -> None:
        """
        Set the size of a registered module. Ignored for anything that is not
        in the module list.
        """
        if module in self.modules:
            self.sizes[module] = size

    def add_total_size(self, size: int) -> None:
        self.total_size += size

    # ----------------------------
    # Helpers
    # ----------------------------
    @staticmethod
    def module_name(module: str) -> str:
        return module + MODULE_SUFFIX

    def __repr__(self):
        return (
            f"<StrippingInfo(modules={len(self.modules)}, "
            f"entities={len(self.dependencies)}, total_size={self.total_size})>"
        )
