import pytest

from build_report_service.core.stripping.stripping_info import (
    REQUIRED_BY_SCRIPTS,
    SCRIPT_ICON,
    StrippingInfo,
)


@pytest.fixture
def info():
    return StrippingInfo()


def test_new_store_has_no_reasons(info):
    assert info.get_reasons_for_including("Physics Module") == frozenset()
    assert info.get_reasons_for_including(REQUIRED_BY_SCRIPTS) == frozenset()
    assert info.included_modules == ()


def test_required_by_scripts_is_seeded(info):
    assert info.get_icon(REQUIRED_BY_SCRIPTS) == SCRIPT_ICON
    assert REQUIRED_BY_SCRIPTS in list(info.entities())


def test_register_dependency_is_idempotent(info):
    info.register_dependency("Physics Module", "Rigidbody")
    info.register_dependency("Physics Module", "Rigidbody")
    assert info.get_reasons_for_including("Physics Module") == {"Rigidbody"}


def test_register_dependency_creates_reason_entry_with_icon(info):
    info.register_dependency("Physics Module", "Rigidbody")
    assert info.get_icon("Rigidbody") == "class/Rigidbody"
    assert "Rigidbody" in info.dependencies
    assert info.get_reasons_for_including("Rigidbody") == frozenset()


def test_register_dependency_keeps_explicit_icon(info):
    info.set_icon("Rigidbody", "custom/icon")
    info.register_dependency("Physics Module", "Rigidbody")
    assert info.get_icon("Rigidbody") == "custom/icon"


def test_add_module_appends_suffix_once(info):
    info.add_module("Physics")
    info.add_module("Physics")
    assert info.included_modules == ("Physics Module",)
    assert info.get_size("Physics Module") == 0
    assert info.get_icon("Physics Module") == "package/com.unity.modules.physics"


def test_add_module_without_suffix(info):
    info.add_module("Core", append_module_to_name=False)
    assert info.included_modules == ("Core",)
    assert info.get_icon("Core") == "package/com.unity.modules.core"


def test_add_module_keeps_insertion_order(info):
    for name in ("UI", "Audio", "Physics", "Audio"):
        info.add_module(name)
    assert info.included_modules == ("UI Module", "Audio Module", "Physics Module")


def test_readding_module_does_not_reset_size_or_icon(info):
    info.add_module("Physics")
    info.add_module_size("Physics Module", 2048)
    info.set_icon("Physics Module", "custom/physics")
    info.add_module("Physics")
    assert info.get_size("Physics Module") == 2048
    assert info.get_icon("Physics Module") == "custom/physics"


def test_add_module_size_ignored_for_unknown_module(info):
    info.add_module_size("Physics Module", 1024)
    assert info.get_size("Physics Module") == 0
    assert "Physics Module" not in info.sizes

    info.add_module("Physics")
    assert info.get_size("Physics Module") == 0

    info.add_module_size("Physics Module", 1024)
    assert info.get_size("Physics Module") == 1024


def test_set_icon_overwrites_and_registers_entity(info):
    info.set_icon("Terrain", "class/Terrain")
    info.set_icon("Terrain", "class/TerrainData")
    assert info.get_icon("Terrain") == "class/TerrainData"
    assert info.get_reasons_for_including("Terrain") == frozenset()
    assert "Terrain" in info.dependencies


def test_set_icon_keeps_existing_reasons(info):
    info.register_dependency("Rigidbody", REQUIRED_BY_SCRIPTS)
    info.set_icon("Rigidbody", "class/Rigidbody2")
    assert info.get_reasons_for_including("Rigidbody") == {REQUIRED_BY_SCRIPTS}


def test_lookups_are_one_hop(info):
    info.add_module("Physics")
    info.register_dependency("Physics Module", "Rigidbody")
    info.register_dependency("Rigidbody", REQUIRED_BY_SCRIPTS)

    assert info.included_modules == ("Physics Module",)
    assert info.get_reasons_for_including("Physics Module") == {"Rigidbody"}
    assert info.get_reasons_for_including("Rigidbody") == {REQUIRED_BY_SCRIPTS}


def test_scripts_icon_not_replaced_by_dependency(info):
    info.register_dependency("Rigidbody", REQUIRED_BY_SCRIPTS)
    assert info.get_icon(REQUIRED_BY_SCRIPTS) == SCRIPT_ICON


def test_returned_reasons_are_a_snapshot(info):
    info.register_dependency("Physics Module", "Rigidbody")
    reasons = info.get_reasons_for_including("Physics Module")
    info.register_dependency("Physics Module", "Collider")
    assert reasons == {"Rigidbody"}


def test_total_size_is_caller_maintained(info):
    info.add_module("Physics")
    info.add_module_size("Physics Module", 100)
    assert info.total_size == 0
    info.add_total_size(100)
    info.add_total_size(50)
    assert info.total_size == 150
