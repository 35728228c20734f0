import pytest

from build_report_service.core.build_report import BuildReport, get_build_report_data
from build_report_service.core.stripping.stripping_info import StrippingInfo


def test_get_build_report_data_creates_single_appendix():
    report = BuildReport()
    first = get_build_report_data(report)
    second = get_build_report_data(report)

    assert isinstance(first, StrippingInfo)
    assert first is second
    assert report.get_appendices(StrippingInfo) == [first]


def test_get_build_report_data_returns_existing_appendix():
    report = BuildReport("report-1")
    info = StrippingInfo()
    report.add_appendix("unrelated appendix")
    report.add_appendix(info)

    assert get_build_report_data(report) is info
    assert report.get_appendices(str) == ["unrelated appendix"]


def test_get_build_report_data_rejects_none():
    with pytest.raises(ValueError):
        get_build_report_data(None)


def test_add_appendix_rejects_none():
    with pytest.raises(ValueError):
        BuildReport().add_appendix(None)


def test_report_ids_are_generated():
    assert BuildReport().report_id != BuildReport().report_id
    assert BuildReport("fixed").report_id == "fixed"
