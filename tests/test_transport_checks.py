"""Tests for Strict-Transport-Security and X-Content-Type-Options checks."""

import pytest

from header_doctor.checks import get_all_checks, load_builtin_checks
from header_doctor.checks.hsts import HstsCheck
from header_doctor.checks.x_content_type_options import XContentTypeOptionsCheck
from header_doctor.model.highlight import HighlightType


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "fail"),
        ("", "fail"),
        ("includeSubDomains", "warn"),
        ("max-age=0", "warn"),
        ("max-age=31536000", "ok"),
        ('max-age="63072000"; includeSubDomains; preload', "ok"),
    ],
)
def test_hsts(headers_with, context, value, expected):
    headers = headers_with() if value is None else headers_with("Strict-Transport-Security", value)
    result = HstsCheck().check(headers, context)
    assert result.status.value == expected


def test_hsts_highlights_zero_max_age_red():
    check = HstsCheck()
    segments = check.get_highlight_segments("Strict-Transport-Security: max-age=0")
    assert [s.type for s in segments] == [HighlightType.RED]


@pytest.mark.parametrize(
    "value, ok",
    [(None, False), ("nosniff", True), (" NoSniff ", True), ("sniff", False), ("", False)],
)
def test_x_content_type_options(headers_with, context, value, ok):
    headers = headers_with() if value is None else headers_with("X-Content-Type-Options", value)
    result = XContentTypeOptionsCheck().check(headers, context)
    assert result.is_ok is ok
    if value is None:
        assert result.display_value == "Missing"


def test_builtin_checks_are_registered_once():
    first = load_builtin_checks()
    second = load_builtin_checks()
    names = [check.name for check in first]
    assert len(names) == len(set(names))
    assert len(first) == len(second) == len(get_all_checks())
    assert {"Cache-Control", "Content-Type", "Cookies"} <= set(names)
