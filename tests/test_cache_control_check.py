"""Tests for the Cache-Control / Pragma check."""

import pytest

from header_doctor.checks.cache_control import CacheControlCheck
from header_doctor.model.highlight import HighlightType

SECURE = "private, no-store, no-cache, must-revalidate"


@pytest.fixture
def check():
    return CacheControlCheck()


def test_no_cache_control_no_pragma_ok(check, headers_with, context):
    result = check.check(headers_with(), context)
    assert result.is_ok
    assert result.display_value == "No Cache-Control or Pragma"


@pytest.mark.parametrize(
    "value",
    [
        "private",
        "no-store",
        "no-cache",
        "must-revalidate",
        "private, no-store",
        "public, max-age=3600",
        "max-age=86400",
        "privat, no-stor, no-cach, must-revalidat",
    ],
)
def test_incomplete_or_permissive_directives_warn(check, headers_with, context, value):
    assert check.check(headers_with("Cache-Control", value), context).is_warn


def test_all_directives_but_no_pragma_warn(check, headers_with, context):
    assert check.check(headers_with("Cache-Control", SECURE), context).is_warn


def test_only_pragma_warn(check, headers_with, context):
    assert check.check(headers_with("Pragma", "no-cache"), context).is_warn


def test_full_secure_config_ok(check, head, context):
    headers = head().add("Cache-Control", SECURE).add("Pragma", "no-cache").build()
    result = check.check(headers, context)
    assert result.is_ok
    assert result.raw_value == SECURE


def test_full_secure_config_with_extra_directives_ok(check, head, context):
    headers = (
        head()
        .add("Cache-Control", "private, no-store, no-cache, must-revalidate, max-age=0")
        .add("Pragma", "no-cache")
        .build()
    )
    assert check.check(headers, context).is_ok


def test_directives_are_case_sensitive(check, head, context):
    headers = (
        head()
        .add("Cache-Control", "PRIVATE, NO-STORE, NO-CACHE, MUST-REVALIDATE")
        .add("Pragma", "no-cache")
        .build()
    )
    assert check.check(headers, context).is_warn


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_cache_control_treated_as_absent(check, headers_with, context, value):
    assert check.check(headers_with("Cache-Control", value), context).is_ok


def test_matches_header_line(check):
    assert check.matches_header_line("cache-control: no-cache")
    assert not check.matches_header_line("pragma: no-cache")
    assert not check.matches_header_line("")


def test_does_not_affect_overall_status(check):
    assert check.affects_overall_status is False


def test_identity(check):
    assert check.name == "Cache-Control"
    assert check.column_name == "Cache-Control"
    assert check.missing_message == "Cache-Control is not configured for sensitive data protection"


def test_highlights_directives(check, headers_with, context):
    line = "Cache-Control: public, no-store"
    verdict = check.check(headers_with("Cache-Control", "public, no-store"), context)
    segments = check.get_highlight_segments(line, verdict)
    coloured = {line[s.start:s.end]: s.type for s in segments}
    assert coloured == {"public": HighlightType.YELLOW, "no-store": HighlightType.GREEN}
    assert check.get_highlight_type(line, verdict) is HighlightType.YELLOW
