"""Tests for the Set-Cookie Secure flag check."""

import pytest

from header_doctor.checks.cookie import CONTEXT_KEY, CookieCheck, has_secure_flag
from header_doctor.model.headers import HttpHeaders
from header_doctor.model.highlight import HighlightType


@pytest.fixture
def check():
    return CookieCheck()


def test_no_cookies_ok(check, headers_with, context):
    result = check.check(headers_with(), context)
    assert result.is_ok
    assert result.display_value == "No cookies"
    assert context[CONTEXT_KEY] == []


@pytest.mark.parametrize(
    "cookie",
    [
        "session=abc123; HttpOnly",
        "token=xyz; HttpOnly; Path=/",
        "name=value",
        # Secure as the very first token has no leading space
        "Secure; session=abc123",
        # "secure" inside a value without a space before it
        "data=this_is_secure_data",
    ],
)
def test_cookie_without_secure_flag_fails(check, headers_with, context, cookie):
    assert check.check(headers_with("Set-Cookie", cookie), context).is_fail


@pytest.mark.parametrize(
    "cookie",
    ["session=abc123; Secure; HttpOnly", "session=abc123; SECURE", "session=abc123; SeCuRe"],
)
def test_cookie_with_secure_flag_ok(check, headers_with, context, cookie):
    assert check.check(headers_with("Set-Cookie", cookie), context).is_ok


def test_one_insecure_cookie_fails_all(check, head, context):
    headers = (
        head()
        .add("Set-Cookie", "session=abc; Secure")
        .add("Set-Cookie", "session2=xyz")
        .build()
    )
    result = check.check(headers, context)
    assert result.is_fail
    assert result.display_value == "session2=xyz"


def test_all_secure_cookies_ok(check, head, context):
    headers = (
        head()
        .add("Set-Cookie", "cookie1=value1; Secure")
        .add("Set-Cookie", "cookie2=value2; Secure; HttpOnly")
        .build()
    )
    assert check.check(headers, context).is_ok


def test_cookies_stored_in_context_in_order(check, head, context):
    headers = (
        head()
        .add("Set-Cookie", "cookie1=value1; Secure")
        .add("Set-Cookie", "cookie2=value2")
        .build()
    )
    check.check(headers, context)
    assert context[CONTEXT_KEY] == ["cookie1=value1; Secure", "cookie2=value2"]


def test_long_cookie_display_truncated(check, headers_with, context):
    result = check.check(headers_with("Set-Cookie", "session=" + "a" * 100 + "; Secure"), context)
    assert result.is_ok
    assert result.display_value.endswith("...")
    assert len(result.display_value) == 103
    assert "; Secure" in result.raw_value


def test_has_secure_flag():
    assert has_secure_flag("set-cookie: session=abc; secure")
    assert not has_secure_flag("set-cookie: session=abc; httponly")
    assert not has_secure_flag("")
    # Known limitation: any " secure" substring counts
    assert has_secure_flag("data=a secure_value")


def test_matches_header_line(check):
    assert check.matches_header_line("set-cookie: session=abc")
    assert not check.matches_header_line("cookie: session=abc")
    assert not check.matches_header_line("")


def test_failing_cookie_line_is_red(check, headers_with, context):
    verdict = check.check(headers_with("Set-Cookie", "a=b"), context)
    assert check.get_highlight_type("Set-Cookie: a=b", verdict) is HighlightType.RED


def test_utf8_cookie_value_keeps_secure_flag(check, context):
    raw = "HTTP/1.1 200 OK\r\nSet-Cookie: name=ąÅ; Secure\r\n\r\n".encode()
    verdict = check.check(HttpHeaders.from_raw(raw), context)
    assert verdict.is_ok
