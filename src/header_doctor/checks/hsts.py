"""Strict-Transport-Security check."""

import re

from header_doctor.checks import BaseCheck, CheckContext, register_check
from header_doctor.model.headers import HttpHeaders
from header_doctor.model.verdict import Verdict

_MAX_AGE_RE = re.compile(r"max-age\s*=\s*\"?(\d+)", re.IGNORECASE)


@register_check
class HstsCheck(BaseCheck):
    """Checks that HSTS is enabled with a non-zero max-age."""

    red_patterns = ("max-age=0",)
    green_patterns = ("includesubdomains", "preload")

    @property
    def name(self) -> str:
        return "Strict-Transport-Security"

    @property
    def column_name(self) -> str:
        return "HSTS"

    @property
    def missing_message(self) -> str:
        return "Strict-Transport-Security is not set"

    @property
    def header_name(self) -> str:
        return "Strict-Transport-Security"

    def check(self, headers: HttpHeaders, context: CheckContext) -> Verdict:
        value = headers.get("Strict-Transport-Security")
        if value is None or not value.strip():
            return Verdict.fail("Missing", value or "")

        match = _MAX_AGE_RE.search(value)
        if not match:
            return Verdict.warn("No max-age", value)
        if int(match.group(1)) == 0:
            return Verdict.warn("max-age=0 disables HSTS", value)
        return Verdict.ok(value, value)
