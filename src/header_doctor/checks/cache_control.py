"""Cache-Control / Pragma check.

A response carrying sensitive data should forbid caching by clients and
intermediaries. Advisory only: it does not know whether the endpoint is
sensitive, so it never changes the overall status.
"""

from header_doctor.checks import BaseCheck, CheckContext, register_check
from header_doctor.model.headers import HttpHeaders
from header_doctor.model.verdict import Verdict

REQUIRED_DIRECTIVES = ("private", "no-store", "no-cache", "must-revalidate")


@register_check
class CacheControlCheck(BaseCheck):
    """Checks for a complete no-cache configuration."""

    green_patterns = REQUIRED_DIRECTIVES
    yellow_patterns = ("public", "max-age")

    @property
    def name(self) -> str:
        return "Cache-Control"

    @property
    def column_name(self) -> str:
        return "Cache-Control"

    @property
    def missing_message(self) -> str:
        return "Cache-Control is not configured for sensitive data protection"

    @property
    def header_name(self) -> str:
        return "Cache-Control"

    @property
    def affects_overall_status(self) -> bool:
        return False

    def check(self, headers: HttpHeaders, context: CheckContext) -> Verdict:
        cache_control = (headers.get("Cache-Control") or "").strip()
        pragma = headers.get("Pragma")

        if not cache_control and pragma is None:
            return Verdict.ok("No Cache-Control or Pragma", "")

        if not cache_control:
            return Verdict.warn(f"Pragma: {pragma} without Cache-Control", "")

        # Directive names are matched case-sensitively, as sent by the server
        has_directives = all(d in cache_control for d in REQUIRED_DIRECTIVES)
        has_pragma = pragma is not None and "no-cache" in pragma.lower()

        if has_directives and has_pragma:
            return Verdict.ok(cache_control, cache_control)
        if has_directives:
            return Verdict.warn(f"{cache_control} (no Pragma: no-cache)", cache_control)
        return Verdict.warn(cache_control, cache_control)
