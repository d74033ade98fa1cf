"""X-Content-Type-Options check."""

from header_doctor.checks import BaseCheck, CheckContext, register_check
from header_doctor.model.headers import HttpHeaders
from header_doctor.model.verdict import Verdict


@register_check
class XContentTypeOptionsCheck(BaseCheck):
    """Checks that MIME sniffing is disabled with 'nosniff'."""

    green_patterns = ("nosniff",)

    @property
    def name(self) -> str:
        return "X-Content-Type-Options"

    @property
    def column_name(self) -> str:
        return "XCTO"

    @property
    def missing_message(self) -> str:
        return "X-Content-Type-Options is not set to nosniff"

    @property
    def header_name(self) -> str:
        return "X-Content-Type-Options"

    def check(self, headers: HttpHeaders, context: CheckContext) -> Verdict:
        value = headers.get("X-Content-Type-Options")
        if value is None:
            return Verdict.fail("Missing", "")
        if value.strip().lower() == "nosniff":
            return Verdict.ok(value, value)
        return Verdict.fail(value or "Empty", value)
