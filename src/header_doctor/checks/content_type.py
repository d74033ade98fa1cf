"""Content-Type charset check.

HTML served without an explicit charset lets the browser guess the encoding,
which opens the door to charset-sniffing XSS.
"""

from header_doctor.checks import BaseCheck, CheckContext, register_check
from header_doctor.model.headers import HttpHeaders
from header_doctor.model.verdict import Verdict


@register_check
class ContentTypeCheck(BaseCheck):
    """Checks that HTML responses declare a charset."""

    green_patterns = ("charset=",)
    yellow_patterns = ("text/html",)

    @property
    def name(self) -> str:
        return "Content-Type"

    @property
    def column_name(self) -> str:
        return "Content-Type"

    @property
    def missing_message(self) -> str:
        return "Content-Type header is missing charset for text/html"

    @property
    def header_name(self) -> str:
        return "Content-Type"

    def check(self, headers: HttpHeaders, context: CheckContext) -> Verdict:
        content_type = headers.get("Content-Type")
        if content_type is None or not content_type.strip():
            return Verdict.ok("No Content-Type", content_type or "")

        # Substring tests, not media-type parsing: "text/htmlx" counts as HTML
        lowered = content_type.lower()
        if "text/html" in lowered and "charset=" not in content_type:
            return Verdict.fail("No charset", content_type)
        return Verdict.ok(content_type, content_type)
