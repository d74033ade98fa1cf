"""Set-Cookie Secure flag check.

Every cookie set by the response must carry the Secure attribute, or it can
leak over plaintext HTTP.
"""

from header_doctor.checks import BaseCheck, CheckContext, register_check
from header_doctor.model.headers import HttpHeaders
from header_doctor.model.verdict import Verdict

# Context key under which every raw Set-Cookie value of the pass is stored
CONTEXT_KEY = "set_cookies"

MAX_DISPLAY_LENGTH = 100


def has_secure_flag(cookie: str) -> bool:
    """True when the lower-cased cookie text contains " secure".

    Loose on purpose: "Secure" as the very first token is missed, and
    " secure" inside an unrelated value is accepted.
    """
    return " secure" in cookie.lower()


def truncate(value: str, limit: int = MAX_DISPLAY_LENGTH) -> str:
    if len(value) <= limit:
        return value
    return value[:limit] + "..."


@register_check
class CookieCheck(BaseCheck):
    """Checks that all cookies are marked Secure."""

    green_patterns = ("secure",)

    @property
    def name(self) -> str:
        return "Cookies"

    @property
    def column_name(self) -> str:
        return "Cookies"

    @property
    def missing_message(self) -> str:
        return "Cookies are set without the Secure flag"

    @property
    def header_name(self) -> str:
        return "Set-Cookie"

    def check(self, headers: HttpHeaders, context: CheckContext) -> Verdict:
        cookies = headers.get_all("Set-Cookie")
        context[CONTEXT_KEY] = list(cookies)

        if not cookies:
            return Verdict.ok("No cookies", "")

        raw_value = "\n".join(cookies)
        insecure = [cookie for cookie in cookies if not has_secure_flag(cookie)]
        if insecure:
            return Verdict.fail(truncate(insecure[0]), raw_value)
        return Verdict.ok(truncate(" | ".join(cookies)), raw_value)
