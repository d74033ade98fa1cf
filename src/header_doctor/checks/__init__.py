"""Check plugin system for header-doctor.

This module provides the base infrastructure for header checks.
Each check evaluates one header family and returns a Verdict. Highlighting
is shared: checks only declare which substrings are red, yellow or green.
"""

from abc import ABC, abstractmethod
from typing import Any

from header_doctor.checks.highlight import highlight_segments_for, highlight_type_for
from header_doctor.model.headers import HttpHeaders
from header_doctor.model.highlight import HighlightSegment, HighlightType
from header_doctor.model.verdict import Verdict

# Per-pass scratch mapping shared between checks
CheckContext = dict[str, Any]


class BaseCheck(ABC):
    """Abstract base class for all header checks.

    Each check must implement:
    - name, column_name, missing_message, header_name
    - check(headers, context) -> Verdict

    check() must never raise for malformed or missing data; it degrades to
    a documented verdict instead.
    """

    red_patterns: tuple[str, ...] = ()
    yellow_patterns: tuple[str, ...] = ()
    green_patterns: tuple[str, ...] = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Human readable check name (e.g., 'Cache-Control')."""
        ...

    @property
    @abstractmethod
    def column_name(self) -> str:
        """Column heading used in result tables."""
        ...

    @property
    @abstractmethod
    def missing_message(self) -> str:
        """Message shown when the protection is not in place."""
        ...

    @property
    @abstractmethod
    def header_name(self) -> str:
        """Canonical header name this check owns, without the colon."""
        ...

    @abstractmethod
    def check(self, headers: HttpHeaders, context: CheckContext) -> Verdict:
        """Evaluate the full header set and return a verdict."""
        ...

    @property
    def affects_overall_status(self) -> bool:
        """Whether this verdict counts towards the aggregate status."""
        return True

    def matches_header_line(self, line: str) -> bool:
        """Case-insensitive test that ``line`` belongs to this header family."""
        if not line:
            return False
        return line.lower().startswith(self.header_name.lower() + ":")

    def get_highlight_type(self, line: str, verdict: Verdict | None) -> HighlightType:
        return highlight_type_for(line, verdict, self.matches_header_line)

    def get_highlight_segments(
        self, line: str, verdict: Verdict | None = None
    ) -> list[HighlightSegment]:
        # Segments depend on declared patterns only; the verdict colours the line as a whole.
        return highlight_segments_for(
            line,
            self.matches_header_line,
            red_patterns=self.red_patterns,
            yellow_patterns=self.yellow_patterns,
            green_patterns=self.green_patterns,
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name!r}>"


# Registry of all available checks
_check_registry: list[type[BaseCheck]] = []


def register_check(check_class: type[BaseCheck]) -> type[BaseCheck]:
    """Decorator to register a check class."""
    if check_class not in _check_registry:
        _check_registry.append(check_class)
    return check_class


def get_all_checks() -> list[type[BaseCheck]]:
    """Get all registered check classes."""
    return _check_registry.copy()


def load_builtin_checks() -> list[BaseCheck]:
    """Import the bundled checks and return one instance of every registered check."""
    import header_doctor.checks.cache_control  # noqa: F401
    import header_doctor.checks.content_type  # noqa: F401
    import header_doctor.checks.cookie  # noqa: F401
    import header_doctor.checks.hsts  # noqa: F401
    import header_doctor.checks.x_content_type_options  # noqa: F401

    return [check_class() for check_class in _check_registry]
