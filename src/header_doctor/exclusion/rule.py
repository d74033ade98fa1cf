"""Exclusion rules for suppressing findings on known-acceptable requests."""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import urlsplit


class ExclusionRuleType(Enum):
    """What part of the request a rule looks at."""

    HOST = "host"  # Host component, case-insensitive
    PATH = "path"  # Path component, optional trailing '*' wildcard
    ENDPOINT = "endpoint"  # "METHOD full-url", exact

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


def _new_rule_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class ExclusionRule:
    """Immutable exclusion predicate over an (HTTP method, URL) pair.

    Identity is the id alone: two rules with the same type and pattern but
    different ids are distinct. Updates replace the rule, never mutate it.

    Attributes:
        type: Which request component the pattern applies to.
        pattern: Host name, path (optionally ending in '*') or "METHOD url".
        id: Unique id, generated when not given.
    """

    type: ExclusionRuleType = field(compare=False)
    pattern: str = field(compare=False)
    id: str = field(default_factory=_new_rule_id)

    def __post_init__(self) -> None:
        if self.id is None or self.type is None or self.pattern is None:
            raise TypeError("ExclusionRule id, type and pattern must not be None")
        if not isinstance(self.type, ExclusionRuleType):
            object.__setattr__(self, "type", ExclusionRuleType(str(self.type).lower()))

    def matches(self, method: str, url: str) -> bool:
        """Check whether the request should be excluded by this rule."""
        if self.type is ExclusionRuleType.HOST:
            return self._matches_host(url)
        if self.type is ExclusionRuleType.PATH:
            return self._matches_path(url)
        if self.type is ExclusionRuleType.ENDPOINT:
            return self._matches_endpoint(method, url)
        raise ValueError(f"Unknown ExclusionRuleType: {self.type!r}")

    def _matches_host(self, url: str) -> bool:
        host = extract_host(url)
        return host is not None and host.lower() == self.pattern.lower()

    def _matches_path(self, url: str) -> bool:
        path = extract_path(url)
        if path is None:
            return False
        if self.pattern.endswith("*"):
            return path.startswith(self.pattern[:-1])
        return path == self.pattern

    def _matches_endpoint(self, method: str, url: str) -> bool:
        return f"{method} {url}" == self.pattern

    def __str__(self) -> str:
        return f"{self.type.display_name}: {self.pattern}"


def _split(url: str):
    """urlsplit with URI-like strictness; None when the URL is unusable."""
    if not isinstance(url, str) or any(ch.isspace() for ch in url):
        return None
    try:
        parts = urlsplit(url)
        # Accessing port validates the authority section
        parts.port
    except ValueError:
        return None
    return parts


def extract_host(url: str) -> str | None:
    """Host component of ``url`` or None when it has none or cannot be parsed."""
    parts = _split(url)
    if parts is None:
        return None
    return parts.hostname


def extract_path(url: str) -> str | None:
    """Path component of ``url``, "/" when empty, None when unparseable."""
    parts = _split(url)
    if parts is None:
        return None
    return parts.path or "/"
