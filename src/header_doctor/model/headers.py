"""HttpHeaders - Parsed response header model handed to checks.

Parsing here is best-effort and line-based. It never raises on malformed input:
lines that do not look like ``Name: value`` are dropped.
"""

from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class HttpHeaders:
    """Response headers in arrival order.

    Attributes:
        lines: Case-preserved raw ``Name: value`` lines.
        status_line: The ``HTTP/x.y NNN Reason`` line, if one was supplied.
    """

    lines: list[str] = field(default_factory=list)
    status_line: str | None = None

    @classmethod
    def from_raw(cls, text: str | bytes) -> "HttpHeaders":
        """Build from a raw response head (CRLF or LF separated)."""
        if isinstance(text, bytes):
            text = text.decode("latin-1")

        status_line = None
        lines: list[str] = []
        for index, raw_line in enumerate(text.split("\n")):
            line = raw_line.rstrip("\r")
            if index == 0 and line.startswith("HTTP/"):
                status_line = line
                continue
            if not line.strip():
                # Blank line ends the header block
                if lines or status_line:
                    break
                continue
            if ":" not in line:
                continue
            lines.append(line)
        return cls(lines=lines, status_line=status_line)

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[str, str]], status_line: str | None = "HTTP/1.1 200 OK"
    ) -> "HttpHeaders":
        return cls(lines=[f"{name}: {value}" for name, value in pairs], status_line=status_line)

    def items(self) -> list[tuple[str, str]]:
        """Return ``(name, value)`` pairs with values stripped."""
        pairs = []
        for line in self.lines:
            name, _, value = line.partition(":")
            pairs.append((name.strip(), value.strip()))
        return pairs

    def get_all(self, name: str) -> list[str]:
        """All values for a header name, case-insensitive."""
        wanted = name.strip().lower()
        return [value for key, value in self.items() if key.lower() == wanted]

    def get(self, name: str) -> str | None:
        """First value for a header name, or None when absent."""
        values = self.get_all(name)
        return values[0] if values else None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and bool(self.get_all(name))

    def __len__(self) -> int:
        return len(self.lines)
