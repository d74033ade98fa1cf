"""Verdict dataclass - Tri-state result of a single header check."""

from dataclasses import dataclass
from enum import Enum


class VerdictStatus(Enum):
    """Outcome of a check."""

    OK = "ok"
    WARN = "warn"  # Advisory, worth a look
    FAIL = "fail"  # Insecure configuration


@dataclass(frozen=True, init=False)
class Verdict:
    """Result of running one check against one response's headers.

    Attributes:
        status: OK, WARN or FAIL. Required.
        display_value: Short text shown to the operator. Defaults to the status name.
        raw_value: The header value that produced the verdict. Defaults to "".
    """

    status: VerdictStatus
    display_value: str
    raw_value: str

    def __init__(
        self,
        status: VerdictStatus,
        display_value: str | None = None,
        raw_value: str | None = None,
    ) -> None:
        if not isinstance(status, VerdictStatus):
            raise TypeError(f"Verdict status must be a VerdictStatus, got {status!r}")
        object.__setattr__(self, "status", status)
        object.__setattr__(
            self, "display_value", display_value if display_value is not None else status.name
        )
        object.__setattr__(self, "raw_value", raw_value if raw_value is not None else "")

    @classmethod
    def ok(cls, display_value: str | None = None, raw_value: str | None = None) -> "Verdict":
        return cls(VerdictStatus.OK, display_value, raw_value)

    @classmethod
    def warn(cls, display_value: str | None = None, raw_value: str | None = None) -> "Verdict":
        return cls(VerdictStatus.WARN, display_value, raw_value)

    @classmethod
    def fail(cls, display_value: str | None = None, raw_value: str | None = None) -> "Verdict":
        return cls(VerdictStatus.FAIL, display_value, raw_value)

    @property
    def is_ok(self) -> bool:
        return self.status is VerdictStatus.OK

    @property
    def is_warn(self) -> bool:
        return self.status is VerdictStatus.WARN

    @property
    def is_fail(self) -> bool:
        return self.status is VerdictStatus.FAIL

    @property
    def status_label(self) -> str:
        """Get label for the verdict status."""
        labels = {
            VerdictStatus.OK: "[OK]",
            VerdictStatus.WARN: "[WARN]",
            VerdictStatus.FAIL: "[FAIL]",
        }
        return labels[self.status]

    def __str__(self) -> str:
        return f"{self.status_label} {self.display_value}"
