"""Model package - Core data structures for header-doctor."""

from header_doctor.model.headers import HttpHeaders
from header_doctor.model.highlight import HighlightSegment, HighlightType
from header_doctor.model.verdict import Verdict, VerdictStatus

__all__ = [
    "HighlightSegment",
    "HighlightType",
    "HttpHeaders",
    "Verdict",
    "VerdictStatus",
]
