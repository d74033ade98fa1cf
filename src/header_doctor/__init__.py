"""header-doctor: security verdicts for HTTP response headers."""

__version__ = "0.3.0"
