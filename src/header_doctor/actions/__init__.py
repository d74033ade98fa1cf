"""Actions package - Output side of header-doctor (reporters)."""
