"""Exclusion package - Rules that suppress findings for known-acceptable requests."""

from header_doctor.exclusion.registry import ExclusionRuleRegistry
from header_doctor.exclusion.rule import ExclusionRule, ExclusionRuleType

__all__ = ["ExclusionRule", "ExclusionRuleRegistry", "ExclusionRuleType"]
