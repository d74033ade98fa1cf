"""Configuration management for header-doctor exclusion rules.

Rules live in a YAML file so they survive restarts. Supported formats:
- exclusions:
  - id: 1f0c...
    type: path
    pattern: /api/*
- [ {type: host, pattern: example.com}, ... ]
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from header_doctor.exclusion.registry import ExclusionRuleRegistry
from header_doctor.exclusion.rule import ExclusionRule, ExclusionRuleType

logger = logging.getLogger(__name__)


class ExclusionRuleEntry(BaseModel):
    """One rule as written in the YAML file."""

    id: Optional[str] = Field(None, description="Rule id; generated when omitted")
    type: ExclusionRuleType = Field(..., description="host | path | endpoint")
    pattern: str = Field(..., min_length=1, description="Host, path or 'METHOD url'")

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value: Any) -> Any:
        # Hand-written files may use bare numbers as ids
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("type", mode="before")
    @classmethod
    def _lower_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def to_rule(self) -> ExclusionRule:
        if self.id:
            return ExclusionRule(type=self.type, pattern=self.pattern, id=self.id)
        return ExclusionRule(type=self.type, pattern=self.pattern)


def default_config_dir() -> Path:
    """Config directory, overridable with HEADER_DOCTOR_CONFIG."""
    env_config = os.getenv("HEADER_DOCTOR_CONFIG")
    if env_config:
        return Path(env_config).expanduser().resolve()
    return Path.home() / ".header-doctor"


def default_exclusions_path() -> Path:
    """Default exclusion rule file location."""
    return default_config_dir() / "exclusions.yaml"


def load_exclusion_rules(path: str | Path | None) -> list[ExclusionRule]:
    """Load exclusion rules from a YAML file.

    A missing or unreadable file yields no rules; invalid entries are skipped.
    """
    if not path:
        return []

    rules_file = Path(path).expanduser()
    if not rules_file.exists():
        return []

    try:
        raw = yaml.safe_load(rules_file.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not read exclusion rules from {rules_file}: {e}")
        return []

    entries: list[Any] = []
    if isinstance(raw, dict) and isinstance(raw.get("exclusions"), list):
        entries = raw["exclusions"]
    elif isinstance(raw, list):
        entries = raw

    rules: list[ExclusionRule] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        try:
            rules.append(ExclusionRuleEntry.model_validate(entry).to_rule())
        except ValidationError as e:
            logger.warning(f"Skipping invalid exclusion rule {entry!r}: {e.error_count()} error(s)")
    return rules


def save_exclusion_rules(path: str | Path, rules: list[ExclusionRule] | tuple[ExclusionRule, ...]) -> None:
    """Write rules to YAML with owner-only permissions."""
    rules_file = Path(path).expanduser()
    rules_file.parent.mkdir(parents=True, exist_ok=True)
    rules_file.touch(mode=0o600)
    data = {
        "exclusions": [
            {"id": rule.id, "type": rule.type.value, "pattern": rule.pattern}
            for rule in rules
        ]
    }
    with open(rules_file, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False)


class ExclusionRuleStore:
    """Binds a registry to a YAML file.

    load() fills the registry from disk; afterwards every registry mutation
    is written back through the change listener.
    """

    def __init__(self, registry: ExclusionRuleRegistry, path: str | Path | None = None) -> None:
        self.registry = registry
        self.path = Path(path).expanduser() if path else default_exclusions_path()
        self._attached = False

    def load(self) -> list[ExclusionRule]:
        """Populate the registry from disk and start autosaving."""
        rules = load_exclusion_rules(self.path)
        self.registry.replace_all(rules)
        self.attach()
        return rules

    def attach(self) -> None:
        if not self._attached:
            self.registry.add_listener(self._save)
            self._attached = True

    def detach(self) -> None:
        if self._attached:
            self.registry.remove_listener(self._save)
            self._attached = False

    def _save(self, rules: tuple[ExclusionRule, ...]) -> None:
        save_exclusion_rules(self.path, rules)
        logger.debug(f"Saved {len(rules)} exclusion rule(s) to {self.path}")
