"""Thread-safe exclusion rule registry with change notification.

Rules are held in a tuple that is replaced wholesale on every mutation, so
any snapshot handed out (to callers or listeners) never changes afterwards,
and readers never need the lock. Writers notify listeners while still holding
a re-entrant lock, so listeners see snapshots in commit order and may call
back into the registry.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from header_doctor.exclusion.rule import ExclusionRule, ExclusionRuleType

logger = logging.getLogger(__name__)

RulesListener = Callable[[tuple[ExclusionRule, ...]], None]


class ExclusionRuleRegistry:
    """Concurrent store of exclusion rules.

    Provides:
    - CRUD by rule id
    - should_exclude(method, url): OR across all current rules
    - Listeners called synchronously with the full snapshot after each mutation

    Unknown ids passed to remove/update are silent no-ops.
    """

    def __init__(self, rules: list[ExclusionRule] | None = None) -> None:
        self._rules: tuple[ExclusionRule, ...] = tuple(rules or ())
        self._listeners: tuple[RulesListener, ...] = ()
        self._lock = threading.RLock()

    def add(self, rule: ExclusionRule) -> None:
        """Append a rule."""
        with self._lock:
            self._rules = self._rules + (rule,)
            self._notify(self._rules)

    def remove(self, rule_id: str) -> None:
        """Remove every rule with this id."""
        with self._lock:
            self._rules = tuple(r for r in self._rules if r.id != rule_id)
            self._notify(self._rules)

    def update(self, rule_id: str, new_type: ExclusionRuleType, new_pattern: str) -> None:
        """Replace the rule with this id in place, keeping its position."""
        with self._lock:
            for index, rule in enumerate(self._rules):
                if rule.id == rule_id:
                    replacement = ExclusionRule(type=new_type, pattern=new_pattern, id=rule_id)
                    self._rules = self._rules[:index] + (replacement,) + self._rules[index + 1:]
                    self._notify(self._rules)
                    return

    def clear(self) -> None:
        """Remove all rules."""
        with self._lock:
            self._rules = ()
            self._notify(self._rules)

    def replace_all(self, rules: list[ExclusionRule]) -> None:
        """Swap in a whole rule set at once (e.g. after loading from disk)."""
        with self._lock:
            self._rules = tuple(rules)
            self._notify(self._rules)

    def get(self, rule_id: str) -> ExclusionRule | None:
        """Get rule by id."""
        return next((r for r in self._rules if r.id == rule_id), None)

    def list(self) -> tuple[ExclusionRule, ...]:
        """Immutable snapshot of the current rules, in insertion order."""
        return self._rules

    def should_exclude(self, method: str, url: str) -> bool:
        """True when any current rule matches the request."""
        rules = self._rules
        return any(rule.matches(method, url) for rule in rules)

    def add_listener(self, listener: RulesListener) -> None:
        with self._lock:
            self._listeners = self._listeners + (listener,)

    def remove_listener(self, listener: RulesListener) -> None:
        with self._lock:
            listeners = list(self._listeners)
            if listener in listeners:
                listeners.remove(listener)
            self._listeners = tuple(listeners)

    def __len__(self) -> int:
        return len(self._rules)

    def _notify(self, snapshot: tuple[ExclusionRule, ...]) -> None:
        for listener in self._listeners:
            try:
                listener(snapshot)
            except Exception as e:
                # Log error but keep notifying; registry state is already committed
                logger.warning(f"Exclusion rule listener {listener!r} failed: {e}")
