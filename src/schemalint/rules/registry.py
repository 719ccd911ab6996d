"""
Rules registry for schema lint rules.

This module provides:
- RuleDefinition: Dataclass describing a rule
- RulesRegistry: Central registry for rule implementations
- The default registry with the three built-in rules
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, Callable, Dict, List, Optional

from schemalint.models.schema import ObjectSchema
from schemalint.violations import SchemaViolation

from .boolean_naming import check_boolean_naming
from .redundant_default import check_redundant_name_default
from .sensitive import check_sensitive_fields

logger = logging.getLogger(__name__)

RuleCheck = Callable[[ObjectSchema, AbstractSet[str]], Optional[SchemaViolation]]


@dataclass(frozen=True)
class RuleDefinition:
    """
    Definition of a schema rule.

    Attributes:
        name: Unique rule identifier
        description: Human-readable description
        check: Function taking (schema, exceptions) and returning the first
            violation or None
        failure_summary: Text following "the <Entry kind> '<name>'" in the
            error raised when an entry fails this rule
        supports_exceptions: Whether per-entry exceptions may be declared
    """

    name: str
    description: str
    check: RuleCheck
    failure_summary: str
    supports_exceptions: bool = True


class RulesRegistry:
    """
    Central registry for schema rule definitions.

    Rules run in registration order.

    Usage:
        registry = RulesRegistry()
        registry.register(RuleDefinition(
            name="my_rule",
            description="Custom rule",
            check=my_check,
            failure_summary="breaks my rule",
        ))

        rule = registry.get("my_rule")
        violation = rule.check(schema, frozenset())
    """

    def __init__(self) -> None:
        self._rules: Dict[str, RuleDefinition] = {}

    def register(self, rule: RuleDefinition) -> None:
        """
        Register a rule definition.

        Args:
            rule: RuleDefinition to register

        Raises:
            ValueError: If rule name is already registered
        """
        if rule.name in self._rules:
            raise ValueError(f"Rule '{rule.name}' is already registered")
        self._rules[rule.name] = rule
        logger.debug(f"Registered rule: {rule.name}")

    def get(self, name: str) -> RuleDefinition:
        """
        Get a rule definition by name.

        Raises:
            KeyError: If rule is not registered
        """
        if name not in self._rules:
            available = ", ".join(sorted(self._rules.keys()))
            raise KeyError(f"Rule '{name}' not found. Available rules: {available}")
        return self._rules[name]

    def list_rules(self) -> List[str]:
        """Sorted list of rule names."""
        return sorted(self._rules.keys())

    def ordered(self) -> List[RuleDefinition]:
        """Rule definitions in registration order."""
        return list(self._rules.values())

    def has_rule(self, name: str) -> bool:
        """Check if a rule is registered."""
        return name in self._rules


# =============================================================================
# DEFAULT REGISTRY WITH BUILT-IN RULES
# =============================================================================


def create_default_registry() -> RulesRegistry:
    """
    Create a registry with the built-in rules, in the order they run.

    Returns:
        RulesRegistry with built-in rules
    """
    registry = RulesRegistry()

    registry.register(
        RuleDefinition(
            name="sensitive_fields",
            description="Secret-looking fields must be marked as sensitive",
            check=check_sensitive_fields,
            failure_summary="contains a sensitive field which isn't marked as sensitive",
            supports_exceptions=False,
        )
    )

    registry.register(
        RuleDefinition(
            name="boolean_naming",
            description="Fields ending in '_enabled' must be booleans",
            check=check_boolean_naming,
            failure_summary="contains an '_enabled' field which isn't defined as a boolean",
        )
    )

    registry.register(
        RuleDefinition(
            name="redundant_name_default",
            description="A 'name' field must not default to 'default'",
            check=check_redundant_name_default,
            failure_summary=(
                "contains a 'name' field with a default value of 'default' - "
                "it should be exposed as part of the parent it's located within"
            ),
        )
    )

    return registry


# Global default registry instance
_default_registry: Optional[RulesRegistry] = None


def get_default_registry() -> RulesRegistry:
    """
    Get the default rules registry (singleton).

    Returns:
        The default RulesRegistry with built-in rules
    """
    global _default_registry
    if _default_registry is None:
        _default_registry = create_default_registry()
    return _default_registry


__all__ = [
    "RuleCheck",
    "RuleDefinition",
    "RulesRegistry",
    "create_default_registry",
    "get_default_registry",
]
