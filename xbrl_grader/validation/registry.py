# Path: xbrl_grader/validation/registry.py
"""
Validator Registry

Maps validator names to rules and dispatches snippets to them.

This module provides:
- Rule registration (duplicate names rejected)
- Freezing, after which the registry is read-only
- Dispatch with uniform outcome mapping:
    unknown name      -> UnknownValidator
    match timeout     -> failing ValidationResult (fails closed)
    unexpected error  -> InternalFault (logged with traceback)

Example:
    registry = default_registry()
    outcome = registry.dispatch('validateUnitRefAnswer', '<a unitRef="u1"/>')

    if outcome.status_code == 200 and outcome.is_correct:
        print("Passed")
"""

from functools import lru_cache
from typing import Optional, Union

from ..config_loader import ConfigLoader
from ..core.logger import get_input_logger
from ..models.error import MatchTimeoutError
from ..models.result import ValidationResult, UnknownValidator, InternalFault
from .base import Rule
from .catalog import build_catalog
from .constants import MSG_EVALUATION_TIMEOUT


Outcome = Union[ValidationResult, UnknownValidator, InternalFault]


class ValidatorRegistry:
    """
    Registry of named grading rules.

    Example:
        registry = ValidatorRegistry()
        registry.register('validateUnitRefAnswer', validate_unit_ref)
        registry.freeze()

        outcome = registry.dispatch('validateUnitRefAnswer', snippet)
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize registry.

        Args:
            config: Optional ConfigLoader instance passed to every rule
        """
        self.config = config if config else ConfigLoader()
        self.logger = get_input_logger('validator_registry')

        self._rules: dict[str, Rule] = {}
        self._frozen = False

    def register(self, name: str, rule: Rule) -> None:
        """
        Register a rule under a name.

        Args:
            name: Validator name used by callers
            rule: Callable (text, config=None) -> ValidationResult

        Raises:
            RuntimeError: If the registry is frozen
            ValueError: If the name is already registered
        """
        if self._frozen:
            raise RuntimeError(f"Registry is frozen, cannot register '{name}'")
        if name in self._rules:
            raise ValueError(f"Validator '{name}' is already registered")

        self._rules[name] = rule
        self.logger.debug(f"Registered validator: {name}")

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True
        self.logger.debug(f"Registry frozen with {len(self._rules)} validators")

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: object) -> Optional[Rule]:
        """Get a rule by name (None for unknown or non-string names)."""
        if not isinstance(name, str):
            return None
        return self._rules.get(name)

    def names(self) -> list[str]:
        """Registered names, sorted."""
        return sorted(self._rules)

    def dispatch(self, name: object, text: object) -> Outcome:
        """
        Run the named rule on a snippet.

        Never raises: every outcome is a value.

        Args:
            name: Validator name
            text: Snippet text

        Returns:
            ValidationResult, UnknownValidator or InternalFault
        """
        rule = self.get(name)
        if rule is None:
            self.logger.info(f"Unknown validator requested: {name!r}")
            return UnknownValidator(name)

        try:
            return rule(text, self.config)
        except MatchTimeoutError as e:
            self.logger.warning(f"Validator '{name}' timed out: {e}")
            return ValidationResult.malformed(MSG_EVALUATION_TIMEOUT)
        except Exception as e:
            self.logger.error(f"Validator '{name}' failed: {e}", exc_info=True)
            return InternalFault(name, f"{type(e).__name__}: {e}")

    def __contains__(self, name: object) -> bool:
        return self.get(name) is not None

    def __len__(self) -> int:
        return len(self._rules)


def build_default_registry(config: Optional[ConfigLoader] = None) -> ValidatorRegistry:
    """
    Build a frozen registry holding the full rule catalog.

    Args:
        config: Optional configuration

    Returns:
        Frozen ValidatorRegistry
    """
    registry = ValidatorRegistry(config)
    for name, rule in build_catalog().items():
        registry.register(name, rule)
    registry.freeze()
    return registry


@lru_cache(maxsize=1)
def default_registry() -> ValidatorRegistry:
    """Process-wide registry, built on first use."""
    return build_default_registry()


__all__ = [
    'Outcome',
    'ValidatorRegistry',
    'build_default_registry',
    'default_registry',
]
