"""Validation utilities for Swiss Tools.

This module provides reusable validation functions with consistent error handling.
"""

import numbers
from typing import Any, Optional

from swisstools.exceptions import InvalidPlayerDataException, InvalidResultException


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Name Validation ==========


def validate_name(name: Optional[str]) -> ValidationResult:
    """Validate a player display name.

    Names are kept exactly as given (lookups are case sensitive); only a
    missing or empty name is rejected.

    Example:
        >>> bool(validate_name("Alice"))
        True
        >>> bool(validate_name(""))
        False
    """
    if not isinstance(name, str) or name == "":
        return ValidationResult(is_valid=False, error_message="empty name")
    return ValidationResult(is_valid=True, sanitized_value=name)


def validate_name_strict(name: Optional[str]) -> str:
    """Validate a name and raise if invalid.

    Raises:
        InvalidPlayerDataException: If the name is empty
    """
    result = validate_name(name)
    if not result:
        raise InvalidPlayerDataException(result.error_message)
    return result.sanitized_value


# ========== Result Validation ==========


def validate_game_count(value: Any, label: str) -> ValidationResult:
    """Validate a per-match game count (wins, losses or draws)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        return ValidationResult(
            is_valid=False, error_message=f"{label} must be an integer, got {value!r}"
        )
    if value < 0:
        return ValidationResult(
            is_valid=False, error_message=f"{label} cannot be negative, got {value}"
        )
    return ValidationResult(is_valid=True, sanitized_value=int(value))


def validate_game_counts_strict(wins: Any, losses: Any, draws: Any) -> None:
    """Validate the three game counts of a match result.

    Raises:
        InvalidResultException: If any count is not a non-negative integer
    """
    for value, label in ((wins, "wins"), (losses, "losses"), (draws, "draws")):
        result = validate_game_count(value, label)
        if not result:
            raise InvalidResultException(result.error_message)


# ========== Decklist Validation ==========


def validate_card_entry(card: Any, quantity: Any) -> ValidationResult:
    """Validate a single decklist entry."""
    if not isinstance(card, str) or not card.strip():
        return ValidationResult(is_valid=False, error_message="card name is required")
    if isinstance(quantity, bool) or not isinstance(quantity, numbers.Integral):
        return ValidationResult(
            is_valid=False,
            error_message=f"quantity for {card!r} must be an integer",
        )
    if quantity <= 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"quantity for {card!r} must be positive, got {quantity}",
        )
    return ValidationResult(is_valid=True, sanitized_value=(card.strip(), int(quantity)))
