"""
Gem Slots - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.

Bet amounts are validated by the caller (the UI layer) before they reach the
round state machine; the machine itself assumes a finite positive amount.
"""

import math
from typing import Sequence

from gem_slots.engine.base import Symbol


def validate_bet_amount(amount: float) -> float:
    """
    Validate a bet amount.

    Args:
        amount: Amount the player wants to wager

    Returns:
        Validated amount as a float

    Raises:
        ValueError: If the amount is not a finite positive number
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise ValueError(f"Bet amount must be a number, got {type(amount).__name__}.")

    if not math.isfinite(amount):
        raise ValueError(f"Bet amount must be finite, got {amount}.")

    if amount <= 0:
        raise ValueError(f"Bet amount must be positive, got {amount}.")

    return float(amount)


def parse_bet_input(text: str) -> float:
    """
    Parse the raw text of the bet field.

    Args:
        text: Text typed by the player

    Returns:
        Validated bet amount

    Raises:
        ValueError: If the text is not a finite positive number
    """
    stripped = (text or "").strip()
    try:
        amount = float(stripped)
    except ValueError:
        raise ValueError(f"Bet amount must be a number, got {stripped!r}.") from None

    return validate_bet_amount(amount)


def validate_slot_count(count: int) -> int:
    """
    Validate the number of slots to draw.

    Raises:
        ValueError: If count is not an integer of at least 1
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"Slot count must be an integer, got {type(count).__name__}.")

    if count < 1:
        raise ValueError(f"Slot count must be at least 1, got {count}.")

    return count


def validate_symbol_count(count: int) -> int:
    """
    Validate how many gems of the fixed set are in play.

    Raises:
        ValueError: If count is outside 1..len(Symbol)
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"Symbol count must be an integer, got {type(count).__name__}.")

    max_count = len(Symbol)
    if not (1 <= count <= max_count):
        raise ValueError(f"Symbol count must be between 1 and {max_count}, got {count}.")

    return count


def validate_symbols(symbols: Sequence[Symbol]) -> tuple[Symbol, ...]:
    """
    Validate the pool of gems an outcome is drawn from.

    Raises:
        ValueError: If the pool is empty, holds non-gems, or repeats a gem
    """
    if not symbols:
        raise ValueError("At least one symbol is required.")

    pool = tuple(symbols)
    for i, symbol in enumerate(pool):
        if not isinstance(symbol, Symbol):
            raise ValueError(f"Symbol at index {i} must be a Symbol, got {symbol!r}.")

    if len(set(pool)) != len(pool):
        raise ValueError("Symbols must be unique.")

    return pool
