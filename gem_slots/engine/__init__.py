"""
Gem Slots Game Engine.

Pure Python game logic with zero UI dependencies.
Handles outcome generation, payout evaluation and input validation.
"""

from gem_slots.engine.base import (
    GameConfig,
    Outcome,
    PayoutCategory,
    PayoutRule,
    RoundResult,
    Symbol,
    SymbolCounts,
)
from gem_slots.engine.outcome import OutcomeGenerator
from gem_slots.engine.payout import PayoutEvaluator, build_payout_rules, evaluate

__all__ = [
    # Data Classes
    "GameConfig",
    "Outcome",
    "PayoutRule",
    "RoundResult",
    "SymbolCounts",
    # Enums
    "PayoutCategory",
    "Symbol",
    # Engines
    "OutcomeGenerator",
    "PayoutEvaluator",
    "build_payout_rules",
    "evaluate",
]
