"""
Gem Slots - Outcome Generator

Draws one gem per slot, uniformly and with replacement. The random source is
injected so tests can seed it; there is no module-level random state.
"""

import random
from typing import Sequence

from gem_slots.engine.base import Outcome, Symbol
from gem_slots.engine.validators import validate_slot_count, validate_symbols


class OutcomeGenerator:
    """
    Produces random outcomes from a fixed pool of gems.

    The generator holds no round state; ``generate`` has no side effects
    other than advancing the random source.
    """

    def __init__(
        self,
        symbols: Sequence[Symbol] = tuple(Symbol),
        rng: random.Random | None = None,
    ) -> None:
        self._symbols = validate_symbols(symbols)
        self._rng = rng if rng is not None else random.Random()

    @property
    def symbols(self) -> tuple[Symbol, ...]:
        return self._symbols

    def generate(self, slot_count: int) -> Outcome:
        """Draw a gem for each of ``slot_count`` slots.

        Args:
            slot_count: Number of slots, at least 1

        Returns:
            Outcome with one independently drawn gem per slot
        """
        validate_slot_count(slot_count)
        return Outcome(
            symbols=tuple(self._rng.choice(self._symbols) for _ in range(slot_count))
        )
