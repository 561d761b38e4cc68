"""
Gem Slots - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Outcomes, rules and results are immutable (frozen dataclasses)
so a settled round can be handed to the presentation layer without copying.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, Sequence


class Symbol(Enum):
    """Gem that can land in a slot."""
    BLUE = "blue"
    AQUA = "aqua"
    PURPLE = "purple"
    GREEN = "green"
    RED = "red"
    PINK = "pink"
    YELLOW = "yellow"

    @property
    def tint(self) -> int:
        """RGB tint applied to a slot highlighted with this gem."""
        return _SYMBOL_TINTS[self]


_SYMBOL_TINTS: dict[Symbol, int] = {
    Symbol.BLUE: 0x0000FF,
    Symbol.AQUA: 0x00FFFF,
    Symbol.PURPLE: 0x800080,
    Symbol.GREEN: 0x00FF00,
    Symbol.RED: 0xFF0000,
    Symbol.PINK: 0xFFC0CB,
    Symbol.YELLOW: 0xFFFF00,
}

# Neutral tint of a slot that is not highlighted
NO_TINT = 0xFFFFFF

# Mapping of gem -> number of slots showing it
SymbolCounts = dict[Symbol, int]


class PayoutCategory(Enum):
    """Winning patterns, rarest first."""
    ALL_OF_A_KIND = auto()
    ALL_BUT_ONE = auto()      # e.g. six of a kind on 7 slots
    ALL_BUT_TWO = auto()      # e.g. five of a kind on 7 slots
    FOUR_OF_A_KIND = auto()
    FULL_HOUSE = auto()       # 3 + 2
    THREE_OF_A_KIND = auto()
    THREE_PAIRS = auto()      # 2 + 2 + 2
    NO_WIN = auto()


@dataclass(frozen=True)
class Outcome:
    """
    Immutable assignment of gems to slots for one round.

    Attributes:
        symbols: One gem per slot, in slot order
    """
    symbols: tuple[Symbol, ...]

    def __post_init__(self) -> None:
        """Validate the outcome is non-empty and holds only gems."""
        if not self.symbols:
            raise ValueError("An outcome needs at least one slot.")
        for i, symbol in enumerate(self.symbols):
            if not isinstance(symbol, Symbol):
                raise ValueError(
                    f"Slot {i} holds {symbol!r}, expected a Symbol."
                )

    def __len__(self) -> int:
        return len(self.symbols)

    def __getitem__(self, index: int) -> Symbol:
        return self.symbols[index]

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.symbols)

    def counts(self) -> SymbolCounts:
        """Number of slots showing each gem. Values always sum to len(self)."""
        return dict(Counter(self.symbols))

    def occurrences(self) -> tuple[int, ...]:
        """Gem counts sorted from most to least frequent."""
        return tuple(sorted(self.counts().values(), reverse=True))

    @classmethod
    def from_sequence(cls, symbols: Sequence[Symbol]) -> "Outcome":
        """Create an Outcome from any sequence type."""
        return cls(symbols=tuple(symbols))


@dataclass(frozen=True)
class PayoutRule:
    """
    A single row of the payout table.

    Attributes:
        category: Pattern this rule pays for
        pattern: Exact leading values the sorted counts must have
        multiplier: Factor applied to the bet when the rule matches
        description: Human-readable description
    """
    category: PayoutCategory
    pattern: tuple[int, ...]
    multiplier: int
    description: str

    def matches(self, occurrences: Sequence[int]) -> bool:
        """Check the sorted-descending counts against this rule's pattern."""
        padded = tuple(occurrences) + (0,) * max(0, len(self.pattern) - len(occurrences))
        return all(padded[i] == expected for i, expected in enumerate(self.pattern))


@dataclass(frozen=True)
class RoundResult:
    """
    Settlement of one round.

    Attributes:
        outcome: Gems that landed
        bet_amount: Amount wagered (already debited when the round started)
        multiplier: Payout factor, 0 for a loss
        winnings: bet_amount * multiplier
        category: Pattern that paid, NO_WIN for a loss
    """
    outcome: Outcome
    bet_amount: float
    multiplier: int
    winnings: float
    category: PayoutCategory = PayoutCategory.NO_WIN

    @property
    def is_win(self) -> bool:
        """Returns True if the round paid out."""
        return self.multiplier > 0

    @property
    def winning_symbols(self) -> frozenset[Symbol]:
        """Gems showing in two or more slots of a winning round."""
        if not self.is_win:
            return frozenset()
        return frozenset(s for s, n in self.outcome.counts().items() if n >= 2)

    @property
    def highlighted_indices(self) -> frozenset[int]:
        """Slots whose gem contributed to the win."""
        winners = self.winning_symbols
        return frozenset(i for i, s in enumerate(self.outcome) if s in winners)

    def __str__(self) -> str:
        if not self.is_win:
            return f"No win. Lost {self.bet_amount:.2f}"
        return f"{self.category.name} x{self.multiplier}: won {self.winnings:.2f}"


@dataclass(frozen=True)
class GameConfig:
    """
    Board configuration for a game session.

    Attributes:
        slot_count: Number of slots on the board
        symbols: Gems that can be drawn
    """
    slot_count: int = 7
    symbols: tuple[Symbol, ...] = field(default_factory=lambda: tuple(Symbol))

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not isinstance(self.slot_count, int) or self.slot_count < 1:
            raise ValueError(f"Slot count must be at least 1, got {self.slot_count!r}.")
        if not self.symbols:
            raise ValueError("At least one symbol is required.")
        if len(set(self.symbols)) != len(self.symbols):
            raise ValueError("Symbols must be unique.")
