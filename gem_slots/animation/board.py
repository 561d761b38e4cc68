"""
Gem Slots - Slot Board View Model

Mutable per-slot visual state written by the animator and read by the
presentation layer: which gem sits in each slot, its opacity and vertical
offset, and whether the slot is highlighted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from gem_slots.engine.base import NO_TINT, Outcome, Symbol


@dataclass
class SlotView:
    """
    Visual state of one slot.

    Attributes:
        index: Slot position, 0-based
        symbol: Gem mounted in the slot, None when empty
        alpha: Gem opacity in [0, 1]
        offset_y: Vertical offset of the gem from its resting position
        highlighted: Whether the slot is marked as part of a win
        tint: Slot tint, the gem's colour when highlighted
    """
    index: int
    symbol: Symbol | None = None
    alpha: float = 0.0
    offset_y: float = 0.0
    highlighted: bool = False
    tint: int = NO_TINT

    @property
    def mounted(self) -> bool:
        return self.symbol is not None


class SlotBoard:
    """Fixed row of slots."""

    def __init__(self, slot_count: int) -> None:
        if slot_count < 1:
            raise ValueError(f"A board needs at least one slot, got {slot_count}.")
        self._slots = [SlotView(index=i) for i in range(slot_count)]

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[SlotView]:
        return iter(self._slots)

    def __getitem__(self, index: int) -> SlotView:
        return self._slots[index]

    @property
    def has_symbols(self) -> bool:
        return any(slot.mounted for slot in self._slots)

    def mount(self, outcome: Outcome, drop: float) -> None:
        """Place an outcome's gems, invisible and raised by ``drop``."""
        if len(outcome) != len(self._slots):
            raise ValueError(
                f"Outcome has {len(outcome)} gems for a board of {len(self._slots)} slots."
            )
        for slot, symbol in zip(self._slots, outcome):
            slot.symbol = symbol
            slot.alpha = 0.0
            slot.offset_y = -drop

    def unmount(self) -> None:
        for slot in self._slots:
            slot.symbol = None
            slot.alpha = 0.0
            slot.offset_y = 0.0

    def reset_highlights(self) -> None:
        for slot in self._slots:
            slot.highlighted = False
            slot.tint = NO_TINT

    def highlight(self, symbols: Iterable[Symbol]) -> list[int]:
        """Tint every slot showing one of ``symbols``. Returns their indices."""
        winners = frozenset(symbols)
        marked = []
        for slot in self._slots:
            if slot.symbol is not None and slot.symbol in winners:
                slot.highlighted = True
                slot.tint = slot.symbol.tint
                marked.append(slot.index)
        return marked


@dataclass
class ResultBanner:
    """Animated win/loss amount shown above the board."""
    text: str = ""
    alpha: float = 0.0
    amount: float = 0.0
    is_win: bool | None = None

    def reset(self) -> None:
        self.text = ""
        self.alpha = 0.0
        self.amount = 0.0
        self.is_win = None

    def show(self, amount: float, is_win: bool, alpha: float) -> None:
        self.amount = amount
        self.is_win = is_win
        self.alpha = alpha
        if is_win:
            self.text = f"+{amount:.2f}$"
        else:
            self.text = f"-{abs(amount):.2f}$"
