"""
Gem Slots - Session Snapshot Models

Pydantic models describing what the presentation layer renders after each
frame: the board, the result banner, the balance and the last settled round.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from gem_slots.animation.board import ResultBanner, SlotBoard, SlotView
from gem_slots.engine.base import NO_TINT, RoundResult


class SlotSnapshot(BaseModel):
    """Visual state of one slot."""

    index: int = Field(ge=0)
    symbol: str | None = None
    alpha: float = Field(default=0.0, ge=0.0, le=1.0)
    offset_y: float = 0.0
    highlighted: bool = False
    tint: int = NO_TINT

    @classmethod
    def from_view(cls, slot: SlotView) -> SlotSnapshot:
        return cls(
            index=slot.index,
            symbol=slot.symbol.value if slot.symbol is not None else None,
            alpha=slot.alpha,
            offset_y=slot.offset_y,
            highlighted=slot.highlighted,
            tint=slot.tint,
        )


class BoardSnapshot(BaseModel):
    """All slots plus the result banner."""

    slots: list[SlotSnapshot] = Field(default_factory=list)
    banner_text: str = ""
    banner_alpha: float = Field(default=0.0, ge=0.0, le=1.0)
    banner_is_win: bool | None = None

    @classmethod
    def capture(cls, board: SlotBoard, banner: ResultBanner) -> BoardSnapshot:
        return cls(
            slots=[SlotSnapshot.from_view(slot) for slot in board],
            banner_text=banner.text,
            banner_alpha=banner.alpha,
            banner_is_win=banner.is_win,
        )


class RoundSnapshot(BaseModel):
    """A settled round."""

    round_id: int
    symbols: list[str]
    bet_amount: float = Field(gt=0)
    multiplier: int = Field(ge=0)
    winnings: float = Field(ge=0)
    category: str
    is_win: bool

    @classmethod
    def from_result(cls, round_id: int, result: RoundResult) -> RoundSnapshot:
        return cls(
            round_id=round_id,
            symbols=[s.value for s in result.outcome],
            bet_amount=result.bet_amount,
            multiplier=result.multiplier,
            winnings=result.winnings,
            category=result.category.name,
            is_win=result.is_win,
        )


class SessionSnapshot(BaseModel):
    """Everything the presentation layer needs for one frame."""

    balance: float = Field(ge=0)
    phase: str
    round_id: int = 0
    wave_running: bool = False
    board: BoardSnapshot
    last_round: RoundSnapshot | None = None
