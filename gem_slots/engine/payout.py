"""
Gem Slots - Payout Evaluator

Maps an outcome to a win multiplier. The gem counts are sorted from most to
least frequent and checked against the payout table, rarest pattern first;
the first matching rule wins.

Reference table for 7 slots:

| Sorted counts | Multiplier |
|---|---|
| 7 | 1000 |
| 6 | 100 |
| 5 | 50 |
| 4 | 5 |
| 3, 2 | 4 |
| 3 | 3 |
| 2, 2, 2 | 3 |
| anything else | 0 |

The top three tiers are relative to the slot count K. They are only kept while
strictly rarer than the fixed four-of-a-kind tier, so smaller boards fall
back to the fixed tiers instead of paying a jackpot for a common pattern. On
boards larger than 7 the K-2 tier also covers every lead count between five
and K-2, so a larger group never pays less than a smaller one.
"""

from gem_slots.engine.base import (
    Outcome,
    PayoutCategory,
    PayoutRule,
    RoundResult,
)
from gem_slots.engine.validators import validate_slot_count

ALL_OF_A_KIND_MULTIPLIER = 1000
ALL_BUT_ONE_MULTIPLIER = 100
ALL_BUT_TWO_MULTIPLIER = 50

FOUR_OF_A_KIND = 4

_FIXED_RULES: tuple[PayoutRule, ...] = (
    PayoutRule(PayoutCategory.FOUR_OF_A_KIND, (4,), 5, "Four of a kind"),
    PayoutRule(PayoutCategory.FULL_HOUSE, (3, 2), 4, "Full house"),
    PayoutRule(PayoutCategory.THREE_OF_A_KIND, (3,), 3, "Three of a kind"),
    PayoutRule(PayoutCategory.THREE_PAIRS, (2, 2, 2), 3, "Three pairs"),
)


def _of_a_kind(category: PayoutCategory, size: int, multiplier: int) -> PayoutRule:
    return PayoutRule(category, (size,), multiplier, f"{size} of a kind")


def build_payout_rules(slot_count: int) -> tuple[PayoutRule, ...]:
    """Build the ordered payout table for a board of ``slot_count`` slots."""
    validate_slot_count(slot_count)

    rules = [_of_a_kind(PayoutCategory.ALL_OF_A_KIND, slot_count, ALL_OF_A_KIND_MULTIPLIER)]
    if slot_count - 1 > FOUR_OF_A_KIND:
        rules.append(_of_a_kind(PayoutCategory.ALL_BUT_ONE, slot_count - 1, ALL_BUT_ONE_MULTIPLIER))

    # Every lead count from K-2 down to five pays the K-2 tier
    for size in range(slot_count - 2, FOUR_OF_A_KIND, -1):
        rules.append(_of_a_kind(PayoutCategory.ALL_BUT_TWO, size, ALL_BUT_TWO_MULTIPLIER))

    rules.extend(_FIXED_RULES)
    return tuple(rules)


class PayoutEvaluator:
    """
    Pure evaluator for the payout table.

    With no explicit rules the table is built from the outcome's length, so
    one evaluator serves any board size. Tables are cached per slot count.
    """

    def __init__(self, rules: tuple[PayoutRule, ...] | None = None) -> None:
        self._rules = rules
        self._tables: dict[int, tuple[PayoutRule, ...]] = {}

    def rules_for(self, slot_count: int) -> tuple[PayoutRule, ...]:
        """Payout table used for a board of ``slot_count`` slots."""
        if self._rules is not None:
            return self._rules
        if slot_count not in self._tables:
            self._tables[slot_count] = build_payout_rules(slot_count)
        return self._tables[slot_count]

    def match(self, outcome: Outcome) -> PayoutRule | None:
        """First rule matching the outcome, or None for a loss."""
        occurrences = outcome.occurrences()
        for rule in self.rules_for(len(outcome)):
            if rule.matches(occurrences):
                return rule
        return None

    def multiplier_for(self, outcome: Outcome) -> int:
        """Win multiplier for an outcome, 0 for a loss."""
        rule = self.match(outcome)
        return rule.multiplier if rule is not None else 0

    def evaluate(self, outcome: Outcome, bet_amount: float) -> RoundResult:
        """Settle a bet against an outcome.

        Args:
            outcome: Gems that landed
            bet_amount: Amount wagered

        Returns:
            RoundResult with multiplier and winnings (bet_amount * multiplier)
        """
        rule = self.match(outcome)
        if rule is None:
            return RoundResult(
                outcome=outcome,
                bet_amount=bet_amount,
                multiplier=0,
                winnings=0.0,
                category=PayoutCategory.NO_WIN,
            )

        return RoundResult(
            outcome=outcome,
            bet_amount=bet_amount,
            multiplier=rule.multiplier,
            winnings=bet_amount * rule.multiplier,
            category=rule.category,
        )


_default_evaluator = PayoutEvaluator()


def evaluate(outcome: Outcome, bet_amount: float) -> RoundResult:
    """Settle a bet with the default payout table."""
    return _default_evaluator.evaluate(outcome, bet_amount)
