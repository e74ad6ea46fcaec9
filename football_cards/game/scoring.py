"""Combination-based scoring for played cards."""

from collections import Counter
from dataclasses import dataclass
from typing import Callable, Sequence

from football_cards.models.card import Card, CombinationRule, CombinationType

# Minimum group size used by the country-first policy
DEFAULT_GROUP_THRESHOLD = 2

# Evaluation order used by the country-first policy
TYPE_PRIORITY = (CombinationType.COUNTRY, CombinationType.CLUB)

# A resolution policy turns the rule set into (rule, threshold) candidates in
# evaluation order. The first candidate with a qualifying group is applied.
ResolutionPolicy = Callable[[Sequence[CombinationRule]], list[tuple[CombinationRule, int]]]


@dataclass(frozen=True)
class ScoreResult:
    """Score breakdown for one play."""

    score: int | float
    combination: CombinationType
    base_sum: int | float
    multiplier: int | float = 1


def country_first_policy(rules: Sequence[CombinationRule]) -> list[tuple[CombinationRule, int]]:
    """Country before club, groups of two, regardless of multiplier values.

    Only the first rule declared for each type is considered.
    """
    candidates = []
    for combination in TYPE_PRIORITY:
        rule = next((r for r in rules if r.type == combination), None)
        if rule is not None:
            candidates.append((rule, DEFAULT_GROUP_THRESHOLD))
    return candidates


def declared_multiplier_policy(rules: Sequence[CombinationRule]) -> list[tuple[CombinationRule, int]]:
    """Highest declared multiplier first, each rule using its required_players."""
    ordered = sorted(rules, key=lambda r: r.multiplier, reverse=True)
    return [(rule, rule.required_players) for rule in ordered]


POLICIES: dict[str, ResolutionPolicy] = {
    "country_first": country_first_policy,
    "declared_multiplier": declared_multiplier_policy,
}


def has_qualifying_group(cards: Sequence[Card], combination: CombinationType, threshold: int) -> bool:
    """Check if any group of cards sharing the combination's key reaches threshold."""
    counts = Counter(card.group_key(combination) for card in cards)
    return any(n >= threshold for n in counts.values())


class ScoringEngine:
    """Maps a set of played cards and a rule set to a score breakdown."""

    def __init__(self, policy: ResolutionPolicy | str = country_first_policy):
        """Initialize scoring engine.

        Args:
            policy: Resolution policy, or the name of a registered one.
        """
        if isinstance(policy, str):
            if policy not in POLICIES:
                raise ValueError(f"Unknown combination policy: {policy!r}")
            policy = POLICIES[policy]
        self.policy = policy

    def resolve(self, cards: Sequence[Card], rules: Sequence[CombinationRule]) -> CombinationRule | None:
        """Find the single rule that applies to the cards, if any."""
        for rule, threshold in self.policy(rules):
            if has_qualifying_group(cards, rule.type, threshold):
                return rule
        return None

    def score(self, cards: Sequence[Card], rules: Sequence[CombinationRule]) -> ScoreResult:
        """Score a play.

        Args:
            cards: Played cards.
            rules: Combination rules from the catalog.

        Returns:
            ScoreResult with base sum, applied combination and final score.
        """
        if not cards:
            return ScoreResult(score=0, combination=CombinationType.NONE, base_sum=0)

        base_sum = sum(card.base_value for card in cards)

        rule = self.resolve(cards, rules)
        if rule is None:
            return ScoreResult(score=base_sum, combination=CombinationType.NONE, base_sum=base_sum)

        return ScoreResult(
            score=base_sum * rule.multiplier,
            combination=rule.type,
            base_sum=base_sum,
            multiplier=rule.multiplier,
        )
