"""Tournament brackets built round by round from a list of competitors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence


@dataclass
class TournamentNode:
    """One match in a bracket: its winner and the two sub-matches fed into it."""

    winner: Any
    left: Optional[TournamentNode] = None
    right: Optional[TournamentNode] = None


def _play(left: TournamentNode, right: TournamentNode) -> tuple[Any, Any]:
    """Return (winner, loser); a tie goes to the right-hand competitor."""
    if left.winner > right.winner:
        return left.winner, right.winner
    return right.winner, left.winner


def build_single_elimination_with_losers(
    competitors: Sequence[Any],
) -> tuple[Optional[TournamentNode], list]:
    """Build a single-elimination bracket and collect every match's loser.

    Competitors are paired in order (1v2, 3v4, ...); an odd one out advances
    to the next round unplayed. Returns the root (None when there are no
    competitors) and the losers in the order their matches were played.
    """
    losers: list = []
    current = [TournamentNode(competitor) for competitor in competitors]
    if not current:
        return None, losers

    while len(current) > 1:
        next_round = []
        pairs = iter(current)
        for left in pairs:
            right = next(pairs, None)
            if right is None:
                next_round.append(left)
                continue
            winner, loser = _play(left, right)
            losers.append(loser)
            next_round.append(TournamentNode(winner, left, right))
        current = next_round

    return current[0], losers


def build_single_elimination(competitors: Sequence[Any]) -> Optional[TournamentNode]:
    """Build a single-elimination bracket and return its root match."""
    root, _ = build_single_elimination_with_losers(competitors)
    return root


def build_double_elimination(
    competitors: Sequence[Any],
) -> tuple[TournamentNode, TournamentNode]:
    """Build a double-elimination bracket.

    Returns the final match, whose left child is the winners bracket and right
    child the losers bracket, together with the losers bracket root.
    """
    winners_root, losers = build_single_elimination_with_losers(competitors)
    if winners_root is None:
        raise ValueError("a tournament needs at least one competitor")

    champion = winners_root.winner
    remaining = [loser for loser in losers if loser != champion]
    losers_root = build_single_elimination(remaining)
    if losers_root is None:
        raise ValueError("double elimination needs at least two distinct competitors")

    if winners_root.winner > losers_root.winner:
        final_winner = winners_root.winner
    else:
        final_winner = losers_root.winner

    return TournamentNode(final_winner, winners_root, losers_root), losers_root