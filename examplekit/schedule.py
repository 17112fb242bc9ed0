"""Round-robin tournament scheduling."""

from __future__ import annotations

from collections.abc import Sequence


def round_robin(weeks: int, teams: Sequence[int]) -> list[list[tuple[int, int]]]:
    """Pair up ``teams`` for ``weeks`` rounds using the circle method.

    With an odd number of teams an extra "bye" team numbered
    ``len(teams) + 1`` is added. The first team stays fixed while the
    others rotate. Returns one list of pairings per week.
    """
    players = list(teams)
    if weeks > 0 and not players:
        raise ValueError("at least one team is needed")
    if len(players) % 2:
        players.append(len(players) + 1)

    half = len(players) // 2
    fixed, rotating = players[0] if players else None, players[1:]
    count = len(rotating)

    plan: list[list[tuple[int, int]]] = []
    for week in range(weeks):
        pairs = [(fixed, rotating[week % count])]
        pairs.extend(
            (rotating[(week + j) % count], rotating[(week + count - j) % count])
            for j in range(1, half)
        )
        plan.append(pairs)
    return plan