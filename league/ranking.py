"""Evening ranking with tie groups sharing position points."""

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence
from itertools import groupby

from league import POINTS_TABLE, Match, Player, RankingEntry
from league.rating import performance_rating, round_half_away

log = logging.getLogger(__name__)


def share_points(
    group_sizes: Iterable[int],
    points_table: Sequence[float] = POINTS_TABLE,
) -> list[float]:
    """Points per member for consecutive tie groups.

    A group occupying positions ``[p, p + n)`` shares the table values at
    those positions equally. Positions beyond the table are worth 0.

    Args:
        group_sizes: Sizes of the tie groups, best group first.
        points_table: Points for position 0, 1, 2, ...

    Returns:
        Award per member for each group.
    """
    awards: list[float] = []
    position = 0
    for size in group_sizes:
        total = sum(points_table[p] for p in range(position, position + size)
                    if p < len(points_table))
        awards.append(total / size)
        position += size
    return awards


def rank_evening(
    matches: Iterable[Match],
    players: Mapping[str, Player],
    points_table: Sequence[float] = POINTS_TABLE,
) -> list[RankingEntry]:
    """Rank the participants of one evening and compute their point awards.

    Friendly matches are ignored. Participants are ordered by
    win-equivalent score (a draw is worth 0.5 to both players), then by
    performance rating. Players with the same score form a tie group and
    split the points of the positions they occupy.

    Args:
        matches: The evening's applied matches.
        players: Player registry, used for current ratings.
        points_table: Points for the evening positions.

    Returns:
        Ranking entries, best first. Season points are not touched.
    """
    counting = [m for m in matches if not m.friendly]

    wins: dict[str, float] = {}
    opponents: dict[str, list[float]] = defaultdict(list)
    scores: dict[str, float] = defaultdict(float)

    for match in counting:
        wins.setdefault(match.winner, 0.0)
        wins.setdefault(match.loser, 0.0)
        wins[match.winner] += match.score
        if match.is_draw:
            wins[match.loser] += match.score

        opponents[match.winner].append(players[match.loser].rating)
        opponents[match.loser].append(players[match.winner].rating)
        scores[match.winner] += match.score
        scores[match.loser] += 1 - match.score

    performance: dict[str, float] = {}
    for name in wins:
        if opponents[name]:
            performance[name] = performance_rating(opponents[name], scores[name])
        else:
            performance[name] = players[name].rating

    ordered = sorted(wins, key=lambda n: (-wins[n], -performance[n]))
    groups = [list(g) for _, g in groupby(ordered, key=lambda n: wins[n])]
    awards = share_points((len(g) for g in groups), points_table)

    rankings: list[RankingEntry] = []
    for group, award in zip(groups, awards):
        for name in group:
            rankings.append(RankingEntry(
                name=name,
                wins=wins[name],
                performance=round_half_away(performance[name]),
                points=award,
            ))

    log.debug(
        "Abendwertung: %d Teilnehmer in %d Gruppen",
        len(rankings), len(groups),
    )
    return rankings
