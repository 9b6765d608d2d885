"""Elo rating model: expected score, rating delta and performance rating."""

import math
from collections.abc import Iterable

from league import K_FACTOR


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's built-in round() uses banker's rounding; ratings are rounded
    the way players expect (2.5 -> 3, -2.5 -> -3).

    Args:
        value: Number to round.

    Returns:
        Rounded integer.
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # floor(x + 0.5) rounds 0.49999999999999994 up because of float addition
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def expected_score(rating_a: float, rating_b: float) -> float:
    """Expected score of player A against player B (logistic Elo curve).

    Args:
        rating_a: Rating of player A.
        rating_b: Rating of player B.

    Returns:
        Value in (0, 1); expected_score(a, b) + expected_score(b, a) == 1.
    """
    return 1 / (1 + math.pow(10, (rating_b - rating_a) / 400))


def rating_delta(
    rating_winner: float,
    rating_loser: float,
    actual_score: float,
    k: float = K_FACTOR,
) -> int:
    """Rating points transferred from the loser to the winner.

    Args:
        rating_winner: Pre-game rating of the winner (white for a draw).
        rating_loser: Pre-game rating of the loser (black for a draw).
        actual_score: 1 for a decisive win, 0.5 for a draw.
        k: K-factor.

    Returns:
        Integer delta; added to the winner and subtracted from the loser.
        Negative for a draw in which the "winner" was the favourite.
    """
    return round_half_away(k * (actual_score - expected_score(rating_winner, rating_loser)))


def performance_rating(opponent_ratings: Iterable[float], score: float) -> float:
    """Single-evening performance estimate.

    Average opponent rating adjusted by ``400 * (2 * p - 1)`` where ``p`` is
    the score percentage.

    Args:
        opponent_ratings: Rating of the opponent in each game played.
        score: Total score achieved in those games.

    Returns:
        Performance rating.

    Raises:
        ValueError: If no games were played.
    """
    ratings = list(opponent_ratings)
    if not ratings:
        raise ValueError("Keine Partien fuer Performance-Berechnung.")
    avg_opponent = sum(ratings) / len(ratings)
    percentage = score / len(ratings)
    return avg_opponent + 400 * (2 * percentage - 1)
