"""League ledger: season player registry and per-evening processing."""

import dataclasses
import datetime
import logging
from collections.abc import Sequence
from typing import Optional

from league import (
    INITIAL_RATING,
    K_FACTOR,
    NEXT_EVENT_INTERVAL_DAYS,
    POINTS_TABLE,
    EveningResult,
    Match,
    Player,
    is_evening_date,
)
from league.names import DEFAULT_SIMILARITY_THRESHOLD, canonicalize_name, find_similar_names
from league.parser import parse_evening
from league.ranking import rank_evening
from league.rating import rating_delta

log = logging.getLogger(__name__)


class LeagueLedger:
    """Running season state, rebuilt by feeding evenings in date order.

    Player records are created on first appearance and only ever updated.
    Evening results are stored once per date.
    """

    def __init__(
        self,
        k_factor: float = K_FACTOR,
        initial_rating: float = INITIAL_RATING,
        points_table: Sequence[float] = POINTS_TABLE,
    ) -> None:
        self.k_factor = k_factor
        self.initial_rating = initial_rating
        self.points_table = tuple(points_table)
        self._players: dict[str, Player] = {}
        self._evenings: dict[str, EveningResult] = {}

    @property
    def players(self) -> dict[str, Player]:
        return self._players

    @property
    def evenings(self) -> list[str]:
        """Processed evening dates in processing order."""
        return list(self._evenings)

    def player(self, name: str) -> Optional[Player]:
        return self._players.get(canonicalize_name(name))

    def _get_or_create(self, name: str) -> Player:
        player = self._players.get(name)
        if player is None:
            player = Player(name=name, rating=self.initial_rating)
            self._players[name] = player
            log.debug("Neuer Spieler: %s", name)
        return player

    def apply_match(
        self,
        winner: str,
        loser: str,
        score: float = 1.0,
        friendly: bool = False,
    ) -> Match:
        """Apply one game to ratings and win/draw/loss tallies.

        Both rating changes come from the pre-game ratings.

        Args:
            winner: Winner name (white for a draw).
            loser: Loser name (black for a draw).
            score: 1 for a decisive result, 0.5 for a draw.
            friendly: Non-counting game; still rated.

        Returns:
            The applied match with canonical names.
        """
        match = Match(canonicalize_name(winner), canonicalize_name(loser), score, friendly)
        win_rec = self._get_or_create(match.winner)
        loss_rec = self._get_or_create(match.loser)

        delta = rating_delta(win_rec.rating, loss_rec.rating, score, self.k_factor)
        win_rec.rating += delta
        loss_rec.rating -= delta

        if match.is_draw:
            win_rec.draws += 1
            loss_rec.draws += 1
        else:
            win_rec.wins += 1
            loss_rec.losses += 1

        return match

    def apply_evening_text(self, text: str, date: str) -> EveningResult:
        """Parse, apply and rank one evening.

        Args:
            text: Result lines of the evening.
            date: Evening date (YYYY-MM-DD), the storage key.

        Returns:
            The stored EveningResult. An already processed date is skipped
            with a warning and its stored result is returned unchanged.

        Raises:
            ValueError: If the date is not a YYYY-MM-DD date.
        """
        if not is_evening_date(date):
            raise ValueError(f"Ungueltiges Abenddatum: {date!r}")

        stored = self._evenings.get(date)
        if stored is not None:
            log.warning("Abend %s wurde bereits verarbeitet, uebersprungen.", date)
            return stored

        parsed = parse_evening(text)
        applied = [
            self.apply_match(m.winner, m.loser, m.score, m.friendly)
            for m in parsed.matches
        ]

        rankings = rank_evening(applied, self._players, self.points_table)
        for entry in rankings:
            self._players[entry.name].points += entry.points

        result = EveningResult(
            date=date,
            matches=tuple(parsed.display),
            rankings=tuple(rankings),
            errors=tuple(parsed.errors),
        )
        self._evenings[date] = result

        log.info(
            "Abend %s: %d Partien, %d gewertet, %d Fehler",
            date, len(applied), len(parsed.display), len(parsed.errors),
        )
        return result

    def get_evening_result(self, date: str) -> Optional[EveningResult]:
        return self._evenings.get(date)

    def get_standings(self) -> list[Player]:
        """Copies of the player records by season points, then rating, then name."""
        return sorted(
            (dataclasses.replace(p) for p in self._players.values()),
            key=lambda p: (-p.points, -p.rating, p.name),
        )

    def next_event_date(self, interval_days: int = NEXT_EVENT_INTERVAL_DAYS) -> Optional[str]:
        """Date of the next league evening, or None before the first one."""
        if not self._evenings:
            return None
        last = datetime.date.fromisoformat(self.evenings[-1])
        return (last + datetime.timedelta(days=interval_days)).isoformat()

    def similar_player_names(
        self,
        threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    ) -> list[tuple[str, str, float]]:
        """Pairs of player names that look like typos of each other."""
        return find_similar_names(list(self._players), threshold)
