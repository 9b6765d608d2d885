"""Core module for chess-league-standings."""

import datetime
from dataclasses import dataclass, field

INITIAL_RATING = 1500.0
K_FACTOR = 32
# Eurovision-style points for the top 10 positions of an evening
POINTS_TABLE: tuple[int, ...] = (12, 10, 8, 7, 6, 5, 4, 3, 2, 1)
FRIENDLY_MARKER = '*'
NEXT_EVENT_INTERVAL_DAYS = 14


def is_evening_date(value: str) -> bool:
    """Check that an evening key is a zero-padded ISO date (YYYY-MM-DD)."""
    if len(value) != 10:
        return False
    try:
        datetime.datetime.strptime(value, '%Y-%m-%d')
    except ValueError:
        return False
    return True


@dataclass
class Player:
    """Season record of a league player, keyed by canonical name."""

    name: str
    rating: float = INITIAL_RATING
    points: float = 0.0   # Cumulative season points
    wins: int = 0
    draws: int = 0
    losses: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.draws + self.losses

    @property
    def score(self) -> float:
        """Total chess score (a draw counts half)."""
        return self.wins + self.draws * 0.5


@dataclass(frozen=True)
class Match:
    """One applied game. For a draw, ``winner`` is the white player."""

    winner: str
    loser: str
    score: float          # 1.0 decisive, 0.5 draw
    friendly: bool = False

    @property
    def is_draw(self) -> bool:
        return self.score == 0.5


@dataclass(frozen=True)
class DisplayMatch:
    """A counting game as shown in the evening's match list."""

    white: str
    black: str
    score: str            # e.g. "1-0"


@dataclass(frozen=True)
class ParseError:
    """A result line that could not be parsed and was skipped."""

    line_number: int      # 1-based, within the evening text
    line: str
    reason: str


@dataclass(frozen=True)
class RankingEntry:
    """One row of an evening ranking."""

    name: str
    wins: float           # Win-equivalent score (draws count half)
    performance: int      # Rounded performance rating
    points: float         # Points awarded for the evening


@dataclass(frozen=True)
class EveningResult:
    """Immutable outcome of one processed evening."""

    date: str
    matches: tuple[DisplayMatch, ...] = ()
    rankings: tuple[RankingEntry, ...] = ()
    errors: tuple[ParseError, ...] = field(default=(), compare=False)
