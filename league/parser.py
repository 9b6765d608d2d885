"""Parser for one evening of match result lines.

Line format: ``<White>-<Black> <ScoreWhite>-<ScoreBlack>``, optionally
prefixed with ``*`` for a friendly (non-counting) game::

    Alice-Bob 1-0
    *Carl-Dina 0-1
    Alice-Dina 1-1
"""

import logging
import re
from dataclasses import dataclass, field

from league import FRIENDLY_MARKER, DisplayMatch, Match, ParseError
from league.names import canonicalize_name

log = logging.getLogger(__name__)

# Players segment ends in a word character, score segment starts with a digit
_LINE_RE = re.compile(r'^(?P<players>.*\w)\s+(?P<score>\d.*)$')


class LineFormatError(ValueError):
    """Raised by parse_line for a malformed result line."""


@dataclass
class ParsedEvening:
    """Result of parsing one evening's text."""

    matches: list[Match] = field(default_factory=list)
    display: list[DisplayMatch] = field(default_factory=list)
    errors: list[ParseError] = field(default_factory=list)


def _split_pair(segment: str) -> list[str]:
    return [part.strip() for part in segment.split('-')]


def parse_line(line: str) -> tuple[Match, DisplayMatch]:
    """Parse a single non-blank result line.

    Args:
        line: Raw line, surrounding whitespace allowed.

    Returns:
        Tuple of the match to apply and its display form.

    Raises:
        LineFormatError: If the line does not follow the result format.
    """
    text = line.strip()
    friendly = text.startswith(FRIENDLY_MARKER)
    if friendly:
        text = text[len(FRIENDLY_MARKER):].strip()

    m = _LINE_RE.match(text)
    if not m:
        raise LineFormatError("Spieler und Ergebnis nicht trennbar")

    names = _split_pair(m.group('players'))
    if len(names) != 2 or not all(names):
        raise LineFormatError(f"Ungueltige Spielerangabe: {m.group('players')!r}")

    scores = _split_pair(m.group('score'))
    if len(scores) != 2:
        raise LineFormatError(f"Ungueltiges Ergebnis: {m.group('score')!r}")
    try:
        score_white, score_black = (int(s) for s in scores)
    except ValueError:
        raise LineFormatError(f"Ungueltiges Ergebnis: {m.group('score')!r}") from None

    white = canonicalize_name(names[0])
    black = canonicalize_name(names[1])

    if score_white > score_black:
        match = Match(white, black, 1.0, friendly)
    elif score_white < score_black:
        match = Match(black, white, 1.0, friendly)
    else:
        match = Match(white, black, 0.5, friendly)

    return match, DisplayMatch(white, black, f'{score_white}-{score_black}')


def parse_evening(text: str) -> ParsedEvening:
    """Parse all result lines of one evening.

    Blank lines are ignored. Malformed lines are logged, collected in
    ``errors`` and skipped; they never abort the batch.

    Args:
        text: Newline-separated result lines.

    Returns:
        ParsedEvening with matches in input order, the display list of
        counting matches, and the parse errors.
    """
    parsed = ParsedEvening()

    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            match, shown = parse_line(line)
        except LineFormatError as exc:
            log.warning("Zeile %d uebersprungen (%s): %r", line_number, exc, line)
            parsed.errors.append(ParseError(line_number, line.strip(), str(exc)))
            continue

        parsed.matches.append(match)
        if not match.friendly:
            parsed.display.append(shown)

    return parsed
