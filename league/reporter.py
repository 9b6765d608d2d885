"""Report generation for league standings (CSV, HTML, summary)."""

import csv
import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from league import EveningResult, Player
from league.ledger import LeagueLedger
from league.rating import round_half_away

log = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / 'templates'

CSV_COLUMNS = [
    'Rank',
    'Name',
    'Points',
    'Wins',
    'Draws',
    'Losses',
    'Score',
    'Rating',
]


def format_points(value: float) -> str:
    """Format points without a trailing '.0' for whole numbers."""
    if value == int(value):
        return str(int(value))
    return f'{value:.2f}'.rstrip('0').rstrip('.')


def _player_to_row(rank: int, player: Player) -> dict:
    """Convert a Player to a flat dict for CSV/HTML output."""
    return {
        'Rank': str(rank),
        'Name': player.name,
        'Points': format_points(player.points),
        'Wins': str(player.wins),
        'Draws': str(player.draws),
        'Losses': str(player.losses),
        'Score': format_points(player.score),
        'Rating': str(round_half_away(player.rating)),
    }


def _evening_to_view(evening: EveningResult) -> dict:
    """Template view of one evening."""
    return {
        'date': evening.date,
        'rankings': [
            {
                'rank': i,
                'name': e.name,
                'wins': format_points(e.wins),
                'performance': e.performance,
                'points': format_points(e.points),
            }
            for i, e in enumerate(evening.rankings, start=1)
        ],
        'matches': [f'{m.white} - {m.black} {m.score}' for m in evening.matches],
        'errors': [f'{err.line_number}: {err.line} ({err.reason})' for err in evening.errors],
    }


def write_csv_report(ledger: LeagueLedger, output_path: Path) -> None:
    """Write the season standings as a CSV report.

    Uses UTF-8 with BOM (utf-8-sig) and semicolon delimiter for
    compatibility with German Excel.

    Args:
        ledger: League state after all evenings.
        output_path: Path for the output CSV file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    standings = ledger.get_standings()
    with open(output_path, 'w', newline='', encoding='utf-8-sig') as f:
        writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS, delimiter=';')
        writer.writeheader()
        for rank, player in enumerate(standings, start=1):
            writer.writerow(_player_to_row(rank, player))

    log.info("CSV-Report geschrieben: %s (%d Spieler)", output_path, len(standings))


def write_html_report(
    ledger: LeagueLedger,
    output_path: Path,
    title: str = '',
) -> None:
    """Write standings and evening results as an HTML page using Jinja2.

    Args:
        ledger: League state after all evenings.
        output_path: Path for the output HTML file.
        title: Page title (league name).
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=True,
    )
    template = env.get_template('standings.html')

    rows = [_player_to_row(rank, p) for rank, p in enumerate(ledger.get_standings(), start=1)]
    # Most recent evening first
    evenings = [
        _evening_to_view(ledger.get_evening_result(d))
        for d in reversed(ledger.evenings)
    ]

    html = template.render(
        title=title,
        rows=rows,
        columns=CSV_COLUMNS,
        evenings=evenings,
        next_event=ledger.next_event_date(),
    )

    output_path.write_text(html, encoding='utf-8')
    log.info("HTML-Report geschrieben: %s", output_path)


def print_summary(
    ledger: LeagueLedger,
    similar_names: list[tuple[str, str, float]] | None = None,
) -> None:
    """Print a summary of the season standings to stdout.

    Args:
        ledger: League state after all evenings.
        similar_names: Name pairs to flag as possible typos.
    """
    standings = ledger.get_standings()
    parse_errors = sum(len(ledger.get_evening_result(d).errors) for d in ledger.evenings)

    print(f"\n=== Tabelle nach {len(ledger.evenings)} Abenden ===")
    for rank, p in enumerate(standings, start=1):
        print(
            f"{rank:>3}. {p.name:<20} {format_points(p.points):>6} Pkt  "
            f"{p.wins}-{p.draws}-{p.losses}  Elo {round_half_away(p.rating):>4}"
        )
    print("---")
    print(f"Fehlerhafte Zeilen:        {parse_errors:>5}")
    next_event = ledger.next_event_date()
    if next_event:
        print(f"Naechster Abend:      {next_event}")
    for a, b, sim in similar_names or []:
        print(f"  - Aehnliche Namen: {a} / {b} ({sim:.2f})")
    print()
