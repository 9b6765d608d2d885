"""chess-league-standings – CLI-Tool fuer die Tabelle einer Schachliga."""

import argparse
import logging
from pathlib import Path

from league import INITIAL_RATING, K_FACTOR, POINTS_TABLE
from league.ledger import LeagueLedger
from league.names import DEFAULT_SIMILARITY_THRESHOLD
from league.reader import read_evenings
from league.reporter import write_csv_report, write_html_report, print_summary


def parse_points_table(value: str) -> tuple[float, ...]:
    """Parse a comma-separated points table such as '12,10,8'."""
    try:
        points = tuple(float(p) for p in value.split(',') if p.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"Ungueltige Punktetabelle: {value!r}") from None
    if not points:
        raise argparse.ArgumentTypeError("Punktetabelle ist leer.")
    return points


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        description='Berechnet Elo-Ratings und Ligatabelle aus Abend-Ergebnisdateien.',
        prog='standings.py',
    )
    parser.add_argument(
        '--results-dir', required=True, type=Path,
        help='Verzeichnis mit Ergebnisdateien (YYYY-MM-DD.txt, optional index.json)',
    )
    parser.add_argument(
        '--output', type=Path,
        help='Pfad fuer die Tabelle (CSV)',
    )
    parser.add_argument(
        '--html', action='store_true',
        help='Zusaetzlich eine HTML-Seite erzeugen (neben --output)',
    )
    parser.add_argument(
        '--title', default='',
        help='Titel der HTML-Seite',
    )
    parser.add_argument(
        '--summary', action='store_true',
        help='Zusammenfassung auf stdout ausgeben',
    )
    parser.add_argument(
        '--k-factor', type=float, default=K_FACTOR,
        help=f'K-Faktor fuer Elo (Standard: {K_FACTOR})',
    )
    parser.add_argument(
        '--initial-rating', type=float, default=INITIAL_RATING,
        help=f'Startrating neuer Spieler (Standard: {INITIAL_RATING:g})',
    )
    parser.add_argument(
        '--points', type=parse_points_table, default=POINTS_TABLE,
        help='Punktetabelle, kommagetrennt (Standard: 12,10,8,7,6,5,4,3,2,1)',
    )
    parser.add_argument(
        '--similarity-threshold', type=float, default=DEFAULT_SIMILARITY_THRESHOLD,
        help=f'Schwellenwert fuer aehnliche Spielernamen (Standard: {DEFAULT_SIMILARITY_THRESHOLD})',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Debug-Ausgaben aktivieren',
    )
    return parser


def build_ledger(
    results_dir: Path,
    k_factor: float = K_FACTOR,
    initial_rating: float = INITIAL_RATING,
    points_table: tuple[float, ...] = POINTS_TABLE,
) -> LeagueLedger:
    """Replay all evenings of a results directory into a fresh ledger."""
    ledger = LeagueLedger(
        k_factor=k_factor,
        initial_rating=initial_rating,
        points_table=points_table,
    )
    for date, text in read_evenings(results_dir):
        logging.info("Verarbeite Abend %s ...", date)
        ledger.apply_evening_text(text, date)
    return ledger


def main() -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s: %(message)s',
    )

    if args.html and not args.output:
        parser.error('--output ist erforderlich bei Verwendung von --html.')

    if not args.output and not args.summary:
        parser.error('Entweder --output oder --summary muss angegeben werden.')

    ledger = build_ledger(
        args.results_dir, args.k_factor, args.initial_rating, args.points,
    )

    similar = ledger.similar_player_names(args.similarity_threshold)
    for a, b, sim in similar:
        logging.warning("Aehnliche Spielernamen: %s / %s (%.2f)", a, b, sim)

    if args.output:
        write_csv_report(ledger, args.output)
        if args.html:
            write_html_report(ledger, args.output.with_suffix('.html'), args.title)

    if args.summary:
        print_summary(ledger, similar)


if __name__ == '__main__':
    main()
