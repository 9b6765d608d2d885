"""Tests for league.reporter module."""

import csv

from league.reporter import (
    CSV_COLUMNS,
    format_points,
    print_summary,
    write_csv_report,
    write_html_report,
)


class TestFormatPoints:
    """Tests for points formatting."""

    def test_whole_number(self):
        assert format_points(12.0) == '12'

    def test_half(self):
        assert format_points(7.5) == '7.5'

    def test_thirds(self):
        assert format_points(10 / 3) == '3.33'


class TestCsvReport:
    """Tests for the standings CSV."""

    def test_rows(self, season, tmp_path):
        out = tmp_path / 'out' / 'standings.csv'
        write_csv_report(season, out)

        with open(out, encoding='utf-8-sig', newline='') as f:
            rows = list(csv.DictReader(f, delimiter=';'))

        assert list(rows[0].keys()) == CSV_COLUMNS
        assert [r['Name'] for r in rows] == ['Magnus', 'Fabiano', 'Hikaru', 'Anna']
        assert rows[0]['Points'] == '19.5'
        assert rows[1]['Wins'] == '2'
        assert rows[1]['Draws'] == '1'


class TestHtmlReport:
    """Tests for the HTML page."""

    def test_contains_standings_and_evenings(self, season, tmp_path):
        out = tmp_path / 'standings.html'
        write_html_report(season, out, title='Klubbkveld')
        html = out.read_text(encoding='utf-8')

        assert '<title>Klubbkveld</title>' in html
        assert 'Magnus' in html
        assert '2024-01-10' in html
        assert 'Magnus - Fabiano 1-1' in html
        assert '2024-02-07' in html
        # Most recent evening listed first
        assert html.index('2024-01-24') < html.index('2024-01-10')

    def test_names_escaped(self, ledger, tmp_path):
        ledger.apply_evening_text('<b>x-Bob 1-0', '2024-01-10')
        out = tmp_path / 'standings.html'
        write_html_report(ledger, out)
        html = out.read_text(encoding='utf-8')
        assert '&lt;b&gt;x' in html


class TestPrintSummary:
    """Tests for the stdout summary."""

    def test_summary(self, season, capsys):
        print_summary(season, [('Magnus', 'Magnuss', 0.97)])
        out = capsys.readouterr().out
        assert 'Tabelle nach 2 Abenden' in out
        assert 'Magnus' in out
        assert '2024-02-07' in out
        assert 'Magnuss' in out
