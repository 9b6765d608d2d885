"""Tests for league.reader module."""

import pytest

from league.reader import detect_encoding, list_result_files, read_evenings, read_text


class TestDetectEncoding:
    """Tests for encoding detection."""

    def test_utf16le_bom(self, tmp_path):
        f = tmp_path / '2024-01-10.txt'
        f.write_bytes(b'\xff\xfe' + 'Alice-Bob 1-0'.encode('utf-16-le'))
        assert detect_encoding(f) == 'utf-16-le'
        assert read_text(f) == 'Alice-Bob 1-0'

    def test_utf8_fallback(self, tmp_path):
        f = tmp_path / 'test.txt'
        f.write_text('hello', encoding='utf-8')
        assert detect_encoding(f) == 'utf-8-sig'

    def test_utf8_bom_stripped(self, tmp_path):
        f = tmp_path / 'test.txt'
        f.write_text('Ørjan-Bob 1-0', encoding='utf-8-sig')
        assert read_text(f) == 'Ørjan-Bob 1-0'


class TestListResultFiles:
    """Tests for result file discovery."""

    def test_index_sorted(self, results_dir):
        files = list_result_files(results_dir)
        assert [f.name for f in files] == ['2024-01-10.txt', '2024-01-24.txt']

    def test_glob_without_index(self, tmp_path):
        (tmp_path / '2024-02-07.txt').write_text('')
        (tmp_path / '2024-01-24.txt').write_text('')
        (tmp_path / 'notes.md').write_text('')
        files = list_result_files(tmp_path)
        assert [f.name for f in files] == ['2024-01-24.txt', '2024-02-07.txt']

    def test_non_date_file_skipped(self, tmp_path, caplog):
        (tmp_path / '2024-01-10.txt').write_text('Alice-Bob 1-0')
        (tmp_path / 'readme.txt').write_text('Ergebnisse der Liga')
        files = list_result_files(tmp_path)
        assert [f.name for f in files] == ['2024-01-10.txt']
        assert 'readme.txt' in caplog.text

    def test_non_date_index_entry_skipped(self, tmp_path):
        (tmp_path / 'index.json').write_text('["notes.txt", "2024-01-10.txt"]')
        (tmp_path / '2024-01-10.txt').write_text('Alice-Bob 1-0')
        assert [f.name for f in list_result_files(tmp_path)] == ['2024-01-10.txt']

    def test_duplicate_index_entries(self, tmp_path, caplog):
        (tmp_path / 'index.json').write_text('["2024-01-10.txt", "2024-01-10.txt"]')
        (tmp_path / '2024-01-10.txt').write_text('Alice-Bob 1-0')
        assert [d for d, _ in read_evenings(tmp_path)] == ['2024-01-10']
        assert 'Doppelte' in caplog.text

    def test_missing_dir_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list_result_files(tmp_path / 'nope')

    def test_bad_index_raises(self, tmp_path):
        (tmp_path / 'index.json').write_text('{"files": []}')
        with pytest.raises(ValueError, match='Liste von Dateinamen'):
            list_result_files(tmp_path)

    def test_listed_file_missing_raises(self, tmp_path):
        (tmp_path / 'index.json').write_text('["2024-01-10.txt"]')
        with pytest.raises(FileNotFoundError):
            read_evenings(tmp_path)


class TestReadEvenings:
    """Tests for reading a results directory."""

    def test_sample_dates(self, sample_evenings):
        assert [d for d, _ in sample_evenings] == ['2024-01-10', '2024-01-24']

    def test_sample_text(self, sample_evenings):
        _, text = sample_evenings[0]
        assert text.splitlines()[0] == 'Magnus-Hikaru 1-0'
