"""Reader for evening result files with encoding detection."""

import json
import logging
from pathlib import Path

from league import is_evening_date

log = logging.getLogger(__name__)

INDEX_FILE = 'index.json'
RESULT_SUFFIX = '.txt'


def detect_encoding(path: Path) -> str:
    """Detect file encoding by checking for BOM bytes.

    Args:
        path: Path to the result file.

    Returns:
        Encoding string suitable for open().
    """
    with open(path, 'rb') as f:
        bom = f.read(2)
    if bom == b'\xff\xfe':
        return 'utf-16-le'
    return 'utf-8-sig'


def read_text(path: str | Path) -> str:
    """Read a result file as text, stripping any BOM."""
    path = Path(path)
    with open(path, 'r', encoding=detect_encoding(path)) as f:
        return f.read().lstrip('\ufeff')


def list_result_files(results_dir: str | Path) -> list[Path]:
    """List evening files in processing order.

    Uses ``index.json`` (a JSON list of file names) when present,
    otherwise every ``*.txt`` file in the directory. Names are sorted,
    which is chronological for ``YYYY-MM-DD.txt`` files. Files whose
    name is not a date and repeated index entries are skipped.

    Args:
        results_dir: Directory holding the result files.

    Returns:
        Sorted list of file paths.

    Raises:
        FileNotFoundError: If the directory does not exist.
        ValueError: If index.json is not a list of file names.
    """
    results_dir = Path(results_dir)
    if not results_dir.is_dir():
        raise FileNotFoundError(f"Verzeichnis {results_dir} existiert nicht.")

    index_path = results_dir / INDEX_FILE
    if index_path.exists():
        names = json.loads(read_text(index_path))
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ValueError(f"{index_path} muss eine Liste von Dateinamen enthalten.")
        if len(set(names)) != len(names):
            log.warning("Doppelte Eintraege in %s ignoriert.", index_path)
        paths = [results_dir / name for name in sorted(set(names))]
    else:
        paths = sorted(results_dir.glob(f'*{RESULT_SUFFIX}'))

    files: list[Path] = []
    for path in paths:
        if not is_evening_date(path.stem):
            log.warning("Datei %s uebersprungen: kein Datum im Namen.", path.name)
            continue
        files.append(path)
    return files


def read_evenings(results_dir: str | Path) -> list[tuple[str, str]]:
    """Read all evenings of a results directory.

    The evening date is the file name without extension.

    Args:
        results_dir: Directory holding the result files.

    Returns:
        List of (date, text) pairs in processing order.

    Raises:
        FileNotFoundError: If the directory or a listed file does not exist.
        ValueError: If index.json is malformed.
    """
    evenings: list[tuple[str, str]] = []
    for path in list_result_files(results_dir):
        evenings.append((path.stem, read_text(path)))
        log.debug("Gelesen: %s", path.name)

    log.info("%d Abende gelesen aus %s", len(evenings), results_dir)
    return evenings
