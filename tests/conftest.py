"""Shared test fixtures."""

from pathlib import Path

import pytest

from league.ledger import LeagueLedger
from league.reader import read_evenings


DATA_DIR = Path(__file__).resolve().parent.parent / 'data'


@pytest.fixture(scope='session')
def results_dir() -> Path:
    """Path to the sample results directory."""
    return DATA_DIR / 'results'


@pytest.fixture(scope='session')
def sample_evenings(results_dir):
    """(date, text) pairs of the sample season."""
    return read_evenings(results_dir)


@pytest.fixture
def ledger() -> LeagueLedger:
    """A fresh, empty ledger."""
    return LeagueLedger()


@pytest.fixture
def season(sample_evenings) -> LeagueLedger:
    """A ledger with the sample season applied."""
    ledger = LeagueLedger()
    for date, text in sample_evenings:
        ledger.apply_evening_text(text, date)
    return ledger
