"""Player name canonicalization and near-duplicate detection."""

import unicodedata
from itertools import combinations

from rapidfuzz.distance import JaroWinkler

DEFAULT_SIMILARITY_THRESHOLD = 0.90


def canonicalize_name(name: str) -> str:
    """Canonical display name: first letter upper, rest lower.

    This is the identity rule of the league. Names that differ only in
    case ("o'brien" / "O'BRIEN") are the same player.

    Args:
        name: Raw name from a result line.

    Returns:
        Canonical name.
    """
    name = name.strip()
    return name[:1].upper() + name[1:].lower()


def normalize_for_tolerant_comparison(text: str) -> str:
    """Normalize text for tolerant name comparison.

    Removes accents/diacritics via NFD decomposition, strips spaces,
    dots, apostrophes and underscores, then uppercases.

    Args:
        text: Raw name string.

    Returns:
        Normalized string for comparison.
    """
    decomposed = unicodedata.normalize('NFD', text)
    stripped = ''.join(ch for ch in decomposed if unicodedata.category(ch) != 'Mn')
    for ch in (' ', '.', "'", '_'):
        stripped = stripped.replace(ch, '')
    return stripped.upper()


def find_similar_names(
    names: list[str],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> list[tuple[str, str, float]]:
    """Find pairs of distinct names that are probably the same person.

    Canonicalization only merges case variants, so a typo in a result file
    silently creates a second player. Pairs whose normalized forms are
    identical score 1.0, others are compared with Jaro-Winkler.

    Args:
        names: Canonical player names.
        threshold: Minimum similarity (0-1) for a pair to be reported.

    Returns:
        List of (name_a, name_b, similarity), most similar first.
    """
    normalized = {n: normalize_for_tolerant_comparison(n) for n in names}
    pairs: list[tuple[str, str, float]] = []

    for a, b in combinations(sorted(normalized), 2):
        norm_a, norm_b = normalized[a], normalized[b]
        if norm_a == norm_b:
            sim = 1.0
        else:
            sim = JaroWinkler.similarity(norm_a, norm_b)
        if sim >= threshold:
            pairs.append((a, b, round(sim, 4)))

    pairs.sort(key=lambda p: (-p[2], p[0], p[1]))
    return pairs
