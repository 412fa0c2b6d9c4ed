"""Code-level Cohen's kappa over the matched units of one pair.

Single points carry no code from the other observer and are left out. The
remaining agreement and disagreement units form a square code-by-code
contingency table with rows for the pair's first observer and columns for the
second.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np
from statsmodels.stats.inter_rater import cohens_kappa

from any_two.codes import VALID_CODES
from any_two.matcher import AnyTwo

LOGGER = logging.getLogger(__name__)


def build_code_table(result: AnyTwo) -> Tuple[np.ndarray, List[str]]:
    """Return the contingency table of matched code pairs and its code labels.

    Parameters
    ----------
    result:
        Any-two result for a single pair.

    Returns
    -------
    tuple[numpy.ndarray, list[str]]
        Square integer table indexed by the returned codes, which are the
        vocabulary codes seen on either side in vocabulary order.
    """

    pairs: List[Tuple[str, str]] = []
    for unit in result.points:
        if unit.is_single_point:
            continue
        first, second = unit.oriented(result.first.name)
        pairs.append((first.codes[0], second.codes[0]))

    seen = {code for pair in pairs for code in pair}
    codes = [code for code in VALID_CODES if code in seen]
    index = {code: position for position, code in enumerate(codes)}
    table = np.zeros((len(codes), len(codes)), dtype=int)
    for code_a, code_b in pairs:
        table[index[code_a], index[code_b]] += 1
    return table, codes


def kappa_from_table(table: Sequence[Sequence[int]]) -> Optional[float]:
    """Compute Cohen's kappa for a square contingency table.

    Returns ``None`` when the table is empty or the expected chance agreement
    is 1, where kappa is undefined.
    """

    counts = np.asarray(table, dtype=float)
    total = counts.sum()
    if counts.size == 0 or total <= 0:
        return None

    expected = float((counts.sum(axis=1) * counts.sum(axis=0)).sum() / (total * total))
    if 1.0 - expected <= 0.0:
        return None

    try:
        kappa_value = cohens_kappa(counts, return_results=False)
    except (TypeError, ValueError) as err:
        LOGGER.debug("Cohen's kappa failed for table %s: %s", counts.tolist(), err)
        return None

    try:
        return float(kappa_value)
    except (TypeError, ValueError):
        return None


def code_kappa(result: AnyTwo) -> Optional[float]:
    """Return Cohen's kappa over the matched codes of ``result`` or ``None``."""

    table, _ = build_code_table(result)
    return kappa_from_table(table)
