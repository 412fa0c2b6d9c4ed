"""Centralized column names for the any-two CSV exports.

Import these constants instead of repeating string literals across the
export and reporting helpers so that headers stay consistent between
``results.csv``, the per-pair agreement tables, and ``all_agreements.csv``.
"""

from __future__ import annotations

# Raw observation rows (headerless CSV) ------------------------------------

RAW_COLUMN_COUNT = 3


# results.csv ---------------------------------------------------------------

RESULTS_FILENAME = "results.csv"

RESULTS_COLUMN_EVALUATIONS = "Evaluations"
RESULTS_COLUMN_ANY_TWO = "Any-Two"
RESULTS_COLUMN_AGREEMENTS = "Agreements"
RESULTS_COLUMN_DISAGREEMENTS = "Disagreements"
RESULTS_COLUMN_UNIQUE_A = "Unique A"
RESULTS_COLUMN_UNIQUE_B = "Unique B"
RESULTS_COLUMN_CODE_KAPPA = "Code Kappa"

RESULTS_COLUMNS = [
    RESULTS_COLUMN_EVALUATIONS,
    RESULTS_COLUMN_ANY_TWO,
    RESULTS_COLUMN_AGREEMENTS,
    RESULTS_COLUMN_DISAGREEMENTS,
    RESULTS_COLUMN_UNIQUE_A,
    RESULTS_COLUMN_UNIQUE_B,
    RESULTS_COLUMN_CODE_KAPPA,
]


# agreements_<A>-<B>.csv ----------------------------------------------------

PAIR_AGREEMENTS_FILENAME_TEMPLATE = "agreements_{first}-{second}.csv"

AGREEMENT_COLUMN_CODE = "CODE"
AGREEMENT_COLUMN_START_TEMPLATE = "Start time - {name}"
AGREEMENT_COLUMN_END_TEMPLATE = "End time - {name}"


# all_agreements.csv --------------------------------------------------------

ALL_AGREEMENTS_FILENAME = "all_agreements.csv"

ALL_AGREEMENTS_COLUMN_START = "Start time"
ALL_AGREEMENTS_COLUMN_END = "End time"

ALL_AGREEMENTS_COLUMNS = [
    AGREEMENT_COLUMN_CODE,
    ALL_AGREEMENTS_COLUMN_START,
    ALL_AGREEMENTS_COLUMN_END,
]
