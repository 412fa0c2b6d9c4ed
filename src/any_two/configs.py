"""Default settings shared by the any-two agreement tools."""

from __future__ import annotations

import string

DEFAULT_THRESHOLD_SECONDS = 4

ON_ERROR_ABORT = "abort"
ON_ERROR_SKIP = "skip"
ON_ERROR_POLICIES = (ON_ERROR_ABORT, ON_ERROR_SKIP)
DEFAULT_ON_ERROR = ON_ERROR_ABORT

LABEL_BY_LETTER = "letter"
LABEL_BY_STEM = "stem"
LABEL_BY_CHOICES = (LABEL_BY_LETTER, LABEL_BY_STEM)

# Observation sets are named A, B, C, ... in sorted file order.
OBSERVER_LABELS = tuple(string.ascii_uppercase)

SECONDS_PER_DAY = 24 * 60 * 60
LAST_SECOND_OF_DAY = SECONDS_PER_DAY - 1

CODE_DELIMITER = "/"
