"""Run any-two matching over every pair of loaded observation sets."""

from __future__ import annotations

import itertools
import logging
from concurrent.futures import ProcessPoolExecutor
from typing import Iterator, List, Sequence, Tuple

from tqdm import tqdm

from any_two.matcher import AnyTwo, compare_pair
from any_two.observations import ObservationSet

LOGGER = logging.getLogger(__name__)


def _compare_pair_args(pair: Tuple[ObservationSet, ObservationSet]) -> AnyTwo:
    return compare_pair(*pair)


class AgreementPipeline:
    """Pairwise comparison of already-loaded observation sets.

    File reading and result export stay outside this class; it only turns a
    list of observation sets into one :class:`AnyTwo` per unordered pair.

    Parameters
    ----------
    observation_sets:
        Observation sets in the order their pairs should be reported.
    workers:
        Number of worker processes. ``1`` runs sequentially in-process.
    show_progress:
        Whether to display a :mod:`tqdm` progress bar.
    """

    def __init__(
        self,
        observation_sets: Sequence[ObservationSet],
        *,
        workers: int = 1,
        show_progress: bool = False,
    ) -> None:
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}.")
        names = [observation.name for observation in observation_sets]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(
                "Observation set names must be unique; duplicated: "
                + ", ".join(duplicates)
            )
        self.observation_sets = list(observation_sets)
        self.workers = workers
        self.show_progress = show_progress

    def pairs(self) -> Iterator[Tuple[ObservationSet, ObservationSet]]:
        """Yield every unordered pair in combination order."""

        return itertools.combinations(self.observation_sets, 2)

    def pair_count(self) -> int:
        count = len(self.observation_sets)
        return count * (count - 1) // 2

    def run(self) -> List[AnyTwo]:
        """Return one result per pair, ordered as :meth:`pairs` yields them."""

        pairs = list(self.pairs())
        LOGGER.info(
            "Comparing %d observation sets (%d pairs).",
            len(self.observation_sets),
            len(pairs),
        )
        if self.workers == 1 or len(pairs) <= 1:
            iterator = map(_compare_pair_args, pairs)
            return list(self._progress(iterator, len(pairs)))

        with ProcessPoolExecutor(max_workers=self.workers) as executor:
            # executor.map yields in submission order, keeping output stable.
            iterator = executor.map(_compare_pair_args, pairs)
            return list(self._progress(iterator, len(pairs)))

    def _progress(self, iterator, total: int):
        if not self.show_progress:
            return iterator
        return tqdm(iterator, total=total, desc="Comparing observers", unit="pair")
