"""CLI entry point for pairwise any-two agreement.

The command wires the collaborators together: observer CSV files are
discovered and loaded by :mod:`utils.io`, every pair is compared by
:class:`any_two.pipeline.AgreementPipeline`, and the results are printed by
:mod:`analysis_utils.reporting` and exported by
:mod:`analysis_utils.agreement_tables`.

Example
-------
Compare every observer file under ``data/`` with a 4 second tolerance::

    any_two --input data --output-dir results --threshold 4
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from analysis_utils.agreement_tables import write_agreement_exports
from analysis_utils.reporting import print_results
from any_two.errors import CodingError
from any_two.pipeline import AgreementPipeline
from utils.cli import (
    add_label_by_argument,
    add_observation_io_arguments,
    add_on_error_argument,
    add_threshold_argument,
    add_workers_argument,
)
from utils.io import assign_labels, discover_observation_files, load_observation_sets

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for the any-two command."""

    parser = argparse.ArgumentParser(
        prog="any_two",
        description=(
            "Compute any-two agreement between every pair of observers who "
            "coded the same timeline."
        ),
    )
    add_observation_io_arguments(parser)
    add_threshold_argument(parser)
    add_on_error_argument(parser)
    add_label_by_argument(parser)
    add_workers_argument(parser)
    parser.add_argument(
        "--no-export",
        action="store_true",
        help="Only print the per-pair summaries; do not write CSV files.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point used by the command-line interface.

    Returns
    -------
    int
        ``0`` on success, ``1`` when observation data is invalid under the
        abort policy, and ``2`` when the input cannot be used at all.
    """

    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        paths = discover_observation_files(args.input)
        labelled_paths = assign_labels(paths, args.label_by)
    except (FileNotFoundError, ValueError) as err:
        LOGGER.error("%s", err)
        return 2

    if len(labelled_paths) < 2:
        LOGGER.error(
            "Need at least two observer CSV files under %s; found %d.",
            args.input,
            len(labelled_paths),
        )
        return 2

    try:
        observation_sets = load_observation_sets(
            labelled_paths,
            threshold=args.threshold,
            on_error=args.on_error,
        )
    except CodingError:
        # Already logged with the offending file by load_observation_set.
        return 1
    except ValueError as err:
        LOGGER.error("%s", err)
        return 2

    pipeline = AgreementPipeline(
        observation_sets,
        workers=args.workers,
        show_progress=True,
    )
    results = pipeline.run()

    print_results(results)
    if not args.no_export:
        write_agreement_exports(results, args.output_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
