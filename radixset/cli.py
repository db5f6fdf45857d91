"""Command-line driver: load a dictionary into a radix tree set and verify it."""

from __future__ import annotations

import argparse
import logging
import time

from radixset.constants import LOG_FORMAT, LOGGER_NAME
from radixset.dictionary import Dictionary, DictionaryError

log = logging.getLogger(LOGGER_NAME)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radixset",
        description="Insert every line of a dictionary into a radix tree set, then look each one up",
    )
    parser.add_argument("dictionary", help="Path to a newline-separated word list")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging and tree validation")
    return parser


def run(dictionary: Dictionary, verbose: bool = False) -> None:
    """Load then verify, logging how long each phase took."""
    t0 = time.time()
    dictionary.load()
    log.info("Insert phase took %.2fs", time.time() - t0)

    if verbose:
        tree = dictionary.tree
        tree.validate()
        log.debug("Tree holds %s keys in %s nodes", f"{tree.size():,}", f"{tree.node_count():,}")

    t0 = time.time()
    dictionary.verify()
    log.info("Find phase took %.2fs", time.time() - t0)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        run(Dictionary(args.dictionary), verbose=args.verbose)
    except (DictionaryError, OSError) as exc:
        log.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
