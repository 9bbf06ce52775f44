"""Command entry point: sets up logging, prints version info and opens the window."""

from __future__ import annotations

import argparse
import json
import logging

from ghupdate.home import Home
from ghupdate.utils import create_dir_if_not_exists

VERSION = "0.0.1"
AUTHOR = "hly"
LOG_DIR = "update"
LOG_FILE = "update/update.log"

log = logging.getLogger("ghupdate")


def version_document(version: str, author: str) -> str:
    """Return the version information as indented JSON with sorted keys."""
    return json.dumps(
        {"version": version, "author": author},
        indent=4,
        sort_keys=True,
        ensure_ascii=False,
    )


def _setup_logging() -> None:
    create_dir_if_not_exists(LOG_DIR)
    handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-5s %(name)s: %(message)s")
    )
    log.addHandler(handler)
    log.setLevel(logging.DEBUG)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="update", description="Check for and install program updates.")
    parser.parse_args(argv)

    _setup_logging()
    log.info("start program.")
    home = Home()
    log.info("version: %s", VERSION)
    print(version_document(VERSION, AUTHOR))
    home.show()
    log.info("program exit.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())