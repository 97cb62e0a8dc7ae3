"""Entry point: python -m rolo [FILE]

- No args / "-": read lines from stdin
- FILE:          read lines from FILE
"""

from __future__ import annotations

import logging
import sys

from rolo.config import load_config

USAGE = """\
Usage: python -m rolo [FILE]
  FILE   input lines (default: stdin)

Data lines:  <id>,<name>,<YYYY-MM-DD>,<address>,<note>
Directives:  %Q quit | %C count | %P n print | %W file write | %R file read
             %S 1-5 sort | %F word find"""

EXIT_BAD_INPUT = 2


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("-h", "--help"):
        print(USAGE)
        return 0

    try:
        config = load_config()
    except ValueError as e:
        print(f"Error: bad configuration: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    _setup_logging(config.log_level)

    from rolo.core import Rolo
    from rolo.session import Session

    rolo = Rolo(config)
    path = args[0] if args else "-"
    if path == "-":
        return Session(rolo, sys.stdin).run()

    try:
        fh = open(path, encoding=config.files.encoding)
    except OSError as e:
        print(f"Error: cannot open {path!r}: {e.strerror or e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    with fh:
        return Session(rolo, fh).run()


if __name__ == "__main__":
    raise SystemExit(main())
