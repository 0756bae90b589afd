"""
codex — ekstrakcja artykułów z kodeksów prawnych (PDF / TXT → JSON).

Użycie:
  codex <komenda> [opcje]

Komendy:
  extract   Wycina artykuły z dokumentu i zapisuje je do JSON.
  analyze   Diagnostyka tekstu: dopasowania reguł nagłówków, podgląd linii.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252, wymuszamy UTF-8, żeby akcenty
# w nagłówkach ("Artículo") były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from codex.commands import extract as cmd_extract
from codex.commands import analyze as cmd_analyze

VERSION = "1.2.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codex",
        description="codex — ekstrakcja artykułów z kodeksów prawnych.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"codex {VERSION}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_extract.add_parser(subparsers)
    cmd_analyze.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
