"""Komenda: codex analyze — diagnostyka tekstu przed ekstrakcją."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box
from rich.markup import escape

from pdf.extractor import ExtractionError, extract_text
from segmentation import AnalysisReport, analyze, normalize

console = Console(width=200)


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_report(report: AnalysisReport) -> None:
    console.print(f"Tekst: [bold]{report.total_chars}[/bold] znaków")
    if report.is_short:
        console.print("[yellow]Tekst wygląda na bardzo krótki, konwersja mogła się nie udać.[/yellow]")

    if report.preview:
        console.print(Panel(
            "\n".join(f"[dim]{i:>2}[/dim] {escape(line)}" for i, line in enumerate(report.preview, 1)),
            title="Podgląd pierwszych linii",
            expand=False,
        ))

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("REGUŁA",     style="cyan", no_wrap=True)
    table.add_column("WARIANT",    no_wrap=True)
    table.add_column("DOPASOWAŃ",  justify="right")
    table.add_column("PRZYKŁADY",  max_width=90)
    for stats in report.rules:
        table.add_row(
            stats.name,
            stats.keyword,
            str(stats.matches),
            "\n".join(escape(e) for e in stats.examples) or "[dim]-[/dim]",
        )
    console.print(table)
    console.print(
        f"  [dim]łącznie dopasowań: {report.total_matches}, "
        f"linii-kandydatów (strategia liniowa): {report.line_candidates}[/dim]\n"
    )


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    src_path = Path(args.file)
    try:
        raw = extract_text(src_path)
    except ExtractionError as e:
        console.print(f"[red]Błąd konwersji:[/red] {e}")
        raise SystemExit(1)

    report = analyze(normalize(raw), max_examples=args.examples)
    _show_report(report)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "analyze",
        help="Diagnostyka tekstu: dopasowania reguł nagłówków, podgląd linii.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pokazuje, ile razy każda reguła nagłówka artykułu pasuje do tekstu,
przykładowe dopasowania oraz pierwsze linie tekstu po konwersji.

Przykłady:
  codex analyze codigo_penal.pdf
  codex analyze codigo_penal.txt --examples 5
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Ścieżka do pliku .pdf lub .txt.",
    )
    p.add_argument(
        "--examples", "-e",
        type=int,
        default=3,
        metavar="N",
        help="Liczba przykładowych dopasowań na regułę (domyślnie: 3).",
    )
    p.set_defaults(func=run)
