"""Komenda: codex extract — wycinanie artykułów z dokumentu do JSON."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from data_model.articles import RecordSequence
from pdf.extractor import ExtractionError, extract_text
from segmentation import (
    SHORT_TEXT_THRESHOLD,
    DetectionStrategy,
    SegmentationConfig,
    extract_with_report,
    normalize,
    run_strategy,
)
from segmentation.analysis import preview_lines

console = Console()

DEFAULT_OUTPUT = "codigo_penal.json"
DEFAULT_DEBUG_DUMP = "debug_texto_completo.txt"
_BODY_PREVIEW_CHARS = 100


# ---------------------------------------------------------------------------
# Zapis do JSON
# ---------------------------------------------------------------------------

def write_json(records: RecordSequence, json_path: Path) -> None:
    data = [r.to_json() for r in records]
    json_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    console.print(f"[green]JSON:[/green] {json_path}  ({len(records)} artykułów)")


def write_debug_dump(text: str, path: Path) -> None:
    path.write_text(text, encoding="utf-8")
    console.print(f"[dim]Pełny tekst zapisany w:[/dim] {path}")


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_table(records: RecordSequence, limit: int) -> None:
    if not records or limit <= 0:
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",         justify="right", no_wrap=True, style="dim")
    table.add_column("ARTÍCULO",  no_wrap=True, style="bold cyan")
    table.add_column("LEN",       justify="right", no_wrap=True)
    table.add_column("CONTENIDO", no_wrap=False, max_width=70)

    for i, record in enumerate(records[:limit], 1):
        body = record.body[:_BODY_PREVIEW_CHARS]
        if len(record.body) > _BODY_PREVIEW_CHARS:
            body += "…"
        table.add_row(str(i), escape(record.label), str(len(record.body)), escape(body))

    console.print()
    console.print(table)
    if len(records) > limit:
        console.print(f"  [dim]… i {len(records) - limit} kolejnych[/dim]\n")


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    src_path = Path(args.file)
    out_path = Path(args.output)

    try:
        config = SegmentationConfig.from_env()
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    console.print(f"Przetwarzanie [bold]{src_path}[/bold] …")

    try:
        with console.status("Konwersja dokumentu do tekstu…"):
            raw = extract_text(src_path)
    except ExtractionError as e:
        console.print(f"[red]Błąd konwersji:[/red] {e}")
        raise SystemExit(1)

    console.print(f"Tekst: [bold]{len(raw)}[/bold] znaków")
    if len(raw) < SHORT_TEXT_THRESHOLD:
        console.print("[yellow]Tekst wygląda na bardzo krótki, konwersja mogła się nie udać.[/yellow]")

    if args.show > 0:
        for line in preview_lines(raw):
            console.print(f"  [dim]{escape(line)}[/dim]")

    if args.debug_dump:
        write_debug_dump(raw, Path(args.debug_dump))

    cleaned = normalize(raw)

    with console.status("Wyszukiwanie artykułów…"):
        if args.strategy == "auto":
            records, report = extract_with_report(cleaned, config)
        else:
            records, report = run_strategy(cleaned, DetectionStrategy(args.strategy), config), None

    if report is not None and report.fallback_triggered:
        console.print(
            f"[yellow]Mało artykułów ({report.primary_count} < {report.threshold}), "
            f"próba metodą liniową: {report.alternate_count}.[/yellow]"
        )
        console.print(f"Wybrana strategia: [cyan]{report.strategy}[/cyan]")

    if not records:
        hint = f" Sprawdź {args.debug_dump}." if args.debug_dump else " Użyj --debug-dump, aby obejrzeć tekst."
        console.print(f"[red]Nie znaleziono artykułów.[/red]{hint}")
        return

    console.print(f"Znaleziono [bold]{len(records)}[/bold] artykułów.")
    _show_table(records, args.show)
    write_json(records, out_path)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "extract",
        help="Wycina artykuły z dokumentu i zapisuje je do JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Konwertuje dokument (PDF lub TXT) do tekstu, dzieli go na artykuły
("Artículo N.-", "Articulo N.-", "Art. N.-") i zapisuje listę
{"articulo": ..., "contenido": ...} do pliku JSON.

Przykłady:
  codex extract codigo_penal.pdf
  codex extract codigo_penal.pdf -o articulos.json
  codex extract codigo_penal.pdf --debug-dump --show 5
  codex extract codigo_penal.txt --strategy line
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Ścieżka do pliku .pdf lub .txt.",
    )
    p.add_argument(
        "--output", "-o",
        metavar="PLIK.json",
        default=DEFAULT_OUTPUT,
        help=f"Plik wyjściowy JSON (domyślnie: {DEFAULT_OUTPUT}).",
    )
    p.add_argument(
        "--debug-dump",
        metavar="PLIK",
        nargs="?",
        const=DEFAULT_DEBUG_DUMP,
        default=None,
        help=f"Zapisz pełny tekst po konwersji (domyślnie: {DEFAULT_DEBUG_DUMP}).",
    )
    p.add_argument(
        "--strategy",
        choices=["auto", *[s.value for s in DetectionStrategy]],
        default="auto",
        help="auto (wzorce + awaryjnie linie), pattern lub line (domyślnie: auto).",
    )
    p.add_argument(
        "--show",
        type=int,
        default=3,
        metavar="N",
        help="Pokaż pierwsze N artykułów w terminalu (domyślnie: 3, 0 = nie pokazuj).",
    )
    p.set_defaults(func=run)
