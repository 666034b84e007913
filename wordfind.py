"""wordfind CLI: build a keyword index over a document list and query it.

Four commands: validate, index, keyword, query.
Uses typer for argument parsing and rich for formatted terminal output.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from wordcore.indexer import index_documents
from wordcore.searcher import TOP_K, search
from wordcore.store import KeywordIndex
from wordcore.text import extract_keyword, load_noise_words
from wordcore.validator import validate_sources

app = typer.Typer(help="wordfind: top-5 keyword search over a fixed set of documents.")
console = Console()

DEFAULT_DOCS_FILE = "docs.txt"
DEFAULT_NOISE_WORDS_FILE = "noisewords.txt"


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_index(docs_file: str, noise_words_file: str, documents_dir: str | None) -> tuple[KeywordIndex, dict]:
    try:
        return index_documents(docs_file, noise_words_file, documents_dir=documents_dir)
    except OSError as e:
        console.print(f"[red]Error: can't open {e.filename or e}: {e.strerror or e}[/red]")
        raise typer.Exit(code=2)


# ── validate ────────────────────────────────────────────────────────


@app.command()
def validate(
    docs_file: str = typer.Argument(
        DEFAULT_DOCS_FILE, envvar="WORDFIND_DOCS", help="File listing the documents to index"
    ),
    noise_words_file: str = typer.Argument(
        DEFAULT_NOISE_WORDS_FILE, envvar="WORDFIND_NOISE_WORDS", help="File listing the noise words"
    ),
    documents_dir: str | None = typer.Option(
        None, "--documents-dir", envvar="WORDFIND_DOCUMENTS_DIR", help="Directory holding the listed documents"
    ),
):
    """Check the document list and noise-word file before indexing."""
    passed, errors, warnings = validate_sources(docs_file, noise_words_file, documents_dir)

    if passed:
        console.print(
            Panel("[bold green]✓ Validation passed[/bold green]", border_style="green")
        )
        for warning in warnings:
            console.print(f"  [yellow]![/yellow] {warning}")
    else:
        console.print(
            Panel("[bold red]✗ Validation failed[/bold red]", border_style="red")
        )
        for err in errors:
            console.print(f"  [red]✗[/red] {err}")
        raise typer.Exit(code=1)


# ── index ───────────────────────────────────────────────────────────


@app.command()
def index(
    docs_file: str = typer.Argument(
        DEFAULT_DOCS_FILE, envvar="WORDFIND_DOCS", help="File listing the documents to index"
    ),
    noise_words_file: str = typer.Argument(
        DEFAULT_NOISE_WORDS_FILE, envvar="WORDFIND_NOISE_WORDS", help="File listing the noise words"
    ),
    documents_dir: str | None = typer.Option(
        None, "--documents-dir", envvar="WORDFIND_DOCUMENTS_DIR", help="Directory holding the listed documents"
    ),
    show: bool = typer.Option(False, "--show", help="Print every keyword with its occurrences"),
):
    """Index the listed documents and summarize the result."""
    with console.status("[bold blue]Indexing documents..."):
        kw_index, summary = _build_index(docs_file, noise_words_file, documents_dir)

    table = Table(title="Indexing Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Documents listed", str(summary["documents"]))
    table.add_row("Documents indexed", str(summary["indexed"]))
    table.add_row("Missing", str(len(summary["missing"])))
    table.add_row("Duplicates", str(len(summary["duplicates"])))
    table.add_row("Keywords", str(summary["keywords"]))
    table.add_row("Noise words", str(summary["noise_words"]))
    console.print(table)

    for document in summary["missing"]:
        console.print(f"[yellow]Can't open document {document}[/yellow]")

    if show:
        kw_table = Table(title="Keyword Index")
        kw_table.add_column("Keyword", style="cyan")
        kw_table.add_column("Occurrences")
        for keyword in kw_index.keywords():
            kw_table.add_row(keyword, " ".join(str(o) for o in kw_index.get(keyword)))
        console.print(kw_table)


# ── keyword ─────────────────────────────────────────────────────────


@app.command()
def keyword(
    token: str = typer.Argument(..., help="Word to normalize"),
    noise_words_file: str = typer.Argument(
        DEFAULT_NOISE_WORDS_FILE, envvar="WORDFIND_NOISE_WORDS", help="File listing the noise words"
    ),
):
    """Show the keyword a word is indexed under."""
    try:
        noise_words = load_noise_words(noise_words_file)
    except OSError as e:
        console.print(f"[red]Error: can't open {noise_words_file}: {e.strerror or e}[/red]")
        raise typer.Exit(code=2)

    result = extract_keyword(token, noise_words)
    if result is None:
        console.print(f'"{token}" is not a keyword')
    else:
        console.print(f'"{token}" → [bold]{result}[/bold]')


# ── query ───────────────────────────────────────────────────────────


@app.command()
def query(
    kw1: str = typer.Argument(..., help="First keyword (wins ties)"),
    kw2: str = typer.Argument(..., help="Second keyword"),
    docs_file: str = typer.Argument(
        DEFAULT_DOCS_FILE, envvar="WORDFIND_DOCS", help="File listing the documents to index"
    ),
    noise_words_file: str = typer.Argument(
        DEFAULT_NOISE_WORDS_FILE, envvar="WORDFIND_NOISE_WORDS", help="File listing the noise words"
    ),
    documents_dir: str | None = typer.Option(
        None, "--documents-dir", envvar="WORDFIND_DOCUMENTS_DIR", help="Directory holding the listed documents"
    ),
):
    """Show the top documents containing KW1 or KW2."""
    kw_index, _ = _build_index(docs_file, noise_words_file, documents_dir)
    results = search(kw1, kw2, kw_index, TOP_K)

    console.print(f'\n[bold]Query:[/bold] "{kw1}" OR "{kw2}"')
    console.print()

    if not results:
        console.print("No matching documents")
        return

    table = Table()
    table.add_column("#", style="dim", width=3)
    table.add_column("Document", style="cyan", min_width=20)
    table.add_column("Frequency", justify="right", width=10)
    table.add_column("Keyword", width=12)

    for i, r in enumerate(results, 1):
        table.add_row(str(i), r.document, str(r.frequency), r.keyword)

    console.print(table)
    console.print(f"\n{len(results)} results returned (top {TOP_K})")


if __name__ == "__main__":
    app()
