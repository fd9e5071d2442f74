"""
Command Line Interface for the Oulipo Engine.

Exit codes: 0 when the text satisfies the rule, 1 when it does not, 2 when the
command itself is misconfigured (bad letter, unknown preset, ...).
"""

import json
from typing import List, Optional

import typer
import uvicorn
from rich import print as rprint
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..config import get_settings
from ..core.service import OulipoService
from ..errors import InvalidConfigError, OulipoError
from ..logging_config import configure_logging
from ..schemas.results import ConstraintResult

app = typer.Typer(help="Oulipo Engine - constrained writing checks and generators")
console = Console()

_service: Optional[OulipoService] = None


def get_service() -> OulipoService:
    global _service
    if _service is None:
        _service = OulipoService()
    return _service


@app.callback()
def setup() -> None:
    """Configure logging before any command runs."""
    configure_logging(get_settings())


def _read_text(text: str) -> str:
    if text == "-":
        return typer.get_text_stream("stdin").read()
    return text


def _error_exit(error: OulipoError) -> typer.Exit:
    console.print(f"[bold red]❌ {error.code}:[/bold red] [red]{error.message}[/red]")
    return typer.Exit(code=2)


def _show_result(result: ConstraintResult, title: str) -> None:
    """Print a result panel, the violations table and the suggestions."""
    style = "bold green" if result.success else "bold red"
    status = "✅ Passed" if result.success else "❌ Failed"
    rprint(Panel.fit(f"{status}: {result.result or ''}", title=title, style=style))

    if result.violations:
        table = Table(title="Violations", show_header=True, header_style="bold magenta")
        table.add_column("Position", style="cyan", justify="right")
        table.add_column("Length", justify="right")
        table.add_column("Issue")
        table.add_column("Suggestion", style="dim")
        for violation in result.violations:
            table.add_row(
                str(violation.position),
                str(violation.length),
                violation.issue,
                violation.suggestion or "",
            )
        console.print(table)

    for suggestion in result.suggestions:
        console.print(f"  💡 {suggestion}")


def _run_check(
    service: OulipoService,
    rule: str,
    text: str,
    letter: str,
    vowel: Optional[str],
    end_words: List[str],
    config: Optional[str],
) -> ConstraintResult:
    if rule == "lipogram":
        return service.check_lipogram(text, letter)
    if rule == "univocalic":
        if not vowel:
            raise InvalidConfigError("--vowel is required for univocalic")
        return service.check_univocalic(text, vowel)
    if rule == "sestina":
        return service.check_sestina(text, end_words)
    if rule == "palindrome":
        return service.check_palindrome(text)
    if rule == "snowball":
        return service.check_snowball(text)
    if rule == "prisoners":
        return service.check_prisoners_constraint(text)

    try:
        parsed = json.loads(config) if config else {}
    except json.JSONDecodeError as e:
        raise InvalidConfigError(f"--config is not valid JSON: {e.msg}") from e
    return service.create_custom_constraint(rule, parsed).check(text)


@app.command()
def check(
    rule: str = typer.Argument(..., help="Constraint name, e.g. lipogram, univocalic, text_length"),
    text: str = typer.Argument(..., help="Text to check, or '-' to read stdin"),
    letter: str = typer.Option("e", "--letter", "-l", help="Forbidden letter for lipogram"),
    vowel: Optional[str] = typer.Option(None, "--vowel", help="Allowed vowel for univocalic"),
    end_word: Optional[List[str]] = typer.Option(
        None, "--end-word", "-w", help="Sestina end word (repeat six times)"
    ),
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help="JSON configuration for other registered constraints"
    ),
):
    """Check a text against one constraint."""
    text = _read_text(text)
    try:
        result = _run_check(get_service(), rule, text, letter, vowel, end_word or [], config)
    except OulipoError as e:
        raise _error_exit(e)

    _show_result(result, title=rule)
    if not result.success:
        raise typer.Exit(code=1)


@app.command()
def transform(
    text: str = typer.Argument(..., help="Text to transform, or '-' to read stdin"),
    offset: Optional[int] = typer.Option(None, "--offset", "-n", help="Dictionary offset (default 7)"),
):
    """Apply the N+7 transform to a text."""
    text = _read_text(text)
    if offset is None:
        offset = get_settings().default_n_plus_offset
    result = get_service().n_plus_7_transform(text, offset)

    console.print(result.result or "", markup=False)
    console.print(
        f"[dim]N+{offset}: {result.metadata['replacements_made']}"
        f"/{result.metadata['original_words']} words replaced[/dim]"
    )


@app.command()
def constraints():
    """List the registered constraint types."""
    table = Table(title="Available Constraints", show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Required config", style="green")

    for info in get_service().list_available_constraints():
        table.add_row(info.name, info.description, ", ".join(info.schema.get("required", [])))

    console.print(table)


@app.command()
def preset(
    name: str = typer.Argument(..., help="Preset name: strict, strict_writing, minimal, experimental"),
    text: str = typer.Argument(..., help="Text to check, or '-' to read stdin"),
):
    """Check a text against a preset workflow."""
    text = _read_text(text)
    try:
        outcome = get_service().check_with_preset(text, name)
    except OulipoError as e:
        raise _error_exit(e)

    table = Table(title=f"Preset: {name}", show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("Status")
    table.add_column("Result")
    table.add_column("Violations", justify="right")
    for i, result in enumerate(outcome.constraint_results, 1):
        table.add_row(
            str(i),
            "✅" if result.success else "❌",
            result.result or "",
            str(result.violation_count),
        )
    console.print(table)
    console.print(outcome.summary)

    if not outcome.success:
        raise typer.Exit(code=1)


@app.command()
def haiku(
    theme: Optional[str] = typer.Option(None, "--theme", "-t", help="nature, seasons, love or time"),
):
    """Generate a themed haiku."""
    theme = theme or get_settings().default_haiku_theme
    try:
        poem = get_service().generate_haiku(theme)
    except OulipoError as e:
        raise _error_exit(e)
    rprint(Panel.fit(poem, title=f"Haiku: {theme}", style="bold blue"))


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Host to bind the server to"),
    port: Optional[int] = typer.Option(None, help="Port to run the API server on"),
):
    """Run the HTTP API."""
    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port
    rprint(Panel.fit(f"🚀 Starting Oulipo Engine on http://{host}:{port}", style="bold blue"))
    uvicorn.run(
        "oulipo_engine.main:app",
        host=host,
        port=port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.api_workers,
    )


@app.command()
def version():
    """Show version information."""
    from .. import __version__
    rprint(Panel.fit(f"Oulipo Engine v{__version__}", style="bold green"))


def main():
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
