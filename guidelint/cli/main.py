"""GuideLint CLI – Typer multi-command application."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.panel import Panel

from guidelint.config.settings import ConfigError, GuideLintSettings, load_settings
from guidelint.core.checker import RULE_TYPES
from guidelint.core.engine import GuideLintEngine, LintResult
from guidelint.core.reporting import render_json, render_text
from guidelint.utils.logger import (
    configure_logging, console, create_panel, create_table, print_error, print_info, print_success,
)

__all__ = ["app"]

app = typer.Typer(
    name="guidelint",
    help="Style-guide checker for JavaScript and TypeScript sources.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

_FORMATS = ("text", "rich", "json")
_SEVERITY_COLOR = {"ERROR": "red", "WARNING": "yellow", "INFO": "cyan"}


def _load_settings(config: Path | None, search_dir: Path) -> GuideLintSettings:
    try:
        return load_settings(config_path=config, search_dir=search_dir)
    except ConfigError as exc:
        print_error(escape(str(exc)))
        raise typer.Exit(code=2)


def _search_dir(paths: list[Path]) -> Path:
    first = paths[0]
    return first if first.is_dir() else first.parent


@app.command()
def check(
    paths: list[Path] = typer.Argument(..., help="Files or directories to check"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to guidelint.yaml"),
    output_format: Optional[str] = typer.Option(None, "--format", "-F", help="Output format: text|rich|json"),
    jobs: Optional[int] = typer.Option(None, "--jobs", "-j", min=1, help="Worker threads (default: CPU count)"),
    disable: Optional[list[str]] = typer.Option(None, "--disable", "-D", help="Rule id to skip (repeatable)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Check source files against the style guide."""
    configure_logging(verbose)
    settings = _load_settings(config, _search_dir(paths))

    if output_format is not None:
        if output_format not in _FORMATS:
            print_error(f"Unknown format '{escape(output_format)}'; choose one of: {', '.join(_FORMATS)}")
            raise typer.Exit(code=2)
        settings.output_format = output_format
    if jobs is not None:
        settings.jobs = jobs
    if disable:
        known = {r.rule_id for r in RULE_TYPES}
        unknown = sorted(set(disable) - known)
        if unknown:
            print_error(f"Unknown rule id(s): {escape(', '.join(unknown))}")
            raise typer.Exit(code=2)
        settings.rules.disabled = sorted(set(settings.rules.disabled) | set(disable))

    try:
        engine = GuideLintEngine(settings)
    except ConfigError as exc:
        print_error(escape(str(exc)))
        raise typer.Exit(code=2)
    result = engine.run(paths)

    if settings.output_format == "json":
        typer.echo(render_json(result))
    elif settings.output_format == "rich":
        _print_rich_report(result)
    else:
        for line in render_text(result):
            typer.echo(line)
    raise typer.Exit(code=result.exit_code)


@app.command()
def rules() -> None:
    """List the available rules."""
    table = create_table(
        "GuideLint rules",
        [("Rule", "bold"), ("Description", "")],
        [[r.rule_id, escape(r.description)] for r in RULE_TYPES],
    )
    console.print(table)


def _print_rich_report(result: LintResult) -> None:
    if not result.has_violations:
        print_success(f"{len(result.files)} file(s) checked – no style violations found.")
        return

    for file_result in result.files:
        if not file_result.violations:
            continue
        console.print(Panel(
            f"[bold]{escape(file_result.path)}[/bold]  ({len(file_result.violations)} issue(s))",
            border_style="yellow", expand=True,
        ))
        for v in file_result.violations:
            style = _SEVERITY_COLOR.get(v.severity.value, "white")
            console.print(f"  [{style}]● {v.severity.value}[/{style}]  line {v.line}  [bold]{escape(v.rule_id)}[/bold]  {escape(v.message)}")
            if v.suggested_fix:
                console.print(f"    [dim]Suggested fix:[/dim] {escape(v.suggested_fix)}")
        console.print()

    summary = "  ".join(f"{rule_id}: {count}" for rule_id, count in result.counts_by_rule().items())
    console.print(create_panel(summary, title=f"{len(result.violations)} violation(s)", style="cyan"))
    print_info(f"{len(result.files)} file(s) checked.")


if __name__ == "__main__":
    app()
