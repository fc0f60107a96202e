"""
nolintlint CLI
==============

The main entry point for the nolintlint command line.
Lints directive comments in source files and reports issues.
"""

import sys
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from pydantic_settings import SettingsError
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from nolintlint import __version__
from nolintlint.directives import (
    Linter,
    LinterConfig,
    Needs,
    load_linter_config,
    save_linter_config,
)
from nolintlint.reporting import render_json, render_text
from nolintlint.shared.domain.exceptions import ConfigurationError, NolintlintError, SourceLoadError
from nolintlint.shared.infrastructure.config import Settings, get_settings
from nolintlint.shared.infrastructure.logging import configure_logging, get_logger
from nolintlint.source import iter_source_files, load_comment_groups

app = typer.Typer(
    name="nolintlint",
    help="Check that //nolint directives are machine-readable, specific and explained",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)
logger = get_logger(__name__)


def _split(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def _fail(message: str) -> None:
    err_console.print(message, markup=False, emoji=False, soft_wrap=True)
    raise typer.Exit(1)


def _load_settings() -> Settings:
    try:
        return get_settings()
    except (ValidationError, SettingsError) as e:
        _fail(f"failed: invalid settings: {e}")


def build_config(
    settings: Settings,
    config_file: Optional[Path] = None,
    explain: Optional[bool] = None,
    specific: Optional[bool] = None,
    machine: Optional[bool] = None,
    exclude: Optional[str] = None,
    directive: Optional[str] = None,
) -> LinterConfig:
    """
    Resolve the linter configuration.

    Precedence: command line flags > config file > settings (environment).

    Raises:
        ConfigurationError: If any layer holds invalid values
    """
    if config_file is not None and not config_file.exists():
        raise ConfigurationError(f"config file not found: {config_file}", context={"path": str(config_file)})

    config = load_linter_config(
        config_path=config_file or Path(settings.config_file),
        defaults=settings.to_linter_config(),
    )

    needs = config.needs
    for flag, bit in ((explain, Needs.EXPLANATION), (specific, Needs.SPECIFIC), (machine, Needs.MACHINE)):
        if flag is True:
            needs |= bit
        elif flag is False:
            needs &= ~bit

    return LinterConfig(
        directives=tuple(_split(directive)) if directive is not None else config.directives,
        excludes=frozenset(_split(exclude)) if exclude is not None else config.excludes,
        needs=Needs(needs),
    )


@app.command()
def lint(
    paths: Optional[List[str]] = typer.Argument(None, help="Files, directories or dir/... patterns (default: .)"),
    set_exit_status: bool = typer.Option(
        False, "--set-exit-status", help="Set exit status to 1 if any issues are found"
    ),
    explain: Optional[bool] = typer.Option(
        None, "--explain/--no-explain", help="Require explanation for directives [default: on]"
    ),
    specific: Optional[bool] = typer.Option(
        None, "--specific/--no-specific", help="Require specific linters for directives [default: on]"
    ),
    machine: Optional[bool] = typer.Option(
        None, "--machine/--no-machine", help="Require machine-readable directives [default: off]"
    ),
    exclude: Optional[str] = typer.Option(
        None, "--exclude", help="Comma-separated linters that don't require explanations"
    ),
    directive: Optional[str] = typer.Option(
        None, "--directive", help="Comma-separated list of directives [default: nolint]"
    ),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to .nolintlint.yaml"),
    output_format: str = typer.Option("text", "--format", "-f", help="Output format: text or json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Lint directive comments in the given sources.
    """
    if output_format not in ("text", "json"):
        _fail(f"failed: unknown output format {output_format!r}")

    settings = _load_settings()

    configure_logging("DEBUG" if verbose else settings.log_level, settings.log_format)

    try:
        config = build_config(settings, config_file, explain, specific, machine, exclude, directive)
        linter = Linter(config)
    except NolintlintError as e:
        logger.debug("configuration_failed", error=str(e), **e.context)
        _fail(f"failed: {e}")

    try:
        files = list(iter_source_files(paths or [], settings.source_extensions))
        issues = linter.run_many(load_comment_groups(path) for path in files)
    except SourceLoadError as e:
        _fail(f"Could not load sources: {e}")

    logger.info("lint_completed", files=len(files), issues=len(issues))

    if output_format == "json":
        console.print(render_json(issues), markup=False, emoji=False, soft_wrap=True)
    else:
        for line in render_text(issues):
            err_console.print(line, markup=False, emoji=False, soft_wrap=True)

    if set_exit_status and issues:
        raise typer.Exit(1)


@app.command()
def init(
    path: Path = typer.Option(Path("."), "--path", "-p", help="Project root"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing config file"),
) -> None:
    """
    Write a .nolintlint.yaml with the current defaults.
    """
    settings = _load_settings()
    target = path / settings.config_file
    if target.exists() and not force:
        _fail(f"{target} already exists (use --force to overwrite)")

    try:
        save_linter_config(settings.to_linter_config(), config_path=target)
    except (NolintlintError, OSError) as e:
        _fail(f"failed: {e}")

    console.print(f"[green]✓[/green] Wrote {target}")


@app.command()
def version() -> None:
    """Show nolintlint version info."""
    table = Table(show_header=False, box=None)
    table.add_row("nolintlint", f"[bold green]v{__version__}[/bold green]")
    table.add_row("Python", sys.version.split()[0])
    table.add_row("Platform", sys.platform)

    console.print(Panel(table, title="[bold blue]nolintlint[/bold blue]", expand=False))


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
