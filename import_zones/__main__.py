import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console

from import_zones.classifier import Ok, classify
from import_zones.config.loader import find_config, load_config
from import_zones.errors import ImportZonesError
from import_zones.host.scanner import iter_source_files
from import_zones.patterns.models import ImportPatternsConfig
from import_zones.rule import ImportPatternsRule, Report
from import_zones.tui import ReportConsoleUI
from import_zones.zones import collect_ruleset, matching_zones

FORMAT_VALUES = ["text", "json"]

LOG_FORMAT = "%(levelname)s [%(name)s]: %(message)s"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT
    )


def _config_from_obj(obj: Dict[str, Any]) -> ImportPatternsConfig:
    config_path: Optional[Path] = obj.get("config_path")
    if config_path is None:
        config_path = find_config(Path.cwd())
    if config_path is None:
        raise click.ClickException(
            "No config file found. Pass --config or add import-zones.yaml."
        )
    try:
        return load_config(config_path)
    except ImportZonesError as exc:
        raise click.ClickException(str(exc))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Zone config file (YAML or JSON).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output.")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool) -> None:
    """Check imports against zone-scoped allow/forbid patterns."""
    _configure_logging(verbose)
    ctx.obj = {"config_path": config_path}


@cli.command(help="Check source files for import violations.")
@click.argument(
    "paths", nargs=-1, type=click.Path(path_type=Path, exists=True)
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMAT_VALUES, case_sensitive=False),
    default="text",
    show_default=True,
)
@click.pass_obj
def check(obj: Dict[str, Any], paths: tuple[Path, ...], output_format: str) -> None:
    config = _config_from_obj(obj)
    rule = ImportPatternsRule(config)

    reports: list[Report] = []
    files_checked = 0
    for path in iter_source_files(paths or (Path.cwd(),)):
        files_checked += 1
        try:
            reports.extend(rule.lint_file(path.resolve()))
        except ImportZonesError as exc:
            raise click.ClickException(f"Fatal: {exc}")
        except UnicodeDecodeError as exc:
            raise click.ClickException(f"Cannot read {path}: {exc}")

    if output_format.lower() == "json":
        click.echo(json.dumps([report.as_dict() for report in reports], indent=2))
    else:
        ReportConsoleUI(Console()).render_reports(reports, files_checked=files_checked)

    if reports:
        raise click.exceptions.Exit(1)


@cli.command(help="List configured zones.")
@click.pass_obj
def zones(obj: Dict[str, Any]) -> None:
    config = _config_from_obj(obj)
    ReportConsoleUI(Console()).render_zones(list(config.zones))


@cli.command(help="Explain the verdict for one import in one file.")
@click.argument("filename")
@click.argument("import_target")
@click.pass_obj
def explain(obj: Dict[str, Any], filename: str, import_target: str) -> None:
    config = _config_from_obj(obj)
    rule = ImportPatternsRule(config)
    source = Path(filename)
    linted_filename = rule.normalize_filename(
        source.resolve() if source.exists() else filename
    )

    try:
        ruleset = collect_ruleset(linted_filename, config.zones)
        verdict = classify(ruleset, import_target, linted_filename)
    except ImportZonesError as exc:
        raise click.ClickException(f"Fatal: {exc}")

    ReportConsoleUI(Console()).render_explain(
        linted_filename,
        import_target,
        matching_zones(linted_filename, config.zones),
        ruleset,
        verdict,
    )
    if not isinstance(verdict, Ok):
        raise click.exceptions.Exit(1)


def main() -> int:
    try:
        # Without standalone mode click returns an Exit's code instead of raising.
        result = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
