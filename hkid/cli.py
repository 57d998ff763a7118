"""
cli.py
------
Command-line interface for the hkid toolkit.

Entry point: ``hkid``

Commands
--------
* ``validate``  — parse one or more numbers and report their status.
* ``check``     — verify a candidate check digit for a bare number.
* ``format``    — re-render a number in another layout.
* ``generate``  — print random, checksum-correct numbers.
* ``describe``  — show what a number's prefix denotes.
* ``prefixes``  — list the defined prefixes.
* ``scan``      — validate an HKID column of a CSV file.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional, Tuple

import click

from hkid import __version__
from hkid.core.config import DEFAULT_CONFIG, HKIDConfig, load_config
from hkid.core.errors import HKIDError
from hkid.core.formats import Format
from hkid.core.number import HKIDNumber
from hkid.core.result_schema import ParseStatus
from hkid.core.validation import parse_hkid, validate_check_digit
from hkid.generation.generator import HKIDGenerator
from hkid.ingestion.column_scan import HKIDColumnScanner
from hkid.registry.prefixes import DEFINED_PREFIXES

_STYLE_CHOICES = [fmt.label.replace("_", "-") for fmt in Format]


# ---------------------------------------------------------------------------
# Helpers — rendering
# ---------------------------------------------------------------------------

def _status_style(status: ParseStatus) -> str:
    """Return a styled status label."""
    colours = {
        ParseStatus.VALID: "green",
        ParseStatus.INVALID_FORMAT: "red",
        ParseStatus.INVALID_CHECK_DIGIT: "yellow",
    }
    return click.style(status.value.upper(), fg=colours[status], bold=True)


def _fail(message: str) -> None:
    click.echo(click.style(f"✗  {message}", fg="red"), err=True)
    sys.exit(1)


def _divider(width: int = 60) -> str:
    return click.style("─" * width, fg="bright_black")


def _config(ctx: click.Context) -> HKIDConfig:
    return ctx.obj["config"]


def _resolve_style(ctx: click.Context, style: Optional[str]) -> Format:
    return Format.from_name(style) if style else _config(ctx).format


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------

@click.group()
@click.version_option(version=__version__, prog_name="hkid")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.option(
    "--config", "config_path", type=click.Path(exists=True, dir_okay=False),
    help="YAML configuration file.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Optional[str]):
    """hkid — Hong Kong Identity Card number toolkit."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = DEFAULT_CONFIG
    if config_path:
        try:
            config = load_config(config_path)
        except (OSError, ValueError) as exc:
            _fail(f"Could not load config: {exc}")
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


# ---------------------------------------------------------------------------
# Single-number commands
# ---------------------------------------------------------------------------

@cli.command()
@click.argument("numbers", nargs=-1, required=True)
@click.option(
    "--output", "output_format",
    type=click.Choice(["pretty", "json"], case_sensitive=False),
    default="pretty", show_default=True,
    help="Output format.",
)
@click.pass_context
def validate(ctx: click.Context, numbers: Tuple[str, ...], output_format: str):
    """Parse each NUMBER and report whether it is a valid HKID number."""
    fmt = _config(ctx).format
    results = [parse_hkid(number) for number in numbers]

    if output_format == "json":
        click.echo(json.dumps(
            [r.to_dict(fmt) for r in results], indent=2, ensure_ascii=False
        ))
    else:
        for result in results:
            line = f"  {result.input:<14} {_status_style(result.status)}"
            if result.ok:
                line += f"  {result.number.format(fmt)}"
            else:
                line += click.style(f"  {result.error}", fg="bright_black")
            click.echo(line)

    if not all(r.ok for r in results):
        sys.exit(1)


@cli.command()
@click.argument("number")
@click.argument("check_digit")
def check(number: str, check_digit: str):
    """Verify CHECK_DIGIT against a NUMBER given without its check digit."""
    if validate_check_digit(number, check_digit.upper()):
        click.echo(click.style(f"✓  {number.upper()}({check_digit.upper()}) is valid.", fg="green"))
        return
    click.echo(click.style(f"✗  {number} / {check_digit} is not valid.", fg="red"))
    sys.exit(1)


@cli.command(name="format")
@click.argument("number")
@click.option(
    "--style", type=click.Choice(_STYLE_CHOICES, case_sensitive=False),
    default=None, help="Output layout (defaults to the configured one).",
)
@click.pass_context
def format_number(ctx: click.Context, number: str, style: Optional[str]):
    """Re-render NUMBER in another layout."""
    try:
        hkid_number = HKIDNumber(number)
    except HKIDError as exc:
        _fail(str(exc))
    click.echo(hkid_number.format(_resolve_style(ctx, style)))


@cli.command()
@click.argument("number")
@click.option("--chinese", is_flag=True, default=False, help="Traditional Chinese description.")
def describe(number: str, chinese: bool):
    """Describe what the prefix of NUMBER denotes."""
    try:
        hkid_number = HKIDNumber(number)
        description = hkid_number.get_prefix_description(localized=chinese)
    except HKIDError as exc:
        _fail(str(exc))
    click.echo(f"{click.style(hkid_number.prefix, fg='cyan', bold=True)}  {description}")


# ---------------------------------------------------------------------------
# Registry and generation
# ---------------------------------------------------------------------------

@cli.command()
@click.option("--chinese", is_flag=True, default=False, help="Traditional Chinese descriptions.")
def prefixes(chinese: bool):
    """List the defined HKID prefixes."""
    for code, descriptor in DEFINED_PREFIXES.items():
        text = descriptor.tc_description if chinese else descriptor.description
        click.echo(f"  {click.style(code, fg='cyan', bold=True):<4} {text}")


@cli.command()
@click.option("-n", "--count", default=1, show_default=True, type=click.IntRange(min=0))
@click.option("--any-prefix", is_flag=True, default=False, help="Allow any one- or two-letter prefix.")
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
@click.option(
    "--style", type=click.Choice(_STYLE_CHOICES, case_sensitive=False),
    default=None, help="Output layout (defaults to the configured one).",
)
@click.pass_context
def generate(ctx: click.Context, count: int, any_prefix: bool, seed: Optional[int], style: Optional[str]):
    """Print COUNT random, checksum-correct HKID numbers."""
    config = _config(ctx)
    generator = HKIDGenerator(seed=seed if seed is not None else config.seed)
    only_defined = config.only_defined_prefix and not any_prefix
    fmt = _resolve_style(ctx, style)
    for number in generator.generate_many(count, only_defined_prefix=only_defined):
        click.echo(number.format(fmt))


# ---------------------------------------------------------------------------
# scan command
# ---------------------------------------------------------------------------

@cli.command()
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
@click.option("--column", default=None, help="Column holding HKID numbers (defaults to the configured one).")
@click.option(
    "--output", "output_format",
    type=click.Choice(["pretty", "json"], case_sensitive=False),
    default="pretty", show_default=True,
    help="Output format.",
)
@click.pass_context
def scan(ctx: click.Context, filepath: str, column: Optional[str], output_format: str):
    """
    Validate every HKID number in a CSV column.

    \b
    FILEPATH  Path to the CSV file to scan.
    """
    scanner = HKIDColumnScanner(config=_config(ctx))
    try:
        results = scanner.scan_csv(filepath, column=column)
    except KeyError as exc:
        _fail(str(exc.args[0]))
    except (OSError, ValueError) as exc:
        _fail(f"Could not load file: {exc}")
    summary = scanner.summarize(results)

    if output_format == "json":
        payload = {
            "summary": summary,
            "rows": results.astype(object).where(results.notna(), None).to_dict(orient="records"),
        }
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False, default=str))
    else:
        _print_scan_report(filepath, results, summary)

    if summary["valid"] != summary["total"]:
        sys.exit(1)


def _print_scan_report(filepath: str, results, summary: dict) -> None:
    """Render a human-readable scan report to stdout."""
    divider = _divider()
    click.echo(f"\n{divider}")
    click.echo(click.style("  HKID COLUMN SCAN REPORT", bold=True, fg="bright_white"))
    click.echo(divider)
    click.echo(f"  Source              : {filepath}")
    click.echo(f"  Rows                : {summary['total']:,}")
    click.echo(f"  Valid               : {summary['valid']:,} ({summary['valid_ratio']:.1%})")
    click.echo(f"  Invalid format      : {summary['invalid_format']:,}")
    click.echo(f"  Invalid check digit : {summary['invalid_check_digit']:,}")
    click.echo(f"  Undefined prefix    : {summary['undefined_prefix']:,}")

    failures = results[results["status"] != ParseStatus.VALID.value]
    if not failures.empty:
        click.echo(f"\n{divider}")
        click.echo(click.style("  REJECTED ROWS", bold=True, fg="bright_white"))
        click.echo(divider)
        for idx, row in failures.iterrows():
            status = ParseStatus(row["status"])
            click.echo(f"  [{idx:>4}]  {str(row['input']):<14} {_status_style(status)}")

    click.echo(f"\n{divider}\n")
