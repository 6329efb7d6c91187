import logging
import math
import os
import sys
from typing import Any, Optional

import click

from cli.cli_exit_codes import ExitCode
from cli.cli_json_exporter import render_json_report
from contract.contract_differ import ContractDiffer
from contract.contract_loader import ContractLoader
from core.debug_logger import setup_logging
from core.diff_config import DEFAULT_LIMIT, DiffConfig, load_config
from core.exceptions import ContractLoadError, DiffConfigError
from report.diff_report_renderer import render_text_report

logger = logging.getLogger(__name__)

USAGE = "Usage: openapi-diff --before <file> --after <file> [--limit 200]"


def _print_usage(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(USAGE)
    ctx.exit(int(ExitCode.SUCCESS))


def parse_limit(raw: Optional[Any], default: int = DEFAULT_LIMIT) -> int:
    """
    Interpret a --limit value; anything that is not a non-negative number
    falls back to ``default``. Decimals are truncated.
    """
    if raw is None:
        return default
    try:
        number = float(raw)
    except (TypeError, ValueError):
        logger.warning(f"Invalid --limit value {raw!r}, using {default}")
        return default
    if not math.isfinite(number) or number < 0:
        logger.warning(f"Invalid --limit value {raw!r}, using {default}")
        return default
    return int(number)


def run_diff(config: DiffConfig) -> int:
    """Load both documents, diff them and emit the report. Returns the exit code."""
    before_doc = ContractLoader.load_from_file(config.before)
    after_doc = ContractLoader.load_from_file(config.after)

    differ = ContractDiffer(before_doc, after_doc,
                            sort_unordered=config.sort_unordered, explain=config.details)
    diff = differ.compute_diff()

    if config.format == "json":
        report = render_json_report(diff, config.before, config.after)
    else:
        report = render_text_report(diff, limit=config.limit,
                                    show_details=config.details, use_color=config.color)

    if config.output:
        os.makedirs(os.path.dirname(os.path.abspath(config.output)), exist_ok=True)
        with open(config.output, "w", encoding="utf-8") as f:
            f.write(report)
        click.echo(f"Diff report written to {config.output}")
    else:
        click.echo(report, nl=False)

    if config.fail_on_diff and not diff.is_empty:
        return int(ExitCode.DIFFERENCES_FOUND)
    return int(ExitCode.SUCCESS)


@click.command(name="openapi-diff", context_settings={"help_option_names": []})
@click.option("-h", "--help", is_flag=True, expose_value=False, is_eager=True,
              callback=_print_usage, help="Show usage and exit.")
@click.option("--before", "before_path", help="Old OpenAPI 3.1 JSON document")
@click.option("--after", "after_path", help="New OpenAPI 3.1 JSON document")
@click.option("--limit", "raw_limit", help="Maximum entries per report section (default 200)")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), help="Report format")
@click.option("--output", "-o", help="Write the report to this file instead of stdout")
@click.option("--details", is_flag=True, help="Show what changed inside each changed entry")
@click.option("--sort-unordered", is_flag=True, help="Ignore the order of 'required' and 'enum' arrays")
@click.option("--color", is_flag=True, help="Colorize section titles")
@click.option("--fail-on-diff", is_flag=True, help="Exit with code 3 when differences are found")
@click.option("--config", "config_path", help="YAML file with default settings")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging on stderr")
def diff_command(before_path, after_path, raw_limit, output_format, output, details,
                 sort_unordered, color, fail_on_diff, config_path, verbose):
    """Compare two OpenAPI documents by operations and component schemas."""
    setup_logging(verbose)

    try:
        config = load_config(config_path)
        config = config.merged({
            "before": before_path,
            "after": after_path,
            "limit": parse_limit(raw_limit, config.limit) if raw_limit is not None else None,
            "format": output_format,
            "output": output,
            "details": details or None,
            "sort_unordered": sort_unordered or None,
            "color": color or None,
            "fail_on_diff": fail_on_diff or None,
        })
        exit_code = run_diff(config)
    except (ContractLoadError, DiffConfigError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(int(ExitCode.FAILURE))

    sys.exit(exit_code)


def main():
    diff_command()


if __name__ == "__main__":
    main()
