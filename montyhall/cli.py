"""
montyhall/cli.py - Monty Hall CLI

Subcommands:
  - play: run a batch and show the proportion table
  - trial: play one paired trial
  - replicate: independent batches on spawned random streams
  - config: run a batch described by a JSON/YAML config file

Exit codes:
  - 0: success
  - 2: invalid input (bad count, bad config, missing file)
"""

import json
import logging
import sys
from statistics import mean

import click
import yaml
from rich.console import Console

from .batch import run_batch, run_config, run_replicates
from .constants import DEFAULT_CONFIDENCE, DEFAULT_N_GAMES, ROUND_DIGITS, STRATEGIES
from .errors import InvalidArgument
from .report import (
    export_report,
    format_table,
    proportion_table,
    render_rich,
    summarize,
)
from .receipts import write_receipt_jsonl
from .rng import make_rng
from .trial import play_game
from .types_config import load_config

logger = logging.getLogger(__name__)

console = Console()


def print_error(message: str) -> None:
    """Print an error message with red X."""
    console.print(f"[red]✗[/red] {message}")


def _fail(message: str, output: str) -> None:
    if output == "json":
        click.echo(json.dumps({"error": message}))
    else:
        print_error(message)
    sys.exit(2)


def _append_receipts(reports, path: str) -> None:
    with open(path, "a") as fh:
        for report in reports:
            write_receipt_jsonl(report.receipt, fh)
    logger.info("Appended %d receipt(s) to %s", len(reports), path)


def _show(report, output: str, confidence: float, digits: int) -> None:
    if output == "json":
        click.echo(export_report(report, confidence=confidence))
    else:
        click.echo(format_table(proportion_table(report, digits)))
        console.print(render_rich(report, confidence, digits))


# --- Click group ---

@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
def cli(verbose: bool) -> None:
    """Monty Hall stay/switch simulation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


# --- play ---

@cli.command("play")
@click.option("--games", "-n", default=DEFAULT_N_GAMES, show_default=True, type=int,
              help="Number of games")
@click.option("--seed", "-s", default=None, type=int, help="Random seed")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich")
@click.option("--raw", type=click.Path(), help="Write the per-trial table as CSV")
@click.option("--receipts", type=click.Path(), help="Append the batch receipt to a JSONL file")
def play_cmd(games: int, seed, output: str, raw, receipts) -> None:
    """Play N games under both strategies."""
    try:
        report = run_batch(games, seed=seed)
    except InvalidArgument as e:
        _fail(str(e), output)

    if raw:
        report.to_frame().to_csv(raw, index=False)
        logger.info("Wrote %d rows to %s", 2 * report.n_games, raw)
    if receipts:
        _append_receipts([report], receipts)
    _show(report, output, DEFAULT_CONFIDENCE, ROUND_DIGITS)


# --- trial ---

@cli.command("trial")
@click.option("--seed", "-s", default=None, type=int, help="Random seed")
def trial_cmd(seed) -> None:
    """Play a single game, both strategies."""
    click.echo(play_game(make_rng(seed)).to_string(index=False))


# --- replicate ---

@cli.command("replicate")
@click.option("--games", "-n", default=DEFAULT_N_GAMES, show_default=True, type=int)
@click.option("--replicates", "-r", default=5, show_default=True, type=int)
@click.option("--seed", "-s", default=None, type=int, help="Root seed")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich")
@click.option("--receipts", type=click.Path(), help="Append each batch receipt to a JSONL file")
def replicate_cmd(games: int, replicates: int, seed, output: str, receipts) -> None:
    """Run independent batches and compare their win rates."""
    try:
        reports = run_replicates(games, replicates, seed=seed)
    except InvalidArgument as e:
        _fail(str(e), output)

    if receipts:
        _append_receipts(reports, receipts)

    rates = [
        {s.value: r.win_proportion(s) for s in STRATEGIES}
        for r in reports
    ]
    means = {s.value: mean(rate[s.value] for rate in rates) for s in STRATEGIES}

    if output == "json":
        click.echo(json.dumps({"n_games": games, "replicates": rates, "mean": means}, indent=2))
        return

    for i, rate in enumerate(rates):
        console.print(f"#{i + 1}: stay={rate['stay']:.2f} switch={rate['switch']:.2f}")
    console.print(f"[bold]mean[/bold]: stay={means['stay']:.2f} switch={means['switch']:.2f}")


# --- config ---

@cli.command("config")
@click.argument("config_path", type=click.Path())
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich")
def config_cmd(config_path: str, output: str) -> None:
    """Run a batch from a JSON/YAML config file."""
    try:
        config = load_config(config_path)
        report = run_config(config)
    except FileNotFoundError:
        _fail(f"Config file not found: {config_path}", output)
    except (ValueError, yaml.YAMLError) as e:
        _fail(str(e), output)

    if output == "json":
        click.echo(json.dumps({
            "config": config.to_dict(),
            "summary": summarize(report, config.confidence),
        }, indent=2))
    else:
        _show(report, output, config.confidence, config.round_digits)


def main() -> int:
    """Console entry point."""
    try:
        cli(standalone_mode=False)
        return 0
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except click.ClickException as e:
        e.show()
        return 2
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0


if __name__ == "__main__":
    sys.exit(main())
