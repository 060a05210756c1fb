import dataclasses
import logging
import re
import sys
from typing import NoReturn, Optional, Union

import click
from tabulate import tabulate

import humanbytes
from humanbytes.core.benchmark import BenchmarkResult, run_benchmarks
from humanbytes.core.converter import ByteConverter
from humanbytes.core.formatter import FormatOptions
from humanbytes.utils.config import Config

# Plain decimal notation only; no digit-grouping underscores
NUMBER_RE = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf|nan)",
    re.ASCII | re.IGNORECASE,
)


def to_number(text: str) -> Optional[Union[int, float]]:
    """Interpret command-line text as an int or float, or None if it is neither."""
    text = text.strip()
    if not NUMBER_RE.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        return float(text)


def build_options(
    config: Config,
    decimal_places: Optional[int] = None,
    fixed_decimals: bool = False,
    thousands_separator: Optional[str] = None,
    unit_separator: Optional[str] = None,
    unit: Optional[str] = None,
) -> Optional[FormatOptions]:
    """Overlay command-line flags on configured options; None means all defaults."""
    base = config.get_format_options() or FormatOptions()
    overrides = {
        "decimal_places": decimal_places,
        "fixed_decimals": True if fixed_decimals else None,
        "thousands_separator": thousands_separator,
        "unit_separator": unit_separator,
        "unit": unit,
    }
    options = dataclasses.replace(base, **{k: v for k, v in overrides.items() if v is not None})
    return None if options.is_default else options


def fail(message: str) -> NoReturn:
    click.echo(click.style(f"✗ Error: {message}", fg="red"), err=True)
    sys.exit(1)


def format_benchmark_row(result: BenchmarkResult) -> list:
    """Format a single row for the benchmark table."""
    return [
        result.group,
        result.name,
        f"{result.calls:,}",
        f"{result.total_ms:.2f}",
        f"{result.ops_per_sec:,}",
        f"{result.mean_us:.3f}",
        f"{result.p95_us:.3f}",
    ]


@click.group()
@click.version_option(version=humanbytes.__version__)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a YAML config file (default: .humanbytes/config.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Optional[str]) -> None:
    """humanbytes: convert byte counts to human-readable sizes and back."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
    ctx.obj = Config(config_path)


@cli.command("format")
@click.argument("value", required=True)
@click.option("--decimal-places", "-d", type=int, help="Digits after the decimal point")
@click.option("--fixed-decimals", "-f", is_flag=True, help="Keep trailing zeros")
@click.option("--thousands-separator", "-t", help="Separator between groups of three digits")
@click.option("--unit-separator", "-s", help="Separator between the number and the unit")
@click.option("--unit", "-u", help="Force a unit (B, KB, MB, GB, TB, PB)")
@click.pass_obj
def format_cmd(
    config: Config,
    value: str,
    decimal_places: Optional[int],
    fixed_decimals: bool,
    thousands_separator: Optional[str],
    unit_separator: Optional[str],
    unit: Optional[str],
) -> None:
    """Format a byte count, e.g. 1048576 -> 1MB."""
    try:
        number = to_number(value)
        if number is None:
            fail(f"not a number: {value}")
        options = build_options(
            config, decimal_places, fixed_decimals, thousands_separator, unit_separator, unit
        )
        result = ByteConverter.from_config(config).format(number, options)
    except Exception as e:
        fail(str(e))

    if result is None:
        fail(f"cannot format {value}")
    click.echo(result)


@cli.command("parse")
@click.argument("text", required=True)
@click.pass_obj
def parse_cmd(config: Config, text: str) -> None:
    """Parse a size string into bytes, e.g. "1 MB" -> 1048576."""
    try:
        result = ByteConverter.from_config(config).parse(text)
    except Exception as e:
        fail(str(e))

    if result is None:
        fail(f"cannot parse {text!r}")
    click.echo(result)


@cli.command("convert")
@click.argument("value", required=True)
@click.pass_obj
def convert_cmd(config: Config, value: str) -> None:
    """Format VALUE if it is a number, otherwise parse it."""
    try:
        number = to_number(value)
        converter = ByteConverter.from_config(config)
        if number is None:
            result = converter.convert(value)
        else:
            result = converter.convert(number, config.get_format_options())
    except Exception as e:
        fail(str(e))

    if result is None:
        fail(f"cannot convert {value!r}")
    click.echo(result)


@cli.command("bench")
@click.option("--iterations", "-n", type=click.IntRange(min=1), default=10000, show_default=True)
@click.option("--rounds", "-r", type=click.IntRange(min=1), default=3, show_default=True)
@click.option("--seed", type=int, default=0, show_default=True, help="Seed for random inputs")
@click.pass_obj
def bench_cmd(config: Config, iterations: int, rounds: int, seed: int) -> None:
    """Benchmark format and parse."""
    try:
        converter = ByteConverter.from_config(config)
        results = run_benchmarks(converter, iterations=iterations, rounds=rounds, seed=seed)
    except Exception as e:
        fail(str(e))

    click.echo(click.style("✓ Benchmark results:", fg="green"))
    click.echo(
        tabulate(
            [format_benchmark_row(result) for result in results],
            headers=["Group", "Benchmark", "Calls", "Total (ms)", "Ops/sec", "Mean (µs)", "P95 (µs)"],
            tablefmt="simple",
        )
    )

    click.echo()
    click.echo(click.style("✓ Cache statistics:", fg="green"))
    cache_rows = [
        [name, info.hits, info.misses, info.static_size, info.dynamic_size, info.max_entries]
        for name, info in converter.cache_info().items()
    ]
    click.echo(
        tabulate(
            cache_rows,
            headers=["Cache", "Hits", "Misses", "Static", "Dynamic", "Capacity"],
            tablefmt="simple",
        )
    )
