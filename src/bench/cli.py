"""
CLI — демонстрация движка рациональных чисел и бенчмарк сортировки

Команды:
- demo: операции над Rational, включая сентинел 6/0 и ошибочные случаи
- bench: время insertion_sort для int, str и Rational

Ошибки операций печатаются, а не бросаются.
"""

import json
import logging
from typing import Optional

import typer

from src.bench.benchmark import DEFAULT_BENCH_SIZE, BenchmarkConfig, run_benchmark
from src.core.domain.rational import (
    Rational,
    RationalConfig,
    RationalResult,
    get_rational_config,
    make_rational,
    rational_config,
)
from src.core.math.harmonic import make_harmonic_sum
from src.core.math.number_theory import GcdStrategy

LOG = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Exact rational arithmetic demo and sort benchmark.")


def _format_result(result: RationalResult) -> str:
    error = "<nil>" if result.ok else f"error: {result.error}"
    return f"{result.value} {error}"


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level (DEBUG, INFO, ...)."),
    gcd: GcdStrategy = typer.Option(GcdStrategy.EUCLID, "--gcd", help="GCD strategy used for reduction."),
) -> None:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"unknown log level: {log_level}", param_hint="--log-level")

    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # Конфигурация действует только внутри вызванной команды
    ctx.obj = RationalConfig(gcd_strategy=gcd)
    LOG.debug("gcd strategy: %s", gcd.value)


@app.command()
def demo(ctx: typer.Context) -> None:
    """Walk through the Rational operations, printing every result."""
    with rational_config(ctx.obj or RationalConfig()):
        _run_demo()


def _run_demo() -> None:
    typer.echo(f"GCD strategy: {get_rational_config().gcd_strategy.value}")
    made = make_rational(-1, 5)
    if not made.ok:
        typer.echo(f"error: {made.error}")
        raise typer.Exit(code=1)

    r = made.value
    typer.echo(f"Rational Number: {r}")
    typer.echo(f"Numerator: {r.numerator} Denominator: {r.denominator}")
    num, denom = r.split()
    typer.echo(f"Pair: {num} {denom}")

    harmonic_sum = make_harmonic_sum(6)
    typer.echo(f"Harmonic sum H(6): {harmonic_sum}")

    inverted = harmonic_sum.invert()
    typer.echo(f"Inverted: {_format_result(inverted)}")
    typer.echo(f"Inverted equals H(6): {inverted.value.equal(harmonic_sum)}")

    sentinel = Rational(6, 0)
    typer.echo(f"Inverted equals {sentinel}: {inverted.value.equal(sentinel)}")
    typer.echo(f"Inverted as float: {inverted.value.to_float()}")
    typer.echo(f"{sentinel} < {r}: {sentinel.less_than(r)}")
    typer.echo(f"{sentinel} is int: {sentinel.is_int()}")
    typer.echo(f"{r} * {sentinel}: {r.multiply(sentinel)}")
    typer.echo(f"{r} / {sentinel}: {_format_result(r.divide(sentinel))}")
    typer.echo(f"{r} / 0/1: {_format_result(r.divide(Rational(0, 1)))}")
    typer.echo(f"invert 0/3: {_format_result(Rational(0, 3).invert())}")
    typer.echo(f"make 1/0: {_format_result(make_rational(1, 0))}")


@app.command()
def bench(
    ctx: typer.Context,
    size: int = typer.Option(DEFAULT_BENCH_SIZE, "--size", min=0, help="Length of each generated list."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible input data."),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
) -> None:
    """Time the insertion sort over integers, strings and rational numbers."""
    with rational_config(ctx.obj or RationalConfig()):
        report = run_benchmark(BenchmarkConfig(size=size, seed=seed))

    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2))
        return

    for timing in report.timings:
        typer.echo(timing.describe())


if __name__ == "__main__":
    app()
