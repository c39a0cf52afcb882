"""
Тесты для CLI (demo, bench)
"""

import json
import logging

import pytest
from typer.testing import CliRunner

from src.bench.cli import app
from src.core.domain import get_rational_config
from src.core.math import GcdStrategy


@pytest.fixture(autouse=True)
def restore_global_state():
    """CLI настраивает root logger — восстанавливаем"""
    handlers = logging.root.handlers[:]
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestDemo:
    """Тесты для команды demo"""

    def test_demo_output(self, runner) -> None:
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0, result.output

        lines = result.stdout.splitlines()
        assert "Rational Number: -1/5" in lines
        assert "Numerator: -1 Denominator: 5" in lines
        assert "Pair: -1 5" in lines
        assert "Harmonic sum H(6): 49/20" in lines
        assert "Inverted: 20/49 <nil>" in lines
        assert "Inverted equals H(6): False" in lines
        assert "Inverted equals 6/0: False" in lines
        assert "6/0 < -1/5: False" in lines
        assert "6/0 is int: False" in lines
        assert "-1/5 * 6/0: -6/0" in lines
        assert "-1/5 / 6/0: 0/30 <nil>" in lines

    def test_demo_reports_errors_without_raising(self, runner) -> None:
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0
        assert "invert 0/3: 0/3 error: numerator of 0/3 is 0, so it has no inverse" in result.stdout
        assert "-1/5 / 0/1: -1/5 error:" in result.stdout
        assert "make 1/0: 0/0 error:" in result.stdout

    def test_gcd_option(self, runner) -> None:
        result = runner.invoke(app, ["--gcd", "trial_division", "demo"])
        assert result.exit_code == 0
        assert "Harmonic sum H(6): 49/20" in result.stdout
        assert "GCD strategy: trial_division" in result.stdout
        # Стратегия действует только внутри команды
        assert get_rational_config().gcd_strategy is GcdStrategy.EUCLID

    def test_default_gcd_strategy(self, runner) -> None:
        result = runner.invoke(app, ["demo"])
        assert "GCD strategy: euclid" in result.stdout

    def test_invalid_log_level(self, runner) -> None:
        result = runner.invoke(app, ["--log-level", "LOUD", "demo"])
        assert result.exit_code != 0


class TestBench:
    """Тесты для команды bench"""

    def test_text_report(self, runner) -> None:
        result = runner.invoke(app, ["bench", "--size", "20", "--seed", "3"])
        assert result.exit_code == 0, result.output

        lines = [line for line in result.stdout.splitlines() if line]
        assert len(lines) == 3
        assert lines[0].startswith("Sorting for the list of 20 integers took ")
        assert lines[1].startswith("Sorting for the list of 20 strings took ")
        assert lines[2].startswith("Sorting for the list of 20 rational numbers took ")

    def test_json_report(self, runner) -> None:
        result = runner.invoke(app, ["bench", "--size", "15", "--seed", "9", "--json"])
        assert result.exit_code == 0, result.output

        data = json.loads(result.stdout)
        assert data["size"] == 15
        assert data["seed"] == 9
        assert all(t["is_sorted"] for t in data["timings"])

    def test_negative_size_rejected(self, runner) -> None:
        result = runner.invoke(app, ["bench", "--size", "-1"])
        assert result.exit_code != 0
