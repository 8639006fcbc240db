import json
import logging
from decimal import Decimal, ROUND_DOWN

import pytest
from click.testing import CliRunner

from commands import basket_commands
from commands.basket_commands import basket
from shared.constants import EnvKeys


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(basket_commands, "configure_logging", lambda level=None: None)


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, *args, env=None):
    return runner.invoke(basket, ["--env", "testing", *args], env=env)


def test_examples(runner):
    result = invoke(runner, "examples")

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "Acme Widget Co - Shopping Basket Examples",
        "",
        "B01, G01: $37.85",
        "R01, R01: $54.37",
        "R01, G01: $60.85",
        "B01, B01, R01, R01, R01: $98.27",
    ]


def test_total(runner):
    result = invoke(runner, "total", "r01", "R01")

    assert result.exit_code == 0
    assert result.output.strip() == "Total: $54.37"


def test_total_empty_basket(runner):
    result = invoke(runner, "total")

    assert result.exit_code == 0
    assert result.output.strip() == "Total: $4.95"


def test_total_breakdown(runner):
    result = invoke(runner, "total", "--breakdown", "R01", "R01")

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "Subtotal: $65.90",
        "Discount: $16.475",
        "Delivery: $4.95",
        "Total: $54.37",
    ]


def test_total_breakdown_lines_add_up_to_total(runner):
    result = invoke(runner, "total", "--breakdown", "B01", "B01", "R01", "R01", "R01")

    amounts = {
        label: Decimal(value.lstrip("$"))
        for label, value in (line.split(": ") for line in result.output.splitlines())
    }
    exact = amounts["Subtotal"] - amounts["Discount"] + amounts["Delivery"]

    assert result.exit_code == 0
    assert exact == Decimal("98.275")
    assert exact.quantize(Decimal("0.01"), rounding=ROUND_DOWN) == amounts["Total"]


def test_total_json(runner):
    result = invoke(runner, "total", "--json", "R01", "G01")

    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "success": True,
        "items": ["R01", "G01"],
        "subtotal": "57.90",
        "discount": "0",
        "delivery": "2.95",
        "total": "60.85",
    }


def test_total_unknown_code(runner):
    result = invoke(runner, "total", "R01", "INVALID")

    assert result.exit_code == 1
    assert "Product not found: INVALID" in result.output


def test_total_unknown_code_json(runner):
    result = invoke(runner, "total", "--json", "INVALID")

    assert result.exit_code == 1
    assert json.loads(result.output.strip().splitlines()[-1])["code"] == "product_not_found"


def test_catalog(runner):
    result = invoke(runner, "catalog")

    assert result.exit_code == 0
    assert "R01  Red Widget" in result.output
    assert "$7.95" in result.output
    assert "Buy one R01, get the second half price" in result.output


def test_check_config_ok(runner):
    result = invoke(runner, "check-config")

    assert result.exit_code == 0
    assert "Configuration OK (testing)" in result.output


def test_check_config_reports_issues(runner):
    result = runner.invoke(
        basket,
        ["--env", "development", "check-config"],
        env={EnvKeys.DELIVERY_RULES: "abc", EnvKeys.HALF_PRICE_CODES: "R01"},
    )

    assert result.exit_code == 1
    assert "Invalid delivery rule" in result.output


def test_misconfigured_environment_fails_cleanly(runner):
    result = runner.invoke(
        basket,
        ["--env", "development", "examples"],
        env={EnvKeys.CATALOG: "broken"},
    )

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


@pytest.fixture
def real_logging(monkeypatch):
    from logging_config import LAYER_LOGGERS, configure_logging

    monkeypatch.setattr(basket_commands, "configure_logging", configure_logging)
    loggers = [logging.getLogger(name) for name in LAYER_LOGGERS] + [logging.getLogger()]
    saved = [(logger, logger.level, logger.propagate, list(logger.handlers)) for logger in loggers]
    yield
    for logger, level, propagate, handlers in saved:
        logger.setLevel(level)
        logger.propagate = propagate
        logger.handlers = handlers


@pytest.mark.parametrize("environment, expected", [
    ("development", logging.DEBUG),
    ("production", logging.INFO),
])
def test_environment_log_level_applies_to_layer_loggers(runner, real_logging, environment, expected):
    logging.getLogger("domain").setLevel(logging.NOTSET)

    result = runner.invoke(
        basket,
        ["--env", environment, "total", "R01"],
        env={EnvKeys.LOG_LEVEL: None, EnvKeys.LOG_LEVEL_DOMAIN: None},
    )

    assert result.exit_code == 0
    assert logging.getLogger("domain").level == expected
