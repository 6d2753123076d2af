import json
import math
from datetime import datetime, timezone

import pytest

from tools import InvocationRequest, OperationExecutor, TimeTools


@pytest.mark.parametrize(
    "name,args,text",
    [
        ("add", {"a": 2, "b": 3}, "2 + 3 = 5"),
        ("subtract", {"a": 2, "b": 3}, "2 - 3 = -1"),
        ("multiply", {"a": 4, "b": 2.5}, "4 × 2.5 = 10"),
        ("divide", {"a": 10, "b": 4}, "10 ÷ 4 = 2.5"),
        ("power", {"a": 2, "b": 10}, "2^10 = 1024"),
        ("sqrt", {"a": 16}, "√16 = 4"),
        ("factorial", {"n": 5}, "5! = 120"),
        ("factorial", {"n": 0}, "0! = 1"),
    ],
)
def test_success_text(executor, name, args, text):
    result = executor.execute(name, args)
    assert not result.is_error
    assert result.text == text


def test_divide_by_zero_is_failure(executor):
    result = executor.execute("divide", {"a": 10, "b": 0})
    assert result.is_error
    assert "zero" in result.text.lower()


def test_negative_sqrt_is_failure(executor):
    result = executor.execute("sqrt", {"a": -4})
    assert result.is_error
    assert "negative" in result.text


@pytest.mark.parametrize("n", [-1, 3.5])
def test_invalid_factorial_is_failure(executor, n):
    result = executor.execute("factorial", {"n": n})
    assert result.is_error
    assert "non-negative integers" in result.text


def test_factorial_above_configured_limit_is_failure(make_config):
    executor = OperationExecutor(make_config(FACTORIAL_LIMIT=20))
    assert executor.execute("factorial", {"n": 20}).text == "20! = 2432902008176640000"
    assert executor.execute("factorial", {"n": 21}).is_error


@pytest.mark.parametrize("n", [170, 171, 5000])
def test_large_factorial_is_not_a_failure(executor, n):
    result = executor.execute("factorial", {"n": n})
    assert not result.is_error
    assert result.text.startswith(f"{n}! = ")


def test_factorial_past_float_range_is_infinity(executor):
    assert executor.execute("factorial", {"n": 171}).text == "171! = Infinity"


def test_power_overflow_is_not_a_failure(executor):
    result = executor.execute("power", {"a": 10, "b": 400})
    assert not result.is_error
    assert result.text == "10^400 = Infinity"


def test_unknown_operation_is_failure(executor):
    result = executor.execute("modulo", {"a": 1, "b": 2})
    assert result.is_error
    assert result.text == "Error: unknown tool: modulo"


@pytest.mark.parametrize(
    "args",
    [
        {},
        {"a": 1},
        {"a": 1, "b": None},
        {"a": "1", "b": 2},
        {"a": True, "b": 2},
        {"a": [1], "b": 2},
    ],
)
def test_invalid_arguments_are_failures(executor, args):
    result = executor.execute("add", args)
    assert result.is_error
    assert "'a'" in result.text or "'b'" in result.text


def test_none_arguments(executor):
    assert executor.execute("add", None).is_error
    assert not executor.execute("get_operator_info", None).is_error


def test_extra_arguments_are_ignored(executor):
    assert executor.execute("add", {"a": 1, "b": 2, "c": 3}).text == "1 + 2 = 3"


def test_run_with_request(executor):
    result = executor.run(InvocationRequest("multiply", {"a": 6, "b": 7}))
    assert result.text == "6 × 7 = 42"


def test_unexpected_errors_become_failures(executor, monkeypatch):
    def boom(a, b):
        raise RuntimeError("boom")

    monkeypatch.setattr(executor.calculator, "add", boom)
    result = executor.execute("add", {"a": 1, "b": 2})
    assert result.is_error
    assert result.text == "Error: boom"


def test_operator_info(cfg):
    fixed = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    executor = OperationExecutor(cfg, time_tools=TimeTools(clock=lambda: fixed))

    result = executor.execute("get_operator_info", {})

    assert not result.is_error
    header, body = result.text.split("\n", 1)
    assert header == "Server info:"
    assert json.loads(body) == {
        "operatorName": "Ada Lovelace",
        "serverName": "mcp-calculator",
        "version": "1.0.1",
        "port": 9123,
        "startTime": "2024-01-02T03:04:05+00:00",
    }


def test_operator_info_default_port(make_config):
    info = OperationExecutor(make_config()).operator_info()
    assert info.port == 8000
    assert info.operator_name == "Ada Lovelace"


def test_sqrt_roundtrip(executor):
    result = executor.execute("sqrt", {"a": 2})
    value = float(result.text.split("= ")[1])
    assert math.isclose(value * value, 2)
