import logging
import time

import pytest

from lazy_sequence import Timing, stopwatch, time_call, timed


def slow(delay=0.01):
    time.sleep(delay)
    return "done"


def test_stopwatch_records_elapsed_time():
    with stopwatch("sleep") as timing:
        time.sleep(0.02)

    assert isinstance(timing, Timing)
    assert timing.label == "sleep"
    assert timing.success is True
    assert timing.error is None
    assert timing.elapsed_ms >= 15


def test_stopwatch_logs_duration(caplog):
    with caplog.at_level(logging.INFO, logger="lazy_sequence.stopwatch"):
        with stopwatch("quick"):
            pass

    assert "quick took" in caplog.text
    assert "ms" in caplog.text


def test_stopwatch_echo_prints_execution_time(capsys):
    with stopwatch(echo=True):
        pass

    assert "Execution took" in capsys.readouterr().out


def test_stopwatch_is_silent_without_echo(capsys):
    with stopwatch():
        pass

    assert capsys.readouterr().out == ""


def test_stopwatch_reraises_and_records_failure(caplog):
    with caplog.at_level(logging.ERROR, logger="lazy_sequence.stopwatch"):
        with pytest.raises(ValueError, match="boom"):
            with stopwatch("failing") as timing:
                raise ValueError("boom")

    assert timing.success is False
    assert timing.error == "boom"
    assert timing.elapsed_ms >= 0
    assert "Exception in failing: ValueError: boom" in caplog.text


def test_time_call_accepts_lambda():
    timing = time_call(lambda: slow(0.01), label="lambda")

    assert timing.label == "lambda"
    assert timing.result == "done"
    assert timing.elapsed_ms >= 5


def test_time_call_accepts_function_reference_and_arguments():
    timing = time_call(slow, 0.0)

    assert timing.label == "slow"
    assert timing.result == "done"


def test_time_call_propagates_errors():
    with pytest.raises(KeyError):
        time_call(lambda: {}["missing"])


def test_timed_decorator_passes_result_through(caplog):
    @timed("decorated")
    def add(a, b):
        return a + b

    with caplog.at_level(logging.INFO, logger="lazy_sequence.stopwatch"):
        assert add(2, 3) == 5

    assert add.__name__ == "add"
    assert "decorated took" in caplog.text
