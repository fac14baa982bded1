import pytest

from lambda_pipeline.completion import Completion
from lambda_pipeline.errors import CompletionError


def test_completion_records_result():
    complete = Completion()
    complete(None, {"ok": True})

    assert complete.done
    assert complete.outcome() == {"ok": True}


def test_completion_raises_recorded_error():
    complete = Completion()
    error = RuntimeError("boom")
    complete(error)

    with pytest.raises(RuntimeError) as excinfo:
        complete.outcome()
    assert excinfo.value is error


def test_completion_forwards_to_callback(completion_spy):
    complete = Completion(completion_spy)
    complete(None, "value")

    assert completion_spy.calls == [(None, "value")]


def test_completion_rejects_second_call(completion_spy):
    complete = Completion(completion_spy)
    complete(None, "first")

    with pytest.raises(CompletionError):
        complete(None, "second")
    assert completion_spy.calls == [(None, "first")]


def test_outcome_before_completion_raises():
    with pytest.raises(CompletionError):
        Completion().outcome()
