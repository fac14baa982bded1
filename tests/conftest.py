import os
import sys
from types import SimpleNamespace

import pytest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def lambda_context():
    return SimpleNamespace(
        aws_request_id="req-123",
        function_name="test-function",
        get_remaining_time_in_millis=lambda: 30000,
    )


@pytest.fixture
def completion_spy():
    calls = []

    def callback(error, result):
        calls.append((error, result))

    callback.calls = calls
    return callback
