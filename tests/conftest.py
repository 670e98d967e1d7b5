import os
import subprocess
import tempfile

import httpx
import pytest

# Keep test runs from writing log files into the working tree.
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "selection-overlay-test-logs"))


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def recording_transport():
    """Factory fixture: recording_transport(handler) -> RecordingTransport."""
    return RecordingTransport


@pytest.fixture
def fake_runner():
    """Factory for subprocess.run stand-ins used by the selection reader.

    Each buffer is (returncode, stdout) or an exception instance to raise.
    """

    def factory(primary=(0, b""), clipboard=(0, b"")):
        calls = []

        def runner(cmd, **kwargs):
            calls.append(list(cmd))
            outcome = primary if "--primary" in cmd else clipboard
            if isinstance(outcome, BaseException):
                raise outcome
            returncode, stdout = outcome
            return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=b"")

        runner.calls = calls
        return runner

    return factory


@pytest.fixture
def openai_env():
    return {"OPENAI_API_KEY": "sk-test"}


@pytest.fixture
def gemini_key_env():
    return {"GEMINI_API_KEY": "gemini-secret-key"}
