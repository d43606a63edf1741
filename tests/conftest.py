import json

import httpx
import pytest

from cdnetworks_purge.models.inputs import MappingInputProvider


class RecordingReporter:
    def __init__(self):
        self.lines: list[str] = []
        self.outputs: dict[str, str] = {}
        self.summaries: list[tuple[str, list[tuple[str, str]]]] = []
        self.failures: list[str] = []

    def info(self, message):
        self.lines.append(message)

    def set_output(self, name, value):
        self.outputs[name] = value

    def write_summary(self, heading, rows):
        self.summaries.append((heading, rows))

    def set_failed(self, message):
        self.failures.append(message)


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def inputs():
    return {
        "api-user": "test-user",
        "api-key": "test-key",
        "domain-id": "test-domain",
        "target": "staging",
        "file-urls": "https://example.com/file1.txt",
        "action": "invalidate",
    }


@pytest.fixture
def provider(inputs):
    return MappingInputProvider(inputs)


@pytest.fixture
def sent():
    """Requests seen by the mock transport."""
    return []


@pytest.fixture
def make_transport(sent):
    """Builds a transport answering every request with one canned response."""

    def factory(status_code=200, body=None):
        return _json_transport(sent, status_code, body)

    return factory


def _json_transport(sent, status_code=200, body=None):
    if body is None:
        body = {
            "purgeId": "test-purge-id-123",
            "status": "pending",
            "message": "Purge request submitted",
        }

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(request)
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, content=json.dumps(body).encode("utf-8"))

    return httpx.MockTransport(handler)


@pytest.fixture
def transport(sent):
    return _json_transport(sent)
