import json
from types import SimpleNamespace

import pytest

from namer.services.name_generator import NameGenerator

CODEX = {"name": "Codex", "tagline": "Write faster.", "description": "Evokes speed and code."}


class FakeResponses:
    """Stands in for client.responses; records every call."""

    def __init__(self, output_text=None, error=None):
        self.output_text = output_text
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(output_text=self.output_text)


class FakeClient:
    def __init__(self, output_text=None, error=None):
        self.responses = FakeResponses(output_text=output_text, error=error)


@pytest.fixture
def make_generator():
    def _make(output_text=None, error=None, count=6):
        client = FakeClient(output_text=output_text, error=error)
        return NameGenerator(client=client, model="test-model", count=count), client.responses

    return _make


@pytest.fixture
def codex_reply():
    return json.dumps([CODEX])
