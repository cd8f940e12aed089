"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from tlon_expose import client
from tlon_expose.cli import cli
from tlon_expose.transport import UrbitHttpError


class FakeTransport:
    """In-memory transport recording pokes and serving canned scries.

    Scry paths missing from ``scries`` raise a 404 UrbitHttpError, like a
    ship does. Set ``error`` to make every call raise it instead.
    """

    def __init__(self, scries=None, error=None):
        self.scries = dict(scries or {})
        self.error = error
        self.pokes = []
        self.scried = []

    def poke(self, app, mark, json):
        if self.error is not None:
            raise self.error
        self.pokes.append((app, mark, json))

    def scry(self, app, path):
        self.scried.append((app, path))
        if self.error is not None:
            raise self.error
        if path not in self.scries:
            raise UrbitHttpError(404, "Not Found", f"/~/scry/{app}{path}.json")
        return self.scries[path]


@pytest.fixture(autouse=True)
def clean_state(monkeypatch, tmp_path):
    """Isolate tests from ship settings in the environment and cwd."""
    for var in ("SHIP_URL", "SHIP_NAME", "SHIP_CODE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    client.reset()
    yield
    client.reset()


@pytest.fixture
def fake_transport():
    """Factory for FakeTransport instances."""

    def _make(scries=None, error=None):
        return FakeTransport(scries=scries, error=error)

    return _make


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args.

    Usage:
        result = invoke(["expand", "chat/~zod/general/1"])
        result = invoke(["--url", "http://localhost:8080", "--ship", "zod", "list"])
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke
