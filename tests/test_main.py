"""Tests for the process entry point."""

import pytest

import main


@pytest.fixture
def no_dotenv(monkeypatch):
    monkeypatch.setattr(main, "load_dotenv", lambda: False)


def test_missing_token_exits_before_serving(monkeypatch, no_dotenv):
    built = []
    monkeypatch.delenv("WEBFLOW_API_TOKEN", raising=False)
    monkeypatch.setattr(main, "build_server", lambda settings: built.append(settings))

    with pytest.raises(SystemExit) as excinfo:
        main.main()

    assert excinfo.value.code == 1
    assert built == []


def test_runs_stdio_transport(monkeypatch, no_dotenv):
    runs = []

    class FakeServer:
        def run(self, transport):
            runs.append(transport)

    monkeypatch.setenv("WEBFLOW_API_TOKEN", "secret")
    monkeypatch.delenv("WEBFLOW_API_TIMEOUT", raising=False)
    monkeypatch.setattr(main, "build_server", lambda settings: FakeServer())

    main.main()

    assert runs == ["stdio"]


def test_startup_failure_exits_nonzero(monkeypatch, no_dotenv):
    def broken(settings):
        raise RuntimeError("cannot bind")

    monkeypatch.setenv("WEBFLOW_API_TOKEN", "secret")
    monkeypatch.delenv("WEBFLOW_API_TIMEOUT", raising=False)
    monkeypatch.setattr(main, "build_server", broken)

    with pytest.raises(SystemExit) as excinfo:
        main.main()

    assert excinfo.value.code == 1
