"""Pytest configuration and shared fixtures for spsa_diff tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from spsa_diff.records import OptionRecord

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"

EXAMPLE_INPUT = """ASPIRATION_WINDOW, int, 6.0, 1.0, 50.0, 3.0, 0.002
RFP_MARGIN, int, 73.0, 40.0, 200.0, 10.0, 0.002
RFP_IMPROVING_MARGIN, int, 58.0, 30.0, 150.0, 10.0, 0.002
DO_DEEPER_DEPTH_MARGIN, int, 11.0, 1.0, 50.0, 2.0, 0.002
HISTORY_PRUNING_DEPTH, int, 7.0, 2.0, 14.0, 1.0, 0.002
HISTORY_PRUNING_MARGIN, int, -2500.0, -5000.0, 1000.0, 500.0, 0.002"""

EXAMPLE_OUTPUT = """ASPIRATION_WINDOW, 5
RFP_MARGIN, 73
RFP_IMPROVING_MARGIN, 58
DO_DEEPER_DEPTH_MARGIN, 11
HISTORY_PRUNING_DEPTH, 7
HISTORY_PRUNING_MARGIN, -2474"""


class FakeResponse:
    """Stand-in for requests.Response with just what fetch_page reads."""

    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def page_text() -> str:
    """Return the sample tuning page HTML."""
    return (FIXTURES_DIR / "tune_page.html").read_text(encoding="utf-8")


@pytest.fixture
def example_input() -> str:
    return EXAMPLE_INPUT


@pytest.fixture
def example_output() -> str:
    return EXAMPLE_OUTPUT


@pytest.fixture
def bounded_record() -> OptionRecord:
    """Return an input record with a 1..50 tuning range."""
    return OptionRecord(name="ASPIRATION_WINDOW", value=6.0, min=1.0, max=50.0, step=3.0)


@pytest.fixture
def serve_page(monkeypatch):
    """Patch requests.get to answer with the given body and status.

    Returns a function ``serve(text, status_code=200)``; the requested URLs
    are collected in its ``calls`` attribute.
    """
    import spsa_diff.page

    def serve(text: str, status_code: int = 200):
        def fake_get(url, *args, **kwargs):
            serve.calls.append(url)
            return FakeResponse(text, status_code)

        monkeypatch.setattr(spsa_diff.page.requests, "get", fake_get)
        return serve

    serve.calls = []
    return serve
