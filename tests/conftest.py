"""Shared pytest fixtures for the DevHub test suite.

Provides reusable fixtures for:
- The packaged template renderer and a fixed copyright year
- A recording reporter
- Configurations that never touch the network or the package manager
- A mocked command runner
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from devhub.config import Config
from devhub.models import ProjectRequest, Template
from devhub.reporter import Reporter
from devhub.scaffolder.templates import TemplateRenderer

FIXED_YEAR = 2024


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def renderer() -> TemplateRenderer:
    """The renderer over the packaged templates."""
    return TemplateRenderer()


@pytest.fixture
def year() -> int:
    return FIXED_YEAR


# ---------------------------------------------------------------------------
# Reporter
# ---------------------------------------------------------------------------

class RecordingReporter(Reporter):
    """Reporter that keeps every event as ``(kind, message)``."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    @contextmanager
    def task(self, message: str, done: str | None = None) -> Iterator[None]:
        self.events.append(("task", message))
        yield
        if done:
            self.events.append(("done", done))

    def heading(self, message: str) -> None:
        self.events.append(("heading", message))

    def info(self, message: str) -> None:
        self.events.append(("info", message))

    def success(self, message: str) -> None:
        self.events.append(("success", message))

    def warning(self, message: str) -> None:
        self.events.append(("warning", message))

    def error(self, message: str) -> None:
        self.events.append(("error", message))

    def messages(self, kind: str) -> list[str]:
        return [message for k, message in self.events if k == kind]


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


# ---------------------------------------------------------------------------
# Configuration & requests
# ---------------------------------------------------------------------------

@pytest.fixture
def offline_config(tmp_path: Path) -> Config:
    """Config that writes below tmp_path and skips install, editor and update check."""
    return Config(
        projects_dir=tmp_path / "DevHub",
        run_install=False,
        open_editor=False,
        check_updates=False,
    )


@pytest.fixture
def make_request(tmp_path: Path):
    """Factory: ``make_request(Template.HTML, name="site")``."""

    def _make(template: Template, name: str = "demo-app") -> ProjectRequest:
        return ProjectRequest(
            name=name,
            template=template,
            target_directory=tmp_path / "DevHub" / name,
        )

    return _make


# ---------------------------------------------------------------------------
# Command runner
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_run_checked():
    """Patch the selector's ``run_checked`` so no package manager is invoked.

    Usage::

        async def test_install(mock_run_checked):
            ...
            mock_run_checked.assert_awaited_once()
    """
    with patch(
        "devhub.scaffolder.selector.run_checked",
        new=AsyncMock(return_value=""),
    ) as mocked:
        yield mocked
