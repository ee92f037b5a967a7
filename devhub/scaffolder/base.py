"""Shared generator plumbing.

Every template generator turns a project name and its feature options into a
``ScaffoldPlan``.  Planning is pure (no I/O), so plans can be inspected in
tests; ``write_plan`` later materialises a plan on disk.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Any, ClassVar

from devhub.models import (
    Command,
    FeatureOptions,
    GeneratedFile,
    NoOptions,
    ScaffoldPlan,
    Template,
)

from .fragments import FragmentTable
from .templates import TemplateRenderer, write_generated

logger = logging.getLogger(__name__)


class BaseGenerator:
    """Base class for the per-template generators."""

    template: ClassVar[Template]
    display_name: ClassVar[str]
    options_model: ClassVar[type[FeatureOptions]] = NoOptions
    fragment_table: ClassVar[FragmentTable | None] = None

    def __init__(
        self,
        renderer: TemplateRenderer,
        *,
        package_manager: str = "npm",
        year: int | None = None,
    ) -> None:
        self.renderer = renderer
        self.package_manager = package_manager
        self.year = year

    # -- Public API --------------------------------------------------------

    def coerce_options(
        self, options: FeatureOptions | Mapping[str, Any] | None
    ) -> FeatureOptions:
        """Validate *options* into this generator's options model."""
        if options is None:
            return self.options_model()
        if isinstance(options, self.options_model):
            return options
        if isinstance(options, FeatureOptions):
            raise TypeError(
                f"{self.display_name} generator expects {self.options_model.__name__}, "
                f"got {type(options).__name__}"
            )
        return self.options_model.model_validate(dict(options))

    def plan(self, project_name: str, options: FeatureOptions) -> ScaffoldPlan:
        """Build the ordered directory, file and command plan."""
        raise NotImplementedError

    # -- Helpers for subclasses --------------------------------------------

    def _context(self, project_name: str, options: FeatureOptions) -> dict[str, Any]:
        context: dict[str, Any] = {
            "project_name": project_name,
            "package_name": package_name(project_name),
            "year": self.year or datetime.now().year,
            "package_manager": self.package_manager,
            "options": options,
        }
        if self.fragment_table is not None:
            context["fragments"] = self.fragment_table.assemble(
                self.renderer, options, context
            )
        return context

    def _file(self, template_path: str, relative_path: str, context: dict[str, Any]) -> GeneratedFile:
        return self.renderer.render_file(template_path, relative_path, context)

    @staticmethod
    def _manifest(relative_path: str, data: dict[str, Any]) -> GeneratedFile:
        """Serialise a JSON manifest the way npm writes them (2-space indent)."""
        return GeneratedFile(relative_path, json.dumps(data, indent=2) + "\n")

    def _install(self) -> Command:
        return Command(
            command=f"{self.package_manager} install",
            label="Installing dependencies...",
            done_label="Dependencies installed",
        )


def package_name(project_name: str) -> str:
    """Return an npm-compatible package name (npm rejects upper case)."""
    return project_name.lower()


async def write_plan(plan: ScaffoldPlan, root: Path) -> list[Path]:
    """Create the plan's directories, then write its files one by one.

    Existing files at the same relative path are overwritten.  The first
    ``OSError`` aborts the remaining writes.

    Returns:
        The written file paths, in plan order.
    """
    await asyncio.to_thread(root.mkdir, parents=True, exist_ok=True)
    for directory in plan.directories:
        await asyncio.to_thread((root / directory).mkdir, parents=True, exist_ok=True)

    written: list[Path] = []
    for generated in plan.files:
        written.append(await write_generated(root, generated))
        logger.debug("wrote %s", generated.relative_path)
    return written
