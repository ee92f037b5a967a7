"""Template selection and project creation.

``Scaffolder`` maps each ``Template`` to its generator, asks the generator
for a plan, writes the plan under the request's target directory and then
runs the plan's commands there, one after the other.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from devhub.config import Config
from devhub.models import FeatureOptions, ProjectRequest, ScaffoldPlan, Template
from devhub.reporter import Reporter
from devhub.runner import CommandError, run_checked

from .base import BaseGenerator, write_plan
from .cfx_gen import FIVEM, REDM, CfxGenerator
from .electron_gen import ElectronGenerator
from .html_gen import HtmlGenerator
from .react_gen import ReactGenerator
from .templates import TemplateRenderer
from .vue_gen import VueGenerator

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for scaffolding failures."""


class UnknownTemplateError(ScaffoldError):
    """Raised when no generator is registered for a template value."""

    def __init__(self, template: object) -> None:
        self.template = template
        super().__init__(f"Unknown template: {template!r}")


class GenerationError(ScaffoldError):
    """Raised when writing files or running a command fails.

    The underlying ``OSError`` or ``CommandError`` is chained as
    ``__cause__``.
    """

    def __init__(self, template: Template, message: str) -> None:
        self.template = template
        super().__init__(f"{template.value}: {message}")


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------


class Scaffolder:
    """Dispatches a ``ProjectRequest`` to exactly one generator."""

    def __init__(
        self,
        config: Config | None = None,
        reporter: Reporter | None = None,
        renderer: TemplateRenderer | None = None,
        year: int | None = None,
    ) -> None:
        self.config = config or Config()
        self.reporter = reporter or Reporter()
        self.renderer = renderer or TemplateRenderer()
        pm = self.config.package_manager
        self.generators: dict[Template, BaseGenerator] = {
            Template.HTML: HtmlGenerator(self.renderer, package_manager=pm, year=year),
            Template.REACT: ReactGenerator(self.renderer, package_manager=pm, year=year),
            Template.ELECTRON: ElectronGenerator(self.renderer, package_manager=pm, year=year),
            Template.FIVEM: CfxGenerator(self.renderer, FIVEM, package_manager=pm, year=year),
            Template.REDM: CfxGenerator(self.renderer, REDM, package_manager=pm, year=year),
            Template.VUE: VueGenerator(
                self.renderer,
                package_manager=pm,
                year=year,
                install=self.config.install_vue,
            ),
        }

    def generator_for(self, template: Template | str) -> BaseGenerator:
        """Return the generator registered for *template*."""
        try:
            key = Template(template)
        except ValueError:
            raise UnknownTemplateError(template) from None
        generator = self.generators.get(key)
        if generator is None:
            raise UnknownTemplateError(template)
        return generator

    def plan(
        self,
        request: ProjectRequest,
        options: FeatureOptions | Mapping[str, Any] | None = None,
    ) -> ScaffoldPlan:
        """Build the plan for *request* without touching the filesystem."""
        generator = self.generator_for(request.template)
        return generator.plan(request.name, generator.coerce_options(options))

    async def create(
        self,
        request: ProjectRequest,
        options: FeatureOptions | Mapping[str, Any] | None = None,
    ) -> Path:
        """Generate the project described by *request*.

        Returns:
            The project root directory.

        Raises:
            UnknownTemplateError: If the template has no generator.
            GenerationError: If a file cannot be written or a command fails.
        """
        generator = self.generator_for(request.template)
        plan = generator.plan(request.name, generator.coerce_options(options))
        root = request.target_directory
        logger.info(
            "creating %s project %r in %s (%d files, %d commands)",
            request.template.value, request.name, root,
            len(plan.files), len(plan.commands),
        )

        try:
            with self.reporter.task(
                f"Creating {generator.display_name} project structure...",
                "Project structure created",
            ):
                await write_plan(plan, root)
        except OSError as exc:
            raise GenerationError(request.template, f"could not write project files: {exc}") from exc

        if not self.config.run_install:
            if plan.commands:
                logger.info("skipping %d command(s): run_install is off", len(plan.commands))
            return root

        for command in plan.commands:
            try:
                with self.reporter.task(command.label, command.done_label):
                    await run_checked(
                        command.command, cwd=root, timeout=self.config.command_timeout
                    )
            except CommandError as exc:
                raise GenerationError(request.template, str(exc)) from exc
        return root
