"""Command-line entry point: ``devhub create``."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from rich.logging import RichHandler

from devhub import __version__
from devhub.config import Config
from devhub.models import FeatureOptions, ProjectRequest, Template
from devhub.prompts import collect_request
from devhub.reporter import ConsoleReporter, Reporter
from devhub.runner import open_in_editor
from devhub.scaffolder import GenerationError, Scaffolder
from devhub.updates import UpdateChecker

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# Templates that produce a package.json project.
NPM_TEMPLATES = frozenset({Template.HTML, Template.REACT, Template.ELECTRON, Template.VUE})

NEXT_STEPS: dict[Template, str] = {
    Template.HTML: "Open index.html in your browser",
    Template.REACT: "Run `{pm} start` to launch your project",
    Template.ELECTRON: "Run `{pm} start` to launch your project",
    Template.VUE: "Run `{pm} run dev` to start the dev server",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devhub",
        description="CLI tool for creating development project boilerplates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  devhub create\n"
            "  devhub --projects-dir ~/code create\n"
            "  python -m devhub --verbose create\n"
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Load settings from a JSON file instead of DEVHUB_* variables",
    )
    parser.add_argument(
        "--projects-dir",
        type=Path,
        default=None,
        help="Parent directory for new projects (default: ~/Documents/DevHub)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.add_parser("create", help="Create a new project")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
        force=True,
    )


def load_config(args: argparse.Namespace) -> Config:
    """Build the configuration from ``--config`` (or the environment) and flags."""
    config = Config.load(args.config) if args.config else Config.from_env()
    if args.projects_dir is not None:
        config = config.model_copy(update={"projects_dir": args.projects_dir})
    return config


async def check_for_update(config: Config, reporter: ConsoleReporter) -> None:
    checker = UpdateChecker(__version__, url=config.update_url, timeout=config.update_timeout)
    info = await checker.check()
    if info is not None:
        reporter.warning(
            f"A new version of DevHub is available: {info.current_version} -> "
            f"{info.latest_version}\nRun `pip install -U devhub-scaffold` to update."
        )


async def create_project(
    scaffolder: Scaffolder,
    request: ProjectRequest,
    options: FeatureOptions,
    reporter: ConsoleReporter,
) -> Path:
    """Generate the project, then open it in the configured editor."""
    config = scaffolder.config
    root = await scaffolder.create(request, options)

    if request.template in NPM_TEMPLATES and config.open_editor:
        with reporter.task("Opening project in editor..."):
            opened = await open_in_editor(root, config.editor_command)
        if opened:
            reporter.success("Project opened in editor")
        else:
            reporter.warning(f"{config.editor_command} could not be opened automatically")
    return root


def print_completion(
    request: ProjectRequest,
    root: Path,
    label: str,
    config: Config,
    reporter: Reporter,
) -> None:
    if request.template in NEXT_STEPS:
        reporter.heading("Next step:")
        reporter.info(f"  {NEXT_STEPS[request.template].format(pm=config.package_manager)}")
    else:
        reporter.success(f"{label} resource created successfully!")
        reporter.heading("Resource created at:")
        reporter.info(f"  {root}")


def run_create(config: Config, reporter: ConsoleReporter) -> int:
    """Interactive ``create`` flow; returns the process exit status."""
    if config.check_updates:
        asyncio.run(check_for_update(config, reporter))

    try:
        request, options = collect_request(config)
    except KeyboardInterrupt:
        reporter.error("\nAborted.")
        return EXIT_INTERRUPTED

    reporter.info("")
    scaffolder = Scaffolder(config, reporter=reporter)
    try:
        root = asyncio.run(create_project(scaffolder, request, options, reporter))
    except GenerationError as exc:
        logger.debug("generation failed", exc_info=True)
        reporter.error("Error creating project")
        reporter.error(f"\nError details: {exc}")
        return EXIT_FAILURE
    except KeyboardInterrupt:
        reporter.error("\nAborted.")
        return EXIT_INTERRUPTED

    label = scaffolder.generator_for(request.template).display_name
    print_completion(request, root, label, config, reporter)
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``devhub`` and ``python -m devhub``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    reporter = ConsoleReporter()
    try:
        config = load_config(args)
    except (OSError, ValueError) as exc:
        reporter.error(f"Error: could not load configuration: {exc}")
        sys.exit(EXIT_FAILURE)

    if args.command != "create":
        parser.print_help()
        sys.exit(EXIT_FAILURE)

    reporter.banner(__version__)
    sys.exit(run_create(config, reporter))
