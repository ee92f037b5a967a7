"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``devhub/scaffolder/templates/`` directory and renders them with
project-specific context data.  Supports single-file rendering and rendering
of a whole template subtree.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from devhub.models import GeneratedFile


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Packaged data files cannot start with a dot, so ``dot_gitignore.j2`` is
# written out as ``.gitignore``.
_DOTFILE_PREFIX = "dot_"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Templates are rendered with a context dictionary that
    holds the project name, the selected feature options and the assembled
    fragments.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"react/src/App.js.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_file(
        self,
        template_path: str,
        relative_path: str,
        context: dict[str, Any],
    ) -> GeneratedFile:
        """Render *template_path* into a ``GeneratedFile`` at *relative_path*."""
        return GeneratedFile(relative_path, self.render(template_path, context))

    def render_tree(
        self,
        template_prefix: str,
        context: dict[str, Any],
    ) -> list[GeneratedFile]:
        """Render every ``*.j2`` file under *template_prefix*.

        The directory structure is preserved: a template at
        ``react/src/App.js.j2`` rendered with ``template_prefix="react"``
        becomes a file at ``src/App.js``.

        Args:
            template_prefix: Subdirectory inside the template root to scan.
            context: Template context variables.

        Returns:
            Generated files in sorted template order.
        """
        prefix_path = self.template_dir / template_prefix
        if not prefix_path.is_dir():
            return []

        files: list[GeneratedFile] = []
        for template_file in sorted(prefix_path.rglob("*.j2")):
            rel_str = template_file.relative_to(prefix_path).as_posix()
            template_key = f"{template_prefix}/{rel_str}"
            files.append(
                self.render_file(template_key, output_name(rel_str), context)
            )

        return files


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def output_name(template_rel_path: str) -> str:
    """Map a template path to the path of the file it produces.

    Strips the ``.j2`` suffix and turns a leading ``dot_`` on the file name
    into a dot.
    """
    if template_rel_path.endswith(".j2"):
        template_rel_path = template_rel_path[: -len(".j2")]
    head, _, name = template_rel_path.rpartition("/")
    if name.startswith(_DOTFILE_PREFIX):
        name = "." + name[len(_DOTFILE_PREFIX):]
    return f"{head}/{name}" if head else name


def write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


async def write_generated(root: Path, generated: GeneratedFile) -> Path:
    """Write *generated* below *root* without blocking the event loop."""
    out = root / generated.relative_path
    await asyncio.to_thread(write_file, out, generated.content)
    return out
