"""Pydantic models for DevHub scaffolding requests and generator output.

Defines the project request, the per-template feature options, and the
plan a generator produces (directories, files, and follow-up commands).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

PROJECT_NAME_PATTERN = r"^[A-Za-z0-9_-]+$"
_PROJECT_NAME_RE = re.compile(PROJECT_NAME_PATTERN)


def is_valid_project_name(name: str) -> bool:
    """Return ``True`` if *name* only holds letters, digits, ``_`` and ``-``."""
    return bool(_PROJECT_NAME_RE.fullmatch(name))


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Template(str, Enum):
    """Project templates offered by the scaffolder."""
    HTML = "html"
    REACT = "react"
    ELECTRON = "electron"
    FIVEM = "fivem"
    REDM = "redm"
    VUE = "vue"


TEMPLATE_LABELS: dict[Template, str] = {
    Template.HTML: "HTML/CSS - Simple website",
    Template.REACT: "React - Modern web application",
    Template.ELECTRON: "Electron - Desktop application",
    Template.VUE: "Vue - Progressive web application",
    Template.FIVEM: "FiveM - GTA V multiplayer resource",
    Template.REDM: "RedM - Red Dead Redemption 2 multiplayer resource",
}


# ---------------------------------------------------------------------------
# Project request
# ---------------------------------------------------------------------------

class ProjectRequest(BaseModel):
    """One scaffolding request, built once from user input."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=PROJECT_NAME_PATTERN)
    template: Template
    target_directory: Path

    @field_validator("target_directory")
    @classmethod
    def _absolute(cls, value: Path) -> Path:
        return value.expanduser().absolute()


# ---------------------------------------------------------------------------
# Feature options
# ---------------------------------------------------------------------------

def _hyphenate(name: str) -> str:
    return name.replace("_", "-")


class _Flags(BaseModel):
    """Base for option groups.

    Field names are accepted both as Python identifiers and in the hyphenated
    form used by the prompt answers (``custom-titlebar``).
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=_hyphenate,
    )


class FeatureOptions(_Flags):
    """Base class for per-template feature options."""

    def flag(self, path: str) -> bool:
        """Look up a boolean flag by dotted path, e.g. ``"window.frameless"``.

        Unknown paths are treated as disabled.
        """
        node: object = self
        for part in path.split("."):
            node = getattr(node, part.replace("-", "_"), None)
            if node is None:
                return False
        return bool(node)


class NoOptions(FeatureOptions):
    """Templates without feature flags (React, FiveM, RedM)."""


class CssFrameworkOptions(_Flags):
    pure_css: bool = False
    tailwind: bool = False
    bootstrap: bool = False
    sass: bool = False


class MetaOptions(_Flags):
    seo: bool = False
    social: bool = False


class ResetOptions(_Flags):
    normalize: bool = False


class HtmlOptions(FeatureOptions):
    css_framework: CssFrameworkOptions = Field(default_factory=CssFrameworkOptions)
    meta: MetaOptions = Field(default_factory=MetaOptions)
    reset: ResetOptions = Field(default_factory=ResetOptions)


class WindowOptions(_Flags):
    frameless: bool = False
    custom_titlebar: bool = False


class BuildOptions(_Flags):
    auto_updater: bool = False
    installer: bool = False


class ElectronOptions(FeatureOptions):
    window: WindowOptions = Field(default_factory=WindowOptions)
    build: BuildOptions = Field(default_factory=BuildOptions)


class VueFeatures(_Flags):
    typescript: bool = False
    router: bool = False
    pinia: bool = False
    testing: bool = False


class VueOptions(FeatureOptions):
    features: VueFeatures = Field(default_factory=VueFeatures)


# ---------------------------------------------------------------------------
# Generator output
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GeneratedFile:
    """A file to write, relative to the project root."""

    relative_path: str
    content: str


@dataclass(frozen=True)
class Command:
    """A shell command run inside the project root after the files are written."""

    command: str
    label: str
    done_label: str


@dataclass
class ScaffoldPlan:
    """Everything a generator wants on disk, in write order."""

    directories: list[str] = field(default_factory=list)
    files: list[GeneratedFile] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)

    def paths(self) -> list[str]:
        """Return the relative paths of all planned files."""
        return [f.relative_path for f in self.files]

    def get(self, relative_path: str) -> GeneratedFile | None:
        """Return the planned file at *relative_path*, if any."""
        for generated in self.files:
            if generated.relative_path == relative_path:
                return generated
        return None
