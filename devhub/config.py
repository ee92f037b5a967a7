"""DevHub configuration.

Centralised, typed settings for the scaffolder. All settings use a Pydantic
v2 model so they are validated at construction time and can be serialised
to/from JSON or read from ``DEVHUB_*`` environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_PROJECTS_DIR = Path.home() / "Documents" / "DevHub"
DEFAULT_UPDATE_URL = "https://pypi.org/pypi/devhub-scaffold/json"

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Global DevHub configuration.

    Instances are typically created once by the CLI entry point and then
    passed to the ``Scaffolder``.
    """

    projects_dir: Path = Field(
        default=DEFAULT_PROJECTS_DIR,
        description="Parent directory that receives one folder per project",
    )
    package_manager: str = Field(default="npm", min_length=1)
    run_install: bool = Field(
        default=True, description="Run install/build commands after writing files"
    )
    install_vue: bool = Field(
        default=False,
        description="Run the install step for Vue projects (skipped historically)",
    )
    offer_css_reset: bool = Field(
        default=False,
        description="Offer the normalize.css reset in the static-site prompts",
    )
    open_editor: bool = Field(default=True)
    editor_command: str = Field(default="code")
    check_updates: bool = Field(default=True)
    update_url: str = Field(default=DEFAULT_UPDATE_URL)
    update_timeout: float = Field(default=5.0, gt=0)
    command_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Seconds before an install/build command is killed; None waits forever",
    )

    def project_path(self, name: str) -> Path:
        """Return the absolute target directory for project *name*."""
        return (self.projects_dir.expanduser() / name).absolute()

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            DEVHUB_PROJECTS_DIR, DEVHUB_PACKAGE_MANAGER, DEVHUB_RUN_INSTALL,
            DEVHUB_INSTALL_VUE, DEVHUB_OFFER_CSS_RESET, DEVHUB_OPEN_EDITOR,
            DEVHUB_EDITOR, DEVHUB_CHECK_UPDATES, DEVHUB_UPDATE_URL,
            DEVHUB_COMMAND_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("DEVHUB_PROJECTS_DIR"):
            kwargs["projects_dir"] = Path(os.environ["DEVHUB_PROJECTS_DIR"])
        if os.environ.get("DEVHUB_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["DEVHUB_PACKAGE_MANAGER"]
        if os.environ.get("DEVHUB_EDITOR"):
            kwargs["editor_command"] = os.environ["DEVHUB_EDITOR"]
        if os.environ.get("DEVHUB_UPDATE_URL"):
            kwargs["update_url"] = os.environ["DEVHUB_UPDATE_URL"]
        if os.environ.get("DEVHUB_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = float(os.environ["DEVHUB_COMMAND_TIMEOUT"])

        for env_name, field_name in (
            ("DEVHUB_RUN_INSTALL", "run_install"),
            ("DEVHUB_INSTALL_VUE", "install_vue"),
            ("DEVHUB_OFFER_CSS_RESET", "offer_css_reset"),
            ("DEVHUB_OPEN_EDITOR", "open_editor"),
            ("DEVHUB_CHECK_UPDATES", "check_updates"),
        ):
            value = os.environ.get(env_name)
            if value:
                kwargs[field_name] = value.strip().lower() in _TRUTHY

        return cls(**kwargs)
