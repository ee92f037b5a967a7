"""Electron desktop application generator.

Window and build flags map onto fragments of ``main.js``, ``index.html`` and
``README.md`` (see ``fragment_table``); the package manifest is assembled
here from the same flags.
"""

from __future__ import annotations

from typing import Any

from devhub.models import ElectronOptions, ScaffoldPlan, Template

from .base import BaseGenerator, package_name
from .fragments import Fragment, FragmentTable

ELECTRON_DEPENDENCIES: dict[str, str] = {"electron": "^27.0.0"}
ELECTRON_DEV_DEPENDENCIES: dict[str, str] = {"electron-builder": "^24.13.3"}
UPDATER_DEPENDENCIES: dict[str, str] = {"electron-updater": "^6.1.7"}

# Placeholders the user replaces with their GitHub repository.
PUBLISH_CONFIG: dict[str, str] = {
    "provider": "github",
    "owner": "YourUsername",
    "repo": "YourRepo",
}

INSTALLER_TARGETS: dict[str, dict[str, Any]] = {
    "win": {"target": "nsis"},
    "mac": {"target": "dmg"},
    "linux": {"target": "AppImage"},
    "nsis": {"oneClick": False, "allowToChangeInstallationDirectory": True},
}

TITLEBAR_HEIGHT = "32px"
DEFAULT_TOP_PADDING = "20px"

_F = "electron/fragments"


class ElectronGenerator(BaseGenerator):
    """Generates an Electron app with optional window and build features."""

    template = Template.ELECTRON
    display_name = "Electron"
    options_model = ElectronOptions
    fragment_table = FragmentTable(
        points=(
            "main_imports",
            "window_options",
            "after_load",
            "main_events",
            "head_styles",
            "body_header",
            "readme",
        ),
        fragments=(
            Fragment("build.auto-updater", "main_imports", f"{_F}/updater_import.js.j2"),
            Fragment("window.custom-titlebar", "main_imports", f"{_F}/titlebar_import.js.j2"),
            Fragment("window.frameless", "window_options", f"{_F}/frameless.js.j2"),
            Fragment("build.auto-updater", "after_load", f"{_F}/updater_check.js.j2"),
            Fragment("build.auto-updater", "main_events", f"{_F}/updater_events.js.j2"),
            Fragment("window.custom-titlebar", "main_events", f"{_F}/titlebar_events.js.j2"),
            Fragment("window.custom-titlebar", "head_styles", f"{_F}/titlebar_styles.html.j2"),
            Fragment("window.custom-titlebar", "body_header", f"{_F}/titlebar_markup.html.j2"),
            Fragment("build.auto-updater", "readme", f"{_F}/readme_updater.md.j2"),
            Fragment("window.custom-titlebar", "readme", f"{_F}/readme_titlebar.md.j2"),
            Fragment("build.installer", "readme", f"{_F}/readme_installer.md.j2"),
        ),
    )

    def plan(self, project_name: str, options: ElectronOptions) -> ScaffoldPlan:
        ctx = self._context(project_name, options)
        ctx["top_padding"] = (
            TITLEBAR_HEIGHT if options.window.custom_titlebar else DEFAULT_TOP_PADDING
        )

        plan = ScaffoldPlan()
        plan.files.append(self._file("electron/main.js.j2", "main.js", ctx))
        plan.files.append(self._file("electron/index.html.j2", "index.html", ctx))
        plan.files.append(self._file("electron/README.md.j2", "README.md", ctx))
        plan.files.append(self._manifest("package.json", self._package_json(project_name, options)))
        plan.files.append(self._file("electron/dot_gitignore.j2", ".gitignore", ctx))
        plan.commands.append(self._install())
        return plan

    def _package_json(self, project_name: str, options: ElectronOptions) -> dict[str, Any]:
        name = package_name(project_name)
        manifest: dict[str, Any] = {
            "name": name,
            "version": "1.0.0",
            "description": "Electron application created with DevHub",
            "main": "main.js",
            "scripts": {
                "start": "electron .",
                "build": "electron-builder",
            },
            "dependencies": dict(ELECTRON_DEPENDENCIES),
            "devDependencies": dict(ELECTRON_DEV_DEPENDENCIES),
        }

        build: dict[str, Any] = {}
        if options.build.installer:
            manifest["scripts"]["dist"] = "electron-builder --publish never"
            build["appId"] = f"com.devhub.{name.replace('_', '-')}"
            build["productName"] = project_name
            build.update({k: dict(v) for k, v in INSTALLER_TARGETS.items()})
        if options.build.auto_updater:
            manifest["dependencies"].update(UPDATER_DEPENDENCIES)
            build["publish"] = dict(PUBLISH_CONFIG)
        if build:
            manifest["build"] = build
        return manifest
