"""Static website generator (HTML/CSS).

Emits ``index.html`` with the selected meta tags plus one of four styling
setups: Tailwind (local build), Bootstrap (CDN), Sass (local build) or a
plain stylesheet.
"""

from __future__ import annotations

from typing import Any

from devhub.models import Command, HtmlOptions, ScaffoldPlan, Template

from .base import BaseGenerator
from .fragments import Fragment, FragmentTable

# Checked in this order; the first selected framework wins.
CSS_FRAMEWORK_PRIORITY: tuple[str, ...] = ("tailwind", "bootstrap", "sass")

TAILWIND_DEV_DEPENDENCIES: dict[str, str] = {"tailwindcss": "^3.3.0"}
TAILWIND_BUILD_COMMAND = "npx tailwindcss -i ./src/styles.css -o ./dist/styles.css"
SASS_DEV_DEPENDENCIES: dict[str, str] = {"sass": "^1.69.5"}

_SASS_PARTIALS: dict[str, str] = {
    "html/sass/_buttons.scss.j2": "scss/components/_buttons.scss",
    "html/sass/_forms.scss.j2": "scss/components/_forms.scss",
    "html/sass/_header.scss.j2": "scss/layouts/_header.scss",
    "html/sass/_footer.scss.j2": "scss/layouts/_footer.scss",
}


def resolve_css_framework(options: HtmlOptions) -> str:
    """Return ``"tailwind"``, ``"bootstrap"``, ``"sass"`` or ``"plain"``."""
    for name in CSS_FRAMEWORK_PRIORITY:
        if getattr(options.css_framework, name):
            return name
    return "plain"


class HtmlGenerator(BaseGenerator):
    """Generates a static website skeleton."""

    template = Template.HTML
    display_name = "HTML"
    options_model = HtmlOptions
    fragment_table = FragmentTable(
        points=("meta", "css_imports"),
        fragments=(
            Fragment("meta.seo", "meta", "html/fragments/meta_seo.html.j2"),
            Fragment("meta.social", "meta", "html/fragments/meta_social.html.j2"),
            Fragment("reset.normalize", "css_imports", "html/fragments/normalize_link.html.j2"),
        ),
    )

    def plan(self, project_name: str, options: HtmlOptions) -> ScaffoldPlan:
        framework = resolve_css_framework(options)
        ctx = self._context(project_name, options)
        ctx["framework"] = framework

        plan = ScaffoldPlan()
        if framework == "tailwind":
            self._plan_tailwind(plan, ctx)
        elif framework == "bootstrap":
            plan.files.append(self._file("html/css/bootstrap.css.j2", "css/styles.css", ctx))
        elif framework == "sass":
            self._plan_sass(plan, ctx)
        else:
            plan.files.append(self._file("html/css/plain.css.j2", "css/styles.css", ctx))

        # Tailwind writes its stylesheet to dist/, so css/ only exists for the reset.
        if framework != "tailwind" or options.reset.normalize:
            plan.directories.append("css")
        plan.directories.extend(["js", "images"])

        if options.reset.normalize:
            plan.files.append(self._file("html/css/normalize.css.j2", "css/normalize.css", ctx))
        plan.files.append(self._file("html/index.html.j2", "index.html", ctx))
        plan.files.append(self._file("html/js/main.js.j2", "js/main.js", ctx))
        return plan

    # -- Framework setups --------------------------------------------------

    def _plan_tailwind(self, plan: ScaffoldPlan, ctx: dict[str, Any]) -> None:
        plan.directories.extend(["src", "dist"])
        plan.files.append(self._manifest("package.json", {
            "name": ctx["package_name"],
            "version": "1.0.0",
            "scripts": {
                "dev": "tailwindcss -i ./src/styles.css -o ./dist/styles.css --watch",
                "build": "tailwindcss -i ./src/styles.css -o ./dist/styles.css --minify",
            },
            "devDependencies": dict(TAILWIND_DEV_DEPENDENCIES),
        }))
        plan.files.append(self._file("html/tailwind/tailwind.config.js.j2", "tailwind.config.js", ctx))
        plan.files.append(self._file("html/tailwind/styles.css.j2", "src/styles.css", ctx))
        plan.commands.append(self._install())
        plan.commands.append(Command(
            command=TAILWIND_BUILD_COMMAND,
            label="Building Tailwind CSS...",
            done_label="Tailwind CSS built",
        ))

    def _plan_sass(self, plan: ScaffoldPlan, ctx: dict[str, Any]) -> None:
        plan.directories.extend(["scss", "scss/components", "scss/layouts"])
        plan.files.append(self._file("html/sass/main.scss.j2", "scss/main.scss", ctx))
        for template_path, relative_path in _SASS_PARTIALS.items():
            plan.files.append(self._file(template_path, relative_path, ctx))
        plan.files.append(self._manifest("package.json", {
            "name": ctx["package_name"],
            "version": "1.0.0",
            "scripts": {
                "sass": "sass scss/main.scss css/styles.css --watch",
                "sass:build": "sass scss/main.scss css/styles.css --style compressed",
            },
            "devDependencies": dict(SASS_DEV_DEPENDENCIES),
        }))
        plan.files.append(self._file("html/sass/README.md.j2", "README.md", ctx))
        plan.commands.append(self._install())
        plan.commands.append(Command(
            command=f"{self.package_manager} run sass:build",
            label="Compiling SCSS...",
            done_label="SCSS compiled to css/styles.css",
        ))
