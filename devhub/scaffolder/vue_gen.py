"""Vue 3 + Vite application generator.

TypeScript switches the script extension and adds the compiler setup;
router, pinia and testing each add dependencies and, for the first two,
entry-script fragments.
"""

from __future__ import annotations

from typing import Any

from devhub.models import ScaffoldPlan, Template, VueOptions

from .base import BaseGenerator
from .fragments import Fragment, FragmentTable
from .templates import TemplateRenderer

VUE_DEPENDENCIES: dict[str, str] = {"vue": "^3.3.4"}
VUE_DEV_DEPENDENCIES: dict[str, str] = {
    "@vitejs/plugin-vue": "^4.3.4",
    "vite": "^4.4.9",
}
TYPESCRIPT_DEV_DEPENDENCIES: dict[str, str] = {
    "typescript": "^5.0.2",
    "@types/node": "^18.14.2",
    "vue-tsc": "^1.8.5",
}
ROUTER_DEPENDENCIES: dict[str, str] = {"vue-router": "^4.2.4"}
PINIA_DEPENDENCIES: dict[str, str] = {"pinia": "^2.1.6"}
TESTING_DEV_DEPENDENCIES: dict[str, str] = {
    "vitest": "^0.34.4",
    "@vue/test-utils": "^2.4.1",
    "jsdom": "^22.1.0",
}

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2020",
        "useDefineForClassFields": True,
        "module": "ESNext",
        "lib": ["ES2020", "DOM", "DOM.Iterable"],
        "skipLibCheck": True,
        "moduleResolution": "bundler",
        "allowImportingTsExtensions": True,
        "resolveJsonModule": True,
        "isolatedModules": True,
        "noEmit": True,
        "jsx": "preserve",
        "strict": True,
        "noUnusedLocals": True,
        "noUnusedParameters": True,
        "noFallthroughCasesInSwitch": True,
        "paths": {"@/*": ["./src/*"]},
    },
    "include": ["env.d.ts", "src/**/*.ts", "src/**/*.d.ts", "src/**/*.tsx", "src/**/*.vue"],
}

_F = "vue/fragments"


class VueGenerator(BaseGenerator):
    """Generates a Vite-powered Vue 3 project."""

    template = Template.VUE
    display_name = "Vue"
    options_model = VueOptions
    fragment_table = FragmentTable(
        points=("vite_imports", "vite_options", "main_imports", "main_use"),
        fragments=(
            Fragment("features.typescript", "vite_imports", f"{_F}/vite_url_import.j2"),
            Fragment("features.typescript", "vite_options", f"{_F}/vite_alias.j2"),
            Fragment("features.router", "main_imports", f"{_F}/router_import.j2"),
            Fragment("features.pinia", "main_imports", f"{_F}/pinia_import.j2"),
            # pinia is installed before the router.
            Fragment("features.pinia", "main_use", f"{_F}/pinia_use.j2"),
            Fragment("features.router", "main_use", f"{_F}/router_use.j2"),
        ),
    )

    def __init__(
        self,
        renderer: TemplateRenderer,
        *,
        package_manager: str = "npm",
        year: int | None = None,
        install: bool = False,
    ) -> None:
        super().__init__(renderer, package_manager=package_manager, year=year)
        self.install = install

    def plan(self, project_name: str, options: VueOptions) -> ScaffoldPlan:
        features = options.features
        ext = "ts" if features.typescript else "js"
        ctx = self._context(project_name, options)
        ctx["ext"] = ext
        ctx["script_lang"] = ' lang="ts"' if features.typescript else ""

        plan = ScaffoldPlan(directories=["src", "src/assets", "src/components"])
        if features.router:
            plan.directories.extend(["src/views", "src/router"])
        if features.pinia:
            plan.directories.append("src/stores")
        plan.directories.append("public")

        plan.files.append(self._file("vue/vite.config.j2", f"vite.config.{ext}", ctx))
        plan.files.append(self._file("vue/src/main.j2", f"src/main.{ext}", ctx))
        plan.files.append(self._file("vue/src/App.vue.j2", "src/App.vue", ctx))
        plan.files.append(self._file(
            "vue/src/components/HelloWorld.vue.j2", "src/components/HelloWorld.vue", ctx
        ))
        if features.router:
            plan.files.append(self._file("vue/src/router/index.j2", f"src/router/index.{ext}", ctx))
            plan.files.append(self._file("vue/src/views/HomeView.vue.j2", "src/views/HomeView.vue", ctx))
            plan.files.append(self._file("vue/src/views/AboutView.vue.j2", "src/views/AboutView.vue", ctx))
        plan.files.append(self._file("vue/src/assets/main.css.j2", "src/assets/main.css", ctx))
        plan.files.append(self._file("vue/src/assets/base.css.j2", "src/assets/base.css", ctx))
        plan.files.append(self._file("vue/index.html.j2", "index.html", ctx))
        if features.typescript:
            plan.files.append(self._manifest("tsconfig.json", TSCONFIG))
            plan.files.append(self._file("vue/env.d.ts.j2", "env.d.ts", ctx))
        plan.files.append(self._file("vue/dot_gitignore.j2", ".gitignore", ctx))
        plan.files.append(self._manifest("package.json", self._package_json(ctx["package_name"], options)))

        if self.install:
            plan.commands.append(self._install())
        return plan

    @staticmethod
    def _package_json(name: str, options: VueOptions) -> dict[str, Any]:
        features = options.features
        dependencies = dict(VUE_DEPENDENCIES)
        dev_dependencies = dict(VUE_DEV_DEPENDENCIES)
        scripts = {
            "dev": "vite",
            "build": "vite build",
            "preview": "vite preview",
        }

        if features.typescript:
            dev_dependencies.update(TYPESCRIPT_DEV_DEPENDENCIES)
            scripts["build"] = "vue-tsc && vite build"
        if features.router:
            dependencies.update(ROUTER_DEPENDENCIES)
        if features.pinia:
            dependencies.update(PINIA_DEPENDENCIES)
        if features.testing:
            dev_dependencies.update(TESTING_DEV_DEPENDENCIES)
            scripts["test"] = "vitest"

        return {
            "name": name,
            "private": True,
            "version": "0.0.0",
            "type": "module",
            "scripts": scripts,
            "dependencies": dependencies,
            "devDependencies": dev_dependencies,
        }
