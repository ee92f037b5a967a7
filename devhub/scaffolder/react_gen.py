"""React application generator (react-scripts).

Fully deterministic: every file comes from the ``react/`` template tree.
"""

from __future__ import annotations

from devhub.models import NoOptions, ScaffoldPlan, Template

from .base import BaseGenerator

REACT_DEPENDENCIES: dict[str, str] = {
    "react": "^18.2.0",
    "react-dom": "^18.2.0",
    "react-scripts": "^5.0.1",
}

REACT_SCRIPTS: dict[str, str] = {
    "start": "react-scripts start",
    "build": "react-scripts build",
    "test": "react-scripts test",
    "eject": "react-scripts eject",
}

BROWSERSLIST: dict[str, list[str]] = {
    "production": [">0.2%", "not dead", "not op_mini all"],
    "development": [
        "last 1 chrome version",
        "last 1 firefox version",
        "last 1 safari version",
    ],
}


class ReactGenerator(BaseGenerator):
    """Generates a create-react-app style project."""

    template = Template.REACT
    display_name = "React"

    def plan(self, project_name: str, options: NoOptions) -> ScaffoldPlan:
        ctx = self._context(project_name, options)
        plan = ScaffoldPlan(directories=["src", "public"])
        plan.files.extend(self.renderer.render_tree("react", ctx))
        plan.files.append(self._manifest("package.json", {
            "name": ctx["package_name"],
            "version": "1.0.0",
            "dependencies": dict(REACT_DEPENDENCIES),
            "scripts": dict(REACT_SCRIPTS),
            "browserslist": {k: list(v) for k, v in BROWSERSLIST.items()},
        }))
        plan.commands.append(self._install())
        return plan
