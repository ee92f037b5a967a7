"""Tests for the React generator."""

from __future__ import annotations

import json

import pytest

from devhub.models import NoOptions
from devhub.scaffolder.react_gen import REACT_DEPENDENCIES, ReactGenerator

pytestmark = pytest.mark.unit


@pytest.fixture
def plan(renderer, year):
    return ReactGenerator(renderer, year=year).plan("my-react-app", NoOptions())


class TestReactGenerator:
    def test_exact_file_set(self, plan):
        assert sorted(plan.paths()) == [
            ".gitignore",
            "README.md",
            "package.json",
            "public/index.html",
            "public/robots.txt",
            "src/App.css",
            "src/App.js",
            "src/index.css",
            "src/index.js",
        ]
        assert plan.directories == ["src", "public"]

    def test_manifest(self, plan):
        manifest = json.loads(plan.get("package.json").content)
        assert manifest["name"] == "my-react-app"
        assert manifest["dependencies"] == REACT_DEPENDENCIES
        assert len(manifest["dependencies"]) == 3
        assert list(manifest["scripts"]) == ["start", "build", "test", "eject"]
        assert set(manifest["browserslist"]) == {"production", "development"}

    def test_manifest_is_two_space_json(self, plan):
        content = plan.get("package.json").content
        assert content.endswith("}\n")
        assert '\n  "name": ' in content

    def test_install_command(self, plan):
        assert [c.command for c in plan.commands] == ["npm install"]

    def test_project_name_in_html_and_readme(self, plan):
        assert "my-react-app" in plan.get("public/index.html").content
        assert plan.get("README.md").content.startswith("# my-react-app")

    def test_entry_renders_app(self, plan):
        index = plan.get("src/index.js").content
        assert "import App from './App'" in index
        assert "root" in index
