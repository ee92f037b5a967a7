"""Tests for the static-site generator.

Covers:
- CSS framework priority (tailwind > bootstrap > sass > plain)
- Exact file and directory sets per framework
- Meta block ordering (charset/viewport -> SEO -> social)
- Optional normalize.css reset
- Copyright year and content idempotence
"""

from __future__ import annotations

import json

import pytest

from devhub.models import HtmlOptions
from devhub.scaffolder.html_gen import HtmlGenerator, resolve_css_framework

pytestmark = pytest.mark.unit


@pytest.fixture
def gen(renderer, year) -> HtmlGenerator:
    return HtmlGenerator(renderer, year=year)


def _opts(**groups) -> HtmlOptions:
    return HtmlOptions.model_validate(groups)


def _css(*names: str) -> HtmlOptions:
    return _opts(**{"css-framework": {name: True for name in names}})


# ---------------------------------------------------------------------------
# Framework priority
# ---------------------------------------------------------------------------


class TestResolveCssFramework:
    @pytest.mark.parametrize("selected,expected", [
        ((), "plain"),
        (("pure-css",), "plain"),
        (("sass",), "sass"),
        (("bootstrap", "sass"), "bootstrap"),
        (("tailwind", "bootstrap", "sass"), "tailwind"),
        (("tailwind", "sass"), "tailwind"),
    ])
    def test_priority(self, selected, expected):
        assert resolve_css_framework(_css(*selected)) == expected

    def test_tailwind_wins_in_output(self, gen):
        plan = gen.plan("site", _css("tailwind", "bootstrap", "sass"))
        html = plan.get("index.html").content
        assert "./dist/styles.css" in html
        assert "bootstrap" not in html
        assert not any(p.startswith("scss/") for p in plan.paths())
        assert "css" not in plan.directories


# ---------------------------------------------------------------------------
# File sets
# ---------------------------------------------------------------------------


class TestFileSets:
    def test_plain(self, gen):
        plan = gen.plan("site", HtmlOptions())
        assert sorted(plan.paths()) == ["css/styles.css", "index.html", "js/main.js"]
        assert sorted(plan.directories) == ["css", "images", "js"]
        assert plan.commands == []

    def test_bootstrap(self, gen):
        plan = gen.plan("site", _css("bootstrap"))
        assert sorted(plan.paths()) == ["css/styles.css", "index.html", "js/main.js"]
        html = plan.get("index.html").content
        assert "bootstrap.min.css" in html
        assert "bootstrap.bundle.min.js" in html
        assert 'href="css/styles.css"' in html
        assert plan.commands == []

    def test_tailwind(self, gen):
        plan = gen.plan("site", _css("tailwind"))
        assert sorted(plan.paths()) == [
            "index.html",
            "js/main.js",
            "package.json",
            "src/styles.css",
            "tailwind.config.js",
        ]
        assert sorted(plan.directories) == ["dist", "images", "js", "src"]
        manifest = json.loads(plan.get("package.json").content)
        assert set(manifest["scripts"]) == {"dev", "build"}
        assert "tailwindcss" in manifest["devDependencies"]
        assert [c.command for c in plan.commands] == [
            "npm install",
            "npx tailwindcss -i ./src/styles.css -o ./dist/styles.css",
        ]
        assert 'class="bg-gray-100"' in plan.get("index.html").content

    def test_sass(self, gen):
        plan = gen.plan("site", _css("sass"))
        assert sorted(plan.paths()) == [
            "README.md",
            "index.html",
            "js/main.js",
            "package.json",
            "scss/components/_buttons.scss",
            "scss/components/_forms.scss",
            "scss/layouts/_footer.scss",
            "scss/layouts/_header.scss",
            "scss/main.scss",
        ]
        assert sorted(plan.directories) == [
            "css", "images", "js", "scss", "scss/components", "scss/layouts",
        ]
        main = plan.get("scss/main.scss").content
        for partial in ("components/buttons", "components/forms", "layouts/header", "layouts/footer"):
            assert partial in main
        manifest = json.loads(plan.get("package.json").content)
        assert set(manifest["scripts"]) == {"sass", "sass:build"}
        assert [c.command for c in plan.commands] == ["npm install", "npm run sass:build"]

    def test_package_manager_is_used_in_commands(self, renderer):
        plan = HtmlGenerator(renderer, package_manager="pnpm").plan("site", _css("sass"))
        assert [c.command for c in plan.commands] == ["pnpm install", "pnpm run sass:build"]

    def test_manifest_name_is_lowercase(self, gen):
        manifest = json.loads(gen.plan("My_Site", _css("tailwind")).get("package.json").content)
        assert manifest["name"] == "my_site"

    def test_main_js_is_one_line(self, gen):
        assert gen.plan("site", HtmlOptions()).get("js/main.js").content.count("\n") == 1


# ---------------------------------------------------------------------------
# Meta tags
# ---------------------------------------------------------------------------


class TestMeta:
    def test_base_meta_only(self, gen):
        html = gen.plan("site", HtmlOptions()).get("index.html").content
        assert '<meta charset="UTF-8">' in html
        assert 'name="viewport"' in html
        assert 'name="description"' not in html
        assert "og:title" not in html

    def test_order_meta_seo_social(self, gen):
        html = gen.plan("site", _opts(meta={"seo": True, "social": True})).get("index.html").content
        charset = html.index('<meta charset="UTF-8">')
        viewport = html.index('name="viewport"')
        seo = html.index('name="description"')
        social = html.index("og:title")
        assert charset < viewport < seo < social < html.index("<title>")

    def test_social_only(self, gen):
        html = gen.plan("site", _opts(meta={"social": True})).get("index.html").content
        assert 'content="site"' in html
        assert 'name="robots"' not in html


# ---------------------------------------------------------------------------
# CSS reset
# ---------------------------------------------------------------------------


class TestReset:
    def test_normalize_file_and_link(self, gen):
        plan = gen.plan("site", _opts(reset={"normalize": True}))
        assert "css/normalize.css" in plan.paths()
        html = plan.get("index.html").content
        assert html.index("css/normalize.css") < html.index("css/styles.css")

    def test_normalize_with_tailwind_creates_css_dir(self, gen):
        plan = gen.plan("site", _opts(**{"css-framework": {"tailwind": True}, "reset": {"normalize": True}}))
        assert "css" in plan.directories
        html = plan.get("index.html").content
        assert html.index("css/normalize.css") < html.index("./dist/styles.css")

    def test_no_reset_by_default(self, gen):
        plan = gen.plan("site", HtmlOptions())
        assert "css/normalize.css" not in plan.paths()
        assert "normalize" not in plan.get("index.html").content


# ---------------------------------------------------------------------------
# Determinism
# ---------------------------------------------------------------------------


class TestDeterminism:
    def test_copyright_year(self, gen, year):
        assert f"&copy; {year} Your Name" in gen.plan("site", HtmlOptions()).get("index.html").content

    def test_identical_except_year(self, renderer):
        opts = _opts(meta={"seo": True}, **{"css-framework": {"sass": True}})
        a = HtmlGenerator(renderer, year=2023).plan("site", opts)
        b = HtmlGenerator(renderer, year=2025).plan("site", opts)
        assert a.paths() == b.paths()
        for fa, fb in zip(a.files, b.files):
            assert fa.content.replace("2023", "YEAR") == fb.content.replace("2025", "YEAR")

    def test_repeatable(self, gen):
        assert gen.plan("site", _css("tailwind")) == gen.plan("site", _css("tailwind"))
