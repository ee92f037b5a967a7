"""Interactive question flow.

Asks for the project name, the template and the template's feature
multi-selects, and turns the answers into a ``ProjectRequest`` plus the
matching ``FeatureOptions`` model.  Ctrl-C propagates as
``KeyboardInterrupt`` (``unsafe_ask``) so the CLI can exit cleanly.
"""

from __future__ import annotations

import questionary

from devhub.config import Config
from devhub.models import (
    TEMPLATE_LABELS,
    ElectronOptions,
    FeatureOptions,
    HtmlOptions,
    NoOptions,
    ProjectRequest,
    Template,
    VueOptions,
    is_valid_project_name,
)

custom_style = questionary.Style([
    ("qmark", "fg:#00BFFF bold"),
    ("question", "bold"),
    ("answer", "fg:#FF910A bold"),
    ("pointer", "fg:#FF4500 bold"),
    ("highlighted", "fg:#63CD91 bold"),
    ("selected", "fg:#63CD91"),
    ("instruction", "fg:#808080"),
])

INVALID_NAME_MESSAGE = (
    "Project name may only include letters, numbers, underscores and hyphens."
)
CHECKBOX_INSTRUCTION = "(Use arrow keys to move, <space> to select, <enter> to confirm)"

CSS_FRAMEWORK_CHOICES = [
    ("Pure CSS", "pure-css"),
    ("Tailwind CSS", "tailwind"),
    ("Bootstrap", "bootstrap"),
    ("Sass/SCSS", "sass"),
]
META_CHOICES = [
    ("SEO Optimization", "seo"),
    ("Social Media Tags", "social"),
]
RESET_CHOICES = [("Normalize.css", "normalize")]
ELECTRON_CHOICES = [
    ("Frameless Window", "frameless"),
    ("Custom Title Bar", "custom-titlebar"),
    ("Auto Updater", "auto-updater"),
    ("Custom Installer", "installer"),
]
VUE_CHOICES = [
    ("TypeScript", "typescript"),
    ("Vue Router", "router"),
    ("Pinia", "pinia"),
    ("Vitest", "testing"),
]


def validate_project_name(text: str) -> bool | str:
    """questionary validator: ``True`` or the message to show."""
    return True if is_valid_project_name(text) else INVALID_NAME_MESSAGE


def _checkbox(message: str, choices: list[tuple[str, str]]) -> list[str]:
    answer = questionary.checkbox(
        message,
        choices=[questionary.Choice(title, value=value) for title, value in choices],
        instruction=CHECKBOX_INSTRUCTION,
        style=custom_style,
    ).unsafe_ask()
    return list(answer or [])


def _flags(selected: list[str], choices: list[tuple[str, str]]) -> dict[str, bool]:
    return {value: value in selected for _, value in choices}


# ---------------------------------------------------------------------------
# Questions
# ---------------------------------------------------------------------------

def ask_project_name() -> str:
    return questionary.text(
        "What is your project name?",
        validate=validate_project_name,
        style=custom_style,
    ).unsafe_ask()


def ask_template() -> Template:
    answer = questionary.select(
        "What project template would you like to use?",
        choices=[
            questionary.Choice(label, value=template.value)
            for template, label in TEMPLATE_LABELS.items()
        ],
        style=custom_style,
    ).unsafe_ask()
    return Template(answer)


def ask_html_options(offer_css_reset: bool = False) -> HtmlOptions:
    frameworks = _checkbox("Select CSS frameworks:", CSS_FRAMEWORK_CHOICES)
    meta = _checkbox("Select meta tags:", META_CHOICES)
    reset = _checkbox("Select a CSS reset:", RESET_CHOICES) if offer_css_reset else []
    return HtmlOptions.model_validate({
        "css-framework": _flags(frameworks, CSS_FRAMEWORK_CHOICES),
        "meta": _flags(meta, META_CHOICES),
        "reset": _flags(reset, RESET_CHOICES),
    })


def ask_electron_options() -> ElectronOptions:
    selected = _flags(
        _checkbox("Select Electron features:", ELECTRON_CHOICES), ELECTRON_CHOICES
    )
    return ElectronOptions.model_validate({
        "window": {
            "frameless": selected["frameless"],
            "custom-titlebar": selected["custom-titlebar"],
        },
        "build": {
            "auto-updater": selected["auto-updater"],
            "installer": selected["installer"],
        },
    })


def ask_vue_options() -> VueOptions:
    selected = _checkbox("Select Vue features:", VUE_CHOICES)
    return VueOptions.model_validate({"features": _flags(selected, VUE_CHOICES)})


def ask_options(template: Template, config: Config) -> FeatureOptions:
    """Ask the feature questions for *template* (none for React, FiveM, RedM)."""
    if template is Template.HTML:
        return ask_html_options(offer_css_reset=config.offer_css_reset)
    if template is Template.ELECTRON:
        return ask_electron_options()
    if template is Template.VUE:
        return ask_vue_options()
    return NoOptions()


def collect_request(config: Config) -> tuple[ProjectRequest, FeatureOptions]:
    """Run the whole question sequence."""
    name = ask_project_name()
    template = ask_template()
    options = ask_options(template, config)
    request = ProjectRequest(
        name=name,
        template=template,
        target_directory=config.project_path(name),
    )
    return request, options
