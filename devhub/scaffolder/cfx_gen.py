"""FiveM / RedM server resource generator.

Both games run on the Cfx.re platform and share one resource layout; a
``CfxGame`` variant supplies the manifest game id, the RedM prerelease
acknowledgment and the labels used in comments and the README.
"""

from __future__ import annotations

from dataclasses import dataclass

from devhub.models import NoOptions, ScaffoldPlan, Template

from .base import BaseGenerator
from .templates import TemplateRenderer


@dataclass(frozen=True)
class CfxGame:
    key: str
    label: str
    game_id: str
    warning: str | None = None


FIVEM = CfxGame(key="fivem", label="FiveM", game_id="gta5")
REDM = CfxGame(
    key="redm",
    label="RedM",
    game_id="rdr3",
    warning=(
        "I acknowledge that this is a prerelease build of RedM, and I am aware "
        "my resources *will* become incompatible once RedM ships."
    ),
)

RESOURCE_DIRECTORIES: list[str] = ["client", "server", "config"]


class CfxGenerator(BaseGenerator):
    """Generates a Lua resource for FiveM or RedM. No install step."""

    def __init__(
        self,
        renderer: TemplateRenderer,
        game: CfxGame,
        *,
        package_manager: str = "npm",
        year: int | None = None,
    ) -> None:
        super().__init__(renderer, package_manager=package_manager, year=year)
        self.game = game

    @property
    def template(self) -> Template:  # type: ignore[override]
        return Template(self.game.key)

    @property
    def display_name(self) -> str:  # type: ignore[override]
        return self.game.label

    def plan(self, project_name: str, options: NoOptions) -> ScaffoldPlan:
        ctx = self._context(project_name, options)
        ctx["game"] = self.game
        return ScaffoldPlan(
            directories=list(RESOURCE_DIRECTORIES),
            files=self.renderer.render_tree("cfx", ctx),
        )
