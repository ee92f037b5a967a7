"""Feature-flag fragment tables.

A fragment is a small template controlled by one feature flag.  Each
generator declares a ``FragmentTable`` listing its fragments and the
insertion point each one fills; assembling the table concatenates the
enabled fragments per insertion point in declaration order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from devhub.models import FeatureOptions

from .templates import TemplateRenderer


@dataclass(frozen=True)
class Fragment:
    """One flag-controlled piece of generated content."""

    flag: str
    point: str
    template: str


class FragmentTable:
    """Ordered fragment rules for one generator."""

    def __init__(self, points: tuple[str, ...], fragments: tuple[Fragment, ...]) -> None:
        unknown = {f.point for f in fragments} - set(points)
        if unknown:
            raise ValueError(f"Fragments reference undeclared points: {sorted(unknown)}")
        self.points = points
        self.fragments = fragments

    def enabled(self, options: FeatureOptions) -> list[Fragment]:
        """Return the fragments whose flag is set in *options*."""
        return [f for f in self.fragments if options.flag(f.flag)]

    def assemble(
        self,
        renderer: TemplateRenderer,
        options: FeatureOptions,
        context: dict[str, Any],
    ) -> dict[str, str]:
        """Render enabled fragments and join them per insertion point.

        Every declared point is present in the result; points with no
        enabled fragment map to an empty string.
        """
        assembled = {point: "" for point in self.points}
        for fragment in self.enabled(options):
            assembled[fragment.point] += renderer.render(fragment.template, context)
        return assembled
