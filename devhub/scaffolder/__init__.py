"""DevHub scaffolder -- one generator per project template.

Quick usage::

    from devhub.scaffolder import Scaffolder

    scaffolder = Scaffolder()
    plan = scaffolder.plan(request, {"window": {"frameless": True}})
    project_path = await scaffolder.create(request, options)
"""

from devhub.scaffolder.base import BaseGenerator, write_plan
from devhub.scaffolder.selector import (
    GenerationError,
    Scaffolder,
    ScaffoldError,
    UnknownTemplateError,
)
from devhub.scaffolder.templates import TemplateRenderer

__all__ = [
    "BaseGenerator",
    "GenerationError",
    "ScaffoldError",
    "Scaffolder",
    "TemplateRenderer",
    "UnknownTemplateError",
    "write_plan",
]
