"""DevHub -- interactive project boilerplate scaffolder.

Quick usage::

    from devhub import Config, ProjectRequest, Scaffolder, Template

    request = ProjectRequest(
        name="my-site",
        template=Template.HTML,
        target_directory="/tmp/my-site",
    )
    scaffolder = Scaffolder(Config(run_install=False))
    await scaffolder.create(request, {"css-framework": {"bootstrap": True}})
"""

__version__ = "1.0.0"

from devhub.config import Config
from devhub.models import ProjectRequest, Template
from devhub.scaffolder import Scaffolder

__all__ = [
    "Config",
    "ProjectRequest",
    "Scaffolder",
    "Template",
    "__version__",
]
