"""Check the package index for a newer DevHub release.

The check is best-effort: a slow network, an HTTP error or a malformed
response simply means no update notice is shown.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import BaseModel, Field

from devhub.config import DEFAULT_UPDATE_URL

logger = logging.getLogger(__name__)


class UpdateInfo(BaseModel):
    """A newer release than the one currently running."""

    current_version: str = Field(..., description="Installed version")
    latest_version: str = Field(..., description="Newest published version")


def parse_version(version: str) -> tuple[int, ...]:
    """Parse ``"1.2.3"`` (optionally ``v``-prefixed) into ``(1, 2, 3)``.

    Raises:
        ValueError: If any component is not a plain integer.
    """
    text = version.strip().removeprefix("v")
    if not text:
        raise ValueError(f"Empty version string: {version!r}")
    return tuple(int(part) for part in text.split("."))


def is_newer(latest: str, current: str) -> bool:
    """Return ``True`` if *latest* is strictly greater than *current*.

    Missing trailing components count as zero, so ``1.0`` equals ``1.0.0``.
    """
    a, b = parse_version(latest), parse_version(current)
    width = max(len(a), len(b))
    return a + (0,) * (width - len(a)) > b + (0,) * (width - len(b))


class UpdateChecker:
    """Queries a PyPI-style JSON endpoint for the latest released version."""

    def __init__(
        self,
        current_version: str,
        url: str = DEFAULT_UPDATE_URL,
        timeout: float = 5.0,
    ) -> None:
        self.current_version = current_version
        self.url = url
        self.timeout = timeout

    async def latest_version(self) -> str | None:
        """Return the published version, or ``None`` if it cannot be determined."""
        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
                response = await client.get(self.url)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as exc:
            logger.debug("update check failed: %s", exc)
            return None
        except ValueError as exc:
            logger.debug("update check returned invalid JSON: %s", exc)
            return None

        info = data.get("info") if isinstance(data, dict) else None
        version = info.get("version") if isinstance(info, dict) else None
        if not isinstance(version, str):
            logger.debug("update check response has no info.version")
            return None
        return version

    async def check(self) -> UpdateInfo | None:
        """Return an ``UpdateInfo`` when a strictly newer version exists."""
        latest = await self.latest_version()
        if latest is None:
            return None
        try:
            newer = is_newer(latest, self.current_version)
        except ValueError as exc:
            logger.debug("cannot compare versions: %s", exc)
            return None
        if not newer:
            return None
        return UpdateInfo(current_version=self.current_version, latest_version=latest)
