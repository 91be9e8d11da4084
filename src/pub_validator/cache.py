"""Registry-backed lookups of dependency metadata."""

from __future__ import annotations

import asyncio
import logging

import requests
from requests import Response
from tenacity import retry, stop_after_attempt, wait_fixed

from .errors import PackageCacheError
from .parsers.semver import Version

logger = logging.getLogger(__name__)

USER_AGENT = "pub-validator"


@retry(reraise=True, stop=stop_after_attempt(3), wait=wait_fixed(2))
def _http_get(session: requests.Session, url: str) -> Response:
    return session.get(
        url,
        headers={"User-Agent": USER_AGENT, "Accept": "application/vnd.pub.v2+json"},
        timeout=30,
    )


class PackageCache:
    """Memoised view of the packages published on a registry server."""

    def __init__(self, server_url: str, session: requests.Session | None = None) -> None:
        self.server_url = server_url.rstrip("/")
        self._session = session or requests.Session()
        self._versions: dict[str, list[Version]] = {}

    def close(self) -> None:
        """Release the HTTP session's pooled connections."""
        self._session.close()

    def __enter__(self) -> PackageCache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _fetch_versions(self, name: str) -> list[Version]:
        url = f"{self.server_url}/api/packages/{name}"
        try:
            response = _http_get(self._session, url)
        except requests.RequestException as exc:  # pragma: no cover - network failure path
            raise PackageCacheError(f"Failed to fetch '{name}' from {self.server_url}: {exc}") from exc

        if response.status_code == 404:
            return []
        if response.status_code != 200:
            raise PackageCacheError(
                f"Unexpected status code {response.status_code} fetching '{name}' "
                f"from {self.server_url}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise PackageCacheError(f"Invalid JSON listing for '{name}': {exc}") from exc

        versions: list[Version] = []
        for entry in payload.get("versions", []) if isinstance(payload, dict) else []:
            raw = entry.get("version") if isinstance(entry, dict) else None
            if not isinstance(raw, str):
                continue
            try:
                versions.append(Version.parse(raw))
            except ValueError:
                logger.debug("Skipping unparseable version %r of %s", raw, name)
        return sorted(versions)

    async def versions(self, name: str) -> list[Version]:
        """Return the published versions of ``name``, oldest first.

        An unknown package has no versions.
        """
        cached = self._versions.get(name)
        if cached is None:
            logger.debug("Fetching versions of %s from %s", name, self.server_url)
            cached = await asyncio.to_thread(self._fetch_versions, name)
            self._versions[name] = cached
        return list(cached)
