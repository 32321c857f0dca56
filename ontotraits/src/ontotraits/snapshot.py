from __future__ import annotations

import os
from dataclasses import dataclass, field

import httpx
from typing_extensions import Optional

from . import logger
from .exceptions import SourceUnavailableError

DEFINITION_FILE = "https://schema.org/version/{version}/schemaorg-all-https.jsonld"
"""
The schemas definition file url pattern.
"""


@dataclass
class SnapshotFetcher:
    """
    Downloads a versioned ontology snapshot once and serves it from a disk cache afterwards.
    """

    cache_dir: str
    url_pattern: str = DEFINITION_FILE
    timeout: float = 60.0
    client: Optional[httpx.Client] = field(default=None, repr=False)
    """
    The HTTP client, a new one is created per download if not given.
    """

    def cache_path(self, version: str) -> str:
        """The file the snapshot of a version is cached in."""
        return os.path.join(self.cache_dir, f"schemas-{version}.jsonld")

    def url(self, version: str) -> str:
        return self.url_pattern.format(version=version)

    def fetch(self, version: str = "latest") -> str:
        """
        Get the snapshot of a version, downloading it if it is not cached yet.

        :param version: The ontology version, e.g. 'latest' or '29.0'.
        :return: The path of the cached snapshot.
        :raises SourceUnavailableError: If the download or the cache write fails.
        """
        path = self.cache_path(version)
        if os.path.isfile(path):
            logger.debug(f"[snapshot]: using cached snapshot {path}")
            return path

        url = self.url(version)
        logger.info(f"[snapshot]: downloading {url}")
        try:
            content = self._download(url)
        except httpx.HTTPError as e:
            raise SourceUnavailableError(url, str(e)) from e

        tmp_path = f"{path}.part"
        try:
            os.makedirs(self.cache_dir, exist_ok=True)
            with open(tmp_path, "wb") as f:
                f.write(content)
            os.replace(tmp_path, path)
        except OSError as e:
            raise SourceUnavailableError(path, str(e)) from e
        return path

    def _download(self, url: str) -> bytes:
        if self.client is not None:
            response = self.client.get(url, follow_redirects=True)
            response.raise_for_status()
            return response.content
        with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.content
