"""Three-tier cache resolving DTD public identifiers to byte sources.

Registrations pick exactly one tier per call (local file, bundled resource or
remote URL, first match wins). Resolution always walks the tiers in that
order and falls through on any I/O failure, so an identifier registered more
than once can recover from a stale location.
"""

import io
import logging
from importlib import resources
from pathlib import Path
from urllib.parse import urlparse
from xml.sax.xmlreader import InputSource

import requests

from ejbjar_parser.domain.constants import DEFAULT_FETCH_TIMEOUT, REMOTE_URL_SCHEMES
from ejbjar_parser.domain.enums import ResolutionTier

logger = logging.getLogger(__name__)


def parse_remote_url(location: str) -> str:
    """Validate ``location`` as an absolute remote URL.

    Raises:
        ValueError: If the scheme is not a remote one or no host is given.
    """
    parsed = urlparse(location)
    if parsed.scheme.lower() not in REMOTE_URL_SCHEMES or not parsed.netloc:
        raise ValueError(f"Not a remote URL: {location}")
    return parsed.geturl()


class EntityResolutionCache:
    """Maps public identifiers to local files, bundled resources and URLs.

    Args:
        resource_package: Package whose files form the bundled-resource
            namespace.
        timeout: Seconds to wait on a remote fetch.
        log: Logging sink; defaults to the module logger.
    """

    def __init__(self, resource_package: str = 'ejbjar_parser',
                 timeout: float = DEFAULT_FETCH_TIMEOUT,
                 log: logging.Logger | None = None) -> None:
        self.resource_package = resource_package
        self.timeout = timeout
        self._log = log or logger
        self.files: dict[str, Path] = {}
        self.resources: dict[str, str] = {}
        self.urls: dict[str, str] = {}
        self.last_public_id: str | None = None

    # ── Registration ─────────────────────────────────────────────────────

    def register(self, public_id: str | None, location: str | None) -> ResolutionTier | None:
        """Register ``location`` for ``public_id`` in the first tier that fits.

        Returns:
            The tier the location was recorded in, or ``None`` if nothing was
            recorded.
        """
        if not location:
            return None

        path = Path(location)
        if path.is_file():
            if public_id:
                self.files[public_id] = path
                self._log.debug("Mapped publicId %s to file %s", public_id, path)
                return ResolutionTier.FILE
            return None

        if self._resource(location).is_file():
            if public_id:
                self.resources[public_id] = location
                self._log.debug("Mapped publicId %s to resource %s", public_id, location)
                return ResolutionTier.RESOURCE
            return None

        try:
            url = parse_remote_url(location)
        except ValueError:
            return None
        if public_id:
            self.urls[public_id] = url
            self._log.debug("Mapped publicId %s to url %s", public_id, url)
            return ResolutionTier.URL
        return None

    def tiers_for(self, public_id: str) -> list[ResolutionTier]:
        """Tiers holding an entry for ``public_id``, in resolution order."""
        tiers = []
        if public_id in self.files:
            tiers.append(ResolutionTier.FILE)
        if public_id in self.resources:
            tiers.append(ResolutionTier.RESOURCE)
        if public_id in self.urls:
            tiers.append(ResolutionTier.URL)
        return tiers

    # ── Resolution ───────────────────────────────────────────────────────

    def resolve(self, public_id: str | None, system_id: str | None) -> InputSource | None:
        """Resolve ``public_id`` to a byte source.

        Returns:
            An ``InputSource`` whose byte stream holds the entity, or ``None``
            when no tier yields readable bytes.
        """
        self.last_public_id = public_id

        dtd_file = self.files.get(public_id)
        if dtd_file is not None:
            try:
                data = dtd_file.read_bytes()
            except OSError:
                pass
            else:
                self._log.debug("Resolved %s to local file %s", public_id, dtd_file)
                return self._input_source(data, public_id, system_id)

        resource_name = self.resources.get(public_id)
        if resource_name is not None:
            try:
                data = self._resource(resource_name).read_bytes()
            except OSError:
                pass
            else:
                self._log.debug("Resolved %s to local resource %s", public_id, resource_name)
                return self._input_source(data, public_id, system_id)

        dtd_url = self.urls.get(public_id)
        if dtd_url is not None:
            try:
                response = requests.get(dtd_url, timeout=self.timeout)
                response.raise_for_status()
            except requests.RequestException:
                pass
            else:
                self._log.debug("Resolved %s to url %s", public_id, dtd_url)
                return self._input_source(response.content, public_id, system_id)

        self._log.info(
            "Could not resolve ( publicId: %s, systemId: %s) to a local entity",
            public_id, system_id,
        )
        return None

    # ── Private Methods ──────────────────────────────────────────────────

    def _resource(self, name: str):
        """Traversable for ``name`` inside the resource package."""
        return resources.files(self.resource_package).joinpath(name.lstrip('/'))

    @staticmethod
    def _input_source(data: bytes, public_id: str | None, system_id: str | None) -> InputSource:
        source = InputSource(system_id)
        source.setPublicId(public_id)
        source.setByteStream(io.BytesIO(data))
        return source
