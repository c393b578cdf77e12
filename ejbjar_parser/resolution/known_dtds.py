"""Registration of the ejb-jar DTDs bundled with the package."""

from ejbjar_parser.domain.constants import KNOWN_DTD_RESOURCES


def register_known_dtds(cache, overrides: dict[str, str] | None = None) -> None:
    """Register the bundled EJB 1.1 and 2.0 DTDs, then any explicit locations.

    Overrides are registered after the bundled resources, so an override that
    points at a local file lands in the file tier while the bundled copy stays
    available as a fallback for the same public id.

    Args:
        cache: ``EntityResolutionCache`` to populate.
        overrides: Extra public id → location registrations.
    """
    for public_id, resource_name in KNOWN_DTD_RESOURCES.items():
        cache.register(public_id, resource_name)
    for public_id, location in (overrides or {}).items():
        cache.register(public_id, location)


def known_public_ids() -> list[str]:
    return sorted(KNOWN_DTD_RESOURCES)
