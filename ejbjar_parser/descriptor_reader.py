"""Descriptor reader for ejb-jar deployment descriptors.

Bridges the standard library SAX engine to ``DescriptorHandler``: the engine
tokenizes the markup and pushes events, the handler turns them into a
class-file manifest, and DTD references are resolved through an
``EntityResolutionCache``.
"""

import logging
import os
import xml.sax
from xml.sax import handler as sax_handler
from xml.sax.xmlreader import InputSource

from ejbjar_parser.descriptor.handler import DescriptorHandler
from ejbjar_parser.domain.models import DescriptorResult, ParseError, ParseOptions
from ejbjar_parser.errors import DescriptorError, DescriptorReadError
from ejbjar_parser.resolution.entity_cache import EntityResolutionCache
from ejbjar_parser.resolution.known_dtds import register_known_dtds

logger = logging.getLogger(__name__)


class SaxDescriptorAdapter(sax_handler.ContentHandler, sax_handler.EntityResolver):
    """Forwards SAX callbacks to a ``DescriptorHandler``."""

    def __init__(self, descriptor_handler: DescriptorHandler) -> None:
        super().__init__()
        self.handler = descriptor_handler

    def startDocument(self):
        self.handler.on_document_start()

    def endDocument(self):
        self.handler.on_document_end()

    def startElement(self, name, attrs):
        self.handler.on_element_start(name, list(attrs.items()))

    def endElement(self, name):
        self.handler.on_element_end(name)

    def characters(self, content):
        self.handler.on_characters(content)

    def resolveEntity(self, publicId, systemId):
        source = self.handler.resolve_entity(publicId, systemId)
        # Returning the system id makes expat fall back to its own lookup
        return source if source is not None else systemId


def build_cache(options: ParseOptions) -> EntityResolutionCache:
    """Entity cache pre-populated according to ``options``."""
    cache = EntityResolutionCache()
    if options.known_dtds:
        register_known_dtds(cache, options.dtd_locations)
    else:
        for public_id, location in options.dtd_locations.items():
            cache.register(public_id, location)
    return cache


def parse_descriptor(descriptor_path: str, base_dir, cache: EntityResolutionCache | None = None,
                     options: ParseOptions | None = None) -> DescriptorResult:
    """Parse one descriptor into a ``DescriptorResult``.

    Args:
        descriptor_path: Path to the ejb-jar XML file.
        base_dir: Directory the class files are resolved against.
        cache: Entity cache to resolve DTDs with. Built from ``options`` when
            omitted.
        options: Parse options (strictness, entity resolution, DTDs).

    Raises:
        DescriptorReadError: The file is unreadable or not well-formed.
        DescriptorStructureError: Strict mode found a misplaced element.
    """
    options = options or ParseOptions()
    if cache is None:
        cache = build_cache(options)

    descriptor_handler = DescriptorHandler(base_dir, cache=cache, strict=options.strict)
    adapter = SaxDescriptorAdapter(descriptor_handler)

    reader = xml.sax.make_parser()
    reader.setFeature(sax_handler.feature_namespaces, False)
    reader.setFeature(sax_handler.feature_external_ges, options.resolve_entities)
    reader.setContentHandler(adapter)
    reader.setEntityResolver(adapter)

    path = os.path.abspath(descriptor_path)
    try:
        with open(path, 'rb') as stream:
            source = InputSource(path)
            source.setByteStream(stream)
            reader.parse(source)
    except xml.sax.SAXException as e:
        raise DescriptorReadError(f"Failed to parse descriptor {descriptor_path}: {e}") from e
    except OSError as e:
        raise DescriptorReadError(f"Failed to read descriptor {descriptor_path}: {e}") from e

    result = DescriptorResult(
        descriptor=os.fspath(descriptor_path),
        manifest=dict(descriptor_handler.get_manifest()),
        ejb_name=descriptor_handler.get_captured_name(),
        public_id=descriptor_handler.get_last_public_id(),
    )
    logger.debug("Parsed %s: %d class files", descriptor_path, len(result.manifest))
    return result


class DescriptorReader:
    """Reads several descriptors with one shared entity cache.

    Failures are collected per descriptor instead of aborting the batch.
    """

    def __init__(self, base_dir, options: ParseOptions | None = None) -> None:
        self.base_dir = base_dir
        self.options = options or ParseOptions()
        self.cache = build_cache(self.options)

    def read(self, descriptor_path: str) -> DescriptorResult:
        return parse_descriptor(descriptor_path, self.base_dir, cache=self.cache, options=self.options)

    def read_all(self, descriptor_paths: list[str]) -> tuple[list[DescriptorResult], list[ParseError]]:
        results: list[DescriptorResult] = []
        errors: list[ParseError] = []
        for path in descriptor_paths:
            try:
                results.append(self.read(path))
            except DescriptorError as e:
                logger.info("Skipping %s: %s", path, e)
                errors.append(ParseError(file=os.path.basename(path), error=str(e)))
        return results, errors
