"""EJB deployment descriptor reader."""

from ejbjar_parser.descriptor.handler import DescriptorHandler, class_file_path
from ejbjar_parser.descriptor_reader import DescriptorReader, parse_descriptor
from ejbjar_parser.domain.enums import ParseState, ResolutionTier
from ejbjar_parser.domain.models import DescriptorResult, ParseOptions
from ejbjar_parser.errors import DescriptorError, DescriptorReadError, DescriptorStructureError
from ejbjar_parser.resolution.entity_cache import EntityResolutionCache
from ejbjar_parser.resolution.known_dtds import register_known_dtds

__all__ = [
    'DescriptorHandler', 'class_file_path', 'DescriptorReader',
    'parse_descriptor', 'ParseState', 'ResolutionTier',
    'DescriptorResult', 'ParseOptions', 'DescriptorError',
    'DescriptorReadError', 'DescriptorStructureError',
    'EntityResolutionCache', 'register_known_dtds',
]
