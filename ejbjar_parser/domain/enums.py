"""Domain enums for the descriptor parser."""
from enum import Enum


class ParseState(Enum):
    """Position of the parser within the ejb-jar element hierarchy."""
    SEEKING_ROOT = "SEEKING_ROOT"
    IN_ROOT = "IN_ROOT"
    IN_BEANS = "IN_BEANS"
    IN_SESSION = "IN_SESSION"
    IN_ENTITY = "IN_ENTITY"
    IN_MESSAGE = "IN_MESSAGE"

    @property
    def is_bean(self) -> bool:
        return self in (ParseState.IN_SESSION, ParseState.IN_ENTITY, ParseState.IN_MESSAGE)


class ResolutionTier(Enum):
    """Where a registered public identifier points to."""
    FILE = "FILE"
    RESOURCE = "RESOURCE"
    URL = "URL"
