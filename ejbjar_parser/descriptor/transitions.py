"""Transition tables for the ejb-jar element hierarchy.

The hierarchy is fixed: ``ejb-jar > enterprise-beans > {session | entity |
message-driven}``. Opening the expected tag moves one level down, closing the
tag that opened the current level moves one level up. Any other tag leaves
the state untouched.
"""

from ejbjar_parser.domain.constants import (
    EJB_JAR, ENTERPRISE_BEANS, ENTITY_BEAN, MESSAGE_BEAN, SESSION_BEAN,
)
from ejbjar_parser.domain.enums import ParseState

# (from state, opening tag) → to state
OPEN_TRANSITIONS: dict[tuple[ParseState, str], ParseState] = {
    (ParseState.SEEKING_ROOT, EJB_JAR): ParseState.IN_ROOT,
    (ParseState.IN_ROOT, ENTERPRISE_BEANS): ParseState.IN_BEANS,
    (ParseState.IN_BEANS, SESSION_BEAN): ParseState.IN_SESSION,
    (ParseState.IN_BEANS, ENTITY_BEAN): ParseState.IN_ENTITY,
    (ParseState.IN_BEANS, MESSAGE_BEAN): ParseState.IN_MESSAGE,
}

# (from state, closing tag) → to state
CLOSE_TRANSITIONS: dict[tuple[ParseState, str], ParseState] = {
    (to_state, tag): from_state
    for (from_state, tag), to_state in OPEN_TRANSITIONS.items()
}

# Tag that must open each state; SEEKING_ROOT has none
OPENING_TAG: dict[ParseState, str] = {
    to_state: tag for (_, tag), to_state in OPEN_TRANSITIONS.items()
}

# Tags that only make sense one level below a specific state
_EXPECTED_PARENT: dict[str, ParseState] = {
    tag: from_state for (from_state, tag) in OPEN_TRANSITIONS
}


def enter(state: ParseState, tag: str) -> ParseState:
    """State after opening ``tag`` while in ``state``."""
    return OPEN_TRANSITIONS.get((state, tag), state)


def leave(state: ParseState, tag: str) -> ParseState:
    """State after closing ``tag`` while in ``state``."""
    return CLOSE_TRANSITIONS.get((state, tag), state)


def is_misplaced(state: ParseState, tag: str) -> bool:
    """Whether opening ``tag`` in ``state`` breaks the expected hierarchy.

    Used by strict mode only. The document element must be ``ejb-jar``, and
    the container tags must appear directly under their parent level.
    """
    if state is ParseState.SEEKING_ROOT:
        return tag != EJB_JAR
    expected = _EXPECTED_PARENT.get(tag)
    return expected is not None and expected is not state
