"""Pure event transducer for ejb-jar descriptors.

``step`` maps ``(state, event)`` to ``(new_state, effects)`` without touching
any I/O, so the whole parse can be replayed from a list of events. Effects
are interpreted by ``DescriptorHandler``.
"""

from dataclasses import replace

from ejbjar_parser.descriptor import transitions
from ejbjar_parser.domain.constants import (
    CLASS_ROLE_TAGS, EJB_NAME, EJB_REF, RESERVED_PREFIXES,
)
from ejbjar_parser.domain.models import (
    Characters, ClassReference, DocumentEnd, DocumentStart, Effect,
    ElementEnd, ElementStart, MachineState, NameCaptured, ParseEvent,
)

INITIAL_STATE = MachineState()


def step(state: MachineState, event: ParseEvent) -> tuple[MachineState, list[Effect]]:
    """Advance the machine by one parse event.

    Args:
        state: Current machine state.
        event: Next event in document order.

    Returns:
        Tuple of (new state, effects produced by the event).
    """
    if isinstance(event, DocumentStart):
        return INITIAL_STATE, []

    if isinstance(event, ElementStart):
        return _start_element(state, event.name), []

    if isinstance(event, Characters):
        return replace(state, text=state.text + event.chunk), []

    if isinstance(event, ElementEnd):
        effects = leaf_effects(state)
        state = replace(
            state,
            current_element='',
            text='',
            name_captured=state.name_captured or any(isinstance(e, NameCaptured) for e in effects),
        )
        return _end_element(state, event.name), effects

    if isinstance(event, DocumentEnd):
        return state, []

    raise TypeError(f"Unsupported parse event: {event!r}")


def run(events, state: MachineState = INITIAL_STATE) -> tuple[MachineState, list[Effect]]:
    """Fold a sequence of events through ``step``, collecting every effect."""
    collected: list[Effect] = []
    for event in events:
        state, effects = step(state, event)
        collected.extend(effects)
    return state, collected


def leaf_effects(state: MachineState) -> list[Effect]:
    """Effects of closing the current element, read against the open state."""
    if state.in_reference or not state.parse_state.is_bean:
        return []

    element = state.current_element
    if element in CLASS_ROLE_TAGS:
        class_name = state.text.strip()
        if class_name.startswith(RESERVED_PREFIXES):
            return []
        return [ClassReference(class_name)]

    if element == EJB_NAME and not state.name_captured:
        return [NameCaptured(state.text.strip())]

    return []


# ── Private Helpers ─────────────────────────────────────────────────────

def _start_element(state: MachineState, name: str) -> MachineState:
    state = replace(state, current_element=name, text='')
    if name == EJB_REF:
        return replace(state, in_reference=True)
    return replace(state, parse_state=transitions.enter(state.parse_state, name))


def _end_element(state: MachineState, name: str) -> MachineState:
    if name == EJB_REF:
        return replace(state, in_reference=False)
    return replace(state, parse_state=transitions.leave(state.parse_state, name))
