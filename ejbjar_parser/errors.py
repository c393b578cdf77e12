"""Exceptions raised by the descriptor reader."""


class DescriptorError(Exception):
    """Base error for descriptor processing."""
    pass


class DescriptorReadError(DescriptorError):
    """The descriptor could not be read or is not well-formed markup."""
    pass


class DescriptorStructureError(DescriptorError):
    """The descriptor does not follow the ejb-jar hierarchy (strict mode only)."""

    def __init__(self, element: str, state) -> None:
        self.element = element
        self.state = state
        super().__init__(f"Unexpected <{element}> while in state {state.value}")
