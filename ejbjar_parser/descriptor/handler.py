"""Descriptor handler: turns parse events into a class-file manifest.

Owns the session-scoped results of one parse (manifest, ejb-name, last
resolved public id) and applies the effects produced by the pure machine in
``ejbjar_parser.descriptor.machine``.
"""

import logging
import os
from typing import Iterable

from ejbjar_parser.descriptor import machine, transitions
from ejbjar_parser.domain.constants import CLASS_EXTENSION, NAMESPACE_SEPARATOR
from ejbjar_parser.domain.enums import ParseState
from ejbjar_parser.domain.models import (
    Characters, ClassReference, DocumentEnd, DocumentStart, ElementEnd,
    ElementStart, MachineState, NameCaptured,
)
from ejbjar_parser.errors import DescriptorStructureError

logger = logging.getLogger(__name__)


def class_file_path(class_name: str) -> str:
    """Relative class-file path for a fully-qualified class name.

    ``com.example.AccountBean`` → ``com/example/AccountBean.class`` (using the
    platform path separator).
    """
    return class_name.replace(NAMESPACE_SEPARATOR, os.sep) + CLASS_EXTENSION


class DescriptorHandler:
    """Collects the class files named by an ejb-jar descriptor.

    One instance handles one parse at a time. It can be reused for sequential
    parses since ``on_document_start`` resets every session field.

    Args:
        base_dir: Directory the class files are resolved against.
        cache: Optional ``EntityResolutionCache`` consulted by
            ``resolve_entity``.
        log: Logging sink; defaults to the module logger.
        strict: Raise ``DescriptorStructureError`` on misplaced container
            elements instead of silently under-extracting.
    """

    def __init__(self, base_dir, cache=None, log: logging.Logger | None = None,
                 strict: bool = False) -> None:
        self.base_dir = os.fspath(base_dir)
        self.cache = cache
        self.strict = strict
        self._log = log or logger
        self._state: MachineState = machine.INITIAL_STATE
        self._manifest: dict[str, str] | None = None
        self._ejb_name: str | None = None
        self._public_id: str | None = None

    # ── Parse Callbacks ──────────────────────────────────────────────────

    def on_document_start(self) -> None:
        self._state, _ = machine.step(self._state, DocumentStart())
        self._manifest = {}
        self._ejb_name = None
        self._public_id = None

    def on_element_start(self, name: str, attributes: Iterable[tuple[str, str]] = ()) -> None:
        if self.strict and not self._state.in_reference and \
                transitions.is_misplaced(self._state.parse_state, name):
            raise DescriptorStructureError(name, self._state.parse_state)
        self._apply(ElementStart(name, tuple(attributes)))

    def on_characters(self, chunk: str) -> None:
        self._apply(Characters(chunk))

    def on_element_end(self, name: str) -> None:
        self._apply(ElementEnd(name))

    def on_document_end(self) -> None:
        self._apply(DocumentEnd())

    def resolve_entity(self, public_id: str | None, system_id: str | None):
        """Resolve an external reference through the attached cache.

        Returns:
            An ``InputSource`` with the entity bytes, or ``None`` to let the
            parsing engine apply its default resolution.
        """
        self._public_id = public_id
        if self.cache is None:
            self._log.info(
                "Could not resolve ( publicId: %s, systemId: %s) to a local entity",
                public_id, system_id,
            )
            return None
        return self.cache.resolve(public_id, system_id)

    # ── Accessors ────────────────────────────────────────────────────────

    def get_manifest(self) -> dict[str, str]:
        """Relative class-file path → file under ``base_dir``."""
        return {} if self._manifest is None else self._manifest

    def get_captured_name(self) -> str | None:
        """Trimmed text of the first ``ejb-name`` seen."""
        return self._ejb_name

    def get_last_public_id(self) -> str | None:
        return self._public_id

    @property
    def parse_state(self) -> ParseState:
        return self._state.parse_state

    @property
    def in_reference(self) -> bool:
        return self._state.in_reference

    # ── Private Methods ──────────────────────────────────────────────────

    def _apply(self, event) -> None:
        if self._manifest is None:
            # Events without a document start still get a fresh session
            self._manifest = {}
        self._state, effects = machine.step(self._state, event)
        for effect in effects:
            if isinstance(effect, ClassReference):
                path = class_file_path(effect.class_name)
                self._manifest[path] = os.path.join(self.base_dir, path)
            elif isinstance(effect, NameCaptured):
                self._ejb_name = effect.name
