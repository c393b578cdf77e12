"""Shared data models used across descriptor modules."""

from dataclasses import dataclass, field

from ejbjar_parser.domain.enums import ParseState


# ── Parse Events ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DocumentStart:
    """The engine started a new document."""


@dataclass(frozen=True)
class ElementStart:
    """An element was opened."""

    name: str
    attributes: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class Characters:
    """A raw chunk of character data."""

    chunk: str


@dataclass(frozen=True)
class ElementEnd:
    """An element was closed."""

    name: str


@dataclass(frozen=True)
class DocumentEnd:
    """The engine reached the end of the document."""


ParseEvent = DocumentStart | ElementStart | Characters | ElementEnd | DocumentEnd


# ── Machine State & Effects ─────────────────────────────────────────────

@dataclass(frozen=True)
class MachineState:
    """Immutable snapshot of the descriptor state machine."""

    parse_state: ParseState = ParseState.SEEKING_ROOT
    current_element: str = ''
    text: str = ''
    in_reference: bool = False
    name_captured: bool = False


@dataclass(frozen=True)
class ClassReference:
    """A class-role leaf produced a class name to bundle."""

    class_name: str


@dataclass(frozen=True)
class NameCaptured:
    """The first ejb-name of the document was seen."""

    name: str


Effect = ClassReference | NameCaptured


# ── Options & Results ───────────────────────────────────────────────────

@dataclass
class ParseOptions:
    """Options controlling a descriptor parse."""

    strict: bool = False
    resolve_entities: bool = True
    known_dtds: bool = True
    dtd_locations: dict[str, str] = field(default_factory=dict)


@dataclass
class DescriptorResult:
    """What a single parse session extracted from a descriptor."""

    descriptor: str
    manifest: dict[str, str]
    ejb_name: str | None = None
    public_id: str | None = None


@dataclass
class ParseError:
    """A parsing error for a single descriptor."""

    file: str
    error: str


@dataclass
class DumpOptions:
    """Options controlling the dump output."""

    pretty: bool = True
    parse: ParseOptions = field(default_factory=ParseOptions)


@dataclass
class DumpResult:
    """Result summary of a dump operation."""

    descriptors: int
    files_collected: int
    errors_count: int
    output_dir: str | None
