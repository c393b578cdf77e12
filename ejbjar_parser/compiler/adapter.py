"""Interface for stub-compiler adapters.

An adapter translates shared build settings into an invocation of one
particular stub compiler. The descriptor reader never calls an adapter; the
interface lives here so build tooling that consumes manifests can plug one in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable


@dataclass
class CompilerSettings:
    """Settings shared between the build task and its compiler adapter."""

    base_dir: str
    classnames: list[str] = field(default_factory=list)
    classpath: list[str] = field(default_factory=list)
    dest_dir: str | None = None
    extra_args: list[str] = field(default_factory=list)


# Maps a source class file to the files the compiler generates for it
FileNameMapper = Callable[[str], list[str]]


class StubCompilerAdapter(ABC):
    """Abstract strategy every stub-compiler adapter implements."""

    @abstractmethod
    def configure(self, settings: CompilerSettings) -> None:
        """Inject the build settings this adapter works from."""

    @abstractmethod
    def execute(self) -> bool:
        """Run the compiler. Returns whether compilation succeeded."""

    @abstractmethod
    def get_mapper(self) -> FileNameMapper:
        """Mapping from source class files to generated files."""

    @abstractmethod
    def get_classpath(self) -> list[str]:
        """Classpath the compiler process will use."""
