"""Data models for scanned source files.

Shared vocabulary between the source scanner, the prompt templates,
and the JSDoc generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Language(str, Enum):
    """Supported source languages."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    TSX = "tsx"

    @classmethod
    def from_path(cls, path: str | Path) -> Language:
        """Detect the language from a file extension.

        Args:
            path: File path to check.

        Returns:
            TYPESCRIPT for .ts/.mts/.cts, TSX for .tsx, JAVASCRIPT otherwise.
        """
        suffix = Path(path).suffix.lower()
        if suffix in (".ts", ".mts", ".cts"):
            return cls.TYPESCRIPT
        if suffix == ".tsx":
            return cls.TSX
        return cls.JAVASCRIPT

    @property
    def fence(self) -> str:
        """Code fence tag used in prompts."""
        return "javascript" if self == Language.JAVASCRIPT else "typescript"


class DeclarationKind(str, Enum):
    """Kinds of declarations that should carry a JSDoc block."""

    FUNCTION = "function"
    CLASS = "class"
    METHOD = "method"


@dataclass
class Declaration:
    """A documentable declaration found in a source file.

    Attributes:
        name: Declared name (methods are qualified as Class.method).
        kind: Function, class, or method.
        line_number: 1-based line where the declaration starts.
        has_jsdoc: Whether a /** ... */ block directly precedes it.
        exported: Whether it is part of an export statement.
    """

    name: str
    kind: DeclarationKind
    line_number: int = 0
    has_jsdoc: bool = False
    exported: bool = False


@dataclass
class SourceScan:
    """Result of scanning one JS/TS source file."""

    file_path: str
    language: Language
    line_count: int = 0
    declarations: list[Declaration] = field(default_factory=list)

    @property
    def undocumented(self) -> list[Declaration]:
        """Declarations without a preceding JSDoc block."""
        return [d for d in self.declarations if not d.has_jsdoc]
