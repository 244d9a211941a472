"""
Outcome of a tileset load: the model plus any recoverable problems met on the way.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from .tileset import Tileset


class WarningKind(Enum):
    """Recoverable problems. The offending declaration is skipped or defaulted."""
    DUPLICATE_TILE = auto()
    MISSING_ATTRIBUTE = auto()
    UNKNOWN_SYMMETRY = auto()
    UNKNOWN_TILE = auto()
    CASE_OUT_OF_RANGE = auto()
    INVALID_NUMBER = auto()
    EXTRA_TOKENS = auto()
    UNKNOWN_ATTRIBUTE = auto()
    UNKNOWN_ELEMENT = auto()
    TRUNCATED = auto()


@dataclass(frozen=True)
class LoadWarning:
    kind: WarningKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.name.lower()}: {self.message}"


@dataclass
class LoadResult:
    """A successful load. Warnings do not make it a failure."""
    tileset: Tileset
    warnings: list[LoadWarning] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def warnings_of(self, kind: WarningKind) -> list[LoadWarning]:
        return [w for w in self.warnings if w.kind == kind]
