"""
Flat document events consumed by the tileset builder.
"""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class ElementStart:
    name: str
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ElementEnd:
    name: str


@dataclass(frozen=True)
class EndOfDocument:
    truncated: bool = False           # input ended before the document was complete


XmlEvent = Union[ElementStart, ElementEnd, EndOfDocument]
