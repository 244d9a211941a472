"""
Load tileset XML files.
Events are pulled from a QXmlStreamReader and fed to a TilesetBuilder.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional, Union

from PySide6.QtCore import QBuffer, QByteArray, QIODevice, QXmlStreamReader

from ..models import LoaderSettings, LoadResult
from .assembly import TilesetBuilder
from .errors import TilesetIOError, TilesetNotFoundError, TilesetSyntaxError
from .events import ElementEnd, ElementStart, EndOfDocument, XmlEvent

logger = logging.getLogger(__name__)

TokenType = QXmlStreamReader.TokenType


def read_events(data: Union[bytes, str]) -> Iterator[XmlEvent]:
    """
    Yield the element events of an XML document.

    A document that stops early ends with EndOfDocument(truncated=True).

    Raises:
        TilesetSyntaxError: If the document is malformed
    """
    if isinstance(data, str):
        data = data.encode('utf-8')
    # The reader only takes a device or text, so raw bytes go through a buffer
    buffer = QBuffer()
    buffer.setData(QByteArray(data))
    buffer.open(QIODevice.ReadOnly)
    reader = QXmlStreamReader(buffer)

    while not reader.atEnd():
        token = reader.readNext()
        if token == TokenType.StartElement:
            attributes = {
                str(attribute.name()): str(attribute.value())
                for attribute in reader.attributes()
            }
            yield ElementStart(str(reader.name()), attributes)
        elif token == TokenType.EndElement:
            yield ElementEnd(str(reader.name()))
        elif token == TokenType.EndDocument:
            yield EndOfDocument()
            return

    if reader.hasError():
        if reader.error() == QXmlStreamReader.Error.PrematureEndOfDocumentError:
            logger.warning("unexpected xml eof")
            yield EndOfDocument(truncated=True)
            return
        raise TilesetSyntaxError(
            f"tileset parse error: {reader.errorString()}",
            line=reader.lineNumber(),
            column=reader.columnNumber()
        )


def load_tileset(data: Union[bytes, str],
                 settings: Optional[LoaderSettings] = None) -> LoadResult:
    """
    Build a tileset from XML text.

    Raises:
        TilesetSyntaxError: If the document is malformed
    """
    return TilesetBuilder(settings).consume(read_events(data)).build()


def load_tileset_file(file_path: Union[str, Path],
                      settings: Optional[LoaderSettings] = None) -> LoadResult:
    """
    Load a tileset from an XML file.

    Args:
        file_path: Path to the tileset file
        settings: Loader settings, defaults if omitted

    Returns:
        LoadResult with the tileset and any warnings

    Raises:
        TilesetNotFoundError: If the file doesn't exist
        TilesetIOError: If the file can't be read
        TilesetSyntaxError: If the XML is malformed
    """
    path = Path(file_path)
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        raise TilesetNotFoundError(f"File not found: {file_path}") from None
    except OSError as e:
        raise TilesetIOError(f"Could not read {file_path}: {e}") from e

    logger.info("loading tileset %s", path)
    return load_tileset(data, settings)
