"""Entry points reading GPX documents from byte sources.

Each call reads exactly one document and shares no state with any other
call. Failures propagate as ``GpxError`` subclasses; nothing is recovered.
"""

import io
import time
from pathlib import Path
from typing import BinaryIO, Optional, Type, TypeVar, Union

from gpx_stream_reader.parser import EmptyExtensions, WaypointExtensions, create_context
from gpx_stream_reader.parser import gpx as gpx_consumer
from gpx_stream_reader.shared import GpxError, ReaderConfig, get_logger
from gpx_stream_reader.types import Gpx

V = TypeVar("V")

MS_PER_SECOND = 1000


def read(source: BinaryIO, config: Optional[ReaderConfig] = None) -> Gpx[None]:
    """Read a GPX document without waypoint extensions.

    Args:
        source: Binary file-like object positioned at the document start
        config: Optional reader configuration

    Returns:
        The parsed document; optional values dropped because they could
        not be converted are listed in its ``diagnostics``

    Raises:
        GpxError: If the document is malformed or violates the GPX structure

    Examples:
        >>> import io
        >>> document = read(io.BytesIO(b"<gpx></gpx>"))
        >>> document.tracks, document.routes, document.metadata
        ([], [], None)
    """
    return read_with_extensions(source, EmptyExtensions, config)


def read_with_extensions(
    source: BinaryIO,
    extensions: Type[WaypointExtensions[V]],
    config: Optional[ReaderConfig] = None
) -> Gpx[V]:
    """Read a GPX document, parsing waypoint extensions with ``extensions``.

    Args:
        source: Binary file-like object positioned at the document start
        extensions: Hook class consuming each waypoint's ``<extensions>``
        config: Optional reader configuration

    Returns:
        The parsed document; each waypoint carries the hook's value

    Raises:
        GpxError: If the document is malformed or violates the GPX structure
    """
    config = config or ReaderConfig()
    logger = get_logger(__name__, config.correlation_id, "read")
    start_time = time.time()

    logger.debug(
        "Starting GPX read",
        extra={"extensions": extensions.__name__, "chunk_size": config.chunk_size},
    )

    context = create_context(source, extensions, config=config)
    try:
        document = gpx_consumer.consume(context)
    except GpxError as e:
        logger.error(
            "GPX read failed",
            extra={
                "error": type(e).__name__,
                "element": e.element,
                "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
            },
        )
        raise

    logger.info(
        "Finished GPX read",
        extra={
            "version": document.version.value,
            "tracks": len(document.tracks),
            "routes": len(document.routes),
            "waypoints": len(document.waypoints),
            "degraded_values": len(document.diagnostics),
            "bytes_read": context.stream.bytes_read,
            "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
        },
    )
    return document


def read_string(
    content: Union[str, bytes],
    extensions: Type[WaypointExtensions[V]] = EmptyExtensions,
    config: Optional[ReaderConfig] = None
) -> Gpx[V]:
    """Read a GPX document held in memory.

    Text is encoded as UTF-8 before reading, so a ``str`` must not carry an
    XML declaration naming another encoding.
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    return read_with_extensions(io.BytesIO(content), extensions, config)


def read_file(
    path: Union[str, Path],
    extensions: Type[WaypointExtensions[V]] = EmptyExtensions,
    config: Optional[ReaderConfig] = None
) -> Gpx[V]:
    """Read a GPX document from a file path.

    Raises:
        OSError: If the file cannot be opened
        GpxError: If the document is malformed or violates the GPX structure
    """
    with Path(path).open("rb") as source:
        return read_with_extensions(source, extensions, config)
