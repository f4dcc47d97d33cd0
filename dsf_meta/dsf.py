from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO, Dict, Optional, Tuple

from mutagen import MutagenError

from .binary import lsb, read_exact
from .errors import DECODE, HEADER, SEEK, DecodeError, FormatError, ReadError, TagError
from .id3 import ID3Decoder
from .metadata import EmbeddedMetadataDecoder, FileType, Format, Metadata, Picture

logger = logging.getLogger(__name__)

SIGNATURE = b"DSD "
HEADER_SIZE = 28


@dataclass(frozen=True, slots=True)
class DSFHeader:
    signature: bytes
    chunk_size: int
    file_size: int
    metadata_pointer: int


def read_header(stream: BinaryIO) -> DSFHeader:
    """Parse the 28-byte ``DSD `` chunk and seek to the metadata pointer.

    On return the stream is positioned at ``metadata_pointer``. The pointer
    is not range-checked here; a bad offset surfaces from the seek or from
    the decoder reading at it.
    """
    signature = read_exact(stream, 4)
    if signature != SIGNATURE:
        raise FormatError(f"expected {SIGNATURE!r}, found {signature!r}", phase=HEADER)
    chunk_size = lsb(read_exact(stream, 8))
    file_size = lsb(read_exact(stream, 8))
    metadata_pointer = lsb(read_exact(stream, 8))
    try:
        stream.seek(metadata_pointer)
    except (OSError, ValueError, OverflowError) as exc:
        raise ReadError(f"cannot seek to metadata at offset {metadata_pointer}: {exc}", phase=SEEK) from exc
    logger.debug(
        "DSD chunk: chunk_size=%d file_size=%d metadata_pointer=%d",
        chunk_size,
        file_size,
        metadata_pointer,
    )
    return DSFHeader(
        signature=signature,
        chunk_size=chunk_size,
        file_size=file_size,
        metadata_pointer=metadata_pointer,
    )


@dataclass(frozen=True, slots=True)
class DSFMetadata:
    """Metadata of a DSF file.

    Every accessor is answered by the embedded tag except ``file_type``,
    which reports the container. ``format`` still reports the embedded tag
    version, since that is decided by the payload rather than the container.
    """

    embedded: Metadata
    chunk_size: int = 0
    file_size: int = 0

    def format(self) -> Format:
        return self.embedded.format()

    def file_type(self) -> FileType:
        return FileType.DSF

    def title(self) -> str:
        return self.embedded.title()

    def album(self) -> str:
        return self.embedded.album()

    def artist(self) -> str:
        return self.embedded.artist()

    def album_artist(self) -> str:
        return self.embedded.album_artist()

    def composer(self) -> str:
        return self.embedded.composer()

    def year(self) -> int:
        return self.embedded.year()

    def genre(self) -> str:
        return self.embedded.genre()

    def track(self) -> Tuple[int, int]:
        return self.embedded.track()

    def disc(self) -> Tuple[int, int]:
        return self.embedded.disc()

    def picture(self) -> Optional[Picture]:
        return self.embedded.picture()

    def lyrics(self) -> str:
        return self.embedded.lyrics()

    def raw(self) -> Dict[str, Any]:
        return self.embedded.raw()


def read_dsf_tags(stream: BinaryIO, decoder: Optional[EmbeddedMetadataDecoder] = None) -> DSFMetadata:
    """Read DSF metadata from a seekable binary stream."""
    header = read_header(stream)
    if decoder is None:
        decoder = ID3Decoder()
    try:
        embedded = decoder.decode(stream)
    except MutagenError as exc:
        raise DecodeError(f"embedded tag rejected: {exc}", phase=DECODE) from exc
    return DSFMetadata(embedded, chunk_size=header.chunk_size, file_size=header.file_size)


def read_file(path: Path, decoder: Optional[EmbeddedMetadataDecoder] = None) -> DSFMetadata:
    path = Path(path)
    try:
        fh = path.open("rb")
    except OSError as exc:
        raise ReadError(f"cannot open file: {exc}", phase=HEADER, path=path) from exc
    with fh:
        try:
            return read_dsf_tags(fh, decoder)
        except TagError as exc:
            if exc.path is None:
                exc.path = path
            raise
