from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, BinaryIO, Dict, Optional, Protocol, Tuple


class Format(str, Enum):
    """Tag dialect found in a file."""

    UNKNOWN = ""
    ID3V1 = "ID3v1"
    ID3V2_2 = "ID3v2.2"
    ID3V2_3 = "ID3v2.3"
    ID3V2_4 = "ID3v2.4"
    MP4 = "MP4"
    VORBIS = "VORBIS"


class FileType(str, Enum):
    """Container type of a file."""

    UNKNOWN = ""
    MP3 = "MP3"
    M4A = "M4A"
    M4B = "M4B"
    M4P = "M4P"
    ALAC = "ALAC"
    FLAC = "FLAC"
    OGG = "OGG"
    DSF = "DSF"


@dataclass(frozen=True, slots=True)
class Picture:
    ext: str
    mime_type: str
    type: str
    description: str
    data: bytes

    def __str__(self) -> str:
        return (
            f"Picture(ext={self.ext}, mime={self.mime_type}, type={self.type}, "
            f"description={self.description!r}, {len(self.data)} bytes)"
        )


class Metadata(Protocol):
    """Accessors every supported tag format exposes.

    Accessors are total: absent fields come back as an empty string, ``0``,
    ``(0, 0)``, ``None`` (picture) or an empty mapping (raw).
    """

    def format(self) -> Format: ...

    def file_type(self) -> FileType: ...

    def title(self) -> str: ...

    def album(self) -> str: ...

    def artist(self) -> str: ...

    def album_artist(self) -> str: ...

    def composer(self) -> str: ...

    def year(self) -> int: ...

    def genre(self) -> str: ...

    def track(self) -> Tuple[int, int]: ...

    def disc(self) -> Tuple[int, int]: ...

    def picture(self) -> Optional[Picture]: ...

    def lyrics(self) -> str: ...

    def raw(self) -> Dict[str, Any]: ...


class EmbeddedMetadataDecoder(Protocol):
    """Decodes a tag block starting at the stream's current position."""

    def decode(self, stream: BinaryIO) -> Metadata: ...
