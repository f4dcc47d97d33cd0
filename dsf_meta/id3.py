from __future__ import annotations

import logging
import re
from typing import Any, BinaryIO, Dict, Optional, Tuple

from mutagen import MutagenError
from mutagen.id3 import APIC, ID3

from .errors import DECODE, DecodeError
from .metadata import FileType, Format, Picture

logger = logging.getLogger(__name__)

_VERSIONS = {
    2: Format.ID3V2_2,
    3: Format.ID3V2_3,
    4: Format.ID3V2_4,
}

# APIC picture type byte -> description (ID3v2.4 section 4.14)
PICTURE_TYPES = {
    0x00: "Other",
    0x01: "32x32 pixels 'file icon' (PNG only)",
    0x02: "Other file icon",
    0x03: "Cover (front)",
    0x04: "Cover (back)",
    0x05: "Leaflet page",
    0x06: "Media (e.g. label side of CD)",
    0x07: "Lead artist/lead performer/soloist",
    0x08: "Artist/performer",
    0x09: "Conductor",
    0x0A: "Band/Orchestra",
    0x0B: "Composer",
    0x0C: "Lyricist/text writer",
    0x0D: "Recording Location",
    0x0E: "During recording",
    0x0F: "During performance",
    0x10: "Movie/video screen capture",
    0x11: "A bright coloured fish",
    0x12: "Illustration",
    0x13: "Band/artist logotype",
    0x14: "Publisher/Studio logotype",
}

_MIME_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
}


class ID3Decoder:
    """Reads an ID3v2 tag starting at the stream's current position."""

    def decode(self, stream: BinaryIO) -> ID3Metadata:
        try:
            tags = ID3(stream, load_v1=False)
        except MutagenError as exc:
            logger.debug("ID3v2 decode failed: %s", exc)
            raise DecodeError(f"invalid ID3v2 tag: {exc}", phase=DECODE) from exc
        return ID3Metadata(tags)


class ID3Metadata:
    """Exposes a mutagen ``ID3`` tag through the common metadata accessors."""

    def __init__(self, tags: ID3) -> None:
        self._tags = tags

    def format(self) -> Format:
        return _VERSIONS.get(self._tags.version[1], Format.UNKNOWN)

    def file_type(self) -> FileType:
        return FileType.MP3

    def title(self) -> str:
        return self._text("TIT2")

    def album(self) -> str:
        return self._text("TALB")

    def artist(self) -> str:
        return self._text("TPE1")

    def album_artist(self) -> str:
        return self._text("TPE2")

    def composer(self) -> str:
        return self._text("TCOM")

    def year(self) -> int:
        # v2.3 TYER is folded into TDRC on load; TYER covers tags loaded untranslated.
        for frame_id in ("TDRC", "TYER"):
            match = re.search(r"\d{4}", self._text(frame_id))
            if match:
                return int(match.group(0))
        return 0

    def genre(self) -> str:
        frames = self._tags.getall("TCON")
        if not frames:
            return ""
        genres = frames[0].genres
        return genres[0] if genres else ""

    def track(self) -> Tuple[int, int]:
        return _number_pair(self._text("TRCK"))

    def disc(self) -> Tuple[int, int]:
        return _number_pair(self._text("TPOS"))

    def picture(self) -> Optional[Picture]:
        frames = self._tags.getall("APIC")
        if not frames:
            return None
        return _picture(frames[0])

    def lyrics(self) -> str:
        frames = self._tags.getall("USLT")
        if not frames:
            return ""
        return frames[0].text or ""

    def raw(self) -> Dict[str, Any]:
        raw: Dict[str, Any] = {}
        for key, frame in self._tags.items():
            if isinstance(frame, APIC):
                raw[key] = _picture(frame)
                continue
            text = getattr(frame, "text", None)
            if isinstance(text, list):
                values = [str(item) for item in text]
                raw[key] = values[0] if len(values) == 1 else values
            elif isinstance(text, str):
                raw[key] = text
            else:
                raw[key] = frame.pprint()
        return raw

    def _text(self, frame_id: str) -> str:
        frames = self._tags.getall(frame_id)
        if not frames or not frames[0].text:
            return ""
        return str(frames[0].text[0])


def _picture(frame: APIC) -> Picture:
    mime = frame.mime or ""
    ext = _MIME_EXTENSIONS.get(mime.lower())
    if ext is None:
        ext = mime.rsplit("/", 1)[-1].lower()
    return Picture(
        ext=ext,
        mime_type=mime,
        type=PICTURE_TYPES.get(int(frame.type), ""),
        description=frame.desc or "",
        data=bytes(frame.data),
    )


def _number_pair(value: str) -> Tuple[int, int]:
    number, _, total = value.partition("/")
    return _parse_int(number), _parse_int(total)


def _parse_int(value: str) -> int:
    cleaned = value.strip()
    if cleaned.isdecimal():
        return int(cleaned)
    return 0
