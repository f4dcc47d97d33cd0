from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .metadata import Metadata, Picture


@dataclass(slots=True)
class TrackRecord:
    """Plain snapshot of a file's metadata, ready for printing or JSON."""

    path: Path
    file_type: str = ""
    format: str = ""
    title: str = ""
    album: str = ""
    artist: str = ""
    album_artist: str = ""
    composer: str = ""
    year: int = 0
    genre: str = ""
    track_number: int = 0
    track_total: int = 0
    disc_number: int = 0
    disc_total: int = 0
    lyrics: str = ""
    picture: Optional[Picture] = None
    chunk_size: Optional[int] = None
    file_size: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_metadata(cls, path: Path, meta: Metadata, *, include_raw: bool = False) -> "TrackRecord":
        track_number, track_total = meta.track()
        disc_number, disc_total = meta.disc()
        return cls(
            path=path,
            file_type=meta.file_type().value,
            format=meta.format().value,
            title=meta.title(),
            album=meta.album(),
            artist=meta.artist(),
            album_artist=meta.album_artist(),
            composer=meta.composer(),
            year=meta.year(),
            genre=meta.genre(),
            track_number=track_number,
            track_total=track_total,
            disc_number=disc_number,
            disc_total=disc_total,
            lyrics=meta.lyrics(),
            picture=meta.picture(),
            chunk_size=getattr(meta, "chunk_size", None),
            file_size=getattr(meta, "file_size", None),
            raw=meta.raw() if include_raw else {},
        )

    def to_record(self) -> Dict[str, object]:
        payload = {
            "path": self.path,
            "file_type": self.file_type,
            "format": self.format,
            "title": self.title,
            "album": self.album,
            "artist": self.artist,
            "album_artist": self.album_artist,
            "composer": self.composer,
            "year": self.year,
            "genre": self.genre,
            "track_number": self.track_number,
            "track_total": self.track_total,
            "disc_number": self.disc_number,
            "disc_total": self.disc_total,
            "lyrics": self.lyrics,
            "picture": self.picture,
            "chunk_size": self.chunk_size,
            "file_size": self.file_size,
        }
        if self.raw:
            payload["raw"] = self.raw
        return {key: self._serialize(value) for key, value in payload.items()}

    @staticmethod
    def _serialize(value: object) -> object:
        if isinstance(value, bytes):
            return value.decode("utf-8", errors="replace")
        if isinstance(value, Path):
            return str(value)
        if isinstance(value, Picture):
            return {
                "ext": value.ext,
                "mime_type": value.mime_type,
                "type": value.type,
                "description": value.description,
                "size": len(value.data),
            }
        if isinstance(value, (list, tuple)):
            return [TrackRecord._serialize(item) for item in value]
        if isinstance(value, dict):
            return {str(k): TrackRecord._serialize(v) for k, v in value.items()}
        return value
