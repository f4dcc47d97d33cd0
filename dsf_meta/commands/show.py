from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from ..dsf import read_file
from ..errors import TagError
from ..models import TrackRecord

logger = logging.getLogger(__name__)

FIELDS = (
    ("File type", "file_type"),
    ("Format", "format"),
    ("Title", "title"),
    ("Album", "album"),
    ("Artist", "artist"),
    ("Album artist", "album_artist"),
    ("Composer", "composer"),
    ("Genre", "genre"),
)


def run(paths: Iterable[Path], *, json_output: bool = False, include_raw: bool = False) -> bool:
    for path in paths:
        try:
            meta = read_file(path)
        except TagError as exc:
            logger.error("Failed to read %s: %s", path, exc.message)
            print(f"ERROR: {exc}")
            return False
        record = TrackRecord.from_metadata(path, meta, include_raw=include_raw)
        if json_output:
            print(json.dumps(record.to_record(), indent=2, ensure_ascii=False))
        else:
            print(format_record(record))
    return True


def format_record(record: TrackRecord) -> str:
    lines = [str(record.path)]
    for label, attr in FIELDS:
        value = getattr(record, attr)
        if value:
            lines.append(f"  {label + ':':<14}{value}")
    if record.year:
        lines.append(f"  {'Year:':<14}{record.year}")
    if record.track_number:
        lines.append(f"  {'Track:':<14}{_pair(record.track_number, record.track_total)}")
    if record.disc_number:
        lines.append(f"  {'Disc:':<14}{_pair(record.disc_number, record.disc_total)}")
    if record.picture is not None:
        lines.append(f"  {'Picture:':<14}{record.picture}")
    if record.lyrics:
        lines.append(f"  {'Lyrics:':<14}{len(record.lyrics)} characters")
    for key, value in sorted(record.raw.items()):
        lines.append(f"  {key + ':':<14}{value}")
    return "\n".join(lines)


def _pair(number: int, total: int) -> str:
    if total:
        return f"{number}/{total}"
    return str(number)
