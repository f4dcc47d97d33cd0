from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from ..dsf import read_file
from ..errors import TagError
from ..scanner import LibraryScanner

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ScanReport:
    read: int = 0
    failed: list[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def run(scanner: LibraryScanner, roots: Optional[Iterable[Path]] = None) -> ScanReport:
    report = ScanReport()
    for path in scanner.iter_files(roots):
        try:
            meta = read_file(path)
        except TagError as exc:
            logger.warning("Failed to read %s: %s", path, exc.message)
            report.failed.append(path)
            print(f"{path}: ERROR ({exc.phase}: {exc.message})")
            continue
        report.read += 1
        label = " - ".join(part for part in (meta.artist(), meta.title()) if part)
        print(f"{path}: OK ({label})" if label else f"{path}: OK")
    print(f"Scan complete: {report.read} read, {len(report.failed)} failed.")
    return report
