import io
import json
import logging
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from dsf_builders import dsf_file, id3v23, text_frame

from dsf_meta.cli import main


def _write_track(path: Path, title: str = "Test") -> Path:
    path.write_bytes(
        dsf_file(
            id3v23(
                text_frame("TIT2", title),
                text_frame("TPE1", "Artist"),
                text_frame("TRCK", "3/12"),
            )
        )
    )
    return path


class TestCli(unittest.TestCase):
    def tearDown(self) -> None:
        logging.getLogger().handlers.clear()

    def _run(self, *argv: str) -> tuple[str, int]:
        out = io.StringIO()
        code = 0
        with redirect_stdout(out):
            try:
                main(["--log-level", "CRITICAL", *argv])
            except SystemExit as exc:
                code = exc.code or 0
        return out.getvalue(), code

    def test_show_prints_fields(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            track = _write_track(Path(tmpdir) / "01.dsf")
            output, code = self._run("show", str(track))
            self.assertEqual(code, 0)
            self.assertIn("Title:", output)
            self.assertIn("Test", output)
            self.assertIn("File type:    DSF", output)
            self.assertIn("Track:        3/12", output)

    def test_show_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            track = _write_track(Path(tmpdir) / "01.dsf")
            output, code = self._run("show", "--json", "--raw", str(track))
            self.assertEqual(code, 0)
            payload = json.loads(output)
            self.assertEqual(payload["title"], "Test")
            self.assertEqual(payload["file_type"], "DSF")
            self.assertEqual(payload["format"], "ID3v2.3")
            self.assertEqual(payload["raw"]["TPE1"], "Artist")

    def test_show_handles_unparseable_track_text(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            track = Path(tmpdir) / "01.dsf"
            track.write_bytes(dsf_file(id3v23(text_frame("TIT2", "Test"), text_frame("TRCK", "1/1²"))))
            output, code = self._run("show", str(track))
            self.assertEqual(code, 0)
            self.assertIn("Track:        1", output)

    def test_show_failure_exits_non_zero(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            broken = Path(tmpdir) / "broken.dsf"
            broken.write_bytes(b"RIFF" + b"\x00" * 40)
            output, code = self._run("show", str(broken))
            self.assertEqual(code, 1)
            self.assertIn("broken.dsf", output)

    def test_scan_reports_each_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            _write_track(root / "01.dsf", title="One")
            (root / "02.dsf").write_bytes(b"DSD " + b"\x00" * 5)
            (root / "notes.txt").write_text("x", encoding="utf-8")
            output, code = self._run("scan", str(root))
            self.assertEqual(code, 1)
            self.assertIn("01.dsf: OK (Artist - One)", output)
            self.assertIn("02.dsf: ERROR (header:", output)
            self.assertIn("Scan complete: 1 read, 1 failed.", output)

    def test_scan_clean_library(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            _write_track(root / "01.dsf")
            output, code = self._run("scan", str(root))
            self.assertEqual(code, 0)
            self.assertIn("Scan complete: 1 read, 0 failed.", output)


if __name__ == "__main__":
    unittest.main()
