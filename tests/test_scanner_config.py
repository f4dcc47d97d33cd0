import os
import tempfile
import unittest
from pathlib import Path

from dsf_meta.config import LibrarySettings, Settings, find_config, load_settings
from dsf_meta.scanner import LibraryScanner


class TestLibraryScanner(unittest.TestCase):
    def test_yields_dsf_files_only(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "Album").mkdir()
            (root / "Album" / "01.dsf").write_bytes(b"x")
            (root / "Album" / "02.DSF").write_bytes(b"x")
            (root / "Album" / "cover.jpg").write_bytes(b"x")
            (root / "other.flac").write_bytes(b"x")
            scanner = LibraryScanner(LibrarySettings(roots=[str(root)]))
            names = [path.name for path in scanner.iter_files()]
            self.assertEqual(sorted(names), ["01.dsf", "02.DSF"])

    def test_exclude_patterns(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "keep.dsf").write_bytes(b"x")
            (root / "skip").mkdir()
            (root / "skip" / "drop.dsf").write_bytes(b"x")
            settings = LibrarySettings(roots=[str(root)], exclude_patterns=["*/skip/*"])
            names = [path.name for path in LibraryScanner(settings).iter_files()]
            self.assertEqual(names, ["keep.dsf"])

    def test_explicit_roots_and_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            track = root / "single.dsf"
            track.write_bytes(b"x")
            scanner = LibraryScanner(LibrarySettings())
            self.assertEqual(list(scanner.iter_files([track])), [track])
            self.assertEqual(list(scanner.iter_files([root / "missing"])), [])


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = Settings()
        self.assertEqual(settings.library.roots, [])
        self.assertEqual(settings.library.include_extensions, [".dsf"])
        self.assertFalse(settings.output.json_output)
        self.assertFalse(settings.output.include_raw)

    def test_load_yaml(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            config = tmp / "dsf-meta.yaml"
            config.write_text(
                f"library:\n  roots:\n    - {tmp}\n  exclude_patterns: ['*/tmp/*']\noutput:\n  json: true\n",
                encoding="utf-8",
            )
            settings = Settings.load(config)
            self.assertEqual(settings.library.roots, [tmp.resolve()])
            self.assertEqual(settings.library.exclude_patterns, ["*/tmp/*"])
            self.assertTrue(settings.output.json_output)

    def test_empty_yaml_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config = Path(tmpdir) / "dsf-meta.yaml"
            config.write_text("", encoding="utf-8")
            self.assertEqual(Settings.load(config), Settings())

    def test_find_config(self) -> None:
        explicit = Path("/etc/custom.yaml")
        self.assertEqual(find_config(explicit), explicit)
        cwd = os.getcwd()
        with tempfile.TemporaryDirectory() as tmpdir:
            try:
                os.chdir(tmpdir)
                self.assertIsNone(find_config(None))
                self.assertEqual(load_settings(None), Settings())
                Path(tmpdir, "dsf-meta.yml").write_text("output:\n  include_raw: true\n", encoding="utf-8")
                self.assertEqual(find_config(None).name, "dsf-meta.yml")
                self.assertTrue(load_settings(None).output.include_raw)
            finally:
                os.chdir(cwd)


if __name__ == "__main__":
    unittest.main()
