"""Unit tests for source loading."""

import zipfile
from pathlib import Path

import pytest

from docsmith.config import DEFAULT_EXCLUDES
from docsmith.sources import load_sources
from tests.fixtures import CALCULATOR_JAVA, SAMPLE_SOURCES_DIR


class TestLoadSources:
    """Tests for load_sources."""

    def test_directory(self) -> None:
        """Test that a directory is read recursively in sorted order."""
        units = load_sources(SAMPLE_SOURCES_DIR)

        assert [u.path for u in units] == [
            "com/acme/Calculator.java",
            "com/acme/Shape.java",
            "notes.txt",
            "util/inventory.py",
        ]
        assert [u.language for u in units] == ["java", "java", "unknown", "python"]
        assert units[0].name == "Calculator.java"

    def test_single_file(self) -> None:
        """Test that a file is read as one unit named after itself."""
        units = load_sources(CALCULATOR_JAVA)

        assert len(units) == 1
        assert (units[0].name, units[0].path) == ("Calculator.java", "Calculator.java")
        assert "public class Calculator" in units[0].content

    def test_zip_archive(self, tmp_path: Path) -> None:
        """Test that archive members become units and directories are skipped."""
        archive = tmp_path / "src.zip"
        with zipfile.ZipFile(archive, "w") as zf:
            zf.writestr("pkg/", "")
            zf.writestr("pkg/B.java", "public class B {\n}\n")
            zf.writestr("pkg/a.py", "class A:\n    pass\n")

        units = load_sources(archive)

        assert [u.path for u in units] == ["pkg/B.java", "pkg/a.py"]
        assert [u.language for u in units] == ["java", "python"]

    def test_invalid_zip(self, tmp_path: Path) -> None:
        """Test that a corrupt archive is rejected."""
        archive = tmp_path / "broken.zip"
        archive.write_bytes(b"not a zip")

        with pytest.raises(ValueError, match="Not a valid zip archive"):
            load_sources(archive)

    def test_missing_path(self, tmp_path: Path) -> None:
        """Test that a missing path is reported."""
        with pytest.raises(FileNotFoundError):
            load_sources(tmp_path / "absent")

    def test_include_and_exclude(self) -> None:
        """Test glob filtering on relative paths."""
        units = load_sources(SAMPLE_SOURCES_DIR, include=["com/*"], exclude=["*Shape*"])
        assert [u.path for u in units] == ["com/acme/Calculator.java"]

    def test_default_excludes_cover_nested_files(self, tmp_path: Path) -> None:
        """Test that the default patterns skip whole directory trees."""
        for relative in ("src/A.java", ".git/objects/ab/B.java", "build/gen/deep/C.java"):
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("public class X {\n}\n", encoding="utf-8")

        units = load_sources(tmp_path, exclude=DEFAULT_EXCLUDES)

        assert [u.path for u in units] == ["src/A.java"]

    def test_binary_files_skipped(self, tmp_path: Path) -> None:
        """Test that files containing NUL bytes are ignored."""
        (tmp_path / "A.java").write_text("public class A {\n}\n", encoding="utf-8")
        (tmp_path / "A.class").write_bytes(b"\xca\xfe\xba\xbe\x00\x00")

        units = load_sources(tmp_path)

        assert [u.path for u in units] == ["A.java"]

    def test_invalid_utf8_replaced(self, tmp_path: Path) -> None:
        """Test that undecodable bytes do not abort loading."""
        (tmp_path / "A.java").write_bytes(b"// caf\xe9\npublic class A {\n}\n")

        units = load_sources(tmp_path)

        assert "\ufffd" in units[0].content
