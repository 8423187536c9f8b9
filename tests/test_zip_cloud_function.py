"""
Tests for the function bundler script.
"""

import zipfile

import pytest

from scripts.zip_cloud_function import build_function, find_functions, main


@pytest.fixture
def function_dir(tmp_path):
    func = tmp_path / "functions" / "echo"
    (func / "__pycache__").mkdir(parents=True)
    (func / "index.py").write_text("def handler(event, context):\n    return event\n", encoding="utf-8")
    (func / "__init__.py").write_text("", encoding="utf-8")
    (func / "__pycache__" / "index.cpython-312.pyc").write_bytes(b"\x00")
    (func / "requirements.txt").write_text("", encoding="utf-8")
    return func


class TestBuildFunction:
    """Tests for build_function."""

    def test_archive_layout(self, function_dir, tmp_path) -> None:
        zip_path = build_function(function_dir, tmp_path / "zips")
        assert zip_path.name == "echo.zip"
        names = set(zipfile.ZipFile(zip_path).namelist())
        assert "index.py" in names
        assert "requirements.txt" in names
        assert "cloud_utils/__init__.py" in names
        assert "cloud_utils/util_handler/helper.py" in names
        assert "__init__.py" not in names
        assert not any("__pycache__" in n for n in names)

    def test_requires_index(self, tmp_path) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()
        with pytest.raises(FileNotFoundError):
            build_function(empty, tmp_path / "zips")


class TestCli:
    def test_find_functions(self, function_dir, tmp_path) -> None:
        (tmp_path / "functions" / "notes").mkdir()
        assert find_functions(tmp_path / "functions") == [function_dir]

    def test_main_builds_archives(self, function_dir, tmp_path, capsys) -> None:
        out = tmp_path / "out"
        assert main([str(function_dir), "--out", str(out)]) == 0
        assert (out / "echo.zip").is_file()
        assert "echo" in capsys.readouterr().out
