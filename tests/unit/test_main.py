"""Tests for the aboutfile CLI (aboutfile.main and aboutfile.commands)."""
import json
from unittest.mock import patch

import pytest

from aboutfile import config as config_mod
from aboutfile.commands import get_version, split_extensions
from aboutfile.main import main


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    path = tmp_path / "aboutfile.toml"
    with patch.dict("os.environ", {"ABOUTFILE_CONFIG_PATH": str(path)}, clear=True), \
         patch.object(config_mod, "_config", None):
        yield path


def run(*argv):
    with patch("sys.argv", ["aboutfile", *argv]):
        main()


class TestSplitExtensions:
    def test_none(self):
        assert split_extensions(None) is None

    def test_normalised(self):
        assert split_extensions("png, .JPG,,gif ") == ["png", "jpg", "gif"]


class TestGetVersion:
    def test_reads_pyproject(self, tmp_path):
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "aboutfile"\nversion = "9.8.7"\n')
        assert get_version(pyproject) == "9.8.7"

    def test_falls_back_to_metadata(self, tmp_path):
        with patch("aboutfile.commands.version", return_value="1.2.3"):
            assert get_version(tmp_path / "missing.toml") == "1.2.3"

    def test_malformed_pyproject_falls_back(self, tmp_path):
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project\n")
        with patch("aboutfile.commands.version", return_value="1.2.3"):
            assert get_version(pyproject) == "1.2.3"

    def test_uses_config_toml_parser(self):
        from aboutfile import commands
        assert commands.tomllib is config_mod.tomllib


class TestCheck:
    def test_valid_name(self, capsys):
        run("check", "photo.jpg")
        out = capsys.readouterr().out
        assert out.startswith("ok")
        assert "ext=jpg" in out
        assert "type=image (JPEG)" in out

    def test_invalid_name_exits_1(self, capsys):
        with pytest.raises(SystemExit) as exc:
            run("check", "good.txt", "bad$name.txt")
        assert exc.value.code == 1
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("ok")
        assert lines[1].startswith("INVALID")

    def test_not_allowed(self, capsys):
        with pytest.raises(SystemExit) as exc:
            run("check", "--allow", "png", "photo.jpg")
        assert exc.value.code == 1
        assert "NOT ALLOWED" in capsys.readouterr().out

    def test_allowed(self, capsys):
        run("check", "--allow", "png,jpg", "photo.JPG")
        assert capsys.readouterr().out.startswith("ok")

    def test_json(self, capsys):
        run("check", "--json", "setup.exe", "README")
        first, second = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
        assert first["extension"] == "exe"
        assert first["file_type"] == "executable"
        assert first["subtype"] == "EXE - Windows Executable"
        assert second["extension"] is None
        assert second["name"] == "README"
        assert second["file_type"] == "unknown"

    def test_file_type_omitted_when_disabled(self, capsys, isolated_config):
        isolated_config.write_text('[classifier]\nfeatures = ["image"]\n')
        run("check", "photo.jpg")
        assert "type=" not in capsys.readouterr().out


class TestType:
    def test_prints_file_types(self, capsys):
        run("type", "setup.exe", "cover.gif", "notes.txt")
        assert capsys.readouterr().out.splitlines() == [
            "executable/EXE\tsetup.exe",
            "image/GIF\tcover.gif",
            "unknown\tnotes.txt",
        ]

    def test_disabled_feature_exits_2(self, capsys):
        with patch.dict("os.environ", {"ABOUTFILE_FEATURES": "image"}):
            with pytest.raises(SystemExit) as exc:
                run("type", "photo.jpg")
        assert exc.value.code == 2
        assert "file-type" in capsys.readouterr().err


class TestConfigCommand:
    def test_shows_defaults(self, capsys):
        run("config")
        out = capsys.readouterr().out
        assert "not found, using defaults" in out
        assert '"executable_formats"' in out

    def test_bad_config_exits_2(self, capsys, isolated_config):
        isolated_config.write_text('[classifier]\nimage_formats = ["xcf"]\n')
        with pytest.raises(SystemExit) as exc:
            run("config")
        assert exc.value.code == 2
        assert "invalid configuration" in capsys.readouterr().err


class TestNoCommand:
    def test_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc:
            run()
        assert exc.value.code == 0
        assert "usage: aboutfile" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            run("--version")
        assert exc.value.code == 0
        assert capsys.readouterr().out.startswith("aboutfile ")
