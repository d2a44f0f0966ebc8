"""Tests for the envstore command line tool."""

from pathlib import Path

import pytest

from envstore.cli import MASK, main


class TestFilesCommand:
    def test_lists_selectors(self, env_dir: Path, capsys: pytest.CaptureFixture[str]):
        assert main(["--dir", str(env_dir), "files"]) == 0
        out = capsys.readouterr().out
        assert "'default'" in out
        assert "' dev'" in out
        assert str(env_dir / ".env.prod") in out

    def test_empty_directory(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        assert main(["--dir", str(tmp_path), "files"]) == 0
        assert "No env files found" in capsys.readouterr().out

    def test_missing_directory(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        assert main(["--dir", str(tmp_path / "missing"), "files"]) == 1
        assert "ERROR" in capsys.readouterr().err

    def test_dir_after_command(self, env_dir: Path, capsys: pytest.CaptureFixture[str]):
        """--dir is accepted after the subcommand as well."""
        assert main(["files", "--dir", str(env_dir)]) == 0
        assert "'prod'" in capsys.readouterr().out

    def test_uses_env_dir_setting(
        self, env_dir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ):
        monkeypatch.setenv("ENVSTORE_DIR", str(env_dir))
        assert main(["files"]) == 0
        assert "'prod'" in capsys.readouterr().out


class TestGetCommand:
    def test_prints_value(self, env_dir: Path, capsys: pytest.CaptureFixture[str]):
        assert main(["--dir", str(env_dir), "get", "testValue", "--env", "prod"]) == 0
        assert capsys.readouterr().out.strip() == "prod env loaded"

    def test_dir_after_command(self, env_dir: Path, capsys: pytest.CaptureFixture[str]):
        """'get KEY --dir DIR' reads from DIR."""
        assert main(["get", "testValue", "--dir", str(env_dir), "--env", "prod"]) == 0
        assert capsys.readouterr().out.strip() == "prod env loaded"

    def test_dir_before_command_not_overridden(self, env_dir: Path, capsys: pytest.CaptureFixture[str]):
        """A leading --dir survives when the subcommand omits it."""
        assert main(["--dir", str(env_dir), "show", "--env", "debug", "--values"]) == 0
        assert "testValue=debug env loaded" in capsys.readouterr().out

    def test_missing_key(self, env_dir: Path, capsys: pytest.CaptureFixture[str]):
        code = main(["--dir", str(env_dir), "get", "NO_SUCH_KEY_XYZ", "--preference", "file_only"])
        assert code == 1
        assert "not found" in capsys.readouterr().err

    def test_native_preference(
        self, env_dir: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ):
        monkeypatch.setenv("testValue", "from process")
        assert main(["--dir", str(env_dir), "get", "testValue", "--preference", "native-first"]) == 0
        assert capsys.readouterr().out.strip() == "from process"

    def test_required_key_missing(self, env_dir: Path, capsys: pytest.CaptureFixture[str]):
        code = main(["--dir", str(env_dir), "get", "PASS", "--env", "prod", "--require", "NOPE_XYZ"])
        assert code == 1
        assert "MISSING_REQUIRED_KEYS" in capsys.readouterr().err

    def test_json_decoder(self, alt_env_dir: Path, capsys: pytest.CaptureFixture[str]):
        code = main(["--dir", str(alt_env_dir), "get", "jsonLoadedBool", "--env", "json", "--decoder", "json"])
        assert code == 0
        assert capsys.readouterr().out.strip() == "true"

    def test_invalid_preference_is_usage_error(self, env_dir: Path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--dir", str(env_dir), "get", "A", "--preference", "bogus"])
        assert exc_info.value.code == 2


class TestShowCommand:
    def test_masks_values(self, env_dir: Path, capsys: pytest.CaptureFixture[str]):
        assert main(["--dir", str(env_dir), "show", "--env", "prod"]) == 0
        out = capsys.readouterr().out
        assert "# selector: 'prod'" in out
        assert f"PASS={MASK}" in out
        assert "hunter2" not in out

    def test_values_flag(self, env_dir: Path, capsys: pytest.CaptureFixture[str]):
        assert main(["--dir", str(env_dir), "show", "--env", "prod", "--values"]) == 0
        assert "PASS=hunter2" in capsys.readouterr().out

    def test_unknown_selector(self, env_dir: Path, capsys: pytest.CaptureFixture[str]):
        assert main(["--dir", str(env_dir), "show", "--env", "staging"]) == 1
        assert "NO_ENV_FILE" in capsys.readouterr().err


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]):
    assert main([]) == 2
    assert "usage" in capsys.readouterr().out.lower()
