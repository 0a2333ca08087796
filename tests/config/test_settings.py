"""Tests for QstrSettings: unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from qstr.config.settings import QstrSettings


class TestDefaults:
    def test_all_defaults(self, config_root: Path) -> None:
        settings = QstrSettings.from_cli(config_root=config_root)
        assert settings.config_root == config_root
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.html.lightness_floor == 0.5
        assert settings.html.lightness_ceiling == 1.0
        assert settings.html.cap_basic is False
        assert settings.page.title == "Chat log"
        assert settings.decode.table == ()

    def test_frozen(self, settings: QstrSettings) -> None:
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]

    def test_cli_flags_applied(self, config_root: Path) -> None:
        settings = QstrSettings.from_cli(config_root=config_root, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True


class TestTomlSource:
    def test_loads_from_toml(self, config_root: Path) -> None:
        (config_root / "qstr.toml").write_text(
            '[html]\nlightness_floor = 0.3\n[page]\ntitle = "Finals"\n'
        )
        settings = QstrSettings.from_cli(config_root=config_root)
        assert settings.html.lightness_floor == 0.3
        assert settings.html.lightness_ceiling == 1.0  # default preserved
        assert settings.page.title == "Finals"
        assert settings.config_path == (config_root / "qstr.toml").resolve()

    def test_decode_table(self, config_root: Path) -> None:
        (config_root / "qstr.toml").write_text(
            '[decode]\ntable = [["\\u0010", "["], ["\\u0011", "]"]]\n'
        )
        settings = QstrSettings.from_cli(config_root=config_root)
        assert settings.decode.table == (("\x10", "["), ("\x11", "]"))
        assert settings.decode.transliterator()("\x10a\x11") == "[a]"

    def test_decode_disabled(self, config_root: Path) -> None:
        (config_root / "qstr.toml").write_text(
            '[decode]\nenabled = false\ntable = [["a", "b"]]\n'
        )
        settings = QstrSettings.from_cli(config_root=config_root)
        assert not settings.decode.transliterator()

    def test_unknown_sections_ignored(self, config_root: Path) -> None:
        (config_root / "qstr.toml").write_text("[theme]\nname = 'x'\n")
        settings = QstrSettings.from_cli(config_root=config_root)
        assert settings.html.lightness_floor == 0.5

    def test_explicit_config_path(self, config_root: Path) -> None:
        custom = config_root / "custom" / "my.toml"
        custom.parent.mkdir()
        custom.write_text("[html]\ncap_basic = true\n")
        settings = QstrSettings.from_cli(config_path=str(custom), config_root=config_root)
        assert settings.html.cap_basic is True
        assert settings.config_path == custom

    def test_walk_up_discovery_sets_root(
        self, config_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (config_root / "qstr.toml").write_text('[page]\ntitle = "up"\n')
        nested = config_root / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = QstrSettings.from_cli()
        assert settings.page.title == "up"
        assert settings.config_root == (config_root / "qstr.toml").resolve().parent

    def test_pyproject_tool_table(self, config_root: Path) -> None:
        (config_root / "pyproject.toml").write_text(
            '[project]\nname = "x"\n[tool.qstr.html]\nlightness_floor = 0.2\n'
        )
        settings = QstrSettings.from_cli(config_root=config_root)
        assert settings.html.lightness_floor == 0.2

    def test_invalid_toml(self, config_root: Path) -> None:
        (config_root / "qstr.toml").write_text("[html\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            QstrSettings.from_cli(config_root=config_root)


class TestEnvOverrides:
    def test_env_beats_toml(self, config_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (config_root / "qstr.toml").write_text("[html]\nlightness_floor = 0.3\n")
        monkeypatch.setenv("QSTR_HTML__LIGHTNESS_FLOOR", "0.4")
        settings = QstrSettings.from_cli(config_root=config_root)
        assert settings.html.lightness_floor == 0.4

    def test_cli_beats_env(self, config_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QSTR_QUIET", "false")
        settings = QstrSettings.from_cli(config_root=config_root, quiet=True)
        assert settings.quiet is True
