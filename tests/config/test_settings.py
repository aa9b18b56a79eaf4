"""Tests for PatternSettings: defaults, TOML source, env vars, CLI flags."""

from pathlib import Path

import click
import pytest

from patternctl.config.settings import PatternSettings
from patternctl.domain.types import DocumentType, OSType, SupportDesk


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = PatternSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.factory.document is DocumentType.REPORT
        assert settings.factory.os is OSType.WINDOWS
        assert settings.chain.desks == [
            SupportDesk.BILLING,
            SupportDesk.PRODUCT,
            SupportDesk.TECHNICAL,
            SupportDesk.GENERAL,
        ]
        assert settings.prototype.hobbies == []

    def test_frozen(self, tmp_path: Path) -> None:
        settings = PatternSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "patternctl.toml").write_text(
            '[factory]\nos = "macos"\n[chain]\ndesks = ["technical"]\n'
        )
        settings = PatternSettings.from_cli(start=tmp_path)
        assert settings.factory.os is OSType.MACOS
        assert settings.factory.document is DocumentType.REPORT
        assert settings.chain.desks == [SupportDesk.TECHNICAL]

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text('[prototype]\nhobbies = ["Movies"]\n')
        settings = PatternSettings.from_cli(config_path=str(custom))
        assert settings.prototype.hobbies == ["Movies"]
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "patternctl.toml").write_text("[factory\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            PatternSettings.from_cli(start=tmp_path)

    def test_invalid_value(self, tmp_path: Path) -> None:
        (tmp_path / "patternctl.toml").write_text('[factory]\ndocument = "memo"\n')
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            PatternSettings.from_cli(start=tmp_path)

    def test_unknown_desk(self, tmp_path: Path) -> None:
        (tmp_path / "patternctl.toml").write_text('[chain]\ndesks = ["legal"]\n')
        with pytest.raises(click.ClickException, match="chain.desks"):
            PatternSettings.from_cli(start=tmp_path)

    @pytest.mark.parametrize("desks", ['["none", "billing"]', '["billing", "none"]'])
    def test_terminal_desk_rejected(self, tmp_path: Path, desks: str) -> None:
        (tmp_path / "patternctl.toml").write_text(f"[chain]\ndesks = {desks}\n")
        with pytest.raises(click.ClickException, match="appended automatically"):
            PatternSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "patternctl.toml").write_text('[factory]\nos = "macos"\n')
        monkeypatch.setenv("PATTERNCTL_FACTORY__OS", "windows")
        settings = PatternSettings.from_cli(start=tmp_path)
        assert settings.factory.os is OSType.WINDOWS

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "patternctl.toml").write_text("verbose = true\n")
        settings = PatternSettings.from_cli(start=tmp_path, verbose=False)
        assert settings.verbose is False

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = PatternSettings.from_cli(start=tmp_path, json_output=True, quiet=True)
        assert settings.json_output is True
        assert settings.quiet is True


class TestInvalidEnv:
    def test_bad_enum_value(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PATTERNCTL_FACTORY__DOCUMENT", "memo")
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            PatternSettings.from_cli(start=tmp_path)

    def test_unparseable_list(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PATTERNCTL_CHAIN__DESKS", "billing,product")
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            PatternSettings.from_cli(start=tmp_path)
