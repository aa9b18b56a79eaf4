"""Tests for SupportService."""

from pathlib import Path

from patternctl.config.settings import PatternSettings
from patternctl.services.support import SupportService


class TestDispatch:
    def test_handled(self, settings: PatternSettings) -> None:
        result = SupportService(settings).dispatch("billing", "Refund not initiated.")
        assert result.ok
        assert result.data["handled_by"] == "billing"
        assert result.data["handled"] is True
        assert result.warnings == []
        assert result.data["chain"] == ["billing", "product", "technical", "general", "none"]

    def test_unhandled_warns(self, settings: PatternSettings) -> None:
        result = SupportService(settings).dispatch("complaint", "Delay in delivery.")
        assert result.ok
        assert result.data["handled_by"] == "none"
        assert result.data["handled"] is False
        assert result.warnings == ["No desk services 'complaint' requests"]

    def test_unknown_type(self, settings: PatternSettings) -> None:
        result = SupportService(settings).dispatch("refund", "x")
        assert not result.ok
        assert result.error is not None
        assert "complaint" in result.error.detail["allowed"]

    def test_configured_chain(self, tmp_path: Path) -> None:
        (tmp_path / "patternctl.toml").write_text('[chain]\ndesks = ["technical"]\n')
        settings = PatternSettings.from_cli(start=tmp_path)
        result = SupportService(settings).dispatch("billing", "Refund not initiated.")
        assert result.data["chain"] == ["technical", "none"]
        assert result.data["handled_by"] == "none"

    def test_empty_chain(self, tmp_path: Path) -> None:
        (tmp_path / "patternctl.toml").write_text("[chain]\ndesks = []\n")
        settings = PatternSettings.from_cli(start=tmp_path)
        result = SupportService(settings).dispatch("general", "Coupon expiration duration.")
        assert result.data["chain"] == ["none"]
        assert result.data["handled"] is False
