"""Tests for IncrSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from incrctl.config.settings import IncrSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("INCRCTL_CONFIG", raising=False)
    monkeypatch.delenv("INCRCTL_OPERANDS__DEFAULT_VARIANT", raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = IncrSettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.json_output is False
        assert settings.no_plugins is False
        assert settings.operands.default_variant == "text"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = IncrSettings.from_cli(project_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_local_plugin_dir_relative_to_root(self, tmp_path: Path) -> None:
        settings = IncrSettings.from_cli(project_root=tmp_path)
        assert settings.local_plugin_dir == tmp_path / ".incrctl" / "plugins"


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "incrctl.toml").write_text(
            '[operands]\ndefault_variant = "numeric"\ndisabled = ["rational"]\n'
        )
        settings = IncrSettings.from_cli(project_root=tmp_path)
        assert settings.operands.default_variant == "numeric"
        assert settings.operands.disabled == ["rational"]
        assert settings.plugins.entry_points is True

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        config = tmp_path / "custom.toml"
        config.write_text('[plugins]\nlocal_dir = "/opt/plugins"\n')
        settings = IncrSettings.from_cli(config_path=str(config))
        assert settings.config_path == config
        assert settings.project_root == tmp_path
        assert settings.local_plugin_dir == Path("/opt/plugins")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "incrctl.toml").write_text("[operands\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            IncrSettings.from_cli(project_root=tmp_path)


class TestEnvOverrides:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "incrctl.toml").write_text('[operands]\ndefault_variant = "numeric"\n')
        monkeypatch.setenv("INCRCTL_OPERANDS__DEFAULT_VARIANT", "rational")
        settings = IncrSettings.from_cli(project_root=tmp_path)
        assert settings.operands.default_variant == "rational"

    def test_cli_flags_highest(self, tmp_path: Path) -> None:
        settings = IncrSettings.from_cli(project_root=tmp_path, json_output=True, no_plugins=True)
        assert settings.json_output is True
        assert settings.no_plugins is True
