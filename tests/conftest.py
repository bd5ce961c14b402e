"""Shared pytest fixtures for incrctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from incrctl.adapters.registry import OperandRegistry, builtin_variants


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry() -> OperandRegistry:
    """Unsealed registry holding only the built-in variants."""
    return OperandRegistry(builtin_variants())


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project directory with an empty local plugin folder."""
    (tmp_path / ".incrctl" / "plugins").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from a temp project root with no ambient config.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``.
    """
    monkeypatch.delenv("INCRCTL_CONFIG", raising=False)
    monkeypatch.chdir(project_root)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore logger state changed by ``configure_logging`` during CLI runs."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    incr = logging.getLogger("incrctl")
    incr_level = incr.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    incr.setLevel(incr_level)


@pytest.fixture
def broken_entry_point(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Install a fake distribution whose ``incrctl.plugins`` entry point fails on import.

    Returns the entry point name.
    """
    site = tmp_path / "site"
    dist_info = site / "brokenplug-0.1.dist-info"
    dist_info.mkdir(parents=True)
    (dist_info / "METADATA").write_text("Metadata-Version: 2.1\nName: brokenplug\nVersion: 0.1\n")
    (dist_info / "entry_points.txt").write_text(
        "[incrctl.plugins]\nbroken = incrctl_brokenplug_mod\n"
    )
    (site / "incrctl_brokenplug_mod.py").write_text("raise RuntimeError('boom')\n")
    monkeypatch.syspath_prepend(str(site))
    return "broken"
