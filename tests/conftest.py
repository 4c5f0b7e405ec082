"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from assetlink.api.assets.Package import Package
from assetlink.api.config.RootConfig import RootConfig
from assetlink.api.log.Reporter import Reporter
from assetlink.constants import MANIFEST_FILENAME


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests against a temporary directory")
    config.addinivalue_line("markers", "integration: tests driving the CLI end to end")


# =============================================================================
# Manifest Helpers
# =============================================================================


def write_manifest(directory: Path, data: dict[str, Any]) -> Path:
    """Write ``manifest.json`` into ``directory`` (created if missing)."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / MANIFEST_FILENAME
    path.write_text(json.dumps(data))
    return path


def root_manifest(target: Any) -> dict[str, Any]:
    """Root manifest declaring ``target``."""
    return {"name": "acme/site", "extra": {"assetlink": {"target": target}}}


def package_manifest(name: str, source: Any) -> dict[str, Any]:
    """Package manifest declaring ``source``."""
    return {"name": name, "extra": {"assetlink": {"source": source}}}


def make_package(base: Path, name: str, source: Any, dirs: tuple[str, ...] = ()) -> Package:
    """Create an install directory for ``name`` under ``base`` with ``dirs`` inside it.

    The install directory is ``base/<name>-install`` and also gets a manifest,
    so the same package can be loaded from disk.
    """
    install_path = base / f"{name}-install"
    install_path.mkdir(parents=True, exist_ok=True)
    for d in dirs:
        (install_path / d).mkdir(parents=True, exist_ok=True)
    write_manifest(install_path, package_manifest(name, source))
    return Package(name=name, install_path=install_path, extra={"assetlink": {"source": source}})


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def assetlink_home(tmp_path, monkeypatch) -> Path:
    """Point ASSETLINK_HOME at a temporary directory so the logfile never leaks."""
    home = tmp_path / "home"
    monkeypatch.setenv("ASSETLINK_HOME", str(home))
    monkeypatch.delenv("ASSETLINK_ROOT", raising=False)
    return home


@pytest.fixture
def project(tmp_path, monkeypatch) -> Path:
    """Project root with namespace ``js`` -> ``public/js``, exported as ASSETLINK_ROOT."""
    root = (tmp_path / "project").resolve()
    write_manifest(root, root_manifest({"js": "public/js"}))
    monkeypatch.setenv("ASSETLINK_ROOT", str(root))
    return root


@pytest.fixture
def root_config(project) -> RootConfig:
    return RootConfig.load(project)


@pytest.fixture
def reporter() -> Reporter:
    return Reporter()
