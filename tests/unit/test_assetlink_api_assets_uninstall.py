"""Unit tests for assetlink.api.assets.uninstall module."""

from pathlib import Path

import pytest

from assetlink.api.assets.install import install
from assetlink.api.assets.operations import InstallOperation, UninstallOperation
from assetlink.api.assets.Package import Package
from assetlink.api.assets.uninstall import uninstall
from assetlink.api.log.Severity import Severity
from tests.conftest import make_package


def test_removes_package_links_only(root_config, reporter, project, tmp_path):
    foo = make_package(tmp_path / "v", "vendor/foo", {"js": "dist"}, dirs=("dist",))
    bar = make_package(tmp_path / "v", "vendor/bar", {"js": "dist"}, dirs=("dist",))
    install(InstallOperation(foo), root_config, reporter)
    install(InstallOperation(bar), root_config, reporter)

    report = uninstall(UninstallOperation(foo), root_config, reporter)

    js = project / "public" / "js" / "vendor"
    assert report.removed == [js / "foo"]
    assert not (js / "foo").is_symlink()
    assert (js / "bar").is_symlink()
    assert (foo.install_path / "dist").is_dir()
    assert [m.message for m in report.messages] == ["Removing asset vendor/foo/js"]
    assert report.success


def test_leaves_real_directories(root_config, reporter, project):
    real = project / "public" / "js" / "vendor" / "foo"
    real.mkdir(parents=True)

    report = uninstall(UninstallOperation(Package("vendor/foo", Path())), root_config, reporter)

    assert report.removed == []
    assert real.is_dir()


def test_rejects_install_operation(root_config, reporter, tmp_path):
    report = uninstall(InstallOperation(Package("vendor/foo", tmp_path)), root_config, reporter)

    assert report.unsupported
    assert reporter.errors == ["Internal error -- unable to handle event operation."]


def test_removal_failure(root_config, reporter, project, tmp_path, monkeypatch):
    js = project / "public" / "js" / "vendor"
    js.mkdir(parents=True)
    (js / "foo").symlink_to(tmp_path)

    def deny_unlink(self, *args, **kwargs):
        raise PermissionError("denied")

    monkeypatch.setattr(Path, "unlink", deny_unlink)
    report = uninstall(UninstallOperation(Package("vendor/foo", Path())), root_config, reporter)

    assert report.failed == [js / "foo"]
    assert reporter.of(Severity.ERROR) == [f"vendor/foo: unable to remove link to asset '{js / 'foo'}'"]


@pytest.mark.parametrize("operation", [object(), None])
def test_rejects_unknown_operation(root_config, reporter, operation):
    report = uninstall(operation, root_config, reporter)

    assert report.unsupported
    assert reporter.errors == ["Internal error -- unable to handle event operation."]


def test_absolute_package_name_leaves_outside_links(root_config, reporter, project, tmp_path):
    victim = tmp_path / "victim"
    victim.symlink_to(tmp_path / "gone")

    report = uninstall(UninstallOperation(Package(str(victim), Path())), root_config, reporter)

    assert report.removed == []
    assert victim.is_symlink()
