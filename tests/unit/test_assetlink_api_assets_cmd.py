"""Unit tests for the assetlink.api.assets cmd_* functions."""

import os

from assetlink.api.assets.cmd_cleanup import cmd_cleanup
from assetlink.api.assets.cmd_install import cmd_install
from assetlink.api.assets.cmd_status import cmd_status
from assetlink.api.assets.cmd_uninstall import cmd_uninstall
from assetlink.api.assets.cmd_update import cmd_update
from assetlink.api.validate_output import validate_output
from tests.conftest import make_package, run_cmd


class TestCmdInstall:
    def test_install_links_package(self, project, tmp_path):
        package = make_package(tmp_path / "v", "vendor/foo", {"js": "dist"}, dirs=("dist",))

        result = run_cmd(cmd_install, str(package.install_path))

        assert result.success
        assert result.output["package"] == "vendor/foo"
        assert result.output["linked"] == 1
        assert result.output["entries"][0]["status"] == "linked"
        assert result.output["messages"] == [{"severity": "custom", "message": "Installing asset vendor/foo/dist"}]
        assert (project / "public" / "js" / "vendor" / "foo").is_symlink()
        assert validate_output(cmd_install, result.output) == result.output

    def test_install_name_override(self, project, tmp_path):
        package = make_package(tmp_path / "v", "vendor/foo", {"js": "dist"}, dirs=("dist",))

        result = run_cmd(cmd_install, str(package.install_path), name="acme/renamed")

        assert result.output["package"] == "acme/renamed"
        assert (project / "public" / "js" / "acme" / "renamed").is_symlink()

    def test_install_missing_source_is_still_success(self, project, tmp_path):
        package = make_package(tmp_path / "v", "vendor/foo", {"js": "dist"})

        result = run_cmd(cmd_install, str(package.install_path))

        assert result.success
        assert result.output["warnings"] == ["vendor/foo: asset directory does not exist 'dist'"]
        assert result.output["skipped"] == 1

    def test_install_writes_logfile(self, project, tmp_path, assetlink_home):
        package = make_package(tmp_path / "v", "vendor/foo", {"js": "dist"})

        run_cmd(cmd_install, str(package.install_path))

        content = (assetlink_home / "logfile").read_text(encoding="utf-8")
        assert "[assets] WARN: vendor/foo: asset directory does not exist 'dist'" in content

    def test_install_without_root_manifest(self, tmp_path):
        package = make_package(tmp_path / "v", "vendor/foo", {"js": "dist"}, dirs=("dist",))

        result = run_cmd(cmd_install, str(package.install_path), root=str(tmp_path / "nowhere"))

        assert not result.success
        assert "Manifest not found" in result.output["errors"][0]
        assert result.output["entries"] == []

    def test_install_bad_package_path(self, project, tmp_path):
        result = run_cmd(cmd_install, str(tmp_path / "missing"))

        assert not result.success
        assert "not a directory" in result.output["errors"][0]

    def test_install_package_without_manifest_needs_name(self, project, tmp_path):
        bare = tmp_path / "bare"
        bare.mkdir()

        unnamed = run_cmd(cmd_install, str(bare))
        named = run_cmd(cmd_install, str(bare), name="vendor/bare")

        assert not unnamed.success
        assert named.success
        assert named.output["entries"] == []


class TestCmdUpdate:
    def test_update_relinks_to_new_path(self, project, tmp_path):
        old = make_package(tmp_path / "old", "vendor/foo", {"js": "dist"}, dirs=("dist",))
        new = make_package(tmp_path / "new", "vendor/foo", {"js": "dist"}, dirs=("dist",))
        run_cmd(cmd_install, str(old.install_path))

        result = run_cmd(cmd_update, str(new.install_path), previous=str(old.install_path))

        link = project / "public" / "js" / "vendor" / "foo"
        assert result.success
        assert os.readlink(link) == str(new.install_path / "dist")
        assert validate_output(cmd_update, result.output) == result.output


class TestCmdUninstall:
    def test_uninstall_removes_links(self, project, tmp_path):
        package = make_package(tmp_path / "v", "vendor/foo", {"js": "dist"}, dirs=("dist",))
        run_cmd(cmd_install, str(package.install_path))

        result = run_cmd(cmd_uninstall, "vendor/foo")

        assert result.success
        assert result.output["removed"] == [str(project / "public" / "js" / "vendor" / "foo")]
        assert result.result == "Removed 1 link of vendor/foo"


class TestCmdCleanup:
    def test_cleanup_removes_dangling(self, project, tmp_path):
        vendor = project / "public" / "js" / "vendor"
        vendor.mkdir(parents=True)
        (vendor / "bar").symlink_to(tmp_path / "deleted")

        result = run_cmd(cmd_cleanup)

        assert result.success
        assert result.output["removed"] == [str(vendor / "bar")]
        assert result.output["scanned"] == [str(project / "public" / "js")]
        assert result.output["messages"][0] == {"severity": "info", "message": "Cleanup asset directories"}

    def test_cleanup_config_error(self, tmp_path):
        result = run_cmd(cmd_cleanup, root=str(tmp_path))

        assert not result.success
        assert result.output["removed"] == []


class TestCmdStatus:
    def test_status_counts_broken(self, project, tmp_path):
        vendor = project / "public" / "js" / "vendor"
        vendor.mkdir(parents=True)
        (vendor / "bar").symlink_to(tmp_path / "deleted")
        (vendor / "foo").symlink_to(tmp_path)

        result = run_cmd(cmd_status)

        assert result.success
        assert result.output["total"] == 2
        assert result.output["broken"] == 1
        assert len(result.output["warnings"]) == 1
