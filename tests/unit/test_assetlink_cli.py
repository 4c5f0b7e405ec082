"""Tests for the assetlink Typer CLI."""

import pytest
import typer
from typer.testing import CliRunner

from assetlink.cli import main
from assetlink.cli._create_app import _create_app
from assetlink.cli._handle_stage_result import _extract_display_format
from assetlink.cli.assets import assets
from tests.conftest import make_package

runner = CliRunner()


def test_assets_install_cli(project, tmp_path):
    package = make_package(tmp_path / "v", "vendor/foo", {"js": "dist"}, dirs=("dist",))

    result = runner.invoke(assets(), ["install", str(package.install_path)])

    assert result.exit_code == 0
    assert "package: vendor/foo" in result.stdout
    assert "linked: 1" in result.stdout
    assert (project / "public" / "js" / "vendor" / "foo").is_symlink()


def test_assets_install_cli_json(project, tmp_path):
    package = make_package(tmp_path / "v", "vendor/foo", {"js": "dist"}, dirs=("dist",))

    result = runner.invoke(_create_app(), ["--display", "json", "assets", "install", str(package.install_path)])

    assert result.exit_code == 0
    assert '"package": "vendor/foo"' in result.stdout


def test_assets_install_cli_failure_exit_code(project, tmp_path):
    package = make_package(tmp_path / "v", "vendor/foo", {"js": "dist"}, dirs=("dist",))
    (project / "public" / "js" / "vendor" / "foo").mkdir(parents=True)

    result = runner.invoke(assets(), ["install", str(package.install_path)])

    assert result.exit_code == 1
    assert "link_create_failed" in result.stdout


def test_assets_cleanup_cli(project, tmp_path):
    vendor = project / "public" / "js" / "vendor"
    vendor.mkdir(parents=True)
    (vendor / "bar").symlink_to(tmp_path / "deleted")

    result = runner.invoke(assets(), ["cleanup", "--root", str(project)])

    assert result.exit_code == 0
    assert not (vendor / "bar").is_symlink()


def test_assets_without_subcommand_shows_help():
    result = runner.invoke(assets(), [])
    assert result.exit_code == 0


def test_invalid_display_format():
    result = runner.invoke(_create_app(), ["--display", "xml", "config", "show"])
    assert result.exit_code == 1


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("assetlink ")


def test_main_runs_command(project, tmp_path):
    package = make_package(tmp_path / "v", "vendor/foo", {"js": "dist"}, dirs=("dist",))

    assert main(["assets", "install", str(package.install_path)]) == 0
    assert main(["assets", "uninstall", "vendor/foo"]) == 0
    assert not (project / "public" / "js" / "vendor" / "foo").is_symlink()


def test_main_usage_error():
    assert main(["assets", "install"]) == 2


def test_main_json_display(capsys):
    assert main(["--display", "json", "config", "version"]) == 0
    assert '"version":' in capsys.readouterr().out


def test_config_version_json_display():
    result = runner.invoke(_create_app(), ["--display", "json", "config", "version"])

    assert result.exit_code == 0
    assert '"version":' in result.stdout


def test_extract_display_format_walks_parents():
    root = typer.Context(typer.main.get_command(_create_app()), obj={"display_format": "json"})
    child = typer.Context(root.command, parent=root)

    assert _extract_display_format(child) == "json"


def test_extract_display_format_without_context():
    with pytest.raises(RuntimeError):
        _extract_display_format(None)
