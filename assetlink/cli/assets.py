"""Assets Typer app factory."""

import typer

from assetlink.api.assets.cmd_cleanup import cmd_cleanup
from assetlink.api.assets.cmd_install import cmd_install
from assetlink.api.assets.cmd_status import cmd_status
from assetlink.api.assets.cmd_uninstall import cmd_uninstall
from assetlink.api.assets.cmd_update import cmd_update
from assetlink.cli._handle_stage_result import _handle_stage_result

_ROOT_HELP = "Project root containing manifest.json (default: $ASSETLINK_ROOT or working directory)"


def assets() -> typer.Typer:
    """Create and configure the assets Typer app."""
    app = typer.Typer(
        name="assets",
        help="Link, relink and sweep package asset directories",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="install")
    def install_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Install directory of the package"),
        name: str | None = typer.Option(None, "--name", "-n", help="Package name (default: from its manifest)"),
        root: str | None = typer.Option(None, "--root", "-r", help=_ROOT_HELP),
    ) -> None:
        """Link the asset directories of an installed package."""
        _handle_stage_result(cmd_install, ctx)(path=path, name=name, root=root)

    @app.command(name="update")
    def update_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Install directory of the updated package"),
        previous: str | None = typer.Option(None, "--previous", help="Install directory before the update"),
        name: str | None = typer.Option(None, "--name", "-n", help="Package name (default: from its manifest)"),
        root: str | None = typer.Option(None, "--root", "-r", help=_ROOT_HELP),
    ) -> None:
        """Relink the asset directories of an updated package."""
        _handle_stage_result(cmd_update, ctx)(path=path, previous=previous, name=name, root=root)

    @app.command(name="uninstall")
    def uninstall_cmd(
        ctx: typer.Context,
        name: str = typer.Argument(..., help="Package name, e.g. vendor/foo"),
        root: str | None = typer.Option(None, "--root", "-r", help=_ROOT_HELP),
    ) -> None:
        """Remove the asset links of a package."""
        _handle_stage_result(cmd_uninstall, ctx)(name=name, root=root)

    @app.command(name="cleanup")
    def cleanup_cmd(
        ctx: typer.Context,
        root: str | None = typer.Option(None, "--root", "-r", help=_ROOT_HELP),
    ) -> None:
        """Remove links whose target no longer exists."""
        _handle_stage_result(cmd_cleanup, ctx)(root=root)

    @app.command(name="status")
    def status_cmd(
        ctx: typer.Context,
        root: str | None = typer.Option(None, "--root", "-r", help=_ROOT_HELP),
    ) -> None:
        """List asset links and whether they resolve."""
        _handle_stage_result(cmd_status, ctx)(root=root)

    return app
