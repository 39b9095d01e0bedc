"""Push command: build integrations and publish them into the asset tree."""

import logging
from typing import Annotated

import typer

from assetpush.build import create_build_invoker
from assetpush.cli.context import get_app_context
from assetpush.cli.decorators import handle_errors
from assetpush.cli.helpers import (
    print_error_message,
    print_info_message,
    print_list_item,
    print_success_message,
    print_warning_message,
)
from assetpush.manifest import PreserveMode
from assetpush.publish import create_publish_pipeline


logger = logging.getLogger(__name__)


@handle_errors
def push_command(
    ctx: typer.Context,
    name: Annotated[
        str | None,
        typer.Argument(help="Only push this integration (default: all)"),
    ] = None,
    preserve: Annotated[
        PreserveMode | None,
        typer.Option(
            "--preserve",
            help="Preserve mode recorded for new manifest entries",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Build integrations, copy their assemblies and update the link manifest."""
    app_ctx = get_app_context(ctx)
    settings = app_ctx.settings
    registry = app_ctx.registry()

    if name is None and not registry.names():
        print_warning_message(
            "No integrations registered, nothing to push", app_ctx.icon_mode
        )
        return

    pipeline = create_publish_pipeline(
        registry=registry,
        build_invoker=create_build_invoker(settings),
        manifest_service=app_ctx.manifest_service(),
        asset_root=app_ctx.layout.assets_dir,
        preserve_mode=preserve or settings.preserve_mode,
        excluded_suffixes=tuple(settings.excluded_suffixes),
    )
    result = pipeline.publish_all(name)

    for published in result.published:
        print_list_item(f"{published}: published", icon_mode=app_ctx.icon_mode)
    for failed, error in result.failed.items():
        print_error_message(f"{failed}: {error}", app_ctx.icon_mode)

    if result.manifest_written:
        print_info_message(
            f"Updated {result.manifest_path} ({result.added_entries} new entries)",
            app_ctx.icon_mode,
        )

    if not result.is_success():
        logger.debug("Push finished with %d failures", len(result.failed))
        raise typer.Exit(1)

    print_success_message(
        "Integrations successfully pushed to their targets", app_ctx.icon_mode
    )


def register_commands(app: typer.Typer) -> None:
    """Register push command with the main app.

    Args:
        app: The main Typer app
    """
    app.command(name="push")(push_command)
