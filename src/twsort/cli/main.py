"""twsort CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys

import click

from twsort import __version__
from twsort.config import GroupPolicy, SorterOptions, UnknownPosition
from twsort.errors import ConfigError, ConfigNotFound
from twsort.sorter import ClassSorter


class SorterContext:
    """Options collected by the group; builds the sorter on first use."""

    def __init__(
        self,
        config_path: str | None,
        options: SorterOptions,
        plugin_order: list[str] | None,
    ) -> None:
        self.config_path = config_path
        self.options = options
        self.plugin_order = plugin_order
        self._sorter: ClassSorter | None = None

    def sorter(self) -> ClassSorter:
        if self._sorter is None:
            try:
                config = ClassSorter.read_config(self.config_path)
                self._sorter = ClassSorter(
                    config, options=self.options, plugin_order=self.plugin_order
                )
            except (ConfigNotFound, ConfigError) as exc:
                click.echo(f"Error: {exc}", err=True)
                sys.exit(1)
        return self._sorter


@click.group()
@click.version_option(version=__version__, prog_name="twsort")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to tailwind.config.json (searched upwards from the cwd if omitted)",
)
@click.option(
    "--group-order",
    type=click.Choice([p.value for p in GroupPolicy]),
    default=GroupPolicy.COMPONENTS_FIRST.value,
    show_default=True,
    help="How component and utility classes are combined",
)
@click.option(
    "--unknown",
    type=click.Choice([p.value for p in UnknownPosition]),
    default=UnknownPosition.START.value,
    show_default=True,
    help="Where classes unknown to the engine are placed",
)
@click.option("--plugin-order", default=None, help="Comma-separated plugin ids")
@click.option("--sort-within-group/--no-sort-within-group", default=False,
              help="Sort each plugin's selectors alphabetically")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: str | None,
    group_order: str,
    unknown: str,
    plugin_order: str | None,
    sort_within_group: bool,
    verbose: bool,
) -> None:
    """twsort - order utility CSS classes the way the framework registers them."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    options = SorterOptions(
        group_policy=GroupPolicy(group_order),
        unknown_position=UnknownPosition(unknown),
        sort_within_group=sort_within_group,
    )
    order = [p.strip() for p in plugin_order.split(",") if p.strip()] if plugin_order else None
    ctx.obj = SorterContext(config_path, options, order)


# Import and register subcommands
from twsort.cli.commands import format_files, plugins, selectors, sort  # noqa: E402

cli.add_command(sort)
cli.add_command(selectors)
cli.add_command(plugins)
cli.add_command(format_files)
