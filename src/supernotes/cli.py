"""CLI interface for the Supernotes client."""

import logging
from pathlib import Path

import click

from supernotes import __version__
from supernotes.api.builder import create_card_from_source
from supernotes.config import DEFAULT_BASE_URL, load_config
from supernotes.errors import SupernotesError, format_error_chain


class AliasedGroup(click.Group):
    """Group that also accepts short aliases for its commands."""

    aliases = {"c": "create"}

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        # Report the full command name in usage and error messages
        _, cmd, args = super().resolve_command(ctx, args)
        return cmd.name if cmd else None, cmd, args


@click.group(cls=AliasedGroup)
@click.version_option(version=__version__, prog_name="sn")
@click.option(
    "-u",
    "--username",
    metavar="USERNAME",
    envvar="SN_USERNAME",
    help="The username to login with.",
)
@click.option(
    "-p",
    "--password",
    metavar="PASSWORD",
    envvar="SN_PASSWORD",
    help="The password.",
)
@click.option(
    "--base-url",
    metavar="URL",
    envvar="SN_BASE_URL",
    help=f"The API base URL (default: {DEFAULT_BASE_URL}).",
)
@click.option(
    "--timeout",
    type=float,
    envvar="SN_TIMEOUT",
    help="Seconds to wait for each HTTP request (default: 30).",
)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a TOML file with a [supernotes] table.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
@click.pass_context
def main(
    ctx: click.Context,
    username: str | None,
    password: str | None,
    base_url: str | None,
    timeout: float | None,
    config: Path | None,
    verbose: bool,
) -> None:
    """Supernotes client."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    ctx.obj = {
        "config_path": config,
        "username": username,
        "password": password,
        "base_url": base_url,
        "timeout": timeout,
    }


@main.command()
@click.argument("name")
@click.argument("file", required=False, type=click.Path(path_type=Path))
@click.pass_obj
def create(obj: dict, name: str, file: Path | None) -> None:
    """
    Creates a new note [short: c].

    NAME is the name of the new note. FILE holds the Markdown content;
    omit it to read from stdin.
    """
    try:
        cfg = load_config(
            obj["config_path"],
            username=obj["username"],
            password=obj["password"],
            base_url=obj["base_url"],
            timeout=obj["timeout"],
        )
        response = create_card_from_source(cfg, name, file)
        click.echo(f"✓ Created card '{name}' (HTTP {response.status_code})")

    except SupernotesError as e:
        click.echo(f"Error: {format_error_chain(e)}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
