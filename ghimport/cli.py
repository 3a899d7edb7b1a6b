"""
Command-line interface for the GitHub identity importer.

Validates the source, identity and destination arguments, reports every
invalid one, and runs the import when all of them are valid.
"""

import sys
from pathlib import Path
from typing import List, Optional

import click

from ghimport import __version__
from ghimport.core.config import Config
from ghimport.core.exceptions import (
    ExternalCommandFailedError,
    ImportToolError,
    UnknownOptionError,
)
from ghimport.importing.git_handler import GitHandler
from ghimport.importing.importer import RepositoryImporter
from ghimport.utils.logging_config import setup_logging
from ghimport.utils.validation import (
    validate_destination,
    validate_identity,
    validate_source,
)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option(
    "--source", "-s",
    metavar="<source>",
    help="GitHub remote repository SSH URL"
)
@click.option(
    "--identity", "-i",
    metavar="<identity>",
    help="GitHub SSH identity"
)
@click.option(
    "--destination", "-d",
    metavar="<destination>",
    help="Local repository destination path"
)
@click.option(
    "--git_path", "-g",
    metavar="<git_path>",
    help="(Optional) Git path or Git alias"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output"
)
@click.option(
    "--log-file",
    type=click.Path(),
    help="Path to log file"
)
@click.option(
    "--config", "config_file",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a JSON configuration file"
)
@click.pass_context
def cli(ctx, source, identity, destination, git_path, verbose, log_file, config_file):
    """
    Import a GitHub repository and set its SSH identity.

    Clones SOURCE into DESTINATION using the private key of IDENTITY, then
    stores the key, user name and no-reply e-mail of IDENTITY in the
    repository's local Git configuration. If DESTINATION already exists,
    its contents are merged on top of the fresh clone.

    The SSH folder must contain, for each identity:

    \b
        my_id                private SSH key
        my_id.pub            public SSH key
        my_id.username       GitHub user name
        my_id.noreplyemail   GitHub no-reply e-mail

    Example:

        ghimport -s git@github.com:alice/repo.git -i work -d ~/src/repo
    """
    Config.reset()
    if config_file:
        Config.load_from_file(config_file)
    config = Config.load_from_env()

    verbose = verbose or config.verbose
    setup_logging(level="DEBUG" if verbose else "INFO", log_file=Path(log_file) if log_file else None)

    checks = [
        ("Source", source, validate_source(source)),
        ("Identity", identity, validate_identity(identity)),
        ("Destination", destination, validate_destination(destination)),
    ]

    failed = [(label, value, result) for label, value, result in checks if not result.ok]
    if failed:
        for label, value, result in failed:
            if value is not None:
                click.echo(result.message, err=True)
        for label, value, result in failed:
            click.echo(f"{label} argument not provided, or not valid", err=True)
        click.echo(
            "Failed to import GitHub repository, at least one of the arguments is not valid",
            err=True,
        )
        ctx.exit(1)

    importer = RepositoryImporter(config, GitHandler(config, git_path))

    try:
        outcome = importer.import_repository(source, identity, destination)
    except ExternalCommandFailedError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(e.returncode)
    except (ImportToolError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        if verbose:
            import traceback
            traceback.print_exc()
        ctx.exit(1)

    if outcome.merged:
        click.echo(f"Merged {outcome.moved_entries} existing entries into the clone")
    click.echo(f"Imported {source} into {outcome.destination} as {identity}")


def main(argv: Optional[List[str]] = None):
    """
    Entry point for the CLI.

    No arguments at all shows the help text. Option parsing errors exit
    with status 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        args = ["--help"]

    try:
        status = cli.main(args=args, prog_name="ghimport", standalone_mode=False)
    except click.NoSuchOption as e:
        click.echo(UnknownOptionError(e.option_name).message, err=True)
        sys.exit(1)
    except click.UsageError as e:
        click.echo(f"Failed to parse options, exiting: {e.format_message()}", err=True)
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(1)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)

    sys.exit(status or 0)


if __name__ == "__main__":
    main()
