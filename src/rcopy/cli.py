# SPDX-License-Identifier: Apache-2.0

"""Copy files and directories.

{esc}
Examples:

    rcopy notes.txt backup.txt

    rcopy -rv project/ project-copy/
"""
import logging
import os

import click

from rcopy.copying import Options, copy
from rcopy.exceptions import RCopyError
from rcopy.version import VERSION

L = logging.getLogger(__name__)


def _setup_logging():
    existing_handlers = logging.getLogger().handlers

    if existing_handlers:
        logging.warning(
            "A basicConfig has been set at import time. This is an antipattern and needs to be "
            "addressed by the respective package as it overrides this cli's configuration."
        )

    # Allow enabling debug logging with the DEBUG env var, -v only controls copy notices.
    if os.getenv("DEBUG", "False").lower() == "true":
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def run(options: Options) -> int:
    """Execute the copy described by options and return the process exit status."""
    try:
        copy(options)
    except RCopyError as e:
        L.debug("Copy failed", exc_info=True)
        click.secho(f"Error: {e}", fg="red", err=True)
        return 1
    return 0


@click.command(
    "rcopy",
    help=__doc__.format(esc="\b"),
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=VERSION)
@click.argument("source", type=click.Path(path_type=str))
@click.argument("destination", type=click.Path(path_type=str))
@click.option("-r", "--recursive", is_flag=True, help="Copy directories recursively.")
@click.option("-v", "--verbose", is_flag=True, help="Print each copied file and directory.")
@click.option("-i", "--interactive", is_flag=True, help="Prompt before overwriting files.")
@click.pass_context
def main(ctx, source, destination, recursive, verbose, interactive):
    """Copy SOURCE to DESTINATION."""
    _setup_logging()

    options = Options(
        source=source,
        destination=destination,
        recursive=recursive,
        verbose=verbose,
        interactive=interactive,
    )
    ctx.exit(run(options))


if __name__ == "__main__":
    main()
