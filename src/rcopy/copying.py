# SPDX-License-Identifier: Apache-2.0

"""Single file and recursive directory copy."""

import enum
import logging
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

import click

from rcopy.classify import PathKind, classify
from rcopy.exceptions import CopyIntoItselfError, DirectoryWithoutRecursionError, SourceMissingError
from rcopy.typing import AskFunction, StrOrPath
from rcopy.utils import atomic_copyfile, create_dir, list_dir, log, resolve_path

L = logging.getLogger(__name__)


@dataclass(frozen=True)
class Options:
    """Invocation options.

    Attributes:
        source: File or directory to copy.
        destination: Location to copy to.
        recursive: Allow copying directories.
        verbose: Print a notice for each copied file and directory.
        interactive: Prompt before overwriting an existing file.
    """

    source: Path
    destination: Path
    recursive: bool = False
    verbose: bool = False
    interactive: bool = False

    def __post_init__(self):
        """Normalize paths."""
        object.__setattr__(self, "source", Path(self.source))
        object.__setattr__(self, "destination", Path(self.destination))


class CopyOutcome(enum.Enum):
    """Result of a copy operation that did not fail."""

    COPIED = enum.auto()
    SKIPPED = enum.auto()


def ask_overwrite(question: str) -> str:
    """Write question to stdout and return one line read from stdin.

    An empty string is returned at end of input.
    """
    click.echo(question, nl=False)
    return sys.stdin.readline()


def _confirm_overwrite(destination: Path, ask: AskFunction) -> bool:
    answer = ask(f"Overwrite {destination}? [y/N]: ")
    return answer.strip().lower() == "y"


@log
def copy_file(
    source: StrOrPath,
    destination: StrOrPath,
    options: Options,
    ask: AskFunction | None = None,
) -> CopyOutcome:
    """Copy the contents of a file to destination.

    Args:
        source: Existing file that is not a directory.
        destination: File to create or replace.
        options: Invocation options. Only interactive and verbose are used.
        ask: Callable that receives the overwrite question and returns the answer.
            Defaults to reading a line from stdin.

    Returns:
        SKIPPED if the overwrite was declined, COPIED otherwise.

    Raises:
        CopyIOError: If reading source or writing destination fails.
    """
    source = Path(source)
    destination = Path(destination)

    if options.interactive and classify(destination) is not PathKind.MISSING:
        if not _confirm_overwrite(destination, ask or ask_overwrite):
            click.echo(f"Not overwriting {destination}")
            return CopyOutcome.SKIPPED

    atomic_copyfile(source, destination)

    if options.verbose:
        click.echo(f"Copied {source} to {destination}")

    return CopyOutcome.COPIED


@dataclass
class _Frame:
    source: Path
    destination: Path
    children: Iterator[Path] = field(init=False)

    def __post_init__(self):
        create_dir(self.destination)
        self.children = iter(list_dir(self.source))


def _check_not_into_itself(source: Path, destination: Path) -> None:
    resolved_source = resolve_path(source)
    resolved_destination = resolve_path(destination)

    if resolved_destination.is_relative_to(resolved_source):
        raise CopyIntoItselfError(source, destination)


@log
def copy_directory(
    source: StrOrPath,
    destination: StrOrPath,
    options: Options,
    ask: AskFunction | None = None,
) -> CopyOutcome:
    """Copy a directory tree into destination.

    Missing destination directories are created. Files are copied with copy_file and entries
    that exist only in the destination are left untouched. Children are visited in name order
    and the directory notice is printed after the contents of the directory have been copied.

    The traversal keeps its own stack, so its depth is not limited by the interpreter's
    recursion limit.

    Raises:
        CopyIntoItselfError: If destination lies inside source.
        CopyIOError: On the first failing filesystem operation. Files copied before the
            failure are kept.
    """
    source = Path(source)
    destination = Path(destination)

    _check_not_into_itself(source, destination)

    stack = [_Frame(source, destination)]

    while stack:
        frame = stack[-1]
        child = next(frame.children, None)

        if child is None:
            stack.pop()
            if options.verbose:
                click.echo(f"Recursively copied directory {frame.source} to {frame.destination}")
            continue

        target = frame.destination / child.name

        if classify(child) is PathKind.DIRECTORY:
            stack.append(_Frame(child, target))
        else:
            copy_file(child, target, options, ask=ask)

    return CopyOutcome.COPIED


def copy(options: Options, ask: AskFunction | None = None) -> CopyOutcome:
    """Copy options.source to options.destination.

    Raises:
        SourceMissingError: If the source does not exist.
        DirectoryWithoutRecursionError: If the source is a directory and recursive is not set.
        CopyIOError: If a filesystem operation fails.
    """
    kind = classify(options.source)

    L.debug("Source %s classified as %s", options.source, kind.name)

    if kind is PathKind.MISSING:
        raise SourceMissingError(options.source)

    if kind is PathKind.DIRECTORY:
        if not options.recursive:
            raise DirectoryWithoutRecursionError(options.source)
        return copy_directory(options.source, options.destination, options, ask=ask)

    return copy_file(options.source, options.destination, options, ask=ask)
