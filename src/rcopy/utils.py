# SPDX-License-Identifier: Apache-2.0

"""Utilities."""

import contextlib
import errno
import functools
import inspect
import logging
import os
import shutil
import tempfile
from pathlib import Path

from rcopy.exceptions import CopyIOError
from rcopy.typing import StrOrPath

L = logging.getLogger(__name__)


def log(function, logger=L):
    """Log the bound arguments of a function call at DEBUG level."""

    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        if logger.isEnabledFor(logging.DEBUG):
            bound = inspect.signature(function).bind(*args, **kwargs)
            bound.apply_defaults()

            str_v = "  " + "\n  ".join(f"{k} = {v!r}" for k, v in bound.arguments.items())
            logger.debug("Executed function:\n Name: %s\n Args: \n%s\n", function.__name__, str_v)

        return function(*args, **kwargs)

    return wrapper


def create_dir(path: StrOrPath) -> Path:
    """Create directory and parents if it doesn't already exist."""
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CopyIOError(path, None, e) from e
    return path


def list_dir(path: StrOrPath) -> list[Path]:
    """Return the direct children of a directory sorted by name."""
    path = Path(path)
    try:
        with os.scandir(path) as it:
            names = sorted(entry.name for entry in it)
    except OSError as e:
        raise CopyIOError(path, None, e) from e

    L.debug("Listed %d entries in %s", len(names), path)
    return [path / name for name in names]


def resolve_path(path: StrOrPath) -> Path:
    """Return the absolute path with symbolic links resolved.

    Raises:
        CopyIOError: If the path cannot be resolved, e.g. on a symbolic link loop.
    """
    path = Path(path)
    try:
        return path.resolve()
    except RuntimeError as e:
        # symlink loops are reported as RuntimeError before python 3.13
        cause = OSError(errno.ELOOP, os.strerror(errno.ELOOP), str(path))
        raise CopyIOError(path, None, cause) from e
    except OSError as e:
        raise CopyIOError(path, None, e) from e


def atomic_copyfile(source: StrOrPath, target: StrOrPath) -> None:
    """Copy the contents and mode of source to target, replacing target in a single rename.

    The bytes are first written to a hidden temporary file in the directory of target which is
    then moved over it, so that target is either left untouched or fully replaced.

    Note: The temporary file is removed if the copy fails or is interrupted.
    """
    source = Path(source)
    target = Path(target)

    try:
        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=".rcopy-", suffix=".part")
    except OSError as e:
        raise CopyIOError(source, target, e) from e

    os.close(fd)
    tmp = Path(tmp_name)

    try:
        try:
            shutil.copyfile(source, tmp)
            shutil.copymode(source, tmp)
            os.replace(tmp, target)
        except OSError as e:
            raise CopyIOError(source, target, e) from e
    except BaseException:
        with contextlib.suppress(OSError):
            tmp.unlink(missing_ok=True)
        raise

    L.debug("Copy %s -> %s", source, target)
