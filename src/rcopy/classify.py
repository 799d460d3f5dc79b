# SPDX-License-Identifier: Apache-2.0

"""Path classification."""

import enum
import os
import stat

from rcopy.exceptions import CopyIOError
from rcopy.typing import StrOrPath


class PathKind(enum.Enum):
    """What a path refers to on disk."""

    MISSING = enum.auto()
    FILE = enum.auto()
    DIRECTORY = enum.auto()


def classify(path: StrOrPath) -> PathKind:
    """Return the kind of the entry at path, following symbolic links.

    A dangling link is MISSING. Errors other than a missing entry, such as a permission
    error on a parent directory, are raised as CopyIOError.
    """
    try:
        st = os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return PathKind.MISSING
    except OSError as e:
        raise CopyIOError(path, None, e) from e

    if stat.S_ISDIR(st.st_mode):
        return PathKind.DIRECTORY

    return PathKind.FILE
