# SPDX-License-Identifier: Apache-2.0

"""rcopy exceptions."""


class RCopyError(Exception):
    """rcopy exception class."""


class SourceMissingError(RCopyError):
    """Raised when the source path does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Source path does not exist: {path}")


class DirectoryWithoutRecursionError(RCopyError):
    """Raised when a directory is copied without the recursive flag."""

    def __init__(self, path):
        self.path = path
        super().__init__(
            "Source is a directory. Use the -r flag to copy directories recursively."
        )


class CopyIOError(RCopyError):
    """Raised when an underlying filesystem operation fails.

    Args:
        source: The path being copied, or the only path involved in the failure.
        destination: The path being written or created, if any.
        cause: The original OS error.
    """

    def __init__(self, source, destination, cause: OSError):
        self.source = source
        self.destination = destination
        self.cause = cause

        reason = cause.strerror or str(cause)

        if destination is None:
            message = f"{source}: {reason}"
        else:
            message = f"Failed to copy {source} to {destination}: {reason}"

        super().__init__(message)


class CopyIntoItselfError(RCopyError):
    """Raised when a directory destination lies inside its own source tree."""

    def __init__(self, source, destination):
        self.source = source
        self.destination = destination
        super().__init__(f"Cannot copy a directory, {source}, into itself, {destination}")
