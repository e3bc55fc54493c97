from typing import Optional

from tree_export.types import PathType


class ConfigurationError(ValueError):
    """
    Exception raised when a resolved option value is invalid.

    This exception is raised before any traversal starts, for example when the
    ``--max-depth`` flag is given something other than a non-negative integer.
    The CLI reports it on standard error and exits with status 1.

    Example:
        >>> error = ConfigurationError('Invalid --max-depth value: "abc". Must be a non-negative integer.')
        >>> str(error)
        'Invalid --max-depth value: "abc". Must be a non-negative integer.'
    """

    pass


class TraversalError(OSError):
    """
    Exception raised when the filesystem cannot be read during rendering.

    Listing a directory or looking up the status of one of its entries can fail
    because of missing permissions, a broken symbolic link, or an entry removed
    while the tree is being walked. The renderer does not retry; it wraps the
    underlying OSError in this exception and lets it propagate to the caller.

    Attributes:
        path (str): Path of the directory or entry that could not be read.
        cause (Optional[OSError]): The original error raised by the operating system.

    Example:
        >>> error = TraversalError("/srv/private", PermissionError(13, "Permission denied"))
        >>> str(error)
        'Cannot read /srv/private: Permission denied'
        >>> error.errno
        13
    """

    def __init__(self, path: PathType, cause: Optional[OSError] = None) -> None:
        """
        Initialize the exception with the failing path and its cause.

        Args:
            path (PathType): Path that could not be listed or inspected.
            cause (Optional[OSError]): The original OSError, if any.
        """
        self.path = str(path)
        self.cause = cause
        reason = (cause.strerror or str(cause)) if cause is not None else "unknown error"
        super().__init__(f"Cannot read {self.path}: {reason}")
        if cause is not None:
            self.errno = cause.errno
