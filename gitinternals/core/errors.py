"""Error kinds raised by the gitinternals core."""


class GitInternalsError(Exception):
    """Base class for all errors raised while reading a repository."""


class NotFoundError(GitInternalsError):
    """An object file, ref file or HEAD is missing."""


class FormatError(GitInternalsError):
    """Stored bytes do not match the expected grammar."""


class UnknownTypeError(FormatError):
    """An object header names a type other than blob, tree or commit."""


class TypeMismatchError(GitInternalsError):
    """A digest resolved to a different object variant than required."""

    def __init__(self, digest: str, expected: str, actual: str):
        super().__init__(f"Object {digest} is a {actual}, expected a {expected}")
        self.digest = digest
        self.expected = expected
        self.actual = actual


class AmbiguousDigestError(GitInternalsError):
    """An abbreviated digest matches more than one object."""
