"""Git objects and the loose-object decoder."""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import List, Optional, Tuple

from .errors import FormatError, UnknownTypeError
from .hash import DIGEST_SIZE, is_digest, to_hex

GITLINK_MODE = 160000

_CONTRIBUTION = re.compile(
    r'^(?P<name>.+) <(?P<email>.+)> (?P<epoch>\d+) (?P<zone>[+-]\d{4})$'
)


@dataclass(frozen=True)
class GitObject:
    """
    Base class for decoded objects.

    Attributes:
        digest: 40-character hex digest the object was read from
        length: Body length declared in the object header (not verified)
    """

    digest: str
    length: int

    @property
    def type(self) -> str:
        """
        Return object type name.

        Returns:
            str: Object type (blob, tree, commit)
        """
        return self.__class__.__name__.lower()


@dataclass(frozen=True)
class Blob(GitObject):
    """File content. A blob has no outgoing references."""

    content: str

    def __repr__(self) -> str:
        return f"Blob(digest={self.digest[:7]}, size={self.length})"


@dataclass(frozen=True)
class TreeEntry:
    """
    A single entry in a tree.

    The mode is kept as the integer spelled by its octal digits
    (e.g. 100644, 40000). It does not reliably tell a subtree from a
    file; decode the child to find out.
    """

    mode: int
    filename: str
    digest: str

    def __str__(self) -> str:
        return f"{self.mode} {self.digest} {self.filename}"


@dataclass(frozen=True)
class Tree(GitObject):
    """Directory listing; entries keep their on-disk order."""

    entries: Tuple[TreeEntry, ...]

    def __repr__(self) -> str:
        return f"Tree(digest={self.digest[:7]}, entries={len(self.entries)})"


class ContributionRole(Enum):
    """Whether a contribution records the author or the committer."""

    ORIGINAL = 'original'
    COMMIT = 'commit'


@dataclass(frozen=True)
class Contribution:
    """
    Identity and time of an author or committer.

    The timestamp keeps the offset recorded in the commit instead of
    being converted to UTC.
    """

    name: str
    email: str
    timestamp: datetime
    role: ContributionRole

    @classmethod
    def parse(cls, value: str, role: ContributionRole) -> 'Contribution':
        """
        Parse a ``Name <email> <epoch> <+hhmm>`` header value.

        Args:
            value: Header value after the ``author``/``committer`` key
            role: Role to record on the contribution

        Returns:
            Contribution: Parsed contribution

        Raises:
            FormatError: If the value does not match the pattern
        """
        match = _CONTRIBUTION.match(value)
        if not match:
            raise FormatError(f"Can't read contribution from {value!r}")

        zone = match.group('zone')
        hours, minutes = int(zone[1:3]), int(zone[3:5])
        offset = timedelta(hours=hours, minutes=minutes)
        if zone[0] == '-':
            offset = -offset

        try:
            tz = timezone(offset)
        except ValueError:
            raise FormatError(f"Invalid zone offset {zone!r} in {value!r}")

        try:
            timestamp = datetime.fromtimestamp(int(match.group('epoch')), tz)
        except (ValueError, OverflowError, OSError):
            raise FormatError(f"Invalid timestamp {match.group('epoch')!r} in {value!r}")
        return cls(match.group('name'), match.group('email'), timestamp, role)

    def format_timestamp(self) -> str:
        """Render the timestamp as ``YYYY-MM-DD HH:MM:SS +HH:MM``."""
        offset = self.timestamp.utcoffset() or timedelta(0)
        sign = '-' if offset < timedelta(0) else '+'
        minutes = abs(int(offset.total_seconds())) // 60
        zone = f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"
        return f"{self.timestamp.strftime('%Y-%m-%d %H:%M:%S')} {zone}"

    def __str__(self) -> str:
        return f"{self.name} {self.email} {self.role.value} timestamp: {self.format_timestamp()}"


@dataclass(frozen=True)
class Commit(GitObject):
    """
    A snapshot with metadata.

    Only two parents are representable: the mainline ``parent`` and
    the ``merge_parent`` brought in by a merge.
    """

    tree: str
    parent: Optional[str]
    merge_parent: Optional[str]
    author: Contribution
    committer: Contribution
    message: str

    @property
    def parents(self) -> Tuple[str, ...]:
        """Present parents, mainline first."""
        return tuple(p for p in (self.parent, self.merge_parent) if p)

    def __repr__(self) -> str:
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(digest={self.digest[:7]}, parents={len(self.parents)}, msg='{msg_preview}')"


def decode_object(digest: str, raw: bytes) -> GitObject:
    """
    Decode an inflated loose object.

    Format: <type> <length>\\0<body>

    Args:
        digest: Digest the bytes were read from
        raw: Decompressed object bytes

    Returns:
        GitObject: Blob, Tree or Commit

    Raises:
        FormatError: If the header or body is malformed
        UnknownTypeError: If the header names an unsupported type
    """
    null_idx = raw.find(b'\0')
    if null_idx < 0:
        raise FormatError(f"Object {digest} has no header terminator")

    header = raw[:null_idx].decode('ascii', errors='replace')
    body = raw[null_idx + 1:]

    obj_type, sep, size_str = header.partition(' ')
    if not sep:
        raise FormatError(f"Invalid object header in {digest}: {header!r}")

    if obj_type not in _PARSERS:
        raise UnknownTypeError(f"Unknown object type {obj_type!r} in {digest}")

    try:
        length = int(size_str)
    except ValueError:
        raise FormatError(f"Invalid object length in {digest}: {size_str!r}")

    return _PARSERS[obj_type](digest, length, body)


def _parse_blob(digest: str, length: int, body: bytes) -> Blob:
    return Blob(digest, length, body.decode('utf-8', errors='replace'))


def _parse_tree(digest: str, length: int, body: bytes) -> Tree:
    entries: List[TreeEntry] = []
    pos = 0

    while pos < len(body):
        space_pos = body.find(b' ', pos)
        if space_pos < 0:
            raise FormatError(f"Truncated tree entry in {digest} at offset {pos}")
        mode_str = body[pos:space_pos]
        if not mode_str.isdigit():
            raise FormatError(f"Invalid tree entry mode in {digest}: {mode_str!r}")

        null_pos = body.find(b'\0', space_pos + 1)
        if null_pos < 0:
            raise FormatError(f"Truncated tree entry in {digest} at offset {pos}")
        filename = body[space_pos + 1:null_pos].decode('utf-8', errors='replace')

        end = null_pos + 1 + DIGEST_SIZE
        if end > len(body):
            raise FormatError(f"Truncated digest for {filename!r} in tree {digest}")

        entries.append(TreeEntry(int(mode_str), filename, to_hex(body[null_pos + 1:end])))
        pos = end

    return Tree(digest, length, tuple(entries))


def _parse_commit(digest: str, length: int, body: bytes) -> Commit:
    content = body.decode('utf-8', errors='replace')

    tree = None
    parents: List[str] = []
    author = None
    committer = None
    message = ''

    rest = content
    while rest:
        line, _, rest = rest.partition('\n')
        if not line:
            message = rest
            break

        # Continuation of a multi-line header such as gpgsig
        if line.startswith(' '):
            continue

        key, sep, value = line.partition(' ')
        if not sep:
            raise FormatError(f"Invalid commit header line in {digest}: {line!r}")

        if key in ('tree', 'parent') and not is_digest(value):
            raise FormatError(f"Commit {digest} has an invalid {key} digest: {value!r}")

        if key == 'tree':
            tree = value
        elif key == 'parent':
            if len(parents) == 2:
                raise FormatError(f"Commit {digest} has more than two parents")
            parents.append(value)
        elif key == 'author':
            author = Contribution.parse(value, ContributionRole.ORIGINAL)
        elif key == 'committer':
            committer = Contribution.parse(value, ContributionRole.COMMIT)

    if tree is None or author is None or committer is None:
        raise FormatError(f"Commit {digest} is missing tree, author or committer")

    parent = parents[0] if parents else None
    merge_parent = parents[1] if len(parents) > 1 else None

    return Commit(digest, length, tree, parent, merge_parent, author, committer, message)


_PARSERS = {
    'blob': _parse_blob,
    'tree': _parse_tree,
    'commit': _parse_commit,
}
