"""Canonical object encoding.

An object is stored as ``b"<kind> <decimal length>\\0<payload>"``. That byte
string is what gets hashed into a :class:`~minigit.name.Name`, compressed and
written to disk; the raw payload is never hashed on its own.
"""
import zlib
from typing import Dict, Tuple, Type

from .errors import (InvalidLengthError, LengthMismatchError,
                     MalformedHeaderError, MalformedSeparatorError,
                     UnsupportedKindError)
from .name import Name, identify

# git writes loose objects at the fastest level
COMPRESSION_LEVEL = 1


def encode(content: bytes, kind: str = 'blob') -> bytes:
    return b'%s %d\x00' % (kind.encode('ascii'), len(content)) + content


def compress(encoded: bytes) -> bytes:
    return zlib.compress(encoded, COMPRESSION_LEVEL)


class Blob:
    """Opaque file content."""

    kind = 'blob'

    def __init__(self, content: bytes):
        self.content = bytes(content)

    @classmethod
    def from_encoded(cls, data: bytes) -> 'Blob':
        return parse(data)

    def encode(self) -> bytes:
        return encode(self.content, self.kind)

    def name(self) -> Name:
        return identify(self.encode())

    def compress(self) -> bytes:
        return compress(self.encode())

    def store(self, root) -> Name:
        from .store import ObjectStore
        return ObjectStore(root).write(self)

    def __eq__(self, other):
        if not isinstance(other, Blob):
            return NotImplemented
        return self.content == other.content

    def __hash__(self):
        return hash((self.kind, self.content))

    def __repr__(self):
        return f'Blob({len(self.content)} bytes)'


# kind tag -> variant; tree/commit/tag would register here
KINDS: Dict[bytes, Type[Blob]] = {
    b'blob': Blob,
}


def _parse_length(field: bytes) -> int:
    # canonical decimal only, so re-encoding reproduces the same bytes
    if not field or not field.isdigit() or (field[0:1] == b'0' and len(field) > 1):
        raise InvalidLengthError(f'invalid length field: {field!r}')
    return int(field)


def _split(data: bytes) -> Tuple[Type[Blob], bytes]:
    header, sep, payload = data.partition(b'\x00')
    if not sep:
        raise MalformedSeparatorError('no NUL byte between header and payload')
    fields = header.split(b' ')
    if len(fields) != 2:
        raise MalformedHeaderError(f'header must have 2 fields: {header!r}')
    kind, length = fields
    cls = KINDS.get(kind)
    if cls is None:
        raise UnsupportedKindError(kind.decode('ascii', 'replace'))
    size = _parse_length(length)
    if size != len(payload):
        raise LengthMismatchError(size, len(payload))
    return cls, payload


def parse(data: bytes) -> Blob:
    """Build the object variant named by the header of *data*."""
    cls, payload = _split(data)
    return cls(payload)


def decode(data: bytes) -> bytes:
    """Inverse of :func:`encode`; returns the payload."""
    return _split(data)[1]
