"""Object identifiers: the SHA-1 digest of an encoded object."""
import hashlib
import string
from typing import Tuple

from .errors import InvalidNameError

NAME_SIZE = hashlib.sha1().digest_size
HEX_SIZE = NAME_SIZE * 2

_HEXDIGITS = frozenset(string.hexdigits)


class Name:
    """A 20-byte object name, rendered as 40 lowercase hex characters."""

    __slots__ = ('_digest',)

    def __init__(self, digest: bytes):
        if len(digest) != NAME_SIZE:
            raise ValueError(f'name must be {NAME_SIZE} bytes, got {len(digest)}')
        self._digest = bytes(digest)

    @classmethod
    def from_hex(cls, text: str) -> 'Name':
        if len(text) != HEX_SIZE or not _HEXDIGITS.issuperset(text):
            raise InvalidNameError(f'not a {HEX_SIZE}-character hex object name: {text!r}')
        return cls(bytes.fromhex(text))

    @property
    def digest(self) -> bytes:
        return self._digest

    def hex(self) -> str:
        return self._digest.hex()

    def shard(self) -> Tuple[str, str]:
        """Split into (directory, filename): first byte, remaining 19 bytes."""
        h = self.hex()
        return h[:2], h[2:]

    def __eq__(self, other):
        if not isinstance(other, Name):
            return NotImplemented
        return self._digest == other._digest

    def __hash__(self):
        return hash(self._digest)

    def __str__(self):
        return self.hex()

    def __repr__(self):
        return f'Name({self.hex()!r})'


def identify(data: bytes) -> Name:
    return Name(hashlib.sha1(data).digest())
