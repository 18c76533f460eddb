"""Minimal git-compatible loose object store (blobs only)."""
from .errors import *  # noqa: F401,F403
from .name import Name, identify
from .objects import Blob, compress, decode, encode, parse
from .store import ObjectStore

__version__ = '0.1.0'
