"""Loose object storage under ``<root>/.git/objects/<xx>/<38 hex chars>``."""
import logging
import os
import tempfile
import zlib
from pathlib import Path
from typing import Union

from .errors import (CorruptObjectError, DecodeError, DecompressFailedError,
                     DirectoryCreateFailedError, IntegrityMismatchError,
                     NotFoundError, ReadFailedError, WriteFailedError)
from .name import Name, identify
from .objects import Blob, compress, decode, encode

logger = logging.getLogger(__name__)

GIT_DIR = '.git'
OBJECT_MODE = 0o444


class ObjectStore:
    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)
        self.objects_dir = self.root / GIT_DIR / 'objects'

    def object_path(self, name: Name) -> Path:
        d, f = name.shard()
        return self.objects_dir / d / f

    def contains(self, name: Name) -> bool:
        return self.object_path(name).is_file()

    def store(self, content: bytes) -> Name:
        return self._write(encode(content))

    def write(self, obj: Blob) -> Name:
        return self._write(obj.encode())

    def _write(self, encoded: bytes) -> Name:
        name = identify(encoded)
        p = self.object_path(name)
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateFailedError(f'mkdir {p.parent}: {e}', name) from e

        data = compress(encoded)
        # same-directory temp file + rename: readers see the whole object or nothing
        try:
            fd, tmp = tempfile.mkstemp(dir=p.parent, prefix='tmp_obj_')
        except OSError as e:
            raise WriteFailedError(f'write {p}: {e}', name) from e
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(data)
            # loose objects are read-only and world-readable, as git writes them
            os.chmod(tmp, OBJECT_MODE)
            os.replace(tmp, p)
        except OSError as e:
            try:
                os.unlink(tmp)
            except OSError:
                pass
            raise WriteFailedError(f'write {p}: {e}', name) from e
        logger.debug('stored %s (%d bytes, %d compressed)', name.hex()[:8], len(encoded), len(data))
        return name

    def read_object(self, name: Name) -> bytes:
        """Return the encoded bytes of *name* after checking they hash to it."""
        p = self.object_path(name)
        try:
            raw = p.read_bytes()
        except FileNotFoundError as e:
            raise NotFoundError(f'object {name} not found', name) from e
        except OSError as e:
            raise ReadFailedError(f'read {p}: {e}', name) from e

        d = zlib.decompressobj()
        try:
            data = d.decompress(raw) + d.flush()
        except zlib.error as e:
            logger.warning('object %s does not decompress: %s', name, e)
            raise DecompressFailedError(f'object {name}: {e}', name) from e
        if not d.eof or d.unused_data:
            logger.warning('object %s is truncated or has trailing bytes', name)
            raise DecompressFailedError(f'object {name}: truncated or trailing data', name)

        actual = identify(data)
        if actual != name:
            logger.warning('object %s hashes to %s', name, actual)
            raise IntegrityMismatchError(name, actual)
        logger.debug('read %s (%d bytes)', name.hex()[:8], len(data))
        return data

    def read(self, name: Name) -> bytes:
        data = self.read_object(name)
        try:
            return decode(data)
        except DecodeError as e:
            raise CorruptObjectError(name, e) from e

    def read_blob(self, name: Name) -> Blob:
        return Blob(self.read(name))


def store(root: Union[str, Path], content: bytes) -> Name:
    return ObjectStore(root).store(content)


def read(root: Union[str, Path], name: Name) -> bytes:
    return ObjectStore(root).read(name)
