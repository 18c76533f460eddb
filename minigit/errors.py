"""Error types raised by the object model, the store and configuration."""


class ObjectError(Exception):
    """Base class for every error minigit reports."""


class InvalidNameError(ObjectError, ValueError):
    pass


class ConfigError(ObjectError):
    pass


# encoding errors

class DecodeError(ObjectError):
    """Encoded bytes do not have the canonical "<kind> <len>\\0<payload>" shape."""


class MalformedSeparatorError(DecodeError):
    pass


class MalformedHeaderError(DecodeError):
    pass


class UnsupportedKindError(DecodeError):
    def __init__(self, kind: str):
        super().__init__(f'unsupported object kind: {kind!r}')
        self.kind = kind


class InvalidLengthError(DecodeError):
    pass


class LengthMismatchError(DecodeError):
    def __init__(self, declared: int, actual: int):
        super().__init__(f'header declares {declared} bytes, payload has {actual}')
        self.declared = declared
        self.actual = actual


# storage errors

class StoreError(ObjectError):
    def __init__(self, message: str, name=None):
        super().__init__(message)
        self.name = name


class DirectoryCreateFailedError(StoreError):
    pass


class WriteFailedError(StoreError):
    pass


# read path errors

class ReadError(ObjectError):
    def __init__(self, message: str, name=None):
        super().__init__(message)
        self.name = name


class NotFoundError(ReadError):
    pass


class ReadFailedError(ReadError):
    pass


class DecompressFailedError(ReadError):
    pass


class IntegrityMismatchError(ReadError):
    def __init__(self, name, actual):
        super().__init__(f'object {name} hashes to {actual}', name)
        self.actual = actual


class CorruptObjectError(ReadError):
    def __init__(self, name, cause: DecodeError):
        super().__init__(f'object {name} is corrupt: {cause}', name)
        self.cause = cause
