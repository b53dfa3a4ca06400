"""Exceptions raised by file cache stores.

Validation errors derive from ValueError, filesystem failures from OSError,
so callers not aware of this module can still catch them broadly.
"""


class FileCacheError(Exception):
    """Base class for all file cache errors."""


class InvalidArgumentError(FileCacheError, ValueError):
    """An argument is of the wrong type or out of range."""


class InvalidKeyError(InvalidArgumentError):
    """A cache key is empty, too long or contains illegal characters."""


class InvalidNameError(InvalidArgumentError):
    """A store or backup name is empty, too long or contains illegal characters."""


class EmptyCandidateError(InvalidArgumentError):
    """Promoting the candidate would replace the store with an empty one."""


class ConfigurationError(FileCacheError):
    """The base path cannot be resolved, typically for lack of a document root."""


class PathError(FileCacheError, OSError):
    """A required directory cannot be created or isn't writable."""


class StoreDestroyedError(FileCacheError, RuntimeError):
    """Operation attempted on a store that has been destroyed."""


class SerializeError(FileCacheError):
    """A value cannot be serialized."""


class ReadError(FileCacheError, OSError):
    """An existing file cannot be read or its content cannot be deserialized."""


class WriteError(FileCacheError, OSError):
    """Writing, renaming, touching or removing a file or directory failed."""


class AlreadyExistsError(FileCacheError, FileExistsError):
    """A backup by that name already exists."""


class NotFoundError(FileCacheError, FileNotFoundError):
    """A referenced backup doesn't exist."""
