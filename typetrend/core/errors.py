"""Storage failures surfaced by the session store."""


class StorageError(Exception):
    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"{key}: {message}")
        self.key = key


class StorageCorruptError(StorageError):
    """The persisted session log could not be parsed."""


class StorageWriteError(StorageError):
    """A session record could not be durably persisted."""
