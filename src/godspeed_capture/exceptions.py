"""Exceptions raised while capturing tasks."""


class GodspeedError(Exception):
    """Base class for all godspeed-capture errors."""


class MissingCredentialError(GodspeedError):
    """The API token is not configured."""


class StorageError(GodspeedError):
    """The local data directory could not be prepared."""


class TaskValidationError(GodspeedError):
    """The task input is invalid and would fail again on retry."""


class RemoteError(GodspeedError):
    """A call to the Godspeed API failed.

    Covers transport failures, non-success status codes and undecodable
    responses. ``status_code`` is set only when the server answered.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
