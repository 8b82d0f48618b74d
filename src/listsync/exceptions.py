"""Exceptions raised by the mailing list synchronization service."""


class ListSyncError(Exception):
    """Base exception for all synchronization errors."""

    status_code = 500
    default_message = "Mailing list synchronization failed"

    def __init__(self, message=None):
        """Keep the public message of the error."""
        self.message = message or self.default_message
        super().__init__(self.message)

    def get_payload(self):
        """Return the JSON envelope describing the error."""
        return {"message": self.message}


class MailingListValidationError(ListSyncError):
    """Exception raised when the submitted data is invalid."""

    status_code = 400
    default_message = "Invalid data given"

    def __init__(self, errors, message=None):
        """Keep the field-level error messages."""
        super().__init__(message)
        self.errors = errors

    def get_payload(self):
        """Return the message along with the field-level errors."""
        return {"message": self.message, "errors": self.errors}


class MailingListNotFoundError(ListSyncError):
    """Exception raised when the mailing list does not exist."""

    status_code = 404

    def __init__(self, list_id):
        """Reference the missing id in the message."""
        self.list_id = list_id
        super().__init__(f"MailingList[{list_id}] not found")


class DownstreamError(ListSyncError):
    """Exception raised when a collaborator of the service fails."""


class StorageError(DownstreamError):
    """Exception raised when the database write fails."""

    default_message = "Failed to store mailing list"


class RemoteSyncError(DownstreamError):
    """Exception raised when the marketing service write fails."""

    status_code = 502
    default_message = "Failed to synchronize mailing list with the marketing service"
