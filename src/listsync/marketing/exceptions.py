"""Marketing exceptions module."""


class MarketingError(Exception):
    """Base exception for all marketing exceptions."""


class MarketingInvalidBackendError(MarketingError):
    """Exception raised when the backend is invalid."""


class MemberSyncError(MarketingError):
    """Exception raised when a member cannot be synchronized with the marketing service."""


class MemberCreationError(MemberSyncError):
    """Exception raised when the member creation fails."""


class MemberUpdateError(MemberSyncError):
    """Exception raised when the member update fails."""


class MemberDeletionError(MemberSyncError):
    """Exception raised when the member deletion fails."""
