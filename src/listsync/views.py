"""API views of the listsync application."""

from rest_framework import status, viewsets
from rest_framework.response import Response

from listsync.exceptions import ListSyncError
from listsync.serializers import MailingListSerializer
from listsync.services import get_list_sync_service


class MailingListViewSet(viewsets.ViewSet):
    """
    Create, show, update and remove mailing lists.

    Each write is mirrored to the marketing service. Errors are rendered as
    `{"message": ...}` envelopes, with field-level `errors` for invalid data.
    """

    serializer_class = MailingListSerializer

    def get_service(self):
        """Return the service applying the changes."""
        return get_list_sync_service()

    def handle_exception(self, exc):
        """Render synchronization errors as JSON envelopes."""
        if isinstance(exc, ListSyncError):
            return Response(exc.get_payload(), status=exc.status_code)
        return super().handle_exception(exc)

    def create(self, request):
        """Create a mailing list."""
        mailing_list = self.get_service().create(request.data)
        return Response(
            {"message": "Successfully Save", "data": self.serializer_class(mailing_list).data},
            status=status.HTTP_201_CREATED,
        )

    def retrieve(self, request, pk=None):
        """Return the stored mailing list."""
        mailing_list = self.get_service().show(pk)
        return Response(self.serializer_class(mailing_list).data)

    def update(self, request, pk=None):
        """Update the supplied fields of a mailing list."""
        mailing_list = self.get_service().update(pk, request.data, email=request.query_params.get("email"))
        return Response({"message": "Successfully Update", "data": self.serializer_class(mailing_list).data})

    def partial_update(self, request, pk=None):
        """Update the supplied fields of a mailing list."""
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):
        """Remove a mailing list, addressing the remote member by the given email."""
        email = request.query_params.get("email")
        if email is None and hasattr(request.data, "get"):
            email = request.data.get("email")
        self.get_service().remove(pk, email)
        return Response({"message": "Successfully Deleted"})
