"""Serializers for the listsync application."""

from rest_framework import serializers

from listsync.models import MailingList


class MailingListSerializer(serializers.ModelSerializer):
    """Validate and render mailing lists with their camelCase wire names."""

    firstName = serializers.CharField(source="first_name", max_length=255)  # noqa: N815
    lastName = serializers.CharField(source="last_name", max_length=255)  # noqa: N815
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)  # noqa: N815
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)  # noqa: N815

    class Meta:  # noqa: D106
        model = MailingList
        fields = ("id", "firstName", "lastName", "contact", "email", "subscribed", "createdAt", "updatedAt")
        read_only_fields = ("id",)


class MemberEmailSerializer(serializers.Serializer):
    """Validate the email addressing a remote member."""

    email = serializers.EmailField()
