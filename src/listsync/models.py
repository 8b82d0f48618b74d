"""Models for the listsync application."""

from django.db import models


class MailingList(models.Model):
    """A mailing list recipient mirrored as a member of the remote audience."""

    first_name = models.CharField("first name", max_length=255)
    last_name = models.CharField("last name", max_length=255)
    contact = models.CharField("contact", max_length=255, blank=True, default="")
    email = models.EmailField("email address", unique=True)
    subscribed = models.BooleanField("subscribed", default=False)
    created_at = models.DateTimeField("created at", auto_now_add=True)
    updated_at = models.DateTimeField("updated at", auto_now=True)

    class Meta:  # noqa: D106
        verbose_name = "mailing list"
        verbose_name_plural = "mailing lists"
        ordering = ("-created_at",)

    def __str__(self):
        """Return a string representation of the mailing list."""
        return f"{self.first_name} {self.last_name} <{self.email}>"
