"""Custom value classes for django-configurations."""

import os

from configurations import values


class SecretFileValue(values.Value):
    """
    Class used to interpret value from environment variables with reading file support.

    The value set is either (in order of priority):
    * The content of the file referenced by the environment variable
      `{name}_{file_suffix}` if set.
    * The value of the environment variable `{name}` if set.
    * The default value
    """

    file_suffix = "FILE"

    def __init__(self, *args, **kwargs):
        """Initialize the value."""
        if "file_suffix" in kwargs:
            self.file_suffix = kwargs.pop("file_suffix")
        super().__init__(*args, **kwargs)

    def read_file(self, filename):
        """Return the stripped content of a secret file."""
        if not os.path.exists(filename):
            raise ValueError(f"Path {filename!r} does not exist.")
        try:
            with open(filename) as file:
                return file.read().removesuffix("\n")
        except OSError as err:
            raise ValueError(f"Path {filename!r} cannot be read: {err!r}") from err

    def setup(self, name):
        """Get the value from environment variables."""
        value = self.default
        if self.environ:
            full_environ_name = self.full_environ_name(name)
            full_environ_name_file = f"{full_environ_name}_{self.file_suffix}"
            if full_environ_name_file in os.environ:
                value = self.to_python(self.read_file(os.environ[full_environ_name_file]))
            elif full_environ_name in os.environ:
                value = self.to_python(os.environ[full_environ_name])
            elif self.environ_required:
                raise ValueError(
                    f"Value {name!r} is required to be set as the "
                    f"environment variable {full_environ_name_file!r} or {full_environ_name!r}"
                )
        self.value = value
        return value


class MailchimpApiKeyValue(SecretFileValue):
    """Mailchimp API key, which must end with its `-<datacenter>` suffix."""

    def to_python(self, value):
        """Reject keys the Mailchimp backend could not route."""
        value = super().to_python(value)
        key, _sep, datacenter = value.rpartition("-")
        if not key or not datacenter:
            raise ValueError("Mailchimp API key must end with its datacenter, e.g. 'xxxx-us6'.")
        return value
