"""django-configurations mixins building the listsync settings from the environment."""

from configurations import values

from listsync.configuration.values import MailchimpApiKeyValue


class MarketingConfigurationMixin:
    """
    Build `LISTSYNC_MARKETING` from environment variables.

    Mix it before `configurations.Configuration` in the host project settings:

        class Production(MarketingConfigurationMixin, Configuration):
            ...

    The API key is read from `DJANGO_MAILCHIMP_API_KEY_FILE` when set, otherwise
    from `DJANGO_MAILCHIMP_API_KEY`.
    """

    LISTSYNC_MARKETING_BACKEND = values.Value("listsync.marketing.backends.mailchimp.MailchimpBackend")
    LISTSYNC_MARKETING_TIMEOUT = values.IntegerValue(10)

    MAILCHIMP_API_KEY = MailchimpApiKeyValue()
    MAILCHIMP_LIST_ID = values.Value()
    MAILCHIMP_SERVER = values.Value()

    @classmethod
    def get_marketing_settings(cls):
        """Return the marketing backend definition read by the marketing handler."""
        parameters = {
            "api_key": cls.MAILCHIMP_API_KEY,
            "list_id": cls.MAILCHIMP_LIST_ID,
        }
        if cls.MAILCHIMP_SERVER:
            parameters["server"] = cls.MAILCHIMP_SERVER
        return {
            "BACKEND": cls.LISTSYNC_MARKETING_BACKEND,
            "PARAMETERS": parameters,
        }

    @classmethod
    def post_setup(cls):
        """Set `LISTSYNC_MARKETING` once the environment values are resolved."""
        super().post_setup()
        cls.LISTSYNC_MARKETING = cls.get_marketing_settings()
