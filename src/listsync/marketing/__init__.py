"""Marketing module."""

from .handler import MarketingHandler

marketing_handler = MarketingHandler()
