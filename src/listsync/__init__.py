"""Synchronize mailing lists between the database and an email-marketing service."""
