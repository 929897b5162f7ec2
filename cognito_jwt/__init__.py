"""Fetch a Cognito id token with the admin username/password flow."""

__version__ = "0.1.0"
