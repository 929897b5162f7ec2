"""Helpers for creating the Cognito identity provider client."""

from __future__ import annotations

import logging
from typing import Optional

import boto3

logger = logging.getLogger(__name__)

SERVICE_NAME = "cognito-idp"


def build_session(profile: Optional[str] = None) -> boto3.session.Session:
    """Return a boto3 session resolving AWS credentials from the default chain."""

    # The session is the only credential provider the tool knows about;
    # environment variables, shared credential files and instance metadata
    # are all resolved by botocore.
    if profile:
        return boto3.session.Session(profile_name=profile)
    return boto3.session.Session()


def build_cognito_client(
    region: Optional[str] = None,
    profile: Optional[str] = None,
    session: Optional[boto3.session.Session] = None,
):
    """Construct a ``cognito-idp`` client for the configured pool region."""

    if session is None:
        session = build_session(profile)

    logger.debug(
        "Creating %s client (region=%s, profile=%s)",
        SERVICE_NAME,
        region or session.region_name,
        profile or session.profile_name,
    )
    return session.client(SERVICE_NAME, region_name=region)
