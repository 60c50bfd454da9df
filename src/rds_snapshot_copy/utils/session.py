#!/usr/bin/env python3
"""
utils/session.py

Session management utilities for AWS interactions.

Credentials come from the standard boto3 chain; this module only pins the
profile and region a run works against.
"""

import boto3
from typing import Optional
from botocore.exceptions import ProfileNotFound
from .logger import setup_logger

logger = setup_logger(__name__, "session.log")


class SessionManager:
    """Manages the AWS session shared by every client in a run."""

    @classmethod
    def get_session(
        cls,
        profile: Optional[str] = None,
        region: Optional[str] = None,
    ) -> boto3.Session:
        """Create a boto3 Session for the given profile and region."""
        try:
            session = boto3.Session(profile_name=profile, region_name=region)
        except ProfileNotFound as e:
            raise ValueError(f"AWS profile '{profile}' is not configured: {e}") from e

        logger.debug(
            f"Created session (profile={profile or 'default'}, region={session.region_name})"
        )
        return session
