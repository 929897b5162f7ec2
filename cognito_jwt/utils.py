"""Helpers for inspecting the id token returned by Cognito.

Claims are read only to describe the token in debug logs. The signature is
never checked and the raw token is never part of the result.
"""

from __future__ import annotations

import base64
import json
from typing import Any, Dict

LOGGED_CLAIMS = ("sub", "aud", "iss", "token_use", "exp")


def read_unverified_claims(token: str) -> Dict[str, Any]:
    """Return the JSON payload segment of ``token``."""

    segments = token.split(".")
    if len(segments) != 3:
        raise ValueError(f"Expected 3 JWT segments, got {len(segments)}")

    payload = segments[1]
    raw = base64.urlsafe_b64decode(payload + "=" * (-len(payload) % 4))
    claims = json.loads(raw.decode("utf-8"))
    if not isinstance(claims, dict):
        raise ValueError("JWT payload is not a JSON object")
    return claims


def summarize_claims(token: str) -> Dict[str, Any]:
    """Keep only the non-sensitive claims of ``token`` worth logging."""

    claims = read_unverified_claims(token)
    return {key: claims[key] for key in LOGGED_CLAIMS if key in claims}
