"""Token acquisition helpers for the Cognito JWT tool."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from botocore.exceptions import BotoCoreError, ClientError

from .cli import Credentials
from .config import PoolConfig

logger = logging.getLogger(__name__)

ADMIN_USER_PASSWORD_AUTH = "ADMIN_USER_PASSWORD_AUTH"


class AuthenticationError(RuntimeError):
    """Raised when Cognito did not return an identity token."""

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(f"{kind}: {message}")
        self.kind = kind
        self.message = message


@dataclass(frozen=True)
class AuthSuccess:
    """Tokens returned by a successful authentication."""

    id_token: str
    access_token: Optional[str] = None
    expires_in: Optional[int] = None
    token_type: Optional[str] = None

    def unwrap(self) -> str:
        return self.id_token


@dataclass(frozen=True)
class AuthFailure:
    """Describes why no identity token could be obtained."""

    kind: str
    message: str

    def unwrap(self) -> str:
        raise AuthenticationError(self.kind, self.message)


AuthResult = Union[AuthSuccess, AuthFailure]


def build_auth_result(response: Dict[str, Any]) -> AuthResult:
    """Normalise an ``AdminInitiateAuth`` response into an ``AuthResult``."""

    result = response.get("AuthenticationResult")
    if not result:
        challenge = response.get("ChallengeName")
        if challenge:
            return AuthFailure(
                kind="ChallengeRequired",
                message=f"Cognito requested the {challenge} challenge, which is not supported",
            )
        return AuthFailure(
            kind="MalformedResponse",
            message="Response did not include an authentication result",
        )

    id_token = result.get("IdToken")
    if not id_token:
        return AuthFailure(
            kind="MalformedResponse",
            message="Authentication result did not include an id token",
        )

    return AuthSuccess(
        id_token=id_token,
        access_token=result.get("AccessToken"),
        expires_in=result.get("ExpiresIn"),
        token_type=result.get("TokenType"),
    )


def admin_password_auth(
    client, config: PoolConfig, credentials: Credentials
) -> AuthResult:
    """Run the admin username/password flow against the configured pool.

    Exactly one ``AdminInitiateAuth`` request is made. SDK errors are not
    raised but returned as an ``AuthFailure`` whose ``kind`` is the Cognito
    error code (``NotAuthorizedException``, ``UserNotFoundException``...) or
    the botocore exception name for transport and credential problems.
    """

    logger.info("Authenticating against user pool %s", config.user_pool_id)
    try:
        response = client.admin_initiate_auth(
            UserPoolId=config.user_pool_id,
            ClientId=config.client_id,
            AuthFlow=ADMIN_USER_PASSWORD_AUTH,
            AuthParameters={
                "USERNAME": credentials.username,
                "PASSWORD": credentials.password,
            },
        )
    except ClientError as exc:
        error = exc.response.get("Error", {})
        kind = error.get("Code") or "ClientError"
        message = error.get("Message") or str(exc)
        logger.info("AdminInitiateAuth rejected: %s", kind)
        return AuthFailure(kind=kind, message=message)
    except BotoCoreError as exc:
        logger.info("AdminInitiateAuth failed: %s", type(exc).__name__)
        return AuthFailure(kind=type(exc).__name__, message=str(exc))

    return build_auth_result(response)
