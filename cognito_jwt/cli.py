"""Command line parsing and credential prompting."""

from __future__ import annotations

import argparse
import getpass
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from . import __version__

logger = logging.getLogger(__name__)

USERNAME_PROMPT = "Username: "
PASSWORD_PROMPT = "Password: "


@dataclass(frozen=True)
class Credentials:
    """Login credentials for a single authentication attempt."""

    username: str
    password: str = field(repr=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cognito-jwt",
        description=(
            "Authenticate against a Cognito user pool with the "
            "ADMIN_USER_PASSWORD_AUTH flow and print the id token."
        ),
    )
    parser.add_argument(
        "-u", "--username", default=None, help="Username to login (prompted if omitted)"
    )
    parser.add_argument(
        "-p", "--password", default=None, help="Password (prompted without echo if omitted)"
    )
    parser.add_argument(
        "--profile",
        default=None,
        help="AWS profile used to sign the AdminInitiateAuth request",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def resolve_credentials(
    args: argparse.Namespace,
    *,
    input_func: Callable[[str], str] = input,
    getpass_func: Callable[[str], str] = getpass.getpass,
) -> Credentials:
    """Fill in any credentials missing from ``args`` by prompting the user."""

    username = args.username
    if username is None:
        logger.debug("Username not supplied, prompting")
        username = input_func(USERNAME_PROMPT).strip()

    password = args.password
    if password is None:
        logger.debug("Password not supplied, prompting")
        password = getpass_func(PASSWORD_PROMPT)

    return Credentials(username=username, password=password)
