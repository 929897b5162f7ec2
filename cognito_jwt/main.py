"""Command line entry point printing a Cognito id token."""

from __future__ import annotations

import logging
import sys
from pprint import pformat
from typing import Any, Dict, Optional, Sequence

from .cli import parse_args, resolve_credentials
from .cognito_client import build_cognito_client
from .config import load_pool_config, resolve_config_path
from .token_service import admin_password_auth
from .utils import summarize_claims

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "cognito_jwt"
HANDLER_NAME = "cognito-jwt-stderr"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    # Only the package logger is raised to DEBUG. botocore logs request and
    # response bodies (password, tokens) at DEBUG, so its loggers and the
    # root logger are left alone.
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            package_logger.removeHandler(handler)

    if not verbose:
        package_logger.setLevel(logging.NOTSET)
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def _log_step(step: str, details: Optional[Dict[str, Any]] = None) -> None:
    if details:
        logger.debug("[Cognito auth] %s\n%s", step, pformat(details, sort_dicts=True))
    else:
        logger.debug("[Cognito auth] %s", step)


def _decode_token_for_logging(id_token: str) -> Dict[str, Any]:
    """Decode the id token claims for logging without raising on failure."""

    try:
        return summarize_claims(id_token)
    except ValueError as exc:
        logger.warning("Failed to decode id token for logging: %s", exc)
        return {"error": str(exc)}


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    _configure_logging(args.verbose)

    config_path = resolve_config_path()
    print(f"Config Path: {config_path}")
    config = load_pool_config(config_path)
    _log_step(
        "Loaded pool config",
        {
            "client_id": config.client_id,
            "region": config.region,
            "user_pool_id": config.user_pool_id,
        },
    )

    credentials = resolve_credentials(args)

    client = build_cognito_client(region=config.region, profile=args.profile)
    result = admin_password_auth(client, config, credentials)
    id_token = result.unwrap()

    if logger.isEnabledFor(logging.DEBUG):
        _log_step("Id token acquired", {"token_claims": _decode_token_for_logging(id_token)})

    print(f"JWT:\n{id_token}")


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Run the tool and return the process exit status."""

    try:
        main(argv)
    except KeyboardInterrupt:
        print("Aborted by user", file=sys.stderr)
        return 1
    except Exception as exc:  # noqa: BLE001 - surface clear errors for operators
        logger.debug("Run failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def entrypoint() -> None:
    sys.exit(run())


if __name__ == "__main__":
    entrypoint()
