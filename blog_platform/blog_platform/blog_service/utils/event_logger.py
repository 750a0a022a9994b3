"""
Logging setup and authentication event logging.
"""
from datetime import datetime
from typing import Optional
from fastapi import Request
import sys
import logging
import os

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ALLOWED_EVENT_TYPES = {
    "register",
    "login_success",
    "login_failure",
    "token_rejected",
}


def configure_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """
    Configure stdout logging, plus a file handler under ``log_dir`` when given.

    Args:
        level: Logging level name
        log_dir: Directory for ``blog_service.log``; stdout only when None
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    # Try to add file handler, but continue without it if directory creation fails
    if log_dir:
        try:
            os.makedirs(log_dir, exist_ok=True)
            handlers.append(logging.FileHandler(os.path.join(log_dir, "blog_service.log")))
        except OSError as e:
            print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers
    )


def client_ip(request: Request) -> Optional[str]:
    """Return the caller's address, falling back to X-Forwarded-For."""
    if request.client:
        return request.client.host

    # X-Forwarded-For can contain multiple IPs, take the first one
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return None


def log_auth_event(
    event_type: str,
    request: Request,
    user_id: Optional[int] = None,
    username: Optional[str] = None,
    **context
) -> None:
    """
    Log an authentication event.

    Args:
        event_type: One of: register, login_success, login_failure,
                    token_rejected
        request: FastAPI Request object
        user_id: Id of the user involved, when known
        username: Username involved, when known
        **context: Extra key=value pairs appended to the log line

    Raises:
        ValueError: If event_type is invalid
    """
    if event_type not in ALLOWED_EVENT_TYPES:
        raise ValueError(
            f"Invalid event_type '{event_type}'. Must be one of: {', '.join(sorted(ALLOWED_EVENT_TYPES))}"
        )

    extra = "".join(f" {key}={value}" for key, value in sorted(context.items()))
    level = logging.WARNING if event_type in ("login_failure", "token_rejected") else logging.INFO
    logger.log(
        level,
        "AUTH %s user_id=%s username=%s ip=%s timestamp=%s%s",
        event_type, user_id, username, client_ip(request), datetime.utcnow().isoformat(), extra
    )
