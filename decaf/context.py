"""Request-scoped context handed to services."""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from decaf.models.user import User


@dataclass
class RequestContext:
    """Everything a service needs to serve one request.

    ``user`` is None for anonymous callers on routes with optional auth.
    """

    db: Session
    user: User | None
    logger: logging.Logger | logging.LoggerAdapter

    @property
    def user_id(self) -> str | None:
        return self.user.id if self.user is not None else None


class RequestLogger(logging.LoggerAdapter):
    """Prefix log lines with the request they belong to."""

    def process(self, msg, kwargs):
        return f"[{self.extra['method']} {self.extra['path']}] {msg}", kwargs
