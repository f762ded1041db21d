from __future__ import annotations

import logging

from domain.errors import UnauthorizedError

logger = logging.getLogger(__name__)


class IdentityResolver:
    """Turns a caller-supplied user id (header, env var, ...) into a trusted identity."""

    def resolve(self, user_id: str | None) -> str:
        candidate = (user_id or "").strip()
        if not candidate:
            logger.info("IdentityResolver rejected request without user id")
            raise UnauthorizedError("Unauthorized")
        return candidate
