"""Client-side login session kept in a key-value store with a fixed TTL."""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, MutableMapping

from pydantic import ValidationError

from idcard.models.auth import SessionData
from idcard.models.employee import EmployeeProfile

logger = logging.getLogger(__name__)

SESSION_KEY = "employeeSession"
SESSION_TTL_SECONDS = 24 * 60 * 60


class SessionStore:
    """Reads and writes the login session slot of an injected storage.

    ``storage`` stands in for browser local storage and ``clock`` returns the
    current time in epoch seconds. A session older than the TTL, or one that
    cannot be parsed, is deleted on read and reported as absent.
    """

    def __init__(
        self,
        storage: MutableMapping[str, str],
        *,
        clock: Callable[[], float] = time.time,
        ttl_seconds: int = SESSION_TTL_SECONDS,
        key: str = SESSION_KEY,
    ) -> None:
        self.storage = storage
        self.clock = clock
        self.ttl_seconds = ttl_seconds
        self.key = key

    def _now_ms(self) -> int:
        return int(self.clock() * 1000)

    def save(self, employee: EmployeeProfile) -> SessionData:
        session = SessionData(is_authenticated=True, employee=employee, login_time=self._now_ms())
        self.storage[self.key] = session.model_dump_json(by_alias=True)
        return session

    def get(self) -> SessionData | None:
        raw = self.storage.get(self.key)
        if not raw:
            return None

        try:
            session = SessionData.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Discarding corrupted session: %s", e)
            self.clear()
            return None

        if self._now_ms() - session.login_time > self.ttl_seconds * 1000:
            logger.info("Session expired, clearing")
            self.clear()
            return None

        return session

    def clear(self) -> None:
        self.storage.pop(self.key, None)

    def is_authenticated(self) -> bool:
        session = self.get()
        return session is not None and session.is_authenticated and session.employee is not None

    def current_employee(self) -> EmployeeProfile | None:
        session = self.get()
        return session.employee if session else None

    def time_remaining_minutes(self) -> int:
        session = self.get()
        if not session:
            return 0

        remaining_ms = self.ttl_seconds * 1000 - (self._now_ms() - session.login_time)
        return max(0, math.ceil(remaining_ms / 60_000))
