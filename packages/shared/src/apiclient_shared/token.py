"""Async token store guarded by a read/write lock.

Every request reads the access token; only OAuth flows (Ramp) ever write it.
Readers share the lock so concurrent requests never serialize on the token.
A writer waits for in-flight readers to drain and, once it is waiting, new
readers queue behind it so a steady stream of requests cannot starve a refresh.

Expiry is tracked on the monotonic clock. When a provider returns
`expires_in`, the stored expiry is pulled forward by REFRESH_THRESHOLD so a
refresh happens before the token actually lapses.

Usage:
    store = TokenStore(access_token="abc")
    token = await store.access_token()
    async with store.write() as token:
        token.access_token = "new"
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, replace

REFRESH_THRESHOLD = 60.0


def compute_expires_at(expires_in: int | float) -> float:
    """Convert a provider's `expires_in` (seconds) into a monotonic deadline."""
    seconds_valid = max(float(expires_in) - REFRESH_THRESHOLD, 0.0)
    return time.monotonic() + seconds_valid


@dataclass
class Token:
    """Credential state held by a TokenStore."""

    access_token: str = ""
    refresh_token: str = ""
    expires_at: float | None = None


class TokenStore:
    """Access/refresh token holder with shared reads and exclusive writes."""

    def __init__(
        self,
        access_token: str = "",
        refresh_token: str = "",
        expires_at: float | None = None,
    ) -> None:
        self._token = Token(access_token, refresh_token, expires_at)
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writing = False
        self._writers_waiting = 0

    @asynccontextmanager
    async def read(self) -> AsyncIterator[Token]:
        """Hold the shared lock and yield a snapshot of the token."""
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writing and self._writers_waiting == 0
            )
            self._readers += 1
        try:
            yield replace(self._token)
        finally:
            async with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[Token]:
        """Hold the exclusive lock and yield the mutable token."""
        async with self._cond:
            self._writers_waiting += 1
            try:
                await self._cond.wait_for(
                    lambda: not self._writing and self._readers == 0
                )
            finally:
                self._writers_waiting -= 1
            self._writing = True
        try:
            yield self._token
        finally:
            async with self._cond:
                self._writing = False
                self._cond.notify_all()

    async def snapshot(self) -> Token:
        async with self.read() as token:
            return token

    async def access_token(self) -> str:
        async with self.read() as token:
            return token.access_token

    async def refresh_token(self) -> str:
        async with self.read() as token:
            return token.refresh_token

    async def set(
        self,
        access_token: str,
        refresh_token: str,
        expires_at: float | None,
    ) -> None:
        """Replace the whole credential state in one write."""
        async with self.write() as token:
            token.access_token = access_token
            token.refresh_token = refresh_token
            token.expires_at = expires_at

    async def set_expires_at(self, expires_at: float | None) -> None:
        async with self.write() as token:
            token.expires_at = expires_at

    async def expires_at(self) -> float | None:
        async with self.read() as token:
            return token.expires_at

    async def expires_in(self) -> float | None:
        """Seconds until expiry (negative once expired), or None if unknown."""
        expires_at = await self.expires_at()
        if expires_at is None:
            return None
        return expires_at - time.monotonic()

    async def is_expired(self) -> bool | None:
        """Whether the token is past its expiry, or None if the expiry is unknown."""
        expires_at = await self.expires_at()
        if expires_at is None:
            return None
        return expires_at <= time.monotonic()
