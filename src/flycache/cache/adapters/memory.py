# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""In-process cache backend."""

from __future__ import annotations

import time
from collections.abc import Mapping, Sequence
from typing import Any

from flycache.cache.types import MISSING


class InMemoryCache:
    """Dict-backed backend with monotonic-clock expiry.

    Suitable for development, testing, and single-process applications.
    Implements the native batch primitives as well. ``clear()`` empties
    this instance's whole store, regardless of which facade namespace
    wrote the entries.
    """

    def __init__(self) -> None:
        self._store: dict[str, tuple[Any, float | None]] = {}

    def _live_entry(self, key: str) -> tuple[Any, float | None] | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        _, expires_at = entry
        if expires_at is not None and time.monotonic() >= expires_at:
            del self._store[key]
            return None
        return entry

    async def get(self, key: str) -> Any:
        """Return the stored value, or MISSING if absent or expired."""
        entry = self._live_entry(key)
        return MISSING if entry is None else entry[0]

    async def set(self, key: str, value: Any, ttl: int | None) -> bool:
        expires_at = None if ttl is None else time.monotonic() + ttl
        self._store[key] = (value, expires_at)
        return True

    async def delete(self, key: str) -> bool:
        """Remove *key*. Succeeds whether or not the key existed."""
        self._store.pop(key, None)
        return True

    async def has(self, key: str) -> bool:
        return self._live_entry(key) is not None

    async def clear(self) -> bool:
        self._store.clear()
        return True

    async def get_many(self, keys: Sequence[str]) -> dict[str, Any]:
        results: dict[str, Any] = {}
        for key in keys:
            entry = self._live_entry(key)
            if entry is not None:
                results[key] = entry[0]
        return results

    async def set_many(self, values: Mapping[str, Any], ttl: int | None) -> bool:
        expires_at = None if ttl is None else time.monotonic() + ttl
        for key, value in values.items():
            self._store[key] = (value, expires_at)
        return True

    async def delete_many(self, keys: Sequence[str]) -> bool:
        for key in keys:
            self._store.pop(key, None)
        return True

    def get_stats(self) -> dict[str, Any]:
        """Return entry count (expired entries excluded) and backend type."""
        return {"size": len(self.get_keys()), "type": "memory"}

    def get_keys(self) -> list[str]:
        """Return the keys of all live entries."""
        return [key for key in list(self._store) if self._live_entry(key) is not None]
