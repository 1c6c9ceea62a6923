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
"""Redis-backed cache backend."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from typing import Any

import structlog

from flycache.cache.types import MISSING

logger = structlog.get_logger("flycache.cache.redis")

_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


class RedisCacheAdapter:
    """Backend that delegates to a ``redis.asyncio.Redis``-like client.

    Values are JSON-serialized before storage. When *prefix* is given every
    key is stored as ``"<prefix>:<key>"`` and ``clear()`` removes only the
    prefixed keys; without a prefix ``clear()`` flushes the whole database.
    Cache keys never contain ``:``, so the separator is unambiguous.
    """

    def __init__(self, client: Any, prefix: str = "") -> None:
        self._client = client
        self._prefix = prefix

    def _prefix_pattern(self) -> str:
        """SCAN pattern matching exactly this prefix, with glob characters escaped."""
        return _GLOB_SPECIAL.sub(r"\\\1", self._prefix) + ":*"

    def _storage_key(self, key: str) -> str:
        return f"{self._prefix}:{key}" if self._prefix else key

    def _decode(self, key: str, raw: Any) -> Any:
        if raw is None:
            return MISSING
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            logger.warning("cache_deserialize_failed", key=key)
            return MISSING

    async def get(self, key: str) -> Any:
        raw = await self._client.get(self._storage_key(key))
        return self._decode(key, raw)

    async def set(self, key: str, value: Any, ttl: int | None) -> bool:
        raw = json.dumps(value)
        result = await self._client.set(self._storage_key(key), raw.encode(), ex=ttl)
        return bool(result)

    async def delete(self, key: str) -> bool:
        """Remove *key*; deleting an absent key still succeeds."""
        await self._client.delete(self._storage_key(key))
        return True

    async def has(self, key: str) -> bool:
        count = await self._client.exists(self._storage_key(key))
        return bool(count > 0)

    async def clear(self) -> bool:
        if not self._prefix:
            await self._client.flushdb()
            return True
        batch: list[Any] = []
        head = len(self._prefix) + 1
        async for stored in self._client.scan_iter(match=self._prefix_pattern()):
            name = stored.decode() if isinstance(stored, bytes) else stored
            # A nested prefix ("ns:sub:key") belongs to another namespace.
            if ":" not in name[head:]:
                batch.append(stored)
        if batch:
            await self._client.delete(*batch)
        return True

    async def get_many(self, keys: Sequence[str]) -> dict[str, Any]:
        """Fetch *keys* with one MGET; absent keys are left out."""
        raws = await self._client.mget([self._storage_key(key) for key in keys])
        results: dict[str, Any] = {}
        for key, raw in zip(keys, raws):
            value = self._decode(key, raw)
            if value is not MISSING:
                results[key] = value
        return results

    async def set_many(self, values: Mapping[str, Any], ttl: int | None) -> bool:
        """Store every entry in one pipeline so all share the same TTL."""
        async with self._client.pipeline(transaction=False) as pipe:
            for key, value in values.items():
                pipe.set(self._storage_key(key), json.dumps(value).encode(), ex=ttl)
            replies = await pipe.execute()
        return all(bool(reply) for reply in replies)

    async def delete_many(self, keys: Sequence[str]) -> bool:
        await self._client.delete(*(self._storage_key(key) for key in keys))
        return True

    async def get_stats(self) -> dict[str, Any]:
        """Return cache statistics from Redis."""
        info = await self._client.info("keyspace")
        dbsize = await self._client.dbsize()
        return {"size": dbsize, "type": "redis", "info": info}

    async def start(self) -> None:
        """Validate connectivity by pinging Redis."""
        await self._client.ping()

    async def stop(self) -> None:
        """Close the underlying Redis connection."""
        await self._client.aclose()
