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
"""SimpleCache — the validating facade every backend sits behind."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any

import structlog

from flycache.cache import batch
from flycache.cache.keys import validate_key, validate_keys
from flycache.cache.ports.outbound import CacheBackend
from flycache.cache.ttl import normalize_ttl
from flycache.cache.types import MISSING, CacheSettings
from flycache.config.properties.cache import CacheProperties
from flycache.core.config import Config
from flycache.kernel.exceptions import InvalidArgumentException, describe_type

logger = structlog.get_logger("flycache.cache")

TtlInput = int | timedelta | None


def _materialize_keys(keys: Any) -> list[str]:
    """Turn a batch of keys into a list, rejecting non-iterables and bare strings."""
    if isinstance(keys, (str, bytes)) or not isinstance(keys, Iterable):
        raise InvalidArgumentException(
            f'Cache keys must be an iterable of strings, "{describe_type(keys)}" given',
            context={"type": describe_type(keys)},
        )
    return list(keys)


class SimpleCache:
    """Key-validating, TTL-normalizing facade over a :class:`CacheBackend`.

    Every operation validates its keys before the backend is touched, so an
    invalid key anywhere in a batch aborts the whole call. A TTL that
    resolves to zero or less means "remove now": ``set`` and
    ``set_multiple`` then delete instead of storing.

    Batch operations use the backend's ``get_many`` / ``set_many`` /
    ``delete_many`` when it has them and fall back to the per-key
    primitives otherwise.

    Args:
        backend: Storage driver implementing the required primitives.
        namespace: Scope label for this facade; fixed for its lifetime.
        default_lifetime: TTL applied when a write passes none. Accepts
            seconds, a ``timedelta``, or ``None`` for no expiry.
    """

    def __init__(
        self,
        backend: CacheBackend,
        namespace: str = "",
        default_lifetime: TtlInput = None,
    ) -> None:
        self._backend = backend
        self._settings = CacheSettings(
            namespace=str(namespace),
            default_lifetime=normalize_ttl(default_lifetime, use_default=False),
        )

    @classmethod
    def from_config(cls, backend: CacheBackend, config: Config) -> SimpleCache:
        """Build a facade from the ``flycache.cache`` configuration section."""
        props = config.bind(CacheProperties)
        return cls(backend, namespace=props.namespace, default_lifetime=props.default_lifetime)

    @property
    def backend(self) -> CacheBackend:
        return self._backend

    @property
    def settings(self) -> CacheSettings:
        return self._settings

    @property
    def namespace(self) -> str:
        return self._settings.namespace

    @property
    def default_lifetime(self) -> int | None:
        return self._settings.default_lifetime

    def _resolve_ttl(self, ttl: TtlInput) -> int | None:
        return normalize_ttl(ttl, self._settings.default_lifetime)

    # ------------------------------------------------------------------
    # Single-item operations
    # ------------------------------------------------------------------

    async def get(self, key: str, default: Any = None) -> Any:
        """Return the cached value for *key*, or *default* when absent."""
        validate_key(key)
        value = await self._backend.get(key)
        return default if value is MISSING else value

    async def set(self, key: str, value: Any, ttl: TtlInput = None) -> bool:
        """Store *value* under *key*; a TTL of zero or less deletes *key*."""
        validate_key(key)
        seconds = self._resolve_ttl(ttl)
        if seconds is not None and seconds <= 0:
            logger.debug("cache_set_as_delete", namespace=self.namespace, key=key, ttl=seconds)
            return await self._backend.delete(key)
        return await self._backend.set(key, value, seconds)

    async def delete(self, key: str) -> bool:
        validate_key(key)
        return await self._backend.delete(key)

    async def has(self, key: str) -> bool:
        validate_key(key)
        return await self._backend.has(key)

    async def clear(self) -> bool:
        """Clear the backend. Whether that is namespace-wide or global is up to the driver."""
        return await self._backend.clear()

    # ------------------------------------------------------------------
    # Batch operations
    # ------------------------------------------------------------------

    async def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Return a value for every requested key, in request order.

        Keys the backend does not hold map to *default*.
        """
        key_list = _materialize_keys(keys)
        if not key_list:
            return {}

        validate_keys(key_list)

        native = getattr(self._backend, "get_many", None)
        if native is not None:
            found = await native(key_list)
        else:
            logger.debug("cache_batch_fallback", operation="get_many", size=len(key_list))
            found = await batch.get_many(self._backend, key_list)

        results = {key: found[key] if key in found else default for key in key_list}
        if len(found) < len(results):
            logger.debug(
                "cache_partial_hit",
                namespace=self.namespace,
                requested=len(results),
                found=len(found),
            )
        return results

    async def set_multiple(self, values: Mapping[str, Any], ttl: TtlInput = None) -> bool:
        """Store every entry of *values* with one shared TTL.

        A TTL of zero or less deletes all the keys instead. With the per-key
        fallback every entry is attempted and the result is ``True`` only if
        all of them succeeded.
        """
        if not isinstance(values, Mapping):
            raise InvalidArgumentException(
                f'Cache values must be a mapping, "{describe_type(values)}" given',
                context={"type": describe_type(values)},
            )
        entries = dict(values)
        if not entries:
            return True

        keys = list(entries)
        validate_keys(keys)

        seconds = self._resolve_ttl(ttl)
        if seconds is not None and seconds <= 0:
            logger.debug("cache_set_as_delete", namespace=self.namespace, keys=len(keys), ttl=seconds)
            return await self._delete_many(keys)

        native = getattr(self._backend, "set_many", None)
        if native is not None:
            return await native(entries, seconds)
        logger.debug("cache_batch_fallback", operation="set_many", size=len(entries))
        return await batch.set_many(self._backend, entries, seconds)

    async def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Delete every key; ``True`` only if every delete succeeded."""
        key_list = _materialize_keys(keys)
        if not key_list:
            return True

        validate_keys(key_list)
        return await self._delete_many(key_list)

    async def _delete_many(self, keys: list[str]) -> bool:
        native = getattr(self._backend, "delete_many", None)
        if native is not None:
            return await native(keys)
        logger.debug("cache_batch_fallback", operation="delete_many", size=len(keys))
        return await batch.delete_many(self._backend, keys)
