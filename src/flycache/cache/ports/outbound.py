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
"""Backend ports the cache facade delegates to."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheBackend(Protocol):
    """Storage primitives every backend must provide.

    Keys reaching a backend are always valid. ``get`` returns
    :data:`flycache.cache.types.MISSING` for an absent key. ``set`` is only
    ever called with a positive ``ttl`` or ``None`` (no expiry).
    """

    async def get(self, key: str) -> Any: ...

    async def set(self, key: str, value: Any, ttl: int | None) -> bool: ...

    async def delete(self, key: str) -> bool: ...

    async def has(self, key: str) -> bool: ...

    async def clear(self) -> bool: ...


@runtime_checkable
class BatchCacheBackend(Protocol):
    """Optional native batch primitives.

    Each is optional on its own: a batch operation calls the matching
    method when the backend has it and otherwise falls back to the per-key
    primitives, so a backend may provide only ``get_many``, for example.
    """

    async def get_many(self, keys: Sequence[str]) -> Mapping[str, Any]:
        """Return the subset of *keys* that are present."""
        ...

    async def set_many(self, values: Mapping[str, Any], ttl: int | None) -> bool: ...

    async def delete_many(self, keys: Sequence[str]) -> bool: ...
