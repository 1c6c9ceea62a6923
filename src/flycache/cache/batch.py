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
"""Batch operations expressed in terms of the required backend primitives.

Used for any backend that does not provide the matching native batch
primitive from :class:`~flycache.cache.ports.outbound.BatchCacheBackend`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from flycache.cache.ports.outbound import CacheBackend
from flycache.cache.types import MISSING


async def get_many(backend: CacheBackend, keys: Sequence[str]) -> dict[str, Any]:
    """Return the present subset of *keys*, in request order."""
    results: dict[str, Any] = {}
    for key in keys:
        if await backend.has(key):
            value = await backend.get(key)
            # Expired between has() and get().
            if value is not MISSING:
                results[key] = value
    return results


async def set_many(backend: CacheBackend, values: Mapping[str, Any], ttl: int | None) -> bool:
    """Set every entry; one failure fails the batch but never stops it."""
    success = True
    for key, value in values.items():
        success = await backend.set(key, value, ttl) and success
    return success


async def delete_many(backend: CacheBackend, keys: Sequence[str]) -> bool:
    """Delete every key; one failure fails the batch but never stops it."""
    success = True
    for key in keys:
        success = await backend.delete(key) and success
    return success
