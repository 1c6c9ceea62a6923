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
"""Declarative caching decorators for async functions."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from flycache.cache.simple_cache import SimpleCache, TtlInput
from flycache.cache.types import MISSING

F = TypeVar("F", bound=Callable[..., Any])


def _resolve_key(func: Callable[..., Any], template: str, args: tuple, kwargs: dict) -> str:
    bound = inspect.signature(func).bind(*args, **kwargs)
    bound.apply_defaults()
    return template.format(**bound.arguments)


def cacheable(cache: SimpleCache, key: str, ttl: TtlInput = None) -> Callable[[F], F]:
    """Cache the return value of an async function, skipping it on a hit.

    The `key` parameter supports format-string interpolation with function
    argument names: `key="user-{user_id}"` expands `{user_id}` from the
    call. The expanded key must be a valid cache key; note that `:` is
    reserved. A cached ``None`` counts as a hit.

    Args:
        cache: Facade to read and write through.
        key: Key template with {param} placeholders.
        ttl: Time-to-live for cached entries; the cache default when omitted.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            resolved_key = _resolve_key(func, key, args, kwargs)

            cached = await cache.get(resolved_key, MISSING)
            if cached is not MISSING:
                return cached

            result = await func(*args, **kwargs)
            await cache.set(resolved_key, result, ttl)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


def cache_put(cache: SimpleCache, key: str, ttl: TtlInput = None) -> Callable[[F], F]:
    """Always execute the function and cache its result.

    Unlike :func:`cacheable`, the decorated function is always invoked,
    which suits update operations that should refresh the cached value.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = await func(*args, **kwargs)
            await cache.set(_resolve_key(func, key, args, kwargs), result, ttl)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


def cache_evict(cache: SimpleCache, key: str = "", all_entries: bool = False) -> Callable[[F], F]:
    """Evict a cache entry (or clear the cache) after the function runs.

    Args:
        cache: Facade to evict from.
        key: Key template with {param} placeholders. Ignored when *all_entries* is ``True``.
        all_entries: When ``True``, clear the cache after execution.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = await func(*args, **kwargs)
            if all_entries:
                await cache.clear()
            else:
                await cache.delete(_resolve_key(func, key, args, kwargs))
            return result

        return wrapper  # type: ignore[return-value]

    return decorator
