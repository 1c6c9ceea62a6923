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
"""Tests for the declarative caching decorators."""

from datetime import timedelta

import pytest

from flycache.cache.adapters.memory import InMemoryCache
from flycache.cache.decorators import cache_evict, cache_put, cacheable
from flycache.cache.simple_cache import SimpleCache
from flycache.kernel.exceptions import InvalidKeyException


class TestCacheable:
    async def test_caches_result(self):
        cache = SimpleCache(InMemoryCache())
        call_count = 0

        @cacheable(cache, key="user-{user_id}")
        async def get_user(user_id: str) -> dict:
            nonlocal call_count
            call_count += 1
            return {"id": user_id, "name": "Alice"}

        result1 = await get_user("123")
        result2 = await get_user("123")
        assert result1 == result2 == {"id": "123", "name": "Alice"}
        assert call_count == 1

    async def test_different_keys_not_shared(self):
        cache = SimpleCache(InMemoryCache())
        call_count = 0

        @cacheable(cache, key="user-{user_id}")
        async def get_user(user_id: str) -> dict:
            nonlocal call_count
            call_count += 1
            return {"id": user_id}

        await get_user("1")
        await get_user("2")
        assert call_count == 2

    async def test_cached_none_is_a_hit(self):
        cache = SimpleCache(InMemoryCache())
        call_count = 0

        @cacheable(cache, key="lookup-{name}")
        async def lookup(name: str) -> None:
            nonlocal call_count
            call_count += 1
            return None

        await lookup("x")
        await lookup("x")
        assert call_count == 1

    async def test_ttl_and_defaults_resolved(self):
        cache = SimpleCache(InMemoryCache())

        @cacheable(cache, key="item-{item_id}-{page}", ttl=timedelta(seconds=60))
        async def get_item(item_id: str, page: int = 1) -> str:
            return f"item-{item_id}"

        await get_item("abc")
        assert await cache.get("item-abc-1") == "item-abc"

    async def test_zero_ttl_never_stores(self):
        cache = SimpleCache(InMemoryCache())

        @cacheable(cache, key="item-{item_id}", ttl=0)
        async def get_item(item_id: str) -> str:
            return "value"

        assert await get_item("abc") == "value"
        assert await cache.has("item-abc") is False

    async def test_reserved_character_in_key_template(self):
        cache = SimpleCache(InMemoryCache())

        @cacheable(cache, key="user:{user_id}")
        async def get_user(user_id: str) -> str:
            return user_id

        with pytest.raises(InvalidKeyException):
            await get_user("1")


class TestCachePut:
    async def test_always_executes_and_refreshes(self):
        cache = SimpleCache(InMemoryCache())
        call_count = 0

        @cache_put(cache, key="user-{user_id}")
        async def update_user(user_id: str, name: str) -> dict:
            nonlocal call_count
            call_count += 1
            return {"id": user_id, "name": name}

        await update_user("1", "Alice")
        await update_user("1", "Bob")
        assert call_count == 2
        assert await cache.get("user-1") == {"id": "1", "name": "Bob"}


class TestCacheEvict:
    async def test_evicts_key_after_method(self):
        cache = SimpleCache(InMemoryCache())
        await cache.set("user-42", {"id": "42"})

        @cache_evict(cache, key="user-{user_id}")
        async def delete_user(user_id: str) -> None:
            pass

        await delete_user("42")
        assert await cache.has("user-42") is False

    async def test_evict_all_clears_cache(self):
        cache = SimpleCache(InMemoryCache())
        await cache.set_multiple({"user-1": 1, "user-2": 2})

        @cache_evict(cache, all_entries=True)
        async def clear_all() -> str:
            return "cleared"

        assert await clear_all() == "cleared"
        assert await cache.get_multiple(["user-1", "user-2"], "gone") == {"user-1": "gone", "user-2": "gone"}
