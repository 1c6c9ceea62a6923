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
"""flycache Cache — validating facade over pluggable key-value backends."""

from flycache.cache.adapters.memory import InMemoryCache
from flycache.cache.adapters.redis import RedisCacheAdapter
from flycache.cache.auto_configuration import CacheAutoConfiguration
from flycache.cache.decorators import cache_evict, cache_put, cacheable
from flycache.cache.keys import validate_key, validate_keys
from flycache.cache.ports.outbound import BatchCacheBackend, CacheBackend
from flycache.cache.simple_cache import SimpleCache
from flycache.cache.ttl import normalize_ttl
from flycache.cache.types import MISSING, CacheSettings

__all__ = [
    "MISSING",
    "BatchCacheBackend",
    "CacheAutoConfiguration",
    "CacheBackend",
    "CacheSettings",
    "InMemoryCache",
    "RedisCacheAdapter",
    "SimpleCache",
    "cache_evict",
    "cache_put",
    "cacheable",
    "normalize_ttl",
    "validate_key",
    "validate_keys",
]
