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
"""Cache auto-configuration with provider detection."""

from __future__ import annotations

import importlib

import structlog

from flycache.cache.adapters.memory import InMemoryCache
from flycache.cache.ports.outbound import CacheBackend
from flycache.cache.simple_cache import SimpleCache
from flycache.config.properties.cache import CacheProperties
from flycache.core.config import Config
from flycache.kernel.exceptions import CacheConfigurationException
from flycache.logging.port import LoggingPort

logger = structlog.get_logger("flycache.cache.auto_configuration")


class CacheAutoConfiguration:
    """Builds a SimpleCache over the best available backend.

    ``flycache.cache.provider`` selects the backend: ``memory``, ``redis``,
    or ``auto`` (Redis when ``redis.asyncio`` is importable, else memory).
    When a *logging* port is given, ``create_cache`` configures it from the
    same ``Config`` before building the backend.
    """

    def __init__(self, logging: LoggingPort | None = None) -> None:
        self._logging = logging

    @staticmethod
    def is_available(module_name: str) -> bool:
        """Check if a Python package is importable."""
        try:
            importlib.import_module(module_name)
            return True
        except ImportError:
            return False

    @classmethod
    def detect_provider(cls) -> str:
        if cls.is_available("redis.asyncio"):
            return "redis"
        return "memory"

    def create_backend(self, props: CacheProperties) -> CacheBackend:
        """Instantiate the backend named by *props*."""
        provider = props.provider if props.provider != "auto" else self.detect_provider()

        if provider == "redis":
            if not self.is_available("redis.asyncio"):
                raise CacheConfigurationException("redis", "package 'redis' is not installed")

            import redis.asyncio as aioredis

            from flycache.cache.adapters.redis import RedisCacheAdapter

            client = aioredis.from_url(props.redis.url)
            logger.info("cache_backend_configured", provider="redis", url=props.redis.url)
            return RedisCacheAdapter(client=client, prefix=props.namespace)

        logger.info("cache_backend_configured", provider="memory")
        return InMemoryCache()

    def create_cache(self, config: Config) -> SimpleCache:
        """Bind ``flycache.cache`` and return a facade over the chosen backend."""
        if self._logging is not None:
            self._logging.configure(config)
        try:
            props = config.bind(CacheProperties)
        except ValueError as exc:
            raise CacheConfigurationException(str(config.get("flycache.cache.provider", "auto")), str(exc)) from exc
        backend = self.create_backend(props)
        return SimpleCache(backend, namespace=props.namespace, default_lifetime=props.default_lifetime)
