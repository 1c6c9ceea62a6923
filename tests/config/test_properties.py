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
"""Tests for @config_properties binding per subsystem."""

import pytest

from flycache.config.properties import CacheProperties, LoggingProperties
from flycache.core.config import Config


class TestCacheProperties:
    def test_bind_defaults(self):
        props = Config({"flycache": {"cache": {}}}).bind(CacheProperties)
        assert props.provider == "auto"
        assert props.namespace == ""
        assert props.default_lifetime is None
        assert props.redis.url == "redis://localhost:6379/0"

    def test_bind_custom_values(self):
        config = Config(
            {
                "flycache": {
                    "cache": {
                        "provider": "redis",
                        "namespace": "users",
                        "default_lifetime": 600,
                        "redis": {"url": "redis://cache:6379/2"},
                    }
                }
            }
        )
        props = config.bind(CacheProperties)
        assert props.provider == "redis"
        assert props.namespace == "users"
        assert props.default_lifetime == 600
        assert props.redis.url == "redis://cache:6379/2"

    def test_default_lifetime_from_env(self, monkeypatch):
        monkeypatch.setenv("FLYCACHE_CACHE_DEFAULT_LIFETIME", "45")
        config = Config({"flycache": {"cache": {"default_lifetime": None}}})
        assert config.bind(CacheProperties).default_lifetime == 45

    def test_rejects_unknown_provider(self):
        with pytest.raises(ValueError, match="CacheProperties"):
            Config({"flycache": {"cache": {"provider": "memcached"}}}).bind(CacheProperties)


class TestLoggingProperties:
    def test_bind_defaults(self):
        props = Config({"flycache": {"logging": {}}}).bind(LoggingProperties)
        assert props.format == "console"
        assert props.level == {"root": "INFO"}

    def test_bind_json_format(self):
        props = Config({"flycache": {"logging": {"format": "json"}}}).bind(LoggingProperties)
        assert props.format == "json"
