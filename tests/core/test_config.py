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
"""Tests for the configuration system."""

from dataclasses import dataclass
from pathlib import Path

import pytest
from pydantic import BaseModel

from flycache.core.config import Config, config_properties


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"app": {"name": "test-service", "port": 8080}})
        assert config.get("app.name") == "test-service"
        assert config.get("app.port") == 8080

    def test_get_with_default(self):
        assert Config({}).get("missing.key", "default") == "default"

    def test_load_from_yaml_file(self, tmp_path: Path):
        config_file = tmp_path / "flycache.yaml"
        config_file.write_text("flycache:\n  cache:\n    namespace: users\n")
        config = Config.from_file(config_file)
        assert config.get("flycache.cache.namespace") == "users"
        assert config.loaded_sources[-1] == str(config_file)

    def test_load_from_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "flycache.toml"
        config_file.write_text('[flycache.cache]\nprovider = "memory"\n')
        assert Config.from_file(config_file).get("flycache.cache.provider") == "memory"

    def test_framework_defaults_loaded(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.get("flycache.cache.provider") == "auto"
        assert config.get("flycache.cache.redis.url") == "redis://localhost:6379/0"
        assert config.get("flycache.logging.format") == "console"

    def test_file_overrides_defaults(self, tmp_path: Path):
        config_file = tmp_path / "flycache.yaml"
        config_file.write_text("flycache:\n  cache:\n    redis:\n      url: redis://cache:6379/1\n")
        config = Config.from_file(config_file)
        assert config.get("flycache.cache.redis.url") == "redis://cache:6379/1"
        assert config.get("flycache.cache.provider") == "auto"

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("FLYCACHE_CACHE_NAMESPACE", "env-ns")
        config = Config({"flycache": {"cache": {"namespace": "file-ns"}}})
        assert config.get("flycache.cache.namespace") == "env-ns"

    def test_env_key_mapping(self):
        assert Config.env_key("flycache.cache.default_lifetime") == "FLYCACHE_CACHE_DEFAULT_LIFETIME"

    def test_get_section(self):
        config = Config({"flycache": {"cache": {"namespace": "a", "redis": {"url": "u"}}}})
        assert config.get_section("flycache.cache") == {"namespace": "a", "redis": {"url": "u"}}
        assert config.get_section("flycache.missing") == {}


class TestPlaceholderResolution:
    def test_resolve_env_var(self, monkeypatch):
        monkeypatch.setenv("REDIS_HOST", "cache-1")
        config = Config({"url": "redis://${REDIS_HOST}:6379/0"})
        assert config.get("url") == "redis://cache-1:6379/0"

    def test_resolve_config_reference(self):
        config = Config({"app": {"name": "orders"}, "ns": "${app.name}"})
        assert config.get("ns") == "orders"

    def test_resolve_with_default(self):
        config = Config({"key": "${MISSING_VAR_XYZ:fallback_value}"})
        assert config.get("key") == "fallback_value"

    def test_unresolvable_placeholder_raises(self):
        config = Config({"key": "${MISSING_VAR_XYZ}"})
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            config.get("key")


class TestConfigBinding:
    def test_bind_to_dataclass(self):
        @config_properties(prefix="database")
        @dataclass
        class DatabaseConfig:
            url: str = "sqlite:///test.db"
            pool_size: int = 5

        config = Config({"database": {"url": "postgresql://localhost/mydb", "pool_size": "20"}})
        db_config = config.bind(DatabaseConfig)
        assert db_config.url == "postgresql://localhost/mydb"
        assert db_config.pool_size == 20

    def test_bind_to_pydantic_model(self):
        @config_properties(prefix="service")
        class ServiceConfig(BaseModel):
            timeout: int = 30

        assert Config({"service": {"timeout": "45"}}).bind(ServiceConfig).timeout == 45

    def test_bind_pydantic_validation_error(self):
        @config_properties(prefix="service")
        class ServiceConfig(BaseModel):
            timeout: int = 30

        with pytest.raises(ValueError, match="Configuration validation failed"):
            Config({"service": {"timeout": "soon"}}).bind(ServiceConfig)

    def test_bind_undecorated_class(self):
        @dataclass
        class Plain:
            x: int = 1

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)
