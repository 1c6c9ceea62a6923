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
"""Cache subsystem configuration properties."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from flycache.core.config import config_properties


class RedisProperties(BaseModel):
    """Redis connection settings (flycache.cache.redis.*)."""

    url: str = "redis://localhost:6379/0"


@config_properties(prefix="flycache.cache")
class CacheProperties(BaseModel):
    """Configuration for the cache facade (flycache.cache.*)."""

    provider: Literal["auto", "memory", "redis"] = "auto"
    namespace: str = ""
    default_lifetime: int | None = None
    redis: RedisProperties = Field(default_factory=RedisProperties)
