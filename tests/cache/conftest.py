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
"""Shared backend doubles for the cache facade tests."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import pytest

from flycache.cache.types import MISSING


class RecordingBackend:
    """Dict backend that records every primitive call.

    Keys listed in *failing* make ``set`` and ``delete`` report failure.
    Provides only the required primitives, so the facade uses its fallbacks.
    """

    def __init__(self, failing: Sequence[str] = ()) -> None:
        self.store: dict[str, Any] = {}
        self.calls: list[tuple] = []
        self.failing = set(failing)

    async def get(self, key: str) -> Any:
        self.calls.append(("get", key))
        return self.store.get(key, MISSING)

    async def set(self, key: str, value: Any, ttl: int | None) -> bool:
        self.calls.append(("set", key, ttl))
        if key in self.failing:
            return False
        self.store[key] = value
        return True

    async def delete(self, key: str) -> bool:
        self.calls.append(("delete", key))
        if key in self.failing:
            return False
        self.store.pop(key, None)
        return True

    async def has(self, key: str) -> bool:
        self.calls.append(("has", key))
        return key in self.store

    async def clear(self) -> bool:
        self.calls.append(("clear",))
        self.store.clear()
        return True

    def operations(self) -> list[str]:
        return [call[0] for call in self.calls]


class BatchRecordingBackend(RecordingBackend):
    """RecordingBackend that also offers the native batch primitives."""

    async def get_many(self, keys: Sequence[str]) -> dict[str, Any]:
        self.calls.append(("get_many", tuple(keys)))
        return {key: self.store[key] for key in keys if key in self.store}

    async def set_many(self, values: Mapping[str, Any], ttl: int | None) -> bool:
        self.calls.append(("set_many", tuple(values), ttl))
        self.store.update(values)
        return True

    async def delete_many(self, keys: Sequence[str]) -> bool:
        self.calls.append(("delete_many", tuple(keys)))
        for key in keys:
            self.store.pop(key, None)
        return True


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def batch_backend() -> BatchRecordingBackend:
    return BatchRecordingBackend()


@pytest.fixture
def failing_backend() -> RecordingBackend:
    return RecordingBackend(failing=["x"])
