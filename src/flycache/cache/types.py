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
"""Shared cache types: the absence marker and the facade settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


class _Missing:
    """Marker a backend returns from ``get`` when a key is absent."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


@dataclass(frozen=True)
class CacheSettings:
    """Construction-time configuration of a SimpleCache.

    ``default_lifetime`` is already normalized to whole seconds, or ``None``
    for "no expiry".
    """

    namespace: str = ""
    default_lifetime: int | None = None
