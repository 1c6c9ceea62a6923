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
"""Cache key validation."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from flycache.kernel.exceptions import InvalidKeyException, describe_type

MAX_KEY_LENGTH = 64
RESERVED_CHARACTERS = frozenset("{}()/\\@:")


def validate_key(key: Any) -> str:
    """Return *key* unchanged if it is a valid cache key.

    Rules are checked in order and the first failure wins: the key must be
    a ``str``, at least one character long, at most 64 characters long,
    and free of ``{}()/\\@:``.

    Raises:
        InvalidKeyException: The key breaks one of the rules.
    """
    if not isinstance(key, str):
        raise InvalidKeyException(
            f'Cache key must be string, "{describe_type(key)}" given',
            context={"type": describe_type(key)},
        )
    if not key:
        raise InvalidKeyException("Cache key length must be greater than zero")
    if len(key) > MAX_KEY_LENGTH:
        raise InvalidKeyException(
            f"Cache key length must be less than {MAX_KEY_LENGTH + 1} characters, key had {len(key)} characters",
            context={"key": key, "length": len(key)},
        )
    if not RESERVED_CHARACTERS.isdisjoint(key):
        raise InvalidKeyException(
            f'Cache key "{key}" contains reserved characters {{}}()/\\@:',
            context={"key": key},
        )
    return key


def validate_keys(keys: Iterable[Any]) -> None:
    """Validate every key; the first invalid one aborts the whole batch."""
    for key in keys:
        validate_key(key)
