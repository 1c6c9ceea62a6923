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
"""TTL normalization to whole seconds."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from flycache.kernel.exceptions import InvalidTtlException, describe_type

_ONE_SECOND = timedelta(seconds=1)


def normalize_ttl(ttl: Any, default_lifetime: int | None = None, use_default: bool = True) -> int | None:
    """Convert a TTL input to signed integer seconds, or ``None`` for no expiry.

    * ``None`` resolves to *default_lifetime* when *use_default* is true,
      otherwise to ``None``.
    * An ``int`` is returned unchanged; zero and negative values are left
      for the caller to interpret.
    * A ``timedelta`` is floored to whole seconds, so ``timedelta(seconds=5)``
      becomes ``5`` and ``timedelta(seconds=-1.5)`` becomes ``-2``. Any
      duration ``timedelta`` can represent converts.

    Raises:
        InvalidTtlException: *ttl* is of any other type (``bool`` included).
    """
    if ttl is None:
        return default_lifetime if use_default else None

    if isinstance(ttl, int) and not isinstance(ttl, bool):
        return ttl

    if isinstance(ttl, timedelta):
        return ttl // _ONE_SECOND

    raise InvalidTtlException(
        f'Expiration date must be an integer, a timedelta or None, "{describe_type(ttl)}" given',
        context={"type": describe_type(ttl)},
    )
