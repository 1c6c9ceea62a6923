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
"""Unified exception hierarchy for flycache.

All library exceptions inherit from FlyCacheException, so callers can catch
every flycache error with one handler or target a specific subclass.

Categories:
- BusinessException: caller-side contract violations (bad keys, bad TTLs)
- InfrastructureException: configuration and backend wiring failures
"""

from __future__ import annotations

from typing import Any


# =============================================================================
# Base Exception
# =============================================================================


class FlyCacheException(Exception):
    """Base exception for all flycache errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CACHE_INVALID_KEY").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


def describe_type(value: Any) -> str:
    """Name the type of *value* for error messages."""
    return type(value).__qualname__


# =============================================================================
# Business Exceptions
# =============================================================================


class BusinessException(FlyCacheException):
    """Contract violations raised before any backend is touched."""


class ValidationException(BusinessException):
    """Input validation failures."""


class InvalidArgumentException(ValidationException):
    """Argument has the wrong shape (e.g. keys that are not an iterable)."""

    default_code = "CACHE_INVALID_ARGUMENT"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message, code=code or self.default_code, context=context)


class InvalidKeyException(InvalidArgumentException):
    """Cache key breaks the key rules (type, length, reserved characters)."""

    default_code = "CACHE_INVALID_KEY"


class InvalidTtlException(InvalidArgumentException):
    """TTL is neither None, an integer nor a timedelta."""

    default_code = "CACHE_INVALID_TTL"


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(FlyCacheException):
    """Infrastructure failures: configuration, backend wiring."""


class CacheConfigurationException(InfrastructureException):
    """The cache subsystem could not be configured."""

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__(
            message=f"Failed to configure cache with provider '{provider}': {reason}",
            code="CACHE_CONFIGURATION",
            context={"provider": provider},
        )
