# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model for locating and invoking the compiler."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import (
    COMPILER_ENV,
    DEFAULT_COMPILER,
    DEFAULT_PRODUCT,
    ENCODED_RUSTFLAGS_ENV,
    RUSTFLAGS_ENV,
    TIMEOUT_ENV,
    VERBOSE_VERSION_ARGS,
)
from .errors import ConfigError


class CompilerConfig(BaseModel):
    """Settings describing which compiler to query and how."""

    model_config = ConfigDict(frozen=True)

    compiler: str | None = None
    default_compiler: str = DEFAULT_COMPILER
    product: str = DEFAULT_PRODUCT
    version_args: tuple[str, ...] = VERBOSE_VERSION_ARGS
    timeout: float | None = Field(default=None, gt=0)
    rustflags: str | None = None
    encoded_rustflags: str | None = None

    @field_validator("compiler", "rustflags", "encoded_rustflags", mode="before")
    @classmethod
    def _blank_as_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None, **overrides: object) -> CompilerConfig:
        """Build a configuration from environment variables.

        Args:
            env: Mapping consulted instead of :data:`os.environ`.
            **overrides: Field values taking precedence over the environment.

        Returns:
            CompilerConfig: Validated configuration.

        Raises:
            ConfigError: If an environment value cannot be validated.
        """

        environment = os.environ if env is None else env
        payload: dict[str, object] = {
            "compiler": environment.get(COMPILER_ENV),
            "timeout": environment.get(TIMEOUT_ENV) or None,
            "rustflags": environment.get(RUSTFLAGS_ENV),
            "encoded_rustflags": environment.get(ENCODED_RUSTFLAGS_ENV),
        }
        payload.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise ConfigError(f"Invalid compiler configuration: {exc}") from exc

    def candidates(self) -> tuple[str, ...]:
        """Return compiler executables to try, override first."""

        if self.compiler and self.compiler != self.default_compiler:
            return (self.compiler, self.default_compiler)
        return (self.default_compiler,)


__all__ = ["CompilerConfig"]
