# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Invoke the compiler and capture its verbose version output."""

from __future__ import annotations

import logging

from .config import CompilerConfig
from .constants import DEFAULT_PRODUCT
from .errors import CompilerInvocationError, ConfigError, OutputParseError, ToolchainError
from .interfaces import VersionSource
from .parsers import VersionOutput, parse_version_output
from .process_utils import run_command

LOGGER = logging.getLogger(__name__)


class CompilerSource(VersionSource):
    """Run ``<compiler> --verbose --version`` for the configured compiler.

    The ``RUSTC`` override is tried first; when it cannot be executed the
    default ``rustc`` on ``PATH`` is used instead.
    """

    def __init__(self, config: CompilerConfig | None = None) -> None:
        self.config = config or CompilerConfig()

    @property
    def product(self) -> str:
        return self.config.product

    def invoke(self) -> str:
        """Return the raw output of the first compiler that runs successfully.

        Raises:
            CompilerInvocationError: If no candidate compiler produced output.
        """

        failure = CompilerInvocationError(self.config.default_compiler, "no compiler candidates configured")
        for compiler in self.config.candidates():
            try:
                return self._invoke_one(compiler)
            except CompilerInvocationError as exc:
                LOGGER.debug("compiler candidate rejected: %s", exc)
                failure = exc
        raise failure

    def _invoke_one(self, compiler: str) -> str:
        command = [compiler, *self.config.version_args]
        try:
            completed = run_command(command, timeout=self.config.timeout)
        except (OSError, ValueError) as exc:
            # UnicodeDecodeError is a ValueError.
            raise CompilerInvocationError(compiler, str(exc)) from exc
        if completed.returncode != 0:
            detail = (completed.stderr or "").strip() or f"exited with status {completed.returncode}"
            raise CompilerInvocationError(compiler, detail)
        if not completed.stdout or not completed.stdout.strip():
            raise CompilerInvocationError(compiler, "produced no output")
        return completed.stdout

    def inspect(self) -> VersionOutput:
        """Invoke the compiler and parse its output, keeping failure detail.

        Returns:
            VersionOutput: Parsed version and date strings.

        Raises:
            CompilerInvocationError: If the compiler could not be run.
            OutputParseError: If the output contains no version banner.
        """

        text = self.invoke()
        output = parse_version_output(text, product=self.product)
        if output is None or output.version is None:
            first_line = text.strip().splitlines()[0] if text.strip() else ""
            raise OutputParseError(f"No version found in compiler output: {first_line!r}")
        return output

    def __call__(self) -> str | None:
        try:
            return self.invoke()
        except ToolchainError as exc:
            LOGGER.debug("unable to read compiler version: %s", exc)
            return None


def load_config() -> CompilerConfig:
    """Return the environment configuration, falling back to defaults when invalid."""

    try:
        return CompilerConfig.from_env()
    except ConfigError as exc:
        LOGGER.warning("ignoring invalid environment configuration: %s", exc)
        return CompilerConfig()


def default_source() -> CompilerSource:
    """Return a :class:`CompilerSource` configured from the environment."""

    return CompilerSource(load_config())


def read_version_output(source: VersionSource | None = None) -> VersionOutput | None:
    """Invoke ``source`` once and parse the text it returns.

    Args:
        source: Collaborator returning verbose version text; defaults to
            :func:`default_source`.

    Returns:
        VersionOutput | None: Parsed strings or ``None`` when no text was produced.
    """

    resolved = default_source() if source is None else source
    product = getattr(resolved, "product", DEFAULT_PRODUCT)
    return parse_version_output(resolved(), product=product)


__all__ = ["CompilerSource", "default_source", "load_config", "read_version_output"]
