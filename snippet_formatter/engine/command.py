"""
Command engine — runs an external whole-file formatter (by default
palantir-java-format) as a subprocess, source on stdin, result on stdout.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from typing import Sequence

from ..editing.ranges import Range
from ..editing.whitespace_diff import Replacement
from ..errors import FormatterError
from .base import FormattingEngine

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "palantir-java-format"


def _decode_output(data: bytes | None) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def changed_span(source: str, formatted: str) -> Replacement | None:
    """Return one replacement covering everything that differs, or None."""
    if source == formatted:
        return None
    limit = min(len(source), len(formatted))
    prefix = 0
    while prefix < limit and source[prefix] == formatted[prefix]:
        prefix += 1
    suffix = 0
    while (suffix < limit - prefix
           and source[-1 - suffix] == formatted[-1 - suffix]):
        suffix += 1
    return Replacement.create(
        prefix, len(source) - suffix, formatted[prefix:len(formatted) - suffix]
    )


class CommandFormattingEngine(FormattingEngine):
    """Format Java source by piping it through a formatter executable."""

    def __init__(
        self,
        command: str | Sequence[str] = DEFAULT_COMMAND,
        timeout: float = 30.0,
        fix_imports: bool = True,
        reflow_strings: bool = True,
    ) -> None:
        if isinstance(command, str):
            command = shlex.split(command)
        if not command:
            raise FormatterError("No formatter command configured")
        self._command = list(command)
        self._timeout = timeout
        self._fix_imports = fix_imports
        self._reflow_strings = reflow_strings

    @classmethod
    def from_config(cls, config) -> "CommandFormattingEngine":
        return cls(
            command=config.ENGINE_COMMAND,
            timeout=config.ENGINE_TIMEOUT,
            fix_imports=config.FIX_IMPORTS,
            reflow_strings=config.REFLOW_STRINGS,
        )

    @property
    def command(self) -> list[str]:
        return list(self._command)

    def format_whole(self, source: str) -> str:
        return self._run(self._option_args(), source)

    def format_regions_with_comments(
        self, source: str, regions: list[Range]
    ) -> list[Replacement]:
        args = self._option_args()
        for region in regions:
            region = region.canonical()
            if region.is_empty:
                continue
            args.extend(["--offset", str(region.start),
                         "--length", str(len(region))])
        if "--offset" not in args:
            return []
        replacement = changed_span(source, self._run(args, source))
        return [replacement] if replacement else []

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _option_args(self) -> list[str]:
        args: list[str] = []
        if not self._fix_imports:
            args.extend(["--skip-sorting-imports", "--skip-removing-unused-imports"])
        if not self._reflow_strings:
            args.append("--skip-reflowing-long-strings")
        return args

    def _run(self, args: list[str], source: str) -> str:
        cmd = self._command + args + ["-"]
        logger.debug("[Engine] Running %s on %d chars", shlex.join(cmd), len(source))

        env = os.environ.copy()
        env.setdefault("NO_COLOR", "1")
        try:
            proc = subprocess.Popen(
                cmd,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                env=env,
            )
        except OSError as exc:
            logger.error("[Engine] Could not start %s: %s", cmd[0], exc)
            raise FormatterError(f"Could not start formatter {cmd[0]!r}: {exc}") from exc

        try:
            stdout, stderr = proc.communicate(
                source.encode("utf-8"), timeout=self._timeout
            )
        except subprocess.TimeoutExpired as exc:
            proc.kill()
            proc.communicate()
            logger.error("[Engine] Formatter timed out after %ss", self._timeout)
            raise FormatterError(
                f"Formatter timed out after {self._timeout} seconds"
            ) from exc

        if proc.returncode != 0:
            diagnostics = _decode_output(stderr).strip() or _decode_output(stdout).strip()
            logger.error(
                "[Engine] Formatter exited with code %d: %s",
                proc.returncode, diagnostics,
            )
            raise FormatterError(
                f"Formatter exited with code {proc.returncode}: {diagnostics}"
            )
        return _decode_output(stdout)
