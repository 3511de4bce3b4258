"""
Option scanner.

Implements ``getopt`` / ``getopt_long`` style scanning of an argument vector
against an ``OptionTable``. Scanning is a single left-to-right pass that
never aborts: every malformed option is collected into ``ScanResult.errors``
so that all usage problems of one invocation can be reported together.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from qcctool.core.domain.options import (
    OptionSpec,
    OptionTable,
    ParsedOption,
    ScanError,
    ScanErrorKind,
)

logger = logging.getLogger(__name__)

OPTIONS_TERMINATOR = "--"
STANDARD_STREAM = "-"


class ShortClusterMode(str, Enum):
    """How a multi-character short option cluster such as ``-abc`` is read."""

    # Only the first character is processed, the rest of the cluster is dropped.
    FIRST_CHARACTER = "first"
    # Every character is processed, as POSIX getopt does.
    ALL_CHARACTERS = "all"


@dataclass
class ScanResult:
    options: dict[str, ParsedOption] = field(default_factory=dict)
    positionals: list[str] = field(default_factory=list)
    errors: list[ScanError] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.errors

    def value_of(self, key: str) -> str | None:
        """Return the argument recorded for ``key``, or None."""
        parsed = self.options.get(key)
        if parsed is None:
            return None
        return parsed.value


def is_option_shaped(token: str) -> bool:
    """A token other than ``-`` itself that begins with ``-``."""
    return token != STANDARD_STREAM and token.startswith("-")


class OptionScanner:
    """Scans argument vectors against a fixed option table.

    With ``stop_at_first_positional`` the first positional argument ends
    option processing, as BSD ``getopt`` does; everything after it is
    positional. Routers scan this way so that a subcommand's options are
    left for the subcommand.
    """

    def __init__(
        self,
        table: OptionTable,
        cluster_mode: ShortClusterMode = ShortClusterMode.FIRST_CHARACTER,
        stop_at_first_positional: bool = False,
    ) -> None:
        self.table = table
        self.cluster_mode = cluster_mode
        self.stop_at_first_positional = stop_at_first_positional

    def scan(self, argv: Sequence[str], start_index: int = 0) -> ScanResult:
        result = ScanResult()
        options_done = False
        i = start_index
        while i < len(argv):
            token = argv[i]
            if options_done:
                result.positionals.append(token)
            elif token == OPTIONS_TERMINATOR:
                options_done = True
            elif token.startswith("--"):
                i += self._scan_long_option(argv, i, result)
            elif token.startswith("-") and token != STANDARD_STREAM:
                i += self._scan_short_cluster(argv, i, result)
            else:
                result.positionals.append(token)
                options_done = self.stop_at_first_positional
            i += 1

        if result.errors:
            logger.debug(
                "Option scan finished with %d error(s): %s",
                len(result.errors),
                "; ".join(str(error) for error in result.errors),
            )
        return result

    def _scan_long_option(
        self, argv: Sequence[str], i: int, result: ScanResult
    ) -> int:
        """Handle ``--name``; returns the number of extra argv tokens consumed."""
        token = argv[i]
        spec = self.table.long(token[2:])
        if spec is None:
            result.errors.append(ScanError(token, ScanErrorKind.NOT_OPTION))
            return 0
        if not spec.has_arg:
            result.options[spec.key] = ParsedOption(None, True)
            return 0
        following = self._following_argument(argv, i)
        if following is None:
            result.errors.append(ScanError(token, ScanErrorKind.MISSING_ARG))
            return 0
        result.options[spec.key] = ParsedOption(following, False)
        return 1

    def _scan_short_cluster(
        self, argv: Sequence[str], i: int, result: ScanResult
    ) -> int:
        """Handle ``-x`` / ``-xyz``; returns the number of extra argv tokens consumed."""
        token = argv[i]
        cluster = token[1:]

        if len(cluster) == 1:
            return self._apply_short(
                cluster, "", argv, i, result, error_token=token
            )

        if self.cluster_mode is ShortClusterMode.FIRST_CHARACTER:
            # Characters after the first one are discarded without a report.
            return self._apply_short(cluster[0], cluster[1:], argv, i, result)

        for position, char in enumerate(cluster):
            remainder = cluster[position + 1 :]
            spec = self.table.short(char)
            skip = self._apply_short(char, remainder, argv, i, result)
            if spec is not None and spec.has_arg:
                # An argument-taking option swallows the rest of the cluster.
                return skip
        return 0

    def _apply_short(
        self,
        char: str,
        remainder: str,
        argv: Sequence[str],
        i: int,
        result: ScanResult,
        error_token: str | None = None,
    ) -> int:
        error_token = error_token or char
        spec: OptionSpec | None = self.table.short(char)
        if spec is None:
            result.errors.append(ScanError(error_token, ScanErrorKind.NOT_OPTION))
            return 0
        if not spec.has_arg:
            result.options[spec.key] = ParsedOption(None, True)
            return 0
        if remainder:
            result.options[spec.key] = ParsedOption(remainder, False)
            return 0
        following = self._following_argument(argv, i)
        if following is not None:
            result.options[spec.key] = ParsedOption(following, False)
            return 1
        if spec.arg_is_optional:
            result.options[spec.key] = ParsedOption("", True)
            return 0
        result.errors.append(ScanError(error_token, ScanErrorKind.MISSING_ARG))
        return 0

    @staticmethod
    def _following_argument(argv: Sequence[str], i: int) -> str | None:
        if i + 1 < len(argv) and not is_option_shaped(argv[i + 1]):
            return argv[i + 1]
        return None


def scan(
    table: OptionTable,
    argv: Sequence[str],
    start_index: int = 0,
    cluster_mode: ShortClusterMode = ShortClusterMode.FIRST_CHARACTER,
    stop_at_first_positional: bool = False,
) -> ScanResult:
    """Scan ``argv[start_index:]`` against ``table``."""
    scanner = OptionScanner(table, cluster_mode, stop_at_first_positional)
    return scanner.scan(argv, start_index)
