"""
Option specification domain model.

This module defines the value types shared by the option scanner and the
command layer: the description of a recognised option (``OptionSpec``), the
result of matching one occurrence of it (``ParsedOption``), scan errors, and
the ``OptionTable`` that indexes short and long options for lookup.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple


class LongOption(NamedTuple):
    """Descriptor for a long option, as accepted by ``getopt_long``."""

    name: str
    has_arg: bool = False
    arg_is_optional: bool = False
    key: str = ""


@dataclass(frozen=True)
class OptionSpec:
    """One recognised option.

    ``key`` is the identifier reported back to callers; a short and a long
    option may share the same key (``-v`` / ``--verbose``).
    """

    key: str
    name: str
    has_arg: bool = False
    arg_is_optional: bool = False

    def __post_init__(self) -> None:
        if self.arg_is_optional and not self.has_arg:
            raise ValueError(
                f"Option '{self.name}' has an optional argument but takes no argument"
            )


@dataclass(frozen=True)
class ParsedOption:
    """Value recorded for one occurrence of an option."""

    value: str | None = None
    # True when no explicit argument was given
    is_default: bool = True


class ScanErrorKind(str, Enum):
    """Kinds of problems reported by the option scanner."""

    MISSING_ARG = "missing_arg"
    NOT_OPTION = "not_option"


@dataclass(frozen=True)
class ScanError:
    token: str
    kind: ScanErrorKind

    def __str__(self) -> str:
        if self.kind is ScanErrorKind.MISSING_ARG:
            return f"option requires an argument -- {self.token}"
        return f"unrecognized option -- {self.token}"


@dataclass
class OptionTable:
    """Lookup maps for short options (by character) and long options (by name)."""

    short_options: dict[str, OptionSpec] = field(default_factory=dict)
    long_options: dict[str, OptionSpec] = field(default_factory=dict)

    @classmethod
    def build(
        cls, short_spec: str = "", long_specs: Iterable[LongOption] = ()
    ) -> OptionTable:
        """Build a table from a ``getopt`` spec string and long option descriptors.

        Each character of ``short_spec`` other than ``:`` starts an option keyed
        by that character. A following ``:`` means the option takes an
        argument, ``::`` means the argument is optional. Colons that do not
        follow an option character are ignored.
        """
        table = cls()
        index = 0
        length = len(short_spec)
        while index < length:
            char = short_spec[index]
            index += 1
            if char == ":":
                continue
            has_arg = False
            arg_is_optional = False
            if index < length and short_spec[index] == ":":
                has_arg = True
                index += 1
                if index < length and short_spec[index] == ":":
                    arg_is_optional = True
                    index += 1
            table.short_options[char] = OptionSpec(
                key=char,
                name=char,
                has_arg=has_arg,
                arg_is_optional=arg_is_optional,
            )

        for long_spec in long_specs:
            table.long_options[long_spec.name] = OptionSpec(
                key=long_spec.key or long_spec.name,
                name=long_spec.name,
                has_arg=long_spec.has_arg,
                arg_is_optional=long_spec.has_arg and long_spec.arg_is_optional,
            )
        return table

    def short(self, char: str) -> OptionSpec | None:
        return self.short_options.get(char)

    def long(self, name: str) -> OptionSpec | None:
        return self.long_options.get(name)


def short_spec_from_handlers(
    no_arg_keys: Iterable[str], with_arg_keys: Iterable[str]
) -> str:
    """Derive a ``getopt`` spec string from handler map keys.

    No-argument keys are concatenated as-is, argument-taking keys each get a
    single trailing colon.
    """
    return "".join(no_arg_keys) + "".join(f"{key}:" for key in with_arg_keys)


def format_options(options: Mapping[str, ParsedOption]) -> str:
    """Render parsed options for debug logging."""
    parts = []
    for key, parsed in options.items():
        if parsed.value is None:
            parts.append(key)
        else:
            parts.append(f"{key}={parsed.value!r}")
    return ", ".join(parts)
