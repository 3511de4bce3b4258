"""
Subcommand router.

A ``CommandRouter`` is a command whose first positional argument names one
of its subcommands. The router strips its own options, creates the named
subcommand and hands it the remaining arguments. Since a router is itself a
``ToolCommand`` it can appear in another router's ``subcommand_classes``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar

from qcctool.core.commands.base_command import ToolCommand
from qcctool.core.common.exceptions import CommandDefinitionError, CommandStateError
from qcctool.core.common.logging_utils import get_logger

logger = get_logger(__name__)


class CommandRouter(ToolCommand, abstract=True):
    """A command that dispatches to one of a fixed set of subcommands."""

    subcommand_classes: ClassVar[Sequence[type[ToolCommand]]] = ()
    # Optional first usage line; when set, the subcommand usages are listed
    # below a "Subcommands:" header.
    usage_synopsis: ClassVar[str | None] = None
    stop_at_first_positional = True

    def __init_subclass__(cls, abstract: bool = False, **kwargs: Any) -> None:
        if not abstract:
            cls._check_subcommands()
            if "command_usage" not in cls.__dict__:
                cls.command_usage = cls.subcommand_usage()
        super().__init_subclass__(abstract=abstract, **kwargs)

    @classmethod
    def _check_subcommands(cls) -> None:
        if not cls.subcommand_classes:
            raise CommandDefinitionError(
                f"{cls.__name__} must define 'subcommand_classes'",
                command_class=cls.__name__,
            )
        seen: set[str] = set()
        for subcommand_class in cls.subcommand_classes:
            name = subcommand_class.command_name
            if name in seen:
                raise CommandDefinitionError(
                    f"{cls.__name__} lists subcommand '{name}' more than once",
                    command_class=cls.__name__,
                )
            seen.add(name)

    @classmethod
    def subcommand_usage(cls) -> str:
        listing = "\n".join(
            subcommand_class.command_usage for subcommand_class in cls.subcommand_classes
        )
        if cls.usage_synopsis:
            return f"{cls.usage_synopsis}\n\nSubcommands:\n\n{listing}"
        return listing

    @classmethod
    def find_subcommand_class(cls, name: str) -> type[ToolCommand] | None:
        for subcommand_class in cls.subcommand_classes:
            if subcommand_class.command_name == name:
                return subcommand_class
        return None

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._subcommand: ToolCommand | None = None

    @property
    def subcommand(self) -> ToolCommand | None:
        """The resolved subcommand, once ``validate()`` has succeeded."""
        return self._subcommand

    def validate(self, argv: Sequence[str]) -> bool:
        self._subcommand = None
        if not super().validate(argv):
            return False
        if not self.arguments:
            logger.debug("subcommand_missing", router=self.command_name)
            return False

        name, *subcommand_arguments = self.arguments
        subcommand_class = self.find_subcommand_class(name)
        if subcommand_class is None:
            logger.debug(
                "subcommand_unknown", router=self.command_name, subcommand=name
            )
            return False

        subcommand = subcommand_class(
            task_runner=self.task_runner, cluster_mode=self.cluster_mode
        )
        logger.debug(
            "subcommand_resolved",
            router=self.command_name,
            subcommand=name,
            argument_count=len(subcommand_arguments),
        )
        if not subcommand.validate(subcommand_arguments):
            return False
        self._subcommand = subcommand
        return True

    def run(self) -> None:
        if self._subcommand is None:
            raise CommandStateError(
                f"{self.command_name}: run() called without a validated subcommand"
            )
        self._subcommand.run()
