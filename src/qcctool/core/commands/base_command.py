"""
Base command implementation.

Every command of the tool subclasses ``ToolCommand``. A command declares:

1. ``command_name`` and ``command_usage`` class attributes describing it,
2. the single-character options it accepts, through the ``option_funcs``
   (no argument) and ``option_funcs_with_arg`` (with argument) handler maps,
3. a ``run()`` implementation.

Commands that need extra consistency checks override ``validate()``, call
super and then check the parsed state:

```python
class DigestCommand(ToolCommand):
    command_name = "digest"
    command_usage = "digest -a sha1|sha2-256 file"

    def set_option_a(self, argument: str) -> bool:
        ...

    option_funcs_with_arg = {"a": set_option_a}
```

Intermediate base classes that are not complete commands pass
``abstract=True`` in their class statement to skip the definition checks.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from typing import Any, ClassVar

from qcctool.core.common.exceptions import CommandDefinitionError
from qcctool.core.domain.options import (
    OptionTable,
    ParsedOption,
    format_options,
    short_spec_from_handlers,
)
from qcctool.core.services.option_scanner import (
    OptionScanner,
    ScanResult,
    ShortClusterMode,
)
from qcctool.core.services.task_runner import SynchronousTaskRunner, TaskRunner

logger = logging.getLogger(__name__)

OptionFunc = Callable[[Any], None]
OptionFuncWithArg = Callable[[Any, str], bool]


class ToolCommand(ABC):
    """A single command of the command-line tool."""

    # Name used to select this command from its parent router.
    command_name: ClassVar[str]
    # Usage line, "<name> [options] <arguments>".
    command_usage: ClassVar[str]

    option_funcs: ClassVar[Mapping[str, OptionFunc]] = {}
    option_funcs_with_arg: ClassVar[Mapping[str, OptionFuncWithArg]] = {}
    # End option processing at the first positional argument.
    stop_at_first_positional: ClassVar[bool] = False

    def __init_subclass__(cls, abstract: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not abstract:
            cls._check_definition()

    @classmethod
    def _check_definition(cls) -> None:
        for attr in ("command_name", "command_usage"):
            value = getattr(cls, attr, None)
            if not isinstance(value, str) or not value:
                raise CommandDefinitionError(
                    f"{cls.__name__} must define a non-empty '{attr}'",
                    command_class=cls.__name__,
                )

        no_arg_keys = set(cls.option_funcs)
        with_arg_keys = set(cls.option_funcs_with_arg)
        for key in no_arg_keys | with_arg_keys:
            if len(key) != 1 or key in ":-":
                raise CommandDefinitionError(
                    f"{cls.__name__} declares invalid option key '{key}'",
                    command_class=cls.__name__,
                )
        overlap = no_arg_keys & with_arg_keys
        if overlap:
            raise CommandDefinitionError(
                f"{cls.__name__} declares options both with and without argument: "
                f"{', '.join(sorted(overlap))}",
                command_class=cls.__name__,
            )

    @classmethod
    def short_options(cls) -> str:
        """The ``getopt`` spec string derived from the handler maps."""
        return short_spec_from_handlers(cls.option_funcs, cls.option_funcs_with_arg)

    @classmethod
    def option_table(cls) -> OptionTable:
        return OptionTable.build(cls.short_options())

    def __init__(
        self,
        task_runner: TaskRunner | None = None,
        cluster_mode: ShortClusterMode = ShortClusterMode.FIRST_CHARACTER,
    ) -> None:
        self.task_runner: TaskRunner = task_runner or SynchronousTaskRunner(
            run_on_caller_thread=True
        )
        self.cluster_mode = cluster_mode
        self._arguments: list[str] = []

    @property
    def arguments(self) -> list[str]:
        """Positional arguments left after option processing.

        Empty until ``validate()`` has succeeded.
        """
        return self._arguments

    def scan_options(self, argv: Sequence[str]) -> ScanResult:
        scanner = OptionScanner(
            self.option_table(),
            self.cluster_mode,
            stop_at_first_positional=self.stop_at_first_positional,
        )
        return scanner.scan(argv, start_index=0)

    def validate(self, argv: Sequence[str]) -> bool:
        """Parse ``argv`` and apply the options to this command.

        Returns False on any usage problem: scan errors, a handler rejecting
        its argument, or an option without a handler.
        """
        result = self.scan_options(argv)
        if not result.succeeded:
            logger.debug(
                "%s: option errors: %s",
                self.command_name,
                "; ".join(str(error) for error in result.errors),
            )
            return False

        for key, parsed in result.options.items():
            if not self.set_option(key, parsed):
                logger.debug(
                    "%s: option '%s' rejected (%s)",
                    self.command_name,
                    key,
                    format_options({key: parsed}),
                )
                return False

        self._arguments = list(result.positionals)
        return True

    def set_option(self, key: str, parsed: ParsedOption) -> bool:
        """Dispatch one parsed option to its handler."""
        option_func = type(self).option_funcs.get(key)
        if option_func is not None:
            option_func(self)
            return True

        option_func_with_arg = type(self).option_funcs_with_arg.get(key)
        if option_func_with_arg is not None:
            argument = parsed.value if parsed.value is not None else ""
            return bool(option_func_with_arg(self, argument))

        logger.debug("%s: no handler for option '%s'", self.command_name, key)
        return False

    @abstractmethod
    def run(self) -> None:
        """Run the command.

        Only called after ``validate()`` returned True. Usage checking
        belongs in ``validate()``; failures here are raised as exceptions.
        """
