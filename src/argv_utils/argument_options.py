from __future__ import annotations
from typing import Dict, Iterator, List, Optional, Tuple, Union
from argv_utils.argument_tokens import OPTION_PREFIX, OPTION_PREFIX_LEN, VALUE_DELIMITER, VALUE_PLACEHOLDER
from argv_utils.argument_tokens import is_name, to_alias
from argv_utils.type_utils import to_string, to_string_list


class ArgumentOption:

    def __init__(self, name: str,
                 help: Optional[str] = None,
                 choices: Optional[Union[List[str], Tuple[str, ...]]] = None) -> None:
        self._name = to_string(name)
        self._help = to_string(help)
        if not isinstance(choices, (list, tuple)):
            choices = to_string_list(choices, strip=False)
        self._choices = tuple(to_string_list(choices, strip=False))
        # Non-string choices are kept aside (as text) so they can be reported as bad choices.
        self._declared_choices = tuple(str(choice) for choice in choices)
        self._mistyped_choices = len(self._declared_choices) != len(self._choices)
        self._value = ""
        self._active = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def alias(self) -> str:
        return to_alias(self._name)

    @property
    def usage_alias(self) -> str:
        # E.g. --output=v for an option which takes a value, or just --verbose for a flag.
        return f"{self.alias}{VALUE_DELIMITER}{VALUE_PLACEHOLDER}" if self.accepts_value else self.alias

    @property
    def help(self) -> str:
        return self._help

    @property
    def choices(self) -> Tuple[str, ...]:
        return self._choices

    @property
    def value(self) -> str:
        return self._value

    @property
    def active(self) -> bool:
        return self._active

    @property
    def accepts_value(self) -> bool:
        return len(self._choices) > 0

    @property
    def free_form(self) -> bool:
        return self._choices == ("",)

    @property
    def restricted(self) -> bool:
        return len(self._choices) > 1

    @property
    def valid_name(self) -> bool:
        return is_name(self._name)

    @property
    def valid_choices(self) -> bool:
        if self._mistyped_choices:
            return False
        if len(self._choices) == 1:
            return self._choices[0] == ""
        return "" not in self._choices

    def accepts(self, value: Optional[str]) -> bool:
        """
        Returns True iff the given value (None meaning no value) is legal for this option.
        """
        if not self.accepts_value:
            return value is None
        if not value:
            return False
        return self.free_form or (value in self._choices)

    def _set(self, active: bool, value: str = "") -> None:
        self._active = active is True
        self._value = to_string(value)

    def __repr__(self) -> str:
        return (f"ArgumentOption({self._name!r}, choices={list(self._choices)!r},"
                f" active={self._active}, value={self._value!r})")


class ArgumentOptions:
    """
    The set of declared options for a program, keyed (uniquely) by name,
    iterated in declaration order. Declaring the same name again does not
    replace the original; it is remembered and flagged by check_duplicate_names.
    """

    def __init__(self) -> None:
        self._options: Dict[str, ArgumentOption] = {}
        self._duplicates: List[str] = []

    def declare(self, name: str,
                help: Optional[str] = None,
                choices: Optional[Union[List[str], Tuple[str, ...]]] = None) -> ArgumentOption:
        option = ArgumentOption(name, help=help, choices=choices)
        if option.name in self._options:
            if option.alias not in self._duplicates:
                self._duplicates.append(option.alias)
        else:
            self._options[option.name] = option
        return option

    def find(self, name: str) -> Optional[ArgumentOption]:
        return self._options.get(name) if isinstance(name, str) else None

    def find_by_alias(self, alias: str) -> Optional[ArgumentOption]:
        if isinstance(alias, str) and alias.startswith(OPTION_PREFIX):
            return self.find(alias[OPTION_PREFIX_LEN:])
        return None

    def has(self, name: str) -> bool:
        return (option := self.find(name)) is not None and option.active

    def get(self, name: str) -> str:
        return option.value if (option := self.find(name)) is not None else ""

    def check_names(self) -> List[str]:
        return [option.alias for option in self if not option.valid_name]

    def check_duplicate_names(self) -> List[str]:
        return list(self._duplicates)

    def check_choices(self) -> List[str]:
        bad_choices = []
        for option in self:
            if not option.valid_choices:
                usage_alias = f"{option.alias}{VALUE_DELIMITER}{VALUE_PLACEHOLDER}"
                if (len(option._declared_choices) == 1) and (not option._mistyped_choices):
                    bad_choices.append(usage_alias)
                else:
                    bad_choices.append(f"{usage_alias} [{','.join(option._declared_choices)}]")
        return bad_choices

    def commit(self, values: Dict[str, str]) -> None:
        # Resets every option and then activates exactly those given; values
        # are keyed by option name and are empty strings for plain flags.
        for option in self:
            if option.name in values:
                option._set(True, values[option.name])
            else:
                option._set(False)

    @property
    def values(self) -> Dict[str, str]:
        return {option.name: option.value for option in self if option.active}

    def __iter__(self) -> Iterator[ArgumentOption]:
        return iter(self._options.values())

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None
