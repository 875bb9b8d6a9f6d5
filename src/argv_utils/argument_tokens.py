from __future__ import annotations
import string
from typing import Optional, Tuple

OPTION_PREFIX = "--"
OPTION_PREFIX_LEN = len(OPTION_PREFIX)
VALUE_DELIMITER = "="
VALUE_PLACEHOLDER = "v"

_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_-")


def is_name_char(char: str) -> bool:
    return char in _NAME_CHARS


def is_name(value: str) -> bool:
    """
    Returns True iff the given value is a non-empty string made up only of
    ASCII letters, digits, underscores and dashes; used for both option names and values.
    """
    if not (isinstance(value, str) and value):
        return False
    for char in value:
        if not is_name_char(char):
            return False
    return True


def to_alias(name: str) -> str:
    return f"{OPTION_PREFIX}{name}" if isinstance(name, str) else OPTION_PREFIX


class ArgumentToken(str):
    """
    A single raw command-line token, e.g. "--verbose" or "--output=json", scanned once
    on construction. Anything not exactly of the form --name or --name=value is invalid.
    """

    def __new__(cls, value: str) -> ArgumentToken:
        token = super().__new__(cls, value if isinstance(value, str) else str(value))
        if isinstance(value, str):
            token._name, token._value, token._valid = ArgumentToken._scan(token)
        else:
            token._name, token._value, token._valid = None, None, False
        return token

    @property
    def valid(self) -> bool:
        return self._valid

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def alias(self) -> Optional[str]:
        return to_alias(self._name) if self._valid else None

    @property
    def value(self) -> Optional[str]:
        return self._value

    @property
    def has_value(self) -> bool:
        return self._value is not None

    @staticmethod
    def _scan(value: str) -> Tuple[Optional[str], Optional[str], bool]:
        if not value.startswith(OPTION_PREFIX):
            return None, None, False
        body = value[OPTION_PREFIX_LEN:]
        if (index := body.find(VALUE_DELIMITER)) >= 0:
            # Here a value delimiter is present so a non-empty value must follow it;
            # a trailing delimiter (--name=) or a second delimiter (--name=a=b) is invalid.
            name = body[:index] ; value = body[index + 1:]  # noqa
            if is_name(name) and is_name(value):
                return name, value, True
            return None, None, False
        if is_name(body):
            return body, None, True
        return None, None, False
