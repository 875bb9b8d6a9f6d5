from typing import List, Optional
from argv_utils.type_utils import to_string_list


class ArgumentError(Exception):

    label = "bad arguments"

    def __init__(self, items: Optional[List[str]] = None) -> None:
        self.items = to_string_list(items, strip=False)
        super().__init__(f"{self.label}: {', '.join(self.items)}")


class ConfigError(ArgumentError):
    # Raised for bad option declarations; always fatal, never the user's fault.
    pass


class BadNameError(ConfigError):
    label = "bad arguments names"


class DuplicateNameError(ConfigError):
    label = "duplicate arguments names"


class BadChoicesError(ConfigError):
    label = "bad arguments choices"


class InputError(ArgumentError):
    pass


class BadFormatError(InputError):
    label = "bad arguments format"


class UnrecognizedError(InputError):
    label = "unrecognized arguments"


class BadValueError(InputError):
    label = "bad arguments value"
