from __future__ import annotations
import sys
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union
from argv_utils.argument_errors import ArgumentError
from argv_utils.argument_errors import BadChoicesError, BadNameError, DuplicateNameError
from argv_utils.argument_errors import BadFormatError, BadValueError, UnrecognizedError
from argv_utils.argument_options import ArgumentOption, ArgumentOptions
from argv_utils.argument_tokens import ArgumentToken
from argv_utils.argument_usage import print_error, print_help, program_name
from argv_utils.type_utils import to_string


class ArgumentParser:
    """
    Minimal command-line argument parser for --name and --name=value options only.
    Usage:

      parser = ArgumentParser(name="myprogram", description="Does things.")
      parser.declare("verbose", "Verbose output.")
      parser.declare("output", "Output file.", [""])
      parser.declare("format", "Output format.", ["json", "yaml"])
      parser.parse()
      if parser.has("verbose"): ...
      output_format = parser.get("format")

    Input is checked in stages: token format, then option recognition, then option values;
    each stage reports every offending token at once, and stops before the next stage runs.
    Nothing is recorded unless every stage passes. By default any error prints usage
    and the error and exits with status 1; with exit=False the error is raised instead.
    """

    EXIT_STATUS_OK = 0
    EXIT_STATUS_ERROR = 1
    HELP_OPTION = "--help"
    HELP_OPTION_NAME = "help"

    def __init__(self, name: Optional[str] = None, description: Optional[str] = None,
                 exit: bool = True, nocolor: bool = False, printf: Optional[Callable] = None) -> None:
        self._name = to_string(name)
        self._description = to_string(description)
        self._options = ArgumentOptions()
        self._exit = exit is not False
        self._nocolor = nocolor is True
        self._printf = printf if callable(printf) else None

    def set_name(self, name: str) -> ArgumentParser:
        self._name = to_string(name)
        return self

    def set_description(self, description: str) -> ArgumentParser:
        self._description = to_string(description)
        return self

    def declare(self, name: str, help: Optional[str] = None,
                choices: Optional[Union[List[str], Tuple[str, ...]]] = None) -> ArgumentParser:
        self._options.declare(name, help=help, choices=choices)
        return self

    def has(self, name: str) -> bool:
        return self._options.has(name)

    def get(self, name: str) -> str:
        return self._options.get(name)

    @property
    def name(self) -> str:
        return program_name(self._name)

    @property
    def description(self) -> str:
        return self._description

    @property
    def options(self) -> ArgumentOptions:
        return self._options

    @property
    def values(self) -> Dict[str, str]:
        return self._options.values

    def parse(self, argv: Optional[Iterable[str]] = None,
              exit: Optional[bool] = None, printf: Optional[Callable] = None) -> ArgumentParser:
        if exit not in (True, False):
            exit = self._exit
        if not callable(printf):
            printf = self._printf
        argv = sys.argv[1:] if argv is None else list(argv)
        try:
            if self._options:
                self._check_options()
            if (not argv) or (not self._options) or self._is_help_requested(argv):
                print_help(self.name, self._description, self._options, printf=printf)
                if exit is True:
                    sys.exit(ArgumentParser.EXIT_STATUS_OK)
                return self
            tokens = self._check_tokens_format(argv)
            matches = self._check_tokens_recognized(tokens)
            values = self._check_tokens_values(matches)
        except ArgumentError as error:
            if exit is not True:
                raise
            print_error(self.name, self._options, error, nocolor=self._nocolor, printf=printf)
            sys.exit(ArgumentParser.EXIT_STATUS_ERROR)
        self._options.commit(values)
        return self

    def _check_options(self) -> None:
        if bad_names := self._options.check_names():
            raise BadNameError(bad_names)
        if duplicate_names := self._options.check_duplicate_names():
            raise DuplicateNameError(duplicate_names)
        if bad_choices := self._options.check_choices():
            raise BadChoicesError(bad_choices)

    def _is_help_requested(self, argv: List[str]) -> bool:
        return (ArgumentParser.HELP_OPTION in argv) and (ArgumentParser.HELP_OPTION_NAME not in self._options)

    def _check_tokens_format(self, argv: List[str]) -> List[ArgumentToken]:
        tokens = [ArgumentToken(arg) for arg in argv]
        if bad_tokens := [token for token in tokens if not token.valid]:
            raise BadFormatError(bad_tokens)
        return tokens

    def _check_tokens_recognized(self, tokens: List[ArgumentToken]) -> List[Tuple[ArgumentToken, ArgumentOption]]:
        matches = [] ; unrecognized_tokens = []  # noqa
        for token in tokens:
            if option := self._options.find_by_alias(token.alias):
                matches.append((token, option))
            else:
                unrecognized_tokens.append(token)
        if unrecognized_tokens:
            raise UnrecognizedError(unrecognized_tokens)
        return matches

    def _check_tokens_values(self, matches: List[Tuple[ArgumentToken, ArgumentOption]]) -> Dict[str, str]:
        values = {} ; bad_tokens = []  # noqa
        for token, option in matches:
            if not option.accepts(token.value):
                bad_tokens.append(token)
                continue
            # The same option given more than once is not an error; the last one wins.
            values[option.name] = token.value if token.has_value else ""
        if bad_tokens:
            raise BadValueError(bad_tokens)
        return values
