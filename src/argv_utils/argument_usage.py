from __future__ import annotations
import os
import sys
from typing import Callable, Iterable, List, Optional
from termcolor import colored
from argv_utils.argument_options import ArgumentOption


def program_name(name: Optional[str] = None) -> str:
    if isinstance(name, str) and (name := name.strip()):
        return name
    if sys.argv and isinstance(sys.argv[0], str) and sys.argv[0]:
        return os.path.basename(sys.argv[0])
    return ""


def format_usage(name: str, options: Iterable[ArgumentOption]) -> str:
    usage = "".join(f" [{option.usage_alias}]" for option in options)
    return f"Usage: {name}{usage}"


def format_help(name: str, description: Optional[str], options: Iterable[ArgumentOption]) -> List[str]:
    """
    Returns the lines of help text for the given program name, description, and options, e.g.:

      Usage: myprogram [--verbose] [--format=v]
      My program description.

      Optional arguments:
      --verbose  Verbose output.
      --format=v Output format. [json,yaml]
    """
    options = list(options)
    lines = [format_usage(name, options)]
    if description:
        lines.append(description)
    lines.append("")
    lines.append("Optional arguments:")
    if options:
        width = max(len(option.usage_alias) for option in options)
        for option in options:
            help = option.help
            if option.restricted:
                help = f"{help} " if help else ""
                help += f"[{','.join(option.choices)}]"
            lines.append(f"{option.usage_alias.ljust(width)} {help}")
    lines.append("")
    return lines


def format_error(name: str, options: Iterable[ArgumentOption], error: Exception) -> List[str]:
    return [format_usage(name, options), f"Error: {error}", ""]


def terminal_color(value: str, color: Optional[str] = None, bold: bool = False, nocolor: bool = False) -> str:
    if nocolor is True:
        return value
    attributes = ["bold"] if bold is True else []
    if isinstance(color, str) and color:
        return colored(value, color.lower(), attrs=attributes)
    return colored(value, attrs=attributes)


def print_help(name: str, description: Optional[str], options: Iterable[ArgumentOption],
               printf: Optional[Callable] = None) -> None:
    if not callable(printf):
        printf = print
    for line in format_help(name, description, options):
        printf(line)


def print_error(name: str, options: Iterable[ArgumentOption], error: Exception,
                nocolor: bool = False, printf: Optional[Callable] = None) -> None:
    if not callable(printf):
        printf = lambda *args, **kwargs: print(*args, **kwargs, file=sys.stderr)  # noqa
    usage, message, trailer = format_error(name, options, error)
    printf(usage)
    printf(terminal_color(message, "red", nocolor=nocolor))
    printf(trailer)
