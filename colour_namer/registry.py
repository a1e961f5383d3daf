"""Command auto-discovery and registration.

Every module in colour_namer/commands/ that defines a `command` object of
type Command is registered under the command's name. Modules whose name
starts with an underscore are private helpers and are skipped.

Discovery runs once; later calls return the same registry.
"""

import importlib
import pkgutil

import colour_namer.commands
from colour_namer.core.types import Command

_registry: dict[str, Command] = {}


def _command_modules() -> list[str]:
    return sorted(
        modname
        for _finder, modname, _ispkg in pkgutil.iter_modules(colour_namer.commands.__path__)
        if not modname.startswith('_')
    )


def discover() -> dict[str, Command]:
    """Import every command module and return the registry, keyed by command name."""
    if not _registry:
        for modname in _command_modules():
            module = importlib.import_module(f'{colour_namer.commands.__name__}.{modname}')
            cmd = getattr(module, 'command', None)
            if isinstance(cmd, Command):
                _registry[cmd.name] = cmd
    return _registry


def get(name: str) -> Command:
    """Look up a command, raising KeyError with the available names if unknown."""
    commands = discover()
    try:
        return commands[name]
    except KeyError:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(commands))}') from None


def all_commands() -> dict[str, Command]:
    return discover()
