"""Command auto-discovery and registration.

Scans rgba_kit/commands/ for modules that define a `command` object of
type Command. Collects them into a dict keyed by name.

Modules whose names start with an underscore are skipped.
"""

import importlib
import pkgutil

from rgba_kit.core.types import Command

_registry: dict[str, Command] = {}


def discover() -> dict[str, Command]:
    """Import all command modules and return the registry."""
    if _registry:
        return _registry

    import rgba_kit.commands as pkg

    for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__):
        if modname.startswith('_'):
            continue
        module = importlib.import_module(f'rgba_kit.commands.{modname}')
        cmd = getattr(module, 'command', None)
        if isinstance(cmd, Command):
            _registry[cmd.name] = cmd

    return _registry


def get(name: str) -> Command:
    """Get a command by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_commands() -> dict[str, Command]:
    """Return all registered commands."""
    return discover()


def module_doc(name: str) -> str:
    """Full module docstring of a command (its user documentation)."""
    module = importlib.import_module(f'rgba_kit.commands.{name}')
    return (module.__doc__ or '').strip()
