"""Mode registry.

A mode is any module in colour_by_value.modes with a module-level `mode`
object. It is registered under mode.name and its module docstring becomes
the text printed by `colour-by-value help <mode>`.
"""

import importlib
import pkgutil
from types import ModuleType

import colour_by_value.modes as modes_pkg
from colour_by_value.core.types import Mode

_registry: dict[str, Mode] = {}


def _mode_modules() -> list[ModuleType]:
    for _finder, name, _ispkg in pkgutil.iter_modules(modes_pkg.__path__):
        if not name.startswith('_'):
            importlib.import_module(f'{modes_pkg.__name__}.{name}')
    # imported submodules are bound on the package, so this also sees the
    # explicit imports in modes/__init__.py when pkgutil lists nothing
    unique = {id(m): m for m in vars(modes_pkg).values() if isinstance(m, ModuleType)}
    return sorted(unique.values(), key=lambda m: m.__name__)


def _register(module: ModuleType) -> None:
    found = getattr(module, 'mode', None)
    if not isinstance(found, Mode):
        return
    existing = _registry.get(found.name)
    if existing is not None and existing is not found:
        raise ValueError(f'Mode name {found.name!r} is defined twice (second in {module.__name__})')
    found.doc = (module.__doc__ or '').strip()
    _registry[found.name] = found


def discover() -> dict[str, Mode]:
    """Register every mode module once and return the registry."""
    if not _registry:
        for module in _mode_modules():
            _register(module)
    return _registry


def get(name: str) -> Mode:
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown mode: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_modes() -> dict[str, Mode]:
    return discover()
