"""
Loader of externally supplied factories.

Callers extend the plugin by naming a class and the import path entries
("classpath") it can be found on. The loader imports the class, checks that
it implements the expected capability, instantiates it without arguments
and caches the instance for the rest of the run.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from types import ModuleType
from typing import Any

from .errors import FactoryResolutionError

logger = logging.getLogger(__name__)


@contextmanager
def extended_import_path(entries: Sequence[str]) -> Iterator[None]:
    """Temporarily put `entries` in front of the interpreter import path.

    Modules imported from the entries are dropped from `sys.modules` on exit,
    so a later resolution only finds them through a classpath holding them.
    """
    original = list(sys.path)
    loaded = set(sys.modules)
    sys.path[:0] = [entry for entry in entries if entry not in sys.path]
    importlib.invalidate_caches()
    try:
        yield
    finally:
        sys.path[:] = original
        roots = [Path(entry).resolve() for entry in entries]
        for module_name in [name for name in sys.modules if name not in loaded]:
            if _is_under(sys.modules[module_name], roots):
                del sys.modules[module_name]


def _is_under(module: ModuleType, roots: Sequence[Path]) -> bool:
    location = getattr(module, "__file__", None)
    if location is None:
        # Namespace packages only have a search path
        location = next(iter(getattr(module, "__path__", [])), None)
    if location is None:
        return False
    path = Path(location).resolve()
    return any(path.is_relative_to(root) for root in roots)


class ExternalFactoryLoader:
    """Resolves factory instances by fully-qualified class name.

    Names are dotted paths (`acme.codegen.UuidMethods`) or entry-point style
    paths (`acme.codegen:UuidMethods`).
    """

    def __init__(self, classpath: Sequence[str | Path] = ()):
        """
        Initialize the loader.

        Args:
            classpath: Directories or archives searched before the default import path
        """
        self.classpath: tuple[str, ...] = tuple(str(entry) for entry in classpath)
        self._instances: dict[tuple[tuple[str, ...], str], Any] = {}

    def resolve(self, name: str, expected: type = object) -> Any:
        """
        Get the instance of the named class.

        Args:
            name: Fully-qualified name of the class
            expected: Capability base class the class must derive from

        Returns:
            The cached instance, created on the first request

        Raises:
            FactoryResolutionError: If the class cannot be found, is not a
                concrete subclass of `expected`, or cannot be instantiated
                without arguments
        """
        key = (self.classpath, name)
        instance = self._instances.get(key)
        if instance is None:
            instance = self._instantiate(self._load_class(name), name)
            self._instances[key] = instance
            logger.debug("Resolved factory %s from classpath %s", name, self.classpath)

        if not isinstance(instance, expected):
            raise self._error(name, f"class does not implement `{expected.__module__}.{expected.__qualname__}`")
        return instance

    def _load_class(self, name: str) -> type:
        if not name or not name.strip():
            raise self._error(name, "factory class name is blank")

        with extended_import_path(self.classpath):
            try:
                resolved = pkgutil.resolve_name(name.strip())
            except (ImportError, AttributeError, ValueError) as e:
                raise self._error(name, f"class not found ({e})") from e
            except Exception as e:
                # The module was found but its body failed
                raise self._error(name, f"cannot import ({type(e).__name__}: {e})") from e

        if not inspect.isclass(resolved):
            raise self._error(name, f"`{name}` is not a class")
        if inspect.isabstract(resolved):
            raise self._error(name, "class is abstract")
        return resolved

    def _instantiate(self, cls: type, name: str) -> Any:
        try:
            return cls()
        except Exception as e:
            raise self._error(name, f"cannot instantiate with a no-argument constructor ({type(e).__name__}: {e})") from e

    def _error(self, name: str, reason: str) -> FactoryResolutionError:
        return FactoryResolutionError(name, self.classpath, reason)


def resolve(classpath: Sequence[str | Path], name: str, expected: type = object) -> Any:
    """Resolve a single factory with a loader of its own."""
    return ExternalFactoryLoader(classpath).resolve(name, expected)
