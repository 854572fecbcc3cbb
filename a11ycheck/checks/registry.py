"""
Registry mapping fully-qualified kind names to classes.

Checks, question types, answer types and question handlers are written to the
wire as strings. Decoding turns those strings back into classes by looking them
up here; nothing is imported by name at decode time. The default registry holds
the built-in kinds plus the kinds exported by the modules listed in the
`registry.extension_modules` setting.
"""

import importlib
import logging
from typing import Iterable
from typing import TypeVar

from a11ycheck.settings import get_extension_modules

logger = logging.getLogger(__name__)

T = TypeVar("T")

EXTENSION_KINDS_ATTRIBUTE = "A11YCHECK_KINDS"


class UnknownKindError(LookupError):
    """
    Raised when a kind name does not resolve to a registered class.

    The offending name is kept on `kind_name` for diagnostics.
    """

    def __init__(self, kind_name: str, expected: type | None = None):
        message = f"Unknown kind '{kind_name}'"
        if expected is not None:
            message += f" (expected a {expected.__name__})"
        super().__init__(message)
        self.kind_name = kind_name
        self.expected = expected


class KindConflictError(ValueError):
    """Raised when two different classes are registered under the same name."""

    pass


def kind_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


class KindRegistry:
    def __init__(self, kinds: Iterable[type] = ()):
        self._kinds: dict[str, type] = {}
        self.register_all(kinds)

    def register(self, cls: type) -> type:
        """
        Register a class under its fully-qualified name.

        Registering the same class twice is a no-op. Returns the class so the method
        can be used as a decorator.
        """
        name = kind_name(cls)
        existing = self._kinds.get(name)
        if existing is not None and existing is not cls:
            raise KindConflictError(
                f"Kind '{name}' is already registered to a different class"
            )
        self._kinds[name] = cls
        logger.debug("Registered kind %s", name)
        return cls

    def register_all(self, classes: Iterable[type]) -> None:
        for cls in classes:
            self.register(cls)

    def resolve(self, name: str) -> type | None:
        return self._kinds.get(name)

    def require(self, name: str, base: type[T]) -> type[T]:
        """
        Resolve `name` to a registered subclass of `base`.

        Raises:
            UnknownKindError: If nothing is registered under `name`, or the registered
                class is not a subclass of `base`.
        """
        cls = self._kinds.get(name)
        if cls is None or not issubclass(cls, base):
            logger.warning(
                "Could not resolve kind '%s' to a %s", name, base.__name__
            )
            raise UnknownKindError(name, base)
        return cls

    def names(self) -> list[str]:
        return sorted(self._kinds)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, type):
            return self._kinds.get(kind_name(item)) is item
        return item in self._kinds

    def __len__(self) -> int:
        return len(self._kinds)


def load_extension_modules(
    module_names: Iterable[str], registry: KindRegistry
) -> None:
    """
    Import each module and register the classes listed in its `A11YCHECK_KINDS`.

    :param module_names: Dotted module names, e.g. ``["mycompany.a11y.checks"]``.
    :param registry: The registry to populate.
    """
    for module_name in module_names:
        module = importlib.import_module(module_name)
        kinds = getattr(module, EXTENSION_KINDS_ATTRIBUTE, None)
        if kinds is None:
            logger.warning(
                "Extension module %s does not define %s, skipping",
                module_name,
                EXTENSION_KINDS_ATTRIBUTE,
            )
            continue
        registry.register_all(kinds)
        logger.info(
            "Registered %d kinds from extension module %s", len(kinds), module_name
        )


_default_registry: KindRegistry | None = None


def build_registry(extension_modules: Iterable[str] | None = None) -> KindRegistry:
    """Create a registry holding the built-in kinds and the given (or configured) extensions."""
    from a11ycheck.checks.data import BUILTIN_KINDS

    registry = KindRegistry(BUILTIN_KINDS)
    if extension_modules is None:
        extension_modules = get_extension_modules()
    load_extension_modules(extension_modules, registry)
    return registry


def get_default_registry() -> KindRegistry:
    global _default_registry
    if _default_registry is None:
        _default_registry = build_registry()
    return _default_registry


def reset_default_registry() -> None:
    global _default_registry
    _default_registry = None
