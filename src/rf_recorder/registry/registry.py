"""
Component Registry - Central registry for script stringifiers.

A host offers several stringifiers under human readable names, each with
the MIME type of the text it produces. This registry is the host side of
that arrangement; the translator itself only exposes its variants as data.

Example:
    >>> from rf_recorder.registry import register_stringifier, get_stringifier
    >>>
    >>> register_stringifier(MyStringifier(), "My format", "application/text")
    >>> stringifier = get_stringifier("My format")
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List

from rf_recorder.interfaces.stringifier import IStringifier
from rf_recorder.translator.stringifier import RobotFrameworkStringifier
from rf_recorder.translator.variants import BUILTIN_VARIANTS, MIME_TYPE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisteredStringifier:
    """
    A stringifier as offered to the host.

    Attributes:
        name: Unique human readable name
        stringifier: The stringifier instance
        mime_type: MIME type of the produced text
    """
    name: str
    stringifier: IStringifier
    mime_type: str = MIME_TYPE


class ComponentRegistry:
    """
    Central registry for stringifiers.

    Stringifiers are registered by name and can be retrieved for use by
    the host. Registering the same name twice is an error.
    """

    _stringifiers: Dict[str, RegisteredStringifier] = {}

    # Factory functions for lazy construction
    _stringifier_factories: Dict[str, Callable[[], RegisteredStringifier]] = {}

    # ==================== Stringifier Registration ====================

    @classmethod
    def register_stringifier(
        cls,
        stringifier: IStringifier,
        name: str,
        mime_type: str = MIME_TYPE,
    ) -> RegisteredStringifier:
        """
        Register a stringifier instance.

        Args:
            stringifier: The stringifier
            name: Unique name for the stringifier
            mime_type: MIME type of its output

        Returns:
            The registration entry

        Raises:
            ValueError: If the name is already registered
        """
        if name in cls._stringifiers or name in cls._stringifier_factories:
            raise ValueError(f"Stringifier '{name}' is already registered")
        entry = RegisteredStringifier(name=name, stringifier=stringifier, mime_type=mime_type)
        cls._stringifiers[name] = entry
        logger.debug(f"Registered stringifier '{name}' ({mime_type})")
        return entry

    @classmethod
    def register(
        cls,
        name: str,
        mime_type: str = MIME_TYPE,
    ) -> Callable[[type], type]:
        """
        Decorator registering an instance of a stringifier class.

        The class is instantiated without arguments.

        Example:
            >>> @ComponentRegistry.register("Plain text")
            >>> class PlainStringifier(IStringifier):
            ...     pass
        """
        def decorator(stringifier_class: type) -> type:
            cls.register_stringifier(stringifier_class(), name, mime_type)
            return stringifier_class
        return decorator

    @classmethod
    def register_stringifier_factory(
        cls,
        name: str,
        factory: Callable[[], RegisteredStringifier],
    ) -> None:
        """
        Register a factory function building a stringifier on first use.

        Raises:
            ValueError: If the name is already registered
        """
        if name in cls._stringifiers or name in cls._stringifier_factories:
            raise ValueError(f"Stringifier '{name}' is already registered")
        cls._stringifier_factories[name] = factory

    @classmethod
    def get_registration(cls, name: str) -> RegisteredStringifier:
        """
        Get a registration entry by name.

        Args:
            name: The registered name

        Returns:
            The registration entry

        Raises:
            ValueError: If the name is not registered
        """
        if name in cls._stringifiers:
            return cls._stringifiers[name]

        if name in cls._stringifier_factories:
            entry = cls._stringifier_factories.pop(name)()
            cls._stringifiers[name] = entry
            return entry

        raise ValueError(
            f"Unknown stringifier: '{name}'. Available stringifiers: {cls.list_stringifiers()}"
        )

    @classmethod
    def get_stringifier(cls, name: str) -> IStringifier:
        """Get a registered stringifier by name."""
        return cls.get_registration(name).stringifier

    @classmethod
    def list_stringifiers(cls) -> List[str]:
        """List registered names, in registration order."""
        names = list(cls._stringifiers.keys())
        names.extend(n for n in cls._stringifier_factories if n not in cls._stringifiers)
        return names

    @classmethod
    def list_registrations(cls) -> List[RegisteredStringifier]:
        """All registration entries, building lazily registered ones."""
        return [cls.get_registration(name) for name in cls.list_stringifiers()]

    # ==================== Utility Methods ====================

    @classmethod
    def clear_all(cls) -> None:
        """Clear all registries. Useful for testing."""
        cls._stringifiers.clear()
        cls._stringifier_factories.clear()


def register_builtin_stringifiers() -> List[RegisteredStringifier]:
    """
    Register the built-in Robot Framework variants.

    Variants already registered are left as they are, so calling this more
    than once is harmless.

    Returns:
        The registration entries of the built-in variants
    """
    entries = []
    for variant in BUILTIN_VARIANTS:
        if variant.name in ComponentRegistry.list_stringifiers():
            entries.append(ComponentRegistry.get_registration(variant.name))
            continue
        entries.append(ComponentRegistry.register_stringifier(
            RobotFrameworkStringifier(variant.config),
            variant.name,
            variant.mime_type,
        ))
    return entries


# ==================== Convenience Functions ====================

def register_stringifier(
    stringifier: IStringifier,
    name: str,
    mime_type: str = MIME_TYPE,
) -> RegisteredStringifier:
    """Convenience function for registering stringifiers."""
    return ComponentRegistry.register_stringifier(stringifier, name, mime_type)


def get_stringifier(name: str) -> IStringifier:
    """Get a stringifier by name."""
    return ComponentRegistry.get_stringifier(name)
