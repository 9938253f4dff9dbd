"""
Framework configuration (pluggable behaviours).

Module-level settings shared by every helper in the process:
- instance factory: how a default instance of a target class is built
- strict field types: whether field assignments are checked against annotations

Tests that change these should restore them with reset_config().
"""

from typing import Any, Callable, Optional, Type


InstanceFactory = Callable[[Type], Any]


def _construct_with_no_arguments(target_class: Type) -> Any:
    return target_class()


_instance_factory: Optional[InstanceFactory] = None
_strict_field_types: bool = True


def set_instance_factory(factory: Optional[InstanceFactory]) -> None:
    """Set the factory used to build default instances.

    Args:
        factory: Callable taking the target class and returning an instance of it.
                 None restores the default (calling the class with no arguments).
    """
    global _instance_factory
    _instance_factory = factory


def get_instance_factory() -> InstanceFactory:
    """Get the configured instance factory, or the no-argument default."""
    return _instance_factory if _instance_factory is not None else _construct_with_no_arguments


def set_strict_field_types(strict: bool) -> None:
    """Enable or disable annotation checks on field assignment."""
    global _strict_field_types
    _strict_field_types = bool(strict)


def is_strict_field_types() -> bool:
    return _strict_field_types


def reset_config() -> None:
    """Restore every setting to its default."""
    global _instance_factory, _strict_field_types
    _instance_factory = None
    _strict_field_types = True
