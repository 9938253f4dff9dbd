"""
Field access that bypasses visibility.

Reads go through object.__getattribute__ and writes through object.__setattr__,
so private names, frozen dataclasses and classes that guard their attributes
with __getattribute__/__setattr__ hooks are all reachable. No state on the
class or instance is changed apart from the assigned field itself.
"""

import logging
from typing import Any, Optional, get_origin

from privreflect.config import is_strict_field_types
from privreflect.exceptions import ReflectiveAccessFailure
from privreflect.introspection import describe_type, resolve_field_name, resolve_type_hints

logger = logging.getLogger(__name__)

# int is acceptable wherever float is declared, int/float wherever complex is
_NUMERIC_PROMOTIONS = {
    float: (int,),
    complex: (int, float),
}


class FieldAccessor:
    """Get and set named fields on an instance by introspective lookup."""

    @staticmethod
    def set_field_value(instance: Any, field_name: str, value: Any) -> None:
        """Assign value to the field called field_name on instance.

        Args:
            instance: Object whose field is written
            field_name: Field name as written in the class body ("__x" is mangled)
            value: New value, may be None

        Raises:
            ReflectiveAccessFailure: If the field does not exist, the value does
                not fit the declared field type, or the runtime refuses the write
        """
        storage_name = FieldAccessor._require_field(instance, field_name)
        FieldAccessor._check_assignable(instance, storage_name, value)
        try:
            object.__setattr__(instance, storage_name, value)
        except (AttributeError, TypeError) as e:
            raise ReflectiveAccessFailure(
                f"Cannot set field '{field_name}' on {type(instance).__qualname__}",
                cause=e,
                context={'field_name': field_name, 'target_class': type(instance)},
            ) from e
        logger.debug(f"Set {type(instance).__qualname__}.{storage_name} = {value!r}")

    @staticmethod
    def get_field_value(instance: Any, field_name: str) -> Any:
        """Return the current value of the field called field_name on instance.

        Raises:
            ReflectiveAccessFailure: If the field does not exist or holds no value
        """
        storage_name = FieldAccessor._require_field(instance, field_name)
        try:
            value = object.__getattribute__(instance, storage_name)
        except AttributeError as e:
            raise ReflectiveAccessFailure(
                f"Field '{field_name}' on {type(instance).__qualname__} has no value",
                cause=e,
                context={'field_name': field_name, 'target_class': type(instance)},
            ) from e
        logger.debug(f"Got {type(instance).__qualname__}.{storage_name} = {value!r}")
        return value

    @staticmethod
    def _require_field(instance: Any, field_name: Optional[str]) -> str:
        if field_name is not None and not isinstance(field_name, str):
            cause = TypeError(f"field name must be str, not {type(field_name).__qualname__}")
            raise ReflectiveAccessFailure(
                f"Invalid field name {field_name!r}",
                cause=cause,
                context={'field_name': field_name, 'target_class': type(instance)},
            ) from cause
        if not field_name or not field_name.strip():
            raise ReflectiveAccessFailure(
                "Field name must not be empty.",
                context={'target_class': type(instance)},
            )

        storage_name = resolve_field_name(instance, field_name)
        if storage_name is None:
            cause = AttributeError(f"{type(instance).__qualname__!r} object has no field {field_name!r}")
            raise ReflectiveAccessFailure(
                f"No field '{field_name}' declared on {type(instance).__qualname__}",
                cause=cause,
                context={'field_name': field_name, 'target_class': type(instance)},
            ) from cause
        return storage_name

    @staticmethod
    def _check_assignable(instance: Any, storage_name: str, value: Any) -> None:
        """Reject values that cannot be stored in a field declared as a plain class."""
        if value is None or not is_strict_field_types():
            return

        declared = resolve_type_hints(type(instance)).get(storage_name)
        if not isinstance(declared, type) or get_origin(declared) is not None or declared is object:
            return
        if isinstance(value, declared) or isinstance(value, _NUMERIC_PROMOTIONS.get(declared, ())):
            return

        cause = TypeError(
            f"{type(value).__qualname__} is not assignable to {describe_type(declared)}"
        )
        raise ReflectiveAccessFailure(
            f"Cannot set field '{storage_name}' on {type(instance).__qualname__}",
            cause=cause,
            context={'field_name': storage_name, 'declared_type': declared, 'value': value},
        ) from cause
