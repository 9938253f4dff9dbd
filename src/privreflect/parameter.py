"""
Type-tagged arguments for reflective invocation.

A Parameter carries an explicit declared type next to its value, and a
ParameterList keeps them in positional order. The declared types select the
overload to call; the values are passed to it.

Empty-list policy: types() and values() raise NoParametersSet on an empty
list. Callers that accept a zero-argument call check is_empty() first.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Tuple

from privreflect.exceptions import InvalidArgumentType, NoParametersSet


@dataclass(frozen=True)
class Parameter:
    """Immutable (declared_type, value) pair.

    The value may be None; the declared type may not.
    """
    declared_type: Any
    value: Any = None

    def __post_init__(self) -> None:
        if self.declared_type is None:
            raise InvalidArgumentType("Argument type must not be None.")

    @classmethod
    def of(cls, declared_type: Any, value: Any = None) -> 'Parameter':
        return cls(declared_type=declared_type, value=value)


class ParameterList:
    """Ordered, mutable list of Parameters.

    Insertion order is the positional argument order of the eventual call.
    types() and values() return tuples, so a lookup sees a fixed snapshot
    even if more arguments are added afterwards.
    """

    def __init__(self) -> None:
        self._parameters: List[Parameter] = []

    def add(self, argument_type: Any, argument_value: Any = None) -> None:
        """Append a parameter.

        Raises:
            InvalidArgumentType: If argument_type is None
        """
        self._parameters.append(Parameter.of(argument_type, argument_value))

    def types(self) -> Tuple[Any, ...]:
        """Declared types in insertion order.

        Raises:
            NoParametersSet: If the list is empty
        """
        self._require_parameters()
        return tuple(parameter.declared_type for parameter in self._parameters)

    def values(self) -> Tuple[Any, ...]:
        """Values in insertion order.

        Raises:
            NoParametersSet: If the list is empty
        """
        self._require_parameters()
        return tuple(parameter.value for parameter in self._parameters)

    def parameters(self) -> Tuple[Parameter, ...]:
        return tuple(self._parameters)

    def is_empty(self) -> bool:
        return not self._parameters

    def clear(self) -> None:
        self._parameters.clear()

    def _require_parameters(self) -> None:
        if not self._parameters:
            raise NoParametersSet()

    def __len__(self) -> int:
        return len(self._parameters)

    def __iter__(self) -> Iterator[Parameter]:
        return iter(tuple(self._parameters))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ParameterList):
            return NotImplemented
        return self._parameters == other._parameters

    def __repr__(self) -> str:
        return f"ParameterList(parameters={self._parameters!r})"
