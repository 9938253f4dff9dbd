"""
Reflective method invocation with exact-type overload resolution.

Overload candidates for a name are read statically from the target class:

- plain functions (instance methods, implicit self)
- staticmethod (no implicit parameter)
- classmethod (implicit cls, bound to the target class)
- functools.singledispatchmethod / singledispatch: one candidate per
  registered implementation, with the dispatch key as the declared type of
  the first explicit parameter

A candidate matches when its declared positional parameter types are equal,
in order, to the types in the ParameterList. There is no assignability:
a parameter declared as bool is only matched by a bool tag, never int.
"""

import functools
import inspect
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Iterator, List, Optional, Tuple, Type, TypeVar

from privreflect.exceptions import EmptyMethodName, ReflectiveInvocationFailure
from privreflect.instantiation import create_default_instance
from privreflect.introspection import MISSING, describe_type, lookup_static, positional_parameter_types
from privreflect.parameter import ParameterList

logger = logging.getLogger(__name__)

R = TypeVar('R')


class Binding(Enum):
    """What a resolved member is bound to when called."""
    INSTANCE = 'instance'
    CLASS = 'class'
    STATIC = 'static'


@dataclass(frozen=True)
class MethodSignature:
    """One callable overload of a method name."""
    owner: Type
    name: str
    parameter_types: Tuple[Any, ...]
    binding: Binding
    function: Callable = field(compare=False, repr=False)

    @property
    def is_static(self) -> bool:
        """True when the member can be called without an instance."""
        return self.binding is not Binding.INSTANCE

    def describe(self) -> str:
        params = ', '.join(describe_type(t) for t in self.parameter_types)
        return f"{self.owner.__qualname__}.{self.name}({params})"


def _unwrap(raw: Any) -> Optional[Tuple[Callable, Binding]]:
    if isinstance(raw, staticmethod):
        return raw.__func__, Binding.STATIC
    if isinstance(raw, classmethod):
        return raw.__func__, Binding.CLASS
    if inspect.isfunction(raw):
        return raw, Binding.INSTANCE
    return None


def _is_singledispatch_function(func: Callable) -> bool:
    return hasattr(func, 'registry') and hasattr(func, 'dispatch')


def _signature(owner: Type, name: str, func: Callable, binding: Binding,
               dispatch_key: Any = None) -> Iterator[MethodSignature]:
    declared = positional_parameter_types(func, skip_first=binding is not Binding.STATIC)
    if declared is None:
        logger.debug(f"Skipping {owner.__qualname__}.{name}: signature cannot be matched positionally")
        return
    if dispatch_key is not None and dispatch_key is not object and declared:
        declared = (dispatch_key,) + declared[1:]
    yield MethodSignature(owner=owner, name=name, parameter_types=declared,
                          binding=binding, function=func)


def _expand(owner: Type, name: str, raw: Any, dispatch_key: Any = None) -> Iterator[MethodSignature]:
    """Yield every overload the raw class attribute provides."""
    if isinstance(raw, functools.singledispatchmethod):
        for key, implementation in raw.dispatcher.registry.items():
            yield from _expand(owner, name, implementation, key)
        return

    unwrapped = _unwrap(raw)
    if unwrapped is None:
        return
    func, binding = unwrapped

    if dispatch_key is None and _is_singledispatch_function(func):
        for key, implementation in func.registry.items():
            yield from _signature(owner, name, implementation, binding, key)
        return

    yield from _signature(owner, name, func, binding, dispatch_key)


def collect_signatures(target_class: Type, method_name: str) -> List[MethodSignature]:
    """All resolvable overloads of method_name on target_class (MRO included)."""
    raw = lookup_static(target_class, method_name)
    if raw is MISSING:
        return []
    return list(_expand(target_class, method_name, raw))


class MethodInvoker(Generic[R]):
    """
    Resolve and call a named method on a target class.

    Arguments accumulate in the bound ParameterList and are not cleared by
    invoke(). Instance calls get their receiver from receiver_supplier, which
    defaults to constructing a fresh default instance of the target class.
    """

    def __init__(self, target_class: Type, parameter_list: Optional[ParameterList] = None,
                 receiver_supplier: Optional[Callable[[], Any]] = None):
        self._target_class = target_class
        self._parameter_list = parameter_list if parameter_list is not None else ParameterList()
        self._receiver_supplier = receiver_supplier or (lambda: create_default_instance(target_class))

    @property
    def parameter_list(self) -> ParameterList:
        return self._parameter_list

    def add_argument(self, argument_type: Any, argument_value: Any = None) -> 'MethodInvoker[R]':
        """Append a typed argument; returns self for chaining."""
        self._parameter_list.add(argument_type, argument_value)
        return self

    def signatures(self, method_name: str) -> List[MethodSignature]:
        return collect_signatures(self._target_class, method_name)

    def invoke(self, method_name: Optional[str], is_static: bool = False) -> R:
        """
        Invoke method_name with the accumulated arguments.

        Args:
            method_name: Name as written in the class body ("__x" is mangled)
            is_static: Call without a receiver; the member must be a
                       staticmethod or classmethod

        Returns:
            Whatever the invoked method returns

        Raises:
            EmptyMethodName: If method_name is None or blank
            ReflectiveInvocationFailure: If method_name is not a str, no overload
                matches, the receiver cannot be constructed, or the method
                itself raises
        """
        if method_name is None or (isinstance(method_name, str) and not method_name.strip()):
            raise EmptyMethodName()
        if not isinstance(method_name, str):
            cause = TypeError(f"method name must be str, not {type(method_name).__qualname__}")
            raise ReflectiveInvocationFailure(
                f"Invalid method name {method_name!r}",
                cause=cause,
                context={'method_name': method_name, 'target_class': self._target_class},
            ) from cause

        if self._parameter_list.is_empty():
            requested_types: Tuple[Any, ...] = ()
            values: Tuple[Any, ...] = ()
        else:
            requested_types = self._parameter_list.types()
            values = self._parameter_list.values()

        signature = self._resolve(method_name, requested_types)
        if is_static and not signature.is_static:
            cause = TypeError(f"{signature.describe()} requires an instance")
            raise ReflectiveInvocationFailure(
                f"Cannot invoke {signature.describe()} statically",
                cause=cause,
                context={'method_name': method_name, 'target_class': self._target_class},
            ) from cause

        arguments = self._bind_receiver(signature) + values
        logger.debug(f"Invoking {signature.describe()} with {len(values)} argument(s)")
        try:
            return signature.function(*arguments)
        except Exception as e:
            raise ReflectiveInvocationFailure(
                f"Invocation of {signature.describe()} failed",
                cause=e,
                context={'method_name': method_name, 'target_class': self._target_class},
            ) from e

    def _resolve(self, method_name: str, requested_types: Tuple[Any, ...]) -> MethodSignature:
        """Pick the overload whose declared types equal requested_types."""
        try:
            signatures = self.signatures(method_name)
        except Exception as e:
            raise ReflectiveInvocationFailure(
                f"Cannot read the overloads of '{method_name}' on {self._target_class.__qualname__}",
                cause=e,
                context={'method_name': method_name, 'target_class': self._target_class},
            ) from e
        requested = ', '.join(describe_type(t) for t in requested_types)
        logger.debug(f"🔍 RESOLVE: {self._target_class.__qualname__}.{method_name}({requested}) "
                     f"among {len(signatures)} candidate(s)")

        if not signatures:
            cause = AttributeError(f"{self._target_class.__qualname__!r} has no method {method_name!r}")
            raise ReflectiveInvocationFailure(
                f"No method '{method_name}' on {self._target_class.__qualname__}",
                cause=cause,
                context={'method_name': method_name, 'target_class': self._target_class},
            ) from cause

        for signature in signatures:
            if signature.parameter_types == requested_types:
                logger.debug(f"🔍 RESOLVED: {signature.describe()} ({signature.binding.value})")
                return signature

        available = '; '.join(signature.describe() for signature in signatures)
        cause = TypeError(f"no overload of {method_name!r} takes ({requested}); available: {available}")
        raise ReflectiveInvocationFailure(
            f"No overload {self._target_class.__qualname__}.{method_name}({requested})",
            cause=cause,
            context={'method_name': method_name, 'target_class': self._target_class,
                     'requested_types': requested_types},
        ) from cause

    def _bind_receiver(self, signature: MethodSignature) -> Tuple[Any, ...]:
        if signature.binding is Binding.STATIC:
            return ()
        if signature.binding is Binding.CLASS:
            return (self._target_class,)
        return (self._receiver_supplier(),)

    def __repr__(self) -> str:
        return (f"MethodInvoker(target_class={self._target_class.__qualname__}, "
                f"parameters={self._parameter_list!r})")
