"""
Fluent facade for driving the private surface of a class under test.

Usage:
    from privreflect import ReflectionTestHelper

    helper = ReflectionTestHelper.from_class(Account)
    helper.set_field_value('__balance', 100)
    result = helper.add_argument(int, 30).invoke('_withdraw')
    assert helper.get_field_value('__balance') == 70

A helper is a scratch object for one test: arguments accumulate across calls
until reset_arguments(), and it carries no locking.
"""

import logging
from typing import Any, Generic, Optional, Tuple, Type, TypeVar

from privreflect.field_accessor import FieldAccessor
from privreflect.instantiation import create_default_instance
from privreflect.method_invoker import MethodInvoker
from privreflect.parameter import Parameter, ParameterList

logger = logging.getLogger(__name__)

R = TypeVar('R')


class ReflectionTestHelper(Generic[R]):
    """
    Session binding one target class (and optionally an instance) to a
    ParameterList, a FieldAccessor and a MethodInvoker.

    When no instance is supplied, one is constructed on first need with the
    configured instance factory and reused for every later field access and
    instance call on this helper. Static calls never construct an instance.
    """

    def __init__(self, target_class: Type, instance: Any = None):
        if not isinstance(target_class, type):
            raise TypeError(f"target_class must be a class, got {target_class!r}")
        if instance is not None and not isinstance(instance, target_class):
            raise TypeError(
                f"instance must be a {target_class.__qualname__}, got {type(instance).__qualname__}"
            )

        self._target_class = target_class
        self._instance = instance
        self._parameter_list = ParameterList()
        self._method_invoker: MethodInvoker[R] = MethodInvoker(
            target_class, self._parameter_list, receiver_supplier=lambda: self.instance
        )

    @classmethod
    def from_class(cls, target_class: Type, instance: Any = None) -> 'ReflectionTestHelper[R]':
        """Bind a helper to target_class, optionally with an existing instance."""
        return cls(target_class, instance)

    @classmethod
    def from_instance(cls, instance: Any) -> 'ReflectionTestHelper[R]':
        """Bind a helper to an existing instance and its runtime class."""
        if instance is None:
            raise TypeError("instance must not be None")
        return cls(type(instance), instance)

    @property
    def target_class(self) -> Type:
        return self._target_class

    @property
    def instance(self) -> Any:
        """The bound instance, constructed on first access if none was supplied."""
        if self._instance is None:
            logger.debug(f"No instance bound for {self._target_class.__qualname__}, constructing one")
            self._instance = create_default_instance(self._target_class)
        return self._instance

    @property
    def parameters(self) -> Tuple[Parameter, ...]:
        return self._parameter_list.parameters()

    def add_argument(self, argument_type: Any, argument_value: Any = None) -> 'ReflectionTestHelper[R]':
        """
        Add a typed argument for the next invocation.

        The type must be exactly the declared parameter type of the target
        method. The value may be None.

        Raises:
            InvalidArgumentType: If argument_type is None
        """
        self._method_invoker.add_argument(argument_type, argument_value)
        return self

    def reset_arguments(self) -> 'ReflectionTestHelper[R]':
        """Drop every argument added so far."""
        self._parameter_list.clear()
        return self

    def set_field_value(self, field_name: str, value: Any) -> 'ReflectionTestHelper[R]':
        """
        Set a field on the bound instance.

        Raises:
            ReflectiveAccessFailure: If the field cannot be found or written
        """
        FieldAccessor.set_field_value(self.instance, field_name, value)
        return self

    def get_field_value(self, field_name: str) -> Any:
        """
        Read a field from the bound instance.

        Raises:
            ReflectiveAccessFailure: If the field cannot be found or read
        """
        return FieldAccessor.get_field_value(self.instance, field_name)

    def invoke(self, method_name: Optional[str]) -> R:
        """
        Invoke a method with the arguments added so far.

        Raises:
            EmptyMethodName: If method_name is None or blank
            ReflectiveInvocationFailure: If the method cannot be resolved or called
        """
        return self._method_invoker.invoke(method_name, is_static=False)

    def invoke_static(self, method_name: Optional[str]) -> R:
        """
        Invoke a staticmethod or classmethod without touching any instance.

        Raises:
            EmptyMethodName: If method_name is None or blank
            ReflectiveInvocationFailure: If the method cannot be resolved, needs
                an instance, or raises
        """
        return self._method_invoker.invoke(method_name, is_static=True)

    def __repr__(self) -> str:
        return (f"ReflectionTestHelper(target_class={self._target_class.__qualname__}, "
                f"instance={self._instance!r}, parameters={self._parameter_list!r})")
