"""
Reflective helpers for testing the private surface of a class.

This package lets a test set and read non-public fields and call non-public
methods (instance, static and class methods) of a class under test, without
the class exposing any test-only API.

Key Features:
- Type-tagged arguments: every argument carries its declared type
- Exact-type overload resolution (bool is not int, list[str] is not list)
- Private name mangling handled for "__name" members
- Access hooks (__setattr__, frozen dataclasses) bypassed per call
- Small, stable error taxonomy with the original cause preserved

Quick Start:
    >>> from privreflect import ReflectionTestHelper
    >>>
    >>> class Greeter:
    ...     def _greet(self, name: str) -> str:
    ...         return f"hello {name}"
    >>>
    >>> ReflectionTestHelper.from_class(Greeter).add_argument(str, "bob").invoke("_greet")
    'hello bob'

Modules:
    - parameter: Parameter and ParameterList (type-tagged arguments)
    - field_accessor: Field get/set bypassing visibility
    - method_invoker: Overload resolution and invocation
    - helper: ReflectionTestHelper facade
    - instantiation: Default-instance construction
    - introspection: Name mangling and static member lookup
    - config: Pluggable behaviours (instance factory, field type checks)
    - exceptions: Error taxonomy
"""

# Errors
from privreflect.exceptions import (
    ReflectionHelperError,
    InvalidArgumentType,
    NoParametersSet,
    EmptyMethodName,
    ReflectiveAccessFailure,
    ReflectiveInvocationFailure,
)

# Parameters
from privreflect.parameter import Parameter, ParameterList

# Accessors
from privreflect.field_accessor import FieldAccessor
from privreflect.method_invoker import Binding, MethodInvoker, MethodSignature, collect_signatures

# Facade
from privreflect.helper import ReflectionTestHelper

# Instantiation
from privreflect.instantiation import create_default_instance

# Configuration
from privreflect.config import (
    set_instance_factory,
    get_instance_factory,
    set_strict_field_types,
    is_strict_field_types,
    reset_config,
)

__all__ = [
    # Errors
    'ReflectionHelperError',
    'InvalidArgumentType',
    'NoParametersSet',
    'EmptyMethodName',
    'ReflectiveAccessFailure',
    'ReflectiveInvocationFailure',
    # Parameters
    'Parameter',
    'ParameterList',
    # Accessors
    'FieldAccessor',
    'Binding',
    'MethodInvoker',
    'MethodSignature',
    'collect_signatures',
    # Facade
    'ReflectionTestHelper',
    # Instantiation
    'create_default_instance',
    # Configuration
    'set_instance_factory',
    'get_instance_factory',
    'set_strict_field_types',
    'is_strict_field_types',
    'reset_config',
]

__version__ = '1.0.0'
__description__ = 'Reflective helpers for testing private members'
