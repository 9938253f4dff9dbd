"""
Static introspection primitives shared by the field accessor and method invoker.

Nothing here triggers descriptors, __getattr__ or __getattribute__ hooks on the
target: members are read from class dictionaries with inspect.getattr_static
and instance state with object.__getattribute__.
"""

import inspect
import logging
import types
import typing
from typing import Any, Callable, Dict, Optional, Tuple, Type

logger = logging.getLogger(__name__)

MISSING = object()  # Distinguishes "attribute is None" from "no attribute"

# Raised by typing.get_type_hints and eval_str for annotations it cannot evaluate
_ANNOTATION_ERRORS = (NameError, TypeError, SyntaxError, AttributeError)

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def mangle_private_name(owner: Type, name: str) -> str:
    """Apply Python's private name mangling for members declared on owner.

    "__secret" declared in class Account is stored as "_Account__secret".
    Names that are not private (or are dunder names) are returned unchanged.
    """
    if not name.startswith('__') or name.endswith('__'):
        return name
    stripped_owner = owner.__name__.lstrip('_')
    if not stripped_owner:
        return name
    return f"_{stripped_owner}{name}"


def lookup_static(owner: Type, name: str) -> Any:
    """Find name on owner through its MRO without invoking descriptors.

    The private spelling is tried first, then the literal name.

    Returns:
        The raw class attribute (function, staticmethod, ...) or MISSING
    """
    mangled = mangle_private_name(owner, name)
    for candidate in dict.fromkeys((mangled, name)):
        value = inspect.getattr_static(owner, candidate, MISSING)
        if value is not MISSING:
            return value
    return MISSING


def own_annotations(obj: Any) -> Dict[str, Any]:
    """Annotations defined directly on obj, unevaluated where possible."""
    try:
        return dict(inspect.get_annotations(obj))
    except _ANNOTATION_ERRORS as e:
        logger.debug(f"Cannot read annotations of {obj!r}: {e}")
        return {}


def resolve_type_hints(obj: Any) -> Dict[str, Any]:
    """Resolved annotations of a function or class.

    Falls back to the raw annotations when a forward reference cannot be
    evaluated, so a bad annotation elsewhere does not hide the good ones.
    """
    try:
        return typing.get_type_hints(obj)
    except _ANNOTATION_ERRORS as e:
        logger.warning(f"Falling back to raw annotations for {obj!r}: {e!r}")
        if isinstance(obj, type):
            hints: Dict[str, Any] = {}
            for klass in reversed(obj.__mro__):
                hints.update(own_annotations(klass))
            return hints
        return own_annotations(obj)


def positional_parameter_types(func: Callable, skip_first: bool) -> Optional[Tuple[Any, ...]]:
    """Declared types of the explicit positional parameters of func.

    Annotations are taken as written, so "x: str = None" declares str on
    every supported Python version. Unannotated parameters are declared as
    object. The implicit receiver (self or cls) is dropped when skip_first
    is set.

    Returns:
        Tuple of declared types, or None when the signature can never be
        matched by an exact positional argument list (*args, a required
        keyword-only parameter, or no positional slot for the receiver).
    """
    signature = _read_signature(func)
    if signature is None:
        return None

    parameters = list(signature.parameters.values())
    if skip_first:
        if not parameters or parameters[0].kind not in _POSITIONAL_KINDS:
            return None
        parameters = parameters[1:]

    declared = []
    for parameter in parameters:
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind is inspect.Parameter.KEYWORD_ONLY:
            if parameter.default is inspect.Parameter.empty:
                return None
            continue
        if parameter.kind in _POSITIONAL_KINDS:
            annotation = parameter.annotation
            declared.append(object if annotation is inspect.Parameter.empty else annotation)
    return tuple(declared)


def _read_signature(func: Callable) -> Optional[inspect.Signature]:
    """Signature of func with evaluated annotations, or the raw ones if they cannot be evaluated."""
    try:
        return inspect.signature(func, eval_str=True)
    except _ANNOTATION_ERRORS as e:
        logger.warning(f"Falling back to raw annotations for {func!r}: {e!r}")
    except ValueError as e:
        logger.debug(f"No signature for {func!r}: {e}")
        return None

    try:
        return inspect.signature(func)
    except (TypeError, ValueError, NameError) as e:
        logger.debug(f"No signature for {func!r}: {e}")
        return None


def instance_dict(instance: Any) -> Dict[str, Any]:
    """The instance __dict__, or an empty dict for slotted/builtin objects."""
    try:
        return object.__getattribute__(instance, '__dict__')
    except AttributeError:
        return {}


def declared_field_names(owner: Type) -> set:
    """Names annotated on owner or any class in its MRO."""
    names = set()
    for klass in owner.__mro__:
        names.update(own_annotations(klass).keys())
    return names


def _is_plain_class_attribute(value: Any) -> bool:
    if value is MISSING:
        return False
    if isinstance(value, (staticmethod, classmethod, property)):
        return False
    if inspect.isroutine(value) or inspect.isclass(value):
        return False
    return not inspect.isdatadescriptor(value) or isinstance(value, types.MemberDescriptorType)


def has_field(instance: Any, name: str) -> bool:
    """Whether name is a field of instance.

    A field is an entry in the instance __dict__, a __slots__ member, an
    annotated name, or a plain (non-callable) class attribute.
    """
    if name in instance_dict(instance):
        return True
    owner = type(instance)
    if name in declared_field_names(owner):
        return True
    return _is_plain_class_attribute(inspect.getattr_static(owner, name, MISSING))


def resolve_field_name(instance: Any, name: str) -> Optional[str]:
    """Storage name of the field called name on instance's class, or None."""
    owner = type(instance)
    mangled = mangle_private_name(owner, name)
    for candidate in dict.fromkeys((mangled, name)):
        if has_field(instance, candidate):
            return candidate
    return None


def describe_type(declared_type: Any) -> str:
    """Short display form of a type tag, e.g. 'str' or 'list[int]'."""
    if isinstance(declared_type, type) and not typing.get_args(declared_type):
        return declared_type.__qualname__
    return repr(declared_type).replace('typing.', '')
