"""Default-instance construction for target classes."""

import logging
from typing import Any, Type

from privreflect.config import get_instance_factory
from privreflect.exceptions import ReflectiveInvocationFailure

logger = logging.getLogger(__name__)


def create_default_instance(target_class: Type) -> Any:
    """Build an instance of target_class with the configured instance factory.

    Raises:
        ReflectiveInvocationFailure: If the factory raises, or returns
            something that is not an instance of target_class
    """
    factory = get_instance_factory()
    try:
        instance = factory(target_class)
    except Exception as e:
        raise ReflectiveInvocationFailure(
            f"Could not construct a default instance of {target_class.__qualname__}",
            cause=e,
            context={'target_class': target_class},
        ) from e

    if not isinstance(instance, target_class):
        raise ReflectiveInvocationFailure(
            f"Instance factory returned {type(instance).__qualname__}, "
            f"expected an instance of {target_class.__qualname__}",
            context={'target_class': target_class},
        )

    logger.debug(f"Constructed default instance of {target_class.__qualname__}")
    return instance
