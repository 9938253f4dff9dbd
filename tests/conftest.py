"""Pytest configuration and shared fixtures."""
import pytest

import privreflect.config as config_module
from privreflect import ReflectionTestHelper

from targets import CountingTarget, ReflectionStaticTestDataSet, ReflectionTestDataSet


@pytest.fixture(autouse=True)
def reset_framework_config():
    """Restore module-level configuration after each test."""
    original_factory = config_module._instance_factory
    original_strict = config_module._strict_field_types

    yield

    config_module._instance_factory = original_factory
    config_module._strict_field_types = original_strict


@pytest.fixture
def counting_target():
    """CountingTarget with its instance counter reset."""
    CountingTarget.instances_created = 0
    yield CountingTarget
    CountingTarget.instances_created = 0


@pytest.fixture
def data_set_helper():
    """Helper bound to the instance-method data set."""
    return ReflectionTestHelper.from_class(ReflectionTestDataSet)


@pytest.fixture(params=[ReflectionTestDataSet, ReflectionStaticTestDataSet],
                ids=['instance', 'static'])
def any_data_set(request):
    """Both data sets; every method name exists on each with the same signature."""
    return request.param
