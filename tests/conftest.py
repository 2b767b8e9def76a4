"""Shared pytest fixtures for beanwire tests."""

import pytest

from beanwire.catalog import StaticBeanCatalog
from beanwire.container import Container
from beanwire.lock_mode import LockMode


@pytest.fixture()
def catalog() -> StaticBeanCatalog:
    """Empty in-memory catalog; tests define the beans they need."""
    return StaticBeanCatalog()


@pytest.fixture()
def container(catalog: StaticBeanCatalog) -> Container:
    """Thread-locked container bound to the ``catalog`` fixture."""
    return Container(catalog)


@pytest.fixture()
def unlocked_container(catalog: StaticBeanCatalog) -> Container:
    """Container with locking disabled."""
    return Container(catalog, lock_mode=LockMode.NONE)
