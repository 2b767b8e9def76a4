from beanwire.catalog import BeanCatalog, BeanDefinition, StaticBeanCatalog
from beanwire.container import Container
from beanwire.exceptions import (
    AmbiguousConstructorError,
    BeanwireError,
    CircularDependencyError,
    DependencyInferenceError,
    DuplicateBeanNameError,
    InvalidBeanDefinitionError,
    TypeMismatchError,
    UnknownBeanError,
)
from beanwire.lock_mode import LockMode
from beanwire.naming import bean_name_for, decapitalize

__all__ = [
    "AmbiguousConstructorError",
    "BeanCatalog",
    "BeanDefinition",
    "BeanwireError",
    "CircularDependencyError",
    "Container",
    "DependencyInferenceError",
    "DuplicateBeanNameError",
    "InvalidBeanDefinitionError",
    "LockMode",
    "StaticBeanCatalog",
    "TypeMismatchError",
    "UnknownBeanError",
    "bean_name_for",
    "decapitalize",
]
