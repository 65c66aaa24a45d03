"""Dependency injection wiring.

``PROVIDERS`` lists one entry per concern. A concern whose base class has
subclasses (persistence) is mockable: the production subclass is used by
the app, the mock subclass (``__is_mock__ = True``) by the test container.
"""

from typing import Type

from blog.util.di.application import ProdApplicationProvider
from blog.util.di.base import Component, ProviderBase
from blog.util.di.core import ProdConfigProvider
from blog.util.di.domain import ProdDomainProvider
from blog.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a ``PROVIDERS`` entry to the class to instantiate.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Pick the mock subclass of a mockable concern

    Returns:
        ``base`` itself if it has no subclasses, else the matching subclass

    Raises:
        ValueError: If the requested implementation was never defined
            (mocks only exist once ``tests.di`` is imported)
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = base.__mock_component__ or base.__name__
    raise ValueError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
