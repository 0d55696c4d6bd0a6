"""Dependency injection module.

``PROVIDERS`` lists provider bases in registration order. Containers are
built from it by ``resolve_providers``, which swaps mockable components for
their mock variant on request.
"""

from typing import Type

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import (
    Component,
    ProviderBase,
    get_provider,
    mockable_components,
    resolve_providers,
)
from forum.util.di.core import ProdConfigProvider
from forum.util.di.persistence import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdApplicationProvider,
    # Mockable
    PersistenceProvider,
]

__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    "resolve_providers",
    "ProdConfigProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
