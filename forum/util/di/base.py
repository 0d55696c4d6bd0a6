"""Provider metadata and implementation selection.

Every provider derives from ``ProviderBase``. A provider with subclasses is a
mockable component: its subclasses are the production and mock variants,
told apart by ``__is_mock__``. Providers without subclasses are used as-is.
"""

from typing import ClassVar, Iterable, Literal, Type

from dishka import Provider

Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    Attributes:
        __mock_component__: Component name of a mockable provider base
        __is_mock__: Whether this variant is the mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False


def is_mockable(base: Type[ProviderBase]) -> bool:
    """Whether a provider base has production and mock variants."""
    return bool(base.__subclasses__())


def mockable_components(providers: Iterable[Type[ProviderBase]]) -> set[str]:
    """Names of the components that can be swapped for mocks."""
    return {
        base.__mock_component__
        for base in providers
        if is_mockable(base) and base.__mock_component__ is not None
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for a base.

    Args:
        base: Provider base class
        use_mock: Whether to pick the mock variant of a mockable component

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the requested variant does not exist
    """
    if not is_mockable(base):
        return base

    impl = next(
        (c for c in base.__subclasses__() if c.__is_mock__ == use_mock),
        None,
    )
    if impl is None:
        kind = "mock" if use_mock else "production"
        raise ValueError(f"No {kind} implementation for {base.__mock_component__}")
    return impl


def resolve_providers(
    providers: Iterable[Type[ProviderBase]],
    mocked: set[str] | None = None,
) -> list[Provider]:
    """Instantiate one provider per base.

    Args:
        providers: Provider bases, in registration order
        mocked: Components to serve from their mock variant

    Returns:
        Provider instances ready for ``make_async_container``

    Raises:
        ValueError: If a mocked component is unknown or has no mock
    """
    providers = list(providers)
    mocked = mocked or set()

    unknown = mocked - mockable_components(providers)
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in providers
    ]
