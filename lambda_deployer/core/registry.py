"""
Name-based lookup of provider implementations.

A provider package registers its class when imported
(see providers/aws/__init__.py), and callers resolve it from the
`provider_name` carried by the DeploymentContext:

    provider = ProviderRegistry.get(context.provider_name)
    provider.initialize_clients(context.get_credentials(), context.region)

Importing `lambda_deployer.providers` loads every provider package.
"""

from typing import Dict, Type, TYPE_CHECKING

if TYPE_CHECKING:
    from .protocols import CloudProvider

from .exceptions import ProviderNotFoundError


class ProviderRegistry:
    """Class-level map of provider name to provider class."""

    _providers: Dict[str, Type['CloudProvider']] = {}

    @classmethod
    def register(cls, name: str, provider_class: Type['CloudProvider']) -> None:
        """
        Bind `name` to `provider_class`.

        Re-importing a provider package registers the same class again,
        which is a no-op.

        Raises:
            ValueError: `name` is already bound to another class
        """
        current = cls._providers.get(name)
        if current is None:
            cls._providers[name] = provider_class
        elif current is not provider_class:
            raise ValueError(
                f"Provider '{name}' already maps to {current.__name__}, "
                f"refusing {provider_class.__name__}"
            )

    @classmethod
    def get(cls, name: str) -> 'CloudProvider':
        """
        Instantiate the provider registered as `name`.

        Each call returns a new, uninitialized instance, so every deploy or
        destroy run resolves its own clients.

        Raises:
            ProviderNotFoundError: Nothing is registered under `name`
        """
        try:
            provider_class = cls._providers[name]
        except KeyError:
            raise ProviderNotFoundError(name, cls.list_providers()) from None
        return provider_class()

    @classmethod
    def list_providers(cls) -> list[str]:
        return sorted(cls._providers)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._providers

    @classmethod
    def clear(cls) -> None:
        """Forget every registration (test helper)."""
        cls._providers.clear()
