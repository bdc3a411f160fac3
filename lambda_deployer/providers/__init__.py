"""
Provider implementations package.

Auto-Registration:
    Importing this package triggers registration of all providers with
    the ProviderRegistry, because each provider's __init__.py calls
    ProviderRegistry.register() when imported.

Usage:
    import lambda_deployer.providers

    from lambda_deployer.core import ProviderRegistry
    provider = ProviderRegistry.get("aws")
"""

# Import provider modules to trigger auto-registration
from . import aws
