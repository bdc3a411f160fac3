"""
Core abstractions for the Lambda deployer.

Modules:
    protocols: Interface definitions (CloudProvider and one reconciler per resource)
    context: DeploymentContext for dependency injection
    registry: ProviderRegistry for dynamic provider lookup
    config_loader: Configuration loading utilities
    factory: create_context() used by the CLI and REST API
    exceptions: Custom exception types for deployment operations
"""

from .protocols import CloudProvider, FunctionReconciler, RoleReconciler, UrlReconciler
from .context import DeploymentContext, ProjectConfig
from .registry import ProviderRegistry
from .exceptions import (
    ConfigurationError,
    DeploymentError,
    IncompleteResponseError,
    PreconditionFailedError,
    ProviderNotFoundError,
)

__all__ = [
    # Protocols
    "CloudProvider",
    "RoleReconciler",
    "FunctionReconciler",
    "UrlReconciler",
    # Context
    "DeploymentContext",
    "ProjectConfig",
    # Registry
    "ProviderRegistry",
    # Exceptions
    "DeploymentError",
    "ProviderNotFoundError",
    "ConfigurationError",
    "PreconditionFailedError",
    "IncompleteResponseError",
]
