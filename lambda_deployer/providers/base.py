"""
Shared base classes and utilities for provider implementations.

Contents:
    - BaseProvider: client storage shared by provider implementations
    - ResourceLogMixin: consistent log lines for reconcilers
"""

from lambda_deployer.logger import logger


class BaseProvider:
    """
    Optional base class for cloud provider implementations.

    Providers are only required to implement the CloudProvider protocol.
    They can inherit from BaseProvider for the client bookkeeping.
    """

    def __init__(self):
        """Initialize base provider state."""
        self._clients: dict = {}
        self._initialized: bool = False

    @property
    def clients(self) -> dict:
        """Return initialized SDK clients."""
        if not self._initialized:
            raise RuntimeError(
                "Provider not initialized. Call initialize_clients() first."
            )
        return self._clients


class ResourceLogMixin:
    """
    Logging helpers shared by the resource reconcilers.

    Subclasses set resource_type (e.g., "IAM Role", "Lambda Function").
    """

    resource_type: str = "Resource"

    def _log_resource_creation(self, resource_name: str) -> None:
        logger.info(f"Creating {self.resource_type}: {resource_name}")

    def _log_resource_deletion(self, resource_name: str) -> None:
        logger.info(f"Deleting {self.resource_type}: {resource_name}")

    def _log_resource_exists(self, resource_name: str) -> None:
        """Log that a resource already exists (for idempotent operations)."""
        logger.info(f"✅ {self.resource_type} exists: {resource_name}")

    def _log_resource_not_found(self, resource_name: str) -> None:
        logger.debug(f"❌ {self.resource_type} not found: {resource_name}")
