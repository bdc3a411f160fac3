"""
Custom exceptions for the Lambda deployer.

This module defines a hierarchy of exceptions used throughout the deployment
system to provide clear, actionable error messages.

Exception Hierarchy:
    DeploymentError (base)
    ├── ProviderNotFoundError - Unknown provider name requested
    ├── ConfigurationError - Invalid or missing configuration
    ├── PreconditionFailedError - Bad input detected before any cloud call
    └── IncompleteResponseError - Create call returned no identifier

Errors raised by the cloud SDK itself (botocore ClientError) are NOT wrapped.
They propagate unchanged so the provider's message stays intact.
"""

from typing import Optional


class DeploymentError(Exception):
    """
    Base exception for all deployment-related errors.

    All custom exceptions in the deployer inherit from this class,
    allowing broad exception handling when needed.

    Attributes:
        message: Human-readable error description
        provider: Optional provider name where error occurred
    """

    def __init__(self, message: str, provider: Optional[str] = None):
        self.message = message
        self.provider = provider

        if provider:
            full_message = f"{message} [provider={provider}]"
        else:
            full_message = message

        super().__init__(full_message)


class ProviderNotFoundError(DeploymentError):
    """
    Raised when an unknown provider name is requested.

    Example:
        >>> ProviderRegistry.get("unknown")
        ProviderNotFoundError: Provider 'unknown' not found. Available: ['aws']
    """

    def __init__(self, provider_name: str, available_providers: list[str]):
        self.provider_name = provider_name
        self.available_providers = available_providers
        message = (
            f"Provider '{provider_name}' not found. "
            f"Available: {available_providers}"
        )
        super().__init__(message, provider=provider_name)


class ConfigurationError(DeploymentError):
    """
    Raised when configuration is invalid or missing required fields.

    This typically occurs when:
    - Required config file is missing
    - Config file has invalid JSON
    - Required field is missing from config
    - Credentials are incomplete

    Example:
        >>> load_project_config(Path("nonexistent"))
        ConfigurationError: Required configuration file not found: config.json
    """

    def __init__(self, message: str, config_file: Optional[str] = None):
        self.config_file = config_file
        if config_file:
            message = f"{message} (file: {config_file})"
        super().__init__(message)


class PreconditionFailedError(DeploymentError):
    """
    Raised when an input is rejected before any network call is made.

    Examples:
        - Empty deployment package
        - Runtime or architecture not known to the Lambda service
        - Unsupported Function URL auth type
    """


class IncompleteResponseError(DeploymentError):
    """
    Raised when a create call succeeds but the response lacks the identifier.

    Treated as an integration bug and never retried.

    Attributes:
        resource_type: Type of resource (e.g., "iam_role", "lambda_function")
        resource_name: Name of the resource that was being created
        missing_field: Response field that was expected (e.g., "FunctionArn")
    """

    def __init__(self, resource_type: str, resource_name: str, provider: str, missing_field: str):
        self.resource_type = resource_type
        self.resource_name = resource_name
        self.missing_field = missing_field
        super().__init__(
            f"Failed to create {resource_type} '{resource_name}': no {missing_field} returned",
            provider=provider,
        )
