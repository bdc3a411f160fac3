"""
Core Deployer - Lambda + Function URL Orchestration.

This module provides the entry points for deploying and destroying the
function, its execution role and its public URL.

Architecture:
    - Uses DeploymentContext for all configuration and credentials
    - Uses ProviderRegistry to get the provider implementation
    - Every run re-queries remote state; nothing is cached between runs

Deploy order (each step depends on the previous one):
    role -> package -> function (create or update code) -> URL + permission

Destroy order:
    function -> role -> URL (usually already gone with the function)

Errors are not caught here. The first failure aborts the run and whatever
was already created stays in place for the next deploy to reconcile.

Usage:
    context = create_context("/work/my-project")
    message = deploy(context)
"""

from typing import Callable, Optional, TYPE_CHECKING

from lambda_deployer import constants as CONSTANTS
from lambda_deployer.core.exceptions import PreconditionFailedError
from lambda_deployer.core.registry import ProviderRegistry
from lambda_deployer.logger import logger
from lambda_deployer import util

if TYPE_CHECKING:
    from lambda_deployer.core.context import DeploymentContext
    from lambda_deployer.core.protocols import CloudProvider


def _get_provider(context: 'DeploymentContext', provider: Optional['CloudProvider'] = None) -> 'CloudProvider':
    """Resolve fresh clients for this run, unless a ready provider is passed in."""
    if provider is not None:
        return provider
    provider = ProviderRegistry.get(context.provider_name)
    provider.initialize_clients(context.get_credentials(), context.region)
    return provider


def _default_artifact_producer(context: 'DeploymentContext') -> Callable[[], bytes]:
    return util.artifact_producer_for(context.get_source_dir(), context.config.base_image)


def deploy(
    context: 'DeploymentContext',
    artifact_producer: Optional[Callable[[], bytes]] = None,
    provider: Optional['CloudProvider'] = None,
) -> str:
    """
    Converge the account to role + function + public URL.

    Args:
        context: Deployment context with config and credentials
        artifact_producer: Zero-argument callable returning the zip bytes.
            Defaults to zipping context.get_source_dir().
        provider: Already initialized provider (clients resolved from the
            context when omitted)

    Returns:
        Success message containing the function URL

    Raises:
        PreconditionFailedError: If the artifact producer returns no bytes
    """
    config = context.config
    logger.info(f"Deploying {config.function_name} to {context.region}")

    provider = _get_provider(context, provider)
    if artifact_producer is None:
        artifact_producer = _default_artifact_producer(context)

    role_arn = provider.roles.ensure_exists(config.role_name)

    artifact = artifact_producer()
    if not artifact:
        raise PreconditionFailedError("Zip file is empty", provider=context.provider_name)

    functions = provider.functions
    if functions.exists(config.function_name):
        functions.update_code(config.function_name, artifact)
    else:
        functions.create(
            config.function_name,
            role_arn,
            CONSTANTS.LAMBDA_HANDLER,
            CONSTANTS.LAMBDA_RUNTIME,
            artifact,
            memory_size=config.memory_size,
            timeout=config.timeout,
            architecture=config.architecture,
            description=config.description,
        )

    url = provider.function_urls.create_function_url(config.function_name)

    api_url = f"{url.rstrip('/')}/api/info"
    message = f"Deployed {config.function_name}: {url} (API: {api_url})"
    logger.info(message)
    return message


def destroy(context: 'DeploymentContext', provider: Optional['CloudProvider'] = None) -> str:
    """
    Remove the function, its role and its URL config, skipping what is absent.

    Returns:
        Confirmation message
    """
    config = context.config
    logger.info(f"Destroying {config.function_name} in {context.region}")

    provider = _get_provider(context, provider)
    functions = provider.functions
    roles = provider.roles
    urls = provider.function_urls

    if functions.exists(config.function_name):
        functions.remove(config.function_name)

    if roles.exists(config.role_name):
        roles.remove(config.role_name)

    # Deleting the function normally takes its URL config with it.
    if urls.function_url_exists(config.function_name):
        urls.delete_function_url(config.function_name)

    message = f"Destroyed {config.function_name} and {config.role_name}"
    logger.info(message)
    return message


def status(context: 'DeploymentContext', provider: Optional['CloudProvider'] = None) -> dict:
    """
    Report which of the managed resources currently exist.

    Read-only: never creates or deletes anything.

    Returns:
        {"role_arn": str|None, "function_exists": bool,
         "function_arn": str|None, "function_url": str|None}
    """
    config = context.config
    provider = _get_provider(context, provider)

    role_arn = provider.roles.exists(config.role_name)
    function_arn = provider.functions.get_arn(config.function_name)
    function_url = None
    if function_arn:
        function_url = provider.function_urls.function_url_exists(config.function_name)

    return {
        "role_arn": role_arn,
        "function_exists": function_arn is not None,
        "function_arn": function_arn,
        "function_url": function_url,
    }
