"""
Context Factory - Creates Deployment contexts.

It serves as the entry point for both CLI and API to establish a session:
load config.json, load credentials, switch logging to debug if requested.
"""

from pathlib import Path
from typing import Mapping, Optional, Union

from lambda_deployer import constants as CONSTANTS
from lambda_deployer.logger import set_debug_mode
from .config_loader import load_credentials, load_project_config
from .context import DeploymentContext


def create_context(
    project_path: Union[str, Path],
    provider_name: str = CONSTANTS.DEFAULT_PROVIDER,
    environ: Optional[Mapping[str, str]] = None,
) -> DeploymentContext:
    """
    Create a DeploymentContext for a project directory.

    Args:
        project_path: Directory containing config.json
        provider_name: Registry key of the provider to deploy with
        environ: Environment used for the credentials fallback

    Returns:
        DeploymentContext with config and credentials loaded

    Raises:
        ConfigurationError: If config or credentials are missing or invalid
    """
    project_path = Path(project_path)

    config = load_project_config(project_path, environ=environ)
    credentials = load_credentials(project_path, environ=environ)

    if config.debug:
        set_debug_mode(True)

    return DeploymentContext(
        project_path=project_path,
        config=config,
        credentials=credentials,
        provider_name=provider_name,
    )
