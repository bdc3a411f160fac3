"""
Deployment context and configuration classes.

Instead of importing global variables, deployment functions receive a
DeploymentContext containing everything they need: the parsed project
configuration and the raw credentials used to resolve cloud clients.

Design Pattern: Dependency Injection
    - All configuration is loaded into ProjectConfig at startup
    - DeploymentContext wraps config + credentials
    - Context is passed explicitly to deploy/destroy/status

Nothing in here is cached between runs. Every deploy re-queries the
remote state and resolves fresh clients from the credentials.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from lambda_deployer import constants as CONSTANTS


@dataclass
class ProjectConfig:
    """
    Parsed project configuration from config.json.

    Attributes:
        function_name: Name of the Lambda function to manage
        role_name: Name of the IAM execution role to manage
        region: AWS region (defaults to eu-central-1 when unspecified)
        base_image: Build image tag, handed to the artifact producer
        mode: "DEBUG" enables verbose logging
        memory_size: Function memory in MB
        timeout: Function timeout in seconds
        architecture: Instruction set ("arm64" or "x86_64")
        description: Function description shown in the console
        source_dir: Function sources relative to the project directory
            (None means the bundled web-app function)
    """

    function_name: str
    role_name: str
    region: str = CONSTANTS.DEFAULT_AWS_REGION
    base_image: str = CONSTANTS.DEFAULT_BASE_IMAGE
    mode: str = "PRODUCTION"
    memory_size: int = CONSTANTS.LAMBDA_DEFAULT_MEMORY_SIZE
    timeout: int = CONSTANTS.LAMBDA_DEFAULT_TIMEOUT
    architecture: str = CONSTANTS.LAMBDA_DEFAULT_ARCHITECTURE
    description: Optional[str] = None
    source_dir: Optional[str] = None

    @property
    def debug(self) -> bool:
        return self.mode.upper() == "DEBUG"


@dataclass
class DeploymentContext:
    """
    Encapsulates all state needed for a deploy/destroy/status operation.

    Lifecycle:
        1. Created at the start of a run (CLI/API request)
        2. Config and credentials are loaded from the project directory
        3. Passed to the orchestrator, which resolves clients from it
        4. Garbage collected after the run completes

    Attributes:
        project_path: Path to the project directory
        config: Parsed ProjectConfig
        credentials: Raw credentials by provider name
            e.g., {"aws": {"aws_access_key_id": "...", ...}}
        provider_name: Registry key of the provider to deploy with
    """

    project_path: Path
    config: ProjectConfig
    credentials: Dict[str, dict] = field(default_factory=dict)
    provider_name: str = CONSTANTS.DEFAULT_PROVIDER

    @property
    def region(self) -> str:
        """
        Region to deploy to.

        An aws_region in config_credentials_aws.json wins; otherwise the
        region resolved by load_project_config (config.json, then the
        AWS_REGION / AWS_DEFAULT_REGION environment, then eu-central-1).
        """
        provider_credentials = self.credentials.get(self.provider_name, {})
        return provider_credentials.get("aws_region") or self.config.region

    def get_credentials(self) -> dict:
        """
        Get the credentials for the active provider.

        Raises:
            ValueError: If no credentials were loaded for the provider
        """
        if self.provider_name not in self.credentials:
            raise ValueError(
                f"No credentials loaded for provider '{self.provider_name}'. "
                f"Available: {list(self.credentials.keys())}"
            )
        return self.credentials[self.provider_name]

    def get_upload_path(self, *subpaths: str) -> Path:
        """Get a path within the project directory."""
        return self.project_path.joinpath(*subpaths)

    def get_source_dir(self) -> Path:
        """
        Directory whose contents become the deployment package.

        Example:
            >>> context.config.source_dir = "app"
            >>> context.get_source_dir()
            Path("/work/my-project/app")
        """
        if self.config.source_dir:
            return self.get_upload_path(self.config.source_dir)
        return CONSTANTS.LAMBDA_FUNCTIONS_DIR / CONSTANTS.WEB_APP_FUNCTION_DIR_NAME
