"""
Configuration loading utilities.

This module provides functions to load and parse project configuration
from JSON files.

File Loading Order:
    1. config.json - function/role names, region, build and runtime settings
    2. config_credentials_aws.json - AWS credentials (optional)

When the credentials file is absent, credentials are read from the standard
AWS environment variables instead.

Usage:
    from lambda_deployer.core.config_loader import load_project_config

    config = load_project_config(project_path=Path("/work/my-project"))
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from lambda_deployer import constants as CONSTANTS
from .context import ProjectConfig
from .exceptions import ConfigurationError


def _load_json_file(file_path: Path, required: bool = True) -> Dict[str, Any]:
    """
    Load a JSON file and return its contents as a dictionary.

    Args:
        file_path: Path to the JSON file
        required: If True, raise error when file is missing. If False, return empty dict.

    Returns:
        Parsed JSON content as dictionary

    Raises:
        ConfigurationError: If file is missing (when required) or has invalid JSON
    """
    if not file_path.exists():
        if required:
            raise ConfigurationError(
                f"Required configuration file not found: {file_path.name}",
                config_file=str(file_path)
            )
        return {}

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in configuration file: {e}",
            config_file=str(file_path)
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            "Configuration file must contain a JSON object",
            config_file=str(file_path)
        )
    return data


def _require_fields(data: Dict[str, Any], file_name: str, file_path: Path) -> None:
    for field_name in CONSTANTS.CONFIG_SCHEMAS[file_name]:
        value = data.get(field_name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ConfigurationError(
                f"Missing required field '{field_name}' in {file_name}",
                config_file=str(file_path)
            )


def load_project_config(project_path: Path, environ: Optional[Mapping[str, str]] = None) -> ProjectConfig:
    """
    Load config.json for a project.

    An explicit "region" in config.json always wins. AWS_REGION, then
    AWS_DEFAULT_REGION, only fill in when it is absent, and eu-central-1
    is the last resort.

    Args:
        project_path: Path to the project directory containing config files
        environ: Environment for the region fallback (defaults to os.environ)

    Returns:
        ProjectConfig with all loaded settings

    Raises:
        ConfigurationError: If config.json is missing, invalid, or incomplete

    Example:
        config = load_project_config(Path("/work/my-project"))
        print(config.function_name)  # "lambda-example"
    """
    if environ is None:
        environ = os.environ

    config_path = project_path / CONSTANTS.CONFIG_FILE
    core_config = _load_json_file(config_path, required=True)
    _require_fields(core_config, CONSTANTS.CONFIG_FILE, config_path)

    try:
        memory_size = int(core_config.get("memory_size", CONSTANTS.LAMBDA_DEFAULT_MEMORY_SIZE))
        timeout = int(core_config.get("timeout", CONSTANTS.LAMBDA_DEFAULT_TIMEOUT))
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"memory_size and timeout must be integers: {e}",
            config_file=str(config_path)
        ) from e

    return ProjectConfig(
        function_name=core_config["function_name"],
        role_name=core_config["role_name"],
        region=core_config.get("region") or _region_from_env(environ) or CONSTANTS.DEFAULT_AWS_REGION,
        base_image=core_config.get("base_image") or CONSTANTS.DEFAULT_BASE_IMAGE,
        mode=core_config.get("mode", "PRODUCTION"),
        memory_size=memory_size,
        timeout=timeout,
        architecture=core_config.get("architecture", CONSTANTS.LAMBDA_DEFAULT_ARCHITECTURE),
        description=core_config.get("description"),
        source_dir=core_config.get("source_dir"),
    )


def _region_from_env(environ: Mapping[str, str]) -> Optional[str]:
    return environ.get(CONSTANTS.AWS_ENV_REGION) or environ.get(CONSTANTS.AWS_ENV_DEFAULT_REGION)


def _credentials_from_env(environ: Mapping[str, str]) -> Dict[str, str]:
    """Build an AWS credentials dict from the standard environment variables."""
    credentials = {
        "aws_access_key_id": environ.get(CONSTANTS.AWS_ENV_ACCESS_KEY_ID, ""),
        "aws_secret_access_key": environ.get(CONSTANTS.AWS_ENV_SECRET_ACCESS_KEY, ""),
    }
    session_token = environ.get(CONSTANTS.AWS_ENV_SESSION_TOKEN)
    if session_token:
        credentials["aws_session_token"] = session_token
    return credentials


def validate_credentials(provider_name: str, credentials: dict) -> dict:
    """
    Check that the credential fields required by a provider are present.

    Returns:
        The credentials unchanged

    Raises:
        ConfigurationError: If a required field is missing or empty
    """
    required = CONSTANTS.REQUIRED_CREDENTIALS_FIELDS.get(provider_name)
    if required is None:
        raise ConfigurationError(f"No credential schema for provider '{provider_name}'")

    missing = [key for key in required if not credentials.get(key)]
    if missing:
        raise ConfigurationError(
            f"Missing {provider_name} credentials: {', '.join(missing)}"
        )
    return credentials


def load_credentials(project_path: Path, environ: Optional[Mapping[str, str]] = None) -> Dict[str, dict]:
    """
    Load credentials for the AWS provider.

    Credentials come from config_credentials_aws.json when it exists,
    otherwise from AWS_ACCESS_KEY_ID / AWS_SECRET_ACCESS_KEY /
    AWS_SESSION_TOKEN. The environment region is not part of the
    credentials; load_project_config uses it as the region fallback.

    Args:
        project_path: Path to the project directory
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Dictionary mapping provider names to their credentials
        e.g., {"aws": {"aws_access_key_id": "...", ...}}

    Raises:
        ConfigurationError: If the resulting credentials are incomplete
    """
    if environ is None:
        environ = os.environ

    aws_creds = _load_json_file(
        project_path / CONSTANTS.CONFIG_CREDENTIALS_AWS_FILE,
        required=False
    )
    if not aws_creds:
        aws_creds = _credentials_from_env(environ)

    return {"aws": validate_credentials("aws", aws_creds)}
