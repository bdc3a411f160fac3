"""
AWS SDK client initialization.

This module provides client initialization for the AWSProvider class.

Design Decision:
    We return a dictionary of clients rather than individual module-level
    variables. Clients are built fresh on every call and never cached, so a
    rotated credential set takes effect on the next run.

Usage:
    from lambda_deployer.providers.aws.clients import resolve_clients

    clients = resolve_clients(
        {"aws_access_key_id": "...", "aws_secret_access_key": "..."},
        region="eu-central-1"
    )
    # clients["iam"], clients["lambda"]
"""

from typing import Dict, Any, Optional
import boto3

from lambda_deployer.core.exceptions import ConfigurationError


def create_aws_clients(
    access_key_id: str,
    secret_access_key: str,
    region: str,
    session_token: Optional[str] = None
) -> Dict[str, Any]:
    """
    Create and return the AWS boto3 clients needed for deployment.

    Args:
        access_key_id: AWS access key ID
        secret_access_key: AWS secret access key
        region: AWS region (e.g., "eu-central-1")
        session_token: Optional STS session token for temporary credentials

    Returns:
        Dictionary mapping service names to boto3 client instances.

    Client Keys:
        - iam: Identity and Access Management (execution role)
        - lambda: Lambda functions and Function URLs
    """
    # Common configuration for all clients
    config = {
        "aws_access_key_id": access_key_id,
        "aws_secret_access_key": secret_access_key,
        "region_name": region,
    }
    if session_token:
        config["aws_session_token"] = session_token

    return {
        "iam": boto3.client("iam", **config),
        "lambda": boto3.client("lambda", **config),
    }


def resolve_clients(credentials: dict, region: str) -> Dict[str, Any]:
    """
    Resolve a credentials dictionary into authenticated clients.

    Raises:
        ConfigurationError: If the key id or secret is missing, or no region is given
    """
    access_key_id = credentials.get("aws_access_key_id")
    secret_access_key = credentials.get("aws_secret_access_key")
    if not access_key_id or not secret_access_key:
        raise ConfigurationError(
            "AWS credentials require aws_access_key_id and aws_secret_access_key"
        )
    if not region:
        raise ConfigurationError("AWS region is not set")

    return create_aws_clients(
        access_key_id=access_key_id,
        secret_access_key=secret_access_key,
        region=region,
        session_token=credentials.get("aws_session_token"),
    )
