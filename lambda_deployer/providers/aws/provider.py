"""
AWS CloudProvider implementation.

This module implements the CloudProvider protocol for Amazon Web Services.
It resolves boto3 clients from credentials and hands out the reconcilers
bound to them.

Design Pattern: Abstract Factory (Provider Pattern)
    AWSProvider creates a family of related AWS objects:
    - SDK clients (IAM and Lambda)
    - AWSRoleReconciler, AWSFunctionReconciler, AWSUrlReconciler

Usage:
    provider = AWSProvider()
    provider.initialize_clients({
        "aws_access_key_id": "...",
        "aws_secret_access_key": "...",
    }, region="eu-central-1")

    role_arn = provider.roles.ensure_exists("lambda-example-role")
"""

from lambda_deployer.providers.base import BaseProvider
from .clients import resolve_clients
from .function_url import AWSUrlReconciler
from .iam_role import AWSRoleReconciler
from .lambda_function import AWSFunctionReconciler


class AWSProvider(BaseProvider):
    """
    AWS implementation of the CloudProvider protocol.

    Attributes:
        name: Always "aws" for this provider
        clients: Dictionary of initialized boto3 clients
    """

    name: str = "aws"

    def initialize_clients(self, credentials: dict, region: str) -> None:
        """
        Initialize boto3 clients for IAM and Lambda.

        Args:
            credentials: AWS credentials dictionary containing:
                - aws_access_key_id: AWS access key (REQUIRED)
                - aws_secret_access_key: AWS secret key (REQUIRED)
                - aws_session_token: STS session token (optional)
            region: AWS region

        Raises:
            ConfigurationError: If required credentials are missing
        """
        self._clients = resolve_clients(credentials, region)
        self._initialized = True

    @property
    def roles(self) -> AWSRoleReconciler:
        return AWSRoleReconciler(self.clients["iam"])

    @property
    def functions(self) -> AWSFunctionReconciler:
        return AWSFunctionReconciler(self.clients["lambda"])

    @property
    def function_urls(self) -> AWSUrlReconciler:
        return AWSUrlReconciler(self.clients["lambda"])
