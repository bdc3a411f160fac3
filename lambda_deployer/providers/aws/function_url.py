"""
Lambda Function URL and its public invoke permission.

A URL config with AuthType NONE still answers 403 until a resource policy
statement allows lambda:InvokeFunctionUrl, so both are created together.
"""

from typing import Optional

from botocore.exceptions import ClientError

from lambda_deployer import constants as CONSTANTS
from lambda_deployer.core.exceptions import IncompleteResponseError, PreconditionFailedError
from lambda_deployer.logger import logger
from lambda_deployer.providers.base import ResourceLogMixin
from . import util_aws


class AWSUrlReconciler(ResourceLogMixin):
    """UrlReconciler backed by the Lambda API."""

    resource_type = "Function URL"

    def __init__(self, lambda_client):
        self._lambda = lambda_client

    def function_url_exists(self, function_name: str) -> Optional[str]:
        """Return the URL of the function, or None if it has no URL config."""
        try:
            response = self._lambda.get_function_url_config(FunctionName=function_name)
        except ClientError as e:
            if util_aws.error_code(e) == "ResourceNotFoundException":
                self._log_resource_not_found(function_name)
                return None
            raise
        return response["FunctionUrl"]

    def create_function_url(
        self,
        function_name: str,
        auth_type: str = CONSTANTS.FUNCTION_URL_DEFAULT_AUTH_TYPE,
        cors_origins: Optional[list[str]] = None,
        cors_methods: Optional[list[str]] = None,
        cors_headers: Optional[list[str]] = None,
        allow_credentials: bool = False,
    ) -> str:
        """
        Return the function's URL, creating it and granting invoke if absent.

        CORS lists default to ["*"]. An existing URL is returned without
        touching its configuration or permission.

        Raises:
            PreconditionFailedError: Unsupported auth_type
            IncompleteResponseError: CreateFunctionUrlConfig returned no FunctionUrl
            ClientError: Any rejection other than a permission conflict
        """
        existing_url = self.function_url_exists(function_name)
        if existing_url:
            self._log_resource_exists(existing_url)
            return existing_url

        if auth_type not in CONSTANTS.FUNCTION_URL_AUTH_TYPES:
            raise PreconditionFailedError(
                f"Invalid auth type: {auth_type}. Allowed: {list(CONSTANTS.FUNCTION_URL_AUTH_TYPES)}",
                provider="aws"
            )

        self._log_resource_creation(function_name)
        response = self._lambda.create_function_url_config(
            FunctionName=function_name,
            AuthType=auth_type,
            Cors={
                "AllowOrigins": ["*"] if cors_origins is None else cors_origins,
                "AllowMethods": ["*"] if cors_methods is None else cors_methods,
                "AllowHeaders": ["*"] if cors_headers is None else cors_headers,
                "AllowCredentials": allow_credentials,
            }
        )
        function_url = response.get("FunctionUrl")
        if not function_url:
            raise IncompleteResponseError("function_url", function_name, "aws", "FunctionUrl")
        logger.info(f"Created Function URL for {function_name}: {function_url}")

        self._grant_public_invoke(function_name, auth_type)
        return function_url

    def _grant_public_invoke(self, function_name: str, auth_type: str) -> None:
        try:
            self._lambda.add_permission(
                FunctionName=function_name,
                StatementId=CONSTANTS.FUNCTION_URL_PERMISSION_STATEMENT_ID,
                Action=CONSTANTS.FUNCTION_URL_PERMISSION_ACTION,
                Principal=CONSTANTS.FUNCTION_URL_PERMISSION_PRINCIPAL,
                FunctionUrlAuthType=auth_type
            )
            logger.info(f"Added public access permission to {function_name}")
        except ClientError as e:
            if util_aws.error_code(e) != "ResourceConflictException":
                raise
            logger.info(f"Public access permission already present on {function_name}")

    def delete_function_url(self, function_name: str) -> None:
        self._log_resource_deletion(function_name)
        self._lambda.delete_function_url_config(FunctionName=function_name)
        logger.info(f"Deleted Function URL for: {function_name}")
