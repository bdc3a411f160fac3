"""
Lambda function lifecycle: existence check, creation, code update, removal.

create() is a creation primitive. The orchestrator decides between create()
and update_code() from exists().
"""

from typing import Optional

from botocore.exceptions import ClientError

from lambda_deployer import constants as CONSTANTS
from lambda_deployer.core.exceptions import IncompleteResponseError, PreconditionFailedError
from lambda_deployer.logger import logger
from lambda_deployer.providers.base import ResourceLogMixin
from . import util_aws


def validate_artifact(artifact: bytes) -> None:
    """Reject a missing or zero-length deployment package."""
    if not artifact:
        raise PreconditionFailedError("Zip file is empty", provider="aws")


class AWSFunctionReconciler(ResourceLogMixin):
    """FunctionReconciler backed by the Lambda API."""

    resource_type = "Lambda Function"

    def __init__(self, lambda_client):
        self._lambda = lambda_client

    def _get_function(self, function_name: str) -> Optional[dict]:
        try:
            return self._lambda.get_function(FunctionName=function_name)
        except ClientError as e:
            if util_aws.error_code(e) == "ResourceNotFoundException":
                self._log_resource_not_found(function_name)
                return None
            raise

    def exists(self, function_name: str) -> bool:
        return self._get_function(function_name) is not None

    def get_arn(self, function_name: str) -> Optional[str]:
        """Return the function ARN, or None if the function does not exist."""
        response = self._get_function(function_name)
        if response is None:
            return None
        return response["Configuration"]["FunctionArn"]

    def create(
        self,
        function_name: str,
        role_arn: str,
        handler: str,
        runtime: str,
        artifact: bytes,
        memory_size: int = CONSTANTS.LAMBDA_DEFAULT_MEMORY_SIZE,
        timeout: int = CONSTANTS.LAMBDA_DEFAULT_TIMEOUT,
        architecture: str = CONSTANTS.LAMBDA_DEFAULT_ARCHITECTURE,
        description: Optional[str] = None,
    ) -> str:
        """
        Create the function and return its ARN.

        Runtime, architecture and artifact are validated before the
        CreateFunction call.

        Raises:
            PreconditionFailedError: Unknown runtime/architecture or empty artifact
            IncompleteResponseError: CreateFunction returned no FunctionArn
            ClientError: Any rejection from the Lambda API, unchanged
        """
        if runtime not in util_aws.lambda_runtimes():
            raise PreconditionFailedError(f"Invalid runtime: {runtime}", provider="aws")
        if architecture not in util_aws.lambda_architectures():
            raise PreconditionFailedError(f"Invalid architecture: {architecture}", provider="aws")
        validate_artifact(artifact)

        self._log_resource_creation(function_name)
        response = self._lambda.create_function(
            FunctionName=function_name,
            Runtime=runtime,
            Role=role_arn,
            Handler=handler,
            Code={"ZipFile": artifact},
            Description=description or CONSTANTS.LAMBDA_DEFAULT_DESCRIPTION,
            Timeout=timeout,
            MemorySize=memory_size,
            Architectures=[architecture],
            Environment={"Variables": {}}
        )
        function_arn = response.get("FunctionArn")
        if not function_arn:
            raise IncompleteResponseError("lambda_function", function_name, "aws", "FunctionArn")

        logger.info(f"Created Lambda function: {function_name}")
        return function_arn

    def update_code(self, function_name: str, artifact: bytes) -> None:
        validate_artifact(artifact)
        self._lambda.update_function_code(
            FunctionName=function_name,
            ZipFile=artifact
        )
        link = util_aws.link_to_lambda_function(function_name, region=self._lambda.meta.region_name)
        logger.info(f"Updated Lambda Function: {link}")

    def remove(self, function_name: str) -> None:
        self._log_resource_deletion(function_name)
        self._lambda.delete_function(FunctionName=function_name)
        logger.info(f"Deleted Lambda function: {function_name}")
