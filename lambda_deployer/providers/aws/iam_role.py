"""
IAM execution role for the Lambda function.

The role is looked up by name, created once with a trust policy for the
Lambda service principal plus the basic execution policy, then reused on
every later deploy.
"""

import json
import time
from typing import Optional

from botocore.exceptions import ClientError

from lambda_deployer import constants as CONSTANTS
from lambda_deployer.core.exceptions import IncompleteResponseError
from lambda_deployer.logger import logger
from lambda_deployer.providers.base import ResourceLogMixin
from . import util_aws

TRUST_POLICY = {
    "Version": "2012-10-17",
    "Statement": [{
        "Effect": "Allow",
        "Principal": {"Service": CONSTANTS.AWS_LAMBDA_SERVICE_PRINCIPAL},
        "Action": "sts:AssumeRole"
    }]
}


class AWSRoleReconciler(ResourceLogMixin):
    """
    RoleReconciler backed by the IAM API.

    Args:
        iam_client: boto3 IAM client
        max_attempts: Propagation polls before giving up
        interval: Seconds between propagation polls
    """

    resource_type = "IAM Role"

    def __init__(
        self,
        iam_client,
        max_attempts: int = CONSTANTS.ROLE_PROPAGATION_MAX_ATTEMPTS,
        interval: float = CONSTANTS.ROLE_PROPAGATION_INTERVAL_SECONDS,
    ):
        self._iam = iam_client
        self.max_attempts = max_attempts
        self.interval = interval

    def exists(self, role_name: str) -> Optional[str]:
        """Return the role ARN, or None when IAM reports NoSuchEntity."""
        try:
            response = self._iam.get_role(RoleName=role_name)
        except ClientError as e:
            if util_aws.error_code(e) == "NoSuchEntity":
                self._log_resource_not_found(role_name)
                return None
            raise
        return response["Role"]["Arn"]

    def ensure_exists(self, role_name: str) -> str:
        existing_arn = self.exists(role_name)
        if existing_arn:
            self._log_resource_exists(
                util_aws.link_to_iam_role(role_name, region=self._iam.meta.region_name)
            )
            return existing_arn

        self._log_resource_creation(role_name)
        response = self._iam.create_role(
            RoleName=role_name,
            AssumeRolePolicyDocument=json.dumps(TRUST_POLICY)
        )
        created_arn = response.get("Role", {}).get("Arn")
        if not created_arn:
            raise IncompleteResponseError("iam_role", role_name, "aws", "Role.Arn")
        logger.info(f"Created IAM role: {role_name}")

        self._iam.attach_role_policy(
            RoleName=role_name,
            PolicyArn=CONSTANTS.AWS_POLICY_LAMBDA_BASIC_EXECUTION
        )
        logger.info(f"Attached IAM policy ARN: {CONSTANTS.AWS_POLICY_LAMBDA_BASIC_EXECUTION}")

        propagated_arn = self._wait_for_propagation(role_name)
        if propagated_arn:
            return propagated_arn

        logger.warning(
            f"IAM role {role_name} not visible after {self.max_attempts} attempts, "
            f"continuing with ARN from creation"
        )
        return created_arn

    def _wait_for_propagation(self, role_name: str) -> Optional[str]:
        logger.info("Waiting for propagation...")
        for attempt in range(1, self.max_attempts + 1):
            arn = self.exists(role_name)
            if arn:
                logger.debug(f"IAM role {role_name} visible after {attempt} attempt(s)")
                return arn
            if attempt < self.max_attempts:
                time.sleep(self.interval)
        return None

    def remove(self, role_name: str) -> None:
        """
        Delete the role by name.

        Attached managed policies are detached first; IAM refuses to delete a
        role that still has them. NoSuchEntity propagates to the caller.
        """
        self._log_resource_deletion(role_name)
        response = self._iam.list_attached_role_policies(RoleName=role_name)
        for policy in response["AttachedPolicies"]:
            self._iam.detach_role_policy(RoleName=role_name, PolicyArn=policy["PolicyArn"])

        self._iam.delete_role(RoleName=role_name)
        logger.info(f"Deleted IAM role: {role_name}")
