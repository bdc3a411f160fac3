"""
AWS Utility Functions.

This module provides utility functions for AWS operations including:
- Error code extraction from botocore ClientError
- Lambda service enumerations read from botocore's bundled service model
- Console link generation for resources
"""

from functools import lru_cache

import botocore.session
from botocore.exceptions import ClientError

from lambda_deployer import constants as CONSTANTS


def error_code(e: ClientError) -> str:
    """Return the AWS error code of a ClientError (e.g. "NoSuchEntity")."""
    return e.response.get("Error", {}).get("Code", "")


# ==========================================
# Service Model Enumerations
# ==========================================

@lru_cache(maxsize=None)
def _lambda_enum(shape_name: str) -> frozenset:
    # Reads the JSON model shipped inside botocore; no network call.
    model = botocore.session.get_session().get_service_model("lambda")
    return frozenset(model.shape_for(shape_name).enum)


def lambda_runtimes() -> frozenset:
    """Runtime identifiers accepted by CreateFunction."""
    return _lambda_enum("Runtime")


def lambda_architectures() -> frozenset:
    """Instruction set architectures accepted by CreateFunction."""
    return _lambda_enum("Architecture")


# ==========================================
# Console Link Functions
# ==========================================

def link_to_iam_role(role_name, region: str = None):
    """Generate AWS Console link to an IAM role."""
    region = region or CONSTANTS.DEFAULT_AWS_REGION
    return f"https://console.aws.amazon.com/iam/home?region={region}#/roles/{role_name}"


def link_to_lambda_function(function_name, region: str = None):
    """Generate AWS Console link to a Lambda function."""
    region = region or CONSTANTS.DEFAULT_AWS_REGION
    return f"https://{region}.console.aws.amazon.com/lambda/home?region={region}#/functions/{function_name}"
