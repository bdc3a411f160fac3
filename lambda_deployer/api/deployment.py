"""
Infrastructure API endpoints.

Deploy, destroy and inspect the Lambda function, its IAM role and its
Function URL for the project directory given in `project_path`.

Error mapping:
    ConfigurationError / PreconditionFailedError -> 400
    anything else (including AWS ClientError)     -> 500
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from lambda_deployer.core.exceptions import ConfigurationError, PreconditionFailedError
from lambda_deployer.core.factory import create_context
from lambda_deployer.logger import print_stack_trace, logger
import lambda_deployer.providers  # noqa: F401  (registers providers)
import lambda_deployer.providers.deployer as core_deployer


router = APIRouter(prefix="/infrastructure")


class MessageResponse(BaseModel):
    """Outcome of a deploy or destroy run."""
    message: str = Field(..., description="Human-readable outcome, including the URL on deploy")


class StatusResponse(BaseModel):
    """Existence report for the managed resources."""
    function_name: str
    role_name: str
    region: str
    role_arn: Optional[str] = Field(None, description="IAM role ARN, null if the role is missing")
    function_exists: bool
    function_arn: Optional[str] = None
    function_url: Optional[str] = Field(None, description="Public URL, null if not configured")


def _raise_http_error(e: Exception) -> None:
    if isinstance(e, (ConfigurationError, PreconditionFailedError)):
        raise HTTPException(status_code=400, detail=str(e))
    print_stack_trace()
    logger.error(str(e))
    raise HTTPException(status_code=500, detail=str(e))


# --------- Deploy/Destroy ----------
@router.post(
    "/deploy",
    tags=["Infrastructure"],
    summary="Deploy the Lambda function with a public Function URL",
    response_model=MessageResponse,
    responses={
        200: {"description": "Deployment successful"},
        400: {"description": "Invalid configuration or deployment package"},
        500: {"description": "Deployment failed"}
    }
)
def deploy(project_path: str = Query(..., description="Project directory containing config.json")):
    """
    Creates or updates the deployment.

    **Deployment process:**
    1. Ensures the IAM execution role exists (waits for propagation when created)
    2. Packages the function sources
    3. Creates the function, or updates its code if it already exists
    4. Ensures the Function URL and its public invoke permission
    """
    try:
        context = create_context(project_path)
        return {"message": core_deployer.deploy(context)}
    except Exception as e:
        _raise_http_error(e)


@router.post(
    "/destroy",
    tags=["Infrastructure"],
    summary="Destroy the Lambda function, its role and URL",
    response_model=MessageResponse,
    responses={
        200: {"description": "Destruction successful"},
        400: {"description": "Invalid configuration"},
        500: {"description": "Destruction failed"}
    }
)
def destroy(project_path: str = Query(..., description="Project directory containing config.json")):
    """
    Deletes whatever of function, role and Function URL still exists.

    **Note:** This operation cannot be undone.
    """
    try:
        context = create_context(project_path)
        return {"message": core_deployer.destroy(context)}
    except Exception as e:
        _raise_http_error(e)


@router.get(
    "/status",
    tags=["Infrastructure"],
    summary="Check which resources exist",
    response_model=StatusResponse,
)
def status(project_path: str = Query(..., description="Project directory containing config.json")):
    try:
        context = create_context(project_path)
        report = core_deployer.status(context)
    except Exception as e:
        _raise_http_error(e)

    return {
        "function_name": context.config.function_name,
        "role_name": context.config.role_name,
        "region": context.region,
        **report,
    }
