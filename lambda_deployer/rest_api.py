"""
Lambda Deployer REST API.

This is the main FastAPI application entry point.

Run with:
    uvicorn lambda_deployer.rest_api:app
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI

from lambda_deployer.core.registry import ProviderRegistry
from lambda_deployer.logger import logger

from lambda_deployer.api import deployment


# --------- Lifespan context manager ----------
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"API Startup. Providers: {ProviderRegistry.list_providers()}")
    yield


# --------- Initialize FastAPI app ----------
app = FastAPI(
    title="Lambda Deployer API",
    version="1.0",
    description=(
        "API for deploying, destroying, and inspecting a Lambda function "
        "served through a public Function URL."
    ),
    openapi_tags=[
        {
            "name": "Infrastructure",
            "description": "Deploy/destroy the IAM role, Lambda function and Function URL. "
                          "Check which of them currently exist."
        },
    ],
    lifespan=lifespan
)


@app.get("/", tags=["Info"])
def read_root():
    """
    API health check endpoint.

    Returns API status and the registered providers.
    """
    return {"status": "API is running", "providers": ProviderRegistry.list_providers()}


# Include Routers
app.include_router(deployment.router)
