"""
AWS Provider package.

Auto-Registration:
    Importing this package registers AWSProvider with the ProviderRegistry.
    This happens automatically when the providers package is imported.

Package Structure:
    aws/
    ├── __init__.py           # This file - registers provider
    ├── provider.py           # AWSProvider class
    ├── clients.py            # boto3 client initialization
    ├── iam_role.py           # AWSRoleReconciler
    ├── lambda_function.py    # AWSFunctionReconciler
    ├── function_url.py       # AWSUrlReconciler
    ├── util_aws.py           # Error codes, service enums, console links
    └── lambda_functions/     # Bundled function sources
        └── web-app/
"""

from lambda_deployer.core.registry import ProviderRegistry
from .provider import AWSProvider

# Auto-register this provider when the module is imported
ProviderRegistry.register("aws", AWSProvider)

__all__ = ["AWSProvider"]
