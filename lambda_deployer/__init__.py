"""
Lambda Deployer.

Idempotently provisions and tears down one AWS Lambda function with a
public Function URL: IAM role -> function -> URL + invoke permission.
"""

__version__ = "1.0.0"
