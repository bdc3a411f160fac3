import pytest
from moto import mock_aws

from lambda_deployer.core.context import DeploymentContext, ProjectConfig


@pytest.fixture(scope="function")
def aws_credentials(monkeypatch):
    """Mocked AWS Credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-central-1")
    # AWSLambdaBasicExecutionRole must exist for attach_role_policy to succeed
    monkeypatch.setenv("MOTO_IAM_LOAD_MANAGED_POLICIES", "true")


@pytest.fixture(scope="function")
def mock_provider(aws_credentials):
    """
    AWSProvider wired to moto-backed boto3 clients.
    """
    from lambda_deployer.providers.aws.provider import AWSProvider

    with mock_aws():
        provider = AWSProvider()
        provider.initialize_clients(
            {"aws_access_key_id": "testing", "aws_secret_access_key": "testing"},
            "eu-central-1",
        )
        yield provider


@pytest.fixture(scope="function")
def integration_context(tmp_path):
    """Context for the default lambda-example names in eu-central-1."""
    return DeploymentContext(
        project_path=tmp_path,
        config=ProjectConfig(
            function_name="lambda-example",
            role_name="lambda-example-role",
            region="eu-central-1",
        ),
        credentials={"aws": {"aws_access_key_id": "testing", "aws_secret_access_key": "testing"}},
    )
