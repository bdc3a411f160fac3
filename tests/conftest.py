import pytest
from pathlib import Path
from unittest.mock import MagicMock

from botocore.exceptions import ClientError


@pytest.fixture(scope="function", autouse=True)
def mock_env_vars(monkeypatch):
    """Set mock environment variables to prevent accidental cloud calls."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-central-1")
    monkeypatch.delenv("AWS_REGION", raising=False)
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture(autouse=True)
def mock_sleep(monkeypatch):
    """Skip time.sleep calls to speed up tests."""
    monkeypatch.setattr("time.sleep", lambda x: None)


@pytest.fixture(scope="function")
def mock_project_config():
    """
    Create a ProjectConfig for tests.
    """
    from lambda_deployer.core.context import ProjectConfig

    return ProjectConfig(
        function_name="lambda-example",
        role_name="lambda-example-role",
        region="eu-central-1",
        mode="DEBUG",
    )


@pytest.fixture(scope="function")
def mock_context(mock_project_config, tmp_path):
    """DeploymentContext over a temporary project directory."""
    from lambda_deployer.core.context import DeploymentContext

    return DeploymentContext(
        project_path=tmp_path,
        config=mock_project_config,
        credentials={
            "aws": {
                "aws_access_key_id": "testing",
                "aws_secret_access_key": "testing",
                "aws_region": "eu-central-1",
            }
        },
    )


@pytest.fixture
def mock_provider():
    """CloudProvider whose reconcilers are MagicMocks."""
    provider = MagicMock()
    provider.name = "aws"
    return provider


def client_error(code: str, operation: str = "Operation", message: str = "error") -> ClientError:
    """Build a botocore ClientError carrying the given AWS error code."""
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


@pytest.fixture
def make_client_error():
    return client_error


@pytest.fixture
def sample_project_dir(tmp_path) -> Path:
    """Project directory with a minimal valid config.json."""
    import json

    project_dir = tmp_path / "sample_project"
    project_dir.mkdir()
    (project_dir / "config.json").write_text(json.dumps({
        "function_name": "lambda-example",
        "role_name": "lambda-example-role",
    }))
    return project_dir
