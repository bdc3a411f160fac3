"""
Unit tests for AWSUrlReconciler with a mocked Lambda client.
"""

import pytest
from unittest.mock import MagicMock

from botocore.exceptions import ClientError

from lambda_deployer.core.exceptions import IncompleteResponseError, PreconditionFailedError
from lambda_deployer.providers.aws.function_url import AWSUrlReconciler

FUNCTION_NAME = "lambda-example"
URL = "https://abc123xyz.lambda-url.eu-central-1.on.aws/"


@pytest.fixture
def lambda_client(make_client_error):
    client = MagicMock()
    client.get_function_url_config.side_effect = make_client_error(
        "ResourceNotFoundException", "GetFunctionUrlConfig"
    )
    client.create_function_url_config.return_value = {"FunctionUrl": URL}
    return client


@pytest.fixture
def reconciler(lambda_client):
    return AWSUrlReconciler(lambda_client)


class TestFunctionUrlExists:

    def test_returns_url(self, reconciler, lambda_client):
        lambda_client.get_function_url_config.side_effect = None
        lambda_client.get_function_url_config.return_value = {"FunctionUrl": URL}
        assert reconciler.function_url_exists(FUNCTION_NAME) == URL

    def test_not_found_is_none(self, reconciler):
        assert reconciler.function_url_exists(FUNCTION_NAME) is None

    def test_other_errors_propagate(self, reconciler, lambda_client, make_client_error):
        lambda_client.get_function_url_config.side_effect = make_client_error(
            "TooManyRequestsException", "GetFunctionUrlConfig"
        )
        with pytest.raises(ClientError):
            reconciler.function_url_exists(FUNCTION_NAME)


class TestCreateFunctionUrl:

    def test_existing_url_returned_without_changes(self, reconciler, lambda_client):
        lambda_client.get_function_url_config.side_effect = None
        lambda_client.get_function_url_config.return_value = {"FunctionUrl": URL}

        assert reconciler.create_function_url(FUNCTION_NAME) == URL

        lambda_client.create_function_url_config.assert_not_called()
        lambda_client.add_permission.assert_not_called()

    def test_creates_url_with_default_cors_and_grants_invoke(self, reconciler, lambda_client):
        assert reconciler.create_function_url(FUNCTION_NAME) == URL

        lambda_client.create_function_url_config.assert_called_once_with(
            FunctionName=FUNCTION_NAME,
            AuthType="NONE",
            Cors={
                "AllowOrigins": ["*"],
                "AllowMethods": ["*"],
                "AllowHeaders": ["*"],
                "AllowCredentials": False,
            },
        )
        lambda_client.add_permission.assert_called_once_with(
            FunctionName=FUNCTION_NAME,
            StatementId="public-url",
            Action="lambda:InvokeFunctionUrl",
            Principal="*",
            FunctionUrlAuthType="NONE",
        )

    def test_permission_granted_after_url_config(self, reconciler, lambda_client):
        reconciler.create_function_url(FUNCTION_NAME)
        names = [c[0] for c in lambda_client.method_calls]
        assert names.index("create_function_url_config") < names.index("add_permission")

    def test_custom_cors_and_auth(self, reconciler, lambda_client):
        reconciler.create_function_url(
            FUNCTION_NAME,
            auth_type="AWS_IAM",
            cors_origins=["https://example.com"],
            cors_methods=["GET"],
            cors_headers=["content-type"],
            allow_credentials=True,
        )
        kwargs = lambda_client.create_function_url_config.call_args.kwargs
        assert kwargs["AuthType"] == "AWS_IAM"
        assert kwargs["Cors"] == {
            "AllowOrigins": ["https://example.com"],
            "AllowMethods": ["GET"],
            "AllowHeaders": ["content-type"],
            "AllowCredentials": True,
        }
        assert lambda_client.add_permission.call_args.kwargs["FunctionUrlAuthType"] == "AWS_IAM"

    def test_permission_conflict_is_swallowed(self, reconciler, lambda_client, make_client_error):
        lambda_client.add_permission.side_effect = make_client_error(
            "ResourceConflictException", "AddPermission", "The statement id (public-url) provided already exists."
        )
        assert reconciler.create_function_url(FUNCTION_NAME) == URL

    def test_other_permission_errors_propagate(self, reconciler, lambda_client, make_client_error):
        lambda_client.add_permission.side_effect = make_client_error("AccessDeniedException", "AddPermission")
        with pytest.raises(ClientError):
            reconciler.create_function_url(FUNCTION_NAME)

    def test_missing_url_is_fatal(self, reconciler, lambda_client):
        lambda_client.create_function_url_config.return_value = {}
        with pytest.raises(IncompleteResponseError, match="FunctionUrl"):
            reconciler.create_function_url(FUNCTION_NAME)
        lambda_client.add_permission.assert_not_called()

    def test_invalid_auth_type(self, reconciler, lambda_client):
        with pytest.raises(PreconditionFailedError, match="auth type"):
            reconciler.create_function_url(FUNCTION_NAME, auth_type="PUBLIC")
        lambda_client.create_function_url_config.assert_not_called()

    def test_twice_creates_and_grants_once(self, reconciler, lambda_client, make_client_error):
        lambda_client.get_function_url_config.side_effect = [
            make_client_error("ResourceNotFoundException", "GetFunctionUrlConfig"),
            {"FunctionUrl": URL},
        ]

        first = reconciler.create_function_url(FUNCTION_NAME)
        second = reconciler.create_function_url(FUNCTION_NAME)

        assert first == second == URL
        assert lambda_client.create_function_url_config.call_count == 1
        assert lambda_client.add_permission.call_count == 1


def test_delete_function_url(reconciler, lambda_client):
    reconciler.delete_function_url(FUNCTION_NAME)
    lambda_client.delete_function_url_config.assert_called_once_with(FunctionName=FUNCTION_NAME)
