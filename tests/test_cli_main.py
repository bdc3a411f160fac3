"""
Tests for the CLI (lambda_deployer.main).

create_context and the deployer are patched; the tests only check command
dispatch, project selection and exit codes.
"""

import pytest
from unittest.mock import patch
from typer.testing import CliRunner

import lambda_deployer.main as main

runner = CliRunner()

URL = "https://abc123xyz.lambda-url.eu-central-1.on.aws/"


@pytest.fixture(autouse=True)
def reset_cli_state():
    project = main._current_project
    main._current_context = None
    yield
    main._current_project = project
    main._current_context = None


@pytest.fixture
def fake_context(mock_context):
    with patch("lambda_deployer.main.create_context", return_value=mock_context) as mock_create:
        yield mock_create


class TestProjectManagement:

    def test_set_active_project(self, tmp_path):
        main.set_active_project(str(tmp_path))
        assert main._current_project == tmp_path
        assert main._current_context is None

    def test_set_active_project_missing_dir(self, tmp_path):
        with pytest.raises(ValueError, match="does not exist"):
            main.set_active_project(str(tmp_path / "missing"))

    def test_get_context_is_cached(self, tmp_path, fake_context):
        main.set_active_project(str(tmp_path))
        first = main.get_context()
        second = main.get_context()
        assert first is second
        fake_context.assert_called_once_with(tmp_path)


class TestCliApp:

    def test_help_flag_lists_commands(self):
        result = runner.invoke(main.app, ["--help"])
        assert result.exit_code == 0
        for command in ("deploy", "destroy", "check", "info_config"):
            assert command in result.output

    def test_help_command(self):
        result = runner.invoke(main.app, ["help"])
        assert result.exit_code == 0
        assert "Available commands" in result.output

    def test_unknown_command_is_usage_error(self):
        result = runner.invoke(main.app, ["bogus"])
        assert result.exit_code == 2

    def test_project_flag_without_value_is_usage_error(self, fake_context):
        with patch("lambda_deployer.main.deployer.deploy") as mock_deploy:
            result = runner.invoke(main.app, ["deploy", "--project"])
        assert result.exit_code == 2
        mock_deploy.assert_not_called()

    def test_missing_project_dir_is_usage_error(self, tmp_path, fake_context):
        with patch("lambda_deployer.main.deployer.deploy") as mock_deploy:
            result = runner.invoke(main.app, ["deploy", "--project", str(tmp_path / "missing")])
        assert result.exit_code == 2
        mock_deploy.assert_not_called()


class TestOneShot:

    def test_deploy_prints_url(self, tmp_path, fake_context):
        with patch("lambda_deployer.main.deployer.deploy", return_value=f"Deployed lambda-example: {URL}"):
            result = runner.invoke(main.app, ["deploy", "--project", str(tmp_path)])
        assert result.exit_code == 0
        assert URL in result.output
        assert main._current_project == tmp_path
        fake_context.assert_called_once_with(tmp_path)

    def test_project_before_command(self, tmp_path, fake_context):
        with patch("lambda_deployer.main.deployer.deploy", return_value="Deployed"):
            result = runner.invoke(main.app, ["--project", str(tmp_path), "deploy"])
        assert result.exit_code == 0
        fake_context.assert_called_once_with(tmp_path)

    def test_destroy(self, tmp_path, fake_context):
        with patch("lambda_deployer.main.deployer.destroy", return_value="Destroyed lambda-example") as mock_destroy:
            result = runner.invoke(main.app, ["destroy", "-p", str(tmp_path)])
        assert result.exit_code == 0
        mock_destroy.assert_called_once()
        assert "Destroyed lambda-example" in result.output

    def test_deploy_failure_exit_code(self, tmp_path, fake_context):
        with patch("lambda_deployer.main.deployer.deploy", side_effect=RuntimeError("AccessDenied")):
            result = runner.invoke(main.app, ["deploy", "--project", str(tmp_path)])
        assert result.exit_code == 1

    def test_check(self, tmp_path, fake_context):
        report = {"role_arn": None, "function_exists": False, "function_arn": None, "function_url": None}
        with patch("lambda_deployer.main.deployer.status", return_value=report) as mock_status:
            result = runner.invoke(main.app, ["check", "--project", str(tmp_path)])
        assert result.exit_code == 0
        mock_status.assert_called_once()

    def test_info_config(self, tmp_path, fake_context):
        result = runner.invoke(main.app, ["info_config", "--project", str(tmp_path)])
        assert result.exit_code == 0
        assert "lambda-example" in result.output
        assert "eu-central-1" in result.output


class TestInteractive:

    def test_loop_until_exit(self, tmp_path):
        commands = f"\nhelp\nbogus\nset_project\nset_project {tmp_path}\nexit\n"
        result = runner.invoke(main.app, ["--project", str(tmp_path)], input=commands)

        assert result.exit_code == 0
        assert "Available commands" in result.output
        assert "Unknown command: bogus" in result.output
        assert "Project path required" in result.output
        assert f"Active project set to: {tmp_path}" in result.output
        assert "Goodbye!" in result.output

    def test_eof_exits(self):
        result = runner.invoke(main.app, [], input="")
        assert result.exit_code == 0
        assert "Goodbye!" in result.output

    def test_run_command_reports_failures(self, fake_context):
        with patch("lambda_deployer.main.deployer.destroy", side_effect=RuntimeError("boom")):
            assert main.run_command("destroy", []) is False
        assert main.run_command("unknown", []) is False
        assert main.run_command("help", []) is True
