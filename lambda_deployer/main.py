"""
Lambda Deployer - CLI Entry Point.

Typer CLI for deploying and destroying the Lambda function and its public
URL. Without a command it drops into the interactive prompt.

Usage:
    lambda-deployer                           # interactive prompt
    lambda-deployer --project ./demo          # interactive, project preselected
    lambda-deployer deploy --project ./demo   # one-shot, exit code 0/1
"""

from pathlib import Path
from typing import Optional

import typer

from lambda_deployer.logger import logger, print_stack_trace
from lambda_deployer.core.context import DeploymentContext
from lambda_deployer.core.factory import create_context
import lambda_deployer.providers  # noqa: F401  (registers providers)
import lambda_deployer.providers.deployer as deployer


# ==========================================
# Configuration & Context Management
# ==========================================

# Current project state
_current_project: Path = Path.cwd()
_current_context: Optional[DeploymentContext] = None


def set_active_project(project_path: str) -> None:
    """Set the currently active project directory."""
    global _current_project, _current_context

    target_path = Path(project_path).expanduser()
    if not target_path.is_dir():
        raise ValueError(f"Project directory '{project_path}' does not exist.")

    _current_project = target_path
    _current_context = None  # Lazy initialization


def get_context() -> DeploymentContext:
    """Get the current deployment context, creating if needed."""
    global _current_context
    if _current_context is None:
        _current_context = create_context(_current_project)
    return _current_context


# ==========================================
# Command Helpers
# ==========================================

def help_menu():
    print("""
Available commands:

Deployment commands:
  deploy                      - Creates or updates the IAM role, Lambda function and Function URL.
  destroy                     - Deletes the Lambda function, its IAM role and Function URL.

Check/Info deployment status:
  check                       - Shows which of the role, function and URL exist.
  info_config                 - Shows the loaded configuration (config.json).

Other commands:
  set_project <path>          - Sets the active project directory.
  help                        - Show this help menu.
  exit                        - Exit the program.
""")


# ==========================================
# Command Handlers
# ==========================================

def handle_check(context: DeploymentContext) -> None:
    report = deployer.status(context)
    if report["role_arn"]:
        logger.info(f"✅ IAM Role exists: {report['role_arn']}")
    else:
        logger.error(f"❌ IAM Role missing: {context.config.role_name}")

    if report["function_exists"]:
        logger.info(f"✅ Lambda Function exists: {report['function_arn']}")
    else:
        logger.error(f"❌ Lambda Function missing: {context.config.function_name}")

    if report["function_url"]:
        logger.info(f"✅ Function URL exists: {report['function_url']}")
    else:
        logger.error(f"❌ Function URL missing for: {context.config.function_name}")


def handle_info_config(context: DeploymentContext) -> None:
    """Show configuration."""
    config = context.config
    print(f"Function Name: {config.function_name}")
    print(f"Role Name: {config.role_name}")
    print(f"Region: {context.region}")
    print(f"Base Image: {config.base_image}")
    print(f"Mode: {config.mode}")
    print(f"Memory / Timeout: {config.memory_size} MB / {config.timeout} s")
    print(f"Architecture: {config.architecture}")


COMMANDS = {
    "deploy": lambda ctx: print(deployer.deploy(ctx)),
    "destroy": lambda ctx: print(deployer.destroy(ctx)),
    "check": handle_check,
    "info_config": handle_info_config,
}


def run_command(command: str, args: list) -> bool:
    """
    Execute one command.

    Returns:
        True on success, False if the command failed or is unknown.
    """
    if command == "help":
        help_menu()
        return True

    if command == "set_project":
        if not args:
            print("Error: Project path required.")
            return False
        try:
            set_active_project(args[0])
        except ValueError as e:
            print(f"Error: {e}")
            return False
        print(f"Active project set to: {_current_project}")
        return True

    handler = COMMANDS.get(command)
    if handler is None:
        print(f"Unknown command: {command}. Type 'help' for available commands.")
        return False

    try:
        handler(get_context())
    except Exception as e:
        print_stack_trace()
        logger.error(f"Error during '{command}': {e}")
        return False
    return True


# ==========================================
# Typer entry point
# ==========================================

app = typer.Typer(
    name="lambda-deployer",
    help="Deploy or destroy a Lambda function with a public Function URL.",
    add_completion=False,
)


def _project_option():
    return typer.Option(
        None,
        "--project",
        "-p",
        exists=True,
        file_okay=False,
        dir_okay=True,
        help="Project directory containing config.json (defaults to the current directory).",
    )


def _run_or_exit(command: str, project: Optional[Path]) -> None:
    if project is not None:
        set_active_project(str(project))
    if not run_command(command, []):
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def cli(ctx: typer.Context, project: Optional[Path] = _project_option()) -> None:
    """Without a command, starts the interactive prompt."""
    if project is not None:
        set_active_project(str(project))
    if ctx.invoked_subcommand is None:
        interactive_loop()


@app.command(name="deploy", help="Create or update the IAM role, Lambda function and Function URL.")
def deploy_cmd(project: Optional[Path] = _project_option()) -> None:
    _run_or_exit("deploy", project)


@app.command(name="destroy", help="Delete the Lambda function, its IAM role and Function URL.")
def destroy_cmd(project: Optional[Path] = _project_option()) -> None:
    _run_or_exit("destroy", project)


@app.command(name="check", help="Show which of the role, function and URL exist.")
def check_cmd(project: Optional[Path] = _project_option()) -> None:
    _run_or_exit("check", project)


@app.command(name="info_config", help="Show the loaded configuration (config.json).")
def info_config_cmd(project: Optional[Path] = _project_option()) -> None:
    _run_or_exit("info_config", project)


@app.command(name="help", help="Show the interactive command list.")
def help_cmd() -> None:
    help_menu()


def interactive_loop() -> None:
    logger.info("Welcome to the Lambda Deployer. Type 'help' for commands.")

    while True:
        try:
            user_input = input(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("Goodbye!")
            break

        if not user_input:
            continue

        parts = user_input.split()
        command = parts[0]

        if command == "exit":
            print("Goodbye!")
            break

        run_command(command, parts[1:])


def main() -> None:
    """CLI entry point."""
    app(prog_name="lambda-deployer")


if __name__ == "__main__":
    main()
