from pathlib import Path

# ==========================================
# 1. Configuration Filenames
# ==========================================
CONFIG_FILE = "config.json"
CONFIG_CREDENTIALS_AWS_FILE = "config_credentials_aws.json"

# Keys required in specific config files
CONFIG_SCHEMAS = {
    CONFIG_FILE: ["function_name", "role_name"],
    CONFIG_CREDENTIALS_AWS_FILE: ["aws_access_key_id", "aws_secret_access_key"],
}

REQUIRED_CREDENTIALS_FIELDS = {
    "aws": ["aws_access_key_id", "aws_secret_access_key"],
}

# Environment fallback when no credentials file is present
AWS_ENV_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
AWS_ENV_SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
AWS_ENV_SESSION_TOKEN = "AWS_SESSION_TOKEN"
AWS_ENV_REGION = "AWS_REGION"
AWS_ENV_DEFAULT_REGION = "AWS_DEFAULT_REGION"

# ==========================================
# 2. Defaults
# ==========================================
DEFAULT_PROVIDER = "aws"
DEFAULT_AWS_REGION = "eu-central-1"
DEFAULT_BASE_IMAGE = "python:3.13"
DEFAULT_FUNCTION_NAME = "lambda-example"
DEFAULT_ROLE_NAME = "lambda-example-role"

# ==========================================
# 3. AWS IAM
# ==========================================
AWS_POLICY_LAMBDA_BASIC_EXECUTION = "arn:aws:iam::aws:policy/service-role/AWSLambdaBasicExecutionRole"
AWS_LAMBDA_SERVICE_PRINCIPAL = "lambda.amazonaws.com"

# Fixed poll for IAM eventual consistency (5 x 2s, then proceed anyway)
ROLE_PROPAGATION_MAX_ATTEMPTS = 5
ROLE_PROPAGATION_INTERVAL_SECONDS = 2

# ==========================================
# 4. AWS Lambda
# ==========================================
LAMBDA_RUNTIME = "python3.13"
LAMBDA_HANDLER = "lambda_function.lambda_handler"
LAMBDA_DEFAULT_MEMORY_SIZE = 128
LAMBDA_DEFAULT_TIMEOUT = 30
LAMBDA_DEFAULT_ARCHITECTURE = "arm64"
LAMBDA_DEFAULT_DESCRIPTION = "Simple HTML page + JSON API via Lambda Function URL"

FUNCTION_URL_AUTH_TYPES = ("NONE", "AWS_IAM")
FUNCTION_URL_DEFAULT_AUTH_TYPE = "NONE"
FUNCTION_URL_PERMISSION_STATEMENT_ID = "public-url"
FUNCTION_URL_PERMISSION_ACTION = "lambda:InvokeFunctionUrl"
FUNCTION_URL_PERMISSION_PRINCIPAL = "*"

# ==========================================
# 5. Bundled Lambda Sources
# ==========================================
LAMBDA_FUNCTIONS_DIR = Path(__file__).parent / "providers" / "aws" / "lambda_functions"
WEB_APP_FUNCTION_DIR_NAME = "web-app"
