"""
Protocol definitions for the Lambda deployer.

One interface per managed resource type, plus the provider that hands them
out. Using Python's Protocol (structural subtyping) keeps implementations
free of inheritance while still giving IDE support and type checking.

Design Pattern: Strategy Pattern + Abstract Factory
    - CloudProvider: Abstract Factory producing the three reconcilers
    - RoleReconciler / FunctionReconciler / UrlReconciler: one strategy
      per resource type

A second backend only needs a new CloudProvider implementation registered
in the ProviderRegistry; the orchestrator in providers/deployer.py does not
change.
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class RoleReconciler(Protocol):
    """
    Drives the function's execution role toward "exists".

    Semantics:
        exists: lookup by name, "not found" maps to None
        ensure_exists: returns the existing ARN or creates, attaches the
            basic execution policy and waits (bounded) for propagation
        remove: unconditional delete by name
    """

    def exists(self, role_name: str) -> Optional[str]:
        ...

    def ensure_exists(self, role_name: str) -> str:
        ...

    def remove(self, role_name: str) -> None:
        ...


@runtime_checkable
class FunctionReconciler(Protocol):
    """
    Creation, code update and removal of one serverless function.

    create is a creation primitive only. Callers branch on exists and call
    update_code for an existing function.
    """

    def exists(self, function_name: str) -> bool:
        ...

    def get_arn(self, function_name: str) -> Optional[str]:
        ...

    def create(
        self,
        function_name: str,
        role_arn: str,
        handler: str,
        runtime: str,
        artifact: bytes,
        memory_size: int = 128,
        timeout: int = 30,
        architecture: str = "arm64",
        description: Optional[str] = None,
    ) -> str:
        ...

    def update_code(self, function_name: str, artifact: bytes) -> None:
        ...

    def remove(self, function_name: str) -> None:
        ...


@runtime_checkable
class UrlReconciler(Protocol):
    """
    Public URL configuration of a function plus its invoke permission.

    create_function_url is idempotent end-to-end: it returns an existing URL
    untouched, otherwise creates the URL config and grants anonymous invoke
    under a fixed statement id.
    """

    def function_url_exists(self, function_name: str) -> Optional[str]:
        ...

    def create_function_url(
        self,
        function_name: str,
        auth_type: str = "NONE",
        cors_origins: Optional[list[str]] = None,
        cors_methods: Optional[list[str]] = None,
        cors_headers: Optional[list[str]] = None,
        allow_credentials: bool = False,
    ) -> str:
        ...

    def delete_function_url(self, function_name: str) -> None:
        ...


@runtime_checkable
class CloudProvider(Protocol):
    """
    Protocol defining the interface for a cloud provider.

    Responsibilities:
        - Resolve credentials into SDK clients (fresh per run, never cached
          across credential rotation)
        - Hand out the reconcilers bound to those clients

    Example Implementation:
        class AWSProvider:
            name = "aws"

            def initialize_clients(self, credentials, region):
                self._clients = resolve_clients(credentials, region)

            @property
            def roles(self):
                return AWSRoleReconciler(self._clients["iam"])
    """

    @property
    def name(self) -> str:
        """Provider identifier used for logging and registry lookup."""
        ...

    def initialize_clients(self, credentials: dict, region: str) -> None:
        """
        Initialize SDK clients for this provider.

        Args:
            credentials: Provider-specific credential dictionary.
                AWS: {
                    "aws_access_key_id": str,
                    "aws_secret_access_key": str,
                    "aws_session_token": str (optional)
                }
            region: Target region

        Raises:
            ConfigurationError: If credentials are invalid or incomplete.
        """
        ...

    @property
    def roles(self) -> RoleReconciler:
        ...

    @property
    def functions(self) -> FunctionReconciler:
        ...

    @property
    def function_urls(self) -> UrlReconciler:
        ...
