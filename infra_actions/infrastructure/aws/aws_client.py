import logging
from typing import Any, Callable, Dict, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    NoCredentialsError,
    PartialCredentialsError,
)

from infra_actions.config.schemas.app_schema import AWSConfig
from infra_actions.infrastructure.aws.exceptions import ErrorKind, convert_client_error
from infra_actions.infrastructure.exceptions import ProviderError, SessionError

logger = logging.getLogger(__name__)


class AWSClientFactory:
    """
    Builds region-scoped AWS clients for handler invocations.

    The factory is constructed once per process and injected into every
    handler. It holds configuration only: each call to :meth:`client` opens a
    fresh boto3 session, so no session or connection is shared between
    invocations.
    """

    def __init__(self, config: AWSConfig):
        """
        Initialize the factory.

        Args:
            config: AWS section of the application configuration
        """
        self.region_name = config.region
        self.endpoint_url = config.endpoint_url
        self.profile_name = config.profile
        self.config = Config(
            region_name=config.region,
            retries={
                'total_max_attempts': config.request_retry_attempts + 1,
                'mode': 'standard'
            },
            connect_timeout=config.connection_timeout_ms / 1000,
            read_timeout=config.read_timeout_ms / 1000,
        )

    def create_session(self) -> boto3.session.Session:
        """
        Create a new provider session scoped to the configured region.

        Raises:
            SessionError: If the session cannot be established
        """
        try:
            return boto3.session.Session(
                region_name=self.region_name,
                profile_name=self.profile_name,
            )
        except BotoCoreError as e:
            logger.error(f"Failed to create AWS session for {self.region_name}: {str(e)}")
            raise SessionError(
                f"Failed to create AWS session for region {self.region_name}: {str(e)}"
            ) from e

    def client(self, service_name: str) -> Any:
        """
        Create a client for ``service_name`` on a fresh session.

        Args:
            service_name: boto3 service name (``ec2``, ``ssm``, ``batch``)

        Returns:
            boto3 client

        Raises:
            SessionError: If the session or client cannot be created
        """
        session = self.create_session()
        client_kwargs: Dict[str, Any] = {'config': self.config}
        if self.endpoint_url:
            client_kwargs['endpoint_url'] = self.endpoint_url

        try:
            client = session.client(service_name, **client_kwargs)
        except (BotoCoreError, ValueError) as e:
            logger.error(f"Error creating {service_name} client: {str(e)}")
            raise SessionError(
                f"Failed to create {service_name} client for {self.region_name} session: {str(e)}"
            ) from e

        logger.debug(f"Created {service_name} client in {self.region_name}")
        return client

    def ec2(self) -> Any:
        """Create an EC2 client."""
        return self.client('ec2')

    def ssm(self) -> Any:
        """Create an SSM client."""
        return self.client('ssm')

    def batch(self) -> Any:
        """Create an AWS Batch client."""
        return self.client('batch')

    @staticmethod
    def invoke(operation: Callable[..., Any], operation_name: Optional[str] = None, **kwargs) -> Any:
        """
        Execute a single provider call and translate its failures.

        No retry is attempted: the first failure is surfaced to the caller.

        Args:
            operation: Bound client method to call
            operation_name: Name used in errors; defaults to the method name
            **kwargs: Operation parameters

        Returns:
            Raw provider response

        Raises:
            SessionError: If credentials could not be resolved for the call
            ProviderError: If the call itself failed
        """
        name = operation_name or getattr(operation, '__name__', 'operation')
        try:
            return operation(**kwargs)
        except ClientError as e:
            error = convert_client_error(name, e)
            logger.error(
                f"{name} failed with {error.kind.value} error "
                f"{error.error_code}: {error.error_message}"
            )
            raise error from e
        except (NoCredentialsError, PartialCredentialsError) as e:
            logger.error(f"No usable AWS credentials for {name}: {str(e)}")
            raise SessionError(f"Failed to resolve AWS credentials for {name}: {str(e)}") from e
        except BotoCoreError as e:
            logger.error(f"{name} failed: {str(e)}")
            raise ProviderError(name, str(e), kind=ErrorKind.UNKNOWN) from e
