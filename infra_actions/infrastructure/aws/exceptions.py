# infra_actions/infrastructure/aws/exceptions.py
from enum import Enum
from typing import Any, Dict

from botocore.exceptions import ClientError

from infra_actions.infrastructure.exceptions import ProviderError

CLIENT_EXCEPTION_CODES = ("ClientException",)
SERVER_EXCEPTION_CODES = ("ServerException", "InternalError", "InternalFailure", "ServiceUnavailable")


class ErrorKind(str, Enum):
    """Which side of the provider boundary a failure came from."""
    CLIENT = "client"
    SERVER = "server"
    UNKNOWN = "unknown"


def classify_client_error(error: ClientError) -> ErrorKind:
    """
    Derive the error kind from an AWS ClientError.

    Batch reports ``ClientException``/``ServerException`` codes; other services
    are classified by the HTTP status of the failed response.

    Args:
        error: ClientError raised by botocore

    Returns:
        ErrorKind for the failure
    """
    response: Dict[str, Any] = error.response or {}
    code = response.get("Error", {}).get("Code", "")

    if code in CLIENT_EXCEPTION_CODES:
        return ErrorKind.CLIENT
    if code in SERVER_EXCEPTION_CODES:
        return ErrorKind.SERVER

    status = response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    if isinstance(status, int):
        if 400 <= status < 500:
            return ErrorKind.CLIENT
        if status >= 500:
            return ErrorKind.SERVER
    return ErrorKind.UNKNOWN


def convert_client_error(operation: str, error: ClientError) -> ProviderError:
    """Convert AWS ClientError to a ProviderError carrying code, message and kind."""
    response: Dict[str, Any] = error.response or {}
    error_code = response.get("Error", {}).get("Code")
    error_message = response.get("Error", {}).get("Message") or str(error)
    return ProviderError(
        operation,
        error_message,
        error_code=error_code,
        kind=classify_client_error(error),
        details=response.get("Error"),
    )
