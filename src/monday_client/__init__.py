"""monday_client package exports."""

from .client import Client
from .config import Configuration, load_env_config
from .errors import (
    API_ERROR_CODES,
    STATUS_CODE_ERRORS,
    AuthorizationError,
    ComplexityError,
    ErrorKind,
    InternalServerError,
    InvalidRequestError,
    MondayError,
    RateLimitError,
    ResourceNotFoundError,
    ResponseParseError,
    classify_by_api_code,
    classify_by_status,
)
from .formatting import (
    GraphQLEnum,
    SelectionDepthError,
    format_args,
    format_graphql_object,
    format_select,
)
from .logging import setup_logging
from .models import ItemsPage
from .response import Response

__version__ = "1.0.0"

__all__ = [
    # Client
    "Client",
    "Configuration",
    "load_env_config",
    "Response",
    "ItemsPage",
    # Formatting
    "format_args",
    "format_select",
    "format_graphql_object",
    "GraphQLEnum",
    "SelectionDepthError",
    # Errors
    "ErrorKind",
    "STATUS_CODE_ERRORS",
    "API_ERROR_CODES",
    "classify_by_status",
    "classify_by_api_code",
    "MondayError",
    "AuthorizationError",
    "InvalidRequestError",
    "RateLimitError",
    "ComplexityError",
    "ResourceNotFoundError",
    "InternalServerError",
    "ResponseParseError",
    # Logging
    "setup_logging",
]
