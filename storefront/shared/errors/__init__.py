from .base import (
    AppError,
    DomainError,
    InfrastructureError,
    LoginFailedError,
    MalformedRequestBodyError,
)
from .http import API_PREFIX, error_body, handle_app_error, register_error_handler

__all__ = [
    "API_PREFIX",
    "AppError",
    "DomainError",
    "InfrastructureError",
    "LoginFailedError",
    "MalformedRequestBodyError",
    "error_body",
    "handle_app_error",
    "register_error_handler",
]
