from .base import (AppError, DomainError, InfrastructureError, StoreError,
                   ValidationError)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "InfrastructureError",
    "StoreError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
