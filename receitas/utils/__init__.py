"""
Shared utilities for the recipes API: logging and password hashing.
"""

from receitas.utils.auth import get_password_hash, new_session_token, verify_password
from receitas.utils.logger import cleanup_old_logs, setup_logger

__all__ = [
    # Authentication utilities
    "get_password_hash",
    "verify_password",
    "new_session_token",
    # Logging utilities
    "setup_logger",
    "cleanup_old_logs",
]
