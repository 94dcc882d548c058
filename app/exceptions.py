"""
Custom Exceptions Module

This module defines the exceptions raised by the front door.
"""

from typing import Optional


class AppError(Exception):
    """Base exception class for all application errors"""

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        status_code: Optional[int] = None,
    ) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for JSON response"""
        return {"success": False, "error": self.message}


class BindError(AppError):
    """Exception raised when the listener cannot bind its address"""

    def __init__(self, host: str, port: int, message: Optional[str] = None) -> None:
        self.host = host
        self.port = port
        super().__init__(message or f"Could not bind {host}:{port}")
