"""Errors raised by the Hello CRM service."""


class HelloCrmError(Exception):
    """Base class for service errors."""


class ListenerBindError(HelloCrmError):
    """The TCP listener could not be bound (port in use, no permission, ...)."""

    def __init__(self, host: str, port: int, reason: str = ""):
        self.host = host
        self.port = port
        self.reason = reason
        message = f"Could not bind listener on {host}:{port}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
