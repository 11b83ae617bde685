"""Remote host (AS400) exceptions."""


class RemoteException(Exception):
    """Base exception for remote command errors."""

    def __init__(self, message: str = "A remote command error occurred"):
        self.message = message
        super().__init__(self.message)


class HostNotConfiguredError(RemoteException):
    """Raised when the AS400 host or user is missing from settings."""

    def __init__(self, message: str = "Missing AS400 host or user"):
        super().__init__(message)


class InvalidCommandError(RemoteException):
    """Raised when a command or SQL statement is empty or unusable."""

    def __init__(self, message: str = "Command cannot be empty"):
        super().__init__(message)


class RemoteCommandError(RemoteException):
    """Raised when the remote command fails or the connection cannot be made."""

    def __init__(self, message: str = "Remote command failed", exit_code: int | None = None):
        super().__init__(message)
        self.exit_code = exit_code


class RemoteConnectionError(RemoteCommandError):
    """Raised when the SSH session cannot be opened or authenticated."""

    def __init__(self, message: str = "SSH connection failed"):
        super().__init__(message)


class RemoteTimeoutError(RemoteException):
    """Raised when a remote command exceeds the configured timeout."""

    def __init__(self, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(f"Command timed out after {timeout_seconds:g}s")
