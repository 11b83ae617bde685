"""Abstract base class for remote command execution."""

from abc import ABC, abstractmethod


class RemoteExecutor(ABC):
    """Abstract interface for running commands on the AS400.

    Implement this class to support other transports (SSH client, a
    pooled connection, a recorded fixture in tests, ...).
    """

    @abstractmethod
    async def run(self, command: str) -> str:
        """Run ``command`` in the remote shell and return its standard output.

        Args:
            command: Shell command line (PASE/QSH syntax)

        Returns:
            Captured standard output; never empty (a bare newline at least)

        Raises:
            RemoteCommandError: If the command exits non-zero with stderr output
            RemoteTimeoutError: If the command exceeds the configured timeout
        """
        pass
