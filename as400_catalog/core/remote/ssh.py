"""SSH transport built on asyncssh."""

import asyncio
from dataclasses import dataclass
from typing import Any

import asyncssh
from loguru import logger
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from as400_catalog.config.settings import Settings, settings as default_settings
from as400_catalog.core.exceptions import (
    HostNotConfiguredError,
    RemoteCommandError,
    RemoteConnectionError,
    RemoteTimeoutError,
)
from as400_catalog.core.remote.base import RemoteExecutor


@dataclass(frozen=True)
class SshConfig:
    """Connection parameters for one AS400 host."""

    host: str
    user: str
    port: int = 22
    password: str | None = None
    key_path: str | None = None
    known_hosts: str | None = None
    timeout_seconds: float = 60.0
    retry_attempts: int = 3

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "SshConfig":
        settings = settings or default_settings
        if not settings.AS400_HOST or not settings.AS400_USER:
            raise HostNotConfiguredError("Missing AS400_HOST or AS400_USER")
        return cls(
            host=settings.AS400_HOST,
            user=settings.AS400_USER,
            port=settings.AS400_PORT,
            password=settings.AS400_PASSWORD,
            key_path=settings.AS400_KEY_PATH,
            known_hosts=settings.AS400_KNOWN_HOSTS,
            timeout_seconds=settings.COMMAND_TIMEOUT_SECONDS,
            retry_attempts=settings.SSH_RETRY_ATTEMPTS,
        )


def connect_options(config: SshConfig) -> dict[str, Any]:
    """Keyword arguments for ``asyncssh.connect``.

    Without a known_hosts file the host key is accepted as presented.
    Default client keys are only replaced when a key file is configured.
    """
    options: dict[str, Any] = {
        "port": config.port,
        "username": config.user,
        "known_hosts": config.known_hosts,
    }
    if config.password:
        options["password"] = config.password
    if config.key_path:
        options["client_keys"] = [config.key_path]
    return options


class SshExecutor(RemoteExecutor):
    """Run commands on the AS400 over an SSH session per command."""

    def __init__(self, config: SshConfig):
        self.config = config

    async def run(self, command: str) -> str:
        @retry(
            retry=retry_if_exception_type(RemoteConnectionError),
            stop=stop_after_attempt(max(1, self.config.retry_attempts)),
            wait=wait_exponential(multiplier=1, min=2, max=10),
            reraise=True,
        )
        async def _run_with_retry() -> str:
            return await self._run_once(command)

        return await _run_with_retry()

    async def _run_once(self, command: str) -> str:
        logger.debug(f"Running on {self.config.host}: {command[:200]}")
        try:
            result = await asyncio.wait_for(self._exec(command), timeout=self.config.timeout_seconds)
        except asyncio.TimeoutError:
            logger.error(f"Command timed out after {self.config.timeout_seconds:g}s on {self.config.host}")
            raise RemoteTimeoutError(self.config.timeout_seconds)

        stdout = result.stdout or ""
        stderr = result.stderr or ""
        code = result.exit_status
        if code != 0 and stderr.strip():
            raise RemoteCommandError(f"Exit {code}:\n{stderr}", exit_code=code)
        return stdout or "\n"

    async def _exec(self, command: str):
        try:
            async with asyncssh.connect(self.config.host, **connect_options(self.config)) as conn:
                return await conn.run(command, check=False)
        except (OSError, asyncssh.Error) as e:
            logger.warning(f"SSH connection to {self.config.host} failed: {e}")
            raise RemoteConnectionError(f"SSH error: {e}") from e
