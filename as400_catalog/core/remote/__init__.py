"""Remote command execution on the AS400."""

from as400_catalog.core.remote.base import RemoteExecutor
from as400_catalog.core.remote.ssh import SshConfig, SshExecutor

__all__ = ["RemoteExecutor", "SshConfig", "SshExecutor"]
