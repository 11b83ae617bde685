"""Test helpers: a scripted AS400 and throwaway catalog databases."""

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from as400_catalog.core.remote import RemoteExecutor


class FakeExecutor(RemoteExecutor):
    """Records every command and answers from a script.

    ``responses`` maps a substring of the command to the text (or exception)
    returned for it; the first matching entry wins.
    """

    def __init__(self, responses=None, default="\n"):
        self.responses = dict(responses or {})
        self.default = default
        self.commands: list[str] = []

    async def run(self, command: str) -> str:
        self.commands.append(command)
        for needle, reply in self.responses.items():
            if needle in command:
                if isinstance(reply, Exception):
                    raise reply
                return reply
        return self.default


def memory_engine():
    return create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
