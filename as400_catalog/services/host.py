"""Host service: queries and commands against the AS400."""

from loguru import logger

from as400_catalog.config.settings import settings
from as400_catalog.core.exceptions import InvalidCommandError
from as400_catalog.core.remote import RemoteExecutor
from as400_catalog.core.remote import commands

LIST_TABLES_DEFAULT_LIMIT = 500
LIST_TABLES_MAX_LIMIT = 5000
FIND_TABLE_DEFAULT_LIMIT = 100
FIND_TABLE_MAX_LIMIT = 1000


class HostService:
    """Service layer for AS400 operations.

    Every method returns the raw text the host printed; callers decide how
    to present or parse it.
    """

    def __init__(self, executor: RemoteExecutor):
        self.executor = executor

    async def exec_command(self, command: str) -> str:
        """Run a shell command on the AS400."""
        command = (command or "").strip()
        if not command:
            raise InvalidCommandError("Command cannot be empty")
        return await self.executor.run(command)

    async def query(self, sql: str) -> str:
        """Run a SQL statement on DB2 for i."""
        statement = (sql or "").strip()
        if not statement:
            raise InvalidCommandError("SQL cannot be empty")
        return await self.executor.run(commands.db2_query_command(statement))

    async def describe_table(self, schema: str, table: str) -> str:
        """Column list (name, position, type, length, scale) of a table."""
        return await self.query(commands.describe_table_sql(schema, table))

    async def list_tables(self, schema: str, limit: int | None = None) -> str:
        limit = commands.clamp_limit(limit, LIST_TABLES_DEFAULT_LIMIT, LIST_TABLES_MAX_LIMIT)
        return await self.query(commands.list_tables_sql(schema, limit))

    async def find_table(self, pattern: str, limit: int | None = None) -> str:
        """Search a table by name across all libraries."""
        if not (pattern or "").strip():
            raise InvalidCommandError("Pattern cannot be empty")
        limit = commands.clamp_limit(limit, FIND_TABLE_DEFAULT_LIMIT, FIND_TABLE_MAX_LIMIT)
        return await self.query(commands.find_table_sql(pattern.strip(), limit))

    async def list_file_members(self, library: str, file: str, output_library: str) -> str:
        """Members of a physical file, via DSPFD to an outfile."""
        cl = commands.member_list_cl(library, file, output_library)
        await self.executor.run(commands.cl_system_command(cl))
        return await self.query(f"SELECT MBMEMBER FROM {output_library}.MBRLIST ORDER BY MBMEMBER")

    async def table_dependents(self, library: str, file: str, output_library: str) -> str:
        """Logical files and programs depending on a physical file (DSPDBR)."""
        cl = commands.database_relations_cl(library, file, output_library)
        await self.executor.run(commands.cl_system_command(cl))
        return await self.query(f"SELECT * FROM {commands.sql_literal(output_library)}.TMPDBR")

    async def program_references(self, library: str, program: str, output_library: str) -> str:
        """Objects referenced by a program (DSPPGMREF)."""
        cl = commands.program_references_cl(library, program, output_library)
        await self.executor.run(commands.cl_system_command(cl))
        return await self.query(f"SELECT * FROM {commands.sql_literal(output_library)}.TMPPGR")

    async def list_srvpgm_exports(self, schema: str, srvpgm_name: str, symbols_only: bool = False) -> str:
        """Exported procedures of a service program (IBM i 7.3+)."""
        return await self.query(commands.srvpgm_exports_sql(schema, srvpgm_name, symbols_only))

    async def read_source_member(self, library: str, file: str | None, member: str) -> str:
        """Read a source member through CPYTOSTMF and cat."""
        file = file or settings.DEFAULT_SOURCE_FILE
        logger.info(f"Reading source member {library}/{file}({member})")
        return await self.executor.run(commands.copy_member_command(library, file, member))
