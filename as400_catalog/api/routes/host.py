"""AS400 host API routes."""

from fastapi import APIRouter, Depends, Query
from loguru import logger

from as400_catalog.api.dependencies import get_host_service
from as400_catalog.api.schemas.common import APIResponse
from as400_catalog.api.schemas.host import CommandOutput, CommandRequest, QueryRequest
from as400_catalog.services.host import HostService

router = APIRouter(prefix="/host", tags=["AS400 Host"])


@router.post("/exec", response_model=APIResponse[CommandOutput])
async def exec_command(
    request: CommandRequest,
    service: HostService = Depends(get_host_service),
) -> APIResponse[CommandOutput]:
    """Execute a shell command on the AS400 (SSH)."""
    logger.info(f"exec: {request.command[:120]}")
    return APIResponse.ok(CommandOutput(text=await service.exec_command(request.command)))


@router.post("/query", response_model=APIResponse[CommandOutput])
async def run_query(
    request: QueryRequest,
    service: HostService = Depends(get_host_service),
) -> APIResponse[CommandOutput]:
    """Run a SQL statement on DB2 for i. Returns the result set as text."""
    return APIResponse.ok(CommandOutput(text=await service.query(request.sql)))


@router.get("/tables", response_model=APIResponse[CommandOutput])
async def find_table(
    pattern: str = Query(..., description="Table name or partial name (e.g. PAHSEW, %AXA%)"),
    limit: int | None = Query(default=None, description="Max rows to return (default 100)"),
    service: HostService = Depends(get_host_service),
) -> APIResponse[CommandOutput]:
    """Search for a table by name across all libraries."""
    return APIResponse.ok(CommandOutput(text=await service.find_table(pattern, limit)))


@router.get("/libraries/{schema}/tables", response_model=APIResponse[CommandOutput])
async def list_tables(
    schema: str,
    limit: int | None = Query(default=None, description="Max rows to return (default 500)"),
    service: HostService = Depends(get_host_service),
) -> APIResponse[CommandOutput]:
    """List tables (physical files) in a library."""
    return APIResponse.ok(CommandOutput(text=await service.list_tables(schema, limit)))


@router.get("/libraries/{schema}/tables/{table}/columns", response_model=APIResponse[CommandOutput])
async def describe_table(
    schema: str,
    table: str,
    service: HostService = Depends(get_host_service),
) -> APIResponse[CommandOutput]:
    """Column list (name, position, type, length) for a table."""
    return APIResponse.ok(CommandOutput(text=await service.describe_table(schema, table)))


@router.get("/libraries/{library}/files/{file}/members", response_model=APIResponse[CommandOutput])
async def list_file_members(
    library: str,
    file: str,
    output_library: str = Query(..., description="Library with write authority for the DSPFD outfile"),
    service: HostService = Depends(get_host_service),
) -> APIResponse[CommandOutput]:
    """List members of a physical file."""
    return APIResponse.ok(CommandOutput(
        text=await service.list_file_members(library, file, output_library)
    ))


@router.get("/libraries/{library}/files/{file}/dependents", response_model=APIResponse[CommandOutput])
async def table_dependents(
    library: str,
    file: str,
    output_library: str = Query(..., description="Library with write authority for the DSPDBR outfile"),
    service: HostService = Depends(get_host_service),
) -> APIResponse[CommandOutput]:
    """Logical files and programs that depend on a physical file."""
    return APIResponse.ok(CommandOutput(
        text=await service.table_dependents(library, file, output_library)
    ))


@router.get("/libraries/{library}/programs/{program}/references", response_model=APIResponse[CommandOutput])
async def program_references(
    library: str,
    program: str,
    output_library: str = Query(..., description="Library with write authority for the DSPPGMREF outfile"),
    service: HostService = Depends(get_host_service),
) -> APIResponse[CommandOutput]:
    """Objects (files, programs, ...) referenced by a program."""
    return APIResponse.ok(CommandOutput(
        text=await service.program_references(library, program, output_library)
    ))


@router.get("/libraries/{schema}/srvpgm/{srvpgm_name}/exports", response_model=APIResponse[CommandOutput])
async def list_srvpgm_exports(
    schema: str,
    srvpgm_name: str,
    service: HostService = Depends(get_host_service),
) -> APIResponse[CommandOutput]:
    """Exported procedures of a service program."""
    return APIResponse.ok(CommandOutput(
        text=await service.list_srvpgm_exports(schema, srvpgm_name)
    ))


@router.get("/libraries/{library}/files/{file}/members/{member}", response_model=APIResponse[CommandOutput])
async def read_source_member(
    library: str,
    file: str,
    member: str,
    service: HostService = Depends(get_host_service),
) -> APIResponse[CommandOutput]:
    """Read the contents of a source member."""
    return APIResponse.ok(CommandOutput(
        text=await service.read_source_member(library, file, member)
    ))
