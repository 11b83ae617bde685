"""Service program catalog API routes."""

from fastapi import APIRouter, Depends, Query
from loguru import logger

from as400_catalog.api.dependencies import get_catalog_service, get_connected_catalog_service
from as400_catalog.api.schemas.catalog import (
    CatalogQueryResponse,
    ClearResponse,
    CountResponse,
    FillOutcomeResponse,
    ProcedureResponse,
    ServiceProgramResponse,
    ShortenResponse,
    SourceTextRequest,
)
from as400_catalog.api.schemas.common import APIResponse
from as400_catalog.services.catalog import CatalogService

router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.get("", response_model=APIResponse[CatalogQueryResponse])
async def query_catalog(
    library: str | None = Query(default=None, description="Filter by library (e.g. AXA.PGMR)"),
    srvpgm_name: str | None = Query(default=None, description="Filter by service program (e.g. SPVSPO)"),
    pattern: str | None = Query(default=None, description="Search procedures containing this text"),
    service: CatalogService = Depends(get_catalog_service),
) -> APIResponse[CatalogQueryResponse]:
    """List service programs, the procedures of one, or search procedures."""
    result = await service.query(library, srvpgm_name, pattern)
    service_programs = [ServiceProgramResponse.model_validate(s) for s in result.service_programs]
    procedures = [ProcedureResponse.model_validate(p) for p in result.procedures]
    return APIResponse.ok(CatalogQueryResponse(
        service_programs=service_programs,
        procedures=procedures,
        total=len(service_programs) + len(procedures),
    ))


@router.post("/{library}/{srvpgm_name}/sync", response_model=APIResponse[CountResponse])
async def sync_exports(
    library: str,
    srvpgm_name: str,
    service: CatalogService = Depends(get_connected_catalog_service),
) -> APIResponse[CountResponse]:
    """Fetch the exports of a service program and store them in the catalog."""
    count = await service.sync_exports(library, srvpgm_name)
    return APIResponse.ok(CountResponse(library=library, srvpgm_name=srvpgm_name, count=count))


@router.post("/{library}/{srvpgm_name}/fill-from-source", response_model=APIResponse[CountResponse])
async def fill_from_source(
    library: str,
    srvpgm_name: str,
    source_file: str | None = Query(default=None, description="Source physical file (default QFUENTES)"),
    service: CatalogService = Depends(get_connected_catalog_service),
) -> APIResponse[CountResponse]:
    """Read the service program's source member and store procedure descriptions.

    Procedures without a comment in the source keep their current description.
    """
    count = await service.fill_from_source(library, srvpgm_name, source_file)
    return APIResponse.ok(CountResponse(library=library, srvpgm_name=srvpgm_name, count=count))


@router.post("/{library}/{srvpgm_name}/fill-from-text", response_model=APIResponse[CountResponse])
async def fill_from_text(
    library: str,
    srvpgm_name: str,
    request: SourceTextRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> APIResponse[CountResponse]:
    """Store procedure descriptions from source text sent by the caller."""
    count = await service.fill_from_source_text(library, srvpgm_name, request.source_text)
    return APIResponse.ok(CountResponse(library=library, srvpgm_name=srvpgm_name, count=count))


@router.post("/fill-from-source", response_model=APIResponse[list[FillOutcomeResponse]])
async def fill_from_source_all(
    source_file: str | None = Query(default=None, description="Override the source file of every entry"),
    service: CatalogService = Depends(get_connected_catalog_service),
) -> APIResponse[list[FillOutcomeResponse]]:
    """Fill descriptions from source for every catalogued service program. Slow."""
    outcomes = await service.fill_from_source_all(source_file)
    failed = sum(1 for o in outcomes if o.error)
    logger.info(f"fill-from-source (all): {len(outcomes) - failed} ok, {failed} failed")
    return APIResponse.ok([FillOutcomeResponse.model_validate(o) for o in outcomes])


@router.post("/fill-from-names", response_model=APIResponse[list[FillOutcomeResponse]])
async def fill_from_names(
    library: str | None = Query(default=None),
    srvpgm_name: str | None = Query(default=None),
    force: bool = Query(default=False, description="Overwrite existing descriptions"),
    service: CatalogService = Depends(get_catalog_service),
) -> APIResponse[list[FillOutcomeResponse]]:
    """Infer descriptions from procedure names."""
    outcomes = await service.fill_from_names(library, srvpgm_name, force)
    return APIResponse.ok([FillOutcomeResponse.model_validate(o) for o in outcomes])


@router.post("/shorten", response_model=APIResponse[ShortenResponse])
async def shorten_descriptions(
    library: str | None = Query(default=None),
    srvpgm_name: str | None = Query(default=None),
    service: CatalogService = Depends(get_catalog_service),
) -> APIResponse[ShortenResponse]:
    """Rewrite banner-style descriptions as one short line."""
    return APIResponse.ok(ShortenResponse(
        updated=await service.shorten_descriptions(library, srvpgm_name)
    ))


@router.delete("", response_model=APIResponse[ClearResponse])
async def clear_catalog(
    service: CatalogService = Depends(get_catalog_service),
) -> APIResponse[ClearResponse]:
    """Delete every service program and procedure from the catalog."""
    await service.clear()
    return APIResponse.ok(ClearResponse(message="Catalog cleared"))
