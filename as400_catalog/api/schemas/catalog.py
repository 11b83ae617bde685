"""Catalog API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class ServiceProgramResponse(BaseModel):
    """Catalogued service program."""

    library: str
    name: str
    source_file: str
    notes: str | None = None
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProcedureResponse(BaseModel):
    """Catalogued exported procedure."""

    library: str
    srvpgm_name: str
    method_name: str
    description: str | None = None
    updated_at: datetime

    model_config = {"from_attributes": True}


class CatalogQueryResponse(BaseModel):
    """Catalog query result; one of the lists is filled."""

    service_programs: list[ServiceProgramResponse] = Field(default_factory=list)
    procedures: list[ProcedureResponse] = Field(default_factory=list)
    total: int


class SourceTextRequest(BaseModel):
    """Source member text supplied by the caller."""

    source_text: str = Field(..., description="Full text of the RPG source member")


class CountResponse(BaseModel):
    """Number of catalog rows written for one service program."""

    library: str
    srvpgm_name: str
    count: int


class FillOutcomeResponse(BaseModel):
    """Outcome of a fill for one service program."""

    library: str
    srvpgm_name: str
    count: int = 0
    error: str | None = None

    model_config = {"from_attributes": True}


class ShortenResponse(BaseModel):
    updated: int


class ClearResponse(BaseModel):
    message: str
