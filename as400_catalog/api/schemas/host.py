"""Host API schemas."""

from pydantic import BaseModel, Field


class CommandRequest(BaseModel):
    """Shell command to run on the AS400."""

    command: str = Field(..., description="Shell command to run on the remote server")


class QueryRequest(BaseModel):
    """SQL statement for DB2 for i."""

    sql: str = Field(..., description="SQL statement (e.g. SELECT * FROM schema.table)")


class CommandOutput(BaseModel):
    """Raw text printed by the host."""

    text: str
