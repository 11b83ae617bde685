"""Database models."""

from as400_catalog.db.models.service_program import ProcedureRecord, ServiceProgram

__all__ = ["ProcedureRecord", "ServiceProgram"]
