"""Catalog repository for service programs and their procedures."""

from collections.abc import Iterable, Mapping
from typing import Sequence

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from as400_catalog.db.models.service_program import (
    DEFAULT_SOURCE_FILE,
    ProcedureRecord,
    ServiceProgram,
    utcnow,
)


class CatalogRepository:
    """Repository for ServiceProgram and ProcedureRecord operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    # --- service programs ---

    async def upsert_service_program(
        self,
        library: str,
        name: str,
        source_file: str | None = None,
    ) -> ServiceProgram:
        """Create the service program row or refresh its timestamp."""
        srvpgm = await self.get_service_program(library, name)
        if srvpgm is None:
            srvpgm = ServiceProgram(
                library=library,
                name=name,
                source_file=source_file or DEFAULT_SOURCE_FILE,
            )
            self.session.add(srvpgm)
        else:
            if source_file:
                srvpgm.source_file = source_file
            srvpgm.updated_at = utcnow()
        await self.session.flush()
        return srvpgm

    async def get_service_program(self, library: str, name: str) -> ServiceProgram | None:
        """Get a service program by key."""
        return await self.session.get(ServiceProgram, (library, name))

    async def list_service_programs(self) -> Sequence[ServiceProgram]:
        """Get all service programs ordered by library and name."""
        result = await self.session.execute(
            select(ServiceProgram).order_by(ServiceProgram.library, ServiceProgram.name)
        )
        return result.scalars().all()

    # --- procedures ---

    async def replace_procedures(
        self,
        library: str,
        srvpgm_name: str,
        method_names: Iterable[str],
    ) -> int:
        """Replace the procedure list of a service program; descriptions reset."""
        await self.session.execute(
            delete(ProcedureRecord).where(
                ProcedureRecord.library == library,
                ProcedureRecord.srvpgm_name == srvpgm_name,
            )
        )
        names = sorted(set(method_names))
        self.session.add_all(
            ProcedureRecord(
                library=library,
                srvpgm_name=srvpgm_name,
                method_name=name,
                description=None,
            )
            for name in names
        )
        await self.session.flush()
        return len(names)

    async def get_procedures(self, library: str, srvpgm_name: str) -> Sequence[ProcedureRecord]:
        """Get the procedures of one service program ordered by name."""
        result = await self.session.execute(
            select(ProcedureRecord)
            .where(
                ProcedureRecord.library == library,
                ProcedureRecord.srvpgm_name == srvpgm_name,
            )
            .order_by(ProcedureRecord.method_name)
        )
        return result.scalars().all()

    async def get_procedure_names(self, library: str, srvpgm_name: str) -> list[str]:
        result = await self.session.execute(
            select(ProcedureRecord.method_name)
            .where(
                ProcedureRecord.library == library,
                ProcedureRecord.srvpgm_name == srvpgm_name,
            )
            .order_by(ProcedureRecord.method_name)
        )
        return list(result.scalars().all())

    async def get_procedures_missing_description(
        self,
        library: str,
        srvpgm_name: str,
    ) -> Sequence[ProcedureRecord]:
        result = await self.session.execute(
            select(ProcedureRecord)
            .where(
                ProcedureRecord.library == library,
                ProcedureRecord.srvpgm_name == srvpgm_name,
                or_(ProcedureRecord.description.is_(None), ProcedureRecord.description == ""),
            )
            .order_by(ProcedureRecord.method_name)
        )
        return result.scalars().all()

    async def search_procedures(self, pattern: str) -> Sequence[ProcedureRecord]:
        """Find procedures whose name or description contains ``pattern``."""
        like = f"%{pattern}%"
        result = await self.session.execute(
            select(ProcedureRecord)
            .where(
                or_(
                    ProcedureRecord.method_name.like(like),
                    ProcedureRecord.description.like(like),
                )
            )
            .order_by(
                ProcedureRecord.library,
                ProcedureRecord.srvpgm_name,
                ProcedureRecord.method_name,
            )
        )
        return result.scalars().all()

    async def get_block_style_descriptions(
        self,
        library: str | None = None,
        srvpgm_name: str | None = None,
    ) -> Sequence[ProcedureRecord]:
        """Get procedures whose description still starts with ``-`` or ``//``."""
        query = select(ProcedureRecord).where(
            or_(
                ProcedureRecord.description.like("-%"),
                ProcedureRecord.description.like("//%"),
            )
        )
        if library and srvpgm_name:
            query = query.where(
                ProcedureRecord.library == library,
                ProcedureRecord.srvpgm_name == srvpgm_name,
            )
        result = await self.session.execute(query.order_by(ProcedureRecord.method_name))
        return result.scalars().all()

    async def upsert_descriptions(
        self,
        library: str,
        srvpgm_name: str,
        descriptions: Mapping[str, str],
    ) -> int:
        """Store descriptions keyed by (library, service program, procedure)."""
        now = utcnow()
        for method_name, description in descriptions.items():
            record = await self.session.get(
                ProcedureRecord, (library, srvpgm_name, method_name)
            )
            if record is None:
                self.session.add(
                    ProcedureRecord(
                        library=library,
                        srvpgm_name=srvpgm_name,
                        method_name=method_name,
                        description=description,
                        updated_at=now,
                    )
                )
            else:
                record.description = description
                record.updated_at = now
        await self.session.flush()
        return len(descriptions)

    async def clear(self) -> None:
        """Delete every procedure and service program."""
        await self.session.execute(delete(ProcedureRecord))
        await self.session.execute(delete(ServiceProgram))
        await self.session.flush()
