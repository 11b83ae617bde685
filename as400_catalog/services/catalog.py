"""Catalog service: keeping the local procedure catalog in sync."""

from dataclasses import dataclass
from typing import Sequence

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from as400_catalog.config.settings import settings
from as400_catalog.core.exceptions import (
    HostNotConfiguredError,
    RemoteException,
    ServiceProgramNotFoundException,
)
from as400_catalog.core.exports import parse_export_symbols
from as400_catalog.core.extraction import extract_descriptions, infer_description, normalize
from as400_catalog.db.models.service_program import ProcedureRecord, ServiceProgram
from as400_catalog.db.repositories.catalog import CatalogRepository
from as400_catalog.services.host import HostService


@dataclass
class FillOutcome:
    """Result of filling descriptions for one service program."""

    library: str
    srvpgm_name: str
    count: int = 0
    error: str | None = None


@dataclass
class CatalogQueryResult:
    """What a catalog query matched; exactly one of the lists is filled."""

    service_programs: Sequence[ServiceProgram] = ()
    procedures: Sequence[ProcedureRecord] = ()


class CatalogService:
    """Service layer for catalog operations."""

    def __init__(self, session: AsyncSession, host: HostService | None = None):
        self.repository = CatalogRepository(session)
        self.host = host

    def _require_host(self) -> HostService:
        if self.host is None:
            raise HostNotConfiguredError("This operation needs a connection to the AS400")
        return self.host

    async def query(
        self,
        library: str | None = None,
        srvpgm_name: str | None = None,
        pattern: str | None = None,
    ) -> CatalogQueryResult:
        """Search by pattern, list one service program, or list them all."""
        if pattern:
            return CatalogQueryResult(procedures=await self.repository.search_procedures(pattern))
        if library and srvpgm_name:
            return CatalogQueryResult(
                procedures=await self.repository.get_procedures(library, srvpgm_name)
            )
        return CatalogQueryResult(service_programs=await self.repository.list_service_programs())

    async def sync_exports(self, library: str, srvpgm_name: str) -> int:
        """Refresh the procedure list of a service program from its exports."""
        host = self._require_host()
        text = await host.list_srvpgm_exports(library, srvpgm_name, symbols_only=True)
        return await self.sync_from_export_text(library, srvpgm_name, text)

    async def sync_from_export_text(self, library: str, srvpgm_name: str, text: str) -> int:
        symbols = parse_export_symbols(srvpgm_name, text)
        await self.repository.upsert_service_program(library, srvpgm_name)
        count = await self.repository.replace_procedures(library, srvpgm_name, symbols)
        logger.info(f"Synced {count} exported procedures for {library}/{srvpgm_name}")
        return count

    async def fill_from_source_text(self, library: str, srvpgm_name: str, source_text: str) -> int:
        """Store descriptions extracted from a source member's text."""
        names = await self.repository.get_procedure_names(library, srvpgm_name)
        if not names:
            logger.warning(f"No catalogued procedures for {library}/{srvpgm_name}; nothing to fill")
            return 0
        descriptions = extract_descriptions(source_text, names)
        count = await self.repository.upsert_descriptions(library, srvpgm_name, descriptions)
        logger.info(
            f"{count} of {len(names)} descriptions taken from source for {library}/{srvpgm_name}"
        )
        return count

    async def fill_from_source(
        self,
        library: str,
        srvpgm_name: str,
        source_file: str | None = None,
    ) -> int:
        """Read the member named after the service program and fill descriptions."""
        host = self._require_host()
        if await self.repository.get_service_program(library, srvpgm_name) is None:
            raise ServiceProgramNotFoundException(library, srvpgm_name)
        source_text = await host.read_source_member(
            library, source_file or settings.DEFAULT_SOURCE_FILE, srvpgm_name
        )
        return await self.fill_from_source_text(library, srvpgm_name, source_text)

    async def fill_from_source_all(self, source_file: str | None = None) -> list[FillOutcome]:
        """Fill descriptions from source for every catalogued service program.

        A failure on one service program is recorded in its outcome and the
        run carries on with the next.
        """
        outcomes: list[FillOutcome] = []
        for srvpgm in await self.repository.list_service_programs():
            outcome = FillOutcome(library=srvpgm.library, srvpgm_name=srvpgm.name)
            try:
                outcome.count = await self.fill_from_source(
                    srvpgm.library,
                    srvpgm.name,
                    source_file or srvpgm.source_file,
                )
            except RemoteException as e:
                logger.error(f"Fill from source failed for {srvpgm.library}/{srvpgm.name}: {e.message}")
                outcome.error = e.message
            outcomes.append(outcome)
        return outcomes

    async def fill_from_names(
        self,
        library: str | None = None,
        srvpgm_name: str | None = None,
        force: bool = False,
    ) -> list[FillOutcome]:
        """Infer descriptions from procedure names.

        Only empty descriptions are filled unless ``force`` is set. Without a
        library and service program every catalogued one is processed.
        """
        if library and srvpgm_name:
            targets = [(library, srvpgm_name)]
        else:
            targets = [(s.library, s.name) for s in await self.repository.list_service_programs()]

        outcomes = []
        for lib, name in targets:
            if force:
                records = await self.repository.get_procedures(lib, name)
            else:
                records = await self.repository.get_procedures_missing_description(lib, name)
            descriptions = {}
            for record in records:
                description = infer_description(record.method_name)
                if description:
                    descriptions[record.method_name] = description
            count = await self.repository.upsert_descriptions(lib, name, descriptions)
            outcomes.append(FillOutcome(library=lib, srvpgm_name=name, count=count))
        return outcomes

    async def shorten_descriptions(
        self,
        library: str | None = None,
        srvpgm_name: str | None = None,
    ) -> int:
        """Rewrite banner-style descriptions as one short line."""
        updated = 0
        for record in await self.repository.get_block_style_descriptions(library, srvpgm_name):
            short = normalize(record.description or "")
            if short and short != record.description:
                await self.repository.upsert_descriptions(
                    record.library, record.srvpgm_name, {record.method_name: short}
                )
                updated += 1
        logger.info(f"Shortened {updated} descriptions")
        return updated

    async def clear(self) -> None:
        """Empty the catalog."""
        await self.repository.clear()
        logger.info("Catalog cleared")
