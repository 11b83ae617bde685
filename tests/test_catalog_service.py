"""Tests for the catalog service."""

import pytest

from as400_catalog.core.exceptions import (
    HostNotConfiguredError,
    RemoteCommandError,
    ServiceProgramNotFoundException,
)
from as400_catalog.services.catalog import CatalogService
from as400_catalog.services.host import HostService
from tests.helpers import FakeExecutor

EXPORTS = """SYMBOL_NAME
------------------
SPVSPO_GETCABECERA
SPVSPO_UPDCABECERA
SPVSPO_CALCULA

  3 RECORD(S) SELECTED.
"""

SOURCE = """**FREE
// SPVSPO_getCabecera : Retrieves the policy header
ctl-opt nomain;

//--------------------------------------------------
// -------- // SPVSPO_updCabecera(): stores the header // v2
//--------------------------------------------------
dcl-proc updCabecera export;
end-proc;
"""


def connected(session, executor):
    return CatalogService(session, HostService(executor))


def test_sync_exports(run_in_session):
    executor = FakeExecutor({"PROGRAM_EXPORT_IMPORT_INFO": EXPORTS})

    async def body(session):
        service = connected(session, executor)
        count = await service.sync_exports("AXA.PGMR", "SPVSPO")
        result = await service.query("AXA.PGMR", "SPVSPO")
        return count, [p.method_name for p in result.procedures]

    count, names = run_in_session(body)
    assert count == 3
    assert names == ["SPVSPO_CALCULA", "SPVSPO_GETCABECERA", "SPVSPO_UPDCABECERA"]
    assert "PROGRAM_NAME = 'SPVSPO'" in executor.commands[0]


def test_fill_from_source_reads_member(run_in_session):
    executor = FakeExecutor({"CPYTOSTMF": SOURCE})

    async def body(session):
        service = connected(session, executor)
        await service.sync_from_export_text("AXA.PGMR", "SPVSPO", EXPORTS)
        count = await service.fill_from_source("AXA.PGMR", "SPVSPO")
        procedures = (await service.query("AXA.PGMR", "SPVSPO")).procedures
        return count, {p.method_name: p.description for p in procedures}

    count, descriptions = run_in_session(body)
    assert count == 2
    assert descriptions == {
        "SPVSPO_CALCULA": None,
        "SPVSPO_GETCABECERA": "Retrieves the policy header",
        "SPVSPO_UPDCABECERA": "stores the header",
    }
    assert "/QSYS.LIB/AXA.PGMR.LIB/QFUENTES.FILE/SPVSPO.MBR" in executor.commands[0]


def test_fill_from_source_requires_catalogued_program(run_in_session):
    async def body(session):
        await connected(session, FakeExecutor()).fill_from_source("AXA.PGMR", "NOPE")

    with pytest.raises(ServiceProgramNotFoundException):
        run_in_session(body)


def test_remote_operations_need_a_host(run_in_session):
    async def body(session):
        await CatalogService(session).sync_exports("AXA.PGMR", "SPVSPO")

    with pytest.raises(HostNotConfiguredError):
        run_in_session(body)


def test_fill_from_source_text_without_catalogued_names(run_in_session):
    async def body(session):
        return await CatalogService(session).fill_from_source_text("LIB", "SRV", SOURCE)

    assert run_in_session(body) == 0


def test_fill_from_source_all_records_failures(run_in_session):
    executor = FakeExecutor({
        "ONE.MBR": "// ONE_GETX : Reads x\n",
        "TWO.MBR": RemoteCommandError("Exit 1:\nCPF9812 member not found", exit_code=1),
    })

    async def body(session):
        service = connected(session, executor)
        await service.sync_from_export_text("LIB", "ONE", "ONE_GETX")
        await service.sync_from_export_text("LIB", "TWO", "TWO_GETY")
        return await service.fill_from_source_all()

    outcomes = run_in_session(body)
    assert [(o.srvpgm_name, o.count, o.error is None) for o in outcomes] == [
        ("ONE", 1, True),
        ("TWO", 0, False),
    ]
    assert "CPF9812" in outcomes[1].error


def test_fill_from_names_respects_existing(run_in_session):
    async def body(session):
        service = CatalogService(session)
        await service.sync_from_export_text("LIB", "SRV", "SRV_GETCUOTA SRV_UPDCUOTA")
        await service.repository.upsert_descriptions("LIB", "SRV", {"SRV_GETCUOTA": "Hand written"})
        first = await service.fill_from_names("LIB", "SRV")
        kept = {p.method_name: p.description for p in (await service.query("LIB", "SRV")).procedures}
        forced = await service.fill_from_names(force=True)
        replaced = {p.method_name: p.description for p in (await service.query("LIB", "SRV")).procedures}
        return first, kept, forced, replaced

    first, kept, forced, replaced = run_in_session(body)
    assert first[0].count == 1
    assert kept == {"SRV_GETCUOTA": "Hand written", "SRV_UPDCUOTA": "Actualiza cuota"}
    assert forced[0].count == 2
    assert replaced == {"SRV_GETCUOTA": "Obtiene cuota", "SRV_UPDCUOTA": "Actualiza cuota"}


def test_shorten_descriptions(run_in_session):
    async def body(session):
        service = CatalogService(session)
        await service.repository.upsert_descriptions("LIB", "SRV", {
            "SRV_A": "-------- // SRV_A(): retrieves header // v2",
            "SRV_B": "plain text",
        })
        updated = await service.shorten_descriptions()
        again = await service.shorten_descriptions()
        rows = {p.method_name: p.description for p in (await service.query("LIB", "SRV")).procedures}
        return updated, again, rows

    updated, again, rows = run_in_session(body)
    assert updated == 1
    assert again == 0
    assert rows == {"SRV_A": "retrieves header", "SRV_B": "plain text"}


def test_query_modes_and_clear(run_in_session):
    async def body(session):
        service = CatalogService(session)
        await service.sync_from_export_text("LIB", "SRV", "SRV_GETA SRV_SETB")
        listing = await service.query()
        search = await service.query(pattern="SET")
        await service.clear()
        empty = await service.query()
        return listing, search, empty

    listing, search, empty = run_in_session(body)
    assert [s.name for s in listing.service_programs] == ["SRV"]
    assert listing.procedures == ()
    assert [p.method_name for p in search.procedures] == ["SRV_SETB"]
    assert list(empty.service_programs) == []
