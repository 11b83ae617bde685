"""Command line access to the local service program catalog.

Examples:
    as400-catalog init
    as400-catalog query                      # every service program
    as400-catalog query AXA.PGMR SPVSPO      # procedures of one
    as400-catalog query GET                  # procedures containing GET
    as400-catalog fill-from-source AXA.PGMR SPVSPO < SPVSPO.src
    as400-catalog fill-from-names [AXA.PGMR SPVSPO] [--force]
    as400-catalog shorten [AXA.PGMR SPVSPO]
    as400-catalog clear
    as400-catalog serve --port 8000
"""

import argparse
import asyncio
import sys

import uvicorn
from loguru import logger

from as400_catalog.config.logging_config import configure_logging
from as400_catalog.db.base import async_session_factory, engine, init_db
from as400_catalog.services.catalog import CatalogService


async def _with_service(action):
    await init_db()
    try:
        async with async_session_factory() as session:
            try:
                result = await action(CatalogService(session))
                await session.commit()
                return result
            except Exception:
                await session.rollback()
                raise
    finally:
        await engine.dispose()


def _print_table(headers: list[str], rows: list[list[str]]) -> None:
    widths = [len(h) for h in headers]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]
    print("  ".join(h.ljust(w) for h, w in zip(headers, widths)).rstrip())
    for row in rows:
        print("  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip())


def cmd_init(args) -> int:
    async def _init():
        await init_db()
        await engine.dispose()

    asyncio.run(_init())
    print(f"OK: catalog database ready at {engine.url.render_as_string()}")
    return 0


def cmd_query(args) -> int:
    if args.library and args.srvpgm:
        library, srvpgm, pattern = args.library, args.srvpgm, None
    else:
        library, srvpgm, pattern = None, None, args.library

    result = asyncio.run(_with_service(lambda s: s.query(library, srvpgm, pattern)))
    if result.service_programs:
        print("Service programs in the catalog:")
        _print_table(
            ["LIBRARY", "NAME", "UPDATED_AT"],
            [[s.library, s.name, f"{s.updated_at:%Y-%m-%d %H:%M:%S}"] for s in result.service_programs],
        )
        print(f"Total: {len(result.service_programs)}")
    elif result.procedures:
        title = f'Procedures containing "{pattern}":' if pattern else f"Procedures of {library}/{srvpgm}:"
        print(title)
        _print_table(
            ["LIBRARY", "SRVPGM", "METHOD", "DESCRIPTION"],
            [[p.library, p.srvpgm_name, p.method_name, p.description or ""] for p in result.procedures],
        )
        print(f"Total: {len(result.procedures)}")
    else:
        print("(none)" if (pattern or library) else "(empty; sync a service program first)")
    return 0


def cmd_fill_from_source(args) -> int:
    source_text = sys.stdin.read()
    if not source_text.strip():
        print("No source text received on stdin.", file=sys.stderr)
        return 1
    count = asyncio.run(_with_service(
        lambda s: s.fill_from_source_text(args.library, args.srvpgm, source_text)
    ))
    print(f"OK: {count} descriptions updated from source for {args.library}/{args.srvpgm}.")
    return 0


def cmd_fill_from_names(args) -> int:
    if bool(args.library) != bool(args.srvpgm):
        print("Give both LIBRARY and SRVPGM, or neither.", file=sys.stderr)
        return 1
    outcomes = asyncio.run(_with_service(
        lambda s: s.fill_from_names(args.library, args.srvpgm, force=args.force)
    ))
    for outcome in outcomes:
        if outcome.count:
            print(f"{outcome.library}/{outcome.srvpgm_name}: {outcome.count} descriptions")
    print(f"OK: {sum(o.count for o in outcomes)} descriptions in total")
    return 0


def cmd_shorten(args) -> int:
    if bool(args.library) != bool(args.srvpgm):
        print("Give both LIBRARY and SRVPGM, or neither.", file=sys.stderr)
        return 1
    count = asyncio.run(_with_service(lambda s: s.shorten_descriptions(args.library, args.srvpgm)))
    print(f"OK: {count} descriptions shortened.")
    return 0


def cmd_clear(args) -> int:
    asyncio.run(_with_service(lambda s: s.clear()))
    print("OK: catalog emptied (service programs and procedures).")
    return 0


def cmd_serve(args) -> int:
    uvicorn.run("as400_catalog.main:app", host=args.host, port=args.port, log_config=None)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="as400-catalog",
        description="Local catalog of AS400 service program procedures",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    init = sub.add_parser("init", help="Create the catalog database")
    init.set_defaults(func=cmd_init)

    query = sub.add_parser("query", help="List service programs, procedures, or search")
    query.add_argument("library", nargs="?", help="Library, or a search pattern when alone")
    query.add_argument("srvpgm", nargs="?", help="Service program name")
    query.set_defaults(func=cmd_query)

    fill_source = sub.add_parser("fill-from-source", help="Fill descriptions from source read on stdin")
    fill_source.add_argument("library")
    fill_source.add_argument("srvpgm")
    fill_source.set_defaults(func=cmd_fill_from_source)

    fill_names = sub.add_parser("fill-from-names", help="Infer descriptions from procedure names")
    fill_names.add_argument("library", nargs="?")
    fill_names.add_argument("srvpgm", nargs="?")
    fill_names.add_argument("--force", action="store_true", help="Overwrite existing descriptions")
    fill_names.set_defaults(func=cmd_fill_from_names)

    shorten = sub.add_parser("shorten", help="Shorten banner-style descriptions")
    shorten.add_argument("library", nargs="?")
    shorten.add_argument("srvpgm", nargs="?")
    shorten.set_defaults(func=cmd_shorten)

    clear = sub.add_parser("clear", help="Delete everything in the catalog")
    clear.set_defaults(func=cmd_clear)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.set_defaults(func=cmd_serve)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command != "serve":
        # the API keeps its own file and console sinks
        configure_logging(level="DEBUG" if args.verbose else "WARNING", log_to_file=False)
    logger.debug(f"Running {args.command}")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
