"""Command builders for IBM i (QSH, CL and DB2 for i SQL).

Everything here is a pure string function so the quoting rules can be
tested without a host.
"""

SOURCE_COPY_DIR = "/tmp"


def sql_literal(value: str) -> str:
    """Escape ``value`` for use inside a single-quoted SQL literal."""
    return value.replace("'", "''")


def shell_single_quote_escape(value: str) -> str:
    """Escape single quotes so ``value`` survives inside ``'...'`` in sh."""
    return value.replace("'", "'\\''")


def clamp_limit(limit: int | None, default: int, maximum: int) -> int:
    if limit is None:
        return default
    return max(1, min(int(limit), maximum))


def db2_query_command(sql: str) -> str:
    """Wrap ``sql`` for the QSH ``db2`` utility."""
    escaped = sql.strip().replace("\\", "\\\\").replace('"', '\\"')
    return f'qsh -c "db2 \\"{escaped}\\""'


def cl_system_command(cl: str, then: str | None = None) -> str:
    """Run a CL command through QSH ``system``, optionally chaining a shell step."""
    script = f'system "{cl}"'
    if then:
        script = f"{script} && {then}"
    return f"qsh -c '{shell_single_quote_escape(script)}'"


def safe_member_token(name: str) -> str:
    """Make ``name`` usable as part of an IFS file name."""
    for char in "/\\'\"":
        name = name.replace(char, "_")
    return name


def copy_member_command(library: str, file: str, member: str) -> str:
    """Copy a source member to the IFS with CPYTOSTMF and print it."""
    stmf = f"{SOURCE_COPY_DIR}/srcread_{safe_member_token(member)}.txt"
    from_mbr = f"/QSYS.LIB/{library}.LIB/{file}.FILE/{member}.MBR"
    cl = f"CPYTOSTMF FROMMBR('{from_mbr}') TOSTMF('{stmf}') STMFOPT(*REPLACE)"
    return cl_system_command(cl, then=f'cat "{stmf}"')


# --- SQL over QSYS2 catalog views ---

def describe_table_sql(schema: str, table: str) -> str:
    return (
        "SELECT COLUMN_NAME, ORDINAL_POSITION, DATA_TYPE, LENGTH, NUMERIC_SCALE "
        "FROM QSYS2.SYSCOLUMNS "
        f"WHERE TABLE_SCHEMA = '{sql_literal(schema)}' AND TABLE_NAME = '{sql_literal(table)}' "
        "ORDER BY ORDINAL_POSITION"
    )


def list_tables_sql(schema: str, limit: int) -> str:
    return (
        "SELECT TABLE_SCHEMA, TABLE_NAME FROM QSYS2.SYSTABLES "
        f"WHERE TABLE_SCHEMA = '{sql_literal(schema)}' "
        f"ORDER BY TABLE_NAME FETCH FIRST {limit} ROWS ONLY"
    )


def find_table_sql(pattern: str, limit: int) -> str:
    like = pattern if "%" in pattern else f"%{pattern}%"
    return (
        "SELECT TABLE_SCHEMA, TABLE_NAME FROM QSYS2.SYSTABLES "
        f"WHERE TABLE_NAME LIKE '{sql_literal(like)}' "
        f"ORDER BY TABLE_SCHEMA, TABLE_NAME FETCH FIRST {limit} ROWS ONLY"
    )


def srvpgm_exports_sql(schema: str, srvpgm_name: str, symbols_only: bool = False) -> str:
    # CHAR() avoids CCSID 1200/65535 conversion errors on the text columns
    columns = (
        "TRIM(CHAR(SYMBOL_NAME)) AS SYMBOL_NAME"
        if symbols_only
        else "PROGRAM_LIBRARY, PROGRAM_NAME, OBJECT_TYPE, "
        "TRIM(CHAR(SYMBOL_NAME)) AS SYMBOL_NAME, TRIM(CHAR(SYMBOL_USAGE)) AS SYMBOL_USAGE"
    )
    return (
        f"SELECT {columns} FROM QSYS2.PROGRAM_EXPORT_IMPORT_INFO "
        f"WHERE PROGRAM_LIBRARY = '{sql_literal(schema)}' "
        f"AND PROGRAM_NAME = '{sql_literal(srvpgm_name)}' ORDER BY SYMBOL_NAME"
    )


# --- CL commands writing to an outfile ---

def member_list_cl(library: str, file: str, output_library: str) -> str:
    return (
        f"DSPFD FILE({library}/{file}) TYPE(*MBRLIST) "
        f"OUTPUT(*OUTFILE) OUTFILE({output_library}/MBRLIST)"
    )


def database_relations_cl(library: str, file: str, output_library: str) -> str:
    return f"DSPDBR FILE({library}/{file}) OUTPUT(*OUTFILE) OUTFILE({output_library}/TMPDBR)"


def program_references_cl(library: str, program: str, output_library: str) -> str:
    return f"DSPPGMREF PGM({library}/{program}) OUTPUT(*OUTFILE) OUTFILE({output_library}/TMPPGR)"
