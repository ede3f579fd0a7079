## join_check.py
# Lossless-join check of a decomposition on generated data in PostgreSQL

import os
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import psycopg2

from models import FunctionalDependency, RelationSchema
from verification import attribute_coverage

# ======================= Connection settings =======================
DB_PARAMS = {
    'dbname': os.environ.get('NORMALIZER_DB_NAME', 'postgres'),
    'user': os.environ.get('NORMALIZER_DB_USER', 'postgres'),
    'password': os.environ.get('NORMALIZER_DB_PASSWORD', ''),
    'host': os.environ.get('NORMALIZER_DB_HOST', 'localhost'),
    'port': int(os.environ.get('NORMALIZER_DB_PORT', '5432'))
}

ORIGINAL_TABLE = "nf_original"


@dataclass
class JoinCheckResult:
    original_count: int
    joined_count: int
    tables: Dict[str, int] = field(default_factory=dict)
    missing_attributes: Tuple[str, ...] = ()

    @property
    def lossless(self) -> bool:
        return not self.missing_attributes and self.joined_count == self.original_count


def connect():
    return psycopg2.connect(**DB_PARAMS)


def quote(identifier: str) -> str:
    """Double-quote an identifier so PostgreSQL keeps its case"""
    return '"' + identifier.replace('"', '""') + '"'


def table_name_for(index: int, rel: RelationSchema) -> str:
    """Decomposed relations may share a name (R_rest), so prefix the position"""
    return f"nf_{index}_{rel.name}"


def drop_table_if_exists(conn, table_name: str):
    with conn.cursor() as cur:
        cur.execute(f"DROP TABLE IF EXISTS {quote(table_name)} CASCADE;")
    conn.commit()


def create_table(conn, table_name: str, attributes: Sequence[str]):
    """Create table_name with one INTEGER column per attribute"""
    drop_table_if_exists(conn, table_name)
    columns_def = [f"{quote(attr)} INTEGER" for attr in attributes]
    ddl = f"CREATE TABLE {quote(table_name)} (\n    " + ",\n    ".join(columns_def) + "\n);"
    print(f"[SQL-CREATE] {ddl}")

    with conn.cursor() as cur:
        cur.execute(ddl)
    conn.commit()


def generate_rows(attributes: Sequence[str], fds: Sequence[FunctionalDependency],
                  num_rows: int, domain_size: int = 10,
                  seed: Optional[int] = None) -> List[Tuple[int, ...]]:
    """
    Generate up to num_rows distinct rows that satisfy every dependency.

    Values come from a small domain so that dependencies actually repeat;
    a candidate row conflicting with rows already accepted is rejected.
    """
    rng = random.Random(seed)
    attributes = tuple(attributes)
    local_fds = [fd for fd in fds
                 if all(attr in attributes for attr in fd.determinant + fd.dependent)]

    # determinant values -> dependent values, per dependency
    seen: List[Dict[tuple, tuple]] = [{} for _ in local_fds]
    rows = []
    accepted = set()
    attempts = 0

    while len(rows) < num_rows and attempts < num_rows * 20:
        attempts += 1
        row = {attr: rng.randint(1, domain_size) for attr in attributes}

        # Pull dependents in line with rows already accepted
        for _ in range(len(local_fds)):
            for fd, mapping in zip(local_fds, seen):
                det_values = tuple(row[attr] for attr in fd.determinant)
                if det_values in mapping:
                    for attr, value in zip(fd.dependent, mapping[det_values]):
                        row[attr] = value

        values = tuple(row[attr] for attr in attributes)
        if values in accepted:
            continue

        conflict = False
        for fd, mapping in zip(local_fds, seen):
            det_values = tuple(row[attr] for attr in fd.determinant)
            dep_values = tuple(row[attr] for attr in fd.dependent)
            if mapping.get(det_values, dep_values) != dep_values:
                conflict = True
                break
        if conflict:
            continue

        for fd, mapping in zip(local_fds, seen):
            det_values = tuple(row[attr] for attr in fd.determinant)
            mapping[det_values] = tuple(row[attr] for attr in fd.dependent)
        accepted.add(values)
        rows.append(values)

    return rows


def insert_rows(conn, table_name: str, attributes: Sequence[str], rows: Sequence[tuple]):
    col_list = ", ".join(quote(attr) for attr in attributes)
    placeholders = ", ".join(["%s"] * len(attributes))
    insert_sql = f"INSERT INTO {quote(table_name)} ({col_list}) VALUES ({placeholders});"

    with conn.cursor() as cur:
        cur.executemany(insert_sql, rows)
    conn.commit()


def project_into(conn, table_name: str, attributes: Sequence[str]):
    """Fill table_name with the distinct projection of the original table"""
    col_list = ", ".join(quote(attr) for attr in attributes)
    insert_sql = (f"INSERT INTO {quote(table_name)} ({col_list}) "
                  f"SELECT DISTINCT {col_list} FROM {quote(ORIGINAL_TABLE)};")
    print(f"[SQL-PROJECT] {insert_sql}")

    with conn.cursor() as cur:
        cur.execute(insert_sql)
    conn.commit()


def count_rows(conn, table_name: str) -> int:
    """Number of rows in table_name"""
    with conn.cursor() as cur:
        cur.execute(f"SELECT COUNT(*) FROM {quote(table_name)};")
        return cur.fetchone()[0]


def build_join_sql(table_names: Sequence[str]) -> str:
    """COUNT of the distinct rows of the natural join of every table"""
    join_clause = " NATURAL JOIN ".join(quote(name) for name in table_names)
    return f"SELECT COUNT(*) FROM (SELECT DISTINCT * FROM {join_clause}) AS joined;"


def run_join_check(attributes: Sequence[str], fds: Sequence[FunctionalDependency],
                   relations: Sequence[RelationSchema], num_rows: int = 1000,
                   seed: Optional[int] = None, keep_tables: bool = False) -> JoinCheckResult:
    """
    1. Create the original table and fill it with rows satisfying fds.
    2. Create one table per relation and fill it with SELECT DISTINCT projections.
    3. Compare the row count of the natural join of all tables with the original.

    The tables are dropped again on the way out; pass keep_tables=True to
    leave them in the database for inspection.
    """
    attributes = tuple(attributes)
    _, missing = attribute_coverage(attributes, [rel.attributes for rel in relations])
    if missing:
        print(f"[WARNING] Attributes missing from every relation: {', '.join(missing)}")

    conn = connect()
    created = []
    try:
        # --- Step 1: original table ---
        create_table(conn, ORIGINAL_TABLE, attributes)
        created.append(ORIGINAL_TABLE)
        insert_rows(conn, ORIGINAL_TABLE, attributes, generate_rows(attributes, fds, num_rows, seed=seed))
        original_count = count_rows(conn, ORIGINAL_TABLE)
        print(f"[INFO] Inserted {original_count} rows into {ORIGINAL_TABLE}")

        # --- Step 2: decomposed tables ---
        table_counts = {}
        for index, rel in enumerate(relations):
            name = table_name_for(index, rel)
            rel_attrs = [attr for attr in rel.attributes if attr in attributes]
            if not rel_attrs:
                print(f"[WARNING] {rel} has no attribute of the original schema, skipped")
                continue
            create_table(conn, name, rel_attrs)
            created.append(name)
            project_into(conn, name, rel_attrs)
            table_counts[name] = count_rows(conn, name)
            print(f"[INFO] {name} holds {table_counts[name]} rows after projection")

        if not table_counts:
            print("[WARNING] No decomposed tables to join.")
            return JoinCheckResult(original_count, 0, table_counts, missing)

        # --- Step 3: natural join ---
        join_sql = build_join_sql(list(table_counts))
        print(f"[SQL-JOIN] {join_sql}")
        with conn.cursor() as cur:
            cur.execute(join_sql)
            joined_count = cur.fetchone()[0]

        result = JoinCheckResult(original_count, joined_count, table_counts, missing)
        print(f"[INFO] Natural join of all decomposed tables: {joined_count} rows")
        if result.lossless:
            print("[SUCCESS] Lossless decomposition: row counts match")
        else:
            print(f"[ERROR] Row counts differ! Original: {original_count} JOIN: {joined_count}")
        return result

    finally:
        if not keep_tables:
            # an error leaves the transaction aborted
            conn.rollback()
            for name in reversed(created):
                drop_table_if_exists(conn, name)
        conn.close()


if __name__ == "__main__":
    from normalizer import normalize
    from parsing import parse_schema, parse_fds

    schema, fd_string = "R(A, B, C, D)", "A->B, C->D"
    result = normalize(schema, fd_string)
    run_join_check(parse_schema(schema), parse_fds(fd_string), result.final_relations, num_rows=1000)
