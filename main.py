"""
Command line front end for the normalizer.

    python main.py "R(A, B, C)" "A->B, B->C"
    python main.py "R(A, B, C)" "A->B, B->C" --keys A --report out.txt
"""
import argparse
import sys
from typing import List, Optional

import psycopg2

from fd_algorithms import FDAlgorithms
from join_check import run_join_check
from parsing import is_valid_schema_format, parse_schema, parse_schema_name, parse_fds, parse_keys
from normalizer import normalize
from report import format_report, save_report
from verification import verify_result


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Normalize a relation to 2NF, 3NF and BCNF from its functional dependencies.")
    parser.add_argument("schema", help="relation schema, e.g. 'R(A, B, C, D)'")
    parser.add_argument("fds", help="functional dependencies, e.g. 'A->B, BC->D'")
    parser.add_argument("--keys", default="",
                        help="candidate keys to use instead of discovering them, e.g. 'AB, CD'")
    parser.add_argument("--report", metavar="FILE", help="also write the text report to FILE")
    parser.add_argument("--verify", action="store_true",
                        help="print coverage, dependency preservation and lossless-join diagnostics")
    parser.add_argument("--join-check", metavar="ROWS", type=int,
                        help="check the final relations for lossless join in PostgreSQL on ROWS generated rows")
    return parser.parse_args(argv)


def _render_keys(keys) -> str:
    return ", ".join("".join(key) for key in keys)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    schema = args.schema.strip()
    if not is_valid_schema_format(schema):
        print("[ERROR] Please enter a valid relation schema in the format R(A, B, C, D)")
        return 1

    result = normalize(schema, args.fds, args.keys)
    if result.is_error:
        print(f"[ERROR] {result.error_message}")
        return 1

    attributes = parse_schema(schema)
    fds = parse_fds(args.fds)
    detected = FDAlgorithms.find_candidate_keys(attributes, fds)
    provided = parse_keys(args.keys)
    if provided:
        print(f"[INFO] Relation {parse_schema_name(schema)}, candidate keys from --keys: "
              f"{_render_keys(provided)} (auto-detected: {_render_keys(detected)})")
    else:
        print(f"[INFO] Relation {parse_schema_name(schema)}, detected candidate keys: "
              f"{_render_keys(detected)}")

    if args.report:
        save_report(result, args.report)
        print(f"[INFO] Report saved to {args.report}")
    print(format_report(result))

    if args.verify:
        print()
        print(verify_result(attributes, fds, result).get_summary(), end="")

    if args.join_check:
        try:
            check = run_join_check(attributes, fds, result.final_relations, num_rows=args.join_check)
        except psycopg2.Error as e:
            print(f"[ERROR] Database check failed: {e}")
            return 2
        if not check.lossless:
            print("[WARNING] The decomposition did not join back to the original rows")

    return 0


if __name__ == "__main__":
    sys.exit(main())
