"""kahncycle CLI entry point.

Usage: kahncycle [-v] {demo,check,toposort} ...

Exit status for check/toposort:
  0  acyclic
  1  cyclic
  2  invalid or unreadable input
  3  (check --verify) Kahn and DFS results disagree
"""
import argparse
import logging
import sys

from kahncycle.graph.cycle_detector import detect_cycle
from kahncycle.graph.matrix import AdjacencyMatrix, InvalidGraphError
from kahncycle.graph.oracle import has_cycle_dfs, is_cycle
from kahncycle.graph.topological import CyclicDependencyError, topological_sort

log = logging.getLogger("kahncycle")

EXIT_ACYCLIC = 0
EXIT_CYCLIC = 1
EXIT_INVALID = 2
EXIT_MISMATCH = 3


def _add_demo_parser(subparsers: argparse._SubParsersAction) -> None:
    subparsers.add_parser(
        "demo",
        help="Run cycle detection on the built-in sample graphs.",
    )


def _add_check_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "check",
        help="Detect a cycle in an adjacency matrix file.",
    )
    p.add_argument(
        "path",
        help="Matrix file: .json array of rows, or whitespace-separated text.",
    )
    p.add_argument(
        "--verify", action="store_true",
        help="Cross-check the result with an independent DFS search.",
    )
    p.add_argument(
        "--quiet", action="store_true",
        help="Do not print the matrix, only the result.",
    )


def _add_toposort_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "toposort",
        help="Print a topological order of an adjacency matrix file.",
    )
    p.add_argument("path", help="Matrix file (same formats as check).")


def _load(path: str) -> AdjacencyMatrix | None:
    from kahncycle.demo.loader import load_matrix

    try:
        return load_matrix(path)
    except (InvalidGraphError, OSError) as exc:
        print(f"kahncycle: {path}: {exc}", file=sys.stderr)
        return None


def _run_demo(args: argparse.Namespace) -> int:
    from kahncycle.demo.report import format_matrix, format_result
    from kahncycle.demo.samples import SAMPLE_GRAPHS

    print("--- Cycle Detection (Kahn's Algorithm) ---")
    for i, (title, rows) in enumerate(SAMPLE_GRAPHS, start=1):
        graph = AdjacencyMatrix(rows)
        print()
        print(f"--- Test Case {i}: {title} ---")
        print(format_matrix(graph))
        print(format_result(detect_cycle(graph)))
    return 0


def _run_check(args: argparse.Namespace) -> int:
    from kahncycle.demo.report import format_matrix, format_result

    graph = _load(args.path)
    if graph is None:
        return EXIT_INVALID

    if not args.quiet:
        print(format_matrix(graph))
    result = detect_cycle(graph)
    print(format_result(result))

    if args.verify:
        expected = has_cycle_dfs(graph)
        if expected != result.has_cycle:
            log.error(
                "Kahn says %s but DFS says %s",
                result.classification.value,
                "cyclic" if expected else "acyclic",
            )
            return EXIT_MISMATCH
        if result.cycle is not None and not is_cycle(graph, result.cycle):
            log.error("witness %s is not a cycle in the graph", result.cycle)
            return EXIT_MISMATCH
        print("Verified: DFS search agrees.")

    return EXIT_CYCLIC if result.has_cycle else EXIT_ACYCLIC


def _run_toposort(args: argparse.Namespace) -> int:
    from kahncycle.demo.report import format_order

    graph = _load(args.path)
    if graph is None:
        return EXIT_INVALID
    try:
        order = topological_sort(graph)
    except CyclicDependencyError as exc:
        print(str(exc))
        return EXIT_CYCLIC
    print(format_order(order))
    return EXIT_ACYCLIC


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="kahncycle",
        description="Directed-graph cycle detection with Kahn's algorithm.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_demo_parser(subparsers)
    _add_check_parser(subparsers)
    _add_toposort_parser(subparsers)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    handlers = {
        "demo": _run_demo,
        "check": _run_check,
        "toposort": _run_toposort,
    }
    sys.exit(handlers[args.command](args))
