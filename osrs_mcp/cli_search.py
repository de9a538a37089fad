import argparse
import json
import logging
import sys

from osrs_mcp.adapters.files.data_directory_adapter import LocalDataDirectoryAdapter
from osrs_mcp.container import container
from osrs_mcp.entities.records import PageResult
from osrs_mcp.exceptions import (
    DataFileNotFoundError,
    FileRepositoryError,
    InvalidFilenameError,
)
from osrs_mcp.utils.filenames import validate_filename


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def _page_size(value: str) -> int:
    n = _positive_int(value)
    if n > 100:
        raise argparse.ArgumentTypeError(f"must be <= 100, got {n}")
    return n


def _print_pretty(filename: str, query: str, result: PageResult) -> None:
    from rich import box
    from rich.console import Console
    from rich.table import Table

    console = Console(soft_wrap=True)
    p = result.pagination
    table = Table(
        title=f"{filename}: '{query}'",
        caption=(
            f"page {p.page}/{p.total_pages} - {p.total_results} matches"
            + (" - more pages" if p.has_next_page else "")
        ),
        box=box.ROUNDED,
        header_style="magenta",
    )
    table.add_column("Line", justify="right", style="dim")
    table.add_column("ID", style="cyan")
    table.add_column("Value")
    for record in result.results:
        if record.is_key_value:
            table.add_row(str(record.line_number), record.record_id, record.value)
        else:
            table.add_row(str(record.line_number), "", record.line)
    console.print(table)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="osrs-search",
        description="Search a data file for lines containing a term and print one page of matches.",
    )
    parser.add_argument("filename", help="Data file name (e.g., objtypes.txt)")
    parser.add_argument("query", help="Term to search for")
    parser.add_argument("--page", type=_positive_int, default=1, help="Page number")
    parser.add_argument(
        "--page-size", type=_page_size, default=10, help="Results per page (1-100)"
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Data directory (default: OSRS_DATA_DIR or ./data)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Render results as a table with colors",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr)

    repository = (
        LocalDataDirectoryAdapter(args.data_dir)
        if args.data_dir
        else container.get_data_file_repository()
    )
    try:
        filename = validate_filename(args.filename)
    except InvalidFilenameError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    search_uc = container.get_search_data_file_use_case()
    try:
        result = search_uc.execute(
            repository.resolve(filename), args.query, args.page, args.page_size
        )
    except DataFileNotFoundError:
        print(f"Error: {filename} not found in data directory", file=sys.stderr)
        return 1
    except FileRepositoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.pretty:
        _print_pretty(filename, args.query, result)
    else:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
