from typing import Any, Iterable, List

from tabulate import tabulate

from .models import ResultSet

TABLE_FORMAT = "psql"
FENCE = "```"


def _ends_with_blank_line(value: Any) -> bool:
    return isinstance(value, str) and "\n" in value and not value.rsplit("\n", 1)[1].strip()


def _spaced_rows(rows: List[List[Any]]) -> List[List[Any]]:
    # tabulate strips cell whitespace, so a trailing blank line in every
    # cell becomes an explicit empty row after the record
    spaced = []
    for row in rows:
        if row and all(_ends_with_blank_line(value) for value in row):
            spaced.append([value.rsplit("\n", 1)[0] for value in row])
            spaced.append([""] * len(row))
        else:
            spaced.append(row)
    return spaced


def format_table(results: ResultSet) -> str:
    """Render a result set as an ASCII table inside a chat code fence."""
    table = tabulate(
        _spaced_rows(results.table_rows()),
        headers=list(results.headers),
        tablefmt=TABLE_FORMAT,
        disable_numparse=True,
        missingval="",
    )
    return f"{FENCE}\n{table}\n{FENCE}"


def format_lines(entries: Iterable[str]) -> str:
    return "\n".join(entries)
