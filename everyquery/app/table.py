"""Rendering of query results."""

from datetime import datetime

from rich.table import Table

from ..query import Item, ItemType


def format_size(n: int | None) -> str:
    """Human-readable byte count."""
    if n is None:
        return ""
    if n == 0:
        return "0 B"
    units = ["B", "KB", "MB", "GB", "TB"]
    i, s = 0, float(n)
    while s >= 1024 and i < len(units) - 1:
        s /= 1024
        i += 1
    if i == 0:
        return f"{int(s)} {units[i]}"
    else:
        return f"{s:.1f} {units[i]}"


def format_date(item_date: datetime | None) -> str:
    """Timestamp in local time, or an empty cell."""
    if item_date is None:
        return ""
    try:
        local = item_date.astimezone()
    except OverflowError:
        # The last representable instant cannot be shifted east of UTC; show it in UTC.
        local = item_date
    return local.strftime("%Y-%m-%d %H:%M:%S")


def format_attributes(attributes: int | None) -> str:
    """Attribute bitmask as hex."""
    return "" if attributes is None else f"0x{attributes:08x}"


_TYPE_MARKERS = {ItemType.FILE: "", ItemType.FOLDER: "dir", ItemType.VOLUME: "vol"}


def results_table(items: list[Item]) -> Table:
    """Build a table with one row per item and a column per populated metadata field."""
    columns = [
        ("Size", "size", lambda item: format_size(item.size)),
        ("Created", "date_created_ns", lambda item: format_date(item.date_created)),
        ("Modified", "date_modified_ns", lambda item: format_date(item.date_modified)),
        ("Accessed", "date_accessed_ns", lambda item: format_date(item.date_accessed)),
        ("Attributes", "attributes", lambda item: format_attributes(item.attributes)),
    ]
    shown = [
        (title, render) for title, field, render in columns if any(getattr(i, field) is not None for i in items)
    ]

    table = Table(show_edge=False, header_style="bold")
    table.add_column("", no_wrap=True)
    table.add_column("Name", no_wrap=True)
    table.add_column("Path", overflow="fold")
    for title, _ in shown:
        table.add_column(title, justify="right" if title == "Size" else "left", no_wrap=True)

    for item in items:
        table.add_row(
            _TYPE_MARKERS[item.item_type],
            item.name or str(item.path),
            str(item.path.parent),
            *(render(item) for _, render in shown),
        )
    return table
