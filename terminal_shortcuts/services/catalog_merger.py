"""
Merging global and workspace actions into one grouped catalog.
"""

from typing import Iterable, Tuple

from ..core.models import ActionRecord, Catalog


def merge_catalog(
    global_entries: Iterable[Tuple[str, ActionRecord]],
    workspace_entries: Iterable[Tuple[str, ActionRecord]],
) -> Catalog:
    """
    Group actions by name, global entries first.

    Groups appear in the order they are first seen, scanning the global
    entries and then the workspace entries. Within a group, global actions
    precede workspace actions and each keeps its file order. Nothing is
    replaced or deduplicated.

    Args:
        global_entries: (group, record) pairs from the global file
        workspace_entries: (group, record) pairs from the workspace file

    Returns:
        A freshly built catalog
    """
    catalog: Catalog = {}
    for entries in (global_entries, workspace_entries):
        for group, record in entries:
            catalog.setdefault(group, []).append(record)
    return catalog
