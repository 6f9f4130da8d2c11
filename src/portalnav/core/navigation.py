"""Navigation tree builder.

Rebuilds the menu hierarchy from flat records that point at their parent.
Records are kept in a flat arena with children tracked by index, so the
result does not depend on whether parents precede children in the input.
"""

import logging
from collections.abc import Iterable
from dataclasses import replace

from portalnav.core.items import NavigationItem
from portalnav.core.normalizer import normalize, resolve_href
from portalnav.core.records import MenuItemRecord, MenuRecord

logger = logging.getLogger(__name__)


def build_tree(records: Iterable[MenuItemRecord]) -> list[NavigationItem]:
    """Build an ordered navigation tree from flat menu item records.

    Only active and published records are kept. A record whose parent is
    missing from the kept set is promoted to a root. Siblings are sorted by
    ``order``, falling back to the record's input position.

    Args:
        records: Menu item records in source order

    Returns:
        Root NavigationItems, empty when no record survives filtering
    """
    return _RecordArena(_flatten(records)).build()


def build_menu_navigation(menus: Iterable[MenuRecord]) -> list[NavigationItem]:
    """Turn menu envelopes into root items carrying their item trees.

    Args:
        menus: Menu envelopes for one location

    Returns:
        One root NavigationItem per visible menu, sorted by order
    """
    visible: list[MenuRecord] = []
    for menu in menus:
        if not menu.is_visible:
            logger.debug(f"Skipping hidden menu {menu.id!r}")
            continue
        visible.append(menu)

    # Missing order falls back to the position among visible menus
    entries: list[tuple[int, int, NavigationItem]] = []
    for position, menu in enumerate(visible):
        submenu = build_tree(menu.menu_items)
        order = menu.order if menu.order is not None else position
        item = NavigationItem(
            id=menu.id,
            title=dict(menu.name),
            href=resolve_href(menu.resolved_url, menu.url),
            order=order,
            is_active=True,
            external=False,
            description=dict(menu.description) if menu.description else None,
            submenu=submenu or None,
        )
        entries.append((order, position, item))

    entries.sort(key=lambda entry: (entry[0], entry[1]))
    return [item for _, _, item in entries]


def _flatten(records: Iterable[MenuItemRecord]) -> list[MenuItemRecord]:
    """Inline records the source already nested under ``children``.

    Nested children without their own parent reference inherit the
    enclosing record's id. Output order is parent first, depth first.
    """
    flat: list[MenuItemRecord] = []
    stack = [(record, None) for record in reversed(list(records))]
    while stack:
        record, parent_id = stack.pop()
        if parent_id and record.parent_id is None:
            record = replace(record, parent_id=parent_id)
        children = record.children
        flat.append(replace(record, children=()) if children else record)
        stack.extend((child, record.id) for child in reversed(children))
    return flat


class _RecordArena:
    """Kept records plus index-based root and children tables."""

    def __init__(self, records: list[MenuItemRecord]) -> None:
        # (input position, record) for every kept record
        self._entries: list[tuple[int, MenuItemRecord]] = []
        self._index: dict[str, int] = {}

        for position, record in enumerate(records):
            if not record.is_visible:
                continue
            if record.id:
                if record.id in self._index:
                    logger.debug(f"Dropping duplicate menu item {record.id!r}")
                    continue
                self._index[record.id] = len(self._entries)
            self._entries.append((position, record))

        self._roots: list[int] = []
        self._emitted: set[int] = set()
        self._children: list[list[int]] = [[] for _ in self._entries]

        for idx, (_, record) in enumerate(self._entries):
            parent_idx = self._parent_index(record)
            if parent_idx is None:
                if record.parent_id is not None:
                    logger.debug(
                        f"Promoting orphan {record.id!r} (parent {record.parent_id!r} not found)"
                    )
                self._roots.append(idx)

        for idx, (_, record) in enumerate(self._entries):
            parent_idx = self._parent_index(record)
            if parent_idx is not None:
                self._children[parent_idx].append(idx)

        self._break_cycles()

    def build(self) -> list[NavigationItem]:
        # Roots are claimed up front so a cycle can never re-enter one
        self._emitted = set(self._roots)
        return [self._transform(idx) for idx in self._sorted(self._roots)]

    def _parent_index(self, record: MenuItemRecord) -> int | None:
        if record.parent_id is None:
            return None
        return self._index.get(record.parent_id)

    def _break_cycles(self) -> None:
        """Promote records unreachable from any root.

        Such records sit on (or below) a parent loop. The earliest one in
        input order becomes a root and everything it reaches is marked.
        """
        reachable = self._reachable_from(self._roots)
        for idx in range(len(self._entries)):
            if idx in reachable:
                continue
            logger.debug(f"Breaking parent cycle at menu item {self._entries[idx][1].id!r}")
            self._roots.append(idx)
            reachable |= self._reachable_from([idx])

    def _reachable_from(self, starts: list[int]) -> set[int]:
        seen: set[int] = set()
        stack = list(starts)
        while stack:
            idx = stack.pop()
            if idx in seen:
                continue
            seen.add(idx)
            stack.extend(self._children[idx])
        return seen

    def _sorted(self, indices: list[int]) -> list[int]:
        def sort_key(idx: int) -> tuple[int, int]:
            position, record = self._entries[idx]
            order = record.order if record.order is not None else position
            return order, position

        return sorted(indices, key=sort_key)

    def _transform(self, idx: int) -> NavigationItem:
        position, record = self._entries[idx]
        item = normalize(record, fallback_order=position)

        children = [c for c in self._sorted(self._children[idx]) if c not in self._emitted]
        self._emitted.update(children)
        if children:
            item.submenu = [self._transform(child) for child in children]
        return item
