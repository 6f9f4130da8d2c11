"""Record normalizer.

Maps raw menu item records onto the canonical NavigationItem shape. All
defaulting for missing or odd fields lives here, so later stages only ever
see one shape.
"""

import re

from portalnav.core.items import NavigationItem
from portalnav.core.records import MenuItemRecord

DEFAULT_HREF = "/"
DEFAULT_SCHEME = "https://"

# Targets that open the link outside the app
_NEW_WINDOW_TARGETS = frozenset({"_blank", "blank"})

# A scheme counts only with "//" after it, or for the opaque mailto: and tel:;
# "host:port" is a bare hostname
_SCHEME_RE = re.compile(r"^(?:[A-Za-z][A-Za-z0-9+.\-]*://|(?:mailto|tel):)", re.IGNORECASE)


def resolve_href(resolved_url: str | None, url: str | None) -> str:
    """Resolve the render-ready link of a record.

    The server-resolved link wins. A raw link that has no scheme and does
    not start with "/" or "#" is taken to be a bare external hostname and
    gets the default scheme.

    Args:
        resolved_url: Link computed by the source, if any
        url: Raw user-entered link, if any

    Returns:
        Non-empty href, "/" when neither field is usable
    """
    if resolved_url and resolved_url.strip():
        return resolved_url.strip()

    if url and url.strip():
        raw = url.strip()
        if _SCHEME_RE.match(raw) or raw.startswith(("/", "#")):
            return raw
        return f"{DEFAULT_SCHEME}{raw}"

    return DEFAULT_HREF


def is_external_target(target: str | None) -> bool:
    """Whether a link target hint means "open in a new tab/window"."""
    if not target:
        return False
    return target.strip().lower() in _NEW_WINDOW_TARGETS


def normalize(record: MenuItemRecord, fallback_order: int = 0) -> NavigationItem:
    """Convert a record into a NavigationItem without a submenu.

    Args:
        record: Raw menu item record
        fallback_order: Order used when the record has none (its input position)

    Returns:
        NavigationItem; the tree builder attaches ``submenu`` later
    """
    return NavigationItem(
        id=record.id,
        title=dict(record.title),
        href=resolve_href(record.resolved_url, record.url),
        order=record.order if record.order is not None else fallback_order,
        is_active=record.is_visible,
        external=is_external_target(record.target),
        description=dict(record.description) if record.description else None,
    )
