"""Hand-authored header navigation used when the menu source is unusable."""

from portalnav.core.items import NavigationItem
from portalnav.core.types import LocalizedText

# (id, en, ne, href, children); children use the same shape without nesting
_FALLBACK_TABLE: tuple[tuple[str, str, str, str, tuple[tuple[str, str, str, str], ...]], ...] = (
    ("home", "Home", "गृह", "/", ()),
    (
        "downloads",
        "Downloads",
        "डाउनलोड",
        "/downloads",
        (
            ("downloads-forms", "Forms", "फारामहरू", "/downloads/forms"),
            ("downloads-reports", "Reports", "प्रतिवेदनहरू", "/downloads/reports"),
            ("downloads-publications", "Publications", "प्रकाशनहरू", "/downloads/publications"),
        ),
    ),
    (
        "gallery",
        "Gallery",
        "ग्यालेरी",
        "/gallery",
        (
            ("gallery-photos", "Photos", "फोटोहरू", "/gallery/photos"),
            ("gallery-videos", "Videos", "भिडियोहरू", "/gallery/videos"),
        ),
    ),
    (
        "acts-policies",
        "Acts & Policies",
        "ऐन, नीति तथा निर्देशन",
        "/acts-policies",
        (
            ("acts-policies-acts", "Acts", "ऐनहरू", "/acts-policies/acts"),
            ("acts-policies-policies", "Policies", "नीतिहरू", "/acts-policies/policies"),
            ("acts-policies-guidelines", "Guidelines", "निर्देशनहरू", "/acts-policies/guidelines"),
        ),
    ),
    (
        "plans-programs",
        "Plans & Programs",
        "योजना तथा कार्यक्रम",
        "/plans-programs",
        (
            ("plans-programs-annual", "Annual Plans", "वार्षिक योजनाहरू", "/plans-programs/annual"),
            ("plans-programs-projects", "Projects", "परियोजनाहरू", "/plans-programs/projects"),
            (
                "plans-programs-development",
                "Development Plans",
                "विकास योजनाहरू",
                "/plans-programs/development",
            ),
        ),
    ),
    ("news", "News", "समाचार", "/news", ()),
    ("contact", "Contact", "सम्पर्क", "/contact", ()),
)


def default_fallback_navigation() -> list[NavigationItem]:
    """Return a fresh copy of the fallback header navigation.

    Every call builds new objects, so callers may mutate the result freely.
    """
    items: list[NavigationItem] = []
    for order, (item_id, en, ne, href, children) in enumerate(_FALLBACK_TABLE, start=1):
        submenu = [
            NavigationItem(id=child_id, title=_title(c_en, c_ne), href=child_href, order=c_order)
            for c_order, (child_id, c_en, c_ne, child_href) in enumerate(children, start=1)
        ]
        items.append(
            NavigationItem(
                id=item_id,
                title=_title(en, ne),
                href=href,
                order=order,
                submenu=submenu or None,
            )
        )
    return items


def _title(en: str, ne: str) -> LocalizedText:
    return {"en": en, "ne": ne}
