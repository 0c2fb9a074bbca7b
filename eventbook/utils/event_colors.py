# eventbook/utils/event_colors.py
"""
Event category classification and display colors.

Shared by the participant calendar and the staff console so an event gets
the same color everywhere.
"""

from typing import Dict, List, Tuple

CATEGORY_WORKSHOPS = "workshops"
CATEGORY_COUNSELING = "counseling"
CATEGORY_COMMUNITY = "community"
CATEGORY_VOLUNTEERING = "volunteering"
CATEGORY_DEFAULT = "default"

# Checked in order; the first group with a keyword in the name wins.
CATEGORY_KEYWORDS: List[Tuple[str, Tuple[str, ...]]] = [
    (CATEGORY_WORKSHOPS, ("workshop",)),
    (CATEGORY_COUNSELING, ("counseling", "session")),
    (CATEGORY_COMMUNITY, ("community", "park")),
    (CATEGORY_VOLUNTEERING, ("volunteer",)),
]

CATEGORY_COLORS: Dict[str, Dict[str, str]] = {
    CATEGORY_WORKSHOPS: {
        "color": "bg-orange-100 text-orange-700",
        "dot_color": "bg-orange-500",
        "border_color": "border-orange-200",
    },
    CATEGORY_COUNSELING: {
        "color": "bg-blue-100 text-blue-700",
        "dot_color": "bg-blue-500",
        "border_color": "border-blue-200",
    },
    CATEGORY_COMMUNITY: {
        "color": "bg-green-100 text-green-700",
        "dot_color": "bg-green-500",
        "border_color": "border-green-200",
    },
    CATEGORY_VOLUNTEERING: {
        "color": "bg-purple-100 text-purple-700",
        "dot_color": "bg-purple-500",
        "border_color": "border-purple-200",
    },
    CATEGORY_DEFAULT: {
        "color": "bg-gray-100 text-gray-700",
        "dot_color": "bg-gray-500",
        "border_color": "border-gray-200",
    },
}


def get_category_from_name(event_name: str) -> str:
    """Determine the category of an event from keywords in its name."""
    name = (event_name or "").lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return category
    return CATEGORY_DEFAULT


def get_event_colors(event_name: str) -> Dict[str, str]:
    return CATEGORY_COLORS[get_category_from_name(event_name)]


def get_event_color_classes(event_name: str) -> str:
    """Returns: "bg-xxx-100 text-xxx-700 border-xxx-200" """
    colors = get_event_colors(event_name)
    return f"{colors['color']} {colors['border_color']}"


def get_event_dot_color(event_name: str) -> str:
    return get_event_colors(event_name)["dot_color"]
