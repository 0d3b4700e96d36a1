"""
Site header navigation.
Decides which links the header shows for the current visitor.
"""

from enum import Enum
from typing import Any, List, Optional
from pydantic import BaseModel, Field


BRAND = "dogadopt.co.uk"


class NavItemKind(str, Enum):
    """How a nav item navigates."""
    ANCHOR = "anchor"
    ROUTE = "route"
    BUTTON = "button"


class NavItem(BaseModel):
    """A single header link or button."""

    label: str
    href: Optional[str] = Field(default=None, description="Anchor or route, None for buttons")
    kind: NavItemKind = Field(default=NavItemKind.ANCHOR)
    icon: Optional[str] = Field(default=None)

    class Config:
        frozen = True


_SECTION_LINKS = [
    NavItem(label="Find a Dog", href="#dogs"),
    NavItem(label="About", href="#about"),
    NavItem(label="Rescues", href="#rescues"),
]


def build_nav_items(user: Optional[Any], is_admin: bool = False) -> List[NavItem]:
    """
    Build header items for a visitor.

    Args:
        user: Signed-in user, None for anonymous visitors
        is_admin: Whether the user has the admin role

    Returns:
        Ordered nav items
    """
    items = list(_SECTION_LINKS)
    if is_admin:
        items.append(NavItem(label="Admin", href="/admin", kind=NavItemKind.ROUTE, icon="shield"))
    if user is None:
        items.append(NavItem(label="Sign In", href="/auth", kind=NavItemKind.ROUTE))
    items.append(NavItem(label="Donate", kind=NavItemKind.BUTTON))
    return items


class HeaderMenu:
    """Header state: the collapsible mobile menu and its items."""

    brand = BRAND

    def __init__(self, user: Optional[Any] = None, is_admin: bool = False):
        self.user = user
        self.is_admin = is_admin
        self.is_menu_open = False

    @property
    def items(self) -> List[NavItem]:
        return build_nav_items(self.user, self.is_admin)

    def toggle(self) -> bool:
        """Open or close the mobile menu, returning the new state."""
        self.is_menu_open = not self.is_menu_open
        return self.is_menu_open
