"""
Page controllers.

One object per interactive page, holding its rules and ports.
"""

from practice_site.pages.alerts import AlertsPage
from practice_site.pages.api import ApiPage
from practice_site.pages.base import HistoryNavigator, Navigator, PageController
from practice_site.pages.dynamic import DynamicPage
from practice_site.pages.forms import FormsPage
from practice_site.pages.login import LoginPage

__all__ = [
    "AlertsPage",
    "ApiPage",
    "DynamicPage",
    "FormsPage",
    "HistoryNavigator",
    "LoginPage",
    "Navigator",
    "PageController",
]
