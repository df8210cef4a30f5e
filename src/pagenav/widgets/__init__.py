"""pagenav widgets."""

from .page_list import PageList
from .page_view import PageView

__all__ = [
    "PageList",
    "PageView",
]
