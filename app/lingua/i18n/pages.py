"""Page identifier to translation group mapping.

Lets lazy loading pick translation groups from the page (view/component)
being rendered, without listing groups per route.
"""

import re
from typing import Any, Iterable, Optional

from lingua.configuration import LinguaSettings
from lingua.i18n.imports import import_string
from lingua.logging import get_module_logger

logger = get_module_logger()

_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")


def to_group_name(segment: str) -> str:
    """Convert a PascalCase/camelCase segment to kebab-case."""
    return _CASE_BOUNDARY.sub(r"\1-\2", segment).lower()


class PageGroupResolver:
    """Resolves translation groups from a page identifier.

    Examples:
        'Dashboard'         -> ['dashboard']
        'Pages/Dashboard'   -> ['dashboard']
        'Pages/Users/Index' -> ['users']
        'Admin/Users/Index' -> ['admin-users']
        'Admin/Dashboard'   -> ['admin']
        'UserProfile'       -> ['user-profile']

    A custom resolver replaces the built-in mapping entirely. It may be a
    callable taking the page id, an object with a ``resolve`` method, a class
    providing ``resolve``, or an import path to any of those.
    """

    def __init__(self, custom: Optional[Any] = None):
        self.custom = custom

    @classmethod
    def from_settings(cls, settings: LinguaSettings) -> "PageGroupResolver":
        return cls(custom=settings.lazy_loading.page_group_resolver)

    def resolve(self, page: str) -> list[str]:
        if self.custom is not None:
            return self._resolve_with_custom(page)

        group = self.extract_group_name(page)
        return [group] if group else []

    def extract_group_name(self, page: str) -> str:
        """Extract the base group name from a page path.

        Rules:
        1. Normalize backslashes and strip a leading 'Pages/' prefix
        2. A single segment is used directly
        3. Nested paths drop the last segment (view names such as 'Index'
           or 'Edit', or the page itself) and join the rest with '-'
        4. Every segment is converted to kebab-case
        """
        page = page.replace("\\", "/")
        if page[:6].lower() == "pages/":
            page = page[6:]

        segments = [segment for segment in page.split("/") if segment]
        if not segments:
            return ""

        if len(segments) == 1:
            return to_group_name(segments[0])

        # View names (Index, Show, Edit, Create, Form, List) and leaf pages
        # both resolve to their parent folders.
        return "-".join(to_group_name(segment) for segment in segments[:-1])

    def _resolve_with_custom(self, page: str) -> list[str]:
        resolver = self.custom
        if isinstance(resolver, str):
            try:
                resolver = import_string(resolver)
            except ImportError as e:
                logger.warning(
                    "page_group_resolver_import_failed",
                    resolver=self.custom,
                    error=str(e),
                )
                return []

        if isinstance(resolver, type):
            resolver = resolver()

        if hasattr(resolver, "resolve"):
            groups = resolver.resolve(page)
        elif callable(resolver):
            groups = resolver(page)
        else:
            logger.warning("page_group_resolver_unusable", resolver=repr(resolver))
            return []

        if isinstance(groups, str) or not isinstance(groups, Iterable):
            logger.warning(
                "page_group_resolver_invalid_result",
                resolver=repr(resolver),
                page=page,
                result_type=type(groups).__name__,
            )
            return []
        return list(groups)
