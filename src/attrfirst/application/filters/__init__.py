"""Template filters.

Usage:
    from attrfirst.application.filters import default_filters

    library = default_filters()
    flt = library.get("selectattrfirst")
    first = flt.filter(posts, interpreter, ("featured_image",), {})
"""

from attrfirst.application.filters._base import BaseFilter
from attrfirst.application.filters._registry import FilterLibrary, default_filters
from attrfirst.application.filters.select_attr_first import (
    FILTER_NAME,
    SelectAttrFirstFilter,
    parse_arguments,
    resolve_exp_test,
    scan,
    select_attr_first,
)

__all__ = [
    "BaseFilter",
    "FILTER_NAME",
    "FilterLibrary",
    "SelectAttrFirstFilter",
    "default_filters",
    "parse_arguments",
    "resolve_exp_test",
    "scan",
    "select_attr_first",
]
