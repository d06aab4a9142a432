"""attrfirst - first-match attribute filter for template expression engines."""

__version__ = "0.1.0"

from attrfirst.application.filters import SelectAttrFirstFilter, default_filters, select_attr_first
from attrfirst.application.services import Interpreter

__all__ = [
    "Interpreter",
    "SelectAttrFirstFilter",
    "__version__",
    "default_filters",
    "select_attr_first",
]
