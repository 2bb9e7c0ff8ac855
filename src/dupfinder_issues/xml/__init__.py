"""XML helpers built on lxml.etree for reading dupFinder logs."""

from .parser_factory import make_xml_parser
from .selectors import attr, is_blank, iter_descendants, select_one, text

__all__ = [
    "make_xml_parser",
    "select_one",
    "iter_descendants",
    "text",
    "attr",
    "is_blank",
]
