"""Element selectors with graceful fallbacks."""

from collections.abc import Iterator

from lxml import etree


def select_one(
    root: etree._Element,
    tag: str,
    *,
    default: etree._Element | None = None,
) -> etree._Element | None:
    """Return the first direct child named ``tag`` or ``default``."""
    result = root.find(tag)
    if result is None:
        return default
    return result


def iter_descendants(
    root: etree._Element,
    tag: str,
    *,
    include_self: bool = False,
) -> Iterator[etree._Element]:
    """Yield all descendants named ``tag`` in document order."""
    if include_self:
        return root.iter(tag)
    return root.iterdescendants(tag)


def text(
    element: etree._Element | None,
    default: str = "",
    strip: bool = True,
) -> str:
    """Return the element text or ``default``."""
    if element is None:
        return default
    text_val = element.text
    if text_val is None:
        return default
    return text_val.strip() if strip else text_val


def attr(
    element: etree._Element | None,
    attr_name: str,
    default: str = "",
) -> str:
    """Return an attribute value or ``default``."""
    if element is None:
        return default
    return element.get(attr_name, default)


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
