"""HTML query helpers over BeautifulSoup.

Every helper tolerates missing nodes: scalar reads return "" and
collection reads return an empty list.
"""

from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag

__all__ = [
    "node_text",
    "select_text",
    "select_all",
    "next_sibling_text",
    "table_rows_after",
]

Node = Union[BeautifulSoup, Tag]


def node_text(node: Optional[Tag]) -> str:
    """Text content of a node with surrounding whitespace removed."""
    if node is None:
        return ""
    return node.get_text().strip()


def select_text(node: Node, selector: str) -> str:
    """Text of the first node matching selector, or "" if none matches."""
    return node_text(node.select_one(selector))


def select_all(node: Node, selector: str) -> List[Tag]:
    """All nodes matching selector, in document order."""
    return list(node.select(selector))


def next_sibling_text(node: Node, selector: str) -> str:
    """Text of the element right after the first selector match.

    Used for table rows where a label cell is followed by its value cell.
    """
    match = node.select_one(selector)
    if match is None:
        return ""
    return node_text(match.find_next_sibling())


def table_rows_after(soup: Node, header_selector: str) -> List[Tag]:
    """Rows of the table that directly follows a header element.

    Looks at the element after the header: when it is a table (or wraps one)
    its tbody children are returned, falling back to all its tr elements.
    """
    header = soup.select_one(header_selector)
    if header is None:
        return []

    following = header.find_next_sibling()
    if following is None:
        return []

    table = following if following.name == "table" else following.find("table")
    if table is None:
        return []

    tbody = table.find("tbody")
    if tbody is not None:
        return [row for row in tbody.children if isinstance(row, Tag)]
    return table.find_all("tr")
