"""Tools for parsing XML data into Python models."""

import typing as t

import xml.etree.ElementTree as etree


# # XMLTransformer/Parser logic
# """Tools for describing the transformation from XML to Python"""
class NodeParse:
    """Class to ease the transformation from XML data to a Python object."""

    def __init__(self, node: etree.Element) -> None:
        """Wraps a root node"""
        self.node = node

        child_tags: t.MutableMapping[str, t.MutableSequence[etree.Element]] = {}
        for child in node:
            if child.tag in child_tags:
                child_tags[child.tag].append(child)
            else:
                child_tags[child.tag] = [child]

        # 'Freeze' the child tags attribute so that it appears immutable
        self.child_tags: t.Mapping[str, t.Sequence[etree.Element]] = child_tags

    def has_name(self, name: str) -> bool:
        """Checks whether the given name is a tag of one of the child nodes."""
        return name in self.child_tags

    def find(self, name: str, index: int = 0) -> t.Optional[etree.Element]:
        """Returns the node at the given index among children with the given tag,
        or None if there is no such node.
        """
        nodes = self.child_tags.get(name, ())
        return nodes[index] if index < len(nodes) else None

    def text(self, name: str, index: int = 0) -> t.Optional[str]:
        """Returns the stripped text of the given child, or None if it is absent."""
        node = self.find(name, index)
        return None if node is None else content(node).strip()

    def number(self, name: str) -> t.Optional[t.Union[int, float]]:
        """Returns the numeric content of the first child with the tag,
        or None if it is absent or not numeric.
        """
        return to_number(self.text(name))


def content(node: etree.Element) -> str:
    """Function to parse simple tags that contain the data as text"""
    return node.text if node.text else ""


def to_number(text: t.Optional[str]) -> t.Optional[t.Union[int, float]]:
    """Converts numeric text to an int (or float if it has a fractional part).

    Returns None for None, empty, or non-numeric text.
    """
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None


def split(text: t.Optional[str], separator: str) -> t.Optional[t.List[str]]:
    """Splits delimited text into a list, empty text giving an empty list."""
    if text is None:
        return None
    return text.split(separator) if text else []
