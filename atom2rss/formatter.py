"""Indentation formatter for serialized XML."""

from lxml import etree

from .config import DEFAULT_INDENT
from .errors import SerializationError


def beautify_xml(
    xml: str, indent: str = DEFAULT_INDENT, xml_declaration: bool = False
) -> str:
    """Re-parse ``xml`` and return it indented one element per line.

    Raises:
        SerializationError: If ``xml`` is not a well-formed document
    """
    parser = etree.XMLParser(
        remove_blank_text=True, resolve_entities=False, no_network=True
    )
    try:
        root = etree.fromstring(xml.encode("utf-8"), parser)
        etree.indent(root, space=indent)
        output = etree.tostring(root, encoding="unicode", pretty_print=True)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise SerializationError(f"Cannot serialize RSS document: {e}") from e

    if xml_declaration:
        output = '<?xml version="1.0" encoding="UTF-8"?>\n' + output
    return output
