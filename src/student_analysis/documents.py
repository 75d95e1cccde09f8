"""
Low-level document access shared by all strategies.

- Scoped opening of a path or caller-owned binary handle
- One hardened lxml parser configuration (no network, internal entities only)
- Record lookup and name-text extraction on a parsed tree
- Faculty catalog (distinct faculties, sorted)
"""

import logging
import os
from contextlib import contextmanager
from typing import Any, BinaryIO, Dict, Iterator, List, Optional, Union

from lxml import etree

from student_analysis.config import AnalysisSettings, get_settings
from student_analysis.exceptions import MalformedDocumentError

logger = logging.getLogger(__name__)

DocumentSource = Union[str, os.PathLike, BinaryIO]


def describe_source(xml_path: DocumentSource) -> str:
    """Human-readable name of a document source for messages."""
    if hasattr(xml_path, 'read'):
        return str(getattr(xml_path, 'name', '<stream>'))
    return str(os.fspath(xml_path))


@contextmanager
def open_document(xml_path: DocumentSource) -> Iterator[BinaryIO]:
    """
    Open a document for reading for the duration of one analysis.

    Paths are opened in binary mode and always closed on exit, including
    when parsing fails. File-like objects are passed through untouched and
    stay open; the caller owns them.

    Args:
        xml_path: Filesystem path or readable binary file object

    Yields:
        Binary file object positioned at the document start

    Raises:
        FileNotFoundError: If the path does not exist
    """
    if hasattr(xml_path, 'read'):
        yield xml_path
        return

    with open(xml_path, 'rb') as f:
        yield f


def parser_options(settings: AnalysisSettings) -> Dict[str, Any]:
    """Keyword options shared by XMLParser and iterparse."""
    return {
        'resolve_entities': 'internal',
        'no_network': True,
        'huge_tree': settings.huge_tree,
    }


def read_tree(source: BinaryIO, settings: AnalysisSettings) -> etree._ElementTree:
    """
    Parse a whole document into an lxml tree.

    Recover mode is off: a document that is not well-formed raises
    XMLSyntaxError instead of yielding a partial tree.
    """
    parser = etree.XMLParser(**parser_options(settings))
    return etree.parse(source, parser)


def malformed_document(
    xml_path: DocumentSource,
    error: etree.XMLSyntaxError
) -> MalformedDocumentError:
    """Log and build the error raised for a document that is not well-formed."""
    error_msg = f"Malformed XML document {describe_source(xml_path)}: {error}"
    logger.error(error_msg)
    return MalformedDocumentError(error_msg, source=xml_path)


def iter_records(
    tree: etree._ElementTree,
    settings: AnalysisSettings
) -> Iterator[etree._Element]:
    """
    Yield record elements (direct children of the root) in document order.

    If settings.root_tag is set and the root has another name, the
    document has no records.
    """
    root = tree.getroot()
    if settings.root_tag is not None and root.tag != settings.root_tag:
        logger.debug(
            f"Root element <{root.tag}> is not <{settings.root_tag}>, no records"
        )
        return iter(())
    return root.iterchildren(settings.record_tag)


def element_text(elem: etree._Element) -> str:
    """Full text content of an element (all descendant text, unnormalized)."""
    return ''.join(elem.itertext())


def find_name_text(
    record: etree._Element,
    settings: AnalysisSettings
) -> Optional[str]:
    """
    Text of the record's first name element.

    Returns:
        '' for a present but empty name element, None if there is none
    """
    name_elem = record.find(settings.name_tag)
    if name_elem is None:
        return None
    return element_text(name_elem)


def list_faculties(
    xml_path: DocumentSource,
    settings: Optional[AnalysisSettings] = None
) -> List[str]:
    """
    List distinct non-empty faculty values found on the records.

    Args:
        xml_path: Filesystem path or readable binary file object
        settings: Document shape settings (defaults to get_settings())

    Returns:
        Faculty names sorted ascending (ordinal string order)

    Raises:
        MalformedDocumentError: If the document is not well-formed XML

    Example:
        >>> list_faculties('students.xml')
        ['Eng', 'Sci']
    """
    settings = settings or get_settings()

    with open_document(xml_path) as source:
        try:
            tree = read_tree(source, settings)
        except etree.XMLSyntaxError as e:
            raise malformed_document(xml_path, e) from e

    faculties = {
        record.get(settings.faculty_attribute)
        for record in iter_records(tree, settings)
    }
    result = sorted(f for f in faculties if f)

    logger.debug(f"Found {len(result)} faculties in {describe_source(xml_path)}")
    return result
