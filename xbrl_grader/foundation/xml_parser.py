# Path: xbrl_grader/foundation/xml_parser.py
"""
Well-Formedness Checker

Parses learner snippets as XML and reports whether they are well-formed.

Snippets are fragments: several sibling elements, prefixes used without
declarations. The checker wraps each fragment in a synthetic root that
declares every prefix it uses, then parses with a hardened lxml parser.

Features:
- Never raises for bad input; every parser error becomes a failing result
- Input size bound (fails closed)
- XXE and entity expansion protection (no DTD, no entities, no network)
- Known XBRL prefixes bound to their real namespace URIs
"""

from dataclasses import dataclass
from typing import Optional

import regex
from lxml import etree

from ..config_loader import ConfigLoader, DEFAULT_MAX_INPUT_CHARS
from ..core.logger import get_process_logger
from ..models.error import ErrorCategory
from ..models.result import ValidationResult
from .constants import (
    KNOWN_NAMESPACES,
    UNKNOWN_NAMESPACE_TEMPLATE,
    RESERVED_PREFIXES,
    FRAGMENT_ROOT_TAG,
    ELEMENT_PREFIX_PATTERN,
    ATTRIBUTE_PREFIX_PATTERN,
    XML_DECLARATION_PATTERN,
    MSG_INVALID_XML,
    MSG_INPUT_TOO_LARGE,
)


_ELEMENT_PREFIX = regex.compile(ELEMENT_PREFIX_PATTERN)
_ATTRIBUTE_PREFIX = regex.compile(ATTRIBUTE_PREFIX_PATTERN)
_XML_DECLARATION = regex.compile(XML_DECLARATION_PATTERN)


@dataclass(frozen=True)
class XMLParseResult:
    """
    Result of a well-formedness check.

    Attributes:
        root: Synthetic fragment root (None if malformed)
        well_formed: Whether the snippet parsed
        error: Fixed diagnostic when malformed
        category: MALFORMED_INPUT when malformed, None otherwise
    """
    root: Optional[etree._Element]
    well_formed: bool
    error: Optional[str] = None
    category: Optional[ErrorCategory] = None

    def to_result(self) -> ValidationResult:
        """Convert a malformed outcome into the standard failing verdict."""
        if self.well_formed:
            return ValidationResult.passed()
        return ValidationResult.malformed(self.error)


class WellFormednessChecker:
    """
    XML well-formedness checker for untrusted snippets.

    Example:
        checker = WellFormednessChecker()
        result = checker.check('<xbrli:measure>iso4217:USD</xbrli:measure>')

        if not result.well_formed:
            return result.to_result()
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize checker.

        Args:
            config: Optional ConfigLoader instance (uses singleton if not provided)
        """
        self.config = config if config else ConfigLoader()
        self.logger = get_process_logger('xml_parser')
        self.max_input_chars = self.config.get('max_input_chars', DEFAULT_MAX_INPUT_CHARS)

    def check(self, text: object) -> XMLParseResult:
        """
        Parse snippet and report well-formedness.

        Args:
            text: Candidate snippet (anything that is not a str is malformed)

        Returns:
            XMLParseResult with the fragment root or the fixed diagnostic
        """
        if not isinstance(text, str) or not text.strip():
            return self._malformed(MSG_INVALID_XML)

        if len(text) > self.max_input_chars:
            self.logger.info(
                f"Rejected oversize snippet: {len(text)} > {self.max_input_chars} chars"
            )
            return self._malformed(
                MSG_INPUT_TOO_LARGE.format(length=len(text), limit=self.max_input_chars)
            )

        fragment = _XML_DECLARATION.sub('', text, count=1)
        document = self._wrap_fragment(fragment)

        try:
            root = etree.fromstring(document.encode('utf-8'), self._create_parser())
        except (etree.LxmlError, ValueError) as e:
            self.logger.debug(f"Snippet is not well-formed: {e}")
            return self._malformed(MSG_INVALID_XML)

        if not self._is_element_fragment(root):
            self.logger.debug("Snippet has no element content or stray top-level text")
            return self._malformed(MSG_INVALID_XML)

        return XMLParseResult(root=root, well_formed=True)

    def _create_parser(self) -> etree.XMLParser:
        """Create a hardened, non-recovering parser."""
        return etree.XMLParser(
            recover=False,
            resolve_entities=False,
            no_network=True,
            load_dtd=False,
            dtd_validation=False,
            huge_tree=False,
        )

    def _wrap_fragment(self, fragment: str) -> str:
        """
        Wrap fragment in a root declaring every prefix it uses.

        Args:
            fragment: Snippet text without XML declaration

        Returns:
            Single-rooted XML document text
        """
        prefixes: dict[str, None] = {}
        for pattern in (_ELEMENT_PREFIX, _ATTRIBUTE_PREFIX):
            for prefix in pattern.findall(fragment):
                if prefix.lower() not in RESERVED_PREFIXES:
                    prefixes.setdefault(prefix, None)

        declarations = ' '.join(
            f'xmlns:{prefix}="{KNOWN_NAMESPACES.get(prefix, UNKNOWN_NAMESPACE_TEMPLATE.format(prefix=prefix))}"'
            for prefix in prefixes
        )
        return f'<{FRAGMENT_ROOT_TAG} {declarations}>{fragment}</{FRAGMENT_ROOT_TAG}>'

    def _is_element_fragment(self, root: etree._Element) -> bool:
        """Require at least one element and no stray text between top-level nodes."""
        if root.text and root.text.strip():
            return False

        has_element = False
        for child in root:
            if child.tail and child.tail.strip():
                return False
            if isinstance(child.tag, str):
                has_element = True

        return has_element

    def _malformed(self, message: str) -> XMLParseResult:
        return XMLParseResult(
            root=None,
            well_formed=False,
            error=message,
            category=ErrorCategory.MALFORMED_INPUT,
        )


def check_well_formed(text: object, config: Optional[ConfigLoader] = None) -> XMLParseResult:
    """
    Check snippet well-formedness with a fresh checker.

    Args:
        text: Candidate snippet
        config: Optional configuration

    Returns:
        XMLParseResult
    """
    return WellFormednessChecker(config).check(text)


__all__ = [
    'XMLParseResult',
    'WellFormednessChecker',
    'check_well_formed',
]
