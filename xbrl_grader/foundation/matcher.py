# Path: xbrl_grader/foundation/matcher.py
"""
Structural Matcher

Pattern and attribute extraction primitives shared by every grading rule.

Matching works on the raw snippet text, because exercises check the
literal syntax learners typed (quoted attribute values, element spelling).
Every operation runs with a time budget so that pathological input
cannot hang an evaluation.

Primitives:
- attribute / attributes: literal name="value" lookup
- element_text: nested element content lookup
- elements: every occurrence of an element, with parsed attributes
- occurrences: all captures of an arbitrary pattern
- matches: whole-value pattern check
- count: number of start tags of an element
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

import regex

from ..config_loader import ConfigLoader, DEFAULT_MATCH_TIMEOUT
from ..models.error import MatchTimeoutError
from .constants import ATTRIBUTE_PAIR_PATTERN


@lru_cache(maxsize=512)
def _compiled(pattern: str, flags: int) -> regex.Pattern:
    return regex.compile(pattern, flags)


def _attribute_pattern(name: str) -> str:
    """Pattern for name="value" or name='value' with the value in group 1 or 2."""
    return rf'(?<![\w.:\-]){regex.escape(name)}\s*=\s*(?:"([^"]*)"|\'([^\']*)\')'


# Start-tag attribute text; quoted values may contain '>'
START_TAG_ATTRIBUTES = r"""(?:[^>"']|"[^"]*"|'[^']*')*?"""


def _element_pattern(tag: str) -> str:
    """
    Pattern for an element occurrence.

    Groups:
        1: raw attribute text of the start tag
        2: content (None for self-closing elements)
    """
    name = regex.escape(tag)
    return rf'<{name}(?=[\s/>])({START_TAG_ATTRIBUTES})(?:/>|>(.*?)</{name}\s*>)'


def _first_group(match: regex.Match) -> str:
    """Value of whichever alternative group participated."""
    return match.group(1) if match.group(1) is not None else match.group(2)


@dataclass(frozen=True)
class Element:
    """
    One element occurrence found in a snippet.

    Attributes:
        tag: Element name as matched (prefix included)
        attributes: Attribute name to exact value, in source order
        content: Raw text between start and end tag (None if self-closing)
    """
    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    content: Optional[str] = None

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get an attribute value by exact name."""
        return self.attributes.get(name, default)

    def has(self, expected: dict[str, str]) -> bool:
        """Check that every expected attribute is present with the exact value."""
        return all(self.attributes.get(name) == value for name, value in expected.items())

    @property
    def text(self) -> str:
        """Content stripped of surrounding whitespace ('' if self-closing)."""
        return (self.content or '').strip()


class StructuralMatcher:
    """
    Raw-text matcher over a single snippet.

    Case policy is chosen per call: ignore_case affects element and
    attribute NAMES only. Rules compare values with their own policy.

    Example:
        snippet = StructuralMatcher('<ex:Revenue unitRef="u1">100</ex:Revenue>')
        snippet.attribute('unitRef')          # 'u1'
        snippet.element_text('ex:Revenue')    # '100'
    """

    def __init__(self, text: str, config: Optional[ConfigLoader] = None):
        """
        Initialize matcher.

        Args:
            text: Snippet text (already checked for well-formedness)
            config: Optional ConfigLoader instance (uses singleton if not provided)
        """
        self.text = text
        self.config = config if config else ConfigLoader()
        self.timeout = self.config.get('match_timeout', DEFAULT_MATCH_TIMEOUT)

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def attribute(
        self,
        name: str,
        tag: Optional[str] = None,
        ignore_case: bool = False
    ) -> Optional[str]:
        """
        Value of the first literal name="value" occurrence.

        Args:
            name: Attribute name (e.g. 'unitRef', 'xlink:label')
            tag: Restrict the search to the start tag of the first <tag> element
            ignore_case: Match the attribute name case-insensitively

        Returns:
            Attribute value, or None if absent
        """
        scope = self.text
        if tag is not None:
            start_tag = self._search(
                rf'<{regex.escape(tag)}(?=[\s/>]){START_TAG_ATTRIBUTES}/?>', scope, ignore_case
            )
            if start_tag is None:
                return None
            scope = start_tag.group(0)

        match = self._search(_attribute_pattern(name), scope, ignore_case)
        return _first_group(match) if match else None

    def attributes(self, name: str, ignore_case: bool = False) -> list[str]:
        """
        Values of every literal name="value" occurrence, in source order.

        Args:
            name: Attribute name
            ignore_case: Match the attribute name case-insensitively

        Returns:
            list of attribute values
        """
        return [
            _first_group(match)
            for match in self._finditer(_attribute_pattern(name), self.text, ignore_case)
        ]

    def element_text(self, *path: str, ignore_case: bool = False) -> Optional[str]:
        """
        Content of the first element at a nested path.

        Args:
            path: Element names from outer to inner
                  (e.g. 'xbrli:period', 'xbrli:startDate')
            ignore_case: Match element names case-insensitively

        Returns:
            Raw content of the innermost element, or None if any step is missing
        """
        scope: Optional[str] = self.text
        for tag in path:
            found = self._first_element(tag, scope, ignore_case)
            if found is None or found.content is None:
                return None
            scope = found.content
        return scope

    def elements(
        self,
        tag: str,
        ignore_case: bool = False,
        within: Optional[str] = None
    ) -> list[Element]:
        """
        Every occurrence of an element.

        Args:
            tag: Element name (e.g. 'xbrli:context')
            ignore_case: Match the element name case-insensitively
            within: Text to search instead of the whole snippet

        Returns:
            list of Element in source order
        """
        scope = self.text if within is None else within
        return [
            Element(
                tag=tag,
                attributes=self.parse_attributes(match.group(1)),
                content=match.group(2),
            )
            for match in self._finditer(_element_pattern(tag), scope, ignore_case, dotall=True)
        ]

    def occurrences(self, pattern: str, ignore_case: bool = False) -> list:
        """
        All captures of a pattern (as returned by findall).

        Args:
            pattern: Regular expression
            ignore_case: Case-insensitive matching

        Returns:
            list of captures
        """
        try:
            return self._compile(pattern, ignore_case, dotall=True).findall(
                self.text, timeout=self.timeout
            )
        except TimeoutError as e:
            raise MatchTimeoutError(pattern, self.timeout) from e

    def matches(self, pattern: str, value: str, ignore_case: bool = False) -> bool:
        """
        Check that a whole value matches a pattern.

        Args:
            pattern: Regular expression
            value: Extracted value (attribute value, element text)
            ignore_case: Case-insensitive matching

        Returns:
            True if the entire value matches
        """
        try:
            found = self._compile(pattern, ignore_case).fullmatch(value, timeout=self.timeout)
        except TimeoutError as e:
            raise MatchTimeoutError(pattern, self.timeout) from e
        return found is not None

    def count(self, tag: str, ignore_case: bool = False) -> int:
        """Number of <tag start tags in the snippet."""
        return len(self.occurrences(rf'<{regex.escape(tag)}(?=[\s/>])', ignore_case))

    def parse_attributes(self, attribute_text: str) -> dict[str, str]:
        """
        Parse raw start-tag attribute text into an ordered mapping.

        Args:
            attribute_text: Text between the element name and '>' or '/>'

        Returns:
            dict of attribute name to exact value
        """
        attributes: dict[str, str] = {}
        for match in self._finditer(ATTRIBUTE_PAIR_PATTERN, attribute_text or ''):
            value = match.group(2) if match.group(2) is not None else match.group(3)
            attributes.setdefault(match.group(1), value)
        return attributes

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _first_element(self, tag: str, scope: str, ignore_case: bool) -> Optional[Element]:
        match = self._search(_element_pattern(tag), scope, ignore_case, dotall=True)
        if match is None:
            return None
        return Element(
            tag=tag,
            attributes=self.parse_attributes(match.group(1)),
            content=match.group(2),
        )

    def _compile(self, pattern: str, ignore_case: bool, dotall: bool = False) -> regex.Pattern:
        flags = 0
        if ignore_case:
            flags |= regex.IGNORECASE
        if dotall:
            flags |= regex.DOTALL
        return _compiled(pattern, flags)

    def _search(
        self,
        pattern: str,
        text: str,
        ignore_case: bool = False,
        dotall: bool = False
    ) -> Optional[regex.Match]:
        try:
            return self._compile(pattern, ignore_case, dotall).search(text, timeout=self.timeout)
        except TimeoutError as e:
            raise MatchTimeoutError(pattern, self.timeout) from e

    def _finditer(
        self,
        pattern: str,
        text: str,
        ignore_case: bool = False,
        dotall: bool = False
    ) -> list[regex.Match]:
        try:
            return list(
                self._compile(pattern, ignore_case, dotall).finditer(text, timeout=self.timeout)
            )
        except TimeoutError as e:
            raise MatchTimeoutError(pattern, self.timeout) from e


__all__ = [
    'Element',
    'StructuralMatcher',
]
