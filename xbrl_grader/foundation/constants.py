# Path: xbrl_grader/foundation/constants.py
"""
Foundation Module Constants

Namespaces, parser messages and pattern fragments used by the
well-formedness checker and the structural matcher.
"""

# ==============================================================================
# NAMESPACES
# ==============================================================================

# Prefixes learners use without declaring them
KNOWN_NAMESPACES: dict[str, str] = {
    'xbrli': 'http://www.xbrl.org/2003/instance',
    'link': 'http://www.xbrl.org/2003/linkbase',
    'xlink': 'http://www.w3.org/1999/xlink',
    'xbrldi': 'http://xbrl.org/2006/xbrldi',
    'xbrldt': 'http://xbrl.org/2005/xbrldt',
    'iso4217': 'http://www.xbrl.org/2003/iso4217',
    'ref': 'http://www.xbrl.org/2006/ref',
    'xsi': 'http://www.w3.org/2001/XMLSchema-instance',
    'xs': 'http://www.w3.org/2001/XMLSchema',
    'ex': 'http://example.com/taxonomy',
}

# Placeholder for prefixes outside KNOWN_NAMESPACES
UNKNOWN_NAMESPACE_TEMPLATE = 'urn:x-xbrl-grader:{prefix}'

# Prefixes that XML reserves and must never be redeclared
RESERVED_PREFIXES = frozenset({'xml', 'xmlns'})

# Synthetic element wrapping each fragment
FRAGMENT_ROOT_TAG = 'xbrl-grader-fragment'

# ==============================================================================
# SCANNING PATTERNS
# ==============================================================================

NAME_START = r'[A-Za-z_]'
NAME_CHAR = r'[\w.\-]'

# Prefix of an element name: <xbrli:context or </xbrli:context
ELEMENT_PREFIX_PATTERN = rf'</?\s*({NAME_START}{NAME_CHAR}*):{NAME_START}'

# Prefix of an attribute name: xlink:type=
ATTRIBUTE_PREFIX_PATTERN = rf'\s({NAME_START}{NAME_CHAR}*):{NAME_START}{NAME_CHAR}*\s*='

# Leading XML declaration (optionally preceded by a BOM or whitespace)
XML_DECLARATION_PATTERN = '^\ufeff?' + r'\s*<\?xml\b[^>]*\?>'

# Attribute name="value" or name='value'
ATTRIBUTE_PAIR_PATTERN = rf'({NAME_START}[\w.\-:]*)\s*=\s*(?:"([^"]*)"|\'([^\']*)\')'

# ==============================================================================
# MESSAGES
# ==============================================================================

MSG_INVALID_XML = (
    "❌ Invalid XML format. Please ensure your syntax is correct and well-formed."
)
MSG_INPUT_TOO_LARGE = (
    "❌ Your answer is too long to be evaluated ({length} characters, "
    "limit {limit})."
)
