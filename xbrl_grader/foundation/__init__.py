"""
Foundation

Parsing and matching primitives underneath every grading rule.
"""

from .xml_parser import XMLParseResult, WellFormednessChecker, check_well_formed
from .matcher import Element, StructuralMatcher

__all__ = [
    'XMLParseResult',
    'WellFormednessChecker',
    'check_well_formed',
    'Element',
    'StructuralMatcher',
]
