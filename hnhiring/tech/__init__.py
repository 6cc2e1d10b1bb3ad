"""Technology dictionary and keyword matcher.

This module provides:
- TechKeywordEntry / TechDictionary: immutable label -> aliases table
- DEFAULT_TECH_KEYWORDS / DEFAULT_DICTIONARY: the built-in table
- TechKeywordMatcher / extract_tech_keywords: label extraction from text
"""

from .dictionary import (
    DEFAULT_DICTIONARY,
    DEFAULT_TECH_KEYWORDS,
    TechCategory,
    TechDictionary,
    TechKeywordEntry,
)
from .matcher import TechKeywordMatcher, extract_tech_keywords, sort_labels

__all__ = [
    "TechCategory",
    "TechKeywordEntry",
    "TechDictionary",
    "DEFAULT_TECH_KEYWORDS",
    "DEFAULT_DICTIONARY",
    "TechKeywordMatcher",
    "extract_tech_keywords",
    "sort_labels",
]
