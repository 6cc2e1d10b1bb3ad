"""Technology keyword matching over posting text."""

from typing import List, Optional

from .dictionary import DEFAULT_DICTIONARY, TechDictionary


def sort_labels(labels) -> List[str]:
    """Sort labels case-insensitively, ties broken by the raw string."""
    return sorted(set(labels), key=lambda label: (label.casefold(), label))


class TechKeywordMatcher:
    """Finds canonical technology labels mentioned in text.

    Every alias is tested independently, so overlapping aliases such as
    "react" and "react native" can both contribute a label.
    """

    def __init__(self, dictionary: Optional[TechDictionary] = None):
        self.dictionary = dictionary if dictionary is not None else DEFAULT_DICTIONARY

    def extract(self, text: str) -> List[str]:
        """Return the sorted, distinct labels whose aliases occur in ``text``."""
        if not text:
            return []

        lower = text.lower()
        matches = {
            label for pattern, label in self.dictionary.iter_patterns() if pattern.search(lower)
        }
        return sort_labels(matches)


_default_matcher = TechKeywordMatcher(DEFAULT_DICTIONARY)


def extract_tech_keywords(text: str) -> List[str]:
    """Match ``text`` against the default dictionary.

    Example:
        >>> extract_tech_keywords("We use React and React Native")
        ['React', 'React Native']
    """
    return _default_matcher.extract(text)
