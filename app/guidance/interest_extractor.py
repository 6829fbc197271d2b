"""
Course Guide Assistant - Step 2: Interest Extractor
Finds a topic of interest the user stated in free text.
"""
import logging
import re
from typing import List, Pattern

from app.models import InterestMatch

logger = logging.getLogger(__name__)

_TOPIC = r"([\w\s#+.-]+?)(?:\.(?=\s|$)|,|!|\?|$)"

# Ordered: the first accepted capture wins.
INTEREST_PATTERNS: List[Pattern] = [
    # "in X", "interested in X" at the very start
    re.compile(r"^(?:in\s+)?(?:interested?\s+)?in\s+" + _TOPIC, re.IGNORECASE),
    # "interested in X", tolerant of common misspellings ("intrested", "interstd")
    re.compile(r"(?:^|\s)int(?:e)?r(?:e)?st(?:e)?d\s+in\s+" + _TOPIC, re.IGNORECASE),
    # "I am interested in X", "I'm learning X", "I study X"
    re.compile(
        r"\b(?:i am|i'm|i)\s+(?:int(?:e)?r(?:e)?st(?:e)?d?\s+in|want to learn|learning|study(?:ing)?)\s+" + _TOPIC,
        re.IGNORECASE,
    ),
    # "I want to learn X", "I'd like to study X"
    re.compile(
        r"(?:i want|i'd like|i would like)\s+(?:to\s+)?(?:learn|study|know about|understand)\s+" + _TOPIC,
        re.IGNORECASE,
    ),
    re.compile(r"(?:tell me about|help me with|teach me|show me)\s+" + _TOPIC, re.IGNORECASE),
    re.compile(r"(?:courses? (?:on|about|for|in))\s+" + _TOPIC, re.IGNORECASE),
    re.compile(r"(?:^|\s)(?:my interest is|interest in)\s+" + _TOPIC, re.IGNORECASE),
]

STOP_WORDS = {'it', 'this', 'that', 'them', 'there', 'is', 'are', 'was', 'were', 'in', 'on', 'at'}

# Captured after "I study" or "I'm learning" when no topic is named
TIME_WORDS = {
    'next', 'now', 'later', 'today', 'tonight', 'tomorrow', 'soon', 'again', 'daily', 'more',
    'at night', 'at home', 'every day', 'in the morning', 'in the evening', 'on weekends',
    'right now', 'after work',
}

PLACEHOLDER_PHRASES = {
    'my interest', 'this interest', 'that interest', 'the interest', 'an interest', 'some interest',
}

_HAS_LETTER = re.compile(r"[a-zA-Z]")


class InterestExtractor:
    """Step 2: Pull a stated topic out of the message, rejecting filler captures."""

    def __init__(self, patterns: List[Pattern] = None):
        self.patterns = patterns or INTEREST_PATTERNS

    def extract(self, text: str) -> InterestMatch:
        message = (text or "").strip()
        if not message:
            return InterestMatch()

        for pattern in self.patterns:
            match = pattern.search(message)
            if not match or not match.group(1):
                continue

            topic = match.group(1).strip()
            if self._is_rejected(topic):
                logger.debug(f"Interest capture rejected: {topic!r}")
                continue

            return InterestMatch(found=True, topic=topic)

        return InterestMatch()

    @staticmethod
    def _is_rejected(topic: str) -> bool:
        """A capture is not a topic when it is filler, a time word or a placeholder, or has no letters."""
        if len(topic) < 2:
            return True
        lowered = topic.lower()
        if lowered in STOP_WORDS or lowered in TIME_WORDS or lowered in PLACEHOLDER_PHRASES:
            return True
        return not _HAS_LETTER.search(topic)


_default_extractor = InterestExtractor()


def extract_interest(text: str) -> InterestMatch:
    return _default_extractor.extract(text)
