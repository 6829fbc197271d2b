"""
Course Guide Assistant - Step 1: Scope Filter
Rejects messages that have nothing to do with course discovery or learning.
"""
import logging

logger = logging.getLogger(__name__)


class ScopeFilter:
    """
    Step 1: Decide whether a message is answerable by the course assistant.

    Rules (first match wins, order is load-bearing):
    1. Any in-scope keyword -> in scope
    2. Any out-of-scope keyword -> out of scope
    3. Exact-match greeting -> in scope
    4. More than MAX_TOPIC_FREE_TOKENS tokens -> out of scope
    5. Otherwise -> in scope
    """

    IN_SCOPE_KEYWORDS = (
        'course', 'learn', 'study', 'teach', 'instructor', 'class', 'lesson',
        'tutorial', 'training', 'education', 'beginner', 'intermediate', 'advanced',
        'prerequisite', 'duration', 'time', 'hours', 'enroll', 'suitable',
        'difficulty', 'level', 'topic', 'subject', 'category', 'filter',
        'compare', 'recommend', 'suggest', 'next', 'start', 'programming',
        'development', 'design', 'science', 'business', 'skill', 'certificate',
        'what should i', 'where to start', 'how to', 'best for',
    )

    OUT_OF_SCOPE_KEYWORDS = (
        'weather', 'news', 'joke', 'game', 'recipe', 'movie', 'song', 'music',
        'sports', 'politics', 'stock', 'crypto', 'bitcoin', 'price', 'buy', 'sell',
        'restaurant', 'food', 'travel', 'hotel', 'flight', 'book', 'ticket',
        'health', 'medicine', 'doctor', 'hospital', 'symptom', 'disease',
        'calculate', 'math problem', 'solve equation', 'translate',
        'write code for', 'debug this', 'fix my code', 'homework',
        'who is', 'who are', 'what is the capital', 'when was', 'where is',
    )

    GREETINGS = {
        'hello', 'hi', 'hey', 'good morning', 'good evening', 'how are you',
        "what's up", 'thanks', 'thank you', 'bye', 'goodbye',
    }

    MAX_TOPIC_FREE_TOKENS = 5

    def is_out_of_scope(self, text: str) -> bool:
        msg = (text or "").lower()

        if self.has_in_scope_keyword(msg):
            return False

        if any(kw in msg for kw in self.OUT_OF_SCOPE_KEYWORDS):
            logger.info(f"Scope filter: out-of-scope keyword in {msg[:60]!r}")
            return True

        if msg.strip() in self.GREETINGS:
            return False

        # Long and topic-free
        if len(msg.split()) > self.MAX_TOPIC_FREE_TOKENS:
            logger.info(f"Scope filter: {len(msg.split())} tokens with no course vocabulary")
            return True

        return False

    def has_in_scope_keyword(self, text: str) -> bool:
        msg = (text or "").lower()
        return any(kw in msg for kw in self.IN_SCOPE_KEYWORDS)


_default_filter = ScopeFilter()


def is_out_of_scope(text: str) -> bool:
    return _default_filter.is_out_of_scope(text)
