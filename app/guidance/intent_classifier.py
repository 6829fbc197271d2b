"""
Course Guide Assistant - Step 3: Intent Classifier
Maps a message plus conversation context to exactly one question type.

Classification is an ordered rule table evaluated first-match-wins.
Context-missing rules sit above content rules: a course question asked with
no course attached gets a clarifying question, never a guessed answer.
"""
import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional

from app.guidance import response_catalog as catalog
from app.guidance.interest_extractor import InterestExtractor
from app.models import (
    Classification,
    ConversationContext,
    CourseSummary,
    InterestMatch,
    QuestionType,
)

logger = logging.getLogger(__name__)

# -----------------------
# Vocabulary
# -----------------------
COURSE_REFERENCES = (
    'this course', 'the course', 'that course', 'this one', 'that one',
    'is it', 'will it', 'does it', 'can it', 'should i take it',
    'should i enroll', 'worth it', 'is this',
)

COURSE_EVALUATIVE_QUESTIONS = (
    'suitable for me', 'good for me', 'right for me', 'suitable for',
    'should i take', 'should i enroll', 'is this good', 'is this bad',
    'worth it', 'recommend this', 'how long', 'how much time',
    'what will i learn', 'what topics', 'prerequisites', 'prerequisite',
    'beginner friendly', 'difficulty', 'what next', 'after this',
    'what does it cover', 'who is it for', 'instructor',
)

INTEREST_PLACEHOLDER_RE = re.compile(r"my\s+interest", re.IGNORECASE)

GENERAL_GUIDANCE_QUESTIONS = (
    'what should i learn', 'what to learn', 'where to start', 'where should i start',
    'what should i start', 'where do i start', 'recommend a course', 'suggest a course',
    'help me choose',
)

DECISION_KEYWORDS = (
    'should i', 'is it worth', 'is this worth', 'worth it', 'recommend', 'good choice',
    'right choice', 'make sense', 'good idea', 'better to', 'go for',
)

COMPARISON_KEYWORDS = (
    'compare', 'comparison', ' vs ', ' vs.', 'versus', 'difference between',
    'better than', 'which one', 'similar to',
)

SUITABILITY_KEYWORDS = ('suitable', 'good for', 'right for', 'for me')
PREREQUISITE_KEYWORDS = ('prerequisite', 'require', 'need to know', 'before')
NEXT_STEP_KEYWORDS = ('next', 'after', 'then what', 'follow up')
DURATION_KEYWORDS = ('long', 'time', 'duration', 'hours')
CONTENT_KEYWORDS = ('learn', 'topics', 'cover', 'teach')

FILTER_HELP_KEYWORDS = ('filter', 'category', 'find', 'search')
BEGINNER_HELP_KEYWORDS = ('beginner', 'new to', 'never done')
COMPARISON_HELP_KEYWORDS = ('compare', 'difference')
LEARNING_PATH_KEYWORDS = ('path', 'roadmap')
DIFFICULTY_HELP_KEYWORDS = ('difficulty', 'level', 'hard', 'easy')


def _contains_any(msg: str, keywords) -> bool:
    return any(kw in msg for kw in keywords)


@dataclass(frozen=True)
class RuleInput:
    """Everything a rule may look at for one message."""
    msg: str
    ctx: ConversationContext
    interest: InterestMatch

    @property
    def course(self) -> Optional[CourseSummary]:
        return self.ctx.selected_course

    @property
    def has_course(self) -> bool:
        return self.ctx.selected_course is not None


@dataclass(frozen=True)
class Rule:
    name: str
    matches: Callable[[RuleInput], bool]
    build: Callable[[RuleInput], Classification]


def _static(question_type: QuestionType, key) -> Callable[[RuleInput], Classification]:
    def _build(_: RuleInput) -> Classification:
        return Classification(question_type=question_type, response_key=key)
    return _build


def _suitability(inp: RuleInput) -> Classification:
    difficulty = (inp.course.difficulty_level or "beginner").lower()
    key = catalog.SUITABILITY_BEGINNER_KEY
    if 'intermediate' in difficulty:
        key = catalog.SUITABILITY_INTERMEDIATE_KEY
    elif 'advanced' in difficulty or 'expert' in difficulty:
        key = catalog.SUITABILITY_ADVANCED_KEY
    return Classification(question_type=QuestionType.SUITABILITY, response_key=key)


def _prerequisites(inp: RuleInput) -> Classification:
    key = catalog.PREREQUISITES_KEY if inp.course.prerequisites else catalog.NO_PREREQUISITES_KEY
    return Classification(question_type=QuestionType.PREREQUISITES, response_key=key)


def _interest_stated(inp: RuleInput) -> Classification:
    return Classification(
        question_type=QuestionType.INTEREST_STATED,
        response_key=catalog.INTEREST_STATED_KEY,
        interest=inp.interest.topic,
    )


def _general_question(inp: RuleInput) -> Classification:
    # An interest from an earlier turn answers the question we would ask.
    if inp.ctx.stated_interest:
        return Classification(
            question_type=QuestionType.INTEREST_STATED,
            response_key=catalog.INTEREST_STATED_KEY,
            interest=inp.ctx.stated_interest,
        )
    return Classification(
        question_type=QuestionType.GENERAL_GUIDANCE_MISSING_INTEREST,
        response_key=catalog.GENERAL_QUESTION_KEY,
    )


def _course_rule(name: str, keywords, build) -> Rule:
    return Rule(name, lambda inp: inp.has_course and _contains_any(inp.msg, keywords), build)


DEFAULT_RULES: List[Rule] = [
    # 1. Context missing: course question, no course
    Rule(
        "course-reference-missing",
        lambda inp: not inp.has_course and (
            _contains_any(inp.msg, COURSE_REFERENCES) or _contains_any(inp.msg, COURSE_EVALUATIVE_QUESTIONS)
        ),
        _static(QuestionType.COURSE_REFERENCE_MISSING, catalog.COURSE_REFERENCE_KEY),
    ),
    # 2. Context missing: "my interest" with no actual interest
    Rule(
        "interest-placeholder",
        lambda inp: not inp.has_course and bool(INTEREST_PLACEHOLDER_RE.search(inp.msg)),
        _static(QuestionType.GENERAL_GUIDANCE_MISSING_INTEREST, catalog.INTEREST_PLACEHOLDER_KEY),
    ),
    # 3. Interest stated
    Rule("interest-stated", lambda inp: not inp.has_course and inp.interest.found, _interest_stated),
    # 4. Generic guidance, interest unknown
    Rule(
        "general-guidance-missing-interest",
        lambda inp: not inp.has_course and not inp.interest.found
        and _contains_any(inp.msg, GENERAL_GUIDANCE_QUESTIONS),
        _general_question,
    ),
    # 5. Course attached
    _course_rule("decision-related", DECISION_KEYWORDS,
                 _static(QuestionType.DECISION_RELATED, catalog.SHOULD_TAKE_KEY)),
    _course_rule("comparison", COMPARISON_KEYWORDS,
                 _static(QuestionType.COMPARISON, catalog.NEED_SECOND_COURSE_KEY)),
    _course_rule("suitability", SUITABILITY_KEYWORDS, _suitability),
    _course_rule("prerequisites", PREREQUISITE_KEYWORDS, _prerequisites),
    _course_rule("next-steps", NEXT_STEP_KEYWORDS,
                 _static(QuestionType.NEXT_STEPS, catalog.NEXT_STEPS_KEY)),
    _course_rule("duration", DURATION_KEYWORDS,
                 _static(QuestionType.DURATION, catalog.DURATION_KEY)),
    _course_rule("content", CONTENT_KEYWORDS,
                 _static(QuestionType.CONTENT, catalog.CONTENT_KEY)),
    # 6. Static guidance, course or not
    Rule("filter-help", lambda inp: _contains_any(inp.msg, FILTER_HELP_KEYWORDS),
         _static(QuestionType.GENERAL_GUIDANCE, catalog.FILTER_HELP_KEY)),
    Rule("beginner-help", lambda inp: _contains_any(inp.msg, BEGINNER_HELP_KEYWORDS),
         _static(QuestionType.GENERAL_GUIDANCE, catalog.BEGINNER_HELP_KEY)),
    Rule("comparison-help", lambda inp: _contains_any(inp.msg, COMPARISON_HELP_KEYWORDS),
         _static(QuestionType.GENERAL_GUIDANCE, catalog.COMPARISON_HELP_KEY)),
    Rule("learning-path", lambda inp: _contains_any(inp.msg, LEARNING_PATH_KEYWORDS),
         _static(QuestionType.GENERAL_GUIDANCE, catalog.LEARNING_PATH_KEY)),
    Rule("difficulty-help", lambda inp: _contains_any(inp.msg, DIFFICULTY_HELP_KEYWORDS),
         _static(QuestionType.GENERAL_GUIDANCE, catalog.DIFFICULTY_HELP_KEY)),
]

FALLBACK = Classification(question_type=QuestionType.FALLBACK, response_key=catalog.DEFAULT_KEY)


class IntentClassifier:
    """Step 3: First-match-wins dispatch over an ordered rule table."""

    def __init__(self, rules: Optional[List[Rule]] = None, extractor: Optional[InterestExtractor] = None):
        self.rules = list(rules) if rules is not None else list(DEFAULT_RULES)
        self.extractor = extractor or InterestExtractor()

    def classify(
        self,
        text: str,
        ctx: ConversationContext,
        interest: Optional[InterestMatch] = None,
    ) -> Classification:
        text = text or ""
        if interest is None:
            interest = self.extractor.extract(text)

        inp = RuleInput(msg=text.lower(), ctx=ctx, interest=interest)
        for rule in self.rules:
            if rule.matches(inp):
                result = rule.build(inp)
                logger.debug(f"Rule '{rule.name}' -> {result.question_type.value} {result.response_key}")
                return result

        logger.debug("No rule matched; fallback")
        return FALLBACK

    def matching_rule(self, text: str, ctx: ConversationContext) -> Optional[str]:
        """Name of the rule that would fire, for diagnostics."""
        inp = RuleInput(msg=(text or "").lower(), ctx=ctx, interest=self.extractor.extract(text or ""))
        return next((rule.name for rule in self.rules if rule.matches(inp)), None)
