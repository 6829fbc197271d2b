"""Guidance pipeline for the Course Guide Assistant."""
from app.guidance.scope_filter import ScopeFilter
from app.guidance.interest_extractor import InterestExtractor
from app.guidance.intent_classifier import IntentClassifier
from app.guidance.response_selector import ResponseSelector
from app.guidance.orchestrator import DialogueOrchestrator
from app.guidance.welcome import build_welcome

__all__ = [
    "ScopeFilter",
    "InterestExtractor",
    "IntentClassifier",
    "ResponseSelector",
    "DialogueOrchestrator",
    "build_welcome",
]
