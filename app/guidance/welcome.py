"""
Greeting and quick-suggestion chips shown when the assistant opens.
"""
from typing import List

from app.models import ConversationContext, PageMode, Welcome

COURSE_SUGGESTIONS: List[str] = [
    "Is this suitable for me?",
    "What are the prerequisites?",
    "Compare with another course",
    "What should I study after this?",
    "How long will it take?",
    "What will I learn?",
]

CATALOG_SUGGESTIONS: List[str] = [
    "What should I learn?",
    "Show beginner courses",
    "Help me filter by topic",
    "Suggest courses for my interest",
]

GENERAL_SUGGESTIONS: List[str] = [
    "Explain this topic in simple terms",
    "What are the key concepts I should focus on?",
    "Can you give me some practice questions?",
    "How does this relate to real-world applications?",
    "What should I study next?",
    "I'm having trouble understanding this concept",
]


def build_welcome(ctx: ConversationContext) -> Welcome:
    course = ctx.selected_course

    if ctx.page_mode == PageMode.COURSE_DETAIL and course:
        return Welcome(
            message=f'Hi! I\'m your AI assistant for "{course.title}". '
                    f'How can I help you with your learning today?',
            suggestions=list(GENERAL_SUGGESTIONS),
        )

    if ctx.page_mode == PageMode.COURSE_CATALOG:
        if course:
            message = (
                f'You\'ve selected "{course.title}"! 🎯\n\nI can help you:\n\n'
                "✅ Understand if this course is suitable for your level\n"
                "✅ Learn about prerequisites\n"
                "✅ Compare with other courses\n"
                "✅ Suggest what to study next\n\n"
                "What would you like to know?"
            )
            return Welcome(message=message, suggestions=list(COURSE_SUGGESTIONS))

        message = (
            "Hi! I'm here to help you find the right course. 😊\n\n"
            "Select a course or tell me what interests you, and I'll guide you!\n\n"
            "You can also ask me to:\n"
            "🔍 Help with filters\n"
            "⚖️ Compare courses\n"
            "💡 Suggest courses for beginners"
        )
        return Welcome(message=message, suggestions=list(CATALOG_SUGGESTIONS))

    return Welcome(
        message="Hi! I'm your AI learning assistant. I can help you with course questions, "
                "study tips, and learning guidance. What would you like to know?",
        suggestions=list(GENERAL_SUGGESTIONS),
    )
