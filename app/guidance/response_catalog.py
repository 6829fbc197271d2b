"""
Course Guide Assistant - Response Catalog
Author-written reply templates, grouped by category and subtype.

Each (category, subtype) key maps to a tuple of alternative phrasings. The
selector rotates through them by message count, so keys that are hit
repeatedly in one conversation should carry at least two variants.
Tokens: {courseName} {category} {level} {duration} {description}
{interest} {prerequisites}.
"""
from typing import Dict, Tuple

# Categories
NO_COURSE = "no-course-selected"
COURSE_SPECIFIC = "course-specific"
DECISION = "decision-related"
COMPARISON = "comparison"
GENERAL_GUIDANCE = "general-guidance"
SCOPE = "scope"
FALLBACK = "fallback"

# Keys
COURSE_REFERENCE_KEY = (NO_COURSE, "course-reference")
GENERAL_QUESTION_KEY = (NO_COURSE, "general-question")
INTEREST_STATED_KEY = (NO_COURSE, "interest-stated")
INTEREST_PLACEHOLDER_KEY = (NO_COURSE, "interest-placeholder")
SUITABILITY_BEGINNER_KEY = (COURSE_SPECIFIC, "suitability-beginner")
SUITABILITY_INTERMEDIATE_KEY = (COURSE_SPECIFIC, "suitability-intermediate")
SUITABILITY_ADVANCED_KEY = (COURSE_SPECIFIC, "suitability-advanced")
PREREQUISITES_KEY = (COURSE_SPECIFIC, "prerequisites")
NO_PREREQUISITES_KEY = (COURSE_SPECIFIC, "no-prerequisites")
NEXT_STEPS_KEY = (COURSE_SPECIFIC, "next-steps")
DURATION_KEY = (COURSE_SPECIFIC, "duration")
CONTENT_KEY = (COURSE_SPECIFIC, "content")
SHOULD_TAKE_KEY = (DECISION, "should-take")
NEED_SECOND_COURSE_KEY = (COMPARISON, "need-second-course")
FILTER_HELP_KEY = (GENERAL_GUIDANCE, "filters")
BEGINNER_HELP_KEY = (GENERAL_GUIDANCE, "beginner")
COMPARISON_HELP_KEY = (GENERAL_GUIDANCE, "comparison")
LEARNING_PATH_KEY = (GENERAL_GUIDANCE, "learning-path")
DIFFICULTY_HELP_KEY = (GENERAL_GUIDANCE, "difficulty")
OUTSIDE_CATALOG_KEY = (GENERAL_GUIDANCE, "outside-catalog")
OUT_OF_SCOPE_KEY = (SCOPE, "out-of-scope")
DEFAULT_KEY = (FALLBACK, "default")

MISSING_DESCRIPTION = "Check the course page for the detailed syllabus."

Catalog = Dict[str, Dict[str, Tuple[str, ...]]]

RESPONSE_CATALOG: Catalog = {
    NO_COURSE: {
        "course-reference": (
            "I'd love to help! 😊 But I need to know which course you're asking about.\n\n"
            "Please:\n📌 Click on a course card, OR\n📌 Tell me the course name\n\n"
            "Then I can help you understand if it's right for you!",
            "To give you accurate info, could you let me know which course caught your attention? 🎯\n\n"
            "You can:\n• Click on any course card\n• Tell me the course name\n\n"
            "Then I'll share all the details you need!",
            "I see you're interested in a course! Which one are you curious about? 😊\n\n"
            "Select a course from the list or mention its name, and I'll help you learn more about it!",
        ),
        "general-question": (
            "I can help you find the right course! 🎯\n\n"
            "Quick questions:\n1️⃣ What topic interests you?\n2️⃣ What's your current level?\n"
            "3️⃣ What's your goal?\n\nTell me about any of these!",
            "Let's find your perfect course! 💡\n\n"
            "To suggest the best options:\n• What field interests you? (AI, web dev, design, etc.)\n"
            "• Are you a beginner or have some experience?\n• Learning for career or hobby?\n\n"
            "Share what you can!",
            "I'm here to guide you! 🌟\n\n"
            "Help me understand:\n→ What do you want to learn?\n→ What's your background?\n"
            "→ What are you aiming to achieve?\n\nJust share a bit about yourself!",
        ),
        "interest-stated": (
            "Great! {interest} is an exciting field! 🎯\n\n"
            "To help you find the perfect course:\n\n"
            "1️⃣ What's your current level?\n   • Complete beginner\n   • Some basics\n   • Intermediate\n\n"
            "2️⃣ What's your goal?\n   • Career change\n   • Skill upgrade\n   • Just exploring\n\n"
            "Let me know!",
            "Excellent choice! {interest} has great courses here! 💡\n\n"
            "A couple of quick questions:\n\n"
            "→ Are you new to {interest} or have some experience?\n"
            "→ Learning for work or personal growth?\n\n"
            "This will help me point you to the right courses!",
            "Perfect! I can help you with {interest}! 🌟\n\n"
            "To recommend the best fit:\n\n"
            "• What's your experience level in {interest}?\n  (Beginner / Intermediate / Advanced)\n\n"
            "• What do you want to achieve?\n  (Career / Project / Learning for fun)\n\n"
            "Share what you can!",
        ),
        "interest-placeholder": (
            "I'd love to help! 😊 Which topic are you interested in?\n\n"
            "For example:\n• AI / Machine Learning\n• Web Development\n• Data Science\n"
            "• Mobile Apps\n• Design\n\nJust tell me your interest!",
            "Sure! 🎯 But first, could you tell me which topic interests you?\n\n"
            "Some examples:\n→ Programming (Java, Python, etc.)\n→ AI & Machine Learning\n"
            "→ Web Development\n→ Cloud Computing\n\nWhat would you like to learn?",
            "Happy to help! 💡 What topic are you interested in?\n\n"
            "You can say:\n✓ AI\n✓ Java\n✓ Web Development\n✓ Data Science\n"
            "✓ Or any other topic!\n\nLet me know!",
        ),
    },
    COURSE_SPECIFIC: {
        "suitability-beginner": (
            "{courseName}\n\n✅ Perfect for beginners!\n"
            "No prior experience needed. This course starts from the basics.\n\n"
            "⏱️ Duration: {duration} hours\n\n💡 You can dive right in!",
            "{courseName}\n\n🌱 Great starting point!\n"
            "Designed for those new to the topic. Explained step-by-step.\n\n"
            "⏱️ Takes about {duration} hours\n\n💡 No worries if you're just starting out!",
            "{courseName}\n\n✨ Beginner-friendly!\nBuilt for newcomers with clear explanations.\n\n"
            "⏱️ Time: {duration} hours\n\n💡 Jump in confidently!",
        ),
        "suitability-intermediate": (
            "{courseName}\n\n📚 Intermediate level\nBest if you have some basics. Builds on what you know.\n\n"
            "⏱️ Duration: {duration} hours\n\n💡 Make sure you're comfortable with fundamentals!",
            "{courseName}\n\n📈 For those with foundation\n"
            "Takes your existing knowledge to the next level.\n\n"
            "⏱️ About {duration} hours\n\n💡 Some background will help you get the most out of it!",
            "{courseName}\n\n🎯 Intermediate challenge\nAssuming you've got the basics covered.\n\n"
            "⏱️ Time: {duration} hours\n\n💡 Review fundamentals if needed before starting!",
        ),
        "suitability-advanced": (
            "{courseName}\n\n🎓 Advanced level\nFor experienced learners. Dives deep into complex topics.\n\n"
            "⏱️ Duration: {duration} hours\n\n💡 Solid foundation recommended!",
            "{courseName}\n\n🚀 Expert territory\nCovers advanced concepts in depth.\n\n"
            "⏱️ Takes {duration} hours\n\n💡 Best for those with strong background!",
            "{courseName}\n\n💪 High-level content\nChallenging material for experienced learners.\n\n"
            "⏱️ Time: {duration} hours\n\n💡 Make sure you're ready for advanced topics!",
        ),
        "prerequisites": (
            "Prerequisites for {courseName}:\n\n{prerequisites}\n\n"
            "💡 Make sure you're comfortable with these before starting!",
            "Before starting {courseName}, you should know:\n\n{prerequisites}\n\n"
            "📚 A quick refresher on these will make the course much smoother!",
        ),
        "no-prerequisites": (
            "{courseName} has no specific prerequisites mentioned.\n\n"
            "✅ You can start right away!\n💡 Check the course description for recommended skills.",
            "Good news! {courseName} doesn't list any prerequisites.\n\n"
            "✅ Jump in whenever you're ready!\n💡 The course description mentions any helpful background.",
        ),
        "next-steps": (
            "After completing {courseName}:\n\n"
            "🎯 Look for intermediate/advanced courses in {category}\n"
            "🎯 Explore related topics that build on this foundation\n"
            "🎯 Practice by working on real projects\n\n💡 I can help you find related courses!",
            "Next steps after {courseName}:\n\n"
            "→ Progress to higher-level {category} courses\n"
            "→ Apply what you learned in hands-on projects\n"
            "→ Explore complementary skills\n\n🌟 Want suggestions for follow-up courses?",
            "Once you finish {courseName}:\n\n"
            "✨ Move to advanced topics in {category}\n"
            "✨ Build real projects to solidify learning\n"
            "✨ Branch into related areas\n\n💬 Need help finding what's next?",
        ),
        "duration": (
            "{courseName} takes approximately {duration} hours.\n\n"
            "⏱️ Includes lectures, practice, and assignments\n💡 Learn at your own pace - no rush!",
            "You'll need about {duration} hours for {courseName}.\n\n"
            "📚 Covers all materials and exercises\n🎯 Flexible schedule - go at your speed!",
            "Plan for {duration} hours to complete {courseName}.\n\n"
            "⏰ Includes everything: lessons, practice, quizzes\n✨ Take your time to absorb the material!",
        ),
        "content": (
            "{courseName}\n\n{description}\n\n📂 Category: {category}\n📊 Level: {level}\n\n"
            "💡 Click the course to see full module details!",
            "What's covered in {courseName}:\n\n{description}\n\n🏷️ {category} | {level}\n\n"
            "🔍 View the complete syllabus on the course page!",
            "In {courseName}, you'll explore:\n\n{description}\n\nCategory: {category}\nDifficulty: {level}\n\n"
            "📖 Check course page for detailed breakdown!",
        ),
    },
    DECISION: {
        "should-take": (
            "I can give you info to decide, but the choice is yours! 😊\n\n"
            "{courseName} is {level} level and covers {description}\n\n"
            "Consider:\n• Does it match your skill level?\n• Do you have {duration} hours to invest?\n"
            "• Does the content align with your goals?\n\nWhat matters most to you?",
            "That's your call to make! Here's what might help:\n\n"
            "{courseName} → {level} difficulty\n⏱️ {duration} hours\n📚 Covers: {description}\n\n"
            "Think about:\n→ Your current knowledge\n→ Time you can commit\n→ Your learning objectives\n\n"
            "What's your main concern?",
            "Only you know what's best for your journey! 🎯\n\n"
            "About {courseName}:\nLevel: {level}\nTime: {duration} hours\nFocus: {description}\n\n"
            "Ask yourself:\n• Am I ready for this level?\n• Can I dedicate the time?\n"
            "• Is this aligned with my goals?\n\nNeed clarity on anything specific?",
        ),
    },
    COMPARISON: {
        "need-second-course": (
            "To compare {courseName} with another course, please tell me:\n\n"
            "📌 The name of the second course\n\n"
            "Or I can suggest similar courses in {category}!\n\nWhich course interests you?",
            "I'd love to compare! But I need to know the other course.\n\n"
            "Current: {courseName} ({category})\nCompare with: ?\n\n"
            "Just give me the name, or I can suggest alternatives in {category}!",
            "Great idea to compare! 👍\n\nYou've selected: {courseName}\n\n"
            "Which other course would you like to see alongside it? "
            "Or shall I suggest some in the {category} category?",
        ),
    },
    GENERAL_GUIDANCE: {
        "filters": (
            "Use the filters to find courses:\n\n"
            "🔍 Search by name or topic\n📂 Category (AI, Web Dev, etc.)\n"
            "📊 Level (Beginner/Intermediate/Advanced)\n\nWhat are you looking for?",
        ),
        "beginner": (
            "For beginners:\n\n✅ Use the Beginner filter\n✅ Look for courses with clear descriptions\n"
            "✅ Start with foundational topics\n\nWhich topic interests you?",
        ),
        "comparison": (
            "To compare courses, I need:\n\n📌 Names of both courses\n\n"
            "Or select a course first, then ask me to compare!\n\n"
            "I'll compare difficulty, duration, content, and suitability.",
        ),
        "learning-path": (
            "Building a learning path? Great! 🎯\n\n"
            "Tell me:\n1️⃣ Your topic of interest\n2️⃣ Your current level\n3️⃣ Your goal\n\n"
            "I'll suggest a step-by-step plan!",
        ),
        "difficulty": (
            "Choose the right level:\n\n"
            "📊 Beginner: No prior knowledge needed\n📊 Intermediate: Basic experience required\n"
            "📊 Advanced: Solid foundation needed\n\n"
            "💡 Use the level filter to find courses at your skill level!",
        ),
        "outside-catalog": (
            "I'm here to help with your learning journey! For the best assistance, please visit the "
            "Browse Courses page or a specific course page where I can provide more targeted help.",
        ),
    },
    SCOPE: {
        "out-of-scope": (
            "I can help you with courses and learning on this page 😊\n\n"
            "This question looks a bit outside my scope here.\n"
            "On the Browse Courses page, I can assist you with:\n"
            "• Understanding courses\n• Comparing courses\n• Choosing the right level\n"
            "• Deciding what to learn next\n\n"
            "📌 Please ask a question related to courses, or select a course to continue.",
        ),
    },
    FALLBACK: {
        "default": (
            "I'm here to help you choose! 😊\n\n"
            "You can:\n📌 Select a course and ask about it\n📌 Ask for course suggestions\n"
            "📌 Get help with filters\n\nWhat interests you?",
        ),
    },
}


def get_variants(key: Tuple[str, str], catalog: Catalog = RESPONSE_CATALOG) -> Tuple[str, ...]:
    """Templates for a key, or an empty tuple when the key is unknown."""
    category, subtype = key
    return catalog.get(category, {}).get(subtype, ())
