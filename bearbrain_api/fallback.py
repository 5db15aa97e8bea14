"""
Fallback Responder

Builds a templated study-help answer without calling any external service.
This is the last step of the provider chain, so it must always return text.
"""

from .subjects import Subject

GENERAL_INTRO = "Science helps us understand the natural world through observation and experimentation."

GENERAL_TIPS = (
    "Connect new concepts to real-world examples",
    "Use diagrams and flowcharts to map processes",
    "Practice explaining concepts in your own words",
    "Make connections between different topics",
    "Keep a science vocabulary journal",
)

SUBJECT_INTROS = {
    Subject.MATH: "Mathematics is the foundation of logical thinking and problem-solving.",
    Subject.BIOLOGY: "Biology explores living things, from single cells to entire ecosystems.",
    Subject.PHYSICS: "Physics explains how matter and energy interact in our universe.",
    Subject.CHEMISTRY: "Chemistry studies the composition, structure, and behavior of matter.",
}

STUDY_TIPS = {
    Subject.MATH: (
        "Break complex problems into smaller, manageable steps",
        "Practice regularly with varied problem types",
        "Draw diagrams or graphs to visualize concepts",
        "Check your work by substituting answers back into original equations",
        "Understand the \"why\" behind formulas, not just memorize them",
    ),
    Subject.BIOLOGY: (
        "Connect new concepts to real-world examples",
        "Use diagrams and flowcharts to map biological processes",
        "Learn the vocabulary by breaking words into roots and prefixes",
        "Compare related structures, like mitosis and meiosis, side by side",
        "Practice explaining each process in your own words",
    ),
    Subject.PHYSICS: (
        "Master the fundamental concepts before moving to complex problems",
        "Practice unit conversions and dimensional analysis",
        "Draw free-body diagrams for mechanics problems",
        "Understand the physical meaning behind equations",
        "Work through problems step-by-step showing all calculations",
    ),
    Subject.CHEMISTRY: (
        "Memorize common elements and their symbols",
        "Practice balancing chemical equations regularly",
        "Understand periodic trends and patterns",
        "Use molecular models to visualize structures",
        "Connect chemical properties to real-world applications",
    ),
}

HELP_TIPS = (
    "**Be specific** about what you're struggling with",
    "**Include details** like equations or formulas you're working with",
    "**Mention your level** (high school, college, etc.)",
    "**Ask follow-up questions** for deeper understanding",
)


class FallbackResponder:
    """Deterministic, dependency-free answer generator."""

    def generate(self, subject_name: str, question: str) -> str:
        """
        Generate a structured fallback answer.

        Args:
            subject_name: Name of the subject the student selected; unknown
                names get the general science intro and tips
            question: The student's question, restated when non-blank

        Returns:
            Markdown text, never empty
        """
        subject = Subject.from_name(subject_name)
        name = subject.display_name if subject else (subject_name or "").strip() or "General"
        intro = SUBJECT_INTROS.get(subject, GENERAL_INTRO)
        tips = STUDY_TIPS.get(subject, GENERAL_TIPS)

        parts = [f"## 🧠 {name} Learning Assistant", intro]

        if question and question.strip():
            parts.append(f"**Your Question:** \"{question.strip()}\"")
            parts.append(
                f"I'd be happy to help you with this {name.lower()} topic! "
                "Here's how I can assist:"
            )

        parts.append(f"## 📚 Effective Study Strategies for {name}")
        parts.extend(f"**{i}.** {tip}" for i, tip in enumerate(tips, start=1))

        parts.append("## 💡 How to Get the Best Help")
        parts.extend(f"• {tip}" for tip in HELP_TIPS)

        parts.append("## 🎯 Practice Suggestion")
        parts.append(
            f"Try explaining a {name.lower()} concept you recently learned to someone else "
            "(or even to yourself out loud). This helps identify areas where your "
            "understanding might need strengthening."
        )

        parts.append("---")
        parts.append(
            f"**Ready to learn?** Ask me any specific {name.lower()} questions, "
            "and I'll provide detailed, step-by-step explanations! 🚀"
        )

        return "\n\n".join(parts)
