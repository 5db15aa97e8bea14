"""
Subject Policy Module

This module decides whether a question fits the subject the student selected.
It is a light guardrail against obviously off-topic input, so every rule errs
on the side of admitting the question.
"""

import re
from typing import Optional

from .gateway_types import ClassificationResult
from .subjects import Subject

# Terms that frame a question as schoolwork
ACADEMIC_FRAMING_TERMS = (
    "what", "how", "why", "explain", "define", "calculate", "solve",
    "find", "determine", "analyze", "compare", "describe",
)

_NON_ALNUM_RE = re.compile(r"[^\w]|_")
_DIGIT_RE = re.compile(r"\d")


def tokenize(text: str) -> list[str]:
    """Split lowercased text on whitespace and strip each token to letters and digits."""
    tokens = [_NON_ALNUM_RE.sub("", token) for token in text.lower().split()]
    return [token for token in tokens if token]


def _build_redirect_message(subject: Subject) -> str:
    lines = [
        f"I'm currently set to help with {subject.display_name} questions. "
        "Your question seems to be about a different subject.",
        "",
        "Please switch to the appropriate subject tab above:",
    ]
    for other in Subject:
        lines.append(f"• {other.icon} {other.display_name} - {other.description}")
    lines.append("")
    lines.append(
        "Then ask your question in the correct subject area, "
        "and I'll provide a detailed explanation!"
    )
    return "\n".join(lines)


class SubjectPolicy:
    """
    Policy that classifies questions against a declared subject.

    A question is admissible when any of these holds:
    - the text contains a subject keyword (also with the keyword's spaces removed)
    - a word of the text is part of a keyword, or a keyword is part of a word
    - one of the subject's patterns (symbols, stems, formulas) matches
    - the text is framed as a question and has a digit or some length to it

    Unknown subjects are always admissible.
    """

    def __init__(self):
        """Pre-compute keyword variants and redirect messages for every subject."""
        self._keywords: dict[Subject, tuple[str, ...]] = {}
        self._compact_keywords: dict[Subject, tuple[str, ...]] = {}
        self._redirects: dict[Subject, str] = {}

        for subject in Subject:
            keywords = tuple(sorted(subject.keywords))
            self._keywords[subject] = keywords
            self._compact_keywords[subject] = tuple(k.replace(" ", "") for k in keywords)
            self._redirects[subject] = _build_redirect_message(subject)

    def classify(self, subject: Optional[Subject], question: str) -> ClassificationResult:
        """
        Classify a question for the given subject.

        Returns an admissible result with an empty message, or an inadmissible
        result carrying the subject's redirect message.
        """
        if not question or not question.strip():
            return ClassificationResult(admissible=True)

        if subject is None:
            return ClassificationResult(admissible=True)

        if self.is_on_topic(subject, question):
            return ClassificationResult(admissible=True)

        return ClassificationResult(
            admissible=False,
            redirect_message=self.get_redirect_message(subject),
        )

    def is_on_topic(self, subject: Subject, question: str) -> bool:
        text = question.lower()
        tokens = tokenize(text)

        return (
            self._has_keyword(subject, text)
            or self._has_partial_keyword(subject, tokens)
            or self._has_pattern(subject, question)
            or self._is_academic_question(text)
        )

    def get_redirect_message(self, subject: Subject) -> str:
        """Get the fixed redirect message for off-topic questions."""
        return self._redirects[subject]

    def _has_keyword(self, subject: Subject, text: str) -> bool:
        return any(
            keyword in text or compact in text
            for keyword, compact in zip(self._keywords[subject], self._compact_keywords[subject])
        )

    def _has_partial_keyword(self, subject: Subject, tokens: list[str]) -> bool:
        for token in tokens:
            for keyword in self._compact_keywords[subject]:
                if token in keyword or keyword in token:
                    return True
        return False

    def _has_pattern(self, subject: Subject, question: str) -> bool:
        return any(pattern.search(question) for pattern in subject.patterns)

    def _is_academic_question(self, text: str) -> bool:
        framed = any(term in text for term in ACADEMIC_FRAMING_TERMS)
        return framed and (bool(_DIGIT_RE.search(text)) or len(text) > 10)
