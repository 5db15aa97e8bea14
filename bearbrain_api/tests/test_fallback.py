"""
Tests for the fallback responder.
"""

import pytest

from bearbrain_api.fallback import GENERAL_TIPS, STUDY_TIPS, FallbackResponder
from bearbrain_api.subjects import Subject


class TestFallbackResponder:
    """Tests for FallbackResponder.generate."""

    def test_contains_subject_and_tips_in_order(self):
        """Test the answer names the subject and lists its tips in order."""
        reply = FallbackResponder().generate("Physics", "Explain Newton's second law")

        assert "Physics" in reply
        positions = [reply.index(tip) for tip in STUDY_TIPS[Subject.PHYSICS]]
        assert positions == sorted(positions)
        assert "**1.** Master the fundamental concepts" in reply

    def test_restates_question(self):
        """Test a non-blank question is echoed back."""
        reply = FallbackResponder().generate("Math", "  What is a derivative?  ")
        assert '**Your Question:** "What is a derivative?"' in reply

    def test_blank_question_not_restated(self):
        """Test blank questions skip the restatement section."""
        reply = FallbackResponder().generate("Chemistry", "   ")
        assert "Your Question" not in reply
        assert "Chemistry" in reply

    def test_unknown_subject_uses_general_tips(self):
        """Test unknown subjects still get a named, non-empty answer."""
        reply = FallbackResponder().generate("Astronomy", "How do stars form?")
        assert "Astronomy" in reply
        assert GENERAL_TIPS[0] in reply

    def test_subject_name_is_case_insensitive(self):
        """Test lowercase ids resolve to the subject's display name."""
        reply = FallbackResponder().generate("biology", "")
        assert "## 🧠 Biology Learning Assistant" in reply
        assert STUDY_TIPS[Subject.BIOLOGY][0] in reply

    @pytest.mark.parametrize("subject_name", ["Math", "Biology", "Physics", "Chemistry", "", "General"])
    def test_always_non_empty_and_deterministic(self, subject_name):
        """Test every subject produces the same non-empty text each time."""
        responder = FallbackResponder()
        first = responder.generate(subject_name, "question")
        assert first.strip()
        assert first == responder.generate(subject_name, "question")
        assert "Ready to learn?" in first
