import pytest

from clausemap.risks.fallback_text import fallback_explanation, fallback_recommendations
from clausemap.risks.text_rules import is_generic_explanation, is_generic_recommendation

_TITLES = [
    "Termination",
    "Liability cap",
    "Penalty fees",
    "Indemnification",
    "Warranty",
    "Confidentiality",
    "Jurisdiction",
    "Assignment",
    "Notice",
    "Automatic renewal",
    "Payment schedule",
]


class TestFallbackExplanation:
    @pytest.mark.parametrize("title", _TITLES)
    def test_is_never_generic(self, title: str) -> None:
        assert is_generic_explanation(fallback_explanation(title, "some snippet")) is False

    def test_is_deterministic(self) -> None:
        assert fallback_explanation("Termination") == fallback_explanation("Termination")

    def test_category_text_ignores_snippet(self) -> None:
        assert fallback_explanation("Termination", "a") == fallback_explanation("Termination", "b")

    def test_general_embeds_snippet_excerpt(self) -> None:
        snippet = "x" * 150
        explanation = fallback_explanation("Payment schedule", snippet)
        assert "Payment schedule" in explanation
        assert f'"{"x" * 100}..."' in explanation
        assert "x" * 101 not in explanation

    def test_general_without_snippet(self) -> None:
        explanation = fallback_explanation("Payment schedule")
        assert "The text mentions" not in explanation
        assert "Payment schedule" in explanation

    def test_general_drops_boilerplate_context(self) -> None:
        explanation = fallback_explanation("Review this clause", "seek legal advice")
        assert is_generic_explanation(explanation) is False
        assert "Review this clause" not in explanation


class TestFallbackRecommendations:
    @pytest.mark.parametrize("title", _TITLES)
    def test_three_specific_bullets(self, title: str) -> None:
        recommendations = fallback_recommendations(title)
        assert len(recommendations) == 3
        assert not any(is_generic_recommendation(r) for r in recommendations)

    def test_returns_fresh_list(self) -> None:
        first = fallback_recommendations("Notice")
        first.append("mutated")
        assert "mutated" not in fallback_recommendations("Notice")
