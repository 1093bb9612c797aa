"""Deterministic replacement text for risks whose upstream text is missing or boilerplate."""

from clausemap.risks.text_rules import RiskCategory, categorize, is_generic_explanation

_SNIPPET_CONTEXT_CHARS = 100

_EXPLANATIONS: dict[RiskCategory, str] = {
    RiskCategory.TERMINATION: (
        "This clause defines termination conditions and notice periods. Review the "
        "specific terms to understand when and how the contract can be ended, what "
        "notice is required, and whether termination rights are mutual or one-sided."
    ),
    RiskCategory.LIABILITY: (
        "This clause addresses liability limitations or allocations. Such clauses can "
        "significantly impact your legal protection and financial exposure in case of "
        "disputes or damages."
    ),
    RiskCategory.PENALTY: (
        "This clause outlines penalties or liquidated damages. Check the specific "
        "amounts, triggers, and whether they are reasonable and clearly defined."
    ),
    RiskCategory.INDEMNIFICATION: (
        "This indemnity clause may require one party to compensate the other for "
        "losses. Indemnity provisions can be broad and may create unexpected financial "
        "obligations."
    ),
    RiskCategory.WARRANTY: (
        "This warranty clause defines what is guaranteed and what is not. Check the "
        "scope, duration, and any disclaimers that may limit your legal recourse."
    ),
    RiskCategory.CONFIDENTIALITY: (
        "This confidentiality clause governs how sensitive information is protected. "
        "Ensure the terms provide adequate data protection and meet your security "
        "requirements."
    ),
    RiskCategory.GOVERNING_LAW: (
        "This clause determines which jurisdiction's laws apply and where disputes "
        "will be resolved. This may impact legal costs and procedures if disputes arise."
    ),
    RiskCategory.ASSIGNMENT: (
        "This clause addresses assignment or transfer of rights. Check whether "
        "assignments are permitted, require consent, and what restrictions apply."
    ),
    RiskCategory.NOTICE: (
        "This clause sets notice periods and methods. Short notice periods can make it "
        "difficult to respond or exercise your rights in time."
    ),
    RiskCategory.AUTOMATIC_RENEWAL: (
        "This clause includes automatic renewal provisions that could extend the "
        "contract without explicit renewal. Check cancellation rights and renewal terms."
    ),
}

_RECOMMENDATIONS: dict[RiskCategory, tuple[str, ...]] = {
    RiskCategory.TERMINATION: (
        "Request mutual termination rights if currently one-sided",
        "Negotiate longer notice periods (60-90 days minimum)",
        "Add clear conditions for termination (e.g., 'just cause' requirements)",
    ),
    RiskCategory.LIABILITY: (
        "Cap liability amounts to reasonable, agreed limits",
        "Ensure liability terms are mutual and fair to both parties",
        "Consider adding liability insurance requirements",
    ),
    RiskCategory.PENALTY: (
        "Negotiate reasonable penalty amounts that reflect actual damages",
        "Ensure penalty triggers are clearly defined and reasonable",
        "Request opportunity to cure issues before penalties apply",
    ),
    RiskCategory.INDEMNIFICATION: (
        "Narrow the indemnity scope to specific situations and losses",
        "Add exceptions for the other party's negligence or willful misconduct",
        "Cap indemnity amounts or require insurance coverage",
    ),
    RiskCategory.WARRANTY: (
        "Clarify warranty scope, duration, and what is excluded",
        "Ensure warranty disclaimers are reasonable and clearly stated",
        "Request specific warranty language for critical components or services",
    ),
    RiskCategory.CONFIDENTIALITY: (
        "Strengthen data protection and confidentiality language",
        "Add specific data breach notification requirements and timelines",
        "Ensure compliance with applicable privacy and data protection laws",
    ),
    RiskCategory.GOVERNING_LAW: (
        "Negotiate jurisdiction closer to your location if currently unfavorable",
        "Consider arbitration as an alternative dispute resolution method",
        "Ensure you understand the legal and cost implications of the chosen jurisdiction",
    ),
    RiskCategory.ASSIGNMENT: (
        "Request right to assign with reasonable notice to the other party",
        "Negotiate assignment restrictions to be reasonable and specific",
        "Add exceptions for assignment to affiliates or in case of merger/acquisition",
    ),
    RiskCategory.NOTICE: (
        "Request longer notice periods (30-60 days minimum)",
        "Ensure multiple notice methods are accepted (email, registered mail, etc.)",
        "Clarify when notice is considered received and effective",
    ),
    RiskCategory.AUTOMATIC_RENEWAL: (
        "Request opt-in renewal rather than automatic opt-out renewal",
        "Negotiate shorter renewal periods with clear cancellation windows",
        "Add explicit cancellation rights before renewal dates",
    ),
    RiskCategory.GENERAL: (
        "Read the specific language and terms of this clause carefully",
        "Request clarification of any ambiguous or unclear terms",
        "Negotiate modifications to better align with your interests and risk tolerance",
    ),
}

_GENERAL_WITHOUT_CONTEXT = (
    "This clause contains terms that may require careful review. "
    "Check the specific language to understand its implications."
)


def fallback_explanation(title: str, snippet: str = "") -> str:
    """Explanation for ``title``, embedding a snippet excerpt for uncategorised risks."""
    category = categorize(title)
    if category is not RiskCategory.GENERAL:
        return _EXPLANATIONS[category]

    excerpt = snippet[:_SNIPPET_CONTEXT_CHARS] if snippet else ""
    if excerpt:
        explanation = (
            f"This clause ({title}) contains terms that may require careful review. "
            f'The text mentions: "{excerpt}..."'
        )
    else:
        explanation = (
            f"This clause ({title}) contains terms that may require careful review. "
            "Check the specific language to understand its implications."
        )
    # Title and snippet are upstream text and may themselves carry boilerplate.
    if is_generic_explanation(explanation):
        return _GENERAL_WITHOUT_CONTEXT
    return explanation


def fallback_recommendations(title: str) -> list[str]:
    return list(_RECOMMENDATIONS[categorize(title)])
