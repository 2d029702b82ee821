"""
Council Advice Generator

Static advice text; the content does not depend on the request.
"""

from .schemas import AdviceRequest, AdviceStatus, CouncilAdvice


QI_POLICY_SUMMARY = (
    "For this pilot, Sovereign Qi recommends centering dignity and accessibility as first-class constraints. "
    "Shift from majority-rule decision making to policies that explicitly protect those most at risk, "
    "using synthetic personas and zero-knowledge access to avoid surveillance while still improving outcomes."
)

REQUIRED_CHANGES = (
    "Make accessibility and psychological safety explicit success metrics alongside efficiency.",
    "Remove any data collection that is not strictly necessary for the simulation objective.",
    "Document how queer, disabled, and neurodivergent stakeholders were included in defining Qi Logic.",
)

RISK_FLAGS = (
    "Potential over-reliance on monitoring language that could slip back into surveillance.",
    "Insufficient clarity on how dissenting voices will be protected in the governance process.",
)

CURB_CUT_BENEFITS = (
    "Design for queer and neurodivergent safety improves clarity and predictability for everyone.",
    "Anti-harassment detection tuned on anti-trans dog-whistles also catches subtle school and workplace bullying.",
    "Healthcare bias checks built for trans patients improve care pathways for all edge-case diagnostics.",
)


async def generate_qi_policy_summary(request: AdviceRequest) -> str:
    return QI_POLICY_SUMMARY


async def generate_council_advice(request: AdviceRequest) -> CouncilAdvice:
    """Build the council's advice for a pilot's two policies."""
    summary = await generate_qi_policy_summary(request)

    return CouncilAdvice(
        qi_policy_summary=summary,
        required_changes=list(REQUIRED_CHANGES),
        risk_flags=list(RISK_FLAGS),
        curb_cut_benefits=list(CURB_CUT_BENEFITS),
        status=AdviceStatus.REVISE
    )
