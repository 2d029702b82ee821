"""
Council advice for pilot projects

- Advice request/response schemas
- Static advice generator
- Decision log (governance trail)
"""

from .schemas import AdviceRequest, AdviceStatus, CouncilAdvice
from .council import generate_council_advice, generate_qi_policy_summary
from .decisions import CouncilDecision, CouncilDecisionLog

__all__ = [
    "AdviceRequest",
    "AdviceStatus",
    "CouncilAdvice",
    "generate_council_advice",
    "generate_qi_policy_summary",
    "CouncilDecision",
    "CouncilDecisionLog"
]
