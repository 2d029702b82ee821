"""
Pydantic Schemas for Council Advice

Input and output contract of the advice service. Callers treat the
advice as an opaque structured value to display.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AdviceStatus(str, Enum):
    """Council verdict on a pilot."""
    APPROVE = "APPROVE"
    REVISE = "REVISE"
    BLOCK = "BLOCK"


class AdviceRequest(BaseModel):
    """Narrative fields the council reviews."""
    model_config = ConfigDict(populate_by_name=True)

    primary_objective: str = Field(alias="primaryObjective")
    majority_logic_desc: str = Field(alias="majorityLogicDesc")
    qi_logic_desc: str = Field(alias="qiLogicDesc")
    harms: Optional[str] = None
    community_voices: Optional[str] = Field(default=None, alias="communityVoices")


class CouncilAdvice(BaseModel):
    """Structured governance advice for a pilot."""
    model_config = ConfigDict(populate_by_name=True)

    qi_policy_summary: str = Field(
        alias="qiPolicySummary",
        description="Recommended Qi policy in a few sentences"
    )
    required_changes: List[str] = Field(
        alias="requiredChanges",
        default_factory=list,
        description="Changes needed before approval"
    )
    risk_flags: List[str] = Field(
        alias="riskFlags",
        default_factory=list
    )
    curb_cut_benefits: List[str] = Field(
        alias="curbCutBenefits",
        default_factory=list,
        description="Benefits to everyone from designing for those most at risk"
    )
    status: AdviceStatus
