"""
Pydantic input schema for creating pilot projects.

Accepts both snake_case and the camelCase wire names.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .entities import PilotType


class PilotCreate(BaseModel):
    """Caller-supplied fields of a new pilot project."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    type: PilotType
    org_name: str = Field(alias="orgName")
    region: str
    primary_objective: str = Field(alias="primaryObjective")
    majority_logic_desc: str = Field(alias="majorityLogicDesc")
    qi_logic_desc: str = Field(alias="qiLogicDesc")
    owner_email: Optional[str] = Field(default=None, alias="ownerEmail")
