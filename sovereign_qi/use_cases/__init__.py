"""
Use cases exposed to callers of the pilot simulation system.
"""

from .pilot_workspace import PilotWorkspace, build_workspace
from .demo_data import demo_pilots

__all__ = [
    "PilotWorkspace",
    "build_workspace",
    "demo_pilots"
]
