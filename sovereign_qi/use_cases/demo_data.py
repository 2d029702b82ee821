"""
Demo seed set loaded into a fresh workspace in demo mode.
"""

from ..core.entities import PilotProject, PilotStatus, PilotType, utc_now


def demo_pilots() -> list[PilotProject]:
    """The two demo pilots, newest first."""
    now = utc_now()
    return [
        PilotProject(
            id="pilot-1",
            name="Neo-Tokyo Transit Grid",
            type=PilotType.CITY,
            org_name="Tokyo Metro Govt",
            region="APAC",
            primary_objective="Reduce commuter stress & accident liability",
            majority_logic_desc=(
                "Efficiency first. optimize for max throughput regardless of "
                "passenger density discomfort."
            ),
            qi_logic_desc=(
                "Dignity first. Optimize for personal space and flow, treating "
                "passenger stress as a system cost."
            ),
            status=PilotStatus.CONFIGURED,
            created_at=now
        ),
        PilotProject(
            id="pilot-2",
            name="MediCare AI Triage",
            type=PilotType.HEALTHCARE,
            org_name="Global Health Corp",
            region="NA",
            primary_objective="Minimize clinician burnout",
            majority_logic_desc=(
                "Throughput metrics. Doctors penalized for spending >15m per patient."
            ),
            qi_logic_desc=(
                "Relational metrics. System optimizes for 'understanding complete' "
                "signal from patient."
            ),
            status=PilotStatus.DRAFT,
            created_at=now
        ),
    ]
