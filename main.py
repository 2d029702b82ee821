#!/usr/bin/env python3
"""
Sovereign Qi - Pilot Simulation Demo

This script walks through the pilot lifecycle end to end:
1. Create a pilot project (DRAFT)
2. Run its simulation (Majority Logic vs Qi Logic)
3. Print the comparison table
4. Request council advice for the pilot
"""

import asyncio

from sovereign_qi.config import LoggingConfig, get_settings
from sovereign_qi.use_cases import build_workspace


async def run_simulation_demo(workspace):
    """Create a pilot and simulate it."""
    print("=" * 60)
    print("PILOT SIMULATION DEMO")
    print("=" * 60)
    print()

    pilot = workspace.create_pilot({
        "name": "Neo-Tokyo Transit Grid",
        "type": "CITY",
        "orgName": "Tokyo Metro Govt",
        "region": "APAC",
        "primaryObjective": "Reduce commuter stress & accident liability",
        "majorityLogicDesc": "Efficiency first. Optimize for max throughput.",
        "qiLogicDesc": "Dignity first. Treat passenger stress as a system cost.",
    })

    print(f"Created pilot {pilot.id}: {pilot.name}")
    print(f"  - Status: {pilot.status.value}")
    print()

    print(f"Running simulation ({workspace.engine.delay_seconds:.1f}s)...")
    result = await workspace.run_simulation(pilot.id)
    print("        Done.")
    print()

    print(f"{'Metric':<20} {result.scenario_a.label:<16} {result.scenario_b.label:<16} {'Δ (%)':<10}")
    print("-" * 60)

    metrics = [
        ("Innovation index", result.scenario_a.innovation_index, result.scenario_b.innovation_index),
        ("Burnout index", result.scenario_a.burnout_index, result.scenario_b.burnout_index),
        ("Liability index", result.scenario_a.liability_index, result.scenario_b.liability_index),
    ]

    for name, majority, qi in metrics:
        if majority != 0:
            delta = (qi - majority) / majority * 100
        else:
            delta = 0
        print(f"{name:<20} {majority:<16.1f} {qi:<16.1f} {delta:+.1f}%")
    print()

    latest = workspace.list_pilots()[0]
    print(f"Pilot {latest.id} is now {latest.status.value}")
    print()

    return pilot


async def run_advice_demo(workspace, pilot):
    """Ask the council about the simulated pilot."""
    print("=" * 60)
    print("COUNCIL ADVICE")
    print("=" * 60)
    print()

    decision = await workspace.request_advice(pilot.id)
    advice = decision.advice

    print(f"Status: {advice.status.value}")
    print()
    print(advice.qi_policy_summary)
    print()
    for title, items in (
        ("Required changes", advice.required_changes),
        ("Risk flags", advice.risk_flags),
        ("Curb-cut benefits", advice.curb_cut_benefits),
    ):
        print(f"{title}:")
        for item in items:
            print(f"  - {item}")
        print()


async def run_demo():
    settings = get_settings()
    LoggingConfig.configure(settings)
    logger = LoggingConfig.get_logger("sovereign_qi.demo")

    workspace = build_workspace(settings)
    workspace.subscribe(
        lambda: logger.info("Store changed: %d pilots", len(workspace.list_pilots()))
    )

    pilot = await run_simulation_demo(workspace)
    await run_advice_demo(workspace, pilot)


def main():
    """Run the demonstration."""
    print()
    print("+" + "=" * 58 + "+")
    print("|            SOVEREIGN QI PILOT DEMONSTRATION              |")
    print("+" + "=" * 58 + "+")
    print()

    asyncio.run(run_demo())

    print("=" * 60)
    print("DEMONSTRATION COMPLETE")
    print("=" * 60)
    print()


if __name__ == "__main__":
    main()
