"""
Sovereign Qi - Pilot Project Simulation

Registry of governance pilot projects and the simulation pipeline that
compares "Majority Logic" against "Qi Logic" for each pilot.
"""

__version__ = "0.1.0"
