"""
Simulation Module
=================

This module provides the orchestration layer that wires generators into
Signals and runs the convolution demonstration.
"""

from .simulation_runner import SimulationRunner, SimulationConfiguration, SimulationResults

__all__ = ["SimulationRunner", "SimulationConfiguration", "SimulationResults"]
