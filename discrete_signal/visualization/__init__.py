"""
Visualization Module
====================

This module provides plotting functions for inspecting Signals and
simulation results.
"""

from .signal_plotter import SignalPlotter

__all__ = ["SignalPlotter"]
