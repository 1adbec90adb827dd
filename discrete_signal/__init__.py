"""
Discrete Signal Toolkit
=======================

This package provides a minimal digital-signal-processing toolkit:
canonical waveform generators that fill fixed-size sample buffers, and
a finite discrete Signal type supporting addition, scaling, delay and
direct-form convolution.

Package Structure:
- signals/: Sample generators, the Signal container and its errors
- simulation/: Demonstration pipeline (carrier convolved with a delayed impulse)
- visualization/: Plotting tools
- config/: Logging setup for the entry points
"""

__version__ = "1.0.0"
