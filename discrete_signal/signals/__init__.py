"""
Signals Module
==============

This module contains the sample generators that fill raw buffers and the
Signal container that wraps a buffer and provides signal arithmetic.
"""

from .exceptions import SignalError, DomainError, BoundsError
from .sample_generators import (
    AVAILABLE_WAVEFORMS,
    SampleGenerator,
    SupportsPull,
    ImpulseGenerator,
    StepGenerator,
    SineGenerator,
    SawtoothGenerator,
    SquareGenerator,
    create_generator,
    fill_buffer,
    generate_samples
)
from .signal_container import Signal, SupportsSignalArithmetic

__all__ = [
    "AVAILABLE_WAVEFORMS",
    "SignalError",
    "DomainError",
    "BoundsError",
    "SampleGenerator",
    "SupportsPull",
    "ImpulseGenerator",
    "StepGenerator",
    "SineGenerator",
    "SawtoothGenerator",
    "SquareGenerator",
    "create_generator",
    "fill_buffer",
    "generate_samples",
    "Signal",
    "SupportsSignalArithmetic"
]
