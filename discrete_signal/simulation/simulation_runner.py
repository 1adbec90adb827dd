"""
Simulation Runner
=================

This module provides the orchestration class that wires generators into
Signals and composes them, demonstrating how an impulse response shifts a
carrier in time.

The SimulationRunner class handles:
1. Carrier generation (any waveform from the generator family)
2. Impulse response generation
3. Delaying the impulse response
4. Convolving the carrier with the delayed impulse response
5. Results aggregation

Signal flow:
    [Carrier Generator] ──► carrier ──────────────┐
                                                  ├──► convolve ──► scale ──► output
    [Impulse Generator] ──► impulse ──► delay(d) ─┘

Because the impulse response is a unit impulse moved by d samples, the
output is the carrier shifted right by d samples (plus a tail of zeros).
"""

import logging
import math
from dataclasses import dataclass
from numbers import Integral
from typing import Any, Dict

import numpy as np

from ..signals.sample_generators import (
    AVAILABLE_WAVEFORMS,
    ImpulseGenerator,
    create_generator,
    generate_samples
)
from ..signals.signal_container import Signal

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfiguration:
    """
    Configuration parameters for a convolution demonstration run.

    Defaults reproduce the classic scope demo: one period of a 1 Hz sine
    sampled at 80 Hz, convolved with an impulse delayed by 10 samples.

    Attributes:
        waveform: Carrier waveform name (see AVAILABLE_WAVEFORMS).
        signal_frequency_hz: Carrier frequency in Hz (periodic waveforms).
        sampling_frequency_hz: Sample rate in Hz.
        number_of_samples: Carrier length in samples.
        impulse_response_length: Length of the impulse response buffer.
        impulse_delay_samples: Delay applied to the impulse response.
        step_onset_position: Onset for the step waveform.
        output_gain: Scalar applied to the convolution output.
    """
    # Carrier parameters
    waveform: str = "sine"
    signal_frequency_hz: float = 1.0
    sampling_frequency_hz: float = 80.0
    number_of_samples: int = 80
    step_onset_position: int = 0

    # Impulse response parameters
    impulse_response_length: int = 30
    impulse_delay_samples: int = 10

    # Output parameters
    output_gain: float = 1.0

    def __post_init__(self) -> None:
        """Normalize and validate parameters after initialization."""
        self.waveform = self.waveform.lower()
        self._validate()

    def _validate(self) -> None:
        """Validate configuration parameters."""
        if self.waveform not in AVAILABLE_WAVEFORMS:
            raise ValueError(
                f"Unknown waveform '{self.waveform}'. "
                f"Available: {', '.join(AVAILABLE_WAVEFORMS)}"
            )

        if not math.isfinite(self.sampling_frequency_hz) or self.sampling_frequency_hz <= 0:
            raise ValueError(
                f"Sampling frequency must be finite and positive. "
                f"Received: {self.sampling_frequency_hz} Hz"
            )

        if not math.isfinite(self.signal_frequency_hz):
            raise ValueError(
                f"Signal frequency must be finite. "
                f"Received: {self.signal_frequency_hz} Hz"
            )

        for name in ("number_of_samples", "impulse_response_length",
                     "impulse_delay_samples", "step_onset_position"):
            value = getattr(self, name)
            if not isinstance(value, Integral) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer. Received: {value!r}")

        if self.number_of_samples < 1:
            raise ValueError(
                f"Number of samples must be at least 1. "
                f"Received: {self.number_of_samples}"
            )

        if self.impulse_response_length < 1:
            raise ValueError(
                f"Impulse response length must be at least 1. "
                f"Received: {self.impulse_response_length}"
            )

        if not 0 <= self.impulse_delay_samples <= self.impulse_response_length:
            raise ValueError(
                f"Impulse delay must be between 0 and the impulse response "
                f"length ({self.impulse_response_length}). "
                f"Received: {self.impulse_delay_samples}"
            )

        if self.step_onset_position < 0:
            raise ValueError(
                f"Step onset must be non-negative. "
                f"Received: {self.step_onset_position}"
            )

        # A delay equal to the impulse length pushes the impulse out entirely
        if self.impulse_delay_samples == self.impulse_response_length:
            logger.warning(
                "Impulse delay equals the impulse response length; "
                "the output will be all zeros."
            )

        if (self.waveform in ("sine", "sawtooth", "square")
                and self.signal_frequency_hz >= self.sampling_frequency_hz / 2.0):
            logger.warning(
                f"Signal frequency ({self.signal_frequency_hz} Hz) is at or above "
                f"the Nyquist frequency ({self.sampling_frequency_hz / 2.0} Hz). "
                f"The carrier will alias."
            )

    def get_summary_dict(self) -> Dict[str, Any]:
        """Return a dictionary summary of the configuration."""
        return {
            "waveform": self.waveform,
            "signal_frequency_hz": self.signal_frequency_hz,
            "sampling_frequency_hz": self.sampling_frequency_hz,
            "number_of_samples": self.number_of_samples,
            "step_onset_position": self.step_onset_position,
            "impulse_response_length": self.impulse_response_length,
            "impulse_delay_samples": self.impulse_delay_samples,
            "output_gain": self.output_gain
        }


@dataclass
class SimulationResults:
    """
    Container for all signals produced by a run.

    Attributes:
        configuration: The SimulationConfiguration used for this run.
        carrier_signal: The generated carrier.
        impulse_response: The undelayed impulse response.
        delayed_impulse_response: The impulse response after delay().
        output_signal: Carrier convolved with the delayed impulse response,
            scaled by the output gain.
    """
    configuration: SimulationConfiguration
    carrier_signal: Signal
    impulse_response: Signal
    delayed_impulse_response: Signal
    output_signal: Signal

    def get_first_nonzero_output_index(self) -> int:
        """Return the index of the first non-zero output sample, or -1."""
        nonzero_indices: np.ndarray = np.flatnonzero(self.output_signal.as_array())
        if nonzero_indices.size == 0:
            return -1
        return int(nonzero_indices[0])

    def get_summary_dict(self) -> Dict[str, Any]:
        """
        Return the key figures of the run as a dictionary.

        Returns:
            Dict with signal lengths, peak magnitudes and the first
            non-zero output index.
        """
        output_array: np.ndarray = self.output_signal.as_array()
        carrier_array: np.ndarray = self.carrier_signal.as_array()

        return {
            "carrier_length": len(self.carrier_signal),
            "impulse_response_length": len(self.delayed_impulse_response),
            "output_length": len(self.output_signal),
            "carrier_peak": float(np.max(np.abs(carrier_array))) if carrier_array.size else 0.0,
            "output_peak": float(np.max(np.abs(output_array))) if output_array.size else 0.0,
            "first_nonzero_output_index": self.get_first_nonzero_output_index()
        }

    def print_summary(self) -> None:
        """Print a formatted summary of the run."""
        summary: Dict[str, Any] = self.get_summary_dict()

        print("\n" + "=" * 70)
        print("SIMULATION RESULTS SUMMARY")
        print("=" * 70)

        print("\n--- Configuration ---")
        print(f"  Waveform:                {self.configuration.waveform}")
        print(f"  Signal Frequency:        {self.configuration.signal_frequency_hz} Hz")
        print(f"  Sampling Frequency:      {self.configuration.sampling_frequency_hz} Hz")
        print(f"  Impulse Delay:           {self.configuration.impulse_delay_samples} samples")
        print(f"  Output Gain:             {self.configuration.output_gain}")

        print("\n--- Signals ---")
        print(f"  Carrier Length:          {summary['carrier_length']}")
        print(f"  Impulse Response Length: {summary['impulse_response_length']}")
        print(f"  Output Length:           {summary['output_length']}")
        print(f"  Carrier Peak:            {summary['carrier_peak']:.4f}")
        print(f"  Output Peak:             {summary['output_peak']:.4f}")
        print(f"  First Non-Zero Output:   {summary['first_nonzero_output_index']}")

        print("\n" + "=" * 70)


class SimulationRunner:
    """
    Orchestrates one convolution demonstration run.

    Usage:
        config = SimulationConfiguration(waveform="square", impulse_delay_samples=5)
        runner = SimulationRunner(config)
        results = runner.run()
        results.print_summary()

    Attributes:
        configuration: The SimulationConfiguration for this runner.
    """

    def __init__(self, configuration: SimulationConfiguration) -> None:
        self.configuration: SimulationConfiguration = configuration

    def generate_carrier(self) -> Signal:
        """Build a fresh carrier generator and wrap one buffer in a Signal."""
        generator = create_generator(
            self.configuration.waveform,
            signal_frequency_hz=self.configuration.signal_frequency_hz,
            sampling_frequency_hz=self.configuration.sampling_frequency_hz,
            onset_position=self.configuration.step_onset_position
        )
        buffer: np.ndarray = generate_samples(generator, self.configuration.number_of_samples)
        return Signal.from_sequence(buffer.tolist())

    def generate_impulse_response(self) -> Signal:
        """Return a unit impulse of the configured length."""
        buffer: np.ndarray = generate_samples(
            ImpulseGenerator(), self.configuration.impulse_response_length
        )
        return Signal.from_sequence(buffer.tolist())

    def run(self, verbose: bool = False) -> SimulationResults:
        """
        Execute the complete pipeline.

        Args:
            verbose: If True, print progress messages and the summary.

        Returns:
            SimulationResults: All intermediate and final signals.
        """
        if verbose:
            print("\nGenerating carrier and impulse response...")

        carrier_signal: Signal = self.generate_carrier()
        impulse_response: Signal = self.generate_impulse_response()
        logger.debug(
            f"Generated {len(carrier_signal)} carrier samples "
            f"({self.configuration.waveform}) and {len(impulse_response)} impulse samples"
        )

        # ===== DELAY =====
        delayed_impulse_response: Signal = impulse_response.delay(
            self.configuration.impulse_delay_samples
        )

        # ===== CONVOLVE =====
        if verbose:
            print(
                f"Convolving {len(carrier_signal)} x {len(delayed_impulse_response)} "
                f"samples (direct form)..."
            )

        output_signal: Signal = carrier_signal.convolve(delayed_impulse_response)
        output_signal = output_signal.scale(self.configuration.output_gain)
        logger.debug(f"Convolution produced {len(output_signal)} samples")

        results = SimulationResults(
            configuration=self.configuration,
            carrier_signal=carrier_signal,
            impulse_response=impulse_response,
            delayed_impulse_response=delayed_impulse_response,
            output_signal=output_signal
        )

        if verbose:
            results.print_summary()

        return results
