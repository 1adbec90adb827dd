"""
Sample Generators
=================

This module provides stateful generators for the canonical test waveforms
of discrete-time signal processing:

- Impulse:   1, 0, 0, 0, ...
- Step:      0, ..., 0, 1, 1, 1, ...  (onset after p samples)
- Sine:      sin(2π · f · n / fs)
- Sawtooth:  fract((n / fs) · f), n wrapping at fs
- Square:    0 while fract((n / fs) · f) < 0.5, else 1

Every generator is a lazy, unbounded and non-restartable sequence. A single
call to pull() advances the internal state by exactly one sample. There is
no "exhausted" state, so generators never raise StopIteration when used as
Python iterators.

Filling a buffer is a capability of ANY object exposing pull(), not only of
the classes defined here. fill_buffer() is therefore a free function; the
fill() method on SampleGenerator is a thin convenience wrapper around it.

Example:
    generator = SineGenerator(signal_frequency_hz=2.0, sampling_frequency_hz=8)
    buffer = [0.0] * 8
    fill_buffer(generator, buffer)
"""

import math
from abc import ABC, abstractmethod
from numbers import Integral
from typing import Callable, Dict, MutableSequence, Protocol, TypeVar

import numpy as np

from .exceptions import BoundsError, DomainError


class SupportsPull(Protocol):
    """Anything that produces one sample per call to pull()."""

    def pull(self) -> float:
        ...


BufferType = TypeVar("BufferType", bound=MutableSequence)


def fill_buffer(generator: SupportsPull, buffer: BufferType) -> BufferType:
    """
    Overwrite every position of a buffer with successive generator samples.

    Equivalent to len(buffer) sequential calls to generator.pull(), stored
    in index order. The generator advances by exactly len(buffer) steps.

    Args:
        generator: Any object exposing a single-step pull() method.
        buffer: A mutable sequence (list, numpy array, ...). Its previous
            contents are discarded.

    Returns:
        The same buffer object, for call chaining.
    """
    for index in range(len(buffer)):
        buffer[index] = generator.pull()
    return buffer


def generate_samples(generator: SupportsPull, number_of_samples: int) -> np.ndarray:
    """
    Allocate a float64 buffer of the requested length and fill it.

    Args:
        generator: Any object exposing pull().
        number_of_samples: Length of the buffer (>= 0).

    Returns:
        np.ndarray: The filled buffer.

    Raises:
        BoundsError: If number_of_samples is not a non-negative integer.
    """
    if not isinstance(number_of_samples, Integral) or isinstance(number_of_samples, bool):
        raise BoundsError(
            f"Number of samples must be an integer. "
            f"Received: {number_of_samples!r}"
        )

    if number_of_samples < 0:
        raise BoundsError(
            f"Number of samples must be non-negative. "
            f"Received: {number_of_samples}"
        )

    buffer: np.ndarray = np.zeros(number_of_samples, dtype=np.float64)
    return fill_buffer(generator, buffer)


def _validate_frequencies(signal_frequency_hz: float, sampling_frequency_hz: float) -> None:
    # The recurrences divide by the sampling frequency; NaN or inf would
    # propagate into every sample or break floor() in pull().
    if not math.isfinite(sampling_frequency_hz) or sampling_frequency_hz <= 0:
        raise DomainError(
            f"Sampling frequency must be finite and positive. "
            f"Received: {sampling_frequency_hz} Hz"
        )

    if not math.isfinite(signal_frequency_hz):
        raise DomainError(
            f"Signal frequency must be finite. "
            f"Received: {signal_frequency_hz} Hz"
        )


def _fractional_part(value: float) -> float:
    """Return value - floor(value), always in [0, 1)."""
    return value - math.floor(value)


class SampleGenerator(ABC):
    """
    Abstract base class for sample generators.

    Subclasses implement pull(). The base class adds the iterator protocol
    and the buffer-filling convenience method.
    """

    @abstractmethod
    def pull(self) -> float:
        """Advance by one step and return the sample for that step."""
        pass

    def fill(self, buffer: BufferType) -> BufferType:
        """Fill the buffer from this generator. See fill_buffer()."""
        return fill_buffer(self, buffer)

    def __iter__(self) -> "SampleGenerator":
        return self

    def __next__(self) -> float:
        return self.pull()


class ImpulseGenerator(SampleGenerator):
    """
    Unit impulse (Kronecker delta) generator.

    Emits 1.0 on the first pull and 0.0 on every pull after that.

    Attributes:
        impulse_sent (bool): True once the single 1.0 sample has been emitted.
    """

    def __init__(self) -> None:
        self.impulse_sent: bool = False

    def pull(self) -> float:
        if self.impulse_sent:
            return 0.0

        self.impulse_sent = True
        return 1.0

    def get_position(self) -> int:
        """Return 0 before the impulse fires, 1 afterwards."""
        return 1 if self.impulse_sent else 0


class StepGenerator(SampleGenerator):
    """
    Unit step generator with a configurable onset.

    Emits 0.0 for the first onset_position pulls and 1.0 forever after.
    An onset of 0 yields 1.0 from the very first sample.

    Attributes:
        onset_position (int): Number of leading zero samples.
        remaining_samples (int): Zero samples still to be emitted.
    """

    def __init__(self, onset_position: int = 0) -> None:
        """
        Initialize the step generator.

        Args:
            onset_position: Index of the first 1.0 sample (>= 0).

        Raises:
            DomainError: If onset_position is not a non-negative integer.
        """
        if not isinstance(onset_position, Integral) or isinstance(onset_position, bool):
            raise DomainError(
                f"Step onset must be an integer. "
                f"Received: {onset_position!r}"
            )

        if onset_position < 0:
            raise DomainError(
                f"Step onset must be non-negative. "
                f"Received: {onset_position}"
            )

        self.onset_position: int = int(onset_position)
        self.remaining_samples: int = int(onset_position)

    def pull(self) -> float:
        if self.remaining_samples > 0:
            self.remaining_samples -= 1
            return 0.0

        return 1.0

    def get_position(self) -> int:
        """Return how many samples have been consumed from the countdown."""
        return self.onset_position - self.remaining_samples


class SineGenerator(SampleGenerator):
    """
    Sine wave generator.

    Output at pull n (0-based, counted since construction):
        sample[n] = sin(2π · f · n / fs)

    The sample counter is not wrapped. Precision degrades slowly over very
    long runs.

    Attributes:
        signal_frequency_hz (float): Frequency of the sine wave.
        sampling_frequency_hz (float): Number of samples per second.
        sample_position (int): Number of samples emitted so far.
    """

    def __init__(
        self,
        signal_frequency_hz: float,
        sampling_frequency_hz: float
    ) -> None:
        """
        Initialize the sine generator.

        Args:
            signal_frequency_hz: Frequency of the sine wave in Hertz.
            sampling_frequency_hz: Sample rate in Hertz (> 0).

        Raises:
            DomainError: If the sampling frequency is not finite and positive,
                or the signal frequency is not finite.
        """
        _validate_frequencies(signal_frequency_hz, sampling_frequency_hz)

        self.signal_frequency_hz: float = signal_frequency_hz
        self.sampling_frequency_hz: float = sampling_frequency_hz
        self.sample_position: int = 0

    def pull(self) -> float:
        time_seconds: float = self.sample_position / self.sampling_frequency_hz
        self.sample_position += 1
        return float(np.sin(2.0 * np.pi * self.signal_frequency_hz * time_seconds))

    def get_position(self) -> int:
        """Return the number of samples emitted so far."""
        return self.sample_position


class _WrappingPhaseGenerator(SampleGenerator):
    """
    Shared state for the ramp-based waveforms.

    The sample counter wraps back to 0 once it reaches the sampling
    frequency, so the counter stays bounded. Subclasses shape the ramp
    phase = fract((n / fs) · f) into their output.
    """

    def __init__(
        self,
        signal_frequency_hz: float,
        sampling_frequency_hz: float
    ) -> None:
        _validate_frequencies(signal_frequency_hz, sampling_frequency_hz)

        self.signal_frequency_hz: float = signal_frequency_hz
        self.sampling_frequency_hz: float = sampling_frequency_hz
        self.sample_position: int = 0

    def _advance_phase(self) -> float:
        phase: float = _fractional_part(
            (self.sample_position / self.sampling_frequency_hz)
            * self.signal_frequency_hz
        )

        self.sample_position += 1
        if self.sample_position >= self.sampling_frequency_hz:
            self.sample_position = 0

        return phase

    def get_position(self) -> int:
        """Return the wrapped sample counter (0 <= position < fs)."""
        return self.sample_position


class SawtoothGenerator(_WrappingPhaseGenerator):
    """
    Rising sawtooth generator in the range [0, 1).

    Output at pull n (n counted modulo fs):
        sample[n] = fract((n / fs) · f)
    """

    def pull(self) -> float:
        return self._advance_phase()


class SquareGenerator(_WrappingPhaseGenerator):
    """
    Square wave generator with levels 0.0 and 1.0 and a 50 % duty cycle.

    Output at pull n (n counted modulo fs):
        sample[n] = 0.0 if fract((n / fs) · f) < 0.5 else 1.0
    """

    def pull(self) -> float:
        if self._advance_phase() < 0.5:
            return 0.0
        return 1.0


# ============================================================================
# FACTORY
# ============================================================================

_GENERATOR_FACTORIES: Dict[str, Callable[[float, float, int], SampleGenerator]] = {
    "impulse": lambda f, fs, onset: ImpulseGenerator(),
    "step": lambda f, fs, onset: StepGenerator(onset),
    "sine": lambda f, fs, _: SineGenerator(f, fs),
    "sawtooth": lambda f, fs, _: SawtoothGenerator(f, fs),
    "square": lambda f, fs, _: SquareGenerator(f, fs),
}

AVAILABLE_WAVEFORMS = tuple(_GENERATOR_FACTORIES)


def create_generator(
    waveform: str,
    signal_frequency_hz: float = 1.0,
    sampling_frequency_hz: float = 512.0,
    onset_position: int = 0
) -> SampleGenerator:
    """
    Build a generator from a waveform name.

    Parameters that do not apply to the chosen waveform are ignored
    (frequency and rate for impulse/step, onset for the periodic ones).

    Args:
        waveform: One of AVAILABLE_WAVEFORMS (case-insensitive).
        signal_frequency_hz: Frequency for sine, sawtooth and square.
        sampling_frequency_hz: Sample rate for sine, sawtooth and square.
        onset_position: Onset for the step generator.

    Returns:
        SampleGenerator: A freshly constructed generator.

    Raises:
        DomainError: If the waveform is unknown or a parameter is invalid.
    """
    factory = _GENERATOR_FACTORIES.get(waveform.lower())
    if factory is None:
        raise DomainError(
            f"Unknown waveform '{waveform}'. "
            f"Available: {', '.join(AVAILABLE_WAVEFORMS)}"
        )

    return factory(signal_frequency_hz, sampling_frequency_hz, onset_position)
