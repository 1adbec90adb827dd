"""
Signal Container
================

This module provides the immutable Signal type: a finite, ordered sequence
of samples where index 0 is time 0.

Signal arithmetic:
    scale(a)       y[n] = a · x[n]
    delay(d)       y[n] = 0 for n < d, x[n - d] otherwise (length preserved)
    add(other)     y[n] = x[n] + h[n], shorter operand zero-extended
    convolve(h)    y[n] = Σ_k x[k] · h[n - k], length = len(x) + len(h) - 1

Every operation returns a NEW Signal. Neither the receiver nor the operand
is ever modified, and the result never shares its backing storage with
the inputs.

Convolution is evaluated in direct form (a double sum over all sample
pairs), O(N · M).

The sample type is generic. Any type supporting + and * works (int, float,
complex, Fraction, Decimal, numpy scalars). The additive identity is
explicit: each Signal carries a `zero` value, inferred from the first
sample's type when not given.
"""

import logging
import math
from numbers import Integral
from typing import Any, Generic, Iterable, Iterator, Optional, Protocol, Tuple, TypeVar, Union, overload

import numpy as np

from .exceptions import BoundsError, DomainError

logger = logging.getLogger(__name__)


class SupportsSignalArithmetic(Protocol):
    """Numeric capability required from a sample type: + and *."""

    def __add__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...


T = TypeVar("T", bound=SupportsSignalArithmetic)


def _infer_zero(samples: Tuple[Any, ...]) -> Any:
    if not samples:
        return 0.0

    sample_type = type(samples[0])
    try:
        return sample_type()
    except TypeError as error:
        raise DomainError(
            f"Cannot infer a zero value for samples of type "
            f"{sample_type.__name__}. Pass zero= explicitly."
        ) from error


class Signal(Generic[T]):
    """
    Immutable, finite discrete-time signal.

    Attributes:
        samples (Tuple[T, ...]): The ordered samples (read-only).
        zero (T): Additive identity used for padding and accumulation.
    """

    __slots__ = ("_samples", "_zero")

    def __init__(self, samples: Iterable[T], zero: Optional[T] = None) -> None:
        """
        Initialize the signal.

        Args:
            samples: Any finite iterable of samples, taken verbatim in order.
            zero: Additive identity of the sample type. If None, it is
                inferred as type(samples[0])(), or 0.0 for an empty signal.

        Raises:
            DomainError: If zero is None and cannot be inferred.
        """
        self._samples: Tuple[T, ...] = tuple(samples)
        self._zero: T = _infer_zero(self._samples) if zero is None else zero

    @classmethod
    def from_sequence(cls, data: Iterable[T], zero: Optional[T] = None) -> "Signal[T]":
        """Wrap a finite sequence (list, tuple, numpy buffer, ...) in a Signal."""
        return cls(data, zero=zero)

    # ===== ACCESSORS =====

    @property
    def samples(self) -> Tuple[T, ...]:
        """Return the samples as a read-only tuple."""
        return self._samples

    @property
    def zero(self) -> T:
        """Return the additive identity used by this signal."""
        return self._zero

    def get_number_of_samples(self) -> int:
        """Return the number of samples in the signal."""
        return len(self._samples)

    def as_array(self, dtype: Any = float) -> np.ndarray:
        """Return a fresh numpy copy of the samples, e.g. for plotting."""
        return np.array(self._samples, dtype=dtype)

    def get_index_axis(self) -> np.ndarray:
        """Return the sample indices 0 .. N-1 as an x axis."""
        return np.arange(len(self._samples))

    def get_time_axis(self, sampling_frequency_hz: float) -> np.ndarray:
        """
        Return the time instant (in seconds) of each sample.

        Raises:
            DomainError: If the sampling frequency is not finite and positive.
        """
        if not math.isfinite(sampling_frequency_hz) or sampling_frequency_hz <= 0:
            raise DomainError(
                f"Sampling frequency must be finite and positive. "
                f"Received: {sampling_frequency_hz} Hz"
            )
        return np.arange(len(self._samples)) / sampling_frequency_hz

    # ===== ARITHMETIC =====

    def scale(self, scalar: Any) -> "Signal[T]":
        """
        Multiply every sample by a scalar.

        Args:
            scalar: Factor applied to each sample.

        Returns:
            Signal: y[n] = x[n] · scalar, same length as the receiver.
        """
        return Signal([sample * scalar for sample in self._samples], zero=self._zero)

    def delay(self, delay_samples: int) -> "Signal[T]":
        """
        Shift the signal forward in time by delay_samples.

        The output has the SAME length as the input: the first delay_samples
        positions are filled with zero, and the last delay_samples samples of
        the original are dropped.

        Example:
            [1, 2, 3, 4, 5] delayed by 2  ->  [0, 0, 1, 2, 3]

        Args:
            delay_samples: Shift in samples, 0 <= delay_samples <= length.

        Returns:
            Signal: The delayed signal.

        Raises:
            BoundsError: If delay_samples is not an integer, is negative, or
                exceeds the signal length.
        """
        if not isinstance(delay_samples, Integral) or isinstance(delay_samples, bool):
            raise BoundsError(
                f"Delay must be an integer number of samples. "
                f"Received: {delay_samples!r}"
            )

        number_of_samples: int = len(self._samples)
        if delay_samples < 0 or delay_samples > number_of_samples:
            raise BoundsError(
                f"Delay must be between 0 and the signal length ({number_of_samples}). "
                f"Received: {delay_samples}"
            )

        delay_samples = int(delay_samples)
        kept_samples = self._samples[:number_of_samples - delay_samples]
        return Signal([self._zero] * delay_samples + list(kept_samples), zero=self._zero)

    def add(self, other: "Signal[T]") -> "Signal[T]":
        """
        Add two signals sample by sample.

        The result is as long as the longer operand; the missing tail of
        the shorter operand counts as zero. The operation is commutative.

        Example:
            [1, 2, 3] + [4, 5]  ->  [5, 7, 3]

        Args:
            other: The signal to add.

        Returns:
            Signal: y[n] = x[n] + h[n].
        """
        own_length: int = len(self._samples)
        other_length: int = len(other._samples)

        summed_samples = []
        for index in range(max(own_length, other_length)):
            own_sample = self._samples[index] if index < own_length else self._zero
            other_sample = other._samples[index] if index < other_length else other._zero
            summed_samples.append(own_sample + other_sample)

        return Signal(summed_samples, zero=self._zero)

    def convolve(self, other: "Signal[T]") -> "Signal[T]":
        """
        Discrete linear convolution, evaluated in direct form.

        Every output sample starts at zero, then for each pair of indices
        (i, j) the product x[i] · h[j] is accumulated into y[i + j]:

            y[n] = Σ_{i + j = n} x[i] · h[j]

        Output length is len(x) + len(h) - 1. Convolving with an empty
        signal yields an empty signal. Convolving with the unit signal [1]
        returns the original samples.

        Example:
            [1, 2, 3] * [4, 5]  ->  [4, 13, 22, 15]

        Args:
            other: The second operand (e.g. an impulse response).

        Returns:
            Signal: The convolution result.
        """
        own_length: int = len(self._samples)
        other_length: int = len(other._samples)

        if own_length == 0 or other_length == 0:
            logger.debug("Convolution with an empty operand, returning an empty signal")
            return Signal([], zero=self._zero)

        logger.debug(f"Convolving {own_length} x {other_length} samples")

        output_samples = [self._zero] * (own_length + other_length - 1)
        for i, own_sample in enumerate(self._samples):
            for j, other_sample in enumerate(other._samples):
                output_samples[i + j] = output_samples[i + j] + own_sample * other_sample

        return Signal(output_samples, zero=self._zero)

    # ===== PYTHON PROTOCOLS =====

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[T]:
        return iter(self._samples)

    @overload
    def __getitem__(self, index: int) -> T:
        ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[T, ...]:
        ...

    def __getitem__(self, index: Union[int, slice]) -> Union[T, Tuple[T, ...]]:
        return self._samples[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signal):
            return NotImplemented
        return self._samples == other._samples

    def __hash__(self) -> int:
        return hash(self._samples)

    def __repr__(self) -> str:
        return f"Signal({list(self._samples)!r})"
