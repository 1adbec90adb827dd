"""Tests for the sample generator family."""

from itertools import islice

import numpy as np
import pytest

from discrete_signal.signals import (
    AVAILABLE_WAVEFORMS,
    BoundsError,
    DomainError,
    ImpulseGenerator,
    SawtoothGenerator,
    SineGenerator,
    SquareGenerator,
    StepGenerator,
    create_generator,
    fill_buffer,
    generate_samples
)


class CountingSource:
    """Not a SampleGenerator subclass, only exposes pull()."""

    def __init__(self) -> None:
        self.count = 0

    def pull(self) -> float:
        self.count += 1
        return float(self.count)


# ---------------------------------------------------------------------------
# Impulse
# ---------------------------------------------------------------------------

class TestImpulseGenerator:
    def test_first_pull_is_one_then_zeros(self) -> None:
        generator = ImpulseGenerator()
        assert [generator.pull() for _ in range(5)] == [1.0, 0.0, 0.0, 0.0, 0.0]

    def test_single_pull(self) -> None:
        assert ImpulseGenerator().pull() == 1.0

    def test_stays_silent_after_many_pulls(self) -> None:
        generator = ImpulseGenerator()
        generator.pull()
        assert all(generator.pull() == 0.0 for _ in range(1000))

    def test_fill_across_two_buffers(self) -> None:
        generator = ImpulseGenerator()
        assert fill_buffer(generator, [0.0] * 3) == [1.0, 0.0, 0.0]
        assert fill_buffer(generator, [0.0] * 3) == [0.0, 0.0, 0.0]

    def test_position(self) -> None:
        generator = ImpulseGenerator()
        assert generator.get_position() == 0
        generator.pull()
        assert generator.get_position() == 1


# ---------------------------------------------------------------------------
# Step
# ---------------------------------------------------------------------------

class TestStepGenerator:
    def test_onset_one(self) -> None:
        assert StepGenerator(1).fill([0.0] * 3) == [0.0, 1.0, 1.0]

    @pytest.mark.parametrize("onset, length", [(0, 4), (2, 5), (5, 5), (3, 10)])
    def test_zeros_then_ones(self, onset: int, length: int) -> None:
        buffer = StepGenerator(onset).fill([9.0] * length)
        assert buffer == [0.0] * onset + [1.0] * (length - onset)

    def test_buffer_shorter_than_onset(self) -> None:
        generator = StepGenerator(5)
        assert generator.fill([0.0] * 3) == [0.0, 0.0, 0.0]
        assert generator.fill([0.0] * 3) == [0.0, 0.0, 1.0]

    def test_position_counts_consumed_zeros(self) -> None:
        generator = StepGenerator(3)
        generator.fill([0.0] * 2)
        assert generator.get_position() == 2
        generator.fill([0.0] * 5)
        assert generator.get_position() == 3

    def test_negative_onset_rejected(self) -> None:
        with pytest.raises(DomainError):
            StepGenerator(-1)

    def test_non_integer_onset_rejected(self) -> None:
        with pytest.raises(DomainError):
            StepGenerator(1.5)

    def test_numpy_integer_onset_accepted(self) -> None:
        assert StepGenerator(np.int64(2)).fill([0.0] * 3) == [0.0, 0.0, 1.0]


# ---------------------------------------------------------------------------
# Sine
# ---------------------------------------------------------------------------

class TestSineGenerator:
    def test_quarter_period_samples(self) -> None:
        buffer = SineGenerator(2.0, 8).fill([0.0] * 8)
        np.testing.assert_allclose(
            buffer, [0.0, 1.0, 0.0, -1.0, 0.0, 1.0, 0.0, -1.0], atol=1e-5
        )

    def test_matches_closed_form(self) -> None:
        frequency, rate = 3.0, 100.0
        samples = generate_samples(SineGenerator(frequency, rate), 250)
        n = np.arange(250)
        np.testing.assert_allclose(samples, np.sin(2 * np.pi * frequency * n / rate), atol=1e-9)

    def test_state_continues_across_fills(self) -> None:
        split = SineGenerator(1.0, 16)
        joined = split.fill([0.0] * 4) + split.fill([0.0] * 4)
        assert joined == SineGenerator(1.0, 16).fill([0.0] * 8)

    def test_counter_is_not_wrapped(self) -> None:
        generator = SineGenerator(1.0, 4)
        generator.fill([0.0] * 10)
        assert generator.get_position() == 10


# ---------------------------------------------------------------------------
# Sawtooth / Square
# ---------------------------------------------------------------------------

class TestSawtoothGenerator:
    def test_ramp_one_period(self) -> None:
        buffer = SawtoothGenerator(1.0, 4).fill([0.0] * 8)
        assert buffer == pytest.approx([0.0, 0.25, 0.5, 0.75, 0.0, 0.25, 0.5, 0.75])

    def test_two_periods_per_wrap(self) -> None:
        buffer = SawtoothGenerator(2.0, 4).fill([0.0] * 4)
        assert buffer == pytest.approx([0.0, 0.5, 0.0, 0.5])

    def test_output_range(self) -> None:
        samples = generate_samples(SawtoothGenerator(3.0, 50), 200)
        assert samples.min() >= 0.0
        assert samples.max() < 1.0

    def test_position_wraps_at_sample_rate(self) -> None:
        generator = SawtoothGenerator(1.0, 4)
        generator.fill([0.0] * 3)
        assert generator.get_position() == 3
        generator.pull()
        assert generator.get_position() == 0


class TestSquareGenerator:
    def test_half_low_half_high(self) -> None:
        assert SquareGenerator(1.0, 4).fill([0.0] * 8) == [0.0, 0.0, 1.0, 1.0] * 2

    def test_levels_are_binary(self) -> None:
        samples = generate_samples(SquareGenerator(5.0, 64), 256)
        assert set(np.unique(samples)) <= {0.0, 1.0}

    def test_duty_cycle(self) -> None:
        samples = generate_samples(SquareGenerator(1.0, 100), 100)
        assert samples.sum() == 50.0


@pytest.mark.parametrize("generator_class", [SineGenerator, SawtoothGenerator, SquareGenerator])
@pytest.mark.parametrize("sampling_frequency_hz", [0, 0.0, -8, float("nan"), float("inf"), float("-inf")])
def test_invalid_sample_rate_rejected(generator_class, sampling_frequency_hz) -> None:
    with pytest.raises(DomainError):
        generator_class(1.0, sampling_frequency_hz)


@pytest.mark.parametrize("generator_class", [SineGenerator, SawtoothGenerator, SquareGenerator])
@pytest.mark.parametrize("signal_frequency_hz", [float("nan"), float("inf")])
def test_non_finite_signal_frequency_rejected(generator_class, signal_frequency_hz) -> None:
    with pytest.raises(DomainError):
        generator_class(signal_frequency_hz, 8)


def test_domain_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        SineGenerator(1.0, 0)


# ---------------------------------------------------------------------------
# Buffer filling
# ---------------------------------------------------------------------------

class TestFillBuffer:
    def test_returns_same_numpy_buffer(self) -> None:
        buffer = np.full(4, 7.0)
        result = fill_buffer(ImpulseGenerator(), buffer)
        assert result is buffer
        np.testing.assert_array_equal(buffer, [1.0, 0.0, 0.0, 0.0])

    def test_overwrites_existing_contents(self) -> None:
        assert fill_buffer(StepGenerator(0), [5.0, -3.0, 2.0]) == [1.0, 1.0, 1.0]

    def test_empty_buffer_does_not_advance(self) -> None:
        generator = ImpulseGenerator()
        assert fill_buffer(generator, []) == []
        assert generator.pull() == 1.0

    def test_accepts_any_object_with_pull(self) -> None:
        source = CountingSource()
        assert fill_buffer(source, [0.0] * 3) == [1.0, 2.0, 3.0]
        assert source.count == 3

    def test_advances_by_buffer_length(self) -> None:
        generator = SineGenerator(1.0, 1000)
        fill_buffer(generator, [0.0] * 37)
        assert generator.get_position() == 37


class TestGenerateSamples:
    def test_length_and_dtype(self) -> None:
        samples = generate_samples(SquareGenerator(1.0, 8), 12)
        assert samples.shape == (12,)
        assert samples.dtype == np.float64

    def test_zero_length(self) -> None:
        assert generate_samples(ImpulseGenerator(), 0).size == 0

    def test_negative_length_rejected(self) -> None:
        with pytest.raises(BoundsError):
            generate_samples(ImpulseGenerator(), -1)

    def test_non_integer_length_rejected(self) -> None:
        generator = ImpulseGenerator()
        with pytest.raises(BoundsError):
            generate_samples(generator, 2.5)
        assert generator.pull() == 1.0

    def test_numpy_integer_length_accepted(self) -> None:
        assert generate_samples(ImpulseGenerator(), np.int64(3)).tolist() == [1.0, 0.0, 0.0]


def test_generators_are_infinite_iterators() -> None:
    assert list(islice(ImpulseGenerator(), 4)) == [1.0, 0.0, 0.0, 0.0]
    assert next(iter(StepGenerator(0))) == 1.0


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

class TestCreateGenerator:
    @pytest.mark.parametrize("waveform, expected_class", [
        ("impulse", ImpulseGenerator),
        ("step", StepGenerator),
        ("sine", SineGenerator),
        ("sawtooth", SawtoothGenerator),
        ("square", SquareGenerator),
    ])
    def test_known_waveforms(self, waveform: str, expected_class: type) -> None:
        assert isinstance(create_generator(waveform), expected_class)

    def test_available_waveforms_listed(self) -> None:
        assert set(AVAILABLE_WAVEFORMS) == {"impulse", "step", "sine", "sawtooth", "square"}

    def test_case_insensitive(self) -> None:
        assert isinstance(create_generator("SiNe"), SineGenerator)

    def test_parameters_forwarded(self) -> None:
        generator = create_generator("sine", signal_frequency_hz=2.0, sampling_frequency_hz=8)
        assert generator.signal_frequency_hz == 2.0
        assert generator.sampling_frequency_hz == 8
        assert create_generator("step", onset_position=2).fill([0.0] * 3) == [0.0, 0.0, 1.0]

    def test_unknown_waveform(self) -> None:
        with pytest.raises(DomainError, match="Unknown waveform"):
            create_generator("triangle")

    def test_invalid_rate_propagates(self) -> None:
        with pytest.raises(DomainError):
            create_generator("square", sampling_frequency_hz=0)
