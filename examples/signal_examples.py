"""
Signal Toolkit Examples
=======================

This script demonstrates the generators and the Signal arithmetic.

Examples include:
1. Scope plot of a sine wave (one period, 512 samples)
2. Comparing all waveforms side by side
3. Shifting a carrier by convolving it with a delayed impulse
4. Building a signal from named operations (scale, add, delay)

Usage:
    python examples/signal_examples.py --example all

Or import and use functions:
    from examples.signal_examples import example_sine_scope_plot
"""

import sys
import os
import matplotlib.pyplot as plt

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from discrete_signal.signals import (
    AVAILABLE_WAVEFORMS,
    ImpulseGenerator,
    SineGenerator,
    Signal,
    create_generator,
    fill_buffer
)
from discrete_signal.simulation import SimulationConfiguration, SimulationRunner
from discrete_signal.visualization import SignalPlotter

SIGNAL_LENGTH = 512
SAMPLE_RATE = 512


def example_sine_scope_plot():
    """
    Example 1: Scope plot of a 1 Hz sine sampled at 512 Hz.
    """
    print("\n" + "=" * 70)
    print("Example 1: Sine Scope Plot")
    print("=" * 70)

    generator = SineGenerator(signal_frequency_hz=1.0, sampling_frequency_hz=SAMPLE_RATE)
    buffer = [0.0] * SIGNAL_LENGTH
    fill_buffer(generator, buffer)

    SignalPlotter.plot_signal(
        Signal.from_sequence(buffer),
        title="Scope plot",
        sampling_frequency_hz=SAMPLE_RATE,
        show=False
    )


def example_waveform_gallery():
    """
    Example 2: One figure per waveform, each generated from the factory.
    """
    print("\n" + "=" * 70)
    print("Example 2: Waveform Gallery")
    print("=" * 70)

    fig, axes = plt.subplots(len(AVAILABLE_WAVEFORMS), 1, figsize=(12, 12), sharex=True)
    for ax, waveform in zip(axes, AVAILABLE_WAVEFORMS):
        generator = create_generator(
            waveform,
            signal_frequency_hz=4.0,
            sampling_frequency_hz=SAMPLE_RATE,
            onset_position=SIGNAL_LENGTH // 4
        )
        signal = Signal.from_sequence(fill_buffer(generator, [0.0] * SIGNAL_LENGTH))
        ax.plot(signal.get_index_axis(), signal.as_array(), linewidth=1.0)
        ax.set_title(waveform, fontsize=11)
        ax.grid(True, alpha=0.3)
        print(f"  {waveform:<10} min = {min(signal):+.3f}, max = {max(signal):+.3f}")

    axes[-1].set_xlabel('Sample index', fontsize=10)
    fig.tight_layout()


def example_impulse_shift():
    """
    Example 3: Convolving a carrier with a delayed impulse shifts it in time.
    """
    print("\n" + "=" * 70)
    print("Example 3: Impulse Response Shift")
    print("=" * 70)

    configuration = SimulationConfiguration(
        waveform="sine",
        signal_frequency_hz=1.0,
        sampling_frequency_hz=80,
        number_of_samples=80,
        impulse_response_length=30,
        impulse_delay_samples=10
    )
    results = SimulationRunner(configuration).run(verbose=True)
    SignalPlotter.plot_simulation_results(results, show=False)


def example_signal_arithmetic():
    """
    Example 4: Named operations on small integer signals.
    """
    print("\n" + "=" * 70)
    print("Example 4: Signal Arithmetic")
    print("=" * 70)

    x = Signal.from_sequence([1, 2, 3])
    h = Signal.from_sequence([4, 5])
    print(f"  x                 = {list(x)}")
    print(f"  h                 = {list(h)}")
    print(f"  x.add(h)          = {list(x.add(h))}")
    print(f"  x.scale(2)        = {list(x.scale(2))}")
    print(f"  x.convolve(h)     = {list(x.convolve(h))}")
    print(f"  [1..5].delay(2)   = {list(Signal.from_sequence([1, 2, 3, 4, 5]).delay(2))}")

    impulse = Signal.from_sequence(fill_buffer(ImpulseGenerator(), [0.0] * 3))
    print(f"  x.convolve(delta) = {list(x.convolve(impulse))}")


def run_all_examples():
    """Run every example and show all figures."""
    example_sine_scope_plot()
    example_waveform_gallery()
    example_impulse_shift()
    example_signal_arithmetic()

    print("\nClose all plot windows to exit.")
    print("=" * 70)

    plt.show()


if __name__ == "__main__":
    """
    Main entry point for running examples.
    """
    import argparse

    parser = argparse.ArgumentParser(
        description='Examples for the discrete signal toolkit'
    )
    parser.add_argument(
        '--example',
        type=str,
        choices=['sine', 'gallery', 'shift', 'arithmetic', 'all'],
        default='all',
        help='Which example to run (default: all)'
    )

    args = parser.parse_args()

    if args.example == 'all':
        run_all_examples()
    elif args.example == 'sine':
        example_sine_scope_plot()
        plt.show()
    elif args.example == 'gallery':
        example_waveform_gallery()
        plt.show()
    elif args.example == 'shift':
        example_impulse_shift()
        plt.show()
    elif args.example == 'arithmetic':
        example_signal_arithmetic()
