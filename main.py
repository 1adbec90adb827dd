"""
Discrete Signal Toolkit - Main Entry Point
==========================================

This is the main entry point for the discrete signal toolkit.

Two demonstrations are available:
1. waveform:     generate one buffer from a waveform generator and show it
2. convolution:  convolve a carrier with a delayed unit impulse, which
                 shifts the carrier in time by the delay

Usage:
    python main.py convolution --waveform sine --delay 10 --plot
    python main.py waveform --waveform square --frequency 4 --sample-rate 512 --plot

Or import and use programmatically:
    from main import run_waveform_demo, run_convolution_demo
"""

import argparse
import logging
from typing import List, Optional

from discrete_signal.config.logging_config import setup_logging
from discrete_signal.signals import (
    AVAILABLE_WAVEFORMS,
    Signal,
    create_generator,
    generate_samples
)
from discrete_signal.simulation import SimulationConfiguration, SimulationResults, SimulationRunner

logger = logging.getLogger(__name__)


# ============================================================================
# DEMONSTRATIONS
# ============================================================================

def run_waveform_demo(
    waveform: str = "sine",
    signal_frequency_hz: float = 1.0,
    sampling_frequency_hz: float = 512.0,
    number_of_samples: int = 512,
    step_onset_position: int = 0,
    plot_results: bool = False,
    save_path: Optional[str] = None,
    verbose: bool = True
) -> Signal:
    """
    Generate one buffer from a waveform generator and wrap it in a Signal.

    Args:
        waveform: One of AVAILABLE_WAVEFORMS.
        signal_frequency_hz: Frequency of the periodic waveforms.
        sampling_frequency_hz: Sample rate in Hz.
        number_of_samples: Buffer length.
        step_onset_position: Onset of the step waveform.
        plot_results: If True, show a scope plot.
        save_path: If provided, save the plot to this path.
        verbose: If True, print a short summary.

    Returns:
        Signal: The generated waveform.
    """
    generator = create_generator(
        waveform,
        signal_frequency_hz=signal_frequency_hz,
        sampling_frequency_hz=sampling_frequency_hz,
        onset_position=step_onset_position
    )
    signal = Signal.from_sequence(generate_samples(generator, number_of_samples).tolist())
    logger.debug(f"Generated {len(signal)} samples of {waveform}")

    if verbose:
        samples = signal.as_array()
        print("\n" + "=" * 70)
        print(f"WAVEFORM: {waveform.upper()}")
        print("=" * 70)
        print(f"  Samples:                 {len(signal)}")
        if samples.size:
            print(f"  Minimum:                 {samples.min():.4f}")
            print(f"  Maximum:                 {samples.max():.4f}")
            print(f"  First samples:           {[round(float(s), 4) for s in samples[:8]]}")

    if plot_results or save_path:
        from discrete_signal.visualization import SignalPlotter
        SignalPlotter.plot_signal(
            signal,
            title=f"Scope plot ({waveform})",
            sampling_frequency_hz=sampling_frequency_hz,
            save_path=save_path,
            show=plot_results
        )

    return signal


def run_convolution_demo(
    configuration: SimulationConfiguration,
    plot_results: bool = False,
    save_path: Optional[str] = None,
    verbose: bool = True
) -> SimulationResults:
    """
    Convolve a carrier with a delayed impulse and optionally plot the chain.

    Args:
        configuration: Parameters of the run.
        plot_results: If True, display the three-stage plot.
        save_path: If provided, save the plot to this path.
        verbose: If True, print progress and the summary.

    Returns:
        SimulationResults: All intermediate and final signals.
    """
    results = SimulationRunner(configuration).run(verbose=verbose)

    if plot_results or save_path:
        from discrete_signal.visualization import SignalPlotter
        SignalPlotter.plot_simulation_results(results, save_path=save_path, show=plot_results)

    return results


# ============================================================================
# COMMAND LINE
# ============================================================================

def build_argument_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Generate canonical waveforms and demonstrate signal convolution."
    )
    parser.add_argument(
        "demo", nargs="?", default="convolution", choices=["convolution", "waveform"],
        help="Demonstration to run (default: convolution)"
    )
    parser.add_argument("--waveform", default="sine", choices=AVAILABLE_WAVEFORMS,
                        help="Carrier / generated waveform")
    parser.add_argument("--frequency", type=float, default=1.0,
                        help="Signal frequency in Hz")
    parser.add_argument("--sample-rate", type=float, default=None,
                        help="Sampling frequency in Hz (default: 80 for convolution, 512 for waveform)")
    parser.add_argument("--samples", type=int, default=None,
                        help="Number of samples to generate (default: the sample rate)")
    parser.add_argument("--onset", type=int, default=0,
                        help="Onset position of the step waveform")
    parser.add_argument("--impulse-length", type=int, default=30,
                        help="Length of the impulse response")
    parser.add_argument("--delay", type=int, default=10,
                        help="Delay of the impulse response in samples")
    parser.add_argument("--gain", type=float, default=1.0,
                        help="Gain applied to the convolution output")
    parser.add_argument("--plot", action="store_true", help="Show plots")
    parser.add_argument("--save-path", default=None, help="Save the plot to this file")
    parser.add_argument("--log-file", default=None, help="Write a debug log to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the demonstration selected on the command line."""
    arguments = build_argument_parser().parse_args(argv)
    setup_logging(log_file=arguments.log_file)

    print("\n" + "=" * 70)
    print("   DISCRETE SIGNAL TOOLKIT")
    print("=" * 70)

    if arguments.demo == "waveform":
        sample_rate = arguments.sample_rate if arguments.sample_rate is not None else 512.0
        run_waveform_demo(
            waveform=arguments.waveform,
            signal_frequency_hz=arguments.frequency,
            sampling_frequency_hz=sample_rate,
            number_of_samples=arguments.samples if arguments.samples is not None else int(sample_rate),
            step_onset_position=arguments.onset,
            plot_results=arguments.plot,
            save_path=arguments.save_path
        )
        return 0

    sample_rate = arguments.sample_rate if arguments.sample_rate is not None else 80.0
    configuration = SimulationConfiguration(
        waveform=arguments.waveform,
        signal_frequency_hz=arguments.frequency,
        sampling_frequency_hz=sample_rate,
        number_of_samples=arguments.samples if arguments.samples is not None else int(sample_rate),
        step_onset_position=arguments.onset,
        impulse_response_length=arguments.impulse_length,
        impulse_delay_samples=arguments.delay,
        output_gain=arguments.gain
    )
    run_convolution_demo(
        configuration,
        plot_results=arguments.plot,
        save_path=arguments.save_path
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
