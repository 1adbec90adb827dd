"""
Signal Plotter
==============

This module provides plotting functions for Signals and for the output of
the convolution demonstration.

Plots included:
1. Single signal scope plot (versus sample index or time)
2. Simulation chain (carrier, delayed impulse response, convolution output)
"""

import logging
from typing import Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from ..signals.signal_container import Signal
from ..simulation.simulation_runner import SimulationResults

logger = logging.getLogger(__name__)


class SignalPlotter:
    """
    Plotting utilities for Signals.

    All methods are static to allow easy use without instantiation.
    """

    # Default figure size for consistency
    DEFAULT_FIGURE_SIZE: Tuple[int, int] = (14, 10)
    DEFAULT_SINGLE_PLOT_SIZE: Tuple[int, int] = (12, 6)

    @staticmethod
    def _finish_figure(fig: Figure, save_path: Optional[str], show: bool) -> Figure:
        fig.tight_layout()

        if save_path:
            fig.savefig(save_path, dpi=150, bbox_inches='tight')
            logger.info(f"Figure saved to: {save_path}")

        if show:
            plt.show()

        return fig

    @staticmethod
    def plot_signal(
        signal: Signal,
        title: str = "Scope plot",
        sampling_frequency_hz: Optional[float] = None,
        samples_to_show: Optional[int] = None,
        save_path: Optional[str] = None,
        show: bool = True
    ) -> Figure:
        """
        Plot a single signal as a scope trace.

        Args:
            signal: The Signal to plot.
            title: Figure title.
            sampling_frequency_hz: If given, the x axis shows time in ms;
                otherwise it shows the sample index.
            samples_to_show: Limit display to this many samples.
            save_path: If provided, save figure to this path.
            show: If True, call plt.show().

        Returns:
            Figure: The created matplotlib figure.
        """
        samples: np.ndarray = signal.as_array()

        if sampling_frequency_hz is not None:
            x_axis: np.ndarray = signal.get_time_axis(sampling_frequency_hz) * 1000
            x_label: str = 'Time (ms)'
        else:
            x_axis = signal.get_index_axis()
            x_label = 'Sample index'

        if samples_to_show is not None:
            samples_to_show = min(samples_to_show, len(samples))
            x_axis = x_axis[:samples_to_show]
            samples = samples[:samples_to_show]

        fig, ax = plt.subplots(figsize=SignalPlotter.DEFAULT_SINGLE_PLOT_SIZE)
        ax.plot(x_axis, samples, 'r-', linewidth=1.0)
        ax.set_title(title, fontsize=12, fontweight='bold')
        ax.set_xlabel(x_label, fontsize=10)
        ax.set_ylabel('Amplitude', fontsize=10)
        ax.grid(True, alpha=0.3)
        ax.axhline(y=0, color='k', linewidth=0.5)

        return SignalPlotter._finish_figure(fig, save_path, show)

    @staticmethod
    def plot_simulation_results(
        results: SimulationResults,
        save_path: Optional[str] = None,
        show: bool = True
    ) -> Figure:
        """
        Plot the three stages of the convolution demonstration.

        This creates a 3-subplot figure showing:
        1. Carrier signal
        2. Delayed impulse response (stem plot)
        3. Convolution output

        Args:
            results: SimulationResults from SimulationRunner.run().
            save_path: If provided, save figure to this path.
            show: If True, call plt.show().

        Returns:
            Figure: The created matplotlib figure.
        """
        configuration = results.configuration

        fig, axes = plt.subplots(3, 1, figsize=SignalPlotter.DEFAULT_FIGURE_SIZE)
        fig.suptitle(
            f"Convolution of a {configuration.waveform} carrier with a delayed impulse",
            fontsize=14,
            fontweight='bold'
        )

        # ===== SUBPLOT 1: Carrier =====
        axes[0].plot(
            results.carrier_signal.get_index_axis(),
            results.carrier_signal.as_array(),
            'b-', linewidth=0.8
        )
        axes[0].set_ylabel('Amplitude', fontsize=10)
        axes[0].set_title(
            f"Carrier ({configuration.signal_frequency_hz} Hz at "
            f"{configuration.sampling_frequency_hz} Hz)",
            fontsize=11
        )
        axes[0].grid(True, alpha=0.3)

        # ===== SUBPLOT 2: Delayed Impulse Response =====
        axes[1].stem(
            results.delayed_impulse_response.get_index_axis(),
            results.delayed_impulse_response.as_array()
        )
        axes[1].set_ylabel('Amplitude', fontsize=10)
        axes[1].set_title(
            f"Impulse Response (delayed by {configuration.impulse_delay_samples} samples)",
            fontsize=11
        )
        axes[1].grid(True, alpha=0.3)

        # ===== SUBPLOT 3: Output =====
        axes[2].plot(
            results.output_signal.get_index_axis(),
            results.output_signal.as_array(),
            'r-', linewidth=0.8
        )
        axes[2].set_xlabel('Sample index', fontsize=10)
        axes[2].set_ylabel('Amplitude', fontsize=10)
        axes[2].set_title('Convolution Output', fontsize=11)
        axes[2].grid(True, alpha=0.3)

        return SignalPlotter._finish_figure(fig, save_path, show)
