"""Tests for the command-line entry point."""

import pytest

import main


def test_default_runs_convolution_demo(restore_root_logger, capsys) -> None:
    assert main.main([]) == 0
    output = capsys.readouterr().out
    assert "DISCRETE SIGNAL TOOLKIT" in output
    assert "Output Length:           109" in output


def test_waveform_demo(restore_root_logger, capsys) -> None:
    assert main.main(["waveform", "--waveform", "square", "--samples", "16", "--frequency", "2"]) == 0
    output = capsys.readouterr().out
    assert "WAVEFORM: SQUARE" in output
    assert "Samples:                 16" in output


def test_convolution_with_saved_plot(restore_root_logger, tmp_path) -> None:
    save_path = tmp_path / "chain.png"
    assert main.main(["--delay", "3", "--impulse-length", "8", "--save-path", str(save_path)]) == 0
    assert save_path.exists()


def test_run_waveform_demo_returns_signal() -> None:
    signal = main.run_waveform_demo(
        waveform="step", number_of_samples=4, step_onset_position=1, verbose=False
    )
    assert list(signal) == [0.0, 1.0, 1.0, 1.0]


def test_invalid_delay_rejected(restore_root_logger) -> None:
    with pytest.raises(ValueError):
        main.main(["--delay", "40"])


def test_unknown_waveform_rejected_by_parser() -> None:
    with pytest.raises(SystemExit):
        main.build_argument_parser().parse_args(["--waveform", "triangle"])
