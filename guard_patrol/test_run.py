import io
from pathlib import Path

import pytest

from guard_patrol.config import SimulationConfig, SimulatorSettings
from guard_patrol.process import MainProcess
from guard_patrol.run import main
from guard_patrol.simulator import Termination, TextRenderer
from guard_patrol.test_simulator import EXAMPLE
from guard_patrol.utils import parse_grid, timing_decorator

EXAMPLE_MAP = Path(__file__).resolve().parent.parent / "dataset" / "example.txt"


@pytest.fixture
def example_file(tmp_path):
    path = tmp_path / "example.txt"
    path.write_text(EXAMPLE)
    return path


def test_main_process_runs_both_parts():
    grid, start = parse_grid(EXAMPLE)
    part_one, part_two = MainProcess(SimulationConfig(), grid, start).run()
    assert part_one.termination == Termination.OUT_OF_BOUNDS
    assert part_one.visited_count == 41
    assert part_two.loop_count == 6


def test_main_process_renders_when_configured():
    grid, start = parse_grid(".\n^\n")
    stream = io.StringIO()
    config = SimulationConfig(simulator=SimulatorSettings(render=True, render_delay=0))
    process = MainProcess(config, grid, start, window=TextRenderer(stream))
    process.solve_part_one()
    assert stream.getvalue().count("Time: ") == 2


def test_render_flag_creates_a_renderer():
    grid, start = parse_grid("^\n")
    config = SimulationConfig(simulator=SimulatorSettings(render=True))
    assert isinstance(MainProcess(config, grid, start).window, TextRenderer)
    assert MainProcess(SimulationConfig(), grid, start).window is None


def test_cli_prints_both_parts(capsys):
    assert main([str(EXAMPLE_MAP)]) == 0
    out = capsys.readouterr().out
    assert "Part 1: 41" in out
    assert "Part 2: 6" in out


def test_cli_single_part(example_file, capsys):
    assert main([str(example_file), "--part", "1"]) == 0
    out = capsys.readouterr().out
    assert "Part 1: 41" in out
    assert "Part 2" not in out


def test_cli_reports_bad_map(tmp_path, capsys):
    path = tmp_path / "broken.txt"
    path.write_text("...\n...\n")
    assert main([str(path)]) == 1
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Part" not in capsys.readouterr().out


def test_cli_reports_bad_config(example_file, tmp_path):
    config = tmp_path / "patrol.json"
    config.write_text('{"search": {"processes": -2}}')
    assert main([str(example_file), "--config", str(config)]) == 1


def test_timing_decorator_keeps_result_and_name():
    @timing_decorator
    def answer(x):
        return x * 2

    assert answer(21) == 42
    assert answer.__name__ == "answer"
