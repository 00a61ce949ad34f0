import pytest

from diffbot_sim.simulation import Sample, main, run_trajectory, write_results
from diffbot_sim.trajectory import mpar


def test_first_sample_is_at_start():
    samples = list(run_trajectory(start=(1.0, 2.0), end=(3.0, 4.0), inner_steps=0))
    first = samples[0]
    assert first.time == 0.0
    assert first.x_ref == 1.0
    assert first.y_ref == 2.0


def test_sample_count_covers_timing_law():
    samples = list(run_trajectory(inner_steps=0))
    law = mpar(5.0, 1.0, 3.0, 0.01)
    assert all(s.time < law.duration for s in samples)
    assert samples[-1].time + 0.1 >= law.duration - 1e-9


def test_times_advance_by_step():
    samples = list(run_trajectory(end=(1.0, 1.0), step=0.2, inner_steps=0))
    times = [s.time for s in samples]
    for earlier, later in zip(times, times[1:]):
        assert later - earlier == pytest.approx(0.2)


def test_references_move_monotonically_along_diagonal():
    samples = list(run_trajectory(inner_steps=0))
    for s in samples:
        assert s.x_ref == s.y_ref
        assert 0.0 <= s.x_ref <= 5.0
    refs = [s.x_ref for s in samples]
    assert refs == sorted(refs)


def test_without_steps_robot_stays_at_origin():
    samples = list(run_trajectory(end=(1.0, 1.0), inner_steps=0))
    assert all(s.x == 0.0 and s.y == 0.0 for s in samples)


def test_robot_starts_moving_forward():
    first = next(run_trajectory(end=(1.0, 1.0), inner_steps=11))
    assert first.x > 0.0
    assert first.y == 0.0


def test_simulation_is_deterministic():
    a = list(run_trajectory(end=(0.5, 0.5), inner_steps=30))
    b = list(run_trajectory(end=(0.5, 0.5), inner_steps=30))
    assert a == b


@pytest.mark.parametrize(
    "kwargs",
    [{"step": 0.0}, {"step": -0.1}, {"inner_steps": -1}, {"delay": -1.0}],
)
def test_invalid_arguments_raise(kwargs):
    with pytest.raises(ValueError):
        next(run_trajectory(**kwargs))


def test_write_results_format(tmp_path):
    samples = [
        Sample(time=0.0, x_ref=1.0, y_ref=2.0, x=0.5, y=0.25),
        Sample(time=0.1, x_ref=3.0, y_ref=4.0, x=1.5, y=2.5),
    ]
    refs = tmp_path / "in.dat"
    reached = tmp_path / "out.dat"
    assert write_results(samples, refs, reached) == 2
    assert refs.read_text().splitlines() == [" (1, 2) ", " (3, 4) "]
    assert reached.read_text().splitlines() == [" (0.5, 0.25) ", " (1.5, 2.5) "]


def test_describe_line():
    sample = Sample(time=0.0, x_ref=1.0, y_ref=2.0, x=0.5, y=0.25)
    assert sample.describe() == "position_ref (1,2)  position_real (0.5,0.25) "


def test_main_writes_files(tmp_path, capsys):
    refs = tmp_path / "in.dat"
    reached = tmp_path / "out.dat"
    code = main([
        "--end", "1", "1",
        "--inner-steps", "5",
        "--delay", "0",
        "--input-file", str(refs),
        "--output-file", str(reached),
    ])
    assert code == 0
    expected = len(list(run_trajectory(end=(1.0, 1.0), inner_steps=0)))
    assert len(refs.read_text().splitlines()) == expected
    assert len(reached.read_text().splitlines()) == expected
    printed = capsys.readouterr().out.splitlines()
    assert len(printed) == expected
    assert printed[0].startswith("position_ref (0,0)")


def test_main_reports_invalid_arguments(tmp_path, capsys):
    code = main([
        "--inner-steps", "-1",
        "--input-file", str(tmp_path / "in.dat"),
        "--output-file", str(tmp_path / "out.dat"),
    ])
    assert code == 1
    assert "error" in capsys.readouterr().err