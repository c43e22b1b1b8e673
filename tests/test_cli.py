import pytest

from convex_hull.cli import EXIT_ABORTED, EXIT_INSUFFICIENT, main


@pytest.fixture(autouse=True)
def no_delay(monkeypatch):
    monkeypatch.setenv("CONVEX_HULL_STEP_DELAY_MS", "0")


@pytest.mark.unit
def test_prints_hull(capsys):
    assert main(["0,0", "4,0", "4,4", "0,4", "2,2"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["Convex Hull:", "0,0", "4,0", "4,4", "0,4"]


@pytest.mark.unit
def test_reads_file(tmp_path, capsys):
    path = tmp_path / "points.txt"
    path.write_text("4\n0 0\n1 0\n2 0\n1 1\n")

    assert main(["-f", str(path)]) == 0
    assert capsys.readouterr().out.splitlines()[1:] == ["0,0", "2,0", "1,1"]


@pytest.mark.unit
def test_exact_coordinates(capsys):
    assert main(["--exact", "0,0", "0.5,0", "0,0.5"]) == 0
    assert capsys.readouterr().out.splitlines()[1:] == ["0,0", "1/2,0", "0,1/2"]


@pytest.mark.unit
def test_trace_prints_steps(capsys):
    assert main(["--trace", "--delay", "0", "0,4", "2,1", "4,4", "4,0", "0,0"]) == 0

    out = capsys.readouterr().out
    assert out.count("[open]") == 4
    assert "[closed] step 5: (0,0) -> (4,0) -> (4,4) -> (0,4)" in out


@pytest.mark.unit
def test_insufficient_points(capsys):
    assert main(["0,0", "1,0", "2,0"]) == EXIT_INSUFFICIENT
    assert "non-collinear" in capsys.readouterr().err


@pytest.mark.unit
def test_max_steps_aborts(capsys):
    assert main(["--max-steps", "1", "0,0", "4,0", "4,4", "0,4"]) == EXIT_ABORTED
    assert "aborted" in capsys.readouterr().err


@pytest.mark.unit
def test_no_points_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


@pytest.mark.unit
def test_bad_point_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["1,2", "oops"])
    assert excinfo.value.code == 2
