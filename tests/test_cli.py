import pytest

from dslists.cli import main


def _run(capsys):
    status = main([])
    return status, capsys.readouterr().out.splitlines()


def test_main_succeeds_and_ends_empty(capsys):
    status, lines = _run(capsys)
    assert status == 0
    assert lines[0] == "{0}"
    assert lines[-1] == "{}"


def test_main_prints_full_queue_at_peak(capsys):
    _, lines = _run(capsys)
    assert "{0, 10, 20, 30, 40, 50, 60, 70, 80, 90}" in lines


def test_main_lines_grow_then_shrink(capsys):
    _, lines = _run(capsys)
    counts = [len(line.strip("{}").split(", ")) if line != "{}" else 0 for line in lines]
    peak = counts.index(max(counts))
    growing = counts[: peak + 1]
    shrinking = counts[peak:]
    assert all(b == a + 1 for a, b in zip(growing, growing[1:]))
    assert all(b == a - 1 for a, b in zip(shrinking, shrinking[1:]))
    assert all(line.startswith("{") and line.endswith("}") for line in lines)


def test_main_drains_from_the_front(capsys):
    _, lines = _run(capsys)
    peak_line = max(lines, key=len)
    after_peak = lines[lines.index(peak_line) + 1]
    assert after_peak == "{" + peak_line[len("{0, "):]


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        main(["--unknown"])
    assert excinfo.value.code == 2