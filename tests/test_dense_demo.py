import re

import pytest

from scratchnet.dense_demo import main, run

_NEURON = re.compile(r"Neuron number (\d+): (-?\d+\.\d+)")
_BATCH = re.compile(r"Batch number (\d+):")


def _tables(report):
    """Split the report into tables: list of batches, each a list of values."""
    tables = []
    for line in report.splitlines():
        batch = _BATCH.fullmatch(line)
        if batch:
            if batch.group(1) == "1":
                tables.append([])
            tables[-1].append([])
            continue
        neuron = _NEURON.fullmatch(line)
        if neuron:
            tables[-1][-1].append(float(neuron.group(2)))
    return tables


def _loss(report):
    match = re.search(r"^Loss: (-?\d+\.\d+)$", report, re.MULTILINE)
    assert match is not None
    return float(match.group(1))


def test_same_seed_gives_same_report():
    first = run(7)
    second = run(7)
    assert first.count("Batch number 1:") == 4
    assert _tables(first) == _tables(second)
    assert _loss(first) == _loss(second)
    assert first == second


def test_different_seeds_give_different_reports():
    assert run(1) != run(2)


def test_report_has_four_tables_of_three_batches():
    tables = _tables(run(5))
    assert len(tables) == 4
    assert all(len(table) == 3 for table in tables)
    assert {len(batch) for batch in tables[0] + tables[1]} == {3}
    assert {len(batch) for batch in tables[2] + tables[3]} == {2}


@pytest.mark.parametrize("seed", [0, 11, 42])
def test_relu_table_clips_the_first(seed):
    before, after, _, _ = _tables(run(seed))
    for raw_row, relu_row in zip(before, after):
        assert relu_row == [max(v, 0.0) for v in raw_row]
        assert all(v >= 0.0 for v in relu_row)


@pytest.mark.parametrize("seed", [0, 11, 42])
def test_softmax_rows_are_distributions(seed):
    softmax = _tables(run(seed))[3]
    for row in softmax:
        assert all(0.0 <= v <= 1.0 for v in row)
        assert sum(row) == pytest.approx(1.0, abs=0.01)


@pytest.mark.parametrize("seed", [0, 3, 99])
def test_loss_is_non_negative_and_bounded(seed):
    report = run(seed)
    assert "\n\nLoss function: \n" in report
    loss = _loss(report)
    assert 0.0 <= loss <= 14.0


def test_main_prints_the_report(capsys):
    assert main(["--seed", "3"]) == 0
    assert capsys.readouterr().out == run(3)


def test_main_rejects_non_integer_seed():
    with pytest.raises(SystemExit):
        main(["--seed", "abc"])