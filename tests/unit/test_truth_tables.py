import pytest

from backpropnet.data import truth_tables


def test_xor_dataset():
    inputs, targets = truth_tables.xor()
    assert inputs == [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]
    assert targets == [[0.0], [1.0], [1.0], [0.0]]


@pytest.mark.parametrize(
    "name,expected",
    [("and", [0.0, 0.0, 0.0, 1.0]), ("or", [0.0, 1.0, 1.0, 1.0]), ("nand", [1.0, 1.0, 1.0, 0.0])],
)
def test_other_gates(name, expected):
    _, targets = truth_tables.get(name)
    assert [row[0] for row in targets] == expected


def test_datasets_are_fresh_copies():
    inputs, _ = truth_tables.xor()
    inputs[0][0] = 5.0
    assert truth_tables.xor()[0][0] == [0.0, 0.0]


def test_unknown_dataset():
    with pytest.raises(KeyError):
        truth_tables.get("xnor")
