import pytest

from puzzlekit.steady_gene import BaseCount, excess_counts, steady_gene


def test_from_sequence_counts_each_base():
    assert BaseCount.from_sequence("AACGTT") == BaseCount(a=2, c=1, g=1, t=2)


def test_from_sequence_treats_unknown_as_t():
    assert BaseCount.from_sequence("X").t == 1


def test_from_sequence_empty_is_zero():
    assert BaseCount.from_sequence("") == BaseCount()


def test_covers_is_componentwise():
    big = BaseCount(1, 1, 1, 1)
    small = BaseCount(0, 1, 0, 1)
    assert big.covers(small)
    assert not small.covers(big)
    assert big.covers(big)


def test_excess_counts_balanced_is_zero():
    assert excess_counts("ACGTACGT") == BaseCount()


def test_excess_counts_never_negative():
    excess = excess_counts("AAAAAAAC")
    assert all(value >= 0 for value in (excess.a, excess.c, excess.g, excess.t))
    assert excess.c == 0


def test_steady_gene_worked_example():
    assert steady_gene("GAAATAAA") == 5


@pytest.mark.parametrize("sequence", ["ACGT", "TGCA", "AACCGGTT", ""])
def test_already_steady(sequence):
    assert steady_gene(sequence) == 0


@pytest.mark.parametrize(
    "sequence", ["AAAA", "GAAATAAA", "ACTGAAAG", "TGATGCCGTCCCCTCAACTTGAGTGCTCCTAATGCGTTGC"]
)
def test_result_bounded_by_excess_and_length(sequence):
    result = steady_gene(sequence)
    excess = excess_counts(sequence)
    assert excess.a + excess.c + excess.g + excess.t <= result <= len(sequence)


def test_replacing_the_window_can_balance():
    sequence = "ACTGAAAG"
    length = steady_gene(sequence)
    excess = excess_counts(sequence)
    windows = [
        BaseCount.from_sequence(sequence[start:start + length])
        for start in range(len(sequence) - length + 1)
    ]
    assert any(window.covers(excess) for window in windows)
    if length > 0:
        shorter = [
            BaseCount.from_sequence(sequence[start:start + length - 1])
            for start in range(len(sequence) - length + 2)
        ]
        assert not any(window.covers(excess) for window in shorter)