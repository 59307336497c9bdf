import math
import random

import pytest

from roadassign.tournament import TournamentTree


def _merge(log_k, sequences):
    sentinel = math.inf
    positions = [0] * len(sequences)
    heads = [seq[0] if seq else sentinel for seq in sequences]
    tree = TournamentTree(log_k, heads)
    out = []
    while tree.min_key() != sentinel:
        seq = tree.min_seq()
        out.append(tree.min_key())
        positions[seq] += 1
        nxt = sequences[seq][positions[seq]] if positions[seq] < len(sequences[seq]) else sentinel
        tree.delete_min(nxt)
    return out


@pytest.mark.parametrize("log_k", [0, 1, 2, 3, 4])
def test_merges_sorted_sequences(log_k):
    rng = random.Random(log_k)
    k = 1 << log_k
    sequences = [sorted(rng.randint(0, 100) for _ in range(rng.randint(0, 15))) for _ in range(k)]
    merged = _merge(log_k, sequences)
    assert merged == sorted(x for seq in sequences for x in seq)


def test_min_after_build():
    keys = [9, 4, 7, 1, 8, 6, 3, 5]
    tree = TournamentTree(3, keys)
    assert tree.min_key() == min(keys)
    assert tree.min_seq() == keys.index(min(keys))


def test_rebuild_replaces_state():
    tree = TournamentTree(1, [3, 2])
    tree.build([0, 5])
    assert (tree.min_key(), tree.min_seq()) == (0, 0)


def test_single_sequence():
    tree = TournamentTree(0, [4])
    assert (tree.min_key(), tree.min_seq()) == (4, 0)
    tree.delete_min(10)
    assert (tree.min_key(), tree.min_seq()) == (10, 0)


def test_delete_min_selects_next_winner():
    tree = TournamentTree(2, [1, 2, 3, 4])
    tree.delete_min(10)
    assert (tree.min_key(), tree.min_seq()) == (2, 1)


def test_wrong_number_of_keys():
    with pytest.raises(ValueError):
        TournamentTree(2, [1, 2, 3])