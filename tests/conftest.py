import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from mcboost.boost.generic import WeakClassifier
from mcboost.boost.instance import Instance


class TableClassifier(WeakClassifier):
    """
    Predicts a fixed label per example; the first feature is the index
    into the table. Every call to train may switch to the next table.
    """

    def __init__(self, *tables):
        self.tables = tables
        self.train_calls = 0
        self.seen_weights = list()
        self.current = None

    def train(self, instances):
        self.seen_weights.append([inst.weight for inst in instances])
        self.current = self.tables[min(self.train_calls, len(self.tables) - 1)]
        self.train_calls += 1

    def predict(self, features):
        return self.current[int(features[0])]


class SequenceSource():
    def __init__(self, values):
        self.values = list(values)
        self.calls = list()

    def double_between(self, lo, hi):
        self.calls.append((lo, hi))
        return self.values.pop(0)


def indexed_instances(labels):
    return [Instance(features=[i], label=label) for i, label in enumerate(labels)]


@pytest.fixture
def four_instances():
    return indexed_instances([0, 0, 1, 1])


@pytest.fixture
def blob_arrays():
    rs = np.random.RandomState(0)
    centers = np.array([[0.0, 0.0], [4.0, 0.0], [2.0, 4.0]])
    label = np.resize(np.arange(3), 90)
    data = centers[label] + rs.normal(scale=0.5, size=(90, 2))
    return data, label
