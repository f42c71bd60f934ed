import numpy as np
import pytest

from mcboost.lite.mb import MCBoostLite


def test_fit_and_predict(blob_arrays):
    data, label = blob_arrays
    lite = MCBoostLite(classifiers=('tree:2',) * 3, seed=0)
    train_predictions = lite.fit(data, label)
    assert train_predictions.shape == (90,)
    assert np.mean(train_predictions == label) > 0.9
    assert lite.predict(data[:5]).tolist() == train_predictions[:5].tolist()


def test_statistics(blob_arrays):
    data, label = blob_arrays
    lite = MCBoostLite(classifiers=('stump', 'tree:2'), seed=0)
    lite.fit(data, label)
    stats = lite.statistics()
    assert len(stats) == 2
    for weight, training_error in stats:
        assert 0.0 <= training_error < 2 / 3.0
        assert weight > 0


def test_one_dimensional_input():
    lite = MCBoostLite(seed=0)
    predictions = lite.fit([0.0, 1.0, 2.0, 3.0], [0, 0, 1, 1])
    assert predictions.tolist() == [0, 0, 1, 1]
    assert lite.predict([0.2, 2.9]).tolist() == [0, 1]


def test_shape_mismatch():
    with pytest.raises(ValueError):
        MCBoostLite().fit(np.zeros((3, 2)), [0, 1])


def test_not_fitted():
    with pytest.raises(Exception):
        MCBoostLite().predict(np.zeros((1, 2)))
    with pytest.raises(Exception):
        MCBoostLite().statistics()
