import os

import h5py
import numpy as np
import pytest
import ujson

from mcboost.demo.make_demo_data import write_dataset
from mcboost.environment.mb import MCBoost


@pytest.fixture
def working_dir(tmp_path):
    write_dataset(str(tmp_path / "train.h5"), 120, seed=0)
    write_dataset(str(tmp_path / "test.h5"), 60, seed=1)
    return str(tmp_path)


def conf(working_dir, **fields):
    d = {'train_file': 'train.h5',
         'classifiers': 'tree:2, tree:2, stump',
         'seed': 3,
         'working_dir': working_dir}
    d.update(fields)
    return d


def test_loads_instances(working_dir):
    mb = MCBoost(conf_dict=conf(working_dir, test_file='test.h5'), logEN=False)
    assert mb.total_exam_no == 120
    assert mb.test_exam_no == 60
    assert mb.train_set[0].features.shape == (2,)
    assert set(mb.train_label) == {0, 1, 2}


def test_missing_label_uses_last_column(tmp_path):
    data = np.array([[0.0, 1.0, 0], [1.0, 0.0, 1], [2.0, 2.0, 1]])
    with h5py.File(str(tmp_path / "nolabel.h5"), 'w') as f:
        f.create_dataset('data', data=data)
    mb = MCBoost(conf_dict={'train_file': 'nolabel.h5',
                            'working_dir': str(tmp_path)}, logEN=False)
    assert list(mb.train_label) == [0, 1, 1]
    assert mb.train_set[2].features.tolist() == [2.0, 2.0]


def test_missing_data_file(tmp_path):
    with pytest.raises(Exception):
        MCBoost(conf_dict={'train_file': 'nothing.h5',
                           'working_dir': str(tmp_path)}, logEN=False)


def test_needs_a_configuration():
    with pytest.raises(Exception):
        MCBoost()


def test_unknown_source(working_dir):
    mb = MCBoost(conf_dict=conf(working_dir), logEN=False)
    with pytest.raises(Exception):
        mb.get_data(source='validation')


def test_random_xval_indices(working_dir):
    mb = MCBoost(conf_dict=conf(working_dir, xval_no=4), logEN=False)
    mb.set_xval_indices()
    assert mb.xval_indices.shape == (120,)
    assert sorted(set(mb.xval_indices)) == [1, 2, 3, 4]
    assert np.sum(mb.xval_indices == 1) == 30


def test_xval_indices_from_file(working_dir):
    indices = np.resize(np.arange(1, 4), 120)
    with h5py.File(os.path.join(working_dir, "train.h5"), 'a') as f:
        f.create_dataset('indices', data=indices)
    mb = MCBoost(conf_dict=conf(working_dir, xval_no=3), logEN=False)
    mb.set_xval_indices()
    assert mb.xval_indices.tolist() == indices.tolist()


def test_too_many_folds(working_dir):
    mb = MCBoost(conf_dict=conf(working_dir, xval_no=500), logEN=False)
    with pytest.raises(Exception):
        mb.set_xval_indices()


def test_run_with_test_and_xval(working_dir):
    mb = MCBoost(conf_dict=conf(working_dir, test_file='test.h5', xval_no=3),
                 logEN=True)
    reporter = mb.run()

    out = os.path.join(working_dir, "out_0")
    for name in ("summary.json", "training_err.png", "classifiers.png"):
        assert os.path.exists(os.path.join(out, name))

    with open(os.path.join(out, "summary.json")) as f:
        summary = ujson.load(f)
    assert len(summary['classifiers']) == 3
    assert len(summary['train_error']) == 3
    assert len(summary['validation_error']) == 3
    assert len(summary['test_error']) == 3
    assert summary['meta']['xvalEN'] is True
    assert summary['train_error'][-1] < 0.2
    assert summary['test_error'][-1] < 0.3
    for c in summary['classifiers']:
        assert 0.0 <= c['training_error'] <= 1.0
    matrix = np.array(summary['test_confusion']['matrix'])
    assert matrix.sum() == 60

    assert reporter.validation_predictions.shape == (120, 3)
    assert reporter.validation_error.shape == (3,)


def test_run_training_only(working_dir):
    mb = MCBoost(conf_dict=conf(working_dir, classifiers='stump'), logEN=False)
    reporter = mb.run()
    summary = reporter.summary()
    assert 'test_error' not in summary
    assert 'validation_error' not in summary
    assert summary['meta']['testEN'] is False
