import os

import pytest

from mcboost import plot, run
from mcboost.boost.decision_tree import DecisionTree
from mcboost.boost.process import create_classifier, create_classifiers
from mcboost.boost.stump import DecisionStump
from mcboost.demo.make_demo_data import write_dataset
from mcboost.utility.multiset import FractionalMultiSet


def test_parse_conf_intervals():
    assert run.parse_conf_intervals(['2', '4-6', '9']) == [2, 4, 5, 6, 9]
    with pytest.raises(Exception):
        run.parse_conf_intervals(['1-2-3'])


def test_create_classifiers():
    stump, tree, deep = create_classifiers(['stump', 'tree', 'tree:4'])
    assert isinstance(stump, DecisionStump)
    assert isinstance(tree, DecisionTree) and tree.max_depth == 2
    assert deep.max_depth == 4


@pytest.mark.parametrize("spec", ['forest', 'tree:x', 'stump:2'])
def test_unknown_classifier(spec):
    with pytest.raises(Exception):
        create_classifier(spec)


def test_main_runs_configurations(tmp_path, capsys):
    write_dataset(str(tmp_path / "train.h5"), 90, seed=0)
    cfg = tmp_path / "configurations.cfg"
    cfg.write_text("[Configuration 5]\n"
                   "train_file = train.h5\n"
                   "classifiers = stump, stump\n"
                   "seed = 1\n"
                   "working_dir = %s\n" % (tmp_path,))

    assert run.main(['-cp', str(cfg), '5']) == 0
    summary_fp = str(tmp_path / "out_5" / "summary.json")
    assert os.path.exists(summary_fp)

    plot.main(['-ro', 'y', summary_fp])
    out = capsys.readouterr().out
    assert "Training Error of the final classifier" in out


def test_main_reports_failure(tmp_path, capsys):
    cfg = tmp_path / "configurations.cfg"
    cfg.write_text("[Configuration 1]\ntrain_file = missing.h5\n"
                   "working_dir = %s\n" % (tmp_path,))
    assert run.main(['-cp', str(cfg), '1']) == 1
    assert "Traceback" in capsys.readouterr().out


def test_fractional_multiset():
    votes = FractionalMultiSet()
    votes.add(3, 0.25)
    votes.add(1, 1.0)
    votes.add(3, 0.5)
    assert votes.count(3) == pytest.approx(0.75)
    assert votes.count(8) == 0.0
    assert 1 in votes and 8 not in votes
    assert len(votes) == 2
    assert sorted(votes) == [(1, 1.0), (3, 0.75)]
