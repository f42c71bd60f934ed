import numpy as np
from datetime import datetime
from mcboost.boost.adaboost import AdaBoost
from mcboost.boost.decision_tree import DecisionTree
from mcboost.boost.stump import DecisionStump
from mcboost.utility.jitter import UniformSource


def create_classifier(spec):
    """

    Build a fresh weak classifier from its configuration string

    Parameters
    ----------

    spec : String
        ``stump``, ``tree`` or ``tree:<depth>``

    """
    name, sep, arg = spec.partition(':')
    name = name.strip().lower()
    if name == 'stump' and not sep:
        return DecisionStump()
    elif name == 'tree':
        if not sep:
            return DecisionTree()
        try:
            depth = int(arg)
        except ValueError:
            raise Exception("Error : Tree depth must be an integer, got " +
                            str(arg))
        return DecisionTree(max_depth = depth)
    else:
        raise Exception("Error : Unknown weak classifier " + str(spec))


def create_classifiers(specs):
    return [create_classifier(spec) for spec in specs]


def staged_predictions(boosting, instances):
    """
    Returns an examples x classifiers matrix, column k holding the ensemble
    prediction with the first k+1 classifiers
    """
    classifier_no = len(boosting.get_weighted_classifiers())
    predictions = np.zeros([len(instances), classifier_no], dtype = "int64")
    for i, inst in enumerate(instances):
        predictions[i, :] = boosting.staged_predict(inst.features)
    return predictions


class Process():
    def __init__(self, mb, xval_ind):
        """

        Set up the environment for a boosting process

        Parameters
        ----------

        mb : mcboost.environment.mb.MCBoost object
            Contains data related to whole program

        xval_ind : integer
            Cross validation index, 0 trains on the whole dataset

        """
        self.xval_ind = xval_ind
        self.mb = mb
        self.isXvalMain = xval_ind == 0

        if self.isXvalMain:
            self.train_indices = np.ones(mb.total_exam_no, dtype = "bool")
        else:
            self.train_indices = (mb.xval_indices != xval_ind)
        self.train_exam_no = int(np.sum(self.train_indices))
        self.val_indices = None
        self.val_exam_no = None
        if not self.isXvalMain:
            self.val_indices = np.logical_not(self.train_indices)
            self.val_exam_no = int(np.sum(self.val_indices))

        self.boosting = None
        self.train_predictions = None
        self.val_predictions = None
        self.test_predictions = None

    def run(self):
        """

        Run the boosting process with given parameters.

        """
        random_source = UniformSource(seed = None if self.mb.seed is None
                                      else self.mb.seed + self.xval_ind)
        self.boosting = AdaBoost(create_classifiers(self.mb.classifiers),
                                 beta = self.mb.beta,
                                 max_retries = self.mb.max_retries,
                                 random_source = random_source,
                                 logEN = self.mb.debugEN)

        training_set = [self.mb.train_set[i]
                        for i in np.flatnonzero(self.train_indices)]
        self.boosting.train(training_set)

        if self.mb.logEN:
            for classifier, stats in self.boosting.get_weighted_classifiers().items():
                msg = "Info : %s vote weight %0.4f training error %0.4f" % (
                        classifier, stats.weight, stats.training_error)
                print(datetime.now(), "Xval", self.xval_ind, msg)

        if self.isXvalMain:
            self.train_predictions = staged_predictions(self.boosting,
                                                        training_set)
            if self.mb.testEN:
                self.test_predictions = staged_predictions(self.boosting,
                                                           self.mb.test_set)
        else:
            val_set = [self.mb.train_set[i]
                       for i in np.flatnonzero(self.val_indices)]
            self.val_predictions = staged_predictions(self.boosting, val_set)

    def get_statistics(self):
        """
        Returns a list of (classifier description, vote weight,
        training error) in registration order
        """
        return [(str(classifier), stats.weight, stats.training_error)
                for classifier, stats in
                self.boosting.get_weighted_classifiers().items()]
