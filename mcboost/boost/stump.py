import numpy as np
from numexpr import evaluate
from mcboost.boost.generic import WeakClassifier
from mcboost.boost.instance import to_arrays


def best_split(data, label, weights, classes):
    """

    Find the single threshold split with the least weighted error

    Parameters
    ----------

    data : numpy float array
        Examples x features matrix

    label : numpy int array
        Class of each example

    weights : numpy float array
        Distribution over examples

    classes : numpy int array
        Sorted class ids that may be predicted

    Returns:
        err_best : The weighted error of the best split
        d1 : Index of the feature
        v : Threshold, examples with value <= v go to the left
        c0 : Prediction for values lower than or equal to threshold
        c1 : Prediction for values larger than threshold
    """
    exam_no, feature_no = data.shape
    mass = weights[:, np.newaxis] * (label[:, np.newaxis] == classes)
    total = np.float64(np.sum(weights))

    err_best = np.inf
    best = None
    for d1 in range(feature_no):
        index = np.argsort(data[:, d1], kind = "mergesort")
        vals = data[index, d1]

        """Class mass at or below, and above, each candidate threshold"""
        w0 = np.cumsum(mass[index], axis = 0)
        w1 = w0[-1] - w0
        w0_max = np.amax(w0, axis = 1)
        w1_max = np.amax(w1, axis = 1)
        err = evaluate("total - w0_max - w1_max",
                       local_dict = {'total': total,
                                     'w0_max': w0_max,
                                     'w1_max': w1_max})

        # Only cut between distinct values; the last row puts all on the left
        valid = np.ones(exam_no, dtype = "bool")
        valid[:-1] = vals[:-1] < vals[1:]
        err[np.logical_not(valid)] = np.inf

        d2 = np.argmin(err)
        if err[d2] < err_best:
            err_best = err[d2]
            c0 = classes[np.argmax(w0[d2])]
            if d2 < exam_no - 1:
                v = (vals[d2] + vals[d2 + 1]) / 2.0
                c1 = classes[np.argmax(w1[d2])]
            else:
                v = vals[d2]
                c1 = c0
            best = (float(err_best), d1, float(v), int(c0), int(c1))
    return best


class DecisionStump(WeakClassifier):
    def __init__(self):
        """

        Multi-class decision stump trained against instance weights

        A single feature is compared against a threshold, each side predicts
        the heaviest class it holds.

        """
        self.err = None
        self.d1 = None
        self.v = None
        self.c0 = None
        self.c1 = None

    def train(self, instances):
        data, label, weights = to_arrays(instances)
        classes = np.unique(label)
        self.err, self.d1, self.v, self.c0, self.c1 = best_split(data, label,
                                                                 weights,
                                                                 classes)

    def predict(self, features):
        if self.d1 is None:
            raise Exception("Error : DecisionStump has not been trained.")
        if features[self.d1] <= self.v:
            return self.c0
        return self.c1

    def __str__(self):
        if self.d1 is None:
            return '< untrained stump >'
        return '< x[%i] <= %0.4f ? %i : %i >' % (self.d1, self.v,
                                                 self.c0, self.c1)
