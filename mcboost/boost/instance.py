import numpy as np


class Instance():
    def __init__(self, features, label, weight = 0.0):
        """

        A labeled example carrying a sampling weight

        Parameters
        ----------

        features : sequence of floats
            Feature vector of the example

        label : integer
            Class id of the example

        weight : float, optional
            Importance of the example, managed by the booster

        """
        self.features = np.asarray(features, dtype = "float64")
        self.label = int(label)
        self.weight = float(weight)

    def __repr__(self):
        return 'Instance(label=%i, weight=%0.4f)' % (self.label, self.weight)


class ClassifierStatistics():
    def __init__(self):
        """Vote weight and raw training error of a single weak classifier"""
        self.weight = 0.0
        self.training_error = 0.0

    def __repr__(self):
        return 'ClassifierStatistics(weight=%0.4f, training_error=%0.4f)' % (
                                        self.weight, self.training_error)


def get_weights(instances):
    """
    Returns the weights of instances as a numpy array
    """
    return np.array([inst.weight for inst in instances], dtype = "float64")


def set_weights(instances, weights):
    """
    Writes a numpy array of weights back into the instances
    """
    for inst, w in zip(instances, weights):
        inst.weight = float(w)


def to_arrays(instances):
    """
    Stacks the instances into a feature matrix, a label vector and a
    weight vector
    """
    data = np.vstack([inst.features for inst in instances])
    label = np.array([inst.label for inst in instances], dtype = "int64")
    return data, label, get_weights(instances)
