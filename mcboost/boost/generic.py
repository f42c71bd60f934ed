from abc import ABCMeta, abstractmethod


class WeakClassifier(metaclass=ABCMeta):
    """
    Capability every member of an ensemble has to provide.

    Subclasses only need ``train`` and ``predict``; the booster never looks
    inside them.
    """

    @abstractmethod
    def train(self, instances):
        """
        Fit the classifier against a list of weighted instances
        """
        raise NotImplementedError("Should have implemented this")

    @abstractmethod
    def predict(self, features):
        """
        Return the integer class label for a single feature vector
        """
        raise NotImplementedError("Should have implemented this")


class NonConvergenceError(Exception):
    def __init__(self, classifier, attempts):
        self.classifier = classifier
        self.attempts = attempts
        msg = "Error : %s was rejected %i times in a row." % (classifier,
                                                            attempts)
        Exception.__init__(self, msg)
