import numpy as np
from datetime import datetime
from types import MappingProxyType
from numexpr import evaluate
from mcboost.boost.generic import NonConvergenceError
from mcboost.boost.instance import ClassifierStatistics, get_weights, set_weights
from mcboost.utility.jitter import UniformSource
from mcboost.utility.multiset import FractionalMultiSet

NO_PREDICTION = -1

"""Vote weight of a classifier that makes no weighted mistake is 10 + ln(L-1)"""
ZERO_ERROR_CONFIDENCE = 10.0


class AdaBoost():
    def __init__(self,
                 classifiers,
                 beta = 1.5,
                 max_retries = 1000,
                 random_source = None,
                 logEN = False):
        """

        Multi-class AdaBoost over a fixed pool of weak classifiers

        Every classifier is trained once, in the given order, against the
        weights left behind by its predecessors. A classifier that does not
        beat random guessing among L classes, i.e. weighted error >= (L-1)/L,
        is rejected: the weights are jiggled and the same classifier is
        trained again.

        Parameters
        ----------

        classifiers : iterable of WeakClassifier
            Ensemble members, keyed by identity

        beta : float, optional
            Jiggle bound is 1 / N**beta for N training examples

        max_retries : integer or None, optional
            Number of rejections tolerated per classifier before
            NonConvergenceError is raised. None retries forever.

        random_source : UniformSource, optional
            Provider of the jiggle noise

        logEN : boolean, optional
            Flag to enable logging

        """
        self.weighted_classifiers = dict()
        for classifier in classifiers:
            self.weighted_classifiers[classifier] = ClassifierStatistics()
        self.beta = beta
        self.max_retries = max_retries
        if random_source is None:
            random_source = UniformSource()
        self.random_source = random_source
        self.logEN = logEN

    def train(self, training_set):
        """

        Train every classifier and commit its statistics

        Parameters
        ----------

        training_set : list of Instance
            Non-empty training examples. Their weights are overwritten.

        """
        if len(training_set) == 0:
            raise ValueError("Error : Cannot train on an empty training set.")

        self.initialize_uniform_weights(training_set)
        L = self.get_number_of_different_labels(training_set)

        for classifier, statistics in self.weighted_classifiers.items():
            rejections = 0
            isValid = False
            while not isValid:
                classifier.train(training_set)
                isValid = self.update_weights(classifier, statistics,
                                              training_set, L)
                if not isValid:
                    rejections += 1
                    if (self.max_retries is not None and
                        rejections > self.max_retries):
                        raise NonConvergenceError(classifier, rejections)

    def predict(self, features):
        """
        Returns the label with the largest vote mass, or NO_PREDICTION if no
        label received a positive vote
        """
        class_voting = FractionalMultiSet()
        for classifier, statistics in self.weighted_classifiers.items():
            predicted_class = int(classifier.predict(features))
            class_voting.add(predicted_class, statistics.weight)
        return self.elect(class_voting)

    def staged_predict(self, features):
        """
        Returns the ensemble prediction after each classifier, in
        registration order, has cast its vote
        """
        class_voting = FractionalMultiSet()
        staged = list()
        for classifier, statistics in self.weighted_classifiers.items():
            predicted_class = int(classifier.predict(features))
            class_voting.add(predicted_class, statistics.weight)
            staged.append(self.elect(class_voting))
        return staged

    @staticmethod
    def elect(class_voting):
        """
        Strictly greatest positive mass wins, lowest label on ties
        """
        predicted_class = NO_PREDICTION
        best_vote = 0.0
        for clazz, vote in sorted(class_voting.items()):
            if vote > best_vote:
                best_vote = vote
                predicted_class = clazz
        return predicted_class

    def get_weighted_classifiers(self):
        """
        Returns a read-only view of the classifier to statistics mapping
        """
        return MappingProxyType(self.weighted_classifiers)

    def update_weights(self, classifier, statistics, training_set, L):
        """

        Measure a freshly trained classifier and update the distribution

        Returns
            True if the classifier is accepted, False if it has to be
            trained again

        """
        weights = get_weights(training_set)
        label = np.array([inst.label for inst in training_set])
        predictions = np.array([classifier.predict(inst.features)
                                for inst in training_set])
        missed = predictions != label

        error = float(np.sum(weights[missed]))
        training_error = np.count_nonzero(missed) / float(len(training_set))
        bound = (L - 1) / float(L)

        if error >= bound:
            if self.logEN:
                msg = "Info : Rejected %s with weighted error %0.4f." % (
                                                            classifier, error)
                print(datetime.now(), msg)
            self.jiggle_weights(training_set)
            return False
        elif error > 0:
            factor = ((1.0 - error) / error) * (L - 1)
            weights = evaluate("where(missed, weights * factor, weights)",
                               local_dict = {'missed': missed,
                                             'weights': weights,
                                             'factor': factor})
            set_weights(training_set, weights)
            self.normalize_weights(training_set)
            statistics.weight = float(np.log((1.0 - error) / error))
            statistics.training_error = training_error
        else:
            self.jiggle_weights(training_set)
            statistics.weight = ZERO_ERROR_CONFIDENCE + float(np.log(L - 1))
            statistics.training_error = training_error

        if self.logEN:
            msg = "Info : Accepted %s with weighted error %0.4f," % (
                                                            classifier, error)
            msg = msg + " vote weight %0.4f." % (statistics.weight,)
            print(datetime.now(), msg)
        return True

    def jiggle_weights(self, training_set):
        """
        Adds uniform noise in [-1/N**beta, 1/N**beta) to every weight,
        clamps at zero and renormalizes
        """
        bound = 1.0 / np.power(len(training_set), self.beta)
        for inst in training_set:
            weight = inst.weight + self.random_source.double_between(-bound,
                                                                     bound)
            inst.weight = max(0.0, weight)
        self.normalize_weights(training_set)

    @staticmethod
    def initialize_uniform_weights(training_set):
        weight = 1.0 / len(training_set)
        for inst in training_set:
            inst.weight = weight

    @staticmethod
    def normalize_weights(training_set):
        weights = get_weights(training_set)
        total_weight = np.sum(weights)
        if not total_weight > 0:
            raise ValueError("Error : Instance weights sum to %s, " %
                             (total_weight,) + "cannot normalize.")
        set_weights(training_set, weights / total_weight)

    @staticmethod
    def get_number_of_different_labels(training_set):
        return len(set(inst.label for inst in training_set))
