import numpy as np
from mcboost.boost.adaboost import AdaBoost
from mcboost.boost.instance import Instance
from mcboost.boost.process import create_classifiers
from mcboost.utility.jitter import UniformSource


class MCBoostLite():

    def __init__(self,
                 classifiers=('stump',),
                 max_retries=1000,
                 beta=1.5,
                 seed=None,
                 logEN=False):
        self.classifiers = tuple(classifiers)
        self.max_retries = max_retries
        self.beta = beta
        self.seed = seed
        self.logEN = logEN
        self.fitted = None

    def fit(self, X, y):
        X = np.asarray(X, dtype="float64")
        if X.ndim == 1:
            X = X[:, np.newaxis]
        y = np.asarray(y)
        if X.shape[0] != y.shape[0]:
            raise ValueError("Error : X has %i examples but y has %i labels."
                             % (X.shape[0], y.shape[0]))
        training_set = [Instance(features=X[i], label=y[i])
                        for i in range(X.shape[0])]

        boosting = AdaBoost(create_classifiers(self.classifiers),
                            beta=self.beta,
                            max_retries=self.max_retries,
                            random_source=UniformSource(seed=self.seed),
                            logEN=self.logEN)
        boosting.train(training_set)
        self.fitted = boosting
        return self.predict(X)

    def predict(self, X):
        if self.fitted is None:
            raise Exception("Error : MCBoostLite has not been fitted.")
        X = np.asarray(X, dtype="float64")
        if X.ndim == 1:
            X = X[:, np.newaxis]
        return np.array([self.fitted.predict(x) for x in X], dtype="int64")

    def statistics(self):
        """
        Returns (vote weight, training error) of each weak classifier
        """
        if self.fitted is None:
            raise Exception("Error : MCBoostLite has not been fitted.")
        return [(stats.weight, stats.training_error) for stats in
                self.fitted.get_weighted_classifiers().values()]
