import numpy as np


class UniformSource():
    def __init__(self, seed = None):
        """

        Source of uniformly distributed doubles

        Parameters
        ----------

        seed : integer, optional
            Seed of the underlying generator, random if None

        """
        self.seed = seed
        self.rs = np.random.RandomState(seed)

    def double_between(self, lo, hi):
        """
        Returns a uniform double in [lo, hi)
        """
        return self.rs.uniform(lo, hi)
