class FractionalMultiSet():
    """
    Multiset whose multiplicities are real numbers.

    Used as the ballot box of a weighted vote: every ``add`` puts ``amount``
    more mass on ``key``.
    """

    def __init__(self):
        self.__counts = dict()

    def add(self, key, amount = 1.0):
        self.__counts[key] = self.__counts.get(key, 0.0) + amount

    def count(self, key):
        return self.__counts.get(key, 0.0)

    def items(self):
        return self.__counts.items()

    def __iter__(self):
        return iter(self.__counts.items())

    def __len__(self):
        return len(self.__counts)

    def __contains__(self, key):
        return key in self.__counts
