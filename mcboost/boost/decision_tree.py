import numpy as np
from mcboost.boost.generic import WeakClassifier
from mcboost.boost.instance import to_arrays
from mcboost.boost.stump import best_split


class Node():
    def __init__(self, depth = 1):
        self.depth = depth
        self.left = None
        self.right = None
        self.isLeaf = True
        self.d1 = -1
        self.v = 0.0
        self.c = -1

    def insert_children(self, left, right):
        self.isLeaf = False
        self.left = left
        self.right = right

    def predict(self, features):
        if self.isLeaf:
            return self.c
        if features[self.d1] <= self.v:
            return self.left.predict(features)
        return self.right.predict(features)

    def append_to_list(self, li):
        li.append(self)
        if not self.isLeaf:
            self.left.append_to_list(li)
            self.right.append_to_list(li)

    def __str__(self):
        if self.isLeaf:
            return '< %i >' % (self.c,)
        else:
            return '< x[%i] <= %0.4f >\n%sleft %s\n%sright %s' % (
                        self.d1, self.v,
                        '\t' * self.depth, self.left,
                        '\t' * self.depth, self.right)


class DecisionTree(WeakClassifier):
    def __init__(self, max_depth = 2):
        """

        Depth limited decision tree trained against instance weights

        Parameters
        ----------

        max_depth : integer, optional
            Number of split levels, a tree of depth 1 is a stump

        """
        if max_depth < 1:
            raise Exception("Error : Tree depth must be positive.")
        self.max_depth = max_depth
        self.classes = None
        self.root = None

    def train(self, instances):
        data, label, weights = to_arrays(instances)
        self.classes = np.unique(label)
        self.root = self._grow(data, label, weights, depth = 1)

    def _grow(self, data, label, weights, depth):
        node = Node(depth = depth)
        mass = np.array([np.sum(weights[label == c]) for c in self.classes])
        node.c = int(self.classes[np.argmax(mass)])
        if depth > self.max_depth or np.unique(label).size < 2:
            return node

        d1, v = best_split(data, label, weights, self.classes)[1:3]
        left_mask = data[:, d1] <= v
        if np.all(left_mask) or not np.any(left_mask):
            return node

        right_mask = np.logical_not(left_mask)
        node.d1 = d1
        node.v = v
        node.insert_children(
            self._grow(data[left_mask], label[left_mask],
                       weights[left_mask], depth + 1),
            self._grow(data[right_mask], label[right_mask],
                       weights[right_mask], depth + 1))
        return node

    def predict(self, features):
        if self.root is None:
            raise Exception("Error : DecisionTree has not been trained.")
        return self.root.predict(features)

    def get_all_nodes(self):
        li = list()
        self.root.append_to_list(li)
        return li

    def __str__(self):
        if self.root is None:
            return '< untrained tree >'
        return str(self.root)
