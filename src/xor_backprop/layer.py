import numpy as np

## initial weights are drawn uniformly from [0, WEIGHT_SCALE)
WEIGHT_SCALE = 2.0


class neurons:
    """A group of nodes sharing a layer (input, hidden or output).

    `expected` only matters for output nodes, `thresholds` only for
    hidden and output nodes."""
    values     = None
    expected   = None
    thresholds = None

    def __init__(self, neurons, name=None):
        self.neurons    = neurons
        self.name       = name
        self.values     = np.zeros(neurons)
        self.expected   = np.zeros(neurons)
        self.thresholds = np.zeros(neurons)

    def __repr__(self):
        return '<neurons %s size: %d>' % (self.name, self.size)

    @property
    def size(self):
        return self.neurons

    def randomize(self, random):
        self.thresholds[:] = random.rand(self.size)


class layer:
    """Weighted connections from every node of `prev` to every node of `next`.

    weights[i, j] is the weight from prev node i to next node j."""
    weights = None
    prev = None
    next = None

    def __init__(self, previous_neurons, next_neurons):
        previous = previous_neurons.size
        next     = next_neurons.size

        self.prev  = previous_neurons
        self.next  = next_neurons

        self.weights = np.zeros((previous, next))

    def __repr__(self):
        return '<layer prev size:%d next size: %d>' % (self.prev.size, self.next.size)

    def randomize(self, random):
        self.weights[:] = random.rand(self.prev.size, self.next.size) * WEIGHT_SCALE

    def weighted_sum(self):
        return np.dot(self.prev.values, self.weights) - self.next.thresholds
