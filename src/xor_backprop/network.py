import logging

import numpy as np

from xor_backprop.activation import sigmoid, sigmoid_derivative
from xor_backprop.layer import neurons, layer
from xor_backprop.params import parameters

log = logging.getLogger(__name__)


class network:
    ## I (input), H (hidden) and O (output)
    ##
    ## 1) forward: every hidden node takes the weighted sum of the inputs
    ##    minus its threshold through the sigmoid, then every output node
    ##    does the same over the hidden activations.
    ##
    ## 2) backward, for each output node o:
    ##    δo = y.o * (1 - y.o) * (t.o - y.o)
    ##    for each hidden node h:
    ##       Δw.ho = η * y.h * δo
    ##       δh    = y.h * (1 - y.h) * δo * w.ho
    ##       Δw.ih = η * y.i * δh
    ##       Δθ.h  = -η * δh
    ##    Δθ.o = -η * δo
    def __init__(self, params=None, **args):
        if params is None:
            params = parameters()
        if args:
            params = params.copy(**args)
        self.params = params.validate()

        self.learning_rate = params.learning_rate
        self.gradient_type = params.gradient
        try:
            self.gradient_routine = getattr(self, self.gradient_type + '_gradient')
        except AttributeError:
            raise ValueError('unknown gradient routine: %r' % self.gradient_type)

        self.input  = neurons(params.inputs, name='input')
        self.hidden = neurons(params.hidden, name='hidden')
        self.output = neurons(params.outputs, name='output')

        self.layers = [layer(self.input, self.hidden),
                       layer(self.hidden, self.output)]

        self.random = np.random.RandomState(params.seed)
        self.randomize()
        log.debug('created %r', self)

    def __repr__(self):
        return '<network %d-%d-%d rate: %s gradient: %s>' % (
            self.input.size, self.hidden.size, self.output.size,
            self.learning_rate, self.gradient_type)

    def randomize(self):
        ## thresholds in [0, 1) for hidden and output nodes,
        ## weights in [0, 2) for input -> hidden and hidden -> output
        for l in self.layers:
            l.next.randomize(self.random)
            l.randomize(self.random)

    @property
    def groups(self):
        return [self.input, self.hidden, self.output]

    @property
    def total_nodes(self):
        return self.input.size + self.hidden.size + self.output.size

    def output_index(self, n=0):
        return self.input.size + self.hidden.size + n

    @property
    def values(self):
        return np.concatenate([g.values for g in self.groups])

    @property
    def expected_values(self):
        return np.concatenate([g.expected for g in self.groups])

    @property
    def thresholds(self):
        return np.concatenate([g.thresholds for g in self.groups])

    @property
    def weight_matrix(self):
        """Square matrix where [i, j] is the weight from node i to node j.

        Only input -> hidden and hidden -> output entries are ever non-zero."""
        matrix = np.zeros((self.total_nodes, self.total_nodes))
        offset = 0
        for l in self.layers:
            start = offset + l.prev.size
            matrix[offset:start, start:start + l.next.size] = l.weights
            offset = start
        return matrix

    def _locate(self, index):
        if not 0 <= index < self.total_nodes:
            raise IndexError('node %d out of range' % index)
        for g in self.groups:
            if index < g.size:
                return g, index
            index -= g.size

    def set_threshold(self, index, value):
        group, i = self._locate(index)
        if group is self.input:
            raise ValueError('input node %d has no threshold' % index)
        group.thresholds[i] = value

    def set_weight(self, source, target, value):
        prev, i = self._locate(source)
        next, j = self._locate(target)
        for l in self.layers:
            if l.prev is prev and l.next is next:
                l.weights[i, j] = value
                return
        raise ValueError('no edge from node %d to node %d' % (source, target))

    def forward_pass(self):
        ## all hidden nodes are updated before any output node reads them
        for l in self.layers:
            l.next.values[:] = sigmoid(l.weighted_sum())
        return self.output.values

    def updated_gradient(self, o, output_gradient):
        ## the hidden -> output weight is moved first and the hidden
        ## gradient is taken from the moved weight
        hidden = self.hidden.values
        weights = self.layers[-1].weights
        weights[:, o] += self.learning_rate * hidden * output_gradient
        return sigmoid_derivative(hidden) * output_gradient * weights[:, o]

    def canonical_gradient(self, o, output_gradient):
        hidden = self.hidden.values
        weights = self.layers[-1].weights
        gradient = sigmoid_derivative(hidden) * output_gradient * weights[:, o]
        weights[:, o] += self.learning_rate * hidden * output_gradient
        return gradient

    def backwards_pass(self):
        """Update weights and thresholds from the current values.

        Returns the sum of squared errors over the output nodes."""
        hidden_layer = self.layers[0]
        rate = self.learning_rate
        total = 0.0

        ## we only look at the output nodes for error calculation
        for o in range(self.output.size):
            actual = self.output.values[o]
            error = self.output.expected[o] - actual
            total += error ** 2
            output_gradient = sigmoid_derivative(actual) * error

            hidden_gradient = self.gradient_routine(o, output_gradient)
            hidden_layer.weights += np.outer(rate * self.input.values, hidden_gradient)
            self.hidden.thresholds += rate * -1 * hidden_gradient

            self.output.thresholds[o] += rate * -1 * output_gradient

        return float(total)

    @property
    def error(self):
        error = self.output.expected - self.output.values
        return float(np.sum(error ** 2))
