## note that this only works for a single layer of depth
INPUT_NODES  = 2
OUTPUT_NODES = 1
HIDDEN_NODES = 2

## 15000 iterations is a good point for playing with learning rate
MAX_ITERATIONS = 130000

## setting this too low makes everything change very slowly, but too high
## makes it jump at each and every example and oscillate
LEARNING_RATE = 0.5

## the last few iterations are reported
REPORT_WINDOW = 5

## hidden error gradient routine, see network.updated_gradient
GRADIENT = 'updated'


class parameters:
    inputs        = INPUT_NODES
    hidden        = HIDDEN_NODES
    outputs       = OUTPUT_NODES
    iterations    = MAX_ITERATIONS
    learning_rate = LEARNING_RATE
    report_window = REPORT_WINDOW
    gradient      = GRADIENT
    seed          = None

    def __init__(self, **args):
        for key, value in args.items():
            if not hasattr(parameters, key):
                raise TypeError('unknown parameter: %s' % key)
            setattr(self, key, value)

    def __repr__(self):
        return '<parameters %d-%d-%d rate: %s iterations: %d>' % (
            self.inputs, self.hidden, self.outputs,
            self.learning_rate, self.iterations)

    def copy(self, **args):
        """Return new parameters with `args` overriding the current values."""
        values = dict((k, getattr(self, k)) for k in self.names())
        values.update(args)
        return parameters(**values)

    @staticmethod
    def names():
        return ['inputs', 'hidden', 'outputs', 'iterations', 'learning_rate',
                'report_window', 'gradient', 'seed']

    @property
    def total_nodes(self):
        return self.inputs + self.hidden + self.outputs

    def validate(self):
        for name in ('inputs', 'hidden', 'outputs'):
            count = getattr(self, name)
            if int(count) != count or count < 1:
                raise ValueError('%s must be a positive integer, got %r' % (name, count))
        if not self.learning_rate > 0.0:
            raise ValueError('learning_rate must be positive, got %r' % self.learning_rate)
        if self.iterations < 0:
            raise ValueError('iterations must not be negative, got %r' % self.iterations)
        return self
