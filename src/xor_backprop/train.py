import logging

from xor_backprop.dataset import sample_maker, XOR

log = logging.getLogger(__name__)

REPORT_FORMAT = 'in: %s %s out: %s expected: %s error: %s'


class train:
    def __init__(self, module, sampler=None, params=None):
        self.module = module
        self.sampler = sampler if sampler is not None else sample_maker(module)
        self.params = params if params is not None else module.params
        self.iteration = 0

    def step(self):
        self.sampler.train()
        self.module.forward_pass()
        return self.module.backwards_pass()

    def report_line(self, error):
        m = self.module
        return REPORT_FORMAT % (m.input.values[0], m.input.values[1],
                                m.output.values[0], m.output.expected[0], error)

    def train(self, iterations=None, report=None):
        """Run a fixed number of iterations, one XOR row per iteration.

        `report` is called with a line for each of the final iterations.
        Returns the error of every iteration."""
        if iterations is None:
            iterations = self.params.iterations
        window = self.params.report_window
        errors = []
        log.debug('training %r for %d iterations', self.module, iterations)
        for i in range(iterations):
            error = self.step()
            errors.append(error)
            self.iteration += 1
            if report is not None and i > iterations - window:
                report(self.report_line(error))
        log.debug('finished at iteration %d, last error %s',
                  self.iteration, errors[-1] if errors else None)
        return errors

    def evaluate(self):
        """Forward every XOR row through the network without learning."""
        results = []
        for which in range(len(XOR)):
            inputs, desired = self.sampler.set_xor(which)
            output = self.module.forward_pass()
            results.append((inputs, float(output[0]), desired))
        return results
