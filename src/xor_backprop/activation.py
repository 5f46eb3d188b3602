import numpy as np


def sigmoid(x):
    """Logistic function 1 / (1 + e^-x).

    Very negative sums overflow the exponential; that is allowed and the
    result saturates to 0 (or to 1 for very positive sums)."""
    with np.errstate(over='ignore'):
        return 1.0 / (1.0 + np.exp(-x))


def sigmoid_derivative(y):
    ## y is an activation, not a weighted sum
    return y * (1.0 - y)
