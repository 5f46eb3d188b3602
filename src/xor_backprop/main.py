from optparse import OptionParser
import cProfile
import logging
import pstats
import sys

import numpy as np

from xor_backprop.network import network
from xor_backprop.params import parameters
from xor_backprop.train import train

BANNER = 'Neural Network Program'


def build_parser():
    parser = OptionParser(usage='%prog [options]')
    parser.add_option("-d", "--debug", dest="debug", action="store_true",
                      help="profile the training run and log at debug level")
    parser.add_option("-s", "--seed", dest="seed", type="int",
                      help="seed for the initial weights and thresholds")
    return parser


def run(params, out=None):
    if out is None:
        out = sys.stdout
    report = lambda line: print(line, file=out)

    print(BANNER, file=out)
    net = network(params)
    trainer = train(net)
    trainer.train(report=report)

    with np.printoptions(precision=8, suppress=True):
        print(net.weight_matrix, file=out)
        print(net.thresholds, file=out)
    return net


def main(argv=None):
    (options, args) = build_parser().parse_args(argv)
    params = parameters(seed=options.seed)

    if options.debug:
        logging.basicConfig(level=logging.DEBUG)
        profile = cProfile.Profile()
        profile.runcall(run, params)
        s = pstats.Stats(profile)
        s.strip_dirs().sort_stats("time").print_stats(20)
    else:
        run(params)
    return 0


if __name__ == "__main__":
    sys.exit(main())
