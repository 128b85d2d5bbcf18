# pcn/cli.py
import argparse
import sys

from pcn.config import DEFAULT_EPOCHS, DEFAULT_ETA, TrainingConfig
from pcn.datasets import GATES, logic_gate, parse_custom_points
from pcn.errors import PerceptronError
from pcn.evaluation import confusion_matrix
from pcn.perceptron import Perceptron
from pcn.reporting import ConsoleReporter


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog='pcn', description="Train a batch perceptron and print its confusion matrix")
    p.add_argument("--dataset", choices=sorted(GATES), default='AND', help="Logic gate to learn (default: AND)")
    p.add_argument("--points", type=argparse.FileType('r'), default=None,
                   help="File with one x1,...,xn,y point per line; overrides --dataset")
    p.add_argument("--classes", type=int, default=1,
                   help="Number of outputs. >1 treats y in --points as a class index (default: 1)")
    p.add_argument("--eta", type=float, default=DEFAULT_ETA, help="Learning rate (default: %(default)s)")
    p.add_argument("--epochs", type=int, default=DEFAULT_EPOCHS, help="Training epochs (default: %(default)s)")
    p.add_argument("--seed", type=int, default=None, help="Seed for the initial weights (default: clock)")
    return p.parse_args(argv)


def run(inputs, targets, config, reporter):
    """Train a fresh model on the dataset, report, and return (model, result, evaluation)."""
    model = Perceptron.from_dataset(inputs, targets, rng=config.seed)

    reporter.line("Training Perceptron...")
    result = model.train(inputs, targets, config.eta, config.epochs, callback=reporter.epoch)
    reporter.final_outputs(result.final_outputs)

    reporter.line()
    ev = confusion_matrix(model, inputs, targets)
    reporter.evaluation(ev)
    return model, result, ev


def main(argv=None):
    args = parse_args(argv)
    try:
        config = TrainingConfig(eta=args.eta, epochs=args.epochs, seed=args.seed)
        if args.points is not None:
            with args.points as fh:
                inputs, targets = parse_custom_points(fh.read(), n_out=args.classes)
        else:
            inputs, targets = logic_gate(args.dataset)
        run(inputs, targets, config, ConsoleReporter())
    except (PerceptronError, ValueError) as e:
        print("error: %s" % e, file=sys.stderr)
        return 1
    return 0
