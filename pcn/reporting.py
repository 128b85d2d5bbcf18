# pcn/reporting.py
import sys


class ConsoleReporter:
    """
    Writes training and evaluation results as plain text.
    Output order is the order of the calls; `training` replays epochs in
    the order they were recorded.
    """
    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def _print(self, *args):
        print(*args, file=self.stream)

    def line(self, text=''):
        self._print(text)

    def epoch(self, epoch, weights):
        self._print("Iteration: %d" % epoch)
        self._print("Weights:")
        for row in weights:
            self._print(" ".join("%.4f" % v for v in row))
        self._print()

    def final_outputs(self, outputs):
        self._print("Final outputs are:")
        for row in outputs:
            self._print(" ".join("%.0f" % v for v in row))

    def training(self, result):
        for rec in result.epochs:
            self.epoch(rec.epoch, rec.weights)
        self.final_outputs(result.final_outputs)

    def evaluation(self, ev):
        self._print("Confusion Matrix:")
        for row in ev.confusion:
            self._print(" ".join("%d" % c for c in row))
        self._print("Accuracy: %s" % format_accuracy(ev.accuracy, ev.n_samples))


def format_accuracy(accuracy, n_samples):
    """
    At least 4 decimals, more when 1/n_samples would not be visible.
    """
    digits = max(4, len(str(max(int(n_samples), 1))))
    return "%.*f" % (digits, accuracy)
