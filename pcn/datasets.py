# pcn/datasets.py
import numpy as np

_GATE_INPUTS = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]

GATES = {
    'AND': [0, 0, 0, 1],
    'OR':  [0, 1, 1, 1],
    'XOR': [0, 1, 1, 0],
}


def logic_gate(name):
    """
    Two-input truth table as (inputs (4,2), targets (4,1)).
    XOR is not linearly separable and is included on purpose.
    """
    key = name.upper()
    if key not in GATES:
        raise ValueError("Unknown dataset %r (expected one of %s)" % (name, ', '.join(GATES)))
    inputs = np.array(_GATE_INPUTS, dtype=float)
    targets = np.array(GATES[key], dtype=float).reshape(-1, 1)
    return inputs, targets


def one_hot(labels, n_classes):
    labels = np.asarray(labels, dtype=int)
    if labels.size and (labels.min() < 0 or labels.max() >= n_classes):
        raise ValueError("labels must lie in [0, %d)" % n_classes)
    out = np.zeros((labels.shape[0], n_classes), dtype=float)
    out[np.arange(labels.shape[0]), labels] = 1.0
    return out


def parse_custom_points(txt, n_out=1):
    """
    Parse lines of x1,...,xn,y into (inputs, targets).
    With n_out == 1, y is the 0/1 target itself; with n_out > 1, y is a class
    index in [0, n_out) and targets are one-hot rows.
    """
    rows = []
    for ln in txt.splitlines():
        ln = ln.strip()
        if not ln or ln.startswith('#'):
            continue
        parts = [p.strip() for p in ln.split(',')]
        if len(parts) < 2:
            raise ValueError("Each custom line must be x1,...,xn,y (got %r)" % ln)
        try:
            rows.append([float(p) for p in parts])
        except ValueError:
            raise ValueError("Non-numeric value in line %r" % ln)
        if len(rows[-1]) != len(rows[0]):
            raise ValueError("All lines must have %d values, got %d in %r" % (len(rows[0]), len(parts), ln))
    if not rows:
        raise ValueError("No points given")

    data = np.array(rows, dtype=float)
    inputs = data[:, :-1]
    labels = data[:, -1]
    if n_out == 1:
        targets = labels.reshape(-1, 1)
    else:
        if not np.all(labels == np.round(labels)):
            raise ValueError("Class labels must be integers when n_out > 1")
        targets = one_hot(labels, n_out)
    return inputs, targets
