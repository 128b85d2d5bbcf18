# pcn/__init__.py
from pcn.errors import AllocationFailure, DimensionMismatch, MalformedTarget, PerceptronError
from pcn.evaluation import Evaluation, confusion_matrix
from pcn.perceptron import EpochRecord, Perceptron, TrainingResult

__version__ = '0.1.0'
