# pcn_ui/plot3d.py
import numpy as np
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  (needed for 3D)

from pcn.matrix import add_bias_column


def score_grid(model, X, resolution=60, output=0):
    """
    Raw linear score of one output over a grid spanning X (N, 2).
    Returns xx, yy, Z all shaped (resolution, resolution).
    """
    X = np.asarray(X, dtype=float)
    if X.ndim != 2 or X.shape[1] != 2:
        raise ValueError("score_grid expects X with shape (N, 2)")

    x_min, x_max = X[:, 0].min() - 1, X[:, 0].max() + 1
    y_min, y_max = X[:, 1].min() - 1, X[:, 1].max() + 1
    xx, yy = np.meshgrid(
        np.linspace(x_min, x_max, resolution),
        np.linspace(y_min, y_max, resolution)
    )
    grid = add_bias_column(np.c_[xx.ravel(), yy.ravel()])
    Z = model.raw_output(grid)[:, output].reshape(xx.shape)
    return xx, yy, Z


def show_score_surface(model, X, resolution=60, output=0):
    """
    Plot the plane of raw scores for a 2-input model; the z = 0 contour is
    where the step activation flips.
    """
    xx, yy, Z = score_grid(model, X, resolution, output)
    X = np.asarray(X, dtype=float)

    fig = plt.figure(figsize=(11, 7))
    ax = fig.add_subplot(111, projection='3d')

    surf = ax.plot_surface(xx, yy, Z, cmap="coolwarm", edgecolor='none', alpha=0.85)
    fig.colorbar(surf, ax=ax, shrink=0.5, aspect=8)
    ax.contour(xx, yy, Z, levels=[0.0], colors='k', offset=0.0)

    scores = model.raw_output(add_bias_column(X))[:, output]
    ax.scatter(X[:, 0], X[:, 1], scores, color='black', s=40)

    ax.set_xlabel("X1")
    ax.set_ylabel("X2")
    ax.set_zlabel("score (output %d)" % output)
    ax.set_title("Perceptron score plane")

    plt.show()
