# graph_search/learning/knn.py
# k-nearest-neighbour classifier on a small numeric dataset (NumPy only).
# Independent of the search package; lives here as a companion utility.
from __future__ import annotations
import argparse
import logging
import sys
from typing import Tuple

import numpy as np

logger = logging.getLogger(__name__)


# ------------------------- loading -------------------------

def load_dataset(path: str, space: int = 2) -> np.ndarray:
    """
    Comma-separated rows: `space` coordinates followed by the class label.
    Extra trailing columns are ignored.
    """
    table = np.loadtxt(path, delimiter=",", ndmin=2, dtype=float)
    if table.shape[1] < space + 1:
        raise ValueError(f"{path}: expected at least {space + 1} columns, got {table.shape[1]}")
    return table[:, :space + 1]


def load_point(path: str, space: int = 2) -> np.ndarray:
    """First line of `path`, comma-separated coordinates."""
    with open(path, encoding="utf-8") as f:
        line = f.readline()
    point = np.array([float(v) for v in line.replace(",", " ").split()], dtype=float)
    if point.size < space:
        raise ValueError(f"{path}: expected {space} coordinates, got {point.size}")
    return point[:space]


# ------------------------- k-NN core -------------------------

def euclidean_distance(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.sqrt(np.sum((np.asarray(a, dtype=float) - np.asarray(b, dtype=float)) ** 2)))


def get_neighbors(dataset: np.ndarray, point: np.ndarray, k: int) -> np.ndarray:
    """The k rows of `dataset` closest to `point`, nearest first (ties keep dataset order)."""
    dataset = np.asarray(dataset, dtype=float)
    point = np.asarray(point, dtype=float)
    if not 0 < k <= len(dataset):
        raise ValueError(f"k must be in [1, {len(dataset)}], got {k}")
    space = point.shape[0]
    d = np.sqrt(np.sum((dataset[:, :space] - point) ** 2, axis=1))
    order = np.argsort(d, kind="stable")
    return dataset[order[:k]]


def predict_classification(dataset: np.ndarray, point: np.ndarray, k: int) -> Tuple[int, int]:
    """
    Majority vote over the k nearest neighbours.
    Returns (label, confidence) with confidence an integer percentage. When two classes
    tie, the one whose nearest member is closer wins.
    """
    neighbors = get_neighbors(dataset, point, k)
    labels = neighbors[:, -1].astype(int)
    classes, first, counts = np.unique(labels, return_index=True, return_counts=True)
    best = max(range(len(classes)), key=lambda i: (counts[i], -first[i]))
    label, votes = int(classes[best]), int(counts[best])
    logger.info("point %s -> class %d (%d/%d neighbours)", point.tolist(), label, votes, k)
    return label, votes * 100 // k


# ------------------------- CLI -------------------------

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="k-nearest-neighbour classification of one point.")
    ap.add_argument("space", type=int, help="dimension of the points")
    ap.add_argument("k", type=int, help="number of neighbours")
    ap.add_argument("dataset", help="CSV of training points, last column is the class")
    ap.add_argument("point", help="CSV holding the point to classify")
    args = ap.parse_args(argv)

    try:
        dataset = load_dataset(args.dataset, args.space)
        point = load_point(args.point, args.space)
        label, confidence = predict_classification(dataset, point, args.k)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Predicting class for point: [{', '.join(f'{v:g}' for v in point)}]")
    print(f"  Prediction: {label}")
    print(f"  Confidence: {confidence}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
