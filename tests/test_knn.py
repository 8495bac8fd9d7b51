"""Tests for the k-nearest-neighbour utility."""

import numpy as np
import pytest

from graph_search.learning.knn import (
    euclidean_distance,
    get_neighbors,
    load_dataset,
    load_point,
    main,
    predict_classification,
)

DATASET = np.array(
    [
        [1.0, 1.0, 0],
        [1.5, 2.0, 0],
        [2.0, 1.0, 0],
        [8.0, 8.0, 1],
        [9.0, 8.5, 1],
    ]
)


def test_euclidean_distance():
    assert euclidean_distance([0, 0], [3, 4]) == pytest.approx(5.0)


def test_get_neighbors_nearest_first():
    near = get_neighbors(DATASET, np.array([8.5, 8.0]), 2)
    assert near[:, -1].tolist() == [1, 1]
    assert near[0].tolist() == [8.0, 8.0, 1]


@pytest.mark.parametrize("k", [0, 6])
def test_get_neighbors_bad_k(k):
    with pytest.raises(ValueError):
        get_neighbors(DATASET, np.array([0.0, 0.0]), k)


def test_predict_majority():
    assert predict_classification(DATASET, np.array([1.2, 1.3]), 3) == (0, 100)
    assert predict_classification(DATASET, np.array([7.0, 7.0]), 3) == (1, 66)


def test_predict_tie_goes_to_nearest_class():
    # the nearer class carries the larger label and sits later in the dataset
    data = np.array([[3.0, 0.0, 5], [0.0, 0.0, 7]])
    assert predict_classification(data, np.array([1.0, 0.0]), 2) == (7, 50)


def test_cli(tmp_path, capsys):
    data = tmp_path / "data.csv"
    point = tmp_path / "point.csv"
    np.savetxt(data, DATASET, delimiter=",")
    point.write_text("8.2,8.1\n")

    assert load_dataset(str(data)).shape == (5, 3)
    assert load_point(str(point)).tolist() == [8.2, 8.1]

    assert main(["2", "3", str(data), str(point)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Predicting class for point: [8.2, 8.1]",
        "  Prediction: 1",
        "  Confidence: 66",
    ]


def test_cli_missing_file(tmp_path, capsys):
    assert main(["2", "1", str(tmp_path / "nope.csv"), str(tmp_path / "p.csv")]) == 1
    assert "error" in capsys.readouterr().err
