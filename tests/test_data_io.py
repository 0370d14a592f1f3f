import numpy as np
import pytest

from scalar_aad.utils import load_csv, random_permutation, save_csv, set_default_seed


def test_load_csv_with_header(tmp_path):
    path = tmp_path / "moons.csv"
    path.write_text("x,y,label\n0.5, 1.0, 1\n-0.25,0.75,-1\n")

    data = load_csv(path)

    assert data.shape == (2, 3)
    assert data.dtype == np.float64
    assert data[1].tolist() == [-0.25, 0.75, -1.0]


def test_load_csv_without_header(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("1,2\n3,4\n")
    assert load_csv(path, header=False).tolist() == [[1.0, 2.0], [3.0, 4.0]]


def test_load_csv_single_row_is_2d(tmp_path):
    path = tmp_path / "one.csv"
    path.write_text("a,b\n1,2\n")
    assert load_csv(path).shape == (1, 2)


def test_load_csv_rejects_non_numeric(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("a,b\n1,two\n")
    with pytest.raises(ValueError):
        load_csv(path)


def test_load_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_csv(tmp_path / "missing.csv")


def test_save_csv(tmp_path):
    path = save_csv(tmp_path / "out" / "fit.csv", [[1.0, 2.5], [3, -0.5]])
    assert path.read_text() == "1.0, 2.5\n3.0, -0.5\n"
    assert load_csv(path, header=False).tolist() == [[1.0, 2.5], [3.0, -0.5]]


def test_random_permutation(rng):
    perm = random_permutation(10, rng)
    assert sorted(perm.tolist()) == list(range(10))


def test_random_permutation_reproducible():
    a = random_permutation(50, np.random.default_rng(9))
    b = random_permutation(50, np.random.default_rng(9))
    assert a.tolist() == b.tolist()


def test_default_seed():
    set_default_seed(11)
    a = random_permutation(30)
    set_default_seed(11)
    b = random_permutation(30)
    set_default_seed(None)
    assert a.tolist() == b.tolist()
