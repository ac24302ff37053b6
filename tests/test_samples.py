import numpy as np
import pytest

from scalar_nn.samples import SampleSet, load_samples, save_samples


def test_save_then_load_keeps_exact_path(tmp_path):
    path = tmp_path / "nested" / "samples.dat"
    values = np.array([0.5, -1.25, 3.0])

    written = save_samples(path, values)

    assert written == path
    assert path.exists()
    assert not (tmp_path / "nested" / "samples.dat.npy").exists()
    np.testing.assert_array_equal(load_samples(path).values, values)


def test_save_overwrites_existing_file(tmp_path):
    path = tmp_path / "samples.npy"
    save_samples(path, np.arange(5.0))
    save_samples(path, np.array([9.0, 8.0]))
    np.testing.assert_array_equal(load_samples(path).values, [9.0, 8.0])


def test_save_rejects_2d(tmp_path):
    with pytest.raises(ValueError):
        save_samples(tmp_path / "x.npy", np.zeros((2, 2)))


def test_load_npz_values_key(tmp_path):
    path = tmp_path / "samples.npz"
    np.savez(path, values=np.array([1.0, 2.0]))
    assert len(load_samples(path)) == 2


def test_load_npz_without_values_key(tmp_path):
    path = tmp_path / "samples.npz"
    np.savez(path, other=np.array([1.0, 2.0]))
    with pytest.raises(ValueError, match="values"):
        load_samples(path)


def test_load_text_skips_blank_and_comment_lines(tmp_path):
    path = tmp_path / "samples.txt"
    path.write_text("# header\n1.5\n\n  -2\n3e1\n", encoding="utf-8")
    np.testing.assert_array_equal(load_samples(path).values, [1.5, -2.0, 30.0])


def test_load_text_reports_bad_line(tmp_path):
    path = tmp_path / "samples.txt"
    path.write_text("1.0\nabc\n", encoding="utf-8")
    with pytest.raises(ValueError, match=":2:"):
        load_samples(path)


def test_load_empty_text_file(tmp_path):
    path = tmp_path / "samples.txt"
    path.write_text("\n# nothing\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Empty"):
        load_samples(path)


def test_load_flattens_single_column(tmp_path):
    path = tmp_path / "col.npy"
    np.save(path, np.array([[1.0], [2.0], [3.0]]))
    assert load_samples(path).values.shape == (3,)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_samples(tmp_path / "missing.npy")


def test_sample_set_requires_1d():
    with pytest.raises(ValueError):
        SampleSet(values=np.zeros((2, 3)))
