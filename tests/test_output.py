import pytest

from wave_picking.model import Selection
from wave_picking.output import read_solution_file, write_solution_file


def test_write_solution_file_sorts_indices(tmp_path):
    path = tmp_path / "solucao_0001.txt"
    write_solution_file(Selection.of([4, 1, 2], [3, 0]), str(path))
    assert path.read_text() == "3\n1\n2\n4\n2\n0\n3\n"


def test_read_solution_file(tmp_path):
    path = tmp_path / "solucao.txt"
    path.write_text("2\n5\n1\n1\n7\n")
    assert read_solution_file(str(path)) == Selection.of([1, 5], [7])


@pytest.mark.parametrize("text", ["2\n5\n", "1\n0\n2\n1\n", "1\nzero\n1\n0\n", ""])
def test_read_solution_file_rejects_broken_files(tmp_path, text):
    path = tmp_path / "solucao.txt"
    path.write_text(text)
    with pytest.raises(ValueError):
        read_solution_file(str(path))
