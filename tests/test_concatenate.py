import pytest

from patternsearch.concatenate import concatenate, main


@pytest.fixture
def datasets(tmp_path):
    base = tmp_path / "datasets"
    parts = base / "DNA"
    parts.mkdir(parents=True)
    (base / "Concatenated").mkdir()
    (parts / "DNA_02").write_bytes(b"GGG\n")
    (parts / "DNA_00").write_bytes(b"AAA\n")
    (parts / "DNA_01").write_bytes(b"CCC\n")
    return base


def test_concatenates_in_sorted_order(datasets):
    out = concatenate(datasets, "DNA", 3)
    assert out == datasets / "Concatenated" / "concatenated_DNA_3"
    assert out.read_bytes() == b"AAA\nCCC\nGGG\n"


def test_takes_only_first_n_files(datasets):
    out = concatenate(datasets, "DNA", 2)
    assert out.name == "concatenated_DNA_2"
    assert out.read_bytes() == b"AAA\nCCC\n"


@pytest.mark.parametrize("count", [0, -1, 41])
def test_count_out_of_range(datasets, count):
    with pytest.raises(ValueError):
        concatenate(datasets, "DNA", count)


def test_too_few_files(datasets):
    with pytest.raises(ValueError):
        concatenate(datasets, "DNA", 4)


def test_missing_directory(datasets):
    with pytest.raises(FileNotFoundError):
        concatenate(datasets, "nope", 1)


def test_main_writes_output(datasets, monkeypatch):
    work = datasets.parent / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    assert main(["2", "DNA"]) == 0
    assert (datasets / "Concatenated" / "concatenated_DNA_2").read_bytes() == b"AAA\nCCC\n"


def test_main_rejects_non_numeric_count(datasets, monkeypatch, capsys):
    work = datasets.parent / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    assert main(["many", "DNA"]) == 1
    assert "Error" in capsys.readouterr().err


def test_main_wrong_argument_count(capsys):
    assert main(["1"]) == 1
    assert "Usage:" in capsys.readouterr().err