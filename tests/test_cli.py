import pytest

from binodijkstra.cli import Config, main, parse_args
from binodijkstra.experiments import CSV_HEADER


def test_defaults():
    config = parse_args([])
    assert config == Config()
    assert config.trials == 50
    assert config.max_weight == 1000.0
    assert config.sizes == (500, 750, 1000, 1250, 1500, 1750, 2000, 2250, 2500)
    assert config.cs == (1.5, 1.75, 2.0)
    assert config.output == "output.csv"


def test_all_arguments():
    config = parse_args(["M=7", "n=10,20", "c=1.5,2"])
    assert config.trials == 7
    assert config.sizes == (10, 20)
    assert config.cs == (1.5, 2.0)


def test_trailing_comma_ignored():
    assert parse_args(["n=1,2,"]).sizes == (1, 2)


def test_empty_list():
    assert parse_args(["n="]).sizes == ()


def test_unknown_argument_reported(capsys):
    config = parse_args(["bogus", "M=3"])
    assert config.trials == 3
    assert "Unknown argument: bogus" in capsys.readouterr().err


@pytest.mark.parametrize("arg", ["M=abc", "n=1,,2", "c=x"])
def test_malformed_number_raises(arg):
    with pytest.raises(ValueError):
        parse_args([arg])


def test_main_rejects_malformed(capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["M=abc"]) == 2
    assert capsys.readouterr().err != ""
    assert not (tmp_path / "output.csv").exists()


def test_main_writes_results(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["n=4,5", "c=3", "M=2"]) == 0
    lines = (tmp_path / "output.csv").read_text().splitlines()
    assert lines[0] == ",".join(CSV_HEADER)
    assert len(lines) == 3
    assert lines[1].startswith("4,3,2,")
    assert lines[2].startswith("5,3,2,")
    out = capsys.readouterr().out
    assert "n = 4, c = 3, M = 2" in out
    assert "Average extracts: 4" in out


def test_main_with_no_sizes_writes_header_only(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "output.csv").write_text("old\n")
    assert main(["n="]) == 0
    assert (tmp_path / "output.csv").read_text().splitlines() == [",".join(CSV_HEADER)]