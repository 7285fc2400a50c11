import pytest

from scaregames.cli import main, read_competitors, run_tournament
from scaregames.monster import Monster

ROSTER = "Mike, 115\nSulley,120\nRandall, 90\nCeleste, 60\n"


@pytest.fixture
def roster(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "monsters.txt"
    path.write_text(ROSTER, encoding="utf-8")
    return path


def test_read_competitors_skips_bad_lines(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text(
        "Mike, 115\nSulley,120\r\n\nno comma here\nRandall , abc\n  Boo ,7xyz\n",
        encoding="utf-8",
    )
    assert read_competitors(path) == [
        Monster("Mike", 115),
        Monster("Sulley", 120),
        Monster("  Boo", 7),
    ]


def test_read_competitors_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_competitors(tmp_path / "absent.txt")


def test_single_mode(roster, tmp_path):
    champion = run_tournament(roster, "single")
    assert champion == Monster("Sulley", 120)
    assert (tmp_path / "winners_bracket.dot").read_text().startswith("digraph TournamentTree {")
    assert not (tmp_path / "losers_bracket.dot").exists()


def test_double_mode(roster, tmp_path):
    champion = run_tournament(roster, "double")
    assert champion == Monster("Sulley", 120)
    losers = (tmp_path / "losers_bracket.dot").read_text()
    assert "Sulley" not in losers
    assert "Mike" in losers
    assert "Sulley" in (tmp_path / "winners_bracket.dot").read_text()


def test_invalid_mode(roster):
    with pytest.raises(ValueError):
        run_tournament(roster, "triple")


def test_empty_file_single(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        run_tournament(path, "single")


def test_main_usage_error(capsys):
    assert main(["only-one"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_success(roster, capsys):
    assert main([str(roster), "single"]) == 0
    out = capsys.readouterr().out
    assert "Tournament completed. DOT files generated." in out
    assert "Champion: Sulley (Power: 120)" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt"), "single"]) == 1
    assert "Error opening file" in capsys.readouterr().err


def test_main_invalid_mode(roster, capsys):
    assert main([str(roster), "triple"]) == 1
    assert "Invalid mode" in capsys.readouterr().err