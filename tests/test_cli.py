from antfarm.cli import main

GOOD_FARM = """2
##start
s 0 0
a 1 0
##end
t 2 0
s-a
a-t
"""


def test_wrong_argument_count(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_rejects_non_text_file(capsys):
    assert main(["farm.md"]) == 1
    assert capsys.readouterr().out == "only text file are allowed\n"


def test_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main([str(missing)]) == 1
    assert "missing.txt" in capsys.readouterr().out


def test_empty_file_is_invalid(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("   \n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "ERROR: invalid data format, the file is empty\n"


def test_unsolvable_farm(tmp_path, capsys):
    path = tmp_path / "closed.txt"
    path.write_text("1\n##start\ns 0 0\n##end\nt 1 1\na 2 2\ns-a\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "ERROR: this ant farm cannot be solved\n"


def test_solved_farm_prints_data_and_moves(tmp_path, capsys):
    path = tmp_path / "farm.txt"
    path.write_text(GOOD_FARM)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith(GOOD_FARM.strip() + "\n\n")
    assert "L1-a " in out
    assert "L2-t " in out