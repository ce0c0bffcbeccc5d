import pytest

from wordhash.boggle import boggle, format_board, gen_board, main, parse_dict


@pytest.fixture
def dict_file(tmp_path):
    def make(*words):
        path = tmp_path / "dict.txt"
        path.write_text("\n".join(words) + "\n")
        return path

    return make


def test_gen_board_shape_and_letters():
    board = gen_board(6, 3)
    assert len(board) == 6
    assert all(len(row) == 6 for row in board)
    assert all(ch.isalpha() and ch.isupper() for row in board for ch in row)


def test_gen_board_deterministic():
    small = [ch for row in gen_board(2, 17) for ch in row]
    large = [ch for row in gen_board(3, 17) for ch in row]
    assert large[: len(small)] == small


def test_gen_board_default_seed_first_letter():
    # The first output of the generator seeded with 5489 is 3499211612.
    assert gen_board(1, 5489) == [["W"]]


def test_gen_board_seed_matters():
    assert gen_board(8, 1) != gen_board(8, 2)


def test_format_board():
    assert format_board([["A", "B"], ["C", "D"]]) == " A B\n C D\n"


def test_parse_dict_words_and_prefixes(dict_file):
    words, prefixes = parse_dict(dict_file("CAT", "A"))
    assert words == {"CAT", "A"}
    assert prefixes == {"", "C", "CA"}


def test_parse_dict_missing_file(tmp_path):
    with pytest.raises(ValueError):
        parse_dict(tmp_path / "missing.txt")


def test_boggle_keeps_longest_on_path(dict_file):
    words, prefixes = parse_dict(dict_file("CA", "CAT"))
    board = [["C", "A", "T"], ["X", "X", "X"], ["X", "X", "X"]]
    assert boggle(words, prefixes, board) == {"CAT"}


def test_boggle_all_three_directions(dict_file):
    words, prefixes = parse_dict(dict_file("AB", "AC", "AD"))
    board = [["A", "B"], ["C", "D"]]
    assert boggle(words, prefixes, board) == {"AB", "AC", "AD"}


def test_boggle_no_reverse_direction(dict_file):
    words, prefixes = parse_dict(dict_file("BA", "DA"))
    board = [["A", "B"], ["C", "D"]]
    assert boggle(words, prefixes, board) == set()


def test_main_usage(capsys):
    assert main(["4"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_runs(dict_file, capsys):
    path = dict_file("A", "E", "I")
    assert main(["4", "7", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    board_lines = lines[:4]
    assert all(len(line) == 8 for line in board_lines)
    found = boggle({"A", "E", "I"}, {""}, gen_board(4, 7))
    assert lines[4] == f"Found {len(found)} words:"
    assert lines[5] == ", ".join(sorted(found))