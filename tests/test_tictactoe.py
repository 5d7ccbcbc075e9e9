import pytest

from starterbox.tictactoe import Board, CellTakenError, Game, main


def play_all(game, moves):
    result = None
    for row, col in moves:
        result = game.play(row, col)
    return result


def test_new_board_has_nine_empty_cells():
    board = Board()
    assert len(board.empty_cells()) == 9
    assert board.winner() is None


def test_place_fills_cell():
    board = Board()
    board.place(1, 2, "X")
    assert board[1, 2] == "X"
    assert (1, 2) not in board.empty_cells()
    assert len(board.empty_cells()) == 8


def test_place_out_of_range():
    board = Board()
    with pytest.raises(IndexError):
        board.place(3, 0, "X")
    with pytest.raises(IndexError):
        board.place(0, -1, "O")


def test_place_taken_cell():
    board = Board()
    board.place(0, 0, "X")
    with pytest.raises(CellTakenError):
        board.place(0, 0, "O")


def test_place_bad_mark():
    with pytest.raises(ValueError):
        Board().place(0, 0, "Z")


def test_row_win_for_first_player():
    game = Game("alice", "bob")
    result = play_all(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
    assert result == "alice"
    assert game.board.winner() == "X"
    assert game.over


def test_column_win_for_second_player():
    game = Game("alice", "bob")
    result = play_all(game, [(0, 0), (0, 1), (1, 0), (1, 1), (2, 2), (2, 1)])
    assert result == "bob"
    assert game.board.winner() == "O"


def test_diagonal_does_not_win():
    game = Game("alice", "bob")
    play_all(game, [(0, 0), (0, 1), (1, 1), (0, 2), (2, 2)])
    assert game.board.winner() is None
    assert not game.over


def test_full_board_draw():
    game = Game("alice", "bob")
    moves = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]
    assert play_all(game, moves) is None
    assert game.board.empty_cells() == []
    assert game.over
    with pytest.raises(RuntimeError):
        game.play(0, 0)


def test_turns_alternate():
    game = Game("alice", "bob")
    assert game.current_player() == "alice"
    game.play(0, 0)
    assert game.current_player() == "bob"
    assert game.board[0, 0] == "X"
    game.play(1, 1)
    assert game.board[1, 1] == "O"
    assert game.current_player() == "alice"


def test_failed_move_keeps_turn():
    game = Game("alice", "bob")
    game.play(0, 0)
    with pytest.raises(CellTakenError):
        game.play(0, 0)
    assert game.current_player() == "bob"


def test_render_empty_board():
    line = "\t\t\t" + "[  _ ] " * 3 + "\n"
    assert Board().render() == line * 3


def test_render_shows_marks():
    board = Board()
    board.place(0, 1, "O")
    first = board.render().splitlines()[0]
    assert first == "\t\t\t[  _ ] [  O ] [  _ ] "


def test_main_announces_winner(monkeypatch, capsys):
    answers = iter(["alice", "bob", "0 0", "1 0", "5 5", "0 1", "1 1", "1 1", "0 2"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Congratulations Dear alice" in out
    assert "Invalid index" in out
    assert "Already filled" in out