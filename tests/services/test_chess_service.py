"""Unit tests for src/services/chess_service.py"""

import asyncio
import threading

import pytest

from src.core.shared_types import Color, RejectionReason, Status
from src.services.chess_service import (
    ChessService,
    CreateGameRequest,
    MoveRequest,
    SelectSquareRequest,
    run_clock,
)


@pytest.fixture
def service() -> ChessService:
    return ChessService(clock_seconds=600)


def test_initial_state(service: ChessService) -> None:
    response = service.get_game_state()
    assert response.turn == Color.WHITE
    assert response.status == Status.ACTIVE
    assert response.clocks == {Color.WHITE: 600, Color.BLACK: 600}


def test_make_move(service: ChessService) -> None:
    response = service.make_move(MoveRequest(from_square="e2", to_square="e4"))

    assert response.accepted
    assert response.notation == "e4"
    assert response.rejection is None
    assert response.game.turn == Color.BLACK
    assert response.game.board[6][4] is None
    assert response.game.board[4][4] == "P"


def test_rejected_move(service: ChessService) -> None:
    before = service.get_game_state()
    response = service.make_move(MoveRequest(from_square="e2", to_square="e5"))

    assert not response.accepted
    assert response.rejection is not None
    assert response.rejection.reason == RejectionReason.PIECE_RULE_VIOLATION
    assert response.rejection.message == "Invalid pawn move"
    assert response.game == before


def test_scholars_mate_through_service(service: ChessService) -> None:
    for from_square, to_square in [
        ("e2", "e4"),
        ("e7", "e5"),
        ("f1", "c4"),
        ("b8", "c6"),
        ("d1", "h5"),
        ("g8", "f6"),
        ("h5", "f7"),
    ]:
        response = service.make_move(MoveRequest(from_square=from_square, to_square=to_square))
        assert response.accepted

    assert response.game.status == Status.CHECKMATE
    assert response.game.winner == Color.WHITE

    response = service.make_move(MoveRequest(from_square="e8", to_square="f7"))
    assert not response.accepted
    assert response.rejection is not None
    assert response.rejection.reason == RejectionReason.WRONG_TURN


def test_select_square_flow(service: ChessService) -> None:
    response = service.select_square(SelectSquareRequest(square="g1"))
    assert not response.accepted
    assert response.rejection is None
    assert response.game.selected_square == "g1"

    response = service.select_square(SelectSquareRequest(square="f3"))
    assert response.accepted
    assert response.notation == "Nf3"
    assert response.game.selected_square is None


def test_select_opponent_piece(service: ChessService) -> None:
    response = service.select_square(SelectSquareRequest(square="e7"))
    assert response.rejection is not None
    assert response.rejection.message == "It's White's turn"


def test_tick(service: ChessService) -> None:
    response = service.tick()
    assert response.clocks == {Color.WHITE: 599, Color.BLACK: 600}
    assert response.clock_display[Color.WHITE] == "9:59"


def test_flag_fall_rejects_later_moves() -> None:
    service = ChessService(clock_seconds=1)
    response = service.tick()
    assert response.status == Status.CHECKMATE
    assert response.winner == Color.BLACK

    response = service.make_move(MoveRequest(from_square="e2", to_square="e4"))
    assert not response.accepted
    assert service.state.board.to_fen() == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def test_new_game_discards_old_state(service: ChessService) -> None:
    service.make_move(MoveRequest(from_square="e2", to_square="e4"))
    response = service.create_new_game(CreateGameRequest(clock_seconds=120))

    assert response.move_history == []
    assert response.turn == Color.WHITE
    assert response.clocks == {Color.WHITE: 120, Color.BLACK: 120}


def test_concurrent_ticks_are_serialized() -> None:
    """Every tick is applied exactly once, no matter how many threads fire them."""
    service = ChessService(clock_seconds=1000)
    threads = [
        threading.Thread(target=lambda: [service.tick() for _ in range(50)])
        for _ in range(8)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert service.state.remaining(Color.WHITE) == 1000 - 8 * 50


def test_run_clock_until_flag_fall() -> None:
    service = ChessService(clock_seconds=3)
    final = asyncio.run(run_clock(service, period=0))

    assert final.status == Status.CHECKMATE
    assert final.winner == Color.BLACK
    assert final.clocks[Color.WHITE] == 0
    assert final.clocks[Color.BLACK] == 3
