"""Orchestration of communication from the UI to the game logic and persistence layers (and the reverse direction)."""

import logging
from typing import Optional

from src.api.models import (
    GameResponse,
    HintResponse,
    MoveRequest,
    RenameRequest,
    ScoreResponse,
)
from src.core.exceptions import InvalidRecordError, RepositoryError
from src.core.shared_types import Status
from src.db.repository import ScoreRepository
from src.services.hint_timer import HintTimer
from src.tictactoe import advisor
from src.tictactoe.game import Game, MoveResult
from src.tictactoe.scores import ScoreTracker


class GameService:
    """Orchestration of layers for a noughts & crosses session (one board, one score board)."""

    def __init__(
        self,
        repository: ScoreRepository,
        game: Optional[Game] = None,
        timer: Optional[HintTimer] = None,
    ) -> None:
        self.repo = repository
        self.scores = self._load_scores()
        self.game = game if game is not None else Game()
        self.game.on_result = self._record_result
        self.timer = timer if timer is not None else HintTimer()
        self.timer.start()

    # -- UI entry points ---
    def make_move(self, request: MoveRequest) -> GameResponse:
        """
        Play a move for the player whose turn it is.
        ----
        Errors from the game (occupied cell, game over, bad index) are propagated: the UI is expected to ignore the click.
        """
        result = self.game.apply_move(request.index)

        if result.is_terminal:
            self.timer.stop()
        else:
            self.timer.touch()
        return self._create_game_response()

    def reset_game(self) -> GameResponse:
        """New game, same players and scores."""
        self.game.reset()
        self.timer.start()
        return self._create_game_response()

    def reset_all(self) -> GameResponse:
        """Wipe scores and names (and the stored record), then start a new game. Confirmation is the UI's job."""
        logging.info("Resetting all scores and player names")
        self.scores.reset()
        try:
            self.repo.delete()
        except RepositoryError as e:
            logging.error(f"Could not remove stored scores: {e}")
        return self.reset_game()

    def rename_player(self, request: RenameRequest) -> ScoreResponse:
        name = self.scores.rename(request.slot, request.name)
        logging.info(f"Player {request.slot} is now called {name!r}")
        self._save_scores()
        return self._create_score_response()

    def get_state(self) -> GameResponse:
        return self._create_game_response()

    def poll_hint(self) -> Optional[HintResponse]:
        """
        Called periodically by the UI.
        Returns a hint for the player to move once they have been idle for long enough, otherwise None.
        """
        if not self.game.is_active or not self.timer.is_due():
            return None
        hint = advisor.hint_for(self.game.board, self.game.turn)
        if hint is None:
            return None
        return HintResponse(
            index=hint.index, row=hint.row, col=hint.col, message=hint.message
        )

    # -- Internal helpers --
    def _record_result(self, result: MoveResult) -> None:
        """Listener for terminal results of the game."""
        if result.status == Status.WON:
            self.scores.record_win(result.winner)
            logging.info(
                f"{self.scores.name_of(result.winner)} wins on line {result.winning_line}"
            )
        elif result.status == Status.DRAW:
            self.scores.record_draw()
            logging.info("Game ended in a draw")
        self._save_scores()

    def _load_scores(self) -> ScoreTracker:
        """A missing or broken record is never fatal: fall back to a fresh score board."""
        record = self.repo.load()
        if record is None:
            return ScoreTracker()
        try:
            return ScoreTracker.from_record(record)
        except InvalidRecordError as e:
            logging.warning(f"Stored scores are invalid, starting fresh: {e}")
            return ScoreTracker()

    def _save_scores(self) -> None:
        try:
            self.repo.save(self.scores.to_record())
        except RepositoryError as e:
            logging.error(f"Could not save scores: {e}")

    def _create_game_response(self) -> GameResponse:
        game = self.game
        turn = game.turn
        winner = game.winner
        return GameResponse(
            board=[cell.value for cell in game.board.cells],
            status=game.status,
            turn=turn.value if turn is not None else None,
            turn_player=self.scores.name_of(turn) if turn is not None else None,
            winner=winner.value if winner is not None else None,
            winner_name=self.scores.name_of(winner) if winner is not None else None,
            winning_line=list(game.winning_line) if game.winning_line is not None else None,
            message=self._status_message(),
            scores=self._create_score_response(),
        )

    def _create_score_response(self) -> ScoreResponse:
        record = self.scores.to_record()
        return ScoreResponse(
            player1_name=record.player1_name,
            player2_name=record.player2_name,
            player1_wins=record.player1_wins,
            player2_wins=record.player2_wins,
            draws=record.draws,
        )

    def _status_message(self) -> str:
        if self.game.status == Status.WON:
            return f"{self.scores.name_of(self.game.winner)} wins!"
        if self.game.status == Status.DRAW:
            return "It's a draw!"
        return f"{self.scores.name_of(self.game.turn)}'s turn"
