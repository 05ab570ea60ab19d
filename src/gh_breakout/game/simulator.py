"""Frame-stepped Breakout simulation."""

from typing import Iterator, Sequence

from .bricks import Brick
from .config import DEFAULT_CONFIG, GameConfig
from .game_state import GameState
from .timeline import FrameState, snapshot_frame


class Simulator:
    """Plays a deterministic game of Breakout against a set of bricks."""

    def __init__(
        self,
        bricks: Sequence[Brick],
        width: float,
        height: float,
        paddle_y: float,
        ghost_bricks: bool,
        config: GameConfig = DEFAULT_CONFIG,
    ):
        """
        Initialize simulator.

        Args:
            bricks: Bricks in board order; list order breaks ties between simultaneous hits
            width: Canvas width
            height: Canvas height
            paddle_y: Top edge of the paddle
            ghost_bricks: If True, only bricks with commits can be cleared
            config: Geometry, speeds and the frame cap
        """
        self.bricks = tuple(bricks)
        self.width = width
        self.height = height
        self.paddle_y = paddle_y
        self.ghost_bricks = ghost_bricks
        self.config = config

    def _create_game_state(self) -> GameState:
        return GameState(
            self.bricks,
            self.width,
            self.height,
            self.paddle_y,
            self.ghost_bricks,
            self.config,
        )

    def iter_state_timeline(self) -> Iterator[tuple[GameState, int]]:
        """Yield the mutable game state and frame number of every retained frame.

        Stops once nothing breakable is left or ``config.max_frames`` frames
        were simulated. A board with nothing to break yields its initial state
        once.
        """
        game_state = self._create_game_state()
        if game_state.is_complete():
            yield game_state, 0
            return

        frame = 0
        while not game_state.is_complete() and frame < self.config.max_frames:
            game_state.animate()
            if frame % self.config.animate_step == 0:
                yield game_state, frame
            frame += 1

    def run(self) -> list[FrameState]:
        """Run the simulation and return one snapshot per retained frame."""
        return [snapshot_frame(game_state) for game_state, _ in self.iter_state_timeline()]


def simulate(
    bricks: Sequence[Brick],
    canvas_width: float,
    canvas_height: float,
    paddle_y: float,
    ghost_bricks: bool,
    config: GameConfig = DEFAULT_CONFIG,
) -> list[FrameState]:
    """Simulate a full game and return its frame history."""
    return Simulator(bricks, canvas_width, canvas_height, paddle_y, ghost_bricks, config).run()
