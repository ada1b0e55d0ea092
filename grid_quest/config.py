"""Game configuration.

A single frozen :class:`GameConfig` replaces process-wide constants. It is
created once, validated, and carried by every :class:`grid_quest.state.State`
so systems never reach for globals.
"""

from dataclasses import dataclass

from grid_quest.components import Position


@dataclass(frozen=True)
class GameConfig:
    """Board size, entity counts and pacing.

    Attributes:
        rows: Grid height in cells.
        cols: Grid width in cells.
        num_stars: Target number of stars on the board.
        num_enemies: Number of enemies spawned at start.
        respawn_interval: A star respawn is attempted on turns divisible by this.
        respawn_attempts: Maximum draws for a single mid-game star respawn.
        invalid_key_pause: Seconds to pause after an invalid key notice.
        all_collected_pause: Seconds to pause after the all-collected notice.

    Raises:
        ValueError: If the values cannot describe a playable board, including
            when the grid is too small to hold every entity on its own cell.
    """

    rows: int = 12
    cols: int = 30
    num_stars: int = 6
    num_enemies: int = 3
    respawn_interval: int = 12
    respawn_attempts: int = 50
    invalid_key_pause: float = 0.25
    all_collected_pause: float = 0.5

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Grid must be at least 1x1, got {self.rows}x{self.cols}")
        if self.num_stars < 0 or self.num_enemies < 0:
            raise ValueError("Entity counts must be non-negative")
        if self.respawn_interval < 1:
            raise ValueError("respawn_interval must be positive")
        if self.respawn_attempts < 0:
            raise ValueError("respawn_attempts must be non-negative")
        if self.invalid_key_pause < 0 or self.all_collected_pause < 0:
            raise ValueError("Pauses must be non-negative")
        # player + goal + stars + enemies all need distinct cells at spawn
        required = 2 + self.num_stars + self.num_enemies
        if required > self.rows * self.cols:
            raise ValueError(
                f"{required} entities do not fit on a {self.rows}x{self.cols} grid"
            )

    @property
    def player_start(self) -> Position:
        """Centre cell where the player spawns."""
        return Position(self.rows // 2, self.cols // 2)


DEFAULT_CONFIG = GameConfig()
