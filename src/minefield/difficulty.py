"""
Difficulty presets.
"""
from dataclasses import dataclass
from typing import Dict, List, Union

from .board import BoardConfig
from .errors import UnknownDifficulty


@dataclass(frozen=True)
class Difficulty:
    """A named board preset."""

    name: str
    config: BoardConfig

    @property
    def label(self) -> str:
        """Human readable description, e.g. 'Easy (9x9, 10 mines)'."""
        return (
            f"{self.name} ({self.config.rows}x{self.config.cols}, "
            f"{self.config.num_mines} mines)"
        )


# Preset difficulty levels
EASY = Difficulty("Easy", BoardConfig(9, 9, 10))
MEDIUM = Difficulty("Medium", BoardConfig(16, 16, 40))
HARD = Difficulty("Hard", BoardConfig(16, 32, 99))

DIFFICULTIES: Dict[str, Difficulty] = {
    preset.name.lower(): preset for preset in (EASY, MEDIUM, HARD)
}


def difficulty_names() -> List[str]:
    """Preset names in catalogue order."""
    return [preset.name for preset in DIFFICULTIES.values()]


def get_difficulty(name: Union[str, Difficulty]) -> Difficulty:
    """
    Look up a preset by name, ignoring case.

    Args:
        name: Preset name such as "Easy", or a Difficulty (returned as is).

    Raises:
        UnknownDifficulty: If no preset has that name.
    """
    if isinstance(name, Difficulty):
        return name
    try:
        return DIFFICULTIES[str(name).strip().lower()]
    except KeyError:
        raise UnknownDifficulty(str(name)) from None
