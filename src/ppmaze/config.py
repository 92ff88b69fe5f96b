from dataclasses import dataclass, replace
from typing import Optional

# Fixed look of the reference renderer.
MAZE_SIZE = 10
OPEN_PATH_SIZE = 10
BORDER_THICKNESS = 1

SOLID_COLOR = 0x32A852
OPEN_COLOR = 0x000000

OUTPUT_PATH = "out.ppm"

def image_size(n: int, open_size: int = OPEN_PATH_SIZE, border: int = BORDER_THICKNESS) -> int:
    # n open cells plus n+1 border lines per axis
    return (n * open_size) + ((n + 1) * border)

@dataclass(frozen=True)
class MazeConfig:
    size: int = MAZE_SIZE
    open_size: int = OPEN_PATH_SIZE
    border: int = BORDER_THICKNESS
    output: str = OUTPUT_PATH
    seed: Optional[int] = None

    @property
    def image_size(self) -> int:
        return image_size(self.size, self.open_size, self.border)

    def with_overrides(self, **kw) -> "MazeConfig":
        """Return a copy with the non-None keyword values applied."""
        return replace(self, **{k: v for k, v in kw.items() if v is not None})

# Process default (the CLI derives its own from arguments)
DEFAULT = MazeConfig()
