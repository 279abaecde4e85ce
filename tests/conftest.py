import sys
from pathlib import Path

import pytest

# Add src to path
SRC_DIR = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_DIR))

from models.enums import LogLevel  # noqa: E402
from utils.logger import configure_logger  # noqa: E402


SCENE_TWO_LAYERS = """300 400
2
circle 150 200 40 red
2
move 150 300 1000 x
scale 1.5 500
rectangle 150 80 100 40 90 yellow
1
rotate 180 2000
"""


class FakeClock:
    """Manually advanced time source"""

    def __init__(self, now: float = 100.0):
        self.now = now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture(autouse=True)
def quiet_logger():
    configure_logger(LogLevel.ERROR, use_colors=False)
    yield
    configure_logger(LogLevel.INFO, use_colors=True)


@pytest.fixture
def scene_text():
    return SCENE_TWO_LAYERS


@pytest.fixture
def fake_clock():
    return FakeClock()
