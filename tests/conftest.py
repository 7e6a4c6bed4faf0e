import pytest

from speaker_stats.config import Settings, StatsSettings


class FakeClock:
    """Millisecond clock moved by hand."""

    def __init__(self, now: int = 0):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms

    def set(self, ms: int) -> None:
        self.now = ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def stats_settings() -> Settings:
    return Settings(stats=StatsSettings(verbose_logging=True), timezone="UTC")


@pytest.fixture
def strict_settings() -> Settings:
    return Settings(stats=StatsSettings(clamp_negative_elapsed=False))
