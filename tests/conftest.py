import pytest

from birdman.data_models import BirdmanState, GameConfig, Mode, RunTracker
from birdman.game import initialize_run


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def tracker():
    return RunTracker(run_id="test-run")


@pytest.fixture
def session(tracker, config):
    return initialize_run(tracker, config)


@pytest.fixture
def flying(session):
    """A session mid-flight, away from spawn ticks and with no birds."""
    session.mode = Mode.PLAYING
    session.birdman.state = BirdmanState.FLYING
    session.birdman.x = 501
    session.birdman.y = 200
    session.camera.x = 400
    return session
