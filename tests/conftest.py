"""
Shared fixtures for pyq3rcon tests
"""

import time

import pytest

from pyq3rcon import Server, Session, SessionConfig
from pyq3rcon.testing import MockQ3Server, ServerScenario

PASSWORD = "secret"


def pump(session, predicate, timeout=2.0):
    """Run session.update() until predicate() is true or timeout expires"""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        session.update(timeout=0.02)
        if predicate():
            return True
    return predicate()


@pytest.fixture
def scenario():
    scenario = ServerScenario("test", rcon_password=PASSWORD)
    scenario.add_player(12, 48, "^1Red^7Guy")
    scenario.add_player(3, 999, "Plain")
    scenario.add_command_reply("status", "map: q3dm17\n^2Player1^7 ready\n")
    return scenario


@pytest.fixture
def mock_server(scenario):
    server = MockQ3Server()
    server.set_scenario(scenario)
    server.start()
    yield server
    server.stop()


@pytest.fixture
def config(tmp_path):
    return SessionConfig(log_dir=str(tmp_path), getstatus_interval=60000)


@pytest.fixture
def session(mock_server, config):
    session = Session(Server(mock_server.host, mock_server.port), PASSWORD, config)
    yield session
    session.close()


@pytest.fixture(name="pump")
def pump_fixture():
    return pump
