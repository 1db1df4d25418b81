# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Shared fixtures: an in-process PJLink device emulator and clients bound to it."""

from __future__ import annotations

import pytest
import pytest_asyncio

from pjlink_client import PjLinkClient
from pjlink_client.emulator import PjLinkEmulator

PJLINK_ENV_VARS = ('PJLINK_HOST', 'PJLINK_PORT', 'PJLINK_PASSWORD', 'PJLINK_TIMEOUT', 'PJLINK_CONFIG')

@pytest.fixture(autouse=True)
def clean_pjlink_env(monkeypatch):
    """Keeps the developer's own PJLINK_* settings out of the tests."""
    for name in PJLINK_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

@pytest_asyncio.fixture
async def make_emulator():
    """Returns an async factory that starts emulators on loopback ephemeral ports.
       Every emulator started is shut down when the test ends."""
    emulators = []

    async def factory(**kwargs) -> PjLinkEmulator:
        emulator = PjLinkEmulator(bind_addr="127.0.0.1", port=0, **kwargs)
        await emulator.start()
        emulators.append(emulator)
        return emulator

    yield factory

    for emulator in emulators:
        emulator.close()
        await emulator.wait_closed()

@pytest_asyncio.fixture
async def emulator(make_emulator) -> PjLinkEmulator:
    return await make_emulator()

def client_for(emulator: PjLinkEmulator, **kwargs) -> PjLinkClient:
    return PjLinkClient("127.0.0.1", port=emulator.bound_port, **kwargs)
