"""
Shared pytest fixtures for the SealNote test suite.

RSA key generation is slow, so key pairs are generated once per session
at 2048 bits (the minimum the engine accepts).
"""

import pytest

import sealcrypt


@pytest.fixture(scope="session")
def keypair():
    return sealcrypt.generate_keypair(key_size=2048)


@pytest.fixture(scope="session")
def other_keypair():
    return sealcrypt.generate_keypair(key_size=2048)


@pytest.fixture(scope="session")
def public_armor(keypair):
    return keypair.export_public().text


@pytest.fixture(scope="session")
def private_armor(keypair):
    return keypair.export_private().text
