"""Shared fixtures: a fake requester and canned carrier responses."""

import pytest

LABEL_A = "https://pdf.balikobot.cz/cp/eNorMTIwt9A1NbYwMwdcMBAZAoA."
LABEL_B = "https://pdf.balikobot.cz/cp/eNorMTIwt9A1NbYwMwdcMBAZAoB."
LABELS = "https://pdf.balikobot.cz/cp/eNorMTIwt9A1NbYwMwdcMBAZAoC."


class FakeRequester:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self.body = body if body is not None else {}
        self.calls = []

    def request(self, url, payload):
        self.calls.append((url, payload))
        return self.status_code, self.body


@pytest.fixture
def make_requester():
    return FakeRequester


@pytest.fixture
def package_a():
    return {
        "carrier_id": "NP1504102246M",
        "package_id": "42719",
        "label_url": LABEL_A,
        "status": "200",
    }


@pytest.fixture
def package_b():
    return {
        "carrier_id": "NP1504102247M",
        "package_id": "42720",
        "label_url": LABEL_B,
        "status": "200",
    }


@pytest.fixture
def labels_url():
    return LABELS
