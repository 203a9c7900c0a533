import pytest

from advising import access
from advising.access import check_passcode, expected_passcode, is_open


class MissingSecrets:
    def get(self, key, default=None):
        raise FileNotFoundError("No secrets files found")


@pytest.fixture(autouse=True)
def no_env_passcode(monkeypatch):
    monkeypatch.setattr(access, "APP_PASSWORD", "")


def test_env_passcode_wins(monkeypatch):
    monkeypatch.setattr(access, "APP_PASSWORD", "from-env")
    assert expected_passcode({"APP_PASSWORD": "from-secrets"}) == "from-env"


def test_falls_back_to_secrets():
    assert expected_passcode({"APP_PASSWORD": "ABCUAdvisor"}) == "ABCUAdvisor"
    assert expected_passcode({}) == ""
    assert expected_passcode(None) == ""


def test_missing_secrets_file_means_no_passcode():
    assert expected_passcode(MissingSecrets()) == ""


@pytest.mark.parametrize("entered, expected, ok", [
    ("ABCUAdvisor", "ABCUAdvisor", True),
    ("abcuadvisor", "ABCUAdvisor", False),
    ("", "ABCUAdvisor", False),
    (None, "ABCUAdvisor", False),
    ("anything", "", True),
    ("clé", "clé", True),
])
def test_check_passcode(entered, expected, ok):
    assert check_passcode(entered, expected) is ok


def test_gate_opens_without_passcode_or_after_sign_in():
    assert is_open("", False)
    assert is_open("ABCUAdvisor", True)
    assert not is_open("ABCUAdvisor", False)
