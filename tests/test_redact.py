"""Tests for output redaction."""

from gpucheckup.redact import Redactor


def _redactor(**kwargs) -> Redactor:
    defaults = {"hostname": "alice-workstation", "username": "alice", "home": "/home/alice"}
    return Redactor(True, **{**defaults, **kwargs})


def test_hostname_replaced_case_insensitive():
    r = _redactor()
    assert r.redact('"hostname": "alice-workstation"') == '"hostname": "<host>"'
    assert r.redact("ALICE-WORKSTATION up") == "<host> up"


def test_home_and_username_in_paths():
    r = _redactor()
    assert r.redact("log at /home/alice/.cache/x") == "log at <home>/.cache/x"
    assert r.redact(r"C:\Users\alice\AppData") == r"<home>\AppData"
    assert r.redact("owner alice") == "owner <user>"


def test_username_only_whole_words():
    r = _redactor(username="ali")
    assert r.redact("alias ali") == "alias <user>"


def test_emails():
    assert _redactor().redact("contact bob@example.com") == "contact <email-redacted>"


def test_disabled_is_pass_through():
    r = Redactor(False, hostname="alice-workstation", username="alice", home="/home/alice")
    text = "alice-workstation /home/alice bob@example.com"
    assert r.redact(text) == text


def test_empty_values_skipped():
    r = Redactor(True, hostname="", username="", home="")
    assert r.redact("nothing to hide") == "nothing to hide"
