# test_usage_tracker.py
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from flask import Flask
import requests

import usage_tracker


def _capture_sends(monkeypatch):
    sent = []
    monkeypatch.setattr(usage_tracker, "TRACKING_ENABLED", True)
    monkeypatch.setattr(usage_tracker, "_send_async", lambda url, data: sent.append((url, data)))
    return sent


def test_hash_ip():
    print("\n=== TEST: IP hashing ===")
    hashed = usage_tracker.hash_ip("203.0.113.7")
    print("hashed:", hashed)
    assert len(hashed) == 16
    assert hashed == usage_tracker.hash_ip("203.0.113.7")
    assert hashed != usage_tracker.hash_ip("203.0.113.8")
    assert usage_tracker.hash_ip("") == "unknown"


def test_hash_ip_depends_on_salt(monkeypatch):
    before = usage_tracker.hash_ip("203.0.113.7")
    monkeypatch.setattr(usage_tracker, "IP_HASH_SALT", "another-deployment")
    after = usage_tracker.hash_ip("203.0.113.7")
    assert before != after


def test_client_ip_from_forwarded_header():
    assert usage_tracker.get_client_ip() == "unknown"

    app = Flask(__name__)
    with app.test_request_context("/", headers={"X-Forwarded-For": "198.51.100.1, 10.0.0.1"}):
        assert usage_tracker.get_client_ip() == "198.51.100.1"
    with app.test_request_context("/", environ_base={"REMOTE_ADDR": "192.0.2.5"}):
        assert usage_tracker.get_client_ip() == "192.0.2.5"


def test_disabled_tracking_sends_nothing(monkeypatch):
    monkeypatch.setattr(usage_tracker, "TRACKING_ENABLED", False)
    assert usage_tracker.log_feature("rocket_equation") is None
    assert usage_tracker.init_tracking(Flask(__name__)) is False


def test_send_async_posts_in_background(monkeypatch):
    posted = []
    monkeypatch.setattr(usage_tracker, "TRACKING_ENABLED", True)
    monkeypatch.setattr(usage_tracker.requests, "post",
                        lambda url, json, timeout: posted.append((url, json, timeout)))

    thread = usage_tracker._send_async("http://tracker.test/track/feature", {"feature_key": "x"})
    thread.join(timeout=2)
    assert posted == [("http://tracker.test/track/feature", {"feature_key": "x"}, usage_tracker.TRACKING_TIMEOUT)]


def test_failed_post_does_not_raise(monkeypatch):
    def refuse(url, json, timeout):
        raise requests.ConnectionError("tracker down")

    monkeypatch.setattr(usage_tracker.requests, "post", refuse)
    usage_tracker._post("http://tracker.test/track/feature", {})


def test_log_feature_payload(monkeypatch):
    sent = _capture_sends(monkeypatch)
    usage_tracker.log_feature("hohmann_transfer", {"unit": "km"})

    url, data = sent[0]
    assert url.endswith("/track/feature")
    assert data["feature_key"] == "hohmann_transfer"
    assert data["metadata"] == {"unit": "km"}
    assert data["project_slug"] == usage_tracker.PROJECT_SLUG
    assert data["hashed_ip"] is None
    assert data["request_bytes"] == 0


def test_log_feature_inside_request(monkeypatch):
    sent = _capture_sends(monkeypatch)
    app = Flask(__name__)
    with app.test_request_context("/", environ_base={"REMOTE_ADDR": "192.0.2.5"}):
        usage_tracker.g.request_size = 120
        usage_tracker.log_feature("redshift_calculator", {"mode": "wavelength"})

    data = sent[0][1]
    assert data["hashed_ip"] == usage_tracker.hash_ip("192.0.2.5")
    assert data["request_bytes"] == 120
    assert data["feature_key"] == "redshift_calculator"


def test_page_views_skip_assets(monkeypatch):
    print("\n=== TEST: Page view hooks ===")
    sent = _capture_sends(monkeypatch)

    app = Flask(__name__)

    @app.route("/tools/mach-calculator")
    def page():
        return "ok"

    @app.route("/assets/style.css")
    def asset():
        return "body {}"

    assert usage_tracker.init_tracking(app) is True
    client = app.test_client()
    client.get("/tools/mach-calculator")
    client.get("/assets/style.css")

    print(sent)
    assert len(sent) == 1
    url, data = sent[0]
    assert url.endswith("/track/pageview")
    assert data["route"] == "/tools/mach-calculator"
    assert data["response_bytes"] == 2


def test_should_track():
    assert usage_tracker.should_track("/tools/isa-calculator")
    assert not usage_tracker.should_track("/_dash-update-component")
    assert not usage_tracker.should_track("/assets/logo.png")


if __name__ == "__main__":
    import pytest
    sys.exit(pytest.main([__file__, "-v"]))
