"""
Usage tracking for the calculator app.

Hooks onto the Flask server behind Dash to report page views, and exposes
log_feature() for callbacks to report which calculators are used.
Everything is fire-and-forget and off unless TRACKING_ENABLED=true.

Usage:
    from usage_tracker import init_tracking, log_feature

    server = app.server
    init_tracking(server)

    @app.callback(...)
    def update_results(...):
        log_feature('rocket_equation', {'mode': mode})
        ...
"""

import hashlib
import time
import os
import threading
from typing import Optional
import requests
from flask import request, g, has_request_context

from aerocalc.preset_loader import dprint

# Configuration
TRACKING_API_URL = os.environ.get('TRACKING_API_URL', 'http://127.0.0.1:8000')
PROJECT_SLUG = os.environ.get('PROJECT_SLUG', 'aerospace-calculators')
IP_HASH_SALT = os.environ.get('IP_HASH_SALT', 'aerocalc')
TRACKING_ENABLED = os.environ.get('TRACKING_ENABLED', 'false').lower() == 'true'
TRACKING_TIMEOUT = 0.5  # seconds

SKIPPED_PREFIXES = ('/_dash', '/static', '/favicon', '/health', '/assets')


def hash_ip(ip: str) -> str:
    """
    Visitor id for the tracking API: a keyed BLAKE2b digest of the address,
    16 hex characters. Raw addresses never leave the server.
    """
    if not ip:
        return 'unknown'
    digest = hashlib.blake2b(ip.encode(), key=IP_HASH_SALT.encode()[:64], digest_size=8)
    return digest.hexdigest()


def get_client_ip() -> str:
    """Address of the visitor; behind a proxy this is the first X-Forwarded-For hop."""
    if not has_request_context():
        return 'unknown'
    route = request.access_route
    return route[0] if route else 'unknown'


def _request_origin() -> dict:
    """Hashed visitor and request size, or blanks outside a request (tests, boot)."""
    if not has_request_context():
        return {'hashed_ip': None, 'request_bytes': 0}
    return {
        'hashed_ip': hash_ip(get_client_ip()),
        'request_bytes': getattr(g, 'request_size', 0),
    }


def _post(url: str, data: dict):
    try:
        requests.post(url, json=data, timeout=TRACKING_TIMEOUT)
    except requests.RequestException as e:
        dprint(f"[TRACKING] {url} failed: {e}")


def _send_async(url: str, data: dict):
    """Send tracking data on a daemon thread; never blocks the request."""
    if not TRACKING_ENABLED:
        return None

    thread = threading.Thread(target=_post, args=(url, data), daemon=True)
    thread.start()
    return thread


def should_track(path: str) -> bool:
    return not any(path.startswith(p) for p in SKIPPED_PREFIXES)


def init_tracking(app):
    """
    Register before/after request hooks on a Flask app (dash_app.server)
    that report page views with their response size.
    Returns False when tracking is disabled and nothing was registered.
    """
    if not TRACKING_ENABLED:
        print("[BOOT] Usage tracking disabled")
        return False

    @app.before_request
    def before_request():
        g.start_time = time.time()
        g.request_size = request.content_length or 0

    @app.after_request
    def after_request(response):
        path = request.path
        if not should_track(path):
            return response

        duration_ms = int((time.time() - getattr(g, 'start_time', time.time())) * 1000)
        response_size = response.content_length
        if response_size is None and not response.direct_passthrough:
            response_size = len(response.get_data())

        _send_async(f"{TRACKING_API_URL}/track/pageview", {
            'project_slug': PROJECT_SLUG,
            'hashed_ip': hash_ip(get_client_ip()),
            'route': path,
            'user_agent': request.user_agent.string if request.user_agent else None,
            'response_bytes': response_size or 0,
            'duration_ms': duration_ms,
        })

        return response

    print(f"[BOOT] Usage tracking enabled for {PROJECT_SLUG}")
    return True


def log_feature(feature_key: str, metadata: Optional[dict] = None, response_bytes: int = 0):
    """
    Report one calculation from a Dash callback, e.g.
    ``log_feature('hohmann_transfer')`` or ``log_feature('isa_calculator', {'mode': mode})``.
    Only call it after the inputs were accepted, so failed calculations are not counted.
    Returns the sender thread, or None when tracking is off.
    """
    payload = {
        'project_slug': PROJECT_SLUG,
        'feature_key': feature_key,
        'response_bytes': response_bytes,
        'duration_ms': 0,
        'metadata': metadata,
    }
    payload.update(_request_origin())
    return _send_async(f"{TRACKING_API_URL}/track/feature", payload)
