"""
Shared API dependencies.
"""
from fastapi import Request

from fitlog.services.tracker import TrackerSession


def get_tracker(request: Request) -> TrackerSession:
    """The tracker session created at startup."""
    return request.app.state.tracker
