from typing import Dict

from fastapi import Request

from app.services.store import Store


def get_store(request: Request) -> Store:
    """Store attached to the running application"""
    return request.app.state.store


def get_filters(request: Request) -> Dict[str, str]:
    """Query parameters as equality filters (``?courseId=1``)"""
    return dict(request.query_params)
