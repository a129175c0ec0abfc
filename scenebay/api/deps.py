from fastapi import Request

from scenebay.session.search_session import SearchSession


def get_session(request: Request) -> SearchSession:
    """The session root created at startup."""
    return request.app.state.session
