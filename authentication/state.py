"""
Request scoped state shared between middleware and views
"""


class RequestState:
    """
    Per-request slot for the authenticated identity

    ``user`` is written at most once per request.
    """

    def __init__(self):
        self._user = None

    @property
    def user(self):
        return self._user

    @user.setter
    def user(self, identity):
        if self._user is not None:
            raise RuntimeError("request state user is already set")
        self._user = identity

    @property
    def is_authenticated(self):
        return self._user is not None

    def __repr__(self):
        return f"RequestState(user={self._user!r})"


def get_state(request):
    """Return the request's state, creating it when no middleware did"""
    state = getattr(request, 'state', None)
    if state is None:
        state = RequestState()
        request.state = state
    return state
