"""State: an authorization presenter switching between two states."""

from dataclasses import dataclass

UNKNOWN_USER = "Unknown"


class AuthorizationState:
    """Base class of the closed set of authorization states."""


class _Unauthorized(AuthorizationState):
    def __repr__(self) -> str:
        return "Unauthorized"


UNAUTHORIZED = _Unauthorized()


@dataclass(frozen=True)
class Authorized(AuthorizationState):
    """A logged-in user."""

    user_name: str


class AuthorizationPresenter:
    """Presents the current authorization state.

    Starts out unauthorized. Logging in replaces the state with
    `Authorized(user_name)`; logging out returns to `UNAUTHORIZED`.
    """

    def __init__(self) -> None:
        self._state: AuthorizationState = UNAUTHORIZED

    @property
    def state(self) -> AuthorizationState:
        """The current state."""
        return self._state

    @property
    def is_authorized(self) -> bool:
        """Whether a user is logged in."""
        return isinstance(self._state, Authorized)

    @property
    def user_name(self) -> str:
        """The logged-in user's name, or "Unknown"."""
        match self._state:
            case Authorized(user_name=user_name):
                return user_name
            case _:
                return UNKNOWN_USER

    def login_user(self, user_name: str) -> None:
        """Switch to the authorized state for `user_name`."""
        self._state = Authorized(user_name)

    def logout_user(self) -> None:
        """Switch back to the unauthorized state."""
        self._state = UNAUTHORIZED

    def __str__(self) -> str:
        return f"User '{self.user_name}' is logged in: {self.is_authorized}"
