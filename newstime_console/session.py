"""Client-side admin session gate.

The gate caches whether the admin is signed in. Authority stays with the
server: on mount a stored token is re-verified once, and protected views
wait until that check has resolved.
"""

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Protocol, TypeVar

from newstime_console.storage import TokenStore

logger = logging.getLogger(__name__)

LOGIN_PATH = "/admin/login"

T = TypeVar("T")


class AuthApi(Protocol):
    """The two server calls the gate needs."""

    async def login(self, password: str) -> dict: ...

    async def verify(self) -> dict: ...


class Access(str, enum.Enum):
    """What a protected view should do right now."""

    WAIT = "wait"  # Initial verification still outstanding
    REDIRECT = "redirect"  # Not signed in, go to LOGIN_PATH
    RENDER = "render"  # Signed in


@dataclass(frozen=True)
class SessionState:
    """Snapshot of the session.

    Attributes:
        is_authenticated: Whether the admin is signed in.
        is_loading: True until the initial verification has resolved.
    """

    is_authenticated: bool = False
    is_loading: bool = True


class SessionGate:
    """Holds the admin session state and guards protected views.

    Attributes:
        last_error: Message of the last failed login, for display.
    """

    def __init__(self, api: AuthApi, store: TokenStore):
        """Initialize the gate.

        Args:
            api: Client exposing ``login`` and ``verify``.
            store: Persistence port for the admin token.
        """
        self._api = api
        self._store = store
        self._state = SessionState()
        self._listeners: list[Callable[[SessionState], None]] = []
        self._mounted = False
        self._mount_started = False
        # Bumped by login, logout and unmount; a verify started under an
        # older generation no longer applies
        self._generation = 0
        self.last_error: str | None = None

    @property
    def state(self) -> SessionState:
        """Current session snapshot."""
        return self._state

    @property
    def is_authenticated(self) -> bool:
        return self._state.is_authenticated

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    def subscribe(self, listener: Callable[[SessionState], None]) -> Callable[[], None]:
        """Register a listener for state changes.

        Args:
            listener: Called with each new SessionState.

        Returns:
            Callable[[], None]: Function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            listener(self._state)

    async def mount(self) -> SessionState:
        """Resolve the initial session state.

        Without a stored token this resolves at once, with no network call.
        Otherwise the token is verified exactly once per mount; any failure
        resolves to signed out. Calling mount again before unmount returns the
        current state. A verification overtaken by unmount, login or logout
        is discarded.

        Returns:
            SessionState: State after resolution (or current state on re-mount).
        """
        if self._mount_started:
            return self._state
        self._mount_started = True
        self._mounted = True

        token = self._store.get()
        if not token:
            self._set_state(is_authenticated=False, is_loading=False)
            return self._state

        generation = self._generation
        failed = False
        try:
            result = await self._api.verify()
            valid = isinstance(result, dict) and result.get("valid") is True
        except Exception as e:
            logger.info(f"Stored admin token rejected: {e}")
            valid = False
            failed = True

        if not self._mounted or generation != self._generation:
            logger.debug("Session changed before verification finished; result discarded")
            return self._state

        if failed:
            self._store.clear()
        self._set_state(is_authenticated=valid, is_loading=False)
        return self._state

    def unmount(self) -> None:
        """Detach the gate; a verification still in flight is discarded."""
        self._mounted = False
        self._mount_started = False
        self._generation += 1
        self._listeners.clear()

    async def login(self, password: str) -> bool:
        """Sign in with the admin password.

        Args:
            password: Candidate password.

        Returns:
            bool: True on success. On failure ``last_error`` holds the reason.
        """
        self.last_error = None
        try:
            result = await self._api.login(password)
        except Exception as e:
            self.last_error = str(e) or "Login failed"
            logger.info(f"Admin login failed: {self.last_error}")
            return False

        if not isinstance(result, dict) or not (result.get("success") and result.get("token")):
            self.last_error = "Login failed"
            return False

        self._store.set(result["token"])
        self._generation += 1
        self._set_state(is_authenticated=True, is_loading=False)
        return True

    def logout(self) -> None:
        """Sign out locally. Always succeeds; no server call is made."""
        self._store.clear()
        self._generation += 1
        self._set_state(is_authenticated=False, is_loading=False)

    def access(self) -> Access:
        """Decide what a protected view should do.

        Returns:
            Access: WAIT while loading, REDIRECT when signed out, else RENDER.
        """
        if self._state.is_loading:
            return Access.WAIT
        if not self._state.is_authenticated:
            return Access.REDIRECT
        return Access.RENDER

    def guard(
        self,
        render: Callable[[], T],
        waiting: Callable[[], T],
        redirect: Callable[[str], T],
    ) -> T:
        """Apply the access decision to a protected view.

        Args:
            render: Produces the protected view.
            waiting: Produces the neutral placeholder shown while loading.
            redirect: Sends the user to the given login path.

        Returns:
            T: Whatever the chosen callable returns.
        """
        decision = self.access()
        if decision is Access.WAIT:
            return waiting()
        if decision is Access.REDIRECT:
            return redirect(LOGIN_PATH)
        return render()
