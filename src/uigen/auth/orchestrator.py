"""Sign-in / sign-up orchestration with a shared loading flag."""

from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Awaitable, Callable

from .collaborators import AnonymousWorkStore, CredentialService, Navigator, ProjectRepository
from .models import AuthResult
from .reconcile import reconcile_after_auth

logger = logging.getLogger(__name__)

LoadingListener = Callable[[bool], None]


class AuthOrchestrator:
    """Runs a credential check and, on success, reconciles anonymous work.

    ``is_loading`` is one flag shared by every in-flight call. Concurrent
    calls are not counted: whichever finishes last sets the final value.
    """

    def __init__(
        self,
        credentials: CredentialService,
        anon_store: AnonymousWorkStore,
        projects: ProjectRepository,
        navigator: Navigator,
        *,
        clock: Callable[[], datetime] = datetime.now,
        rng: random.Random | None = None,
    ):
        self.credentials = credentials
        self.anon_store = anon_store
        self.projects = projects
        self.navigator = navigator
        self._clock = clock
        self._rng = rng
        self._is_loading = False
        self._listeners: list[LoadingListener] = []

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    def subscribe(self, listener: LoadingListener) -> Callable[[], None]:
        """Call ``listener`` with the new value whenever the loading flag is set.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_loading(self, value: bool) -> None:
        self._is_loading = value
        for listener in list(self._listeners):
            listener(value)

    async def sign_in(self, email: str, password: str) -> AuthResult:
        """Sign in and land the user in a project."""
        return await self._authenticate(self.credentials.sign_in, email, password)

    async def sign_up(self, email: str, password: str) -> AuthResult:
        """Register and land the user in a project."""
        return await self._authenticate(self.credentials.sign_up, email, password)

    async def _authenticate(
        self,
        action: Callable[[str, str], Awaitable[AuthResult]],
        email: str,
        password: str,
    ) -> AuthResult:
        self._set_loading(True)
        try:
            try:
                result = await action(email, password)
            except Exception:
                logger.warning("Credential check for %s raised", email, exc_info=True)
                raise

            if not result.success:
                logger.info("Credential check for %s failed: %s", email, result.error)
                return result

            await reconcile_after_auth(
                self.anon_store,
                self.projects,
                self.navigator,
                clock=self._clock,
                rng=self._rng,
            )
            return AuthResult(success=True)
        finally:
            self._set_loading(False)
