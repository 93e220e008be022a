"""Gradio sign-in panel for uigen."""

from __future__ import annotations

import logging
from typing import AsyncIterator, Literal

import gradio as gr
import httpx

from uigen.auth.models import AuthResult
from uigen.auth.orchestrator import AuthOrchestrator

logger = logging.getLogger(__name__)

AuthMode = Literal["sign_in", "sign_up"]

PENDING_MESSAGES = {
    "sign_in": "Signing in...",
    "sign_up": "Creating account...",
}

DONE_MESSAGES = {
    "sign_in": "Signed in.",
    "sign_up": "Account created.",
}


def status_message(result: AuthResult, landed_on: str | None = None, mode: AuthMode = "sign_in") -> str:
    """Markdown shown under the form once a request finishes."""
    if not result.success:
        return f"**Error:** {result.error or 'Authentication failed'}"
    done = DONE_MESSAGES[mode]
    if landed_on:
        return f"{done} Opened `{landed_on}`."
    return done


class AuthPanel:
    """Binds an AuthOrchestrator to a pair of Gradio buttons."""

    def __init__(self, orchestrator: AuthOrchestrator, current_path=None):
        self.orchestrator = orchestrator
        self._current_path = current_path
        self.loading = orchestrator.is_loading
        self._unsubscribe = orchestrator.subscribe(self._on_loading)

    def _on_loading(self, value: bool) -> None:
        self.loading = value

    def close(self) -> None:
        self._unsubscribe()

    def _button_updates(self) -> tuple:
        interactive = not self.loading
        return gr.update(interactive=interactive), gr.update(interactive=interactive)

    async def submit(self, mode: AuthMode, email: str, password: str) -> AsyncIterator[tuple]:
        """Run sign-in or sign-up, yielding (status, sign_in_btn, sign_up_btn) updates."""
        action = self.orchestrator.sign_in if mode == "sign_in" else self.orchestrator.sign_up
        yield (PENDING_MESSAGES[mode], gr.update(interactive=False), gr.update(interactive=False))

        try:
            result = await action(email, password)
        except httpx.HTTPError as e:
            logger.warning("Auth request failed", exc_info=True)
            yield (f"**Error:** could not reach the server ({e})", *self._button_updates())
            return

        landed_on = self._current_path() if (result.success and self._current_path) else None
        yield (status_message(result, landed_on, mode), *self._button_updates())

    async def sign_in(self, email: str, password: str) -> AsyncIterator[tuple]:
        async for update in self.submit("sign_in", email, password):
            yield update

    async def sign_up(self, email: str, password: str) -> AsyncIterator[tuple]:
        async for update in self.submit("sign_up", email, password):
            yield update


def create_auth_ui(panel: AuthPanel) -> gr.Blocks:
    """Build the sign-in Blocks app."""
    with gr.Blocks(title="uigen - Sign in") as demo:
        gr.Markdown("## Sign in to save your designs")
        email = gr.Textbox(label="Email", placeholder="you@example.com")
        password = gr.Textbox(label="Password", type="password")
        with gr.Row():
            sign_in_btn = gr.Button("Sign in", variant="primary")
            sign_up_btn = gr.Button("Sign up")
        status = gr.Markdown("")

        outputs = [status, sign_in_btn, sign_up_btn]
        sign_in_btn.click(panel.sign_in, inputs=[email, password], outputs=outputs)
        sign_up_btn.click(panel.sign_up, inputs=[email, password], outputs=outputs)

    return demo


def launch_auth_ui(orchestrator: AuthOrchestrator, port: int = 0, current_path=None) -> None:
    """Launch the sign-in panel (blocking)."""
    panel = AuthPanel(orchestrator, current_path=current_path)
    demo = create_auth_ui(panel)
    try:
        demo.launch(server_port=port or None)
    finally:
        panel.close()
