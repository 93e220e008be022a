"""Main entry point for uigen - dev server, sign-in commands, and UI."""

import argparse
import asyncio
import getpass
import logging
import socket
import sys

import httpx

from .auth.orchestrator import AuthOrchestrator
from .ui.client.api_client import APIClient
from .util.anon_work import FileAnonWorkStore
from .util.navigation import BrowserNavigator


def find_free_port() -> int:
    """Find a free port by binding to port 0."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("", 0))
        return s.getsockname()[1]


def run_server(host: str = "127.0.0.1", port: int = 0) -> None:
    """Run the uigen development API server.

    Args:
        host: Host to bind to
        port: Port to run on (0 for ephemeral)
    """
    import uvicorn
    from uigen.server.main import create_app

    if port == 0:
        port = find_free_port()

    app = create_app()
    print(f"Starting uigen API server on {host}:{port}")
    uvicorn.run(app, host=host, port=port)


def build_orchestrator(
    client: APIClient,
    app_url: str | None = None,
    anon_work_path=None,
) -> AuthOrchestrator:
    """Wire the orchestrator to the HTTP backend, the local anon store and the browser."""
    return AuthOrchestrator(
        credentials=client,
        anon_store=FileAnonWorkStore(anon_work_path),
        projects=client,
        navigator=BrowserNavigator(app_url),
    )


async def run_auth(mode: str, email: str, password: str, server_url: str | None, app_url: str | None) -> int:
    """Sign in or sign up, then open the landing project.

    Returns:
        Process exit code
    """
    async with APIClient(server_url) as client:
        orchestrator = build_orchestrator(client, app_url=app_url)
        action = orchestrator.sign_in if mode == "sign-in" else orchestrator.sign_up
        result = await action(email, password)

    if not result.success:
        print(f"❌ {result.error or 'Authentication failed'}")
        return 1

    print(f"✅ Opened {orchestrator.navigator.current}")
    return 0


def run_ui(port: int, server_url: str | None, app_url: str | None) -> None:
    """Launch the Gradio sign-in panel."""
    from .ui.gradio.auth_ui import launch_auth_ui

    client = APIClient(server_url)
    try:
        orchestrator = build_orchestrator(client, app_url=app_url)
        launch_auth_ui(orchestrator, port=port, current_path=lambda: orchestrator.navigator.current)
    finally:
        asyncio.run(client.close())


def main(argv: list[str] | None = None) -> int:
    """Main entry point for uigen."""
    parser = argparse.ArgumentParser(description="uigen: AI-assisted UI generation")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    server_parser = subparsers.add_parser("server", help="Run the development API server")
    server_parser.add_argument("--host", type=str, default="127.0.0.1", help="Host to bind (default: 127.0.0.1)")
    server_parser.add_argument("--port", type=int, default=0, help="Port (default: 0 = ephemeral)")

    for name, help_text in (("sign-in", "Sign in and open your project"), ("sign-up", "Create an account")):
        auth_parser = subparsers.add_parser(name, help=help_text)
        auth_parser.add_argument("--email", type=str, required=True, help="Account email")
        auth_parser.add_argument("--password", type=str, default=None, help="Password (prompted if omitted)")
        auth_parser.add_argument("--server-url", type=str, default=None, help="API server URL")
        auth_parser.add_argument("--app-url", type=str, default=None, help="Browser app URL")

    ui_parser = subparsers.add_parser("ui", help="Launch the sign-in panel")
    ui_parser.add_argument("--port", type=int, default=0, help="Port for UI (default: 0 = ephemeral)")
    ui_parser.add_argument("--server-url", type=str, default=None, help="API server URL")
    ui_parser.add_argument("--app-url", type=str, default=None, help="Browser app URL")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "server":
            run_server(host=args.host, port=args.port)
            return 0

        if args.command == "ui":
            run_ui(args.port, args.server_url, args.app_url)
            return 0

        password = args.password
        if password is None:
            password = getpass.getpass("Password: ")
        return asyncio.run(run_auth(args.command, args.email, password, args.server_url, args.app_url))
    except httpx.HTTPError as e:
        print(f"\n❌ Could not reach the uigen server: {e}")
        return 1
    except ValueError as e:
        print(f"\n❌ Error: {e}")
        return 1
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"\n❌ Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
