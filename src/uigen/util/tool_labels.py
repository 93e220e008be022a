"""Human-readable labels for the assistant's file tool calls."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

EDITOR_TOOL = "str_replace_editor"
FILE_MANAGER_TOOL = "file_manager"

EDITOR_VERBS = {
    "create": "Creating",
    "str_replace": "Editing",
    "insert": "Editing",
    "view": "Viewing",
    "undo_edit": "Undoing edit in",
}


def _file_name(path: Any) -> str | None:
    if not path:
        return None
    path = str(path)
    return path.split("/")[-1] or path


def _parse_args(args: Any) -> dict[str, Any] | None:
    if isinstance(args, str):
        try:
            args = json.loads(args)
        except json.JSONDecodeError:
            return None
    return args if isinstance(args, dict) else None


def tool_call_message(tool_name: str, args: Any = None) -> str:
    """Describe a tool call, falling back to the tool name.

    Args:
        tool_name: Name of the invoked tool
        args: Tool arguments, as a mapping or a JSON string

    Returns:
        A short label such as "Creating App.jsx"
    """
    if not args:
        return tool_name

    parsed = _parse_args(args)
    if parsed is None:
        return tool_name

    command = parsed.get("command")
    file_name = _file_name(parsed.get("path"))
    if file_name is None:
        return tool_name

    if tool_name == EDITOR_TOOL:
        verb = EDITOR_VERBS.get(command, "Modifying")
        return f"{verb} {file_name}"

    if tool_name == FILE_MANAGER_TOOL:
        if command == "rename":
            new_name = _file_name(parsed.get("new_path"))
            if new_name is None:
                return f"Renaming {file_name}"
            return f"Renaming {file_name} to {new_name}"
        if command == "delete":
            return f"Deleting {file_name}"
        return f"Managing {file_name}"

    return tool_name


@dataclass
class ToolCallBadge:
    """Display state for one tool invocation in the chat."""

    tool_name: str
    state: str
    args: Any = None
    result: Any = None
    message: str = field(init=False)

    def __post_init__(self):
        self.message = tool_call_message(self.tool_name, self.args)

    @property
    def is_complete(self) -> bool:
        return self.state == "result"

    @classmethod
    def from_invocation(cls, invocation: dict[str, Any]) -> "ToolCallBadge":
        return cls(
            tool_name=invocation["toolName"],
            state=invocation.get("state", ""),
            args=invocation.get("args"),
            result=invocation.get("result"),
        )
