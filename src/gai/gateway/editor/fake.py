"""Fake editor for testing the approval step without a terminal."""

from dataclasses import dataclass
from pathlib import Path

from gai.gateway.editor.abc import Editor


@dataclass(frozen=True)
class SaveUnchanged:
    """Editor session in which the operator saves without editing."""


EditorSession = str | SaveUnchanged | None


class FakeEditor(Editor):
    """In-memory fake that simulates operator editing sessions.

    Constructor Injection:
    - sessions: one entry per expected edit_file() call, consumed in order:
        * str: the operator replaces the content with this text and saves
        * SaveUnchanged(): the operator saves the content as-is
        * None: the operator quits without saving
      Calls beyond the scripted sessions behave like None.
    - exit_code: exit code returned from every session
    - launch_error: OSError raised instead of running a session

    Mutation Tracking:
    - opened_contents: file content seen at the start of each session
    - opened_paths: paths passed to edit_file()
    """

    def __init__(
        self,
        *,
        sessions: list[EditorSession] | None = None,
        exit_code: int = 0,
        launch_error: OSError | None = None,
    ) -> None:
        self._sessions = list(sessions or [])
        self._exit_code = exit_code
        self._launch_error = launch_error
        self._opened_contents: list[str] = []
        self._opened_paths: list[Path] = []

    def edit_file(self, path: Path) -> int:
        if self._launch_error is not None:
            raise self._launch_error

        content = path.read_text(encoding="utf-8")
        self._opened_paths.append(path)
        self._opened_contents.append(content)

        session = self._sessions.pop(0) if self._sessions else None
        if isinstance(session, SaveUnchanged):
            path.write_text(content, encoding="utf-8")
        elif isinstance(session, str):
            path.write_text(session, encoding="utf-8")
        return self._exit_code

    @property
    def opened_contents(self) -> list[str]:
        return self._opened_contents

    @property
    def opened_paths(self) -> list[Path]:
        return self._opened_paths
