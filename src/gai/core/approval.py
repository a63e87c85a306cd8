"""Human approval of generated text through an interactive editor.

The candidate is written to a temporary file and opened in the operator's
editor. Saving the file approves it; quitting without saving (or saving an
empty file) rejects it. Saving is detected from the file's modification
time as well as its content, so an operator can approve the text unchanged
by just writing the file.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

import click

from gai.gateway.editor.abc import Editor
from gai.output import report, report_error, report_warning

logger = logging.getLogger(__name__)

# Initial mtime is pushed this far into the past so a save within the same
# filesystem timestamp tick is still observable.
_MTIME_BACKDATE_NS = 2_000_000_000


@dataclass(frozen=True)
class ReviewResult:
    """Outcome of a review session.

    Attributes:
        text: Final text with surrounding whitespace removed
        approved: True only if the operator saved non-empty text
    """

    text: str
    approved: bool


class ApprovalEditor:
    """Runs one review session per call against a scoped temporary file."""

    def __init__(self, editor: Editor) -> None:
        self._editor = editor

    def review(self, initial_text: str) -> ReviewResult:
        """Let the operator edit and approve initial_text.

        The temporary file is removed before returning on every path.
        Failures to create, write or read the file, to launch the editor,
        or a non-zero editor exit are reported and count as rejection.
        """
        report("🔎", "Review and edit the generated text. Save to approve, quit to cancel.")

        try:
            fd, raw_path = tempfile.mkstemp(prefix="gai-", suffix=".txt")
        except OSError as e:
            report_error(f"Failed to create temporary file: {e}")
            return ReviewResult(text="", approved=False)

        path = Path(raw_path)
        try:
            return self._run_session(fd, path, initial_text)
        finally:
            path.unlink(missing_ok=True)

    def _run_session(self, fd: int, path: Path, initial_text: str) -> ReviewResult:
        initial_bytes = initial_text.encode("utf-8")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(initial_bytes)
            stat = path.stat()
            os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns - _MTIME_BACKDATE_NS))
            initial_mtime_ns = path.stat().st_mtime_ns
        except OSError as e:
            report_error(f"Failed to write temporary file: {e}")
            return ReviewResult(text="", approved=False)

        try:
            exit_code = self._editor.edit_file(path)
        except OSError as e:
            report_error(f"Failed to launch editor: {e}")
            return ReviewResult(text="", approved=False)

        if exit_code != 0:
            report_error(f"Editor exited with code {exit_code}")
            return ReviewResult(text="", approved=False)

        try:
            final_mtime_ns = path.stat().st_mtime_ns
            final_bytes = path.read_bytes()
        except OSError as e:
            report_error(f"Failed to read temporary file: {e}")
            return ReviewResult(text="", approved=False)

        text = final_bytes.decode("utf-8", errors="replace").strip()
        saved = final_mtime_ns != initial_mtime_ns or final_bytes != initial_bytes
        logger.debug(
            "Review finished: saved=%s mtime %d -> %d", saved, initial_mtime_ns, final_mtime_ns
        )

        if not saved:
            report_warning("No changes saved in the editor")
            return ReviewResult(text=text, approved=False)
        if not text:
            report_warning("Edited text is empty")
            return ReviewResult(text=text, approved=False)

        click.echo(click.style(text, bold=True))
        return ReviewResult(text=text, approved=True)
