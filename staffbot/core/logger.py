"""
StaffBot - Logger Module
========================

Tree-style console and file logging.

DESIGN:
    One log block per event: a timestamped title line followed by
    "├─ key: value" detail lines. Blocks go to the console and to a
    dated log folder under LOGS_DIR (STAFFBOT_LOG_DIR, default "logs").
    Errors are also copied to a separate error file and, when an error
    webhook is set and an event loop is running, posted to Discord.

    Folders older than LOG_RETENTION_DAYS are removed at startup.
"""

import asyncio
import os
import shutil
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

import aiohttp

from staffbot.core.config import BOT_TZ, EmbedColors
from staffbot.core.constants import API_TIMEOUT


LOGS_DIR = Path(os.getenv("STAFFBOT_LOG_DIR", "logs"))
"""Root folder for dated log folders."""

LOG_RETENTION_DAYS = 7

Details = List[Tuple[str, str]]


def _tree_lines(items: Details) -> Iterator[str]:
    """Yield "├─ key: value" lines, closing the last one with "└─"."""
    last = len(items) - 1
    for i, (key, value) in enumerate(items):
        branch = "└─" if i == last else "├─"
        yield f"  {branch} {key}: {value}"


class TreeLogger:
    """
    Console and file logger with tree-formatted detail blocks.

    Attributes:
        run_id: Short id of this process, written in the session header
            and in webhook footers.
        log_file: Dated file receiving every line.
        error_file: Dated file receiving error lines only.
    """

    def __init__(self, logs_dir: Path = LOGS_DIR) -> None:
        self.run_id: str = uuid.uuid4().hex[:8]
        self._logs_dir = logs_dir
        self._webhook_url: Optional[str] = None
        self._webhook_tasks: Set[asyncio.Task] = set()

        day = datetime.now(BOT_TZ).strftime("%Y-%m-%d")
        day_dir = logs_dir / day
        day_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = day_dir / f"StaffBot-{day}.log"
        self.error_file = day_dir / f"StaffBot-Errors-{day}.log"

        self._remove_expired_folders()
        self._append(self.log_file, f"\n=== SESSION {self.run_id} started {self._now()} ===\n")

    def set_webhook(self, url: Optional[str]) -> None:
        """Post error blocks to this Discord webhook (None disables)."""
        self._webhook_url = url

    # =========================================================================
    # Files
    # =========================================================================

    def _remove_expired_folders(self) -> None:
        today = datetime.now(BOT_TZ).date()
        for folder in self._logs_dir.iterdir():
            if not folder.is_dir():
                continue
            try:
                day = datetime.strptime(folder.name, "%Y-%m-%d").date()
            except ValueError:
                continue
            if (today - day).days > LOG_RETENTION_DAYS:
                shutil.rmtree(folder, ignore_errors=True)

    @staticmethod
    def _append(path: Path, text: str) -> None:
        with open(path, "a", encoding="utf-8") as f:
            f.write(text)

    @staticmethod
    def _now() -> str:
        return datetime.now(BOT_TZ).strftime("%I:%M:%S %p %Z")

    def _emit(self, lines: List[str], error: bool = False) -> None:
        """Print lines and append them to the log file(s)."""
        text = "\n".join(lines)
        print(text)
        self._append(self.log_file, text + "\n")
        if error:
            self._append(self.error_file, text + "\n")

    def _line(self, msg: str, emoji: str) -> str:
        return f"[{self._now()}] {emoji} {msg}"

    # =========================================================================
    # Public API
    # =========================================================================

    def tree(self, title: str, items: Details, emoji: str = "📦") -> None:
        """
        Log a titled block of details.

        Example output:
            [02:30:45 PM UTC] ➕ STAFF ROLE ADDED
              ├─ Member: someone (123)
              └─ Role: Staff (456)
        """
        self._emit([self._line(title, emoji), *_tree_lines(items)])

    def debug(self, msg: str) -> None:
        """Only logged when the DEBUG environment variable is set."""
        if os.getenv("DEBUG"):
            self._emit([self._line(msg, "🔍")])

    def info(self, msg: str) -> None:
        self._emit([self._line(msg, "ℹ️")])

    def success(self, msg: str) -> None:
        self._emit([self._line(msg, "✅")])

    def warning(self, msg: str) -> None:
        self._emit([self._line(msg, "⚠️")])

    def critical(self, msg: str) -> None:
        self._emit([self._line(msg, "🚨")], error=True)

    def error(self, msg: str, details: Optional[Details] = None) -> None:
        """
        Log an error, optionally with a details block.

        A block with details is also posted to the error webhook when
        one is set and this is called from inside a running event loop.
        """
        self._emit([self._line(msg, "❌"), *_tree_lines(details or [])], error=True)

        if details and self._webhook_url:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                return
            task = loop.create_task(self._post_error(msg, details))
            self._webhook_tasks.add(task)
            task.add_done_callback(self._webhook_tasks.discard)

    # =========================================================================
    # Error Webhook
    # =========================================================================

    def build_error_payload(self, title: str, details: Details) -> Dict[str, Any]:
        description = "\n".join(f"**{key}:** {value}" for key, value in details)
        return {
            "embeds": [{
                "title": f"❌ {title}",
                "description": description[:4000],
                "color": EmbedColors.ERROR,
                "timestamp": datetime.now(BOT_TZ).isoformat(),
                "footer": {"text": f"Run ID: {self.run_id}"},
            }]
        }

    async def _post_error(self, title: str, details: Details) -> None:
        # Failures are printed, not logged, so a broken webhook cannot recurse
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    self._webhook_url,
                    json=self.build_error_payload(title, details),
                    timeout=aiohttp.ClientTimeout(total=API_TIMEOUT),
                ) as resp:
                    if resp.status >= 400:
                        print(f"Error webhook returned HTTP {resp.status}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            print(f"Error webhook failed: {e}")


logger = TreeLogger()
"""Shared logger instance."""


__all__ = [
    "logger",
    "TreeLogger",
    "LOGS_DIR",
]
