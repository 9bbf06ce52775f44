"""The update window and the parsing of release notes it displays."""

from __future__ import annotations

import logging
import threading

from ghupdate.request import ClientRequest, Release

_logger = logging.getLogger("ghupdate")

DEFAULT_REPOSITORY = "https://github.com/Hunlongyu/ReadMe"
WINDOW_TITLE = "程序更新"
CURRENT_VERSION_PREFIX = "当前版本："
LATEST_VERSION_PREFIX = "最新版本："
LOGS_TIPS = "更新日志："
NO_LOGS = "无更新日志"
_LOG_HEADING = "更新日志"


def parse_logs(log: str) -> list[str]:
    """Split release notes into trimmed, non-empty lines, dropping heading lines."""
    lines = []
    for line in log.replace("\r\n", "\n").split("\n"):
        if _LOG_HEADING in line:
            continue
        line = line.strip(" \t")
        if line:
            lines.append(line)
    return lines


class Home:
    """The update window: version labels, release notes and action buttons."""

    def __init__(
        self,
        client: ClientRequest | None = None,
        repository_url: str = DEFAULT_REPOSITORY,
    ) -> None:
        self.client = client or ClientRequest()
        self.repository_url = repository_url
        self.title = WINDOW_TITLE
        self.width = 600
        self.height = 400
        self.current_version_text = CURRENT_VERSION_PREFIX + "v1.0.1"
        self.latest_version_text = LATEST_VERSION_PREFIX + "v2.0.0"
        self.logs: list[str] = []
        self.progress = 0
        self.ignore_enabled = True
        self.update_enabled = True
        self.cancel_enabled = True
        self._root = None
        self._widgets: dict[str, object] = {}

    def render_logs(self, release: Release) -> None:
        """Show the tag and notes of *release*; a release without a tag is ignored."""
        if not release.tag_name:
            return
        self.latest_version_text = LATEST_VERSION_PREFIX + release.tag_name
        self.logs = parse_logs(release.body) if release.body else [NO_LOGS]
        self._refresh()

    def show(self) -> None:
        """Build the window and run it until it is closed."""
        import tkinter as tk
        from tkinter import ttk

        root = tk.Tk()
        self._root = root
        root.title(self.title)
        root.resizable(False, True)
        root.update_idletasks()
        x = max((root.winfo_screenwidth() - self.width) // 2, 0)
        y = max((root.winfo_screenheight() - self.height) // 2, 0)
        root.geometry(f"{self.width}x{self.height}+{x}+{y}")

        grid = ttk.Frame(root, padding=10)
        grid.pack(fill=tk.BOTH, expand=True)
        grid.columnconfigure(0, weight=1)
        grid.rowconfigure(2, weight=1)

        versions = ttk.Frame(grid)
        versions.grid(row=0, column=0, sticky="w")
        current = ttk.Label(versions, text=self.current_version_text)
        current.pack(side=tk.LEFT)
        latest = ttk.Label(versions, text=self.latest_version_text)
        latest.pack(side=tk.LEFT, padx=(40, 0))

        ttk.Label(grid, text=LOGS_TIPS).grid(row=1, column=0, sticky="w", pady=(10, 0))

        listbox = tk.Listbox(grid)
        listbox.grid(row=2, column=0, sticky="nsew", pady=4)
        listbox.bind("<<ListboxSelect>>", lambda _e: listbox.selection_clear(0, tk.END))

        progress = ttk.Progressbar(grid, value=self.progress, maximum=100)
        progress.grid(row=3, column=0, sticky="ew")

        buttons = ttk.Frame(grid)
        buttons.grid(row=4, column=0, sticky="ew", pady=(10, 0))
        buttons.columnconfigure(0, weight=1)
        ignore = ttk.Button(buttons, text="忽略该版本", width=12, command=self._on_ignore)
        ignore.grid(row=0, column=0, sticky="w")
        update = ttk.Button(buttons, text="更新", command=self._on_update)
        update.grid(row=0, column=1)
        cancel = ttk.Button(buttons, text="取消", command=self._on_cancel)
        cancel.grid(row=0, column=2, padx=(10, 0))

        self._widgets = {
            "latest": latest,
            "logs": listbox,
            "progress": progress,
            "ignore": ignore,
            "update": update,
            "cancel": cancel,
        }
        self._refresh()
        root.protocol("WM_DELETE_WINDOW", self._on_cancel)
        try:
            root.mainloop()
        finally:
            self._root = None
            self._widgets = {}

    def _refresh(self) -> None:
        if not self._widgets:
            return
        self._widgets["latest"].configure(text=self.latest_version_text)
        listbox = self._widgets["logs"]
        listbox.delete(0, "end")
        for line in self.logs:
            listbox.insert("end", line)
        self._widgets["progress"].configure(value=self.progress)
        for name in ("ignore", "update", "cancel"):
            enabled = getattr(self, f"{name}_enabled")
            self._widgets[name].configure(state="normal" if enabled else "disabled")

    def _on_ignore(self) -> None:
        self.ignore_enabled = False
        print("ignore clicked")
        self._refresh()

    def _on_update(self) -> None:
        self.update_enabled = False
        self._refresh()
        print("update clicked")
        threading.Thread(target=self._fetch_latest, daemon=True).start()
        self.update_enabled = True
        self._refresh()

    def _on_cancel(self) -> None:
        self.cancel_enabled = False
        print("cancel clicked")
        if self._root is not None:
            self._root.destroy()

    def _fetch_latest(self) -> None:
        release = self.client.get_latest_release(self.repository_url)
        if not release.tag_name:
            return
        root = self._root
        if root is None:
            return
        try:
            root.after(0, self.render_logs, release)
        except RuntimeError:
            _logger.debug("window closed before release could be shown")