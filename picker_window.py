"""Multi-month range picker window (tkinter) rendering a RangePicker."""

from __future__ import annotations

import tkinter as tk
from tkinter import font as tkfont
from typing import Callable

from month_grid import DayCell, MonthGrid, SelectMode
from range_picker import RangePicker
from selection import RangeSelection
from settings import load_settings, update_settings

# Colours
ACCENT = "#0078D4"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
HOVER_BG = "#E5F1FB"
UNAVAILABLE_FG = "#BBBBBB"
MODE_BG = {
    SelectMode.DAILY: "#B3D7F2",
    SelectMode.WEEKLY: "#8EC3EC",
    SelectMode.MONTHLY: "#6AAFE6",
}


class _MonthPanel:
    """Pre-allocated widget pool for a single month (header + 6 weeks)."""

    __slots__ = ("frame", "header", "day_headers", "day_cells")

    def __init__(self, parent: tk.Frame, fonts: dict, day_labels: list[str],
                 on_enter, on_leave, on_click) -> None:
        self.frame = tk.Frame(parent, bg=GRID_BG)

        self.header = tk.Label(
            self.frame, font=fonts["header"], bg=HEADER_BG, fg="#333333",
        )
        self.header.grid(row=0, column=0, columnspan=7, sticky="we", pady=(0, 2))

        self.day_headers: list[tk.Label] = []
        for col, abbr in enumerate(day_labels):
            lbl = tk.Label(
                self.frame, text=abbr, font=fonts["bold"], bg=GRID_BG,
                fg="#CC0000" if abbr in ("Sa", "Su") else "#333333", width=3,
            )
            lbl.grid(row=1, column=col)
            self.day_headers.append(lbl)

        self.day_cells: list[list[tk.Label]] = []
        for r in range(6):
            row_cells: list[tk.Label] = []
            for c in range(7):
                cell = tk.Label(self.frame, font=fonts["normal"], bg=GRID_BG, width=3)
                cell.grid(row=r + 2, column=c)
                # Bound once; handlers resolve the DayCell via _cell_map
                cell.bind("<Enter>", on_enter)
                cell.bind("<Leave>", on_leave)
                cell.bind("<Button-1>", on_click)
                row_cells.append(cell)
            self.day_cells.append(row_cells)


class PickerWindow:
    """Toplevel shell: navigation, month panels, Apply/Cancel and a footer."""

    def __init__(self, picker: RangePicker,
                 on_commit: Callable[[RangeSelection], None] | None = None) -> None:
        self.picker = picker
        self._on_commit = on_commit

        self.root = tk.Tk()
        self.root.title("Range Calendar")
        self.root.resizable(False, False)
        self.root.configure(bg=GRID_BG)
        self.root.attributes("-topmost", True)

        self._setup_fonts()

        # Widget-to-cell mapping (filled during _rebuild_months)
        self._cell_map: dict[int, DayCell] = {}
        self._widgets: list[tuple[tk.Label, DayCell]] = []
        self._panels: list[_MonthPanel] = []

        self._build_shell()
        self._rebuild_months()

        self.root.bind("<Escape>", lambda _e: self.cancel())
        self.root.protocol("WM_DELETE_WINDOW", self.cancel)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(family=base, size=10, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self._panel_fonts = {
            "header": self.font_header, "bold": self.font_bold,
            "normal": self.font_normal,
        }

    # ------------------------------------------------------------------
    # Build shell (once) — nav bar + months placeholder + buttons + footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(padx=6, pady=4)

        nav = tk.Frame(outer, bg=GRID_BG)
        nav.pack(fill="x", pady=(0, 2))

        btn_prev = tk.Label(nav, text="◀", font=self.font_nav, bg=GRID_BG, cursor="hand2")
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: self._navigate(-1))

        btn_next = tk.Label(nav, text="▶", font=self.font_nav, bg=GRID_BG, cursor="hand2")
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: self._navigate(1))

        self._months_frame = tk.Frame(outer, bg=GRID_BG)
        self._months_frame.pack()

        btn_frame = tk.Frame(outer, bg=GRID_BG)
        btn_frame.pack(pady=(6, 0))
        tk.Button(btn_frame, text="Apply", width=8, command=self.apply).pack(side="left", padx=4)
        tk.Button(btn_frame, text="Cancel", width=8, command=self.cancel).pack(side="left", padx=4)

        self._footer_label = tk.Label(
            outer, text=self._footer_text(), font=self.font_normal,
            bg=GRID_BG, fg="#555555",
        )
        self._footer_label.pack(pady=(4, 0))

    # ------------------------------------------------------------------
    # Month panels
    # ------------------------------------------------------------------
    def _rebuild_months(self) -> None:
        self._cell_map.clear()
        self._widgets.clear()

        grids = self.picker.window.grids
        while len(self._panels) < len(grids):
            self._panels.append(_MonthPanel(
                self._months_frame, self._panel_fonts, self.picker.day_labels,
                self._on_cell_enter, self._on_cell_leave, self._on_cell_click,
            ))

        for i, grid in enumerate(grids):
            panel = self._panels[i]
            panel.frame.grid(row=0, column=i, padx=6, pady=2, sticky="n")
            for lbl, abbr in zip(panel.day_headers, self.picker.day_labels):
                lbl.configure(text=abbr, fg="#CC0000" if abbr in ("Sa", "Su") else "#333333")
            self._fill_panel(panel, grid)

        for panel in self._panels[len(grids):]:
            panel.frame.grid_forget()

        self._redraw()

    def _fill_panel(self, panel: _MonthPanel, grid: MonthGrid) -> None:
        panel.header.configure(text=grid.label)
        for r, week in enumerate(grid.weeks):
            for c, cell in enumerate(week):
                widget = panel.day_cells[r][c]
                self._cell_map[id(widget)] = cell
                self._widgets.append((widget, cell))

    @staticmethod
    def _cell_colors(cell: DayCell) -> tuple[str, str, str]:
        """Return (bg, fg, cursor) for a cell."""
        if cell.is_placeholder:
            return GRID_BG, GRID_BG, ""
        if cell.is_unavailable:
            return GRID_BG, UNAVAILABLE_FG, ""
        if cell.select_mode is not SelectMode.NONE:
            return MODE_BG[cell.select_mode], "black", "hand2"
        if cell.is_hover:
            return HOVER_BG, "black", "hand2"
        return GRID_BG, "black", "hand2"

    def _redraw(self) -> None:
        for widget, cell in self._widgets:
            bg, fg, cursor = self._cell_colors(cell)
            widget.configure(
                text=str(cell.date.day) if cell.date else "",
                bg=bg, fg=fg, cursor=cursor,
            )
        self._footer_label.configure(text=self._footer_text())

    # ------------------------------------------------------------------
    # Cell events
    # ------------------------------------------------------------------
    def _on_cell_enter(self, event: tk.Event) -> None:
        cell = self._cell_map.get(id(event.widget))
        if cell is not None:
            self.picker.on_day_hover_enter(cell)
            self._redraw()

    def _on_cell_leave(self, event: tk.Event) -> None:
        cell = self._cell_map.get(id(event.widget))
        if cell is not None:
            self.picker.on_day_hover_leave(cell)
            self._redraw()

    def _on_cell_click(self, event: tk.Event) -> None:
        cell = self._cell_map.get(id(event.widget))
        if cell is not None and self.picker.on_day_click(cell):
            self._redraw()

    def _navigate(self, direction: int) -> None:
        if direction < 0:
            self.picker.on_previous_month()
        else:
            self.picker.on_next_month()
        self._rebuild_months()

    # ------------------------------------------------------------------
    # Footer text
    # ------------------------------------------------------------------
    def _footer_text(self) -> str:
        start, end = self.picker.committed_dates()
        if start is None:
            return "No date selected"
        if end is None:
            return f"Selected: {start.strftime('%m/%d/%Y')}"
        total_days = (end - start).days + 1
        return (f"{start.strftime('%m/%d/%Y')} → {end.strftime('%m/%d/%Y')}"
                f"  ({total_days} days)")

    # ------------------------------------------------------------------
    # Apply / Cancel / Toggle
    # ------------------------------------------------------------------
    def apply(self) -> None:
        committed = self.picker.on_apply()
        self._sync_visibility()
        if self._on_commit is not None:
            self._on_commit(committed)

    def cancel(self) -> None:
        self.picker.on_cancel()
        self._sync_visibility()

    def toggle(self) -> None:
        self.picker.on_toggle_open()
        self._sync_visibility()

    def _sync_visibility(self) -> None:
        self._redraw()
        if not self.picker.is_open:
            self.root.withdraw()
            return
        self.root.deiconify()
        self.root.update_idletasks()
        self._position_window()
        self.root.lift()
        self.root.focus_force()

    def _position_window(self) -> None:
        win_w = self.root.winfo_reqwidth()
        win_h = self.root.winfo_reqheight()
        x = (self.root.winfo_screenwidth() - win_w) // 2
        y = (self.root.winfo_screenheight() - win_h) // 2
        self.root.geometry(f"{win_w}x{win_h}+{x}+{y}")

    # ------------------------------------------------------------------
    # Settings dialog
    # ------------------------------------------------------------------
    def open_settings(self) -> None:
        current = load_settings()

        dlg = tk.Toplevel(self.root)
        dlg.title("Settings")
        dlg.resizable(False, False)
        dlg.attributes("-topmost", True)
        dlg.grab_set()

        frame = tk.Frame(dlg, padx=12, pady=8)
        frame.pack()

        def spin_row(row: int, text: str, value) -> tk.Spinbox:
            tk.Label(frame, text=text, font=self.font_normal).grid(
                row=row, column=0, sticky="w", pady=4,
            )
            spin = tk.Spinbox(frame, from_=0, to=6, width=4, font=self.font_normal)
            spin.delete(0, "end")
            spin.insert(0, str(value or 0))
            spin.grid(row=row, column=1, padx=(8, 0), pady=4)
            return spin

        def entry_row(row: int, text: str, value) -> tk.Entry:
            tk.Label(frame, text=text, font=self.font_normal).grid(
                row=row, column=0, sticky="w", pady=4,
            )
            entry = tk.Entry(frame, width=12, font=self.font_normal)
            entry.insert(0, "" if value is None else str(value))
            entry.grid(row=row, column=1, padx=(8, 0), pady=4)
            return entry

        spin_before = spin_row(0, "Months before:", current["backward_months"])
        spin_after = spin_row(1, "Months after:", current["forward_months"])
        weekly = entry_row(2, "Weekly range (days):", current["weekly_select_range"])
        monthly = entry_row(3, "Monthly range (days):", current["monthly_select_range"])
        min_date = entry_row(4, "First date (MM/DD/YYYY):", current["min_select_date"])
        max_date = entry_row(5, "Last date (MM/DD/YYYY):", current["max_select_date"])

        monday_var = tk.BooleanVar(value=current["use_monday"])
        tk.Checkbutton(
            frame, text="Week starts on Monday", variable=monday_var,
            font=self.font_normal,
        ).grid(row=6, column=0, columnspan=2, sticky="w", pady=4)

        def optional_int(entry: tk.Entry) -> int | None:
            text = entry.get().strip()
            return int(text) if text else None

        def on_ok() -> None:
            try:
                changes = {
                    "backward_months": int(spin_before.get()),
                    "forward_months": int(spin_after.get()),
                    "weekly_select_range": optional_int(weekly),
                    "monthly_select_range": optional_int(monthly),
                }
            except ValueError:
                return
            changes["min_select_date"] = min_date.get().strip() or None
            changes["max_select_date"] = max_date.get().strip() or None
            changes["use_monday"] = monday_var.get()

            dlg.destroy()
            self.reconfigure(update_settings(changes))

        btn_frame = tk.Frame(frame)
        btn_frame.grid(row=7, column=0, columnspan=2, pady=(8, 0))
        tk.Button(btn_frame, text="OK", width=8, command=on_ok).pack(side="left", padx=4)
        tk.Button(btn_frame, text="Cancel", width=8, command=dlg.destroy).pack(
            side="left", padx=4,
        )

    def reconfigure(self, settings: dict) -> None:
        """Swap in a fresh picker built from *settings*; the draft is dropped."""
        was_open = self.picker.is_open
        self.picker = RangePicker.from_settings(settings)
        self.picker.is_open = was_open
        self._rebuild_months()
