"""Month calendar window (tkinter); clicking a day opens its note."""

import logging
from datetime import date
from tkinter import filedialog, messagebox
from tkinter import font as tkfont
import tkinter as tk

from calendar_logic import (
    DAY_ABBR,
    GRID_CELLS,
    MonthRelation,
    Navigation,
    ViewState,
    month_grid,
    month_title,
    navigate,
)
from exceptions import NoteError
from note_paths import DEFAULT_PATTERN
from notes import note_path_for, open_note
from settings import load_settings, note_root, save_settings

logger = logging.getLogger(__name__)

# Colours
ACCENT = "#0078D4"
HOVER_BG = "#E5F1FB"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
DIM_FG = "#AAAAAA"

class _MonthPanel:
    """Pre-allocated widget pool for one month (weekday header + 42 cells)."""

    __slots__ = ("frame", "day_headers", "day_cells")

    def __init__(self, parent: tk.Frame, fonts: dict,
                 on_click, on_enter, on_leave) -> None:
        self.frame = tk.Frame(parent, bg=GRID_BG)

        self.day_headers: list[tk.Label] = []
        for col, abbr in enumerate(DAY_ABBR):
            lbl = tk.Label(
                self.frame, text=abbr, font=fonts["bold"], bg=GRID_BG, fg="#333333", width=3,
            )
            lbl.grid(row=0, column=col)
            self.day_headers.append(lbl)

        self.day_cells: list[tk.Canvas] = []
        for i in range(GRID_CELLS):
            cell = tk.Canvas(
                self.frame, width=fonts["cell_w"], height=fonts["cell_h"],
                bg=GRID_BG, highlightthickness=0, borderwidth=0,
            )
            cell.grid(row=i // 7 + 1, column=i % 7)
            # Bound once; handlers look the date up in _widget_dates
            cell.bind("<ButtonRelease-1>", on_click)
            cell.bind("<Enter>", on_enter)
            cell.bind("<Leave>", on_leave)
            self.day_cells.append(cell)

class CalendarWindow:
    """Single-month calendar; the displayed month is a ViewState."""

    def __init__(self) -> None:
        self.root = tk.Tk()
        self.root.title("Markdown Calendar")
        self.root.resizable(False, False)
        self.root.configure(bg=GRID_BG)
        self.root.attributes("-topmost", True)

        self._setup_fonts()

        self.settings = load_settings()
        today = date.today()
        self.view = ViewState(today.year, today.month)

        # Widget-to-date mapping for clickable (current-month) cells
        self._widget_dates: dict[int, date] = {}
        self._title_label: tk.Label | None = None
        self._footer_label: tk.Label | None = None

        _tmp = tk.Label(self.root, text="00", font=self.font_normal, width=3)
        _tmp.update_idletasks()
        self._panel_fonts = {
            "bold": self.font_bold, "normal": self.font_normal,
            "cell_w": _tmp.winfo_reqwidth(), "cell_h": _tmp.winfo_reqheight(),
        }
        _tmp.destroy()

        self._build_shell()
        self._panel = _MonthPanel(
            self._month_frame, self._panel_fonts,
            self._on_cell_click, self._on_cell_enter, self._on_cell_leave,
        )
        self._panel.frame.pack()
        self._render()

        self.root.bind("<Escape>", lambda _e: self.hide())
        self.root.bind("<Left>", lambda _e: self.dispatch(Navigation.PREV))
        self.root.bind("<Right>", lambda _e: self.dispatch(Navigation.NEXT))
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
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
        self.font_footer = tkfont.Font(family=base, size=8)

    # ------------------------------------------------------------------
    # Build shell (once): nav bar + month placeholder + today + footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(padx=6, pady=4)

        # Navigation row: ◀  Month Year  ▶
        nav = tk.Frame(outer, bg=HEADER_BG)
        nav.pack(fill="x", pady=(0, 4))

        btn_prev = tk.Label(
            nav, text="◀", font=self.font_nav, bg=HEADER_BG, cursor="hand2"
        )
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: self.dispatch(Navigation.PREV))

        btn_next = tk.Label(
            nav, text="▶", font=self.font_nav, bg=HEADER_BG, cursor="hand2"
        )
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: self.dispatch(Navigation.NEXT))

        self._title_label = tk.Label(
            nav, font=self.font_header, bg=HEADER_BG, fg="#333333",
        )
        self._title_label.pack(side="left", expand=True)

        self._month_frame = tk.Frame(outer, bg=GRID_BG)
        self._month_frame.pack()

        bottom = tk.Frame(outer, bg=GRID_BG)
        bottom.pack(fill="x", pady=(4, 0))

        btn_today = tk.Label(
            bottom, text="Go to Today", font=self.font_bold, bg=GRID_BG, fg=ACCENT,
            cursor="hand2",
        )
        btn_today.pack(side="left")
        btn_today.bind("<Button-1>", lambda _e: self.dispatch(Navigation.TODAY))

        btn_settings = tk.Label(
            bottom, text="⚙", font=self.font_nav, bg=GRID_BG, cursor="hand2",
        )
        btn_settings.pack(side="right")
        btn_settings.bind("<Button-1>", lambda _e: self.open_settings())

        self._footer_label = tk.Label(
            outer, text="", font=self.font_footer, bg=GRID_BG, fg="#555555",
            anchor="w",
        )
        self._footer_label.pack(fill="x", pady=(2, 0))

    # ------------------------------------------------------------------
    # Navigation: reduce the view state, then refill every cell
    # ------------------------------------------------------------------
    def dispatch(self, command: Navigation) -> None:
        self.view = navigate(self.view, command, date.today())
        self._render()

    def _render(self) -> None:
        self._widget_dates.clear()
        grid = month_grid(self.view.year, self.view.month, date.today())
        self._title_label.configure(text=month_title(grid.year, grid.month))

        for cell_widget, cell in zip(self._panel.day_cells, grid.cells):
            if cell.relation is MonthRelation.CURRENT:
                bg, fg = (ACCENT, "white") if cell.is_today else (GRID_BG, "black")
                self._draw_cell(
                    cell_widget, str(cell.day), bg, fg,
                    self.font_bold if cell.is_today else self.font_normal,
                    cursor="hand2",
                )
                self._widget_dates[id(cell_widget)] = cell.date
            else:
                self._draw_cell(cell_widget, str(cell.day), GRID_BG, DIM_FG,
                                self.font_normal)

    @staticmethod
    def _draw_cell(cell: tk.Canvas, text: str, bg: str, fg: str, font,
                   cursor: str = "") -> None:
        cell.delete("all")
        w = cell.winfo_width()
        h = cell.winfo_height()
        if w <= 1:
            w = int(cell["width"]) + 2
        if h <= 1:
            h = int(cell["height"]) + 2
        cell.configure(bg=bg, cursor=cursor)
        cell.create_text(w // 2, h // 2, text=text, fill=fg, font=font)

    # ------------------------------------------------------------------
    # Cell events
    # ------------------------------------------------------------------
    def _on_cell_click(self, event: tk.Event) -> None:
        d = self._widget_dates.get(id(event.widget))
        if d is not None:
            self.open_date(d)

    def open_date(self, d: date) -> None:
        """Open (creating if needed) the note for *d*, reporting errors."""
        try:
            open_note(d, self.settings)
        except NoteError as e:
            logger.error("Could not open note for %s: %s", d.isoformat(), e)
            messagebox.showerror("Markdown Calendar", str(e), parent=self.root)

    def _on_cell_enter(self, event: tk.Event) -> None:
        d = self._widget_dates.get(id(event.widget))
        if d is None:
            return
        if event.widget["bg"] == GRID_BG:
            event.widget.configure(bg=HOVER_BG)
        try:
            text = note_path_for(d, self.settings)
        except NoteError:
            text = "No notes folder set"
        self._footer_label.configure(text=text)

    def _on_cell_leave(self, event: tk.Event) -> None:
        if event.widget["bg"] == HOVER_BG:
            event.widget.configure(bg=GRID_BG)
        self._footer_label.configure(text="")

    # ------------------------------------------------------------------
    # Settings dialog
    # ------------------------------------------------------------------
    def open_settings(self) -> None:
        dlg = tk.Toplevel(self.root)
        dlg.title("Settings")
        dlg.resizable(False, False)
        dlg.attributes("-topmost", True)
        dlg.grab_set()

        frame = tk.Frame(dlg, padx=12, pady=8)
        frame.pack()

        tk.Label(frame, text="Notes folder:", font=self.font_normal).grid(
            row=0, column=0, sticky="w", pady=4,
        )
        root_var = tk.StringVar(value=note_root(self.settings) or "")
        tk.Entry(frame, textvariable=root_var, width=36, font=self.font_normal).grid(
            row=0, column=1, padx=(8, 0), pady=4,
        )

        def _browse() -> None:
            chosen = filedialog.askdirectory(
                parent=dlg, initialdir=root_var.get() or None, title="Notes folder")
            if chosen:
                root_var.set(chosen)

        tk.Button(frame, text="…", command=_browse).grid(
            row=0, column=2, padx=(4, 0), pady=4,
        )

        tk.Label(frame, text="File path pattern:", font=self.font_normal).grid(
            row=1, column=0, sticky="w", pady=4,
        )
        pattern_var = tk.StringVar(
            value=self.settings.get("file_path_pattern") or DEFAULT_PATTERN)
        tk.Entry(frame, textvariable=pattern_var, width=36, font=self.font_normal).grid(
            row=1, column=1, padx=(8, 0), pady=4,
        )

        tk.Label(frame, text="Editor command:", font=self.font_normal).grid(
            row=2, column=0, sticky="w", pady=4,
        )
        editor_var = tk.StringVar(value=self.settings.get("editor") or "")
        tk.Entry(frame, textvariable=editor_var, width=36, font=self.font_normal).grid(
            row=2, column=1, padx=(8, 0), pady=4,
        )
        tk.Label(
            frame, text="Tokens: YYYY  YY  MM  DD.  Empty editor = system default.",
            font=self.font_footer, fg="#555555",
        ).grid(row=3, column=0, columnspan=3, sticky="w")

        btn_frame = tk.Frame(frame)
        btn_frame.grid(row=4, column=0, columnspan=3, pady=(8, 0))

        def on_ok() -> None:
            if self._apply_settings(root_var.get(), pattern_var.get(), editor_var.get()):
                dlg.destroy()

        tk.Button(btn_frame, text="OK", width=8, command=on_ok).pack(
            side="left", padx=4,
        )
        tk.Button(btn_frame, text="Cancel", width=8, command=dlg.destroy).pack(
            side="left", padx=4,
        )

    def _apply_settings(self, root: str, pattern: str, editor: str) -> bool:
        """Store the dialog values; returns False if they could not be saved."""
        settings = load_settings()
        root = root.strip()
        others = [r for r in settings["note_roots"] if r != root]
        settings["note_roots"] = ([root] if root else []) + others
        settings["file_path_pattern"] = pattern or DEFAULT_PATTERN
        settings["editor"] = editor.strip() or None
        try:
            save_settings(settings)
        except OSError as e:
            logger.error("Could not save settings: %s", e)
            messagebox.showerror("Markdown Calendar",
                                 f"Could not save settings: {e}", parent=self.root)
            return False
        logger.info("Settings saved: notes folder %r, pattern %r",
                    root, settings["file_path_pattern"])
        self.settings = settings
        return True

    # ------------------------------------------------------------------
    # Persist window position
    # ------------------------------------------------------------------
    def _persist_position(self) -> None:
        settings = load_settings()
        settings["window_x"] = self.root.winfo_x()
        settings["window_y"] = self.root.winfo_y()
        try:
            save_settings(settings)
        except OSError as e:
            logger.warning("Could not save window position: %s", e)
            return
        self.settings = settings

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.view = navigate(self.view, Navigation.TODAY, date.today())
        self._render()
        self.root.deiconify()
        self.root.update_idletasks()
        x, y = self.settings.get("window_x"), self.settings.get("window_y")
        if x is not None and y is not None:
            self.root.geometry(f"+{x}+{y}")
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        try:
            if self.root.winfo_viewable():
                self._persist_position()
        finally:
            self.root.withdraw()
