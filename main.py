"""Entry point: glues pystray (daemon thread) with tkinter (main thread)."""

import ctypes
import locale
import logging
import os
import sys
import threading
from datetime import date

from calendar_window import CalendarWindow
from icon_gen import create_icon_image
from tray_icon import create_tray

logger = logging.getLogger(__name__)


def _setup_logging() -> None:
    level = os.environ.get("MARKDOWN_CALENDAR_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    _setup_logging()

    # Month names and note headings follow the user's locale
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning("Falling back to the C locale for dates: %s", e)

    # DPI awareness so positions / fonts are crisp on Hi-DPI monitors
    if sys.platform == "win32":
        try:
            ctypes.windll.shcore.SetProcessDpiAwareness(1)
        except (AttributeError, OSError):
            pass

    cal_win = CalendarWindow()

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        cal_win.root.after(0, cal_win.toggle)

    def on_today_note() -> None:
        cal_win.root.after(0, lambda: cal_win.open_date(date.today()))

    def on_settings() -> None:
        cal_win.root.after(0, cal_win.open_settings)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            cal_win.root.destroy()
        cal_win.root.after(0, _quit)

    tray = create_tray(create_icon_image(), on_show, on_exit,
                       on_today_note=on_today_note, on_settings=on_settings)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()
    logger.info("Markdown Calendar started")

    # tkinter main loop on the main thread
    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
