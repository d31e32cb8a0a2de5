"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import logging
import threading

from icon_gen import create_icon_image
from picker_window import PickerWindow
from range_picker import RangePicker
from settings import load_settings
from tray_icon import create_tray, tray_title


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    picker = RangePicker.from_settings(load_settings())

    def on_commit(committed) -> None:
        start, end = committed.dates
        tray.icon = create_icon_image(start)
        tray.title = tray_title(start, end)

    window = PickerWindow(picker, on_commit=on_commit)

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        window.root.after(0, window.toggle)

    def on_settings() -> None:
        window.root.after(0, window.open_settings)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            window.root.destroy()
        window.root.after(0, _quit)

    tray = create_tray(create_icon_image(), on_show, on_exit, on_settings=on_settings)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    window.root.mainloop()


if __name__ == "__main__":
    main()
