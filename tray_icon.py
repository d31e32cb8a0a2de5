"""System-tray launcher for the picker via pystray."""

from datetime import date
from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu


def tray_title(start: date | None, end: date | None) -> str:
    if start is None:
        return "Range Calendar"
    if end is None:
        return f"Range Calendar – {start:%m/%d/%Y}"
    return f"Range Calendar – {start:%m/%d/%Y} to {end:%m/%d/%Y}"


def create_tray(
    icon_image: Image.Image,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_settings: Callable[[], None] | None = None,
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    items: list[MenuItem | Menu] = [
        MenuItem("Show Picker", lambda _icon, _item: on_show(), default=True),
    ]
    if on_settings is not None:
        items.append(MenuItem("Settings", lambda _icon, _item: on_settings()))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    menu = Menu(*items)
    return pystray.Icon("range-calendar", icon_image, tray_title(None, None), menu)
