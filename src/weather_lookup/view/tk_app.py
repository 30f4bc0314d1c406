"""
tkinter window for WeatherView.

The window only copies inputs into the view, calls ``view.fetch()`` and
copies the resulting state back into widgets. Icons are decoded with Pillow;
an icon that cannot be decoded leaves its label blank.
"""

from __future__ import annotations

import io
import logging
import tkinter as tk
from collections.abc import Callable
from tkinter import messagebox, ttk

from PIL import Image, ImageTk, UnidentifiedImageError

from weather_lookup.view.weather_view import UNIT_CHOICES, Notifier, WeatherView

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Weather Information App"
FONT = ("SansSerif", 12)
CURRENT_ICON_SIZE = 100
FORECAST_ICON_SIZE = 40
PAD = 10

ViewFactory = Callable[[Notifier], WeatherView]


class MessageBoxNotifier:
    """Notifier backed by tkinter message boxes."""

    def __init__(self, parent: tk.Misc | None = None) -> None:
        self.parent = parent

    def warn(self, title: str, message: str) -> None:
        messagebox.showwarning(title, message, parent=self.parent)

    def error(self, title: str, message: str) -> None:
        messagebox.showerror(title, message, parent=self.parent)


def load_icon(data: bytes | None, size: int) -> ImageTk.PhotoImage | None:
    """Decode PNG bytes into a Tk image, or None."""
    if not data:
        return None
    try:
        img = Image.open(io.BytesIO(data)).resize((size, size), Image.Resampling.LANCZOS)
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        logger.warning("Could not decode icon: %s", exc)
        return None
    return ImageTk.PhotoImage(img)


class WeatherWindow(tk.Tk):
    """Main window: inputs on top, current conditions centre, forecast/history right."""

    def __init__(self, view_factory: ViewFactory) -> None:
        super().__init__()
        self.title(WINDOW_TITLE)
        self.geometry("900x600")

        self.view: WeatherView = view_factory(MessageBoxNotifier(self))
        # Tk drops images that are not referenced from Python
        self._images: list[ImageTk.PhotoImage] = []

        self._build_ui()
        self._render()

    # ---------- UI builders ----------
    def _build_ui(self) -> None:
        self.content = tk.Frame(self, padx=PAD, pady=PAD)
        self.content.pack(fill="both", expand=True)

        top = tk.Frame(self.content)
        top.pack(side="top", fill="x", pady=(0, PAD))

        tk.Label(top, text="Location:").pack(side="left", padx=5)
        self.location_var = tk.StringVar()
        entry = ttk.Entry(top, textvariable=self.location_var, width=30)
        entry.pack(side="left", padx=5)
        entry.bind("<Return>", lambda e: self.on_fetch())

        tk.Label(top, text="Units:").pack(side="left", padx=5)
        self.unit_var = tk.StringVar(value=next(iter(UNIT_CHOICES)))
        ttk.Combobox(
            top, textvariable=self.unit_var, values=list(UNIT_CHOICES), width=12, state="readonly"
        ).pack(side="left", padx=5)

        ttk.Button(top, text="Get Weather", command=self.on_fetch).pack(side="left", padx=5)

        # Right column: forecast + history
        right = tk.Frame(self.content, width=300)
        right.pack(side="right", fill="y", padx=(PAD, 0))

        forecast_box = ttk.LabelFrame(right, text="Next 3 Hours Forecast")
        forecast_box.pack(side="top", fill="x")
        self.forecast_frame = tk.Frame(forecast_box)
        self.forecast_frame.pack(fill="x", padx=5, pady=5)

        history_box = ttk.LabelFrame(right, text="Recent Searches")
        history_box.pack(side="top", fill="both", expand=True, pady=(PAD, 0))
        self.history_list = tk.Listbox(history_box, height=8, width=40)
        scroll = ttk.Scrollbar(history_box, orient="vertical", command=self.history_list.yview)
        self.history_list.configure(yscrollcommand=scroll.set)
        self.history_list.pack(side="left", fill="both", expand=True)
        scroll.pack(side="right", fill="y")

        # Centre: current conditions
        self.center = tk.Frame(self.content, padx=PAD, pady=PAD)
        self.center.pack(side="left", fill="both", expand=True)
        self.icon_label = tk.Label(self.center)
        self.icon_label.pack(pady=(0, PAD))
        self.temp_label = tk.Label(self.center, font=FONT)
        self.humidity_label = tk.Label(self.center, font=FONT)
        self.wind_label = tk.Label(self.center, font=FONT)
        self.conditions_label = tk.Label(self.center, font=FONT)
        self.local_time_label = tk.Label(self.center, font=FONT)
        for label in (
            self.temp_label,
            self.humidity_label,
            self.wind_label,
            self.conditions_label,
            self.local_time_label,
        ):
            label.pack()

    # ---------- actions ----------
    def on_fetch(self) -> None:
        self.view.location_text = self.location_var.get()
        self.view.unit = UNIT_CHOICES[self.unit_var.get()]
        if self.view.fetch():
            self._render()

    # ---------- state -> widgets ----------
    def _render(self) -> None:
        self._images.clear()
        self._render_current()
        self._render_forecast()
        self._render_history()
        self._render_background()

    def _render_current(self) -> None:
        current = self.view.current
        if current is None:
            self.temp_label.config(text="Temperature: N/A")
            self.humidity_label.config(text="Humidity: N/A")
            self.wind_label.config(text="Wind: N/A")
            self.conditions_label.config(text="Conditions: N/A")
            self.local_time_label.config(text="")
            self.icon_label.config(image="")
            return

        self.temp_label.config(text=f"Temperature: {current.temperature_text}")
        self.humidity_label.config(text=f"Humidity: {current.humidity_text}")
        self.wind_label.config(text=f"Wind: {current.wind_text}")
        self.conditions_label.config(text=f"Conditions: {current.conditions_text}")
        self.local_time_label.config(text=f"Local time: {self.view.local_time_text or ''}")

        icon = load_icon(current.icon_bytes, CURRENT_ICON_SIZE)
        if icon is None:
            self.icon_label.config(image="")
        else:
            self._images.append(icon)
            self.icon_label.config(image=icon)

    def _render_forecast(self) -> None:
        for child in self.forecast_frame.winfo_children():
            child.destroy()

        forecast = self.view.forecast
        if forecast.message is not None:
            tk.Label(self.forecast_frame, text=forecast.message).pack()
            return

        for row, icon_bytes in zip(forecast.rows, forecast.icons, strict=False):
            line = tk.Frame(self.forecast_frame)
            line.pack(fill="x", anchor="w")
            tk.Label(line, text=f"{row.hour_label}:", width=6, anchor="w").pack(side="left")
            icon = load_icon(icon_bytes, FORECAST_ICON_SIZE)
            if icon is not None:
                self._images.append(icon)
                tk.Label(line, image=icon).pack(side="left")
            tk.Label(line, text=row.summary).pack(side="left", padx=5)

    def _render_history(self) -> None:
        self.history_list.delete(0, tk.END)
        for label in self.view.history.labels():
            self.history_list.insert(tk.END, label)

    def _render_background(self) -> None:
        for frame in (self.content, self.center):
            frame.config(bg=self.view.background)


def run(view_factory: ViewFactory) -> None:
    """Open the window and block in the Tk main loop."""
    window = WeatherWindow(view_factory)
    window.mainloop()
