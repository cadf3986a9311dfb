# examples/gui.py
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk, messagebox

import numpy as np

from bgjk import as_hull, query

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  # потрібен для 'projection="3d"'

logger = logging.getLogger(__name__)


def cube_points():
    return [(x, y, z) for z in (0, 1) for y in (0, 1) for x in (0, 1)]


def circle_points(units: int = 100):
    """units-кутник, вписаний в одиничне коло в площині z=0."""
    t = np.arange(units, dtype=np.float32) / np.float32(units) * np.float32(2.0 * np.pi)
    return np.stack([np.cos(t), np.sin(t), np.zeros_like(t)], axis=1)


def random_points(n: int, seed: int = 0):
    """n випадкових точок в одиничному кубі [0,1]^3."""
    rng = np.random.default_rng(seed)
    return rng.random((n, 3), dtype=np.float32)


SHAPES = {
    "куб": cube_points,
    "коло (100 точок)": circle_points,
    "хмара (30 точок)": lambda: random_points(30),
}


def parse_offset(text: str):
    """Рядок 'x y z' або 'x, y, z' -> три float."""
    parts = text.replace(",", " ").split()
    if len(parts) != 3:
        raise ValueError(f"очікується 3 числа, отримано: {len(parts)}")
    return tuple(float(p) for p in parts)


class IntersectApp(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Boolean GJK")
        self.geometry("800x650")
        self._build_widgets()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Вибір оболонок ---
        shapes_frame = ttk.LabelFrame(main, text="Оболонки")
        shapes_frame.pack(fill="x", pady=5)

        names = list(SHAPES)
        self.shape_a = tk.StringVar(value=names[0])
        self.shape_b = tk.StringVar(value=names[0])
        ttk.Label(shapes_frame, text="A:").grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Combobox(shapes_frame, textvariable=self.shape_a, values=names, state="readonly").grid(
            row=0, column=1, sticky="w", padx=5, pady=2)
        ttk.Label(shapes_frame, text="B:").grid(row=1, column=0, sticky="w", padx=5, pady=2)
        ttk.Combobox(shapes_frame, textvariable=self.shape_b, values=names, state="readonly").grid(
            row=1, column=1, sticky="w", padx=5, pady=2)

        ttk.Label(shapes_frame, text="Зсув B (x y z):").grid(row=2, column=0, sticky="w", padx=5, pady=2)
        self.offset_entry = ttk.Entry(shapes_frame, width=20)
        self.offset_entry.insert(0, "0.5 0.5 0.5")
        self.offset_entry.grid(row=2, column=1, sticky="w", padx=5, pady=2)

        run_btn = ttk.Button(main, text="Перевірити перетин", command=self.run_query)
        run_btn.pack(fill="x", pady=10)

        # --- Результат ---
        self.verdict_var = tk.StringVar(value="—")
        self.iterations_var = tk.StringVar(value="—")
        result_frame = ttk.LabelFrame(main, text="Результат")
        result_frame.pack(fill="x", pady=5)
        ttk.Label(result_frame, text="Вердикт:").grid(row=0, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.verdict_var).grid(row=0, column=1, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, text="Ітерацій:").grid(row=1, column=0, sticky="w", padx=5, pady=2)
        ttk.Label(result_frame, textvariable=self.iterations_var).grid(row=1, column=1, sticky="w", padx=5, pady=2)

        # --- 3D-графік ---
        plot_frame = ttk.LabelFrame(main, text="3D візуалізація")
        plot_frame.pack(fill="both", expand=True, pady=5)

        self.fig = Figure(figsize=(4, 3))
        self.ax = self.fig.add_subplot(111, projection="3d")
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

    def update_plot(self, a: np.ndarray, b: np.ndarray, title: str):
        self.ax.clear()
        self.ax.scatter(a[:, 0], a[:, 1], a[:, 2], s=8, label="A")
        self.ax.scatter(b[:, 0], b[:, 1], b[:, 2], s=8, label="B")

        # однакові масштаби
        both = np.vstack([a, b])
        lo, hi = both.min(axis=0), both.max(axis=0)
        mid = 0.5 * (lo + hi)
        half = 0.5 * float(max((hi - lo).max(), 1.0))
        self.ax.set_xlim(mid[0] - half, mid[0] + half)
        self.ax.set_ylim(mid[1] - half, mid[1] + half)
        self.ax.set_zlim(mid[2] - half, mid[2] + half)

        self.ax.set_xlabel("X")
        self.ax.set_ylabel("Y")
        self.ax.set_zlabel("Z")
        self.ax.set_title(title)
        self.ax.legend()
        self.canvas.draw()

    def run_query(self):
        try:
            offset = parse_offset(self.offset_entry.get())
        except ValueError as e:
            messagebox.showerror("Помилка зсуву", str(e))
            return

        a = as_hull(SHAPES[self.shape_a.get()]())
        b = as_hull(SHAPES[self.shape_b.get()]()) + np.asarray(offset, dtype=np.float32)

        result = query(a, b)

        logger.info("%s vs %s %s -> %s", self.shape_a.get(), self.shape_b.get(), offset, result.verdict.value)
        self.verdict_var.set(result.verdict.value)
        self.iterations_var.set(str(result.iterations))
        self.update_plot(a, b, result.verdict.value)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    app = IntersectApp()
    app.mainloop()
