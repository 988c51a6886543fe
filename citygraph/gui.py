"""Desktop window for editing cities and roads and searching routes."""

from __future__ import annotations

import argparse
import tkinter as tk
from tkinter import filedialog, messagebox, ttk
from typing import Callable

from .app import CityManager, InputError
from .graph import DEFAULT_DATA_FILE
from .layout import Scene, graph_scene, neighbors_scene

Bounds = tuple[float, float, float, float]


def _font(size: int | None, bold: bool = False):
    if size is None:
        return None
    return ("Arial", size, "bold") if bold else ("Arial", size)


def _extend(bounds: Bounds | None, x1: float, y1: float, x2: float, y2: float) -> Bounds:
    if bounds is None:
        return (min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))
    return (
        min(bounds[0], x1, x2),
        min(bounds[1], y1, y2),
        max(bounds[2], x1, x2),
        max(bounds[3], y1, y2),
    )


def draw_scene(canvas, scene: Scene) -> Bounds | None:
    """Clear ``canvas`` and draw ``scene`` on it.

    Returns the geometric bounds ``(min_x, min_y, max_x, max_y)`` of what was
    drawn, or ``None`` for an empty scene.
    """
    canvas.delete("all")
    bounds: Bounds | None = None
    for node in scene.nodes:
        x1, y1 = node.x - node.radius, node.y - node.radius
        x2, y2 = node.x + node.radius, node.y + node.radius
        canvas.create_oval(
            x1, y1, x2, y2, fill=node.fill, outline=node.outline, width=node.outline_width
        )
        text_options = {"text": node.name, "anchor": "center", "fill": "black"}
        font = _font(node.font_size, node.bold)
        if font is not None:
            text_options["font"] = font
        canvas.create_text(node.x, node.y, **text_options)
        bounds = _extend(bounds, x1, y1, x2, y2)
    for line in scene.lines:
        canvas.create_line(
            line.x1, line.y1, line.x2, line.y2, fill=line.color, width=line.width
        )
        bounds = _extend(bounds, line.x1, line.y1, line.x2, line.y2)
    for label in scene.labels:
        label_options = {"text": label.text, "anchor": "nw", "fill": label.color}
        font = _font(label.font_size)
        if font is not None:
            label_options["font"] = font
        canvas.create_text(label.x, label.y, **label_options)
        bounds = _extend(bounds, label.x, label.y, label.x, label.y)
    return bounds


def _set_text(widget: tk.Text, text: str) -> None:
    widget.configure(state="normal")
    widget.delete("1.0", "end")
    widget.insert("1.0", text)


class MainWindow:
    """Main application window with home, cities, roads, display and search pages."""

    PAGE_TITLES = ("Home", "Cities", "Roads", "Display", "Search")

    def __init__(self, manager: CityManager | None = None, master: tk.Misc | None = None):
        self.manager = manager if manager is not None else CityManager()
        self.root = master if master is not None else tk.Tk()
        if isinstance(self.root, (tk.Tk, tk.Toplevel)):
            self.root.title("City Graph")
            self.root.geometry("1000x700")
        self._road_rows: dict[str, tuple[str, str]] = {}

        self._build_menu()
        container = ttk.Frame(self.root)
        container.pack(fill="both", expand=True)
        container.rowconfigure(0, weight=1)
        container.columnconfigure(0, weight=1)

        self.pages: list[ttk.Frame] = []
        for build in (
            self._build_home,
            self._build_cities,
            self._build_roads,
            self._build_display,
            self._build_search,
        ):
            page = ttk.Frame(container, padding=10)
            page.grid(row=0, column=0, sticky="nsew")
            build(page)
            self.pages.append(page)

        self._populate_combos()
        self._refresh_cities()
        self._refresh_roads()
        self.show_page(0)

    # -- construction ---------------------------------------------------

    def _build_menu(self) -> None:
        menubar = tk.Menu(self.root)
        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="Save", command=self._save)
        file_menu.add_command(label="Load", command=self._load)
        menubar.add_cascade(label="File", menu=file_menu)
        self.root.configure(menu=menubar)

    def _home_button(self, page: ttk.Frame) -> None:
        ttk.Button(page, text="Home", command=lambda: self.show_page(0)).pack(
            side="bottom", anchor="w", pady=5
        )

    def _build_home(self, page: ttk.Frame) -> None:
        ttk.Label(page, text="City Graph", font=("Arial", 24, "bold")).pack(pady=20)
        for index, title in enumerate(self.PAGE_TITLES[1:], start=1):
            ttk.Button(
                page, text=title, command=lambda i=index: self.show_page(i)
            ).pack(fill="x", padx=200, pady=8)

    def _build_cities(self, page: ttk.Frame) -> None:
        self._home_button(page)
        form = ttk.Frame(page)
        form.pack(fill="x")
        ttk.Label(form, text="City name:").pack(side="left")
        self.city_entry = ttk.Entry(form)
        self.city_entry.pack(side="left", fill="x", expand=True, padx=5)

        buttons = ttk.Frame(page)
        buttons.pack(fill="x", pady=5)
        for text, command in (
            ("Add", self._add_city),
            ("Update", self._update_city),
            ("Delete", self._delete_city),
            ("Refresh", self._refresh_cities),
        ):
            ttk.Button(buttons, text=text, command=command).pack(side="left", padx=3)

        self.city_list = tk.Listbox(page, exportselection=False)
        self.city_list.pack(fill="both", expand=True)

    def _build_roads(self, page: ttk.Frame) -> None:
        self._home_button(page)
        form = ttk.Frame(page)
        form.pack(fill="x")
        ttk.Label(form, text="From:").pack(side="left")
        self.source_combo = ttk.Combobox(form, state="readonly")
        self.source_combo.pack(side="left", padx=5)
        ttk.Label(form, text="To:").pack(side="left")
        self.destination_combo = ttk.Combobox(form, state="readonly")
        self.destination_combo.pack(side="left", padx=5)
        ttk.Label(form, text="Distance (km):").pack(side="left")
        self.distance_spin = ttk.Spinbox(form, from_=0, to=1_000_000, width=8)
        self.distance_spin.set("0")
        self.distance_spin.pack(side="left", padx=5)

        buttons = ttk.Frame(page)
        buttons.pack(fill="x", pady=5)
        for text, command in (
            ("Add", self._add_road),
            ("Update", self._update_road),
            ("Delete", self._delete_road),
            ("Refresh", self._refresh_roads),
        ):
            ttk.Button(buttons, text=text, command=command).pack(side="left", padx=3)

        columns = ("source", "destination", "distance")
        self.road_table = ttk.Treeview(page, columns=columns, show="headings", selectmode="browse")
        for column, heading in zip(columns, ("Source", "Destination", "Distance (km)")):
            self.road_table.heading(column, text=heading)
        self.road_table.pack(fill="both", expand=True)

    def _build_display(self, page: ttk.Frame) -> None:
        self._home_button(page)
        controls = ttk.Frame(page)
        controls.pack(fill="x")
        ttk.Button(controls, text="Full graph", command=self._display_full).pack(side="left")
        self.display_combo = ttk.Combobox(controls, state="readonly")
        self.display_combo.pack(side="left", padx=5)
        ttk.Button(controls, text="Neighbors", command=self._display_neighbors).pack(
            side="left"
        )

        self.canvas = tk.Canvas(page, background="white", height=400)
        self.canvas.pack(fill="both", expand=True, pady=5)
        self.canvas.bind("<ButtonPress-1>", lambda e: self.canvas.scan_mark(e.x, e.y))
        self.canvas.bind("<B1-Motion>", lambda e: self.canvas.scan_dragto(e.x, e.y, gain=1))
        self.display_text = tk.Text(page, height=8)
        self.display_text.pack(fill="x")

    def _build_search(self, page: ttk.Frame) -> None:
        self._home_button(page)
        form = ttk.Frame(page)
        form.pack(fill="x")
        ttk.Label(form, text="Start:").pack(side="left")
        self.start_combo = ttk.Combobox(form, state="readonly")
        self.start_combo.pack(side="left", padx=5)
        ttk.Label(form, text="End:").pack(side="left")
        self.end_combo = ttk.Combobox(form, state="readonly")
        self.end_combo.pack(side="left", padx=5)

        buttons = ttk.Frame(page)
        buttons.pack(fill="x", pady=5)
        for text, command in (
            ("Dijkstra", self._find_dijkstra),
            ("DFS", self._find_dfs),
            ("BFS", self._find_bfs),
        ):
            ttk.Button(buttons, text=text, command=command).pack(side="left", padx=3)

        self.results_text = tk.Text(page)
        self.results_text.pack(fill="both", expand=True)

    # -- navigation -----------------------------------------------------

    def show_page(self, index: int) -> None:
        if not 0 <= index < len(self.pages):
            raise IndexError(f"no page {index}")
        self.pages[index].tkraise()

    def run(self) -> None:
        self.root.mainloop()

    # -- helpers --------------------------------------------------------

    def _attempt(self, action: Callable[[], object], success: str | None = None) -> bool:
        try:
            action()
        except (InputError, LookupError, ValueError) as exc:
            messagebox.showwarning("Error", str(exc), parent=self.root)
            return False
        if success:
            messagebox.showinfo("Success", success, parent=self.root)
        return True

    def _combos(self) -> list[ttk.Combobox]:
        return [
            self.source_combo,
            self.destination_combo,
            self.display_combo,
            self.start_combo,
            self.end_combo,
        ]

    def _populate_combos(self) -> None:
        cities = self.manager.cities()
        for combo in self._combos():
            combo.configure(values=cities)
            combo.set(cities[0] if cities else "")

    def _refresh_cities(self) -> None:
        self.city_list.delete(0, "end")
        for name in self.manager.cities():
            self.city_list.insert("end", name)

    def _refresh_roads(self) -> None:
        self.road_table.delete(*self.road_table.get_children())
        self._road_rows.clear()
        for edge in self.manager.roads():
            iid = self.road_table.insert(
                "", "end", values=(edge.source, edge.destination, edge.weight)
            )
            self._road_rows[iid] = (edge.source, edge.destination)

    def _refresh_all(self) -> None:
        self._populate_combos()
        self._refresh_cities()
        self._refresh_roads()

    def _selected_city(self) -> str | None:
        selection = self.city_list.curselection()
        return self.city_list.get(selection[0]) if selection else None

    def _selected_road(self) -> tuple[str | None, str | None]:
        selection = self.road_table.selection()
        if not selection:
            return None, None
        return self._road_rows.get(selection[0], (None, None))

    def _distance(self) -> int:
        try:
            return int(self.distance_spin.get())
        except ValueError:
            raise InputError("Please enter a whole number of kilometres") from None

    def _show_scene(self, scene: Scene) -> None:
        bounds = draw_scene(self.canvas, scene)
        if bounds is None:
            return
        self.canvas.update_idletasks()
        width = max(self.canvas.winfo_width(), 1)
        height = max(self.canvas.winfo_height(), 1)
        span_x = max(bounds[2] - bounds[0], 1.0)
        span_y = max(bounds[3] - bounds[1], 1.0)
        factor = min(width / span_x, height / span_y)
        self.canvas.scale("all", bounds[0], bounds[1], factor, factor)
        self.canvas.configure(scrollregion=self.canvas.bbox("all"))
        self.canvas.xview_moveto(0)
        self.canvas.yview_moveto(0)

    # -- cities ---------------------------------------------------------

    def _add_city(self) -> None:
        def action():
            self.manager.add_city(self.city_entry.get())
            self._populate_combos()
            self._refresh_cities()

        if self._attempt(action, "City added successfully"):
            self.city_entry.delete(0, "end")

    def _update_city(self) -> None:
        def action():
            self.manager.update_city(self._selected_city(), self.city_entry.get())
            self._refresh_all()

        if self._attempt(action, "City updated successfully"):
            self.city_entry.delete(0, "end")

    def _delete_city(self) -> None:
        name = self._selected_city()
        if not name:
            messagebox.showwarning("Error", "Please select a city to delete", parent=self.root)
            return
        if not messagebox.askyesno(
            "Confirm Delete",
            f"Are you sure you want to delete '{name}' and all its connections?",
            parent=self.root,
        ):
            return

        def action():
            self.manager.delete_city(name)
            self._refresh_all()

        self._attempt(action, "City deleted successfully")

    # -- roads ----------------------------------------------------------

    def _add_road(self) -> None:
        def action():
            self.manager.add_road(
                self.source_combo.get(), self.destination_combo.get(), self._distance()
            )
            self._refresh_roads()

        self._attempt(action, "Road added successfully")

    def _update_road(self) -> None:
        def action():
            source, destination = self._selected_road()
            self.manager.update_road(source, destination, self._distance())
            self._refresh_roads()

        self._attempt(action, "Road updated successfully")

    def _delete_road(self) -> None:
        source, destination = self._selected_road()
        if not source or not destination:
            messagebox.showwarning("Error", "Please select a road to delete", parent=self.root)
            return
        if not messagebox.askyesno(
            "Confirm Delete",
            f"Are you sure you want to delete road between '{source}' and '{destination}'?",
            parent=self.root,
        ):
            return

        def action():
            self.manager.delete_road(source, destination)
            self._refresh_roads()

        self._attempt(action, "Road deleted successfully")

    # -- display --------------------------------------------------------

    def _display_full(self) -> None:
        self._show_scene(graph_scene(self.manager.graph))
        _set_text(self.display_text, self.manager.full_graph_text())

    def _display_neighbors(self) -> None:
        city = self.display_combo.get()

        def action():
            text = self.manager.neighbors_text(city)
            self._show_scene(neighbors_scene(self.manager.graph, city))
            _set_text(self.display_text, text)

        self._attempt(action)

    # -- searches -------------------------------------------------------

    def _show_result(self, search: Callable[[], str]) -> None:
        try:
            result = search()
        except InputError as exc:
            messagebox.showwarning("Error", str(exc), parent=self.root)
            return
        except LookupError as exc:
            result = str(exc)
        _set_text(self.results_text, result)

    def _find_dijkstra(self) -> None:
        self._show_result(
            lambda: self.manager.shortest_path(self.start_combo.get(), self.end_combo.get())
        )

    def _find_dfs(self) -> None:
        self._show_result(lambda: self.manager.dfs(self.start_combo.get()))

    def _find_bfs(self) -> None:
        self._show_result(lambda: self.manager.bfs(self.start_combo.get()))

    # -- storage --------------------------------------------------------

    def _save(self) -> None:
        path = filedialog.asksaveasfilename(
            parent=self.root, initialfile=DEFAULT_DATA_FILE, defaultextension=".txt"
        )
        if not path:
            return
        try:
            self.manager.save(path)
        except OSError as exc:
            messagebox.showwarning("Error", str(exc), parent=self.root)
            return
        messagebox.showinfo("Success", f"Data saved to {path}", parent=self.root)

    def _load(self) -> None:
        path = filedialog.askopenfilename(parent=self.root, initialfile=DEFAULT_DATA_FILE)
        if not path:
            return
        try:
            self.manager.load(path)
        except (OSError, ValueError) as exc:
            messagebox.showwarning("Error", str(exc), parent=self.root)
            return
        self._refresh_all()
        messagebox.showinfo("Success", f"Data loaded from {path}", parent=self.root)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="citygraph", description="Edit cities and roads and search routes between them."
    )
    parser.parse_args(argv)
    MainWindow().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())