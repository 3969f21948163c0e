#!/usr/bin/env python3
"""
BFS Visualizer (tkinter)
Features:
- Starts with a six-node ring A..F; Reset brings it back.
- Add / remove / rename nodes and add / remove edges from the bottom bar.
- Drag a node to move it; its edges follow.
- Choose Start and End nodes and click Run BFS. Discovered nodes turn orange,
  the shortest path is drawn in green and its length is shown in the top bar.
"""

import queue
import threading
import tkinter as tk
from tkinter import simpledialog, ttk

from graph_model import GraphError, GraphModel
from traversal import bfs

NODE_RADIUS = 22
BG_COLOR = "#0d0d0d"
BAR_COLOR = "#000000"
NODE_FILL = "#800000"
NODE_OUTLINE = "#ffffff"
LABEL_COLOR = "#ffffff"
EDGE_COLOR = "#a9a9a9"
START_COLOR = "#00b000"
DISCOVERED_COLOR = "#ffa500"
FOUND_COLOR = "#00b000"
PATH_COLOR = "#00b000"
PATH_WIDTH = 10
LABEL_FONT = ("Consolas", 14, "bold")

DEFAULT_DELAY = 0.5   # seconds after each discovered node
PATH_DELAY = 0.3      # seconds between path segments
POLL_MS = 40


class ChoiceDialog(simpledialog.Dialog):
    """Modal dialog picking one entry from a fixed list of names."""

    def __init__(self, parent, title, prompt, choices):
        self.prompt = prompt
        self.choices = list(choices)
        self.result = None
        super().__init__(parent, title)

    def body(self, master):
        tk.Label(master, text=self.prompt, justify="left").pack(anchor="w", padx=8, pady=(8, 4))
        self.choice_var = tk.StringVar(value="")
        self.combo = ttk.Combobox(master, textvariable=self.choice_var,
                                  values=self.choices, state="readonly")
        self.combo.pack(fill=tk.X, padx=8, pady=(0, 8))
        return self.combo

    def validate(self):
        return bool(self.choice_var.get())

    def apply(self):
        self.result = self.choice_var.get()


class BFSVisualizer(tk.Tk):
    def __init__(self, model=None):
        super().__init__()
        self.title("BFS Visualizer")
        self.geometry("900x600")
        self.configure(bg=BG_COLOR)

        self.model = model or GraphModel()
        self.node_items = {}   # name -> canvas oval id
        self.node_labels = {}  # name -> canvas text id
        self._drag = None

        # animation control
        self._actions = queue.Queue()
        self._cancel = threading.Event()
        self._run_id = 0
        self._running = False
        self._delay = DEFAULT_DELAY
        self._poll_id = None
        self._worker = None

        self.create_widgets()
        self.reset_graph()

        self._poll_id = self.after(POLL_MS, self._drain_actions)
        self.protocol("WM_DELETE_WINDOW", self.destroy)

    def create_widgets(self):
        # top bar: search controls
        top = tk.Frame(self, bg=BAR_COLOR, padx=10, pady=10)
        top.pack(side=tk.TOP, fill=tk.X)

        tk.Label(top, text="Start Node:", fg="white", bg=BAR_COLOR).pack(side=tk.LEFT, padx=(0, 4))
        self.start_var = tk.StringVar(value="")
        self.start_menu = ttk.Combobox(top, textvariable=self.start_var, values=[],
                                       state="readonly", width=8)
        self.start_menu.pack(side=tk.LEFT, padx=4)

        tk.Label(top, text="End Node:", fg="white", bg=BAR_COLOR).pack(side=tk.LEFT, padx=(8, 4))
        self.end_var = tk.StringVar(value="")
        self.end_menu = ttk.Combobox(top, textvariable=self.end_var, values=[],
                                     state="readonly", width=8)
        self.end_menu.pack(side=tk.LEFT, padx=4)

        self._button(top, "Run BFS", self.run_bfs).pack(side=tk.LEFT, padx=4)
        self._button(top, "Reset", self.reset_graph).pack(side=tk.LEFT, padx=4)

        self.distance_var = tk.StringVar(value="")
        tk.Label(top, textvariable=self.distance_var, fg="white", bg=BAR_COLOR,
                 font=("Consolas", 12, "bold")).pack(side=tk.LEFT, padx=8)

        self.speed_scale = tk.Scale(top, label="Delay (s)", from_=0.05, to=1.5, resolution=0.05,
                                    orient=tk.HORIZONTAL, command=self.on_speed_change,
                                    fg="white", bg=BAR_COLOR, highlightthickness=0, length=120)
        self.speed_scale.set(DEFAULT_DELAY)
        self.speed_scale.pack(side=tk.RIGHT)

        # status bar
        self.status_var = tk.StringVar(value="Ready")
        tk.Label(self, textvariable=self.status_var, bd=1, relief=tk.SUNKEN,
                 anchor="w").pack(side=tk.BOTTOM, fill=tk.X)

        # bottom bar: editing
        bottom = tk.Frame(self, bg=BAR_COLOR, padx=10, pady=10)
        bottom.pack(side=tk.BOTTOM, fill=tk.X)
        inner = tk.Frame(bottom, bg=BAR_COLOR)
        inner.pack()
        for text, command in (("Add Node", self.add_node_dialog),
                              ("Add Edge", self.add_edge_dialog),
                              ("Remove Edge", self.remove_edge_dialog),
                              ("Remove Node", self.remove_node_dialog),
                              ("Rename Node", self.rename_node_dialog)):
            self._button(inner, text, command).pack(side=tk.LEFT, padx=5)

        self.canvas = tk.Canvas(self, bg=BG_COLOR, highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)
        self.canvas.tag_bind("node", "<ButtonPress-1>", self.on_node_press)
        self.canvas.tag_bind("node", "<B1-Motion>", self.on_node_drag)
        self.canvas.tag_bind("node", "<ButtonRelease-1>", self.on_node_release)
        self.canvas.tag_bind("node", "<Enter>", self.on_node_enter)

    def _button(self, parent, text, command):
        return tk.Button(parent, text=text, command=command, bg=NODE_FILL, fg="white",
                         activebackground="#a00000", activeforeground="white",
                         font=("TkDefaultFont", 10, "bold"))

    def status(self, msg):
        self.status_var.set(msg)
        # also print for console debugging
        print(f"[LOG] {msg}")

    def on_speed_change(self, val):
        try:
            self._delay = float(val)
        except ValueError:
            pass

    # ---------- whole graph ----------
    def reset_graph(self):
        self.cancel_run()
        self.model.reset_to_default()
        self.distance_var.set("")
        self.rebuild_node_menus()
        self.redraw()
        self.status("Graph reset to default circular layout.")

    def rebuild_node_menus(self):
        names = self.model.node_names()
        self.start_menu['values'] = names
        self.end_menu['values'] = names
        if self.start_var.get() not in names:
            self.start_var.set("")
        if self.end_var.get() not in names:
            self.end_var.set("")

    # ---------- editing (dialog wrappers) ----------
    def add_node_dialog(self):
        name = simpledialog.askstring("Add Node", "Enter node name:", parent=self)
        if name is not None:
            self.add_node(name)

    def add_edge_dialog(self):
        pair = self._ask_endpoints("Add Edge", "Enter From and To node names:")
        if pair:
            self.add_edge(*pair)

    def remove_edge_dialog(self):
        if self.model.edge_count() == 0:
            self.status("No edges to remove.")
            return
        pair = self._ask_endpoints("Remove Edge", "Enter From and To node names of edge to remove:")
        if pair:
            self.remove_edge(*pair)

    def remove_node_dialog(self):
        if not self.model.node_names():
            self.status("No nodes to remove.")
            return
        dialog = ChoiceDialog(self, "Remove Node", "Select the node you want to remove:",
                              self.model.node_names())
        if dialog.result:
            self.remove_node(dialog.result)

    def rename_node_dialog(self):
        if not self.model.node_names():
            self.status("No nodes to rename.")
            return
        dialog = ChoiceDialog(self, "Rename Node", "Select a node to rename:",
                              self.model.node_names())
        old = dialog.result
        if not old:
            return
        new = simpledialog.askstring("Rename Node", f"Enter new name for node: {old}",
                                     initialvalue=old, parent=self)
        if new is not None:
            self.rename_node(old, new)

    def _ask_endpoints(self, title, header):
        a = simpledialog.askstring(title, f"{header}\n\nFrom:", parent=self)
        if a is None:
            return None
        b = simpledialog.askstring(title, f"{header}\n\nTo:", parent=self)
        if b is None:
            return None
        return a, b

    # ---------- editing ----------
    def add_node(self, name):
        try:
            name = self.model.add_node(name)
        except GraphError as e:
            self.status(str(e))
            return
        self.draw_node(name)
        self.rebuild_node_menus()
        self.status(f"Node {name} added.")

    def remove_node(self, name):
        try:
            name = self.model.remove_node(name)
        except GraphError as e:
            self.status(str(e))
            return
        self.rebuild_node_menus()
        self.redraw()
        self.status(f"Node {name} removed.")

    def rename_node(self, old, new):
        try:
            old, new = self.model.rename_node(old, new)
        except GraphError as e:
            self.status(str(e))
            return
        for var in (self.start_var, self.end_var):
            if var.get() == old:
                var.set(new)
        self.rebuild_node_menus()
        self.redraw()
        self.status(f"Node renamed from {old} to {new}")

    def add_edge(self, a, b):
        try:
            a, b = self.model.add_edge(a, b)
        except GraphError as e:
            self.status(str(e))
            return
        self.redraw_edges()
        self.status(f"Edge {a}-{b} added.")

    def remove_edge(self, a, b):
        try:
            a, b = self.model.remove_edge(a, b)
        except GraphError as e:
            self.status(str(e))
            return
        self.redraw_edges()
        self.status(f"Edge {a}-{b} removed.")

    # ---------- drawing ----------
    def redraw(self):
        self.canvas.delete("all")
        self.node_items = {}
        self.node_labels = {}
        for name in self.model.node_names():
            self.draw_node(name)
        self.redraw_edges()

    def draw_node(self, name):
        x, y = self.model.coordinates[name]
        tags = ("node", f"node:{name}")
        self.node_items[name] = self.canvas.create_oval(
            x - NODE_RADIUS, y - NODE_RADIUS, x + NODE_RADIUS, y + NODE_RADIUS,
            fill=NODE_FILL, outline=NODE_OUTLINE, width=2, tags=tags)
        self.node_labels[name] = self.canvas.create_text(
            x, y, text=name, fill=LABEL_COLOR, font=LABEL_FONT, tags=tags)

    def redraw_edges(self):
        # path highlight goes with the old edges
        self.canvas.delete("edge")
        self.canvas.delete("path")
        for a, b in self.model.edges():
            x1, y1 = self.model.coordinates[a]
            x2, y2 = self.model.coordinates[b]
            self.canvas.create_line(x1, y1, x2, y2, fill=EDGE_COLOR, width=2, tags=("edge",))
        self.canvas.tag_lower("edge")

    def draw_path_edge(self, a, b):
        if a not in self.model.coordinates or b not in self.model.coordinates:
            return
        x1, y1 = self.model.coordinates[a]
        x2, y2 = self.model.coordinates[b]
        self.canvas.create_line(x1, y1, x2, y2, fill=PATH_COLOR, width=PATH_WIDTH, tags=("path",))
        self.canvas.tag_lower("path")

    def highlight_node(self, name, color):
        item = self.node_items.get(name)
        if item:
            self.canvas.itemconfigure(item, fill=color, outline=NODE_OUTLINE)

    def reset_colors(self):
        for item in self.node_items.values():
            self.canvas.itemconfigure(item, fill=NODE_FILL, outline=NODE_OUTLINE)
        self.redraw_edges()

    # ---------- dragging ----------
    def _node_under_cursor(self):
        for tag in self.canvas.gettags("current"):
            if tag.startswith("node:"):
                return tag[len("node:"):]
        return None

    def on_node_enter(self, event):
        name = self._node_under_cursor()
        if name is not None:
            self.show_node_tip(name)

    def show_node_tip(self, name):
        self.status(f"Node: {name}")

    def on_node_press(self, event):
        name = self._node_under_cursor()
        if name is None:
            return
        x, y = self.model.coordinates[name]
        self._drag = (name, event.x, event.y, x, y)

    def on_node_drag(self, event):
        if self._drag is None:
            return
        name, ex, ey, x0, y0 = self._drag
        if not self.model.has_node(name):
            self._drag = None
            return
        self.move_node(name, x0 + event.x - ex, y0 + event.y - ey)

    def on_node_release(self, event):
        self._drag = None

    def move_node(self, name, x, y):
        self.model.move_node(name, x, y)
        self.canvas.coords(self.node_items[name],
                           x - NODE_RADIUS, y - NODE_RADIUS, x + NODE_RADIUS, y + NODE_RADIUS)
        self.canvas.coords(self.node_labels[name], x, y)
        self.redraw_edges()

    # ---------- BFS driver ----------
    def run_bfs(self):
        if self._running:
            self.status("BFS already running.")
            return
        self.reset_colors()
        self.distance_var.set("")
        start, end = self.start_var.get(), self.end_var.get()
        if not start or not end:
            self.status("Select both a start and an end node.")
            return
        try:
            gen = bfs(self.model.adjacency_snapshot(), start, end)
        except GraphError as e:
            self.status(str(e))
            return

        # run generator in separate thread to keep UI responsive
        self._run_id += 1
        self._cancel = threading.Event()
        self._running = True
        self._worker = threading.Thread(target=self._run_generator_thread,
                                        args=(gen, self._run_id, self._cancel), daemon=True)
        self._worker.start()

    def cancel_run(self):
        self._cancel.set()
        self._running = False
        self._run_id += 1

    def _run_generator_thread(self, gen, run_id, cancel):
        # never touches Tk: actions are handed to the main loop through the queue
        try:
            for action in gen:
                if cancel.is_set():
                    break
                self._actions.put((run_id, action))
                if action["type"] == "discover":
                    cancel.wait(self._delay)
                elif action["type"] == "found":
                    path = action["path"]
                    for a, b in zip(path, path[1:]):
                        if cancel.is_set():
                            break
                        self._actions.put((run_id, {"type": "path_edge", "edge": (a, b)}))
                        cancel.wait(PATH_DELAY)
                    else:
                        self._actions.put((run_id, {"type": "path_drawn", "path": path}))
        finally:
            self._actions.put((run_id, {"type": "done"}))

    def _drain_actions(self):
        while True:
            try:
                run_id, action = self._actions.get_nowait()
            except queue.Empty:
                break
            if run_id == self._run_id:
                self.apply_action(action)
        self._poll_id = self.after(POLL_MS, self._drain_actions)

    def apply_action(self, action):
        typ = action["type"]
        if typ == "start":
            self.highlight_node(action["node"], START_COLOR)
            self.status(f"Starting BFS from: {action['node']}")
        elif typ == "visit":
            self.status(f"Visiting: {action['node']}")
        elif typ == "discover":
            self.highlight_node(action["node"], DISCOVERED_COLOR)
        elif typ == "found":
            end = action["node"]
            self.highlight_node(end, FOUND_COLOR)
            self.model.set_parents(action["parents"])
            self.distance_var.set(f"Shortest Distance: {action['distance']}")
            self.status(f"Destination {end} found. Shortest distance from "
                        f"{action['path'][0]} to {end} is {action['distance']}")
        elif typ == "path_edge":
            self.draw_path_edge(*action["edge"])
        elif typ == "path_drawn":
            path = action["path"]
            self.status(f"Path drawn in green from {path[0]} to {path[-1]}: {' -> '.join(path)}")
        elif typ == "unreachable":
            self.distance_var.set("No path exists!")
            self.status(f"Destination {action['node']} not reachable.")
        elif typ == "done":
            self._running = False

    def destroy(self):
        self.cancel_run()
        if self._poll_id is not None:
            self.after_cancel(self._poll_id)
            self._poll_id = None
        super().destroy()


def main():
    app = BFSVisualizer()
    app.mainloop()


if __name__ == "__main__":
    main()
