"""Tkinter desktop app for visualizing Word Ladder II searches."""

from __future__ import annotations

import logging
import tkinter as tk
from pathlib import Path
from tkinter import filedialog, messagebox, ttk
from tkinter.scrolledtext import ScrolledText

from layout import GraphLayout, build_layout, node_key
from models import LadderExample, LadderReport, PlaybackOptions
from playback import Playback
from presets import EXAMPLES, example_summary
from solver import LadderSolver
from utils import export_report, format_path, load_config, parse_word_list, read_wordlist, save_config, setup_logging

NODE_HALF_WIDTH = 34
NODE_HALF_HEIGHT = 13
RECOMPUTE_DELAY_MS = 400

VISUALIZATION_NOTES = (
    "Columns represent BFS levels (layered search).\n"
    "Edges show parent links captured during BFS for shortest-path backtracking.\n"
    "Green outlines mark nodes on at least one shortest path."
)


class LadderApp(tk.Tk):
    """Desktop UI for stepping through layered BFS and its shortest ladders."""

    def __init__(self) -> None:
        super().__init__()
        setup_logging()
        self.logger = logging.getLogger(__name__)

        self.title("Word Ladder II - Visual BFS Pathfinder")
        self.geometry("1280x860")
        self.minsize(1000, 700)

        self.config_data = load_config()
        self.solver = LadderSolver()
        self.current_report: LadderReport | None = None
        self.playback = Playback(options=PlaybackOptions(speed_ms=int(self.config_data.get("speed_ms", 750))))
        self.timer_id: str | None = None
        self.recompute_id: str | None = None

        self._build_vars()
        self._build_ui()
        self._load_example(EXAMPLES[0])

        self.begin_var.trace_add("write", self._on_inputs_changed)
        self.end_var.trace_add("write", self._on_inputs_changed)
        self.words_text.bind("<<Modified>>", self._on_words_modified)
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def _build_vars(self) -> None:
        self.begin_var = tk.StringVar(value="")
        self.end_var = tk.StringVar(value="")
        self.speed_var = tk.IntVar(value=self.playback.speed_ms)
        self.speed_label_var = tk.StringVar(value=f"Speed: {self.playback.speed_ms} ms/step")
        self.level_var = tk.StringVar(value="")
        self.status_var = tk.StringVar(value="Enter inputs to generate BFS layers.")

    def _build_ui(self) -> None:
        self.columnconfigure(0, weight=1)
        self.rowconfigure(2, weight=1)

        examples = ttk.LabelFrame(self, text="Try These Examples", padding=8)
        examples.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 6))
        for idx, example in enumerate(EXAMPLES):
            row, column = 2 * (idx // 3), idx % 3
            ttk.Button(
                examples,
                text=example.name,
                command=lambda ex=example: self._load_example(ex),
            ).grid(row=row, column=column, sticky="ew", padx=4, pady=(2, 0))
            ttk.Label(examples, text=example_summary(example), foreground="#64748b").grid(
                row=row + 1, column=column, sticky="w", padx=6, pady=(0, 4)
            )
            examples.columnconfigure(column, weight=1)

        top = ttk.Frame(self, padding=(8, 0))
        top.grid(row=1, column=0, sticky="ew")
        top.columnconfigure(0, weight=1)
        top.columnconfigure(1, weight=1)
        top.columnconfigure(2, weight=1)

        setup = ttk.LabelFrame(top, text="Problem Setup", padding=8)
        setup.grid(row=0, column=0, sticky="nsew", padx=(0, 6))
        setup.columnconfigure(1, weight=1)
        ttk.Label(setup, text="Begin word").grid(row=0, column=0, sticky="w", padx=(0, 8))
        ttk.Entry(setup, textvariable=self.begin_var).grid(row=0, column=1, sticky="ew", pady=2)
        ttk.Label(setup, text="End word").grid(row=1, column=0, sticky="w", padx=(0, 8))
        ttk.Entry(setup, textvariable=self.end_var).grid(row=1, column=1, sticky="ew", pady=2)
        ttk.Label(setup, text="Word list (comma/space/newline separated)").grid(row=2, column=0, columnspan=2, sticky="w")
        self.words_text = ScrolledText(setup, wrap=tk.WORD, font=("Consolas", 10), height=6, width=30)
        self.words_text.grid(row=3, column=0, columnspan=2, sticky="nsew")
        setup_buttons = ttk.Frame(setup)
        setup_buttons.grid(row=4, column=0, columnspan=2, sticky="ew", pady=(6, 0))
        ttk.Button(setup_buttons, text="Solve", command=self._solve_clicked).grid(row=0, column=0, padx=(0, 8))
        ttk.Button(setup_buttons, text="Load .txt", command=self._browse_wordlist).grid(row=0, column=1)
        ttk.Label(
            setup,
            text="End word is auto-added if missing; words of different length are ignored.",
            foreground="#64748b",
        ).grid(row=5, column=0, columnspan=2, sticky="w", pady=(4, 0))

        controls = ttk.LabelFrame(top, text="Playback", padding=8)
        controls.grid(row=0, column=1, sticky="nsew", padx=6)
        controls.columnconfigure(0, weight=1)
        buttons = ttk.Frame(controls)
        buttons.grid(row=0, column=0, sticky="w")
        self.play_button = ttk.Button(buttons, text="Play", command=self._toggle_play)
        self.play_button.grid(row=0, column=0, padx=(0, 4))
        self.back_button = ttk.Button(buttons, text="Step ◀", command=self._step_back)
        self.back_button.grid(row=0, column=1, padx=4)
        self.forward_button = ttk.Button(buttons, text="Step ▶", command=self._step_forward)
        self.forward_button.grid(row=0, column=2, padx=4)
        self.reset_button = ttk.Button(buttons, text="Reset", command=self._reset_playback)
        self.reset_button.grid(row=0, column=3, padx=4)
        ttk.Label(controls, textvariable=self.speed_label_var).grid(row=1, column=0, sticky="w", pady=(8, 0))
        opts = self.playback.options
        speed_scale = ttk.Scale(
            controls,
            from_=opts.min_speed_ms,
            to=opts.max_speed_ms,
            orient=tk.HORIZONTAL,
            variable=self.speed_var,
            command=self._speed_changed,
        )
        speed_scale.grid(row=2, column=0, sticky="ew")
        speed_scale.bind("<ButtonRelease-1>", lambda _event: self._save_speed())
        ttk.Label(controls, textvariable=self.level_var, justify=tk.LEFT, wraplength=340).grid(
            row=3, column=0, sticky="w", pady=(8, 0)
        )

        results = ttk.LabelFrame(top, text="Results", padding=8)
        results.grid(row=0, column=2, sticky="nsew", padx=(6, 0))
        results.columnconfigure(0, weight=1)
        results.rowconfigure(1, weight=1)
        self.results_label = ttk.Label(results, text="Shortest sequences appear once the target is discovered during BFS.")
        self.results_label.grid(row=0, column=0, sticky="w")
        self.paths_listbox = tk.Listbox(results, height=7, exportselection=False)
        self.paths_listbox.grid(row=1, column=0, sticky="nsew", pady=(4, 6))
        result_buttons = ttk.Frame(results)
        result_buttons.grid(row=2, column=0, sticky="w")
        ttk.Button(result_buttons, text="Copy Paths", command=self._copy_paths).grid(row=0, column=0, padx=(0, 8))
        ttk.Button(result_buttons, text="Save Results", command=self._save_results).grid(row=0, column=1)
        ttk.Label(results, text=VISUALIZATION_NOTES, foreground="#64748b", justify=tk.LEFT).grid(
            row=3, column=0, sticky="w", pady=(8, 0)
        )

        graph_frame = ttk.LabelFrame(self, text="Layered Graph", padding=8)
        graph_frame.grid(row=2, column=0, sticky="nsew", padx=8, pady=6)
        graph_frame.columnconfigure(0, weight=1)
        graph_frame.rowconfigure(0, weight=1)
        self.canvas = tk.Canvas(graph_frame, background="white", highlightthickness=0)
        x_scroll = ttk.Scrollbar(graph_frame, orient=tk.HORIZONTAL, command=self.canvas.xview)
        y_scroll = ttk.Scrollbar(graph_frame, orient=tk.VERTICAL, command=self.canvas.yview)
        self.canvas.configure(xscrollcommand=x_scroll.set, yscrollcommand=y_scroll.set)
        self.canvas.grid(row=0, column=0, sticky="nsew")
        y_scroll.grid(row=0, column=1, sticky="ns")
        x_scroll.grid(row=1, column=0, sticky="ew")

        details = ttk.Frame(self, padding=(8, 0))
        details.grid(row=3, column=0, sticky="ew")
        details.columnconfigure(0, weight=1)
        details.columnconfigure(1, weight=1)
        visited_frame = ttk.LabelFrame(details, text="Visited (end of current level)", padding=6)
        visited_frame.grid(row=0, column=0, sticky="nsew", padx=(0, 6))
        visited_frame.columnconfigure(0, weight=1)
        self.visited_text = ScrolledText(visited_frame, wrap=tk.WORD, font=("Consolas", 9), height=4)
        self.visited_text.grid(row=0, column=0, sticky="ew")
        parents_frame = ttk.LabelFrame(details, text="Parents Map (partial)", padding=6)
        parents_frame.grid(row=0, column=1, sticky="nsew", padx=(6, 0))
        parents_frame.columnconfigure(0, weight=1)
        self.parents_text = ScrolledText(parents_frame, wrap=tk.NONE, font=("Consolas", 9), height=4)
        self.parents_text.grid(row=0, column=0, sticky="ew")

        status_row = ttk.Frame(self, padding=8)
        status_row.grid(row=4, column=0, sticky="ew")
        status_row.columnconfigure(1, weight=1)
        ttk.Label(status_row, text="Status:").grid(row=0, column=0, sticky="w", padx=(0, 8))
        ttk.Label(status_row, textvariable=self.status_var).grid(row=0, column=1, sticky="w")

    def _load_example(self, example: LadderExample) -> None:
        self.begin_var.set(example.begin)
        self.end_var.set(example.end)
        self.words_text.delete("1.0", tk.END)
        self.words_text.insert("1.0", "\n".join(example.words))
        self.words_text.edit_modified(False)
        self._run_solve()

    def _current_inputs(self) -> tuple[str, str, list[str]]:
        begin = self.begin_var.get().strip()
        end = self.end_var.get().strip()
        return begin, end, parse_word_list(self.words_text.get("1.0", tk.END))

    def _on_words_modified(self, _event: object) -> None:
        if not self.words_text.edit_modified():
            return
        self.words_text.edit_modified(False)
        self._on_inputs_changed()

    def _on_inputs_changed(self, *_args: object) -> None:
        """Discard results that no longer match the inputs and recompute shortly after."""
        if self.solver.is_current(*self._current_inputs()):
            return
        self._cancel_timer()
        if self.current_report is not None:
            self.solver.invalidate()
            self.current_report = None
            self.playback.load(0)
            self._render_results(None)
            self._render_step()
        if self.recompute_id is not None:
            self.after_cancel(self.recompute_id)
        self.recompute_id = self.after(RECOMPUTE_DELAY_MS, self._recompute)

    def _recompute(self) -> None:
        self.recompute_id = None
        begin, end, _words = self._current_inputs()
        if not begin or not end:
            self.status_var.set("Enter both a begin word and an end word.")
            return
        self._run_solve()

    def _browse_wordlist(self) -> None:
        initial = self.config_data.get("last_wordlist_path", "")
        path = filedialog.askopenfilename(
            title="Select wordlist file",
            initialdir=str(Path(initial).parent) if initial else None,
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")],
        )
        if not path:
            return
        try:
            words = read_wordlist(path)
        except Exception as exc:
            self.logger.exception("Failed loading wordlist")
            messagebox.showerror("Wordlist error", f"Could not load wordlist: {exc}")
            return

        self.words_text.delete("1.0", tk.END)
        self.words_text.insert("1.0", "\n".join(words))
        self.config_data["last_wordlist_path"] = str(Path(path).resolve())
        save_config(self.config_data)
        self.status_var.set(f"Loaded {len(words)} words from {Path(path).name}.")

    def _solve_clicked(self) -> None:
        self._run_solve()

    def _run_solve(self) -> None:
        if self.recompute_id is not None:
            self.after_cancel(self.recompute_id)
            self.recompute_id = None
        begin, end, words = self._current_inputs()
        if not begin or not end:
            messagebox.showinfo("Missing words", "Enter both a begin word and an end word.")
            return

        try:
            report = self.solver.solve(begin, end, words)
        except Exception as exc:
            self.logger.exception("Solve failed")
            messagebox.showerror("Solve error", f"Could not solve input: {exc}")
            return

        self._cancel_timer()
        self.current_report = report
        self.playback.load(len(report.frames))
        self._render_results(report)
        self._render_step()

        if report.solved:
            self.status_var.set(
                f"Found {len(report.paths)} shortest sequence(s) of {report.shortest_length} words "
                f"in {len(report.frames)} level(s)."
            )
        elif not report.frames:
            self.status_var.set("Begin and end words differ in length; no ladder is possible.")
        else:
            self.status_var.set(f"No ladder exists; BFS exhausted after {len(report.frames)} level(s).")

    def _render_results(self, report: LadderReport | None) -> None:
        self.paths_listbox.delete(0, tk.END)
        if report and report.paths:
            self.results_label.configure(text=f"All shortest sequences ({len(report.paths)}):")
            for path in report.paths:
                self.paths_listbox.insert(tk.END, format_path(path, " → "))
        else:
            self.results_label.configure(text="Shortest sequences appear once the target is discovered during BFS.")

    def _render_step(self) -> None:
        report = self.current_report
        has_frames = bool(report and report.frames)
        self.play_button.configure(text="Pause" if self.playback.is_playing else "Play")
        self.play_button.configure(state=tk.NORMAL if has_frames else tk.DISABLED)
        self.reset_button.configure(state=tk.NORMAL if has_frames else tk.DISABLED)
        self.back_button.configure(state=tk.NORMAL if self.playback.can_step_back else tk.DISABLED)
        self.forward_button.configure(state=tk.NORMAL if self.playback.can_step_forward else tk.DISABLED)

        self.visited_text.delete("1.0", tk.END)
        self.parents_text.delete("1.0", tk.END)
        if not report or not report.frames:
            self.level_var.set("Enter inputs to generate BFS layers.")
            self._draw_graph(GraphLayout(), "", "")
            return

        frame = report.frames[self.playback.step]
        self.level_var.set(
            f"Levels built: {len(report.frames)}\n"
            f"Current level: {frame.level}\n"
            f"Frontier this level: [{', '.join(frame.frontier)}]\n"
            f"Discovered next: [{', '.join(frame.next_frontier)}]"
        )
        self.visited_text.insert("1.0", "  ".join(sorted(frame.visited)))
        self.parents_text.insert(
            "1.0",
            "\n".join(f"{child} ← {', '.join(sorted(ps))}" for child, ps in sorted(frame.parents.items())),
        )
        self._draw_graph(build_layout(report, self.playback.step), report.begin_word, report.end_word)

    def _draw_graph(self, graph: GraphLayout, begin_word: str, end_word: str) -> None:
        self.canvas.delete("all")
        self.canvas.configure(scrollregion=(0, 0, graph.width, graph.height))

        for edge in graph.edges:
            (x1, y1), (x2, y2) = edge.start, edge.end
            self.canvas.create_line(
                x1, y1, x1 + 40, y1, x2 - 40, y2, x2, y2,
                smooth=True,
                fill="#94a3b8",
                width=1.5,
            )

        for ci, column in enumerate(graph.columns):
            for word in column:
                x, y = graph.positions[node_key(word, ci)]
                is_source = ci == 0 and word == begin_word
                outline = "#7dd3fc" if is_source else "#e2e8f0"
                width = 1
                if word in graph.highlighted:
                    outline = "#34d399"
                    width = 3
                self.canvas.create_rectangle(
                    x - NODE_HALF_WIDTH,
                    y - NODE_HALF_HEIGHT,
                    x + NODE_HALF_WIDTH,
                    y + NODE_HALF_HEIGHT,
                    fill="white",
                    outline=outline,
                    width=width,
                )
                weight = "bold" if word == end_word else "normal"
                self.canvas.create_text(x, y, text=word, font=("Segoe UI", 10, weight))

    def _toggle_play(self) -> None:
        self.playback.toggle()
        self._schedule_tick()
        self._render_step()

    def _schedule_tick(self) -> None:
        self._cancel_timer()
        if self.playback.is_playing:
            self.timer_id = self.after(self.playback.speed_ms, self._on_tick)

    def _on_tick(self) -> None:
        self.timer_id = None
        self.playback.tick()
        self._render_step()
        self._schedule_tick()

    def _cancel_timer(self) -> None:
        if self.timer_id is not None:
            self.after_cancel(self.timer_id)
            self.timer_id = None

    def _step_back(self) -> None:
        self.playback.step_back()
        self._render_step()

    def _step_forward(self) -> None:
        self.playback.step_forward()
        self._render_step()

    def _reset_playback(self) -> None:
        self._cancel_timer()
        self.playback.reset()
        self._render_step()

    def _speed_changed(self, _value: str) -> None:
        speed = self.playback.set_speed(float(self.speed_var.get()))
        if self.speed_var.get() != speed:
            self.speed_var.set(speed)
        self.speed_label_var.set(f"Speed: {speed} ms/step")

    def _save_speed(self) -> None:
        if self.config_data.get("speed_ms") != self.playback.speed_ms:
            self.config_data["speed_ms"] = self.playback.speed_ms
            save_config(self.config_data)

    def _on_close(self) -> None:
        self._cancel_timer()
        if self.recompute_id is not None:
            self.after_cancel(self.recompute_id)
        self._save_speed()
        self.destroy()

    def _copy_paths(self) -> None:
        if not self.current_report or not self.current_report.paths:
            messagebox.showinfo("No paths", "No shortest sequences available to copy yet.")
            return
        self.clipboard_clear()
        self.clipboard_append("\n".join(format_path(p) for p in self.current_report.paths))
        self.update_idletasks()
        self.status_var.set("Paths copied to clipboard.")

    def _save_results(self) -> None:
        if not self.current_report or not self.solver.is_current(*self._current_inputs()):
            messagebox.showinfo("No results", "Solve the current inputs before exporting.")
            return

        json_path_str = filedialog.asksaveasfilename(
            title="Save results JSON (CSV will be saved alongside)",
            defaultextension=".json",
            filetypes=[("JSON files", "*.json"), ("All files", "*.*")],
        )
        if not json_path_str:
            return

        json_path = Path(json_path_str)
        csv_path = json_path.with_suffix(".csv")

        try:
            export_report(json_path=json_path, csv_path=csv_path, report=self.current_report)
            self.status_var.set(f"Saved: {json_path.name} and {csv_path.name}")
            messagebox.showinfo("Export complete", f"Saved:\n{json_path}\n{csv_path}")
        except Exception as exc:
            self.logger.exception("Export failed")
            messagebox.showerror("Export error", f"Could not save results: {exc}")


def main() -> None:
    app = LadderApp()
    app.mainloop()


if __name__ == "__main__":
    main()
