# app.py
# Contains the BenchmarkApp GUI class.

import os
import queue
import sv_ttk
import threading
import tkinter as tk
from matplotlib.figure import Figure
from tkinter import ttk, filedialog, messagebox
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

from .file_utils import build_document_cases, load_all_cases
from .harness import BenchmarkHarness, summarize
from .registry import default_registry
from .report import draw_selection_chart, draw_timing_chart
from .scorer import SelectionScorer
from .selector import SELECTORS, get_selector
from .utils import to_microseconds


# === MAIN APPLICATION CLASS ===

class BenchmarkApp:

    CASE_SETS = ("All", "Shared", "Hidden")

    def __init__(self, root, root_dir="."):
        """Constructor for the main application."""
        self.root = root
        self.root.title("String Matching Benchmark")
        self.root.geometry("1100x750")

        # --- Application State Variables ---
        self.root_dir = root_dir
        self.registry = default_registry()
        self.collection = None
        self.document_cases = []
        self.executions = []
        self.selection_summary = None

        self.worker_queue = queue.Queue()
        self.worker_thread = None

        self.case_set_var = tk.StringVar(value="All")
        self.selector_var = tk.StringVar(value="heuristic")
        self.case_sensitive_var = tk.BooleanVar(value=True)
        self.cases_label_var = tk.StringVar(value="No cases loaded.")
        self.accuracy_var = tk.StringVar(value="Accuracy: --")
        self.saved_var = tk.StringVar(value="Time Saved: --")

        # --- Main Layout ---
        self.main_paned_window = ttk.PanedWindow(root, orient=tk.HORIZONTAL)
        self.main_paned_window.pack(fill=tk.BOTH, expand=True)

        self.input_frame = ttk.Frame(self.main_paned_window, width=350, relief=tk.RIDGE)
        self.input_frame.pack_propagate(False)
        self.main_paned_window.add(self.input_frame, weight=1)

        self.output_frame = ttk.Frame(self.main_paned_window, width=750)
        self.main_paned_window.add(self.output_frame, weight=3)

        # --- Output Tabs ---
        self.notebook = ttk.Notebook(self.output_frame)
        self.notebook.pack(fill=tk.BOTH, expand=True, padx=5, pady=5)

        self.tab_results = ttk.Frame(self.notebook)
        self.tab_summary = ttk.Frame(self.notebook)
        self.tab_selection = ttk.Frame(self.notebook)
        self.tab_chart = ttk.Frame(self.notebook)

        self.notebook.add(self.tab_results, text="Timing Results")
        self.notebook.add(self.tab_summary, text="Algorithm Summary")
        self.notebook.add(self.tab_selection, text="Selector Comparison")
        self.notebook.add(self.tab_chart, text="Chart")

        # --- Build Widgets ---
        self.create_input_widgets()
        self.create_results_tab_widgets()
        self.create_summary_tab_widgets()
        self.create_selection_tab_widgets()
        self.create_chart_tab_widgets()

        # --- Status Bar ---
        self.status_bar_frame = ttk.Frame(root, relief=tk.SUNKEN, padding="2 5")
        self.status_bar_frame.pack(side=tk.BOTTOM, fill=tk.X)
        self.status_label = ttk.Label(self.status_bar_frame, text="Ready.")
        self.status_label.pack(side=tk.LEFT)

        self.load_case_root(self.root_dir)
        self.check_worker_queue()

    # --- GUI Widget Builders ---

    def create_input_widgets(self):
        """Populates the left-hand input frame with all controls."""
        self.input_frame.grid_columnconfigure(0, weight=1)

        # Group 1: Test cases
        cases_frame = ttk.LabelFrame(self.input_frame, text="1. Test Cases")
        cases_frame.grid(row=0, column=0, padx=10, pady=(10, 5), sticky="nsew")
        cases_frame.grid_columnconfigure(0, weight=1)

        ttk.Button(cases_frame, text="Load Case Folder", command=self.choose_case_root).grid(
            row=0, column=0, padx=10, pady=(10, 5), sticky="ew")
        ttk.Combobox(cases_frame, textvariable=self.case_set_var, values=self.CASE_SETS, state="readonly").grid(
            row=1, column=0, padx=10, pady=5, sticky="ew")
        ttk.Label(cases_frame, textvariable=self.cases_label_var, wraplength=300).grid(
            row=2, column=0, padx=10, pady=(0, 10), sticky="w")

        # Group 2: Document
        doc_frame = ttk.LabelFrame(self.input_frame, text="2. Document (optional)")
        doc_frame.grid(row=1, column=0, padx=10, pady=5, sticky="nsew")
        doc_frame.grid_columnconfigure(0, weight=1)
        doc_frame.grid_rowconfigure(1, weight=1)

        ttk.Label(doc_frame, text="Patterns (one per line):").grid(row=0, column=0, padx=10, pady=(10, 0), sticky="w")
        self.patterns_text = tk.Text(doc_frame, height=6, width=35, wrap=tk.WORD, font=('TkDefaultFont', 9))
        self.patterns_text.grid(row=1, column=0, padx=10, pady=5, sticky="nsew")
        ttk.Checkbutton(doc_frame, text="Case Sensitive Search", variable=self.case_sensitive_var).grid(
            row=2, column=0, padx=10, pady=5, sticky="w")
        ttk.Button(doc_frame, text="Load Document", command=self.load_document).grid(
            row=3, column=0, padx=10, pady=(5, 10), sticky="ew")

        # Group 3: Selector
        selector_frame = ttk.LabelFrame(self.input_frame, text="3. Selector")
        selector_frame.grid(row=2, column=0, padx=10, pady=5, sticky="nsew")
        selector_frame.grid_columnconfigure(0, weight=1)
        ttk.Combobox(selector_frame, textvariable=self.selector_var, values=sorted(SELECTORS), state="readonly").grid(
            row=0, column=0, padx=10, pady=10, sticky="ew")

        # Group 4: Actions
        action_frame = ttk.Frame(self.input_frame)
        action_frame.grid(row=3, column=0, padx=10, pady=(20, 10), sticky="sew")
        action_frame.grid_columnconfigure(0, weight=1)

        self.benchmark_button = ttk.Button(
            action_frame, text="Run Benchmark", command=lambda: self.start_worker("benchmark"),
            style="Accent.TButton"
        )
        self.benchmark_button.grid(row=0, column=0, padx=5, pady=5, sticky="ew")
        self.selection_button = ttk.Button(
            action_frame, text="Run Selector Comparison", command=lambda: self.start_worker("selection")
        )
        self.selection_button.grid(row=1, column=0, padx=5, pady=5, sticky="ew")

        self.input_frame.grid_rowconfigure(1, weight=1)

    def create_results_tab_widgets(self):
        """Populates the 'Timing Results' tab; columns are rebuilt per run."""
        self.results_table = ttk.Treeview(self.tab_results, show="headings")
        self.results_table.pack(fill="both", expand=True, padx=10, pady=10)

    def create_summary_tab_widgets(self):
        columns = ("Algorithm", "Passed", "Failed", "N/A", "Avg (μs)", "Min (μs)", "Max (μs)")
        self.summary_table = ttk.Treeview(self.tab_summary, columns=columns, show="headings")
        for col in columns:
            self.summary_table.heading(col, text=col)
            self.summary_table.column(col, width=100, anchor=tk.W if col == "Algorithm" else tk.E)
        self.summary_table.pack(fill="both", expand=True, padx=10, pady=10)

    def create_selection_tab_widgets(self):
        summary_frame = ttk.LabelFrame(self.tab_selection, text="Selector Summary")
        summary_frame.pack(side=tk.TOP, fill="x", padx=10, pady=(10, 5))
        ttk.Label(summary_frame, textvariable=self.accuracy_var, font=('TkDefaultFont', 10, 'bold')).grid(
            row=0, column=0, padx=10, pady=5, sticky="w")
        ttk.Label(summary_frame, textvariable=self.saved_var, font=('TkDefaultFont', 10, 'bold')).grid(
            row=0, column=1, padx=10, pady=5, sticky="w")

        columns = ("Test Case", "Chosen", "Analysis (μs)", "Exec (μs)", "Fastest", "Diff (μs)")
        self.selection_table = ttk.Treeview(self.tab_selection, columns=columns, show="headings")
        for col in columns:
            self.selection_table.heading(col, text=col,
                                         command=lambda c=col: self.sort_treeview_column(self.selection_table, c, False))
            self.selection_table.column(col, width=120, anchor=tk.W if col in ("Test Case", "Chosen", "Fastest") else tk.E)
        self.selection_table.tag_configure("hit", foreground="#006400")
        self.selection_table.tag_configure("miss", foreground="#a00000")
        self.selection_table.pack(fill="both", expand=True, padx=10, pady=(5, 10))

    def create_chart_tab_widgets(self):
        """Populates the 'Chart' tab with a Matplotlib canvas."""
        self.chart_frame = ttk.Frame(self.tab_chart)
        self.chart_frame.pack(fill="both", expand=True, padx=10, pady=10)

        self.fig = Figure(figsize=(5, 4), dpi=100)
        self.ax1 = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=self.chart_frame)
        self.canvas.draw()
        self.canvas.get_tk_widget().pack(fill="both", expand=True)

    # --- Core Logic & Event Handlers ---

    def choose_case_root(self):
        directory = filedialog.askdirectory(title="Select folder containing 'testcases'")
        if not directory: return
        self.load_case_root(directory)

    def load_case_root(self, directory):
        self.root_dir = directory
        self.collection = load_all_cases(directory)
        self.document_cases = []
        self.cases_label_var.set(
            f"{len(self.collection.shared_indices)} shared, {len(self.collection.hidden_indices)} hidden "
            f"cases from {os.path.abspath(directory)}"
        )

    def load_document(self):
        """Builds one case per pattern from a PDF/DOCX/TXT file."""
        patterns = [p for p in self.patterns_text.get("1.0", tk.END).splitlines() if p.strip()]
        if not patterns:
            messagebox.showerror("Error", "Enter at least one pattern first.")
            return
        filepath = filedialog.askopenfilename(
            title="Select Document",
            filetypes=(("PDF Files", "*.pdf"), ("Word Documents", "*.docx"), ("Text Files", "*.txt"), ("All Files", "*.*"))
        )
        if not filepath: return

        cases = build_document_cases(filepath, patterns, case_sensitive=self.case_sensitive_var.get())
        if not cases:
            messagebox.showwarning("Warning", "Failed to read text from file.")
            return
        self.document_cases = cases
        self.cases_label_var.set(f"{len(cases)} cases from {os.path.basename(filepath)}")

    def selected_cases(self):
        if self.document_cases:
            return list(self.document_cases)
        if self.collection is None:
            return []
        choice = self.case_set_var.get()
        if choice == "Shared":
            return [self.collection.cases[i] for i in self.collection.shared_indices]
        if choice == "Hidden":
            return [self.collection.cases[i] for i in self.collection.hidden_indices]
        return list(self.collection.cases)

    # --- THREADING FUNCTIONS ---

    def start_worker(self, mode):
        """Validates inputs and starts the worker thread."""
        if self.worker_thread and self.worker_thread.is_alive():
            messagebox.showwarning("In Progress", "A run is already in progress.")
            return
        cases = self.selected_cases()
        if not cases:
            messagebox.showerror("Error", "No test cases loaded.")
            return

        self.status_label.config(text=f"Running {mode} on {len(cases)} case(s)...")
        self.benchmark_button.config(state=tk.DISABLED)
        self.selection_button.config(state=tk.DISABLED)

        self.worker_thread = threading.Thread(
            target=self.run_worker, args=(mode, cases, get_selector(self.selector_var.get())), daemon=True
        )
        self.worker_thread.start()

    def run_worker(self, mode, cases, selector):
        """Runs on a WORKER thread. Trials inside it stay strictly sequential."""
        try:
            harness = BenchmarkHarness(self.registry)
            if mode == "benchmark":
                self.worker_queue.put({"status": "BENCHMARK", "executions": harness.run_all(cases)})
            else:
                summary = SelectionScorer(self.registry, selector, harness).score(cases)
                self.worker_queue.put({"status": "SELECTION", "summary": summary, "selector": selector})
        except Exception as e:
            self.worker_queue.put({"status": "ERROR", "message": str(e)})

    def check_worker_queue(self):
        """Checks the queue for messages from the worker thread."""
        try:
            result = self.worker_queue.get(block=False)
            if result["status"] == "BENCHMARK":
                self.executions = result["executions"]
                self.update_results_table()
                self.update_summary_table()
                self.update_chart("timing")
                self.notebook.select(self.tab_results)
                self.status_label.config(text="Benchmark complete. Ready.")
            elif result["status"] == "SELECTION":
                self.selection_summary = result["summary"]
                self.update_selection_tab(result["selector"])
                self.update_chart("selection")
                self.notebook.select(self.tab_selection)
                self.status_label.config(text="Selector comparison complete. Ready.")
            elif result["status"] == "ERROR":
                messagebox.showerror("Run Error", result["message"])
                self.status_label.config(text="Error during run. Ready.")

            self.benchmark_button.config(state=tk.NORMAL)
            self.selection_button.config(state=tk.NORMAL)
        except queue.Empty:
            pass
        finally:
            self.root.after(100, self.check_worker_queue)

    # --- END THREADING FUNCTIONS ---

    def update_results_table(self):
        """Refreshes the 'Timing Results' tab with new data."""
        tv = self.results_table
        for item in tv.get_children(): tv.delete(item)
        if not self.executions: return

        names = list(self.executions[0].measurements)
        columns = ["Test Case"] + names + ["Winner"]
        tv.configure(columns=columns)
        for col in columns:
            tv.heading(col, text=col if col in ("Test Case", "Winner") else f"{col} (μs)",
                       command=lambda c=col: self.sort_treeview_column(tv, c, False))
            tv.column(col, width=110, anchor=tk.W if col in ("Test Case", "Winner") else tk.E)

        for execution in self.executions:
            row = [execution.case.name]
            for name in names:
                m = execution.measurements[name]
                row.append(f"{to_microseconds(m.average_time):.3f}" if m.status == "PASS" else m.status)
            row.append(execution.fastest() or "None")
            tv.insert("", tk.END, values=row)

    def update_summary_table(self):
        for item in self.summary_table.get_children(): self.summary_table.delete(item)
        fmt = lambda t: "--" if t is None else f"{to_microseconds(t):.3f}"
        for name, s in summarize(self.executions).items():
            self.summary_table.insert("", tk.END, values=(
                name, s.passed, s.failed, s.not_implemented, fmt(s.average_time), fmt(s.min_time), fmt(s.max_time)
            ))

    def update_selection_tab(self, selector):
        for item in self.selection_table.get_children(): self.selection_table.delete(item)
        summary = self.selection_summary
        if not summary.outcomes:
            self.accuracy_var.set("Accuracy: -- (selector declined every case)")
            self.saved_var.set("Time Saved: --")
            return

        self.accuracy_var.set(
            f"Accuracy: {summary.correct_choices} / {summary.scored_cases} ({summary.accuracy * 100:.1f}%)"
        )
        self.saved_var.set(f"Time Saved: {summary.total_time_saved / 1_000_000.0:.4f} ms ({selector.key})")
        for o in summary.outcomes:
            self.selection_table.insert("", tk.END, tags=("hit" if o.chose_fastest else "miss",), values=(
                o.test_case_name, o.chosen_algorithm,
                f"{to_microseconds(o.analysis_time):.2f}", f"{to_microseconds(o.chosen_time):.2f}",
                o.fastest_algorithm, f"{to_microseconds(o.time_saved_or_lost):.2f}"
            ))

    def update_chart(self, kind):
        """Redraws the 'Chart' tab as a timing chart or a selector chart."""
        theme = sv_ttk.get_theme()
        if theme == "dark":
            bg_color = "#2b2b2b"; fg_color = "#ffffff"
        else:
            bg_color = "#ffffff"; fg_color = "#000000"

        self.fig.patch.set_facecolor(bg_color)
        self.ax1.set_facecolor(bg_color)

        if kind == "selection":
            draw_selection_chart(self.ax1, self.selection_summary.outcomes, fg_color=fg_color)
        else:
            draw_timing_chart(self.ax1, self.executions, fg_color=fg_color)

        for side in ('left', 'bottom'): self.ax1.spines[side].set_color(fg_color)
        for side in ('top', 'right'): self.ax1.spines[side].set_color(bg_color)
        self.fig.tight_layout()
        self.canvas.draw()

    def sort_treeview_column(self, tv, col, reverse):
        """Helper to sort a Treeview column when the header is clicked."""
        l = [(tv.set(k, col), k) for k in tv.get_children('')]
        try: l.sort(key=lambda t: float(t[0]), reverse=reverse)
        except ValueError: l.sort(key=lambda t: t[0], reverse=reverse)
        for index, (val, k) in enumerate(l):
            tv.move(k, '', index)
        tv.heading(col, command=lambda: self.sort_treeview_column(tv, col, not reverse))


# === APPLICATION ENTRY POINT ===

def launch(root_dir="."):
    root = tk.Tk()
    app = BenchmarkApp(root, root_dir=root_dir)

    # Call this *after* creating the app instance
    sv_ttk.set_theme("light")

    root.mainloop()
    return app
