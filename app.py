# app.py
# CustomTkinter GUI for the product search engine (dark theme).
# - Pick a dataset (sample / test / random / scenarios) and rebuild the engine.
# - Id lookups (linear / binary / recursive / compare) and text filters.
# - Size benchmarks run on a background thread (keeps UI responsive).

from __future__ import annotations
import threading
from typing import Optional

import tkinter.messagebox as mb
import customtkinter as ctk

from product_search import config as CFG
from product_search.engine import SearchEngine
from product_search.generator import DATASETS, ProductDataGenerator, dataset_info, load_dataset
from product_search.analysis import benchmark_sizes, compare_search_performance, complexity_table
from frontend import formatting as F


class ProductSearchApp(ctk.CTk):
    """Dark-themed GUI that loads a catalog and compares search algorithms on it."""

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Product Search")
        self.geometry("960x680")
        self.minsize(860, 580)

        # State
        self._engine: SearchEngine = SearchEngine(load_dataset(CFG.DEFAULT_DATASET))
        self._bench_thread: Optional[threading.Thread] = None

        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=1)  # log

        self._build_header()
        self._build_dataset_bar()
        self._build_search()
        self._build_results()
        self._build_log()

        self._set_status(f"{CFG.DEFAULT_DATASET}: {len(self._engine)} products")

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(0, weight=1)
        ctk.CTkLabel(header, text="Linear vs Binary Product Search", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

    def _build_dataset_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(3, weight=1)

        ctk.CTkLabel(bar, text="Dataset:", font=self.font_label).grid(row=0, column=0, padx=(12, 6), pady=10)
        self.opt_dataset = ctk.CTkOptionMenu(bar, values=list(DATASETS), command=self._on_dataset)
        self.opt_dataset.set(CFG.DEFAULT_DATASET)
        self.opt_dataset.grid(row=0, column=1, padx=6, pady=10)

        ctk.CTkButton(bar, text="Info", width=70, command=self._show_info).grid(row=0, column=2, padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=3, sticky="e", padx=6, pady=10)

        ctk.CTkButton(bar, text="Benchmark", width=100, command=self._start_benchmark).grid(
            row=0, column=4, padx=6, pady=10
        )
        self.lbl_status = ctk.CTkLabel(bar, text="Status: -", anchor="e")
        self.lbl_status.grid(row=0, column=5, sticky="e", padx=12, pady=10)

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(box, text="Product ID:", font=self.font_label).grid(row=0, column=0, sticky="w", padx=12, pady=8)
        self.entry_id = ctk.CTkEntry(box, placeholder_text="e.g. 1005")
        self.entry_id.grid(row=0, column=1, sticky="ew", padx=6, pady=8)
        for col, (label, algo) in enumerate(
            [("Linear", "linear"), ("Binary", "binary"), ("Recursive", "recursive"), ("Compare", "compare")], start=2
        ):
            ctk.CTkButton(box, text=label, width=90, command=lambda a=algo: self._do_lookup(a)).grid(
                row=0, column=col, padx=4, pady=8
            )

        ctk.CTkLabel(box, text="Text:", font=self.font_label).grid(row=1, column=0, sticky="w", padx=12, pady=8)
        self.entry_text = ctk.CTkEntry(box, placeholder_text="name fragment or category")
        self.entry_text.grid(row=1, column=1, sticky="ew", padx=6, pady=8)
        ctk.CTkButton(box, text="Name", width=90, command=self._do_name).grid(row=1, column=2, padx=4, pady=8)
        ctk.CTkButton(box, text="Category", width=90, command=self._do_category).grid(row=1, column=3, padx=4, pady=8)
        ctk.CTkButton(box, text="Theory", width=90, command=self._show_theory).grid(row=1, column=4, padx=4, pady=8)

    def _build_results(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=6)
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Results", font=self.font_label).grid(row=0, column=0, sticky="w", padx=12, pady=(10, 2))
        self.txt_results = ctk.CTkTextbox(frame, wrap="none", font=self.font_mono)
        self.txt_results.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self.txt_results.configure(state="disabled")
        self._set_results(F.format_table(self._engine.items))

    def _build_log(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Event log", font=self.font_label).grid(row=0, column=0, sticky="w", padx=12, pady=(10, 2))
        self.txt_log = ctk.CTkTextbox(frame, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._log("GUI ready.")

    # --------- dataset ---------

    def _on_dataset(self, name: str) -> None:
        # a new dataset means a new engine
        self._engine = SearchEngine(load_dataset(name))
        self._set_status(f"{name}: {len(self._engine)} products")
        self._set_results(F.format_table(self._engine.items))
        self._log(f"Loaded dataset '{name}' ({len(self._engine)} products).")

    def _show_info(self) -> None:
        self._set_results(F.format_dataset_info(dataset_info(self._engine.items)))

    def _show_theory(self) -> None:
        self._set_results(F.format_complexity(complexity_table()))

    # --------- search ---------

    def _read_id(self) -> Optional[int]:
        raw = self.entry_id.get().strip()
        try:
            return int(raw)
        except ValueError:
            self._set_results("error: please enter a valid product id (integer).")
            self._log(f"Rejected product id {raw!r}.")
            return None

    def _do_lookup(self, algorithm: str) -> None:
        product_id = self._read_id()
        if product_id is None:
            return
        eng = self._engine
        if algorithm == "compare":
            self._set_results(F.format_report(compare_search_performance(eng, product_id)))
            self._log(f"Compared searches for id {product_id}.")
            return
        method = {
            "linear": eng.linear_search_by_id,
            "binary": eng.binary_search_by_id,
            "recursive": eng.binary_search_recursive,
        }[algorithm]
        product = method(product_id)
        text = F.format_outcome(algorithm.capitalize() + " Search", product, eng.get_last_operation_count())
        if product is not None:
            text += "\n\n" + F.format_product(product, detailed=True)
        self._set_results(text)

    def _do_name(self) -> None:
        rows = self._engine.linear_search_by_name(self.entry_text.get())
        self._set_results(F.format_table(rows) + f"\n\n{self._engine.get_last_operation_count()} comparisons")

    def _do_category(self) -> None:
        rows = self._engine.linear_search_by_category(self.entry_text.get())
        self._set_results(F.format_table(rows) + f"\n\n{self._engine.get_last_operation_count()} comparisons")

    # --------- benchmark (threaded) ---------

    def _start_benchmark(self) -> None:
        if self._bench_thread and self._bench_thread.is_alive():
            mb.showinfo("Benchmark", "A benchmark is already running. Please wait.")
            return
        self._set_status("Benchmarking…")
        self.progress.start()
        self._bench_thread = threading.Thread(target=self._bench_worker, daemon=True)
        self._bench_thread.start()

    def _bench_worker(self) -> None:
        try:
            rows = benchmark_sizes(CFG.PERFORMANCE_SIZES, ProductDataGenerator())
        except Exception as exc:
            self.after(0, self._on_bench_error, exc)
            return
        self.after(0, self._on_bench_ok, F.format_size_benchmarks(rows))

    def _on_bench_ok(self, text: str) -> None:
        self.progress.stop()
        self._set_status("Benchmark done.")
        self._set_results(text)
        self._log("Benchmark finished.")

    def _on_bench_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Benchmark failed.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Benchmark error", "Benchmark failed.\nSee event log for details.")

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_results(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")


if __name__ == "__main__":
    app = ProductSearchApp()
    app.mainloop()
