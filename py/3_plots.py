import pandas as pd

from genre_tfidf.config import (
    CORRELATIONS_FILE, COUNTS_FILE, DATA_DIR, FREQUENCIES_FILE, MIN_CORRELATION,
    PLOT_OUTPUT_DIR, TOP_N_TERMS, TOTALS_FILE,
)
from genre_tfidf.pipeline import AnalysisResult, render_plots, summarize

RANKS_FILE = DATA_DIR / "category_word_ranks.csv"
REPORT_FILE = DATA_DIR / "report.txt"

PLOT_OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

tables = {}
for name, path in [("counts", COUNTS_FILE), ("totals", TOTALS_FILE), ("frequencies", FREQUENCIES_FILE),
                   ("correlations", CORRELATIONS_FILE), ("ranks", RANKS_FILE)]:
    if not path.exists():
        raise FileNotFoundError(f"{path} not found. Run scripts 0-3 in order first.")
    tables[name] = pd.read_csv(path, keep_default_na=False, na_values=[""])

result = AnalysisResult(**tables)

report = summarize(result, top_n=TOP_N_TERMS)
REPORT_FILE.write_text(report, encoding="utf-8")
print(report)

saved = render_plots(result, PLOT_OUTPUT_DIR, top_n=TOP_N_TERMS, min_correlation=MIN_CORRELATION)
for path in saved:
    print(f"✓ {path}")

print(f"\n✓ Plots saved to {PLOT_OUTPUT_DIR}, report to {REPORT_FILE}")
