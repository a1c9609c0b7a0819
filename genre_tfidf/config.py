from pathlib import Path

DATA_DIR = Path("data")
OCCURRENCES_FILE = DATA_DIR / "occurrences.csv"
COUNTS_FILE = DATA_DIR / "category_word_counts.csv"
TOTALS_FILE = DATA_DIR / "category_totals.csv"
FREQUENCIES_FILE = DATA_DIR / "category_word_tf_idf.csv"
CORRELATIONS_FILE = DATA_DIR / "category_correlations.csv"
PLOT_OUTPUT_DIR = DATA_DIR / "analysis_plots"

# Brown genres used by default; None means every category in the corpus
BROWN_CATEGORIES = [
    "adventure", "belles_lettres", "editorial", "fiction", "government",
    "hobbies", "humor", "learned", "lore", "mystery", "news", "religion",
    "reviews", "romance", "science_fiction",
]

# Tokeniser for raw documents (CountVectorizer analyzer)
TOKEN_PARAMS = dict(
    lowercase=True,
    token_pattern=r"(?u)\b[^\W\d_]+\b",
)

TOP_N_TERMS = 15
MIN_CORRELATION = 0.05  # graph edges only, never applied to the tables
