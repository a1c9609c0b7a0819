import pandas as pd

from genre_tfidf.config import COUNTS_FILE, DATA_DIR, FREQUENCIES_FILE, TOP_N_TERMS, TOTALS_FILE
from genre_tfidf.tfidf import bind_tf_idf, rank_words, top_terms

RANKS_FILE = DATA_DIR / "category_word_ranks.csv"


def load_data():
    for path in (COUNTS_FILE, TOTALS_FILE):
        if not path.exists():
            raise FileNotFoundError(f"{path} not found. Run 1_frequencies.py first.")
    counts = pd.read_csv(COUNTS_FILE, keep_default_na=False, na_values=[""])
    totals = pd.read_csv(TOTALS_FILE, keep_default_na=False, na_values=[""])
    return counts, totals


def main():
    counts, totals = load_data()

    freq = bind_tf_idf(counts, totals)
    freq.to_csv(FREQUENCIES_FILE, index=False)
    rank_words(counts, totals).to_csv(RANKS_FILE, index=False)

    shared = freq.loc[freq["idf"] == 0, "word"].nunique()
    print(f"Words in every category (idf = 0): {shared} of {freq['word'].nunique()}")

    print(f"\n=== Top {TOP_N_TERMS} words per category by tf-idf ===")
    for category, group in top_terms(freq, by="tf_idf", n=TOP_N_TERMS).groupby("category"):
        print(f"\n-- {category} --")
        for row in group.itertuples(index=False):
            print(f"{row.word:25} {row.tf_idf:.5f}")

    print(f"\n✓ tf-idf table saved to {FREQUENCIES_FILE}")
    print(f"✓ Zipf ranks saved to {RANKS_FILE}")


if __name__ == "__main__":
    main()
