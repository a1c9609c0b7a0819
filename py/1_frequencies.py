import pandas as pd

from genre_tfidf.config import COUNTS_FILE, OCCURRENCES_FILE, TOP_N_TERMS, TOTALS_FILE
from genre_tfidf.corpus import validate_occurrences
from genre_tfidf.frequency import category_totals, count_words


def load_occurrences(path) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"{path} not found. Run 0_corpus.py first.")
    # "nan"/"null" are words here, not missing values
    df = pd.read_csv(path, keep_default_na=False, na_values=[""])
    return validate_occurrences(df)


def main():
    occurrences = load_occurrences(OCCURRENCES_FILE)

    counts = count_words(occurrences)
    totals = category_totals(counts)
    counts.to_csv(COUNTS_FILE, index=False)
    totals.to_csv(TOTALS_FILE, index=False)

    print(f"Distinct (category, word) pairs: {len(counts)}")
    print("\n-- Words per category --")
    print(totals.sort_values("total", ascending=False).to_string(index=False))

    print(f"\nTop {TOP_N_TERMS} most frequent words overall:\n")
    overall = counts.groupby("word")["n"].sum().sort_values(ascending=False)
    for word, n in overall.head(TOP_N_TERMS).items():
        print(f"{word:20} {n}")

    print(f"\n✓ Counts saved to {COUNTS_FILE}, totals to {TOTALS_FILE}")


if __name__ == "__main__":
    main()
