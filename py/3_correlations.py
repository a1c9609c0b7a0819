import pandas as pd

from genre_tfidf.config import CORRELATIONS_FILE, FREQUENCIES_FILE, MIN_CORRELATION
from genre_tfidf.correlation import pairwise_correlation
from genre_tfidf.plots import correlation_edges

VOCABULARY = "union"  # or "intersection": only words both categories use


def main():
    if not FREQUENCIES_FILE.exists():
        raise FileNotFoundError(f"{FREQUENCIES_FILE} not found. Run 2_TF_IDF.py first.")
    freq = pd.read_csv(FREQUENCIES_FILE, keep_default_na=False, na_values=[""])

    corr = pairwise_correlation(freq, value_col="tf_idf", vocabulary=VOCABULARY)
    corr.to_csv(CORRELATIONS_FILE, index=False)

    undefined = corr["correlation"].isna().sum() // 2
    print(f"Category pairs: {len(corr) // 2}  (undefined: {undefined})")

    edges = correlation_edges(corr, MIN_CORRELATION)
    print(f"\n=== Pairs with correlation > {MIN_CORRELATION} ===")
    print(edges.to_string(index=False) if len(edges) else "[none]")

    print(f"\n✓ Correlations saved to {CORRELATIONS_FILE}")


if __name__ == "__main__":
    main()
