from pathlib import Path

from genre_tfidf.config import BROWN_CATEGORIES, DATA_DIR, OCCURRENCES_FILE
from genre_tfidf.corpus import load_brown, load_documents_csv, remove_stopwords

# Set to a CSV with document_id, category, text columns to use your own corpus
DOCUMENTS_CSV = None
DROP_STOPWORDS = False  # raw counts are dominated by "the", "of", ... unless True


def main():
    DATA_DIR.mkdir(parents=True, exist_ok=True)

    if DOCUMENTS_CSV:
        occurrences = load_documents_csv(Path(DOCUMENTS_CSV))
        source = DOCUMENTS_CSV
    else:
        occurrences = load_brown(BROWN_CATEGORIES)
        source = "nltk brown"

    if DROP_STOPWORDS:
        occurrences = remove_stopwords(occurrences)

    occurrences.to_csv(OCCURRENCES_FILE, index=False)
    print(f"Source: {source}")
    print(f"Tokens: {len(occurrences)}  Documents: {occurrences['document_id'].nunique()}  "
          f"Categories: {occurrences['category'].nunique()}")
    print(f"✓ Occurrences saved to {OCCURRENCES_FILE}")


if __name__ == "__main__":
    main()
