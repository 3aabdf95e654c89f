"""
Model prefetch script - check that every configured league model downloads.
"""
import sys

from model_fetcher.prefetch import main


if __name__ == "__main__":
    sys.exit(main())
