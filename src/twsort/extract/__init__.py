from twsort.extract.selectors import clean_selector, extract_selectors

__all__ = ["extract_selectors", "clean_selector"]
