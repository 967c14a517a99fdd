from pathlib import Path
from typing import Iterable, Dict
import csv

PATH = Path(__file__).parents[0]


def get_test_path(filename: str) -> Path:
    return PATH / f"{filename}.csv"


def load_test_cases(filename: str) -> Iterable[Dict]:
    """Rows of a ';' separated fixture file, one dict per row keyed by the header."""
    with open(get_test_path(filename), encoding='utf-8') as file:
        return [row for row in csv.DictReader(file, delimiter=';', quotechar='"')]
