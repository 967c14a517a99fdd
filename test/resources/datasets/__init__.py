from pathlib import Path
import pandas as pd

PATH = Path(__file__).parents[0]


def get_dataset_path(filename: str) -> Path:
    return PATH / f"{filename}.csv"


def load_dataset(filename: str, dates: list[str] = None) -> pd.DataFrame:
    return pd.read_csv(get_dataset_path(filename), parse_dates=dates or False)
