from __future__ import annotations

from datetime import date, datetime
from typing import Callable

import pandas as pd

from test.resources.datasets import load_dataset
from test.resources.tests import load_test_cases

_VALUE_PARSERS: dict[str, Callable] = {
    'int': int,
    'datetime': datetime.fromisoformat,
    'date': date.fromisoformat,
    'str': str,
    'char': str
}


def parse_value(value_type: str, text: str):
    if value_type not in _VALUE_PARSERS:
        raise NotImplementedError(value_type + ' not implemented yet.')
    return _VALUE_PARSERS[value_type](text)


def get_cases(filename: str) -> list[dict]:
    """
    Read boundary fixtures as parameters for parameterized_class.

    :param filename: the name of the csv file inside test/resources/tests
    :return: one dict per row with value_type, value, lower_bound, upper_bound and expected
    """
    cases = []
    for row in load_test_cases(filename):
        parse = lambda x: parse_value(row['type'], x)
        cases.append({
            'value_type': row['type'],
            'value': parse(row['value']),
            'lower_bound': parse(row['lower_bound']),
            'upper_bound': parse(row['upper_bound']),
            'expected': row['expected'] == 'True'
        })
    return cases


def get_dataset(name: str) -> pd.DataFrame:
    return load_dataset(name, dates=['date'])
