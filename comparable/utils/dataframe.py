from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd
from numpy import ndarray

from comparable.feature_not_found_exception import FeatureNotFoundException
from comparable.utils import logger


def _as_comparable(data: Iterable | pd.Series | pd.DataFrame) -> ndarray | pd.Series | pd.DataFrame:
    # pandas keeps its own dtype aware comparisons (e.g. datetime64 against datetime)
    return data if isinstance(data, (pd.Series, pd.DataFrame)) else np.asarray(data)


def _to_mask(mask) -> ndarray:
    # missing values of nullable dtypes (pd.NA) are never inside a range
    if isinstance(mask, (pd.Series, pd.DataFrame)):
        return mask.to_numpy(dtype=bool, na_value=False)
    return np.asarray(mask, dtype=bool)


def between_indices(data: Iterable | pd.Series | pd.DataFrame, lower_bound, upper_bound) -> ndarray:
    """
    Element-wise counterpart of is_between.

    :param data: an array-like, a Series or a DataFrame
    :param lower_bound: the lower end of the range, excluded
    :param upper_bound: the upper end of the range, excluded
    :return: a boolean array with the same shape of data
    """
    ds = _as_comparable(data)
    return _to_mask((ds > lower_bound) & (ds < upper_bound))


def in_range_indices(data: Iterable | pd.Series | pd.DataFrame, lower_bound, upper_bound) -> ndarray:
    """
    Element-wise counterpart of is_in_range.

    :param data: an array-like, a Series or a DataFrame
    :param lower_bound: the lower end of the range, included
    :param upper_bound: the upper end of the range, included
    :return: a boolean array with the same shape of data
    """
    ds = _as_comparable(data)
    return _to_mask((ds >= lower_bound) & (ds <= upper_bound))


def _get_feature(dataframe: pd.DataFrame, feature: str) -> pd.Series:
    if feature not in dataframe.columns:
        raise FeatureNotFoundException(feature, dataframe.columns)
    return dataframe[feature]


def filter_between(dataframe: pd.DataFrame, feature: str, lower_bound, upper_bound) -> pd.DataFrame:
    result = dataframe[between_indices(_get_feature(dataframe, feature), lower_bound, upper_bound)]
    logger.debug(f"{result.shape[0]} of {dataframe.shape[0]} rows with {feature} between "
                 f"{lower_bound} and {upper_bound}")
    return result


def filter_in_range(dataframe: pd.DataFrame, feature: str, lower_bound, upper_bound) -> pd.DataFrame:
    result = dataframe[in_range_indices(_get_feature(dataframe, feature), lower_bound, upper_bound)]
    logger.debug(f"{result.shape[0]} of {dataframe.shape[0]} rows with {feature} in range "
                 f"[{lower_bound}, {upper_bound}]")
    return result
