import logging

from comparable.invalid_bounds_exception import InvalidBoundsException
from comparable.feature_not_found_exception import FeatureNotFoundException
from comparable.range import is_between, is_in_range
from comparable.utils import check_bounds

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger('comparable')
