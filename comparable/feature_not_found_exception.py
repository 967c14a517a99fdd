from typing import Iterable


class FeatureNotFoundException(Exception):

    def __init__(self, feature: str, columns: Iterable = ()):
        super().__init__('Feature "' + str(feature) + '" not found among columns: ' +
                         ', '.join(str(c) for c in columns) + '.')
