class InvalidBoundsException(Exception):

    def __init__(self, lower_bound, upper_bound):
        super().__init__('Lower bound "' + str(lower_bound) + '" is greater than upper bound "' +
                         str(upper_bound) + '".')
