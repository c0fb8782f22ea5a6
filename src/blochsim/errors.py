class InvalidStateError(ValueError):
    def __init__(self, r):
        super().__init__(r)
        self.r = r

    def __str__(self):
        return 'Not a valid state: Bloch vector magnitude must be in [0, 1], got r={}'.format(self.r)


class InvalidMeasurementOperatorError(ValueError):
    def __init__(self, value):
        super().__init__(value)
        self.value = value

    def __str__(self):
        return 'Invalid measurement operator: Tr(rho A) = {} is not real'.format(self.value)
