from enum import Enum


class ParameterStatus(Enum):
    """State of the parameterization of a random variable.

    VALID : Non-degenerate distribution
    INVALID_PARAMETER_COUNT : Parameter sequence of wrong length; distribution left degenerate
    INVALID_MOMENTS : Mean and standard deviation incompatible with the distribution
    INVALID_PARAMETERS : Distribution parameters out of their domain
    """

    VALID = "valid"
    INVALID_PARAMETER_COUNT = "invalid parameter count"
    INVALID_MOMENTS = "invalid moments"
    INVALID_PARAMETERS = "invalid parameters"

    @property
    def is_valid(self) -> bool:
        return self is ParameterStatus.VALID
