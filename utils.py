def pmts(v, type_, extra_information=""):
    """Poor man's type system"""
    assert isinstance(v, type_), "Expected value of type '%s' but is type '%s'%s" % (
        type_.__name__,
        type(v).__name__,
        "" if not extra_information else "; %s" % extra_information
        )


def pixel_aligned(value, scale):
    """Snaps a value (in points) to the nearest device pixel for the given display scale.

    >>> pixel_aligned(10.3, 1)
    10.0
    >>> pixel_aligned(10.3, 2)
    10.5
    >>> pixel_aligned(7, 3)
    7.0
    """
    return round(value * scale) / scale
