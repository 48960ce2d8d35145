class DegenerateConversionWarning(RuntimeWarning):
    """
    Emitted when a conversion divides by a zero peak channel.

    This happens for every gray input (black, white and everything in
    between) because removing the shared white component leaves no chromatic
    content to rescale. The affected results contain NaN.
    """
