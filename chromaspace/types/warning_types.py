import warnings


class ColorFallbackWarning(UserWarning):
    """Emitted when unusable input (bad hex string, unknown color name) is replaced by black."""


def warn_fallback(message: str, stacklevel: int = 3) -> None:
    warnings.warn(message, ColorFallbackWarning, stacklevel=stacklevel)
