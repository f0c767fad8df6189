# No dependencies
from enum import Enum


class ModelType(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"
    HWB = "hwb"

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        name = value.strip().lower()
        if name == "rgba":
            return cls.RGB
        for member in cls:
            if member.value == name:
                return member
        return None


def resolve_model(space) -> ModelType:
    """Turn a model name ("hsl", "RGBA", ModelType.HWB, ...) into a ModelType."""
    try:
        return ModelType(space)
    except ValueError:
        raise ValueError(f"Unknown space: {space}") from None


HUE_360 = 360

HUE_SPACES = frozenset({ModelType.HSL, ModelType.HSV, ModelType.HWB})

# Upper bound of every channel, in record order.
CHANNEL_MAXIMA = {
    ModelType.RGB: (255, 255, 255, 1.0),
    ModelType.HSL: (HUE_360, 100, 100),
    ModelType.HSV: (HUE_360, 100, 100),
    ModelType.HWB: (HUE_360, 100, 100),
}

# Space each mutator converts into before adjusting a channel.
NATURAL_SPACES = {
    "lighten": ModelType.HSL,
    "darken": ModelType.HSL,
    "saturate": ModelType.HSL,
    "desaturate": ModelType.HSL,
    "rotate": ModelType.HSL,
    "whiten": ModelType.HWB,
    "blacken": ModelType.HWB,
    "mix": ModelType.RGB,
    "grayscale": ModelType.RGB,
}

STRING_TEMPLATES = {
    "rgb": "rgb({},{},{})",
    "rgba": "rgba({},{},{},{})",
    "hsl": "hsl({},{}%,{}%)",
    "hsv": "hsv({},{}%,{}%)",
    "hwb": "hwb({},{}%,{}%)",
}

DEFAULT_MIX_WEIGHT = 0.5

# ITU-R BT.601 luma coefficients
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def is_hue_space(space) -> bool:
    return resolve_model(space) in HUE_SPACES
