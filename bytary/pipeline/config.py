from dataclasses import dataclass
from typing import Union

from bytary.encoding_schemes.formats import DEFAULT_FORMAT, Format


@dataclass(frozen=True)
class LayoutConfig:
    """
    Output layout: a space every `space_interval` tokens and a newline every
    `wrap_interval` tokens. 0 disables either one.
    """
    space_interval: int = 0
    wrap_interval: int = 0

    def __post_init__(self):
        for name in ("space_interval", "wrap_interval"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    @property
    def enabled(self) -> bool:
        return bool(self.space_interval or self.wrap_interval)


@dataclass
class PipelineConfig:
    """
    Configuration for one conversion run.

    Format fields accept `Format` members or their names ("hex", "bin", ...).
    """
    to_format: Union[Format, str] = DEFAULT_FORMAT
    from_format: Union[Format, str] = DEFAULT_FORMAT
    space_interval: int = 0
    wrap_interval: int = 0
    # Report the conversion plan on stderr before running.
    verbose: bool = False

    def __post_init__(self):
        self.to_format = Format.parse(self.to_format)
        self.from_format = Format.parse(self.from_format)
        LayoutConfig(self.space_interval, self.wrap_interval)

    @property
    def layout(self) -> LayoutConfig:
        return LayoutConfig(self.space_interval, self.wrap_interval)
