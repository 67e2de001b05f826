"""
Configuration for the example generator.

Holds the fallback values used when a schema leaves a constraint out,
plus the output options used by the command line tool.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

PATTERN_PLACEHOLDER = "https://example.corezoid.com/api/1/json/public/123456/abcdef"


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        indent: Indentation used when serializing the result as JSON
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    indent: int = 2


@dataclass
class GeneratorConfig:
    """Configuration options for example generation."""

    # Array length bounds used when minItems/maxItems are absent
    default_min_items: int = 1
    default_max_items: int = 5

    # Numeric bounds used when minimum/maximum are absent
    default_minimum: int | float = 1
    default_maximum: int | float = 100

    # Length of generated strings when no pattern is given
    string_length: int = 10

    # Returned for any string schema carrying a pattern
    pattern_placeholder: str = PATTERN_PLACEHOLDER

    # Decimal digits kept by the number generator
    number_precision: int = 2

    # An optional property is generated when random() is above this value
    optional_property_probability: float = 0.5

    # Maximum nesting depth, None disables the guard
    max_depth: int | None = None

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "default_min_items": self.default_min_items,
            "default_max_items": self.default_max_items,
            "default_minimum": self.default_minimum,
            "default_maximum": self.default_maximum,
            "string_length": self.string_length,
            "pattern_placeholder": self.pattern_placeholder,
            "number_precision": self.number_precision,
            "optional_property_probability": self.optional_property_probability,
            "max_depth": self.max_depth,
        }
