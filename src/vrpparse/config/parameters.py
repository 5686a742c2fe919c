import codecs
from dataclasses import dataclass
from pathlib import Path
import yaml

@dataclass
class Parameters:
    """Configuration parameters for the instance reader"""
    strict_line_endings: bool = False
    warn_mixed_row_widths: bool = True
    warn_non_sequential_ids: bool = True
    encoding: str = 'utf-8'

    @classmethod
    def from_yaml(cls, path: Path | str = None) -> 'Parameters':
        """Load parameters from YAML file"""
        if path is None:
            path = Path(__file__).parent / 'default_config.yaml'

        with open(path) as f:
            data = yaml.safe_load(f) or {}
            return cls(**data)

    def __post_init__(self):
        """Validate parameters after initialization"""
        for name in ('strict_line_endings', 'warn_mixed_row_widths', 'warn_non_sequential_ids'):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be a boolean. Got: {value!r}")

        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding}") from e
