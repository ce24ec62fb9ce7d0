"""Runtime configuration for a baseline run."""
import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_BASELINE_FILE = ".eslint-baseline.json"

# Environment fallbacks for the CLI options
ENV_BASELINE_FILE = "LINTBASELINE_BASELINE_FILE"
ENV_UPDATE = "LINTBASELINE_UPDATE"
ENV_CWD = "LINTBASELINE_CWD"
ENV_ESLINT = "LINTBASELINE_ESLINT"


@dataclass(frozen=True)
class ProcessorConfig:
    baseline_file: str = DEFAULT_BASELINE_FILE
    update_baseline: bool = False
    cwd: str = field(default_factory=os.getcwd)

    @property
    def baseline_path(self) -> Path:
        """Baseline location; relative paths are taken from cwd."""
        path = Path(self.baseline_file)
        return path if path.is_absolute() else Path(self.cwd) / path
