"""
Filesystem layout and static templates for the framework scaffold.

Every path is derived from a single root directory:
- scripts/   placeholder workload scripts (rewritten on every run)
- resources/ empty resource folder
- logs/      framework.log (append-only)
- docs/      README.md (written once, if missing)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# Project paths
ROOT = Path(__file__).resolve().parents[2]
DEFAULT_ROOT = ROOT / "framework"

LOG_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
INIT_PAUSE_S = 1.0


@dataclass(frozen=True)
class FrameworkPaths:
    root: Path
    scripts_dir: Path
    resources_dir: Path
    logs_dir: Path
    docs_dir: Path
    log_file: Path

    @classmethod
    def from_root(cls, root: str | Path = DEFAULT_ROOT) -> "FrameworkPaths":
        root = Path(root)
        return cls(
            root=root,
            scripts_dir=root / "scripts",
            resources_dir=root / "resources",
            logs_dir=root / "logs",
            docs_dir=root / "docs",
            log_file=root / "logs" / "framework.log",
        )

    @property
    def readme_path(self) -> Path:
        return self.docs_dir / "README.md"

    def directories(self) -> tuple[Path, ...]:
        """Directories in creation order; root must come first."""
        return (self.root, self.scripts_dir, self.resources_dir, self.logs_dir, self.docs_dir)

    def script_path(self, name: str) -> Path:
        return self.scripts_dir / name


@dataclass(frozen=True)
class PlaceholderScript:
    name: str
    label: str
    body: str


def _sleep_and_print(message: str, seconds: int = 1) -> str:
    return f"import time\ntime.sleep({seconds})\nprint({message!r})\n"


# Execution order matters: the runner invokes these top to bottom.
PLACEHOLDER_SCRIPTS: tuple[PlaceholderScript, ...] = (
    PlaceholderScript(
        "neural_network_training.py",
        "Neural Network Training",
        _sleep_and_print("Training the neural network..."),
    ),
    PlaceholderScript(
        "speech_recognition.py",
        "Speech Recognition",
        _sleep_and_print("Recognizing speech..."),
    ),
    PlaceholderScript(
        "image_generation.py",
        "Image Generation",
        _sleep_and_print("Generating images..."),
    ),
    PlaceholderScript(
        "energy_visualization.py",
        "Energy Visualization",
        _sleep_and_print("Visualizing energy fields..."),
    ),
)

README_TEXT = """# Sacred Framework

## Layout
- `scripts/`   placeholder workload scripts, regenerated on every run
- `resources/` shared resources
- `logs/`      `framework.log`, one `<timestamp> - <message>` line per event
- `docs/`      this file

## Modules
1. Neural Network Training (`scripts/neural_network_training.py`)
2. Speech Recognition (`scripts/speech_recognition.py`)
3. Image Generation (`scripts/image_generation.py`)
4. Energy Visualization (`scripts/energy_visualization.py`)

Run `python setup_project.py` to initialize the tree and execute every module in order.
"""
