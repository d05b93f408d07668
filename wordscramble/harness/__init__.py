from .core import replay, run_replay
from .io import write_csv, write_manifest

__all__ = ["replay", "run_replay", "write_csv", "write_manifest"]
