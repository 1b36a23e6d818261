"""Run configuration assembled from command-line arguments."""

from __future__ import annotations
import argparse
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PipelineConfig:
    """
    Inputs of one blur run.

    input_path, output_path : source and destination P3 files
    preview_path : optional PNG for a before/after figure
    verbose : log stage progress at INFO level
    """
    input_path: Path
    output_path: Path
    preview_path: Path | None = None
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "PipelineConfig":
        return cls(
            input_path=Path(args.input),
            output_path=Path(args.output),
            preview_path=Path(args.preview) if args.preview else None,
            verbose=bool(args.verbose),
        )
