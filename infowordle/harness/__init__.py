from .core import run_case, run_batch, secret_oracle, scripted_feedback
from .io import write_csv, write_manifest

__all__ = ["run_case", "run_batch", "secret_oracle", "scripted_feedback",
           "write_csv", "write_manifest"]
