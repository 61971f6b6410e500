from .core import play_round, run_batch
from .io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

__all__ = ["play_round", "run_batch", "write_csv", "write_manifest", "timestamp_id",
           "git_commit_or_unknown"]
