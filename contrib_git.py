"""Create backdated empty commits with the git command line."""

import logging
import os
import subprocess
from datetime import date

from contrib_drawing import PixelArtError

log = logging.getLogger(__name__)


class GitCommandError(PixelArtError):
    def __init__(self, cmd, returncode: int, output: str):
        super().__init__(f"{' '.join(cmd)} exited with {returncode}")
        self.cmd = cmd
        self.returncode = returncode
        self.output = output


def run(cmd, env=None) -> str:
    log.debug("running %s", " ".join(cmd))
    res = subprocess.run(cmd, env=env, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True)
    if res.returncode != 0:
        raise GitCommandError(cmd, res.returncode, res.stdout)
    return res.stdout


class NotAWorkTree(GitCommandError):
    hint = "Not a git repository. Initialize one and add a remote before running."


def ensure_work_tree():
    try:
        run(["git", "rev-parse", "--is-inside-work-tree"])
    except GitCommandError as e:
        raise NotAWorkTree(e.cmd, e.returncode, e.output) from e


def commit_timestamp(d: date) -> str:
    # Noon UTC avoids TZ edge cases
    return f"{d.isoformat()} 12:00:00 +0000"


def commit_on(d: date, message=None):
    """One empty commit authored and committed on `d`."""
    iso = commit_timestamp(d)
    env = os.environ.copy()
    env["GIT_AUTHOR_DATE"] = iso
    env["GIT_COMMITTER_DATE"] = iso
    msg = message or f"Draw a pixel on: {iso}"
    # --allow-empty avoids file changes. --quiet keeps output terse.
    run(["git", "commit", "--allow-empty", "-m", msg, "--quiet"], env=env)


def checkout(branch: str):
    run(["git", "checkout", "-B", branch])


def push(remote: str, ref: str):
    run(["git", "push", remote, ref])
