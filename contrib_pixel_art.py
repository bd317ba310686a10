#!/usr/bin/env python3
"""
Draw pixel art on your GitHub contribution calendar via backdated commits.

What it does:
- Takes a 7-row drawing (Sunday..Saturday by week), one commit count per cell.
- Validates it against a Sunday start date and a Saturday end date.
- Shows a preview, asks for confirmation, then creates one empty commit
  per unit of intensity on each cell's date.

Drawing sources:
- --file PATH   text file, one row per line, hex digit per cell ('.' = 0)
- --text WORD   word rendered with Pillow
- --sample boat built-in boat
- --random      random counts, like a busy year

Safety notes:
- It commits a lot. Use DRY_RUN first to preview counts.
- Draw in the past, on a stretch of your history with empty days.

Usage (inside your repo):
  DRY_RUN=1 python contrib_pixel_art.py --sample boat --start 2024-08-18
  python contrib_pixel_art.py --file heart.txt --start 2023-01-01 --end 2023-12-30
  python contrib_pixel_art.py --text HELLO --weeks 40 --push --remote origin
"""

import argparse
import logging
import os
import sys
from datetime import date

import contrib_git
from contrib_drawing import (
    BOAT,
    DrawingError,
    PixelArtError,
    default_anchor,
    end_for,
    expand,
    parse_drawing,
    random_drawing,
    validate,
)
from contrib_text import rasterize_text

log = logging.getLogger(__name__)

SAMPLES = {"boat": BOAT}

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_ABORTED = 3


class Aborted(PixelArtError):
    """The user did not confirm the drawing."""


# ---------- console glue ----------

def render_preview(drawing) -> str:
    return "\n".join("".join("X" if cell > 0 else "-" for cell in row) for row in drawing)


def ask_confirmation(prompt=input) -> bool:
    print("Does it look like what you are expecting to see in the GitHub heatmap?")
    print("Press 'y' to create the commits for your drawing or any other key to abort.")
    try:
        answer = prompt("> ")
    except EOFError:
        return False
    return answer.strip() == "y"


def draw(drawing, anchor: date, end, commit, confirm, out=print, prepare=None):
    """
    Validate, preview, confirm, then call commit(d) once per date in order.
    `prepare` runs after confirmation and before the first commit.
    Nothing touches the repository when validation fails or the user declines.
    Commit failures propagate; there are no retries.
    """
    error = validate(drawing, anchor, end)
    if error is not None:
        raise DrawingError(error)

    out(render_preview(drawing))
    if not confirm():
        raise Aborted("Aborted")

    if prepare is not None:
        prepare()
    dates = expand(drawing, anchor)
    log.info("creating %d commits from %s", len(dates), anchor)
    for d in dates:
        commit(d)
    return dates


# ---------- main logic ----------

def parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Bad date: {value} (expected YYYY-MM-DD)") from None


def build_parser():
    ap = argparse.ArgumentParser(description="Draw on your GitHub contribution calendar.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--file", help="Drawing file: 7 lines, hex digit per day ('.' = 0).")
    src.add_argument("--text", help="Word to render into the drawing.")
    src.add_argument("--sample", choices=sorted(SAMPLES), help="Built-in drawing.")
    src.add_argument("--random", action="store_true", help="Random commit counts.")
    ap.add_argument("--start", type=parse_date,
                    help="Sunday of the first column. Defaults to the calendar's first visible week.")
    ap.add_argument("--end", type=parse_date,
                    help="Saturday of the last column. Defaults to the end of the drawing.")
    ap.add_argument("--weeks", type=int, default=52, help="Width for --text and --random.")
    ap.add_argument("--intensity", type=int, default=4, help="Commits per lit pixel for --text.")
    ap.add_argument("--seed", type=int, default=None, help="Seed for --random.")
    ap.add_argument("--yes", action="store_true", help="Do not ask for confirmation.")
    ap.add_argument("--push", action="store_true", help="Push after committing.")
    ap.add_argument("--remote", default="origin", help="Git remote name to push to.")
    ap.add_argument("--branch", default=None,
                    help="Branch to commit on. Defaults to current HEAD.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return ap


def load_drawing(args):
    if args.file is not None:
        with open(args.file, encoding="utf-8") as f:
            return parse_drawing(f.read())
    if args.text is not None:
        return rasterize_text(args.text, args.weeks, args.intensity)
    if args.sample:
        return SAMPLES[args.sample]
    return random_drawing(args.weeks, seed=args.seed)


def main(argv=None, prompt=input) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        drawing = load_drawing(args)
    except (OSError, ValueError) as e:
        sys.stderr.write(f"Cannot load drawing: {e}\n")
        return EXIT_ERROR

    weeks = len(drawing[0]) if drawing else 0
    anchor = args.start or default_anchor(date.today(), max(weeks, 1))
    end = args.end or end_for(drawing, anchor)

    # Fail before touching the repository
    error = validate(drawing, anchor, end)
    if error is not None:
        sys.stderr.write(f"{error}\n")
        return EXIT_ERROR

    if os.environ.get("DRY_RUN") is not None:
        print(render_preview(drawing))
        print(f"[DRY-RUN] {anchor} .. {end}: {len(expand(drawing, anchor))} commits")
        return EXIT_OK

    def prepare():
        contrib_git.ensure_work_tree()
        if args.branch:
            contrib_git.checkout(args.branch)

    try:
        confirm = (lambda: True) if args.yes else (lambda: ask_confirmation(prompt))
        dates = draw(drawing, anchor, end, contrib_git.commit_on, confirm, prepare=prepare)
        if args.push:
            ref = args.branch or "HEAD"
            print(f"Pushing to '{args.remote}' {ref}")
            contrib_git.push(args.remote, ref)
    except Aborted:
        print("Aborted.")
        return EXIT_ABORTED
    except contrib_git.NotAWorkTree as e:
        sys.stderr.write(e.output)
        sys.stderr.write(f"{e.hint}\n")
        return EXIT_ERROR
    except contrib_git.GitCommandError as e:
        sys.stderr.write(e.output)
        sys.stderr.write(f"{e}\n")
        return EXIT_ERROR

    print(f"{len(dates)} commits created! Check them with `git log`.")
    if not args.push:
        print("Push them to GitHub when you are happy with the result.")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
