"""Algorithm drills, calendar and arithmetic puzzles, and a grader for exercise projects."""

__version__ = "0.1.0"