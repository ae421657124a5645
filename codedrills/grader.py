"""Grades exercises listed in a JSON config and writes a JSON report."""

from __future__ import annotations

import json
import shutil
import subprocess
import sys
import time
from dataclasses import asdict, dataclass, field
from itertools import chain
from pathlib import Path
from typing import Any

_GREEN = "\x1b[32m"
_RED = "\x1b[31m"
_RESET = "\x1b[0m"


@dataclass
class Exercise:
    """One exercise to grade."""

    name: str
    path: str
    exercise_type: str
    score: int


@dataclass
class ExerciseConfig:
    """The exercises of each difficulty level."""

    easy: list[Exercise] = field(default_factory=list)
    normal: list[Exercise] = field(default_factory=list)
    hard: list[Exercise] = field(default_factory=list)


@dataclass
class ExerciseResult:
    """The outcome of grading one exercise."""

    name: str
    result: bool
    score: int


@dataclass
class Statistics:
    """Totals over a grading run."""

    total_exercises: int = 0
    total_successes: int = 0
    total_failures: int = 0
    total_score: int = 0
    total_time: int = 0


@dataclass
class Report:
    """All results of a grading run and their totals."""

    exercises: list[ExerciseResult] = field(default_factory=list)
    statistics: Statistics = field(default_factory=Statistics)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _parse_exercise(entry: Any) -> Exercise:
    if not isinstance(entry, dict):
        raise ValueError(f"exercise entry must be an object, got {entry!r}")
    try:
        name, path, kind, score = entry["name"], entry["path"], entry["type"], entry["score"]
    except KeyError as missing:
        raise ValueError(f"exercise entry is missing field {missing}") from None
    if not all(isinstance(value, str) for value in (name, path, kind)):
        raise ValueError(f"exercise fields name, path and type must be strings: {entry!r}")
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValueError(f"exercise score must be an integer: {entry!r}")
    return Exercise(name=name, path=path, exercise_type=kind, score=score)


def load_exercise_config(path: str | Path) -> ExerciseConfig:
    """Read the exercise config at ``path``; raise OSError or ValueError if it is bad."""
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError("config must be a JSON object")
    levels = {}
    for level in ("easy", "normal", "hard"):
        if level not in data:
            raise ValueError(f"config is missing field '{level}'")
        entries = data[level]
        if not isinstance(entries, list):
            raise ValueError(f"config field '{level}' must be a list")
        levels[level] = [_parse_exercise(entry) for entry in entries]
    return ExerciseConfig(**levels)


def evaluate_single_file(path: str | Path) -> bool:
    """Compile a single test file with ``rustc --test``, run it, and remove the binary."""
    path = Path(path)
    binary = path.with_suffix("")
    try:
        compiled = subprocess.run(
            ["rustc", "--test", str(path), "-o", str(binary)], capture_output=True
        )
    except OSError:
        print(f"Error executing rustc --test for {path}", file=sys.stderr)
        return False

    if compiled.returncode != 0:
        print(f"{_RED}{path}: COMPILATION FAILED{_RESET}", file=sys.stderr)
        return False

    try:
        run = subprocess.run([str(binary.absolute())], capture_output=True)
    except OSError:
        print(f"Error running test executable for {path}", file=sys.stderr)
        passed = False
    else:
        passed = run.returncode == 0
        if passed:
            print(f"{_GREEN}{path}: TEST PASSED{_RESET}")
        else:
            print(f"{_RED}{path}: TEST FAILED{_RESET}")

    try:
        binary.unlink()
    except OSError as error:
        print(f"Failed to remove test binary {binary}: {error}", file=sys.stderr)
    else:
        print(f"Successfully removed test binary: {binary}")
    return passed


def run_cargo_command(path: str | Path, command: str) -> bool:
    """Run ``cargo <command>`` in ``path``; True if it succeeded."""
    try:
        result = subprocess.run(["cargo", command], cwd=str(path), capture_output=True)
    except OSError:
        return False
    return result.returncode == 0


def clean_target_directory(path: str | Path) -> None:
    """Remove the ``target`` directory of the project at ``path`` if it exists."""
    target = Path(path) / "target"
    if not target.exists():
        return
    try:
        shutil.rmtree(target)
    except OSError as error:
        print(f"Failed to clean up target directory: {error}", file=sys.stderr)
    else:
        print(f"Successfully cleaned up target directory in: {path}")


def evaluate_cargo_project(path: str | Path) -> bool:
    """Build, test and lint a cargo project; it passes only if all three succeed."""
    build_ok = run_cargo_command(path, "build")
    test_ok = run_cargo_command(path, "test")
    clippy_ok = run_cargo_command(path, "clippy")
    passed = build_ok and test_ok and clippy_ok
    if passed:
        print(f"{_GREEN}{path}: PASSED{_RESET}")
    else:
        print(f"{_RED}{path}: FAILED{_RESET}")
    clean_target_directory(path)
    return passed


def evaluate_exercise(exercise: Exercise, root: str | Path = ".") -> bool:
    """Grade one exercise found under ``root/exercises``."""
    exercise_path = Path(root) / "exercises" / exercise.path
    if exercise.exercise_type == "single_file":
        return evaluate_single_file(exercise_path)
    if exercise.exercise_type == "cargo_project":
        return evaluate_cargo_project(exercise_path)
    print(f"Unknown exercise type: {exercise.exercise_type}", file=sys.stderr)
    return False


def ask_to_continue() -> bool:
    """Ask whether to go on; False only when the user answers 'q'."""
    print("\nPress any key to continue, or 'q' to quit.")
    try:
        answer = input()
    except EOFError:
        answer = ""
    return answer.strip().lower() != "q"


def evaluate_exercises(
    mode: str, config: ExerciseConfig, report: Report, root: str | Path = "."
) -> None:
    """Grade every exercise, easy to hard, recording results into ``report``.

    In ``watch`` mode the user is asked after each exercise whether to go on.
    """
    stats = report.statistics
    for exercise in chain(config.easy, config.normal, config.hard):
        print(f"\nEvaluating {exercise.exercise_type}: {exercise.name}")
        passed = evaluate_exercise(exercise, root)
        score = exercise.score if passed else 0
        report.exercises.append(ExerciseResult(name=exercise.name, result=passed, score=score))
        if passed:
            stats.total_successes += 1
        else:
            stats.total_failures += 1
        stats.total_score += score
        if mode == "watch" and not ask_to_continue():
            break


def save_report(path: str | Path, report: Report) -> None:
    """Write ``report`` as indented JSON to ``path``."""
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(report.to_dict(), handle, indent=2, ensure_ascii=False)


def main(argv: list[str] | None = None) -> int:
    """Grade the exercises of ``exercise_config.json`` and write ``report.json``."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Please provide a command: 'watch' or 'all'", file=sys.stderr)
        return 1

    mode = args[0]
    started = time.monotonic()
    try:
        config = load_exercise_config("exercise_config.json")
    except (OSError, ValueError) as error:
        print(f"Failed to load config file: {error}", file=sys.stderr)
        return 1

    report = Report()
    evaluate_exercises(mode, config, report)

    stats = report.statistics
    stats.total_time = int(time.monotonic() - started)
    stats.total_exercises = stats.total_successes + stats.total_failures

    print("\nSummary:")
    print(f"Total exercises: {stats.total_exercises}")
    print(f"Total successes: {stats.total_successes}")
    print(f"Total failures: {stats.total_failures}")
    print(f"Total score: {stats.total_score}")

    try:
        save_report("report.json", report)
    except OSError as error:
        print(f"Error saving report: {error}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())