"""
Pytest configuration and fixtures for the solver tests.

The sample tree has a beta cutoff under node 4 and an alpha cutoff under
node 2, in that order:

    0 (MAX)
      1 (MIN)
        3 (MAX): 7=5, 8=6
        4 (MAX): 9=7, 10=4, 11=5
      2 (MIN)
        5 (MAX): 12=3, 13=4
        6 (MAX): 14=6, 15=9
"""

import logging
import random

import pytest

from abprune import logging_config
from abprune.records import RawRecord, iter_records
from abprune.tree import build

SAMPLE_TREE_TEXT = """\
0 -1 0
1 0 0
2 0 0
3 1 0
4 1 0
5 2 0
6 2 0
7 3 5
8 3 6
9 4 7
10 4 4
11 4 5
12 5 3
13 5 4
14 6 6
15 6 9
"""


def records_from_text(text: str) -> list[RawRecord]:
    """Parse tree file text into records."""
    return list(iter_records(text.splitlines()))


def random_records(rng: random.Random, max_depth: int = 4, max_children: int = 4) -> list[tuple[int, int, int]]:
    """Generate a random tree as ``(id, parent, value)`` triples in breadth-first order."""
    records = [(0, -1, 0)]
    frontier = [(0, 0)]
    next_id = 1
    while frontier:
        parent_id, depth = frontier.pop(0)
        if depth >= max_depth:
            continue
        for _ in range(rng.randint(0 if depth else 1, max_children)):
            records.append((next_id, parent_id, rng.randint(-20, 20)))
            frontier.append((next_id, depth + 1))
            next_id += 1
    return records


@pytest.fixture
def sample_records():
    return records_from_text(SAMPLE_TREE_TEXT)


@pytest.fixture
def sample_tree(sample_records):
    return build(sample_records)


@pytest.fixture
def tree_file(tmp_path):
    """Write the sample tree (with a header line) to a temporary file."""
    path = tmp_path / "tree.txt"
    path.write_text("结点ID 父结点ID 值\n" + SAMPLE_TREE_TEXT, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove the handler installed by the CLI so it never outlives a test's captured streams."""
    level = logging.root.level
    yield
    if logging_config._installed_handler is not None:
        logging.root.removeHandler(logging_config._installed_handler)
        logging_config._installed_handler = None
    logging.root.setLevel(level)
