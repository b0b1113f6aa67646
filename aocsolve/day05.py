"""Check print-queue updates against page ordering rules."""

from collections import defaultdict
from functools import cmp_to_key, partial

Rules = dict[int, set[int]]


def _parse(inp: str) -> tuple[Rules, list[list[int]]]:
    rules: Rules = defaultdict(set)
    reports: list[list[int]] = []
    reading_rules = True
    for line in inp.splitlines():
        if not line:
            reading_rules = False
        elif reading_rules:
            before, after = line.split("|", 1)
            rules[int(before)].add(int(after))
        else:
            reports.append([int(page) for page in line.split(",")])
    return rules, reports


def _must_follow(rules: Rules, page: int, other: int) -> bool:
    """Whether a rule requires ``page`` to come after ``other``."""
    followers = rules.get(other)
    if followers is None:
        return False
    return page in followers


def _compare(rules: Rules, a: int, b: int) -> int:
    """Order pages by the rules; pages are never considered equal."""
    if _must_follow(rules, a, b):
        return 1
    return -1


def _in_order(report: list[int], rules: Rules) -> bool:
    return all(not _must_follow(rules, a, b) for a, b in zip(report, report[1:]))


def part1(inp: str) -> int:
    """Sum the middle pages of updates already in order."""
    rules, reports = _parse(inp)
    return sum(
        report[len(report) // 2] for report in reports if _in_order(report, rules)
    )


def part2(inp: str) -> int:
    """Sum the middle pages of out-of-order updates after reordering them."""
    rules, reports = _parse(inp)
    key = cmp_to_key(partial(_compare, rules))
    return sum(
        sorted(report, key=key)[len(report) // 2]
        for report in reports
        if not _in_order(report, rules)
    )