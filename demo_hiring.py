#!/usr/bin/env python3
"""
Demo: Screen example job candidates with a composed rule tree.

Prints the outcome per candidate, the remainder explaining a failure,
a YAML dump of the explanation and the analyzer report for the tree.
"""

import logging

from ruletree.examples import build_good_for_interview, example_candidates
from ruletree.analyzer import analyze_composite
from ruletree.serialization import explanation_to_yaml


def yes_or_no(b: bool) -> str:
    return "Yes" if b else "No"


def print_report(report):
    """Pretty-print a CompositeReport."""
    print()
    print("=" * 70)
    print("RULE TREE ANALYSIS")
    print("=" * 70)
    print(f"  Rule:              {report.text}")
    print(f"  Depth:             {report.depth}")
    print(f"  Nodes:             {report.node_count}")
    print(f"  Leaves:            {report.leaf_count}")
    print(f"  Distinct Rules:    {report.distinct_rules}")
    print(f"  Node Kinds:        {report.kind_counts}")
    if report.shared_rules:
        print("  Shared Rules:")
        for description, positions in report.shared_rules.items():
            print(f"    {description}: {positions} positions")
    print()

    if report.warnings:
        print("WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("NO WARNINGS")
    print()


def main():
    logging.basicConfig(level=logging.INFO)

    good_for_interview = build_good_for_interview()

    for label, candidate in zip("AB", example_candidates()):
        satisfied = good_for_interview.is_satisfied_by(candidate)
        print(f"Candidate {label} {candidate.name}, is good for interview: {yes_or_no(satisfied)}")
        if not satisfied:
            remainder = good_for_interview.remainder_unsatisfied_by(candidate)
            print(f"Candidate {label} is not good for interview because {remainder}")
            print()
            print(explanation_to_yaml(good_for_interview, candidate))

    print_report(analyze_composite(good_for_interview))


if __name__ == "__main__":
    main()
