#!/usr/bin/env python3
"""
Demo: Generate Graphviz DOT diagrams from the hiring rule tree.

Shows both visualization modes (SIMPLE, OUTCOME).
"""

from ruletree.examples import build_good_for_interview, example_candidates
from ruletree.backends import generate_dot, save_dot_file, DotMode


def main():
    good_for_interview = build_good_for_interview()
    candidate = example_candidates()[1]

    print("=" * 80)
    print("DOT GENERATOR DEMO")
    print("=" * 80)

    print("\nSIMPLE MODE:")
    print("-" * 80)
    print(generate_dot(good_for_interview, mode=DotMode.SIMPLE))
    save_dot_file(good_for_interview, "rules_simple.dot", mode=DotMode.SIMPLE)
    print("\nSaved to: rules_simple.dot")

    print(f"\nOUTCOME MODE (candidate {candidate.name}):")
    print("-" * 80)
    print(generate_dot(good_for_interview, mode=DotMode.OUTCOME, candidate=candidate))
    save_dot_file(good_for_interview, "rules_outcome.dot", mode=DotMode.OUTCOME, candidate=candidate)
    print("\nSaved to: rules_outcome.dot")

    print("\n" + "=" * 80)
    print("To visualize the diagrams:")
    print("  dot -Tpng rules_simple.dot -o rules_simple.png")
    print("  dot -Tpng rules_outcome.dot -o rules_outcome.png")
    print("=" * 80)


if __name__ == "__main__":
    main()
