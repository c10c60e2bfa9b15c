#!/usr/bin/env python3
"""
Sign-up form validation example.

Demonstrates:
- Driving an accumulating validator with generated forms
- Passing runs on well-formed input
- A falsified run whose counterexample lists every broken rule
"""

from __future__ import annotations

import logging

from propcheck import TestRunConfig, check, for_all_validated, render
from propcheck.signup import any_signup_forms, valid_signup_forms, validate_signup


def main() -> None:
    """Run the sign-up form demo."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    config = TestRunConfig(num_tests=200, seed=7)

    print("\n=== Well-formed forms ===")
    check(for_all_validated(valid_signup_forms(), validate_signup), config, label="valid forms")

    print("\n=== Arbitrary forms ===")
    result = check(for_all_validated(any_signup_forms(), validate_signup), config)
    print(render(result, verbose=True))


if __name__ == "__main__":
    main()
