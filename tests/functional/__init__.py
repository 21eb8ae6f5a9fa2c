"""Functional tests.

Purpose
- Wire features and handlers through `build_mediator` and assert what a caller
  of the mediator observes: responses, results and failure messages.
"""
