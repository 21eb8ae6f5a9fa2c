"""Unit tests.

Purpose
- Exercise one courier module at a time: responses, requests, the mediator,
  features, bootstrap, config and logging.

Guidelines
- Handlers are small local functions or classes defined in the test.
- File output is limited to `tmp_path` (flight-recorder tests).
- Async dispatch tests are `async def` tests marked with `pytest.mark.asyncio`.
- Restore global logging state after a test (see the `isolated_root_logger`
  fixture).
"""
