"""courier test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : Features wired through a mediator, exercised end-to-end.

General guidance
- Keep tests fast and deterministic; prefer fakes over mocks at boundaries.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
