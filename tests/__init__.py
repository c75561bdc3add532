"""PATTERNS test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible flows through the `patterns demo` commands.
- e2e/          : Full CLI invocations exercising logging options.

General guidance
- Demo output is asserted through `capsys` (or CliRunner output), logs through `caplog`.
- Prefer small fakes implementing the pattern interfaces over mocks.
- Markers: unit, functional, e2e (added automatically per folder).
"""
