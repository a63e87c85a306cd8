"""Tool availability gateway.

Import from submodules:
- abc: Shell
- real: RealShell
- fake: FakeShell
"""
