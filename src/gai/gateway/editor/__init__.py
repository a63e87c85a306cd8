"""Interactive editor gateway.

Import from submodules:
- abc: Editor
- real: RealEditor
- fake: FakeEditor
"""
