"""Pull request host gateway backed by the GitHub CLI.

Import from submodules:
- abc: PullRequestHost
- real: RealPullRequestHost
- fake: FakePullRequestHost
"""
