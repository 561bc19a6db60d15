"""Git gateway.

Architecture:
- abc: Git, the composite interface exposing sub-gateways
- real: RealGit, production implementation using subprocess
- fake: FakeGit, in-memory implementation for tests
- dry_run: DryRunGit, prints mutations instead of running them

Sub-gateways:
- repo_ops: repository detection
- tag_ops: tag listing, creation and pushing
- commit_ops: HEAD and recent history queries
"""
