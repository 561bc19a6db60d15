"""Git tag operations sub-gateway.

This module provides a separate gateway for tag operations,
including listing local and remote tags, creating tags, and pushing tags.

Import from submodules:
- abc: GitTagOps
- real: RealGitTagOps
- fake: FakeGitTagOps
- dry_run: DryRunGitTagOps
- types: PushResult, PushError
"""
