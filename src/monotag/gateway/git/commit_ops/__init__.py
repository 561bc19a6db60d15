"""Git commit history sub-gateway.

Import from submodules:
- abc: GitCommitOps
- real: RealGitCommitOps
- fake: FakeGitCommitOps
- types: CommitRecord
"""
