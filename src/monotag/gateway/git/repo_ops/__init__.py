"""Git repository detection sub-gateway.

Import from submodules:
- abc: GitRepoOps
- real: RealGitRepoOps
- fake: FakeGitRepoOps
"""
