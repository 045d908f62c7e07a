"""GitHub REST MCP Server.

An async GitHub REST API client plus a dispatch layer and tool catalog that
expose its operations to Model Context Protocol hosts.

Features:
- Repositories, issues, pull requests, comments, labels and milestones
- Contents, branches, commits, git references and tags
- Releases and release assets
- GitHub Actions workflows, runs, jobs, logs and artifacts
- Search, webhooks, collaborators, teams and security settings

Run with: python -m github_rest_mcp
"""

__version__ = "1.0.0"
