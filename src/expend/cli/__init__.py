"""
Command Line Interface Package

Command Structure:
- expend: Main entry point with utility commands (version, config)
- expend context: Manage named contexts (list, set, get)
- expend post: Post a per-diem claim or a payload file to Expensify
"""
