"""
Test Suite for Expend

Test Structure:
- fixtures/: Shared test data
- unit/: Unit tests mirroring the src/expend package structure
- integration/: CLI tests through click's CliRunner

All emails, projects and credentials are synthetic.
"""
