"""Revoke - revert a merge commit and revive its branch via cherry-pick."""

__version__ = "0.1.0"
