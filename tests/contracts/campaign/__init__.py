"""
Campaign Dashboard Contract Module

This module contains:
- data_contract.py: Models under test and the test data factory
"""
