"""
Test suite for texnative project.

This module contains all unit tests for the texnative package.
"""
