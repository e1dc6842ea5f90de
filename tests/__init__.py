"""Test suite for the courier command registry."""
