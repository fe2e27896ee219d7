"""Test package initialisation for gm2loops tests."""
