"""Pagewiki - a minimal page editor backed by flat files."""
